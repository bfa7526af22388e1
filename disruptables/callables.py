"""
Shapes of the fallible computations accepted by Try combinators.

Any of these may raise an ``Exception``; the combinators that invoke them
capture the exception into a ``Failure`` instead of letting it escape.
"""

from __future__ import annotations

from collections.abc import Callable

type Supplier[T] = Callable[[], T]
type Transform[T, R] = Callable[[T], R]
type Predicate[T] = Callable[[T], bool]
type Action = Callable[[], object]
type Handler[T] = Callable[[T], object]
type ErrorMapper[X] = Callable[[Exception], X]

type ErrorKind = type[BaseException] | tuple[type[BaseException], ...]


def require_callable(func: object, name: str) -> None:
    """
    Reject a non-callable argument.

    Args:
        func: The argument to check.
        name: Parameter name used in the error message.

    Raises:
        TypeError: If ``func`` is not callable.
    """
    if not callable(func):
        msg = f"{name} must be callable, got {type(func).__name__}"
        raise TypeError(msg)


def require_error_kind(kind: object) -> None:
    """
    Reject anything that cannot be used as the second argument of isinstance
    for exceptions.

    Raises:
        TypeError: If ``kind`` is not an exception class or a tuple of them.
    """
    kinds = kind if isinstance(kind, tuple) else (kind,)
    if not kinds or not all(
        isinstance(k, type) and issubclass(k, BaseException) for k in kinds
    ):
        msg = f"error kind must be an exception class or tuple of them, got {kind!r}"
        raise TypeError(msg)
