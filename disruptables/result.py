"""
Try pattern for computations that may raise.

A Try is either a Success holding the value a computation produced or a
Failure holding the exception it raised. Combinators chain further
computations off a Try; any exception those raise is captured into a new
Failure instead of propagating to the caller.

Example:
    >>> quotient = from_supplier(lambda: float("10") / float("0"))
    >>> quotient.or_else(float("nan"))
    nan
    >>> from_supplier(lambda: int("21")).map(lambda x: x * 2).get()
    42
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Never

from pydantic import ValidationError

from disruptables.callables import require_callable, require_error_kind
from disruptables.config import get_settings
from disruptables.errors import PredicateNotSatisfiedError
from disruptables.logging import get_logger

if TYPE_CHECKING:
    from types import TracebackType

    from disruptables.callables import (
        Action,
        ErrorKind,
        ErrorMapper,
        Handler,
        Predicate,
        Supplier,
        Transform,
    )

logger = get_logger(__name__)


def _logging_enabled() -> bool:
    """Whether capture events are emitted; invalid settings count as disabled."""
    try:
        return get_settings().log_captured_errors
    except ValidationError:
        return False


def _disrupted[T](operation: str, error: Exception) -> Failure[T]:
    """Wrap an exception captured by ``operation`` into a Failure."""
    if _logging_enabled():
        logger.debug(
            "Computation disrupted",
            operation=operation,
            error_type=type(error).__name__,
            error=str(error),
        )
    return Failure(error)


@dataclass(frozen=True, slots=True)
class Success[T]:
    """
    A Try whose computation completed and produced a value.

    Attributes:
        value: The produced value. May be None.
    """

    value: T

    def get(self) -> T:
        """Return the held value."""
        return self.value

    def or_else(self, _other: T) -> T:
        """Return the held value, ignoring the alternative."""
        return self.value

    def or_else_get(self, supplier: Supplier[T]) -> Try[T]:
        """
        Return self; the fallback supplier is never invoked.

        Args:
            supplier: Fallback computation used only by Failure.

        Returns:
            Self unchanged.
        """
        require_callable(supplier, "supplier")
        return self

    def or_else_run(self, action: Action) -> Try[T]:
        """Return self; the fallback action is never invoked."""
        require_callable(action, "action")
        return self

    def or_else_throw(self, mapper: ErrorMapper[BaseException]) -> T:
        """Return the held value; ``mapper`` is never invoked."""
        require_callable(mapper, "mapper")
        return self.value

    def is_success(self) -> bool:
        """Return True if this is a Success."""
        return True

    def is_failure(self) -> bool:
        """Return False if this is a Success."""
        return False

    def if_success(self, handler: Handler[T]) -> None:
        """Pass the held value to ``handler``."""
        require_callable(handler, "handler")
        handler(self.value)

    def if_failed(self, handler: Handler[Exception]) -> None:
        """Do nothing; there is no error to handle."""
        require_callable(handler, "handler")

    def filter(self, predicate: Predicate[T]) -> Try[T]:
        """
        Keep the value only if ``predicate`` holds for it.

        Args:
            predicate: Test applied to the held value. May raise.

        Returns:
            Self if the predicate holds, a Failure holding
            PredicateNotSatisfiedError if it does not, or a Failure holding
            whatever the predicate raised.
        """
        require_callable(predicate, "predicate")
        try:
            holds = predicate(self.value)
        except Exception as e:
            return _disrupted("filter", e)
        if holds:
            return self
        return _disrupted("filter", PredicateNotSatisfiedError(self.value))

    def map[U](self, transform: Transform[T, U]) -> Try[U]:
        """
        Apply ``transform`` to the held value.

        Args:
            transform: Function applied to the value. May raise.

        Returns:
            Success with the transformed value, or Failure with the
            exception the transform raised.
        """
        require_callable(transform, "transform")
        try:
            return Success(transform(self.value))
        except Exception as e:
            return _disrupted("map", e)

    def flat_map[U](self, transform: Transform[T, Try[U]]) -> Try[U]:
        """
        Apply a Try-returning ``transform`` to the held value.

        The Try produced by the transform is returned as is, without
        another layer of wrapping.

        Args:
            transform: Function from the value to a new Try. May raise.

        Returns:
            The transform's Try, or Failure with the exception it raised.
        """
        require_callable(transform, "transform")
        try:
            return transform(self.value)
        except Exception as e:
            return _disrupted("flat_map", e)

    def capitulate(self, kind: ErrorKind) -> Try[T]:
        """Return self; a Success has no error to re-raise."""
        require_error_kind(kind)
        return self

    def recover(self, mapper: Transform[Exception, T]) -> Try[T]:
        """Return self; recovery applies only to Failure."""
        require_callable(mapper, "mapper")
        return self

    def recover_with(self, mapper: Transform[Exception, Try[T]]) -> Try[T]:
        """Return self; recovery applies only to Failure."""
        require_callable(mapper, "mapper")
        return self

    def to_optional(self) -> T | None:
        """Return the held value, which is None for an empty Success."""
        return self.value


@dataclass(frozen=True, slots=True)
class Failure[T]:
    """
    A Try whose computation raised.

    Attributes:
        error: The captured exception. Never None.
    """

    error: Exception
    _traceback: TracebackType | None = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        """Validate the captured error and remember its traceback."""
        if self.error is None:
            msg = "Failure requires an error"
            raise TypeError(msg)
        if not isinstance(self.error, Exception):
            msg = f"Failure error must be an Exception, got {type(self.error).__name__}"
            raise TypeError(msg)
        object.__setattr__(self, "_traceback", self.error.__traceback__)

    def _reraise(self) -> Never:
        # traceback is reset to its capture-time state on every raise
        raise self.error.with_traceback(self._traceback)

    def get(self) -> Never:
        """
        Re-raise the captured error.

        The error carries the traceback it had when captured; calling
        ``get`` repeatedly does not accumulate frames.

        Raises:
            Exception: The captured error, always.
        """
        self._reraise()

    def or_else(self, other: T) -> T:
        """Return the alternative value."""
        return other

    def or_else_get(self, supplier: Supplier[T]) -> Try[T]:
        """
        Try the fallback supplier.

        Args:
            supplier: Fallback computation. May raise.

        Returns:
            Success with the supplier's value, or a new Failure with what
            the supplier raised.
        """
        require_callable(supplier, "supplier")
        return from_supplier(supplier)

    def or_else_run(self, action: Action) -> Try[T]:
        """
        Try the fallback action.

        Returns:
            The shared empty Success, or a new Failure with what the
            action raised.
        """
        require_callable(action, "action")
        return from_action(action)

    def or_else_throw(self, mapper: ErrorMapper[BaseException]) -> Never:
        """
        Raise the exception built by ``mapper`` from the captured error.

        The new exception is chained to the captured one. An exception raised
        by ``mapper`` itself propagates unchanged.

        Args:
            mapper: Builds the exception to raise from the captured error.

        Raises:
            BaseException: Whatever ``mapper`` returns.
        """
        require_callable(mapper, "mapper")
        replacement = mapper(self.error)
        if replacement is self.error:
            raise replacement
        raise replacement from self.error

    def is_success(self) -> bool:
        """Return False if this is a Failure."""
        return False

    def is_failure(self) -> bool:
        """Return True if this is a Failure."""
        return True

    def if_success(self, handler: Handler[T]) -> None:
        """Do nothing; there is no value to handle."""
        require_callable(handler, "handler")

    def if_failed(self, handler: Handler[Exception]) -> None:
        """Pass the captured error to ``handler``."""
        require_callable(handler, "handler")
        handler(self.error)

    def filter(self, predicate: Predicate[T]) -> Try[T]:
        """Return self; the predicate is never invoked."""
        require_callable(predicate, "predicate")
        return self

    def map[U](self, transform: Transform[T, U]) -> Try[U]:
        """
        Carry the captured error forward; ``transform`` is never invoked.

        Returns:
            A new Failure holding the same error.
        """
        require_callable(transform, "transform")
        return Failure(self.error)

    def flat_map[U](self, transform: Transform[T, Try[U]]) -> Try[U]:
        """Return a new Failure holding the same error."""
        require_callable(transform, "transform")
        return Failure(self.error)

    def capitulate(self, kind: ErrorKind) -> Try[T]:
        """
        Re-raise the captured error if it is an instance of ``kind``.

        Lets selected error kinds escape the Try and propagate to an outer
        caller while everything else stays wrapped.

        Args:
            kind: Exception class, or tuple of classes, to let through.

        Returns:
            Self if the captured error does not match ``kind``.

        Raises:
            Exception: The captured error, when it matches ``kind``.
        """
        require_error_kind(kind)
        if isinstance(self.error, kind):
            if _logging_enabled():
                logger.debug("Capitulating", error_type=type(self.error).__name__)
            self._reraise()
        return self

    def recover(self, mapper: Transform[Exception, T]) -> Try[T]:
        """
        Derive a value from the captured error.

        Args:
            mapper: Function from the error to a replacement value. May raise.

        Returns:
            Success with the recovered value, or a Failure holding only the
            exception the mapper raised.
        """
        require_callable(mapper, "mapper")
        try:
            return Success(mapper(self.error))
        except Exception as e:
            return _disrupted("recover", e)

    def recover_with(self, mapper: Transform[Exception, Try[T]]) -> Try[T]:
        """
        Derive a whole new Try from the captured error.

        Returns:
            The mapper's Try, or a Failure holding the exception it raised.
        """
        require_callable(mapper, "mapper")
        try:
            return mapper(self.error)
        except Exception as e:
            return _disrupted("recover_with", e)

    def to_optional(self) -> T | None:
        """Return None."""
        return None


# Type alias for Try
type Try[T] = Success[T] | Failure[T]

# Shared result of every action that completes normally
EMPTY: Success[Any] = Success(None)


def from_supplier[T](supplier: Supplier[T]) -> Try[T]:
    """
    Run ``supplier`` once and capture its outcome.

    Args:
        supplier: Zero-argument computation. May raise.

    Returns:
        Success with the produced value, or Failure with the raised exception.
    """
    require_callable(supplier, "supplier")
    try:
        return Success(supplier())
    except Exception as e:
        return _disrupted("from_supplier", e)


def from_action[T](action: Action) -> Try[T]:
    """
    Run ``action`` once and capture whether it completed.

    Args:
        action: Zero-argument computation run for its side effects. May raise.

    Returns:
        The shared EMPTY success, or Failure with the raised exception.
    """
    require_callable(action, "action")
    try:
        action()
    except Exception as e:
        return _disrupted("from_action", e)
    return EMPTY


def success[T](value: T) -> Success[T]:
    """
    Create a Success result.

    Args:
        value: The success value.

    Returns:
        A Success containing the value.
    """
    return Success(value)


def failure[T](error: Exception) -> Failure[T]:
    """
    Create a Failure result.

    Args:
        error: The captured exception.

    Returns:
        A Failure containing the error.
    """
    return Failure(error)
