"""Tests for argument checks on fallible computations."""

from __future__ import annotations

import pytest

from disruptables.callables import require_callable, require_error_kind


class TestRequireCallable:
    """Tests for require_callable()."""

    @pytest.mark.parametrize("func", [len, lambda: None, object, print])
    def test_accepts_callables(self, func: object) -> None:
        """Functions, lambdas and classes should pass."""
        require_callable(func, "func")

    def test_rejects_non_callable(self) -> None:
        """A non-callable should raise TypeError naming the parameter."""
        with pytest.raises(TypeError, match="transform must be callable, got int"):
            require_callable(3, "transform")


class TestRequireErrorKind:
    """Tests for require_error_kind()."""

    @pytest.mark.parametrize(
        "kind",
        [ValueError, Exception, BaseException, KeyboardInterrupt, (OSError, KeyError)],
    )
    def test_accepts_exception_classes(self, kind: object) -> None:
        """Exception classes and tuples of them should pass."""
        require_error_kind(kind)

    @pytest.mark.parametrize("kind", [None, ValueError("x"), str, (), (ValueError, 1)])
    def test_rejects_everything_else(self, kind: object) -> None:
        """Instances, non-exception classes and empty tuples should be rejected."""
        with pytest.raises(TypeError, match="error kind"):
            require_error_kind(kind)
