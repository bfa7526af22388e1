"""Tests for from_supplier and from_action."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from disruptables.result import EMPTY, Failure, Success, from_action, from_supplier

if TYPE_CHECKING:
    from tests.conftest import Calls


def _raise(error: Exception) -> None:
    raise error


class TestFromSupplier:
    """Tests for from_supplier()."""

    @pytest.mark.parametrize("value", [0, "", "text", [1, 2], None, 3.5])
    def test_returned_value_becomes_success(self, value: object) -> None:
        """A supplier that returns yields a Success holding its value."""
        assert from_supplier(lambda: value) == Success(value)

    def test_raised_error_becomes_failure(self) -> None:
        """A supplier that raises yields a Failure holding that error."""
        error = ValueError("bad input")

        result = from_supplier(lambda: _raise(error))

        assert result == Failure(error)
        assert result.error is error

    def test_supplier_invoked_exactly_once(self, calls: type[Calls]) -> None:
        """The supplier runs once, eagerly."""
        supplier = calls(returns=7)

        result = from_supplier(supplier)

        assert supplier.count == 1
        assert result.get() == 7

    def test_base_exceptions_are_not_captured(self) -> None:
        """KeyboardInterrupt is not an Exception and propagates."""
        with pytest.raises(KeyboardInterrupt):
            from_supplier(lambda: _raise(KeyboardInterrupt()))  # type: ignore[arg-type]

    def test_rejects_non_callable(self) -> None:
        """A non-callable supplier is a programming error."""
        with pytest.raises(TypeError, match="supplier must be callable"):
            from_supplier(42)  # type: ignore[arg-type]


class TestFromAction:
    """Tests for from_action()."""

    def test_completed_action_yields_shared_empty(self, calls: type[Calls]) -> None:
        """A completed action yields the shared EMPTY success."""
        action = calls()

        result = from_action(action)

        assert result is EMPTY
        assert action.count == 1

    def test_return_value_is_discarded(self) -> None:
        """Whatever the action returns, the result is EMPTY."""
        assert from_action(lambda: "ignored") is EMPTY

    def test_raised_error_becomes_failure(self) -> None:
        """An action that raises yields a Failure holding that error."""
        error = OSError("disk full")

        result = from_action(lambda: _raise(error))

        assert isinstance(result, Failure)
        assert result.error is error

    def test_rejects_non_callable(self) -> None:
        """A non-callable action is a programming error."""
        with pytest.raises(TypeError, match="action must be callable"):
            from_action(None)  # type: ignore[arg-type]
