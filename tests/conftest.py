"""
Pytest configuration and fixtures for the test suite.

This module contains shared fixtures used across all tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import structlog

from disruptables.config import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _fresh_settings_and_logging() -> Iterator[None]:
    """Drop cached settings and structlog configuration between tests."""
    get_settings.cache_clear()
    structlog.reset_defaults()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


class Calls:
    """Callable that records every invocation and returns a fixed value."""

    def __init__(self, returns: object = None) -> None:
        self.returns = returns
        self.args: list[tuple[object, ...]] = []

    def __call__(self, *args: object) -> object:
        self.args.append(args)
        return self.returns

    @property
    def count(self) -> int:
        """Number of invocations so far."""
        return len(self.args)


@pytest.fixture()
def calls() -> type[Calls]:
    """Return the recording callable class."""
    return Calls
