"""Exceptions produced by Try combinators themselves."""

from __future__ import annotations


class PredicateNotSatisfiedError(LookupError):
    """
    Stored in a Failure when ``Success.filter`` rejects the held value.

    Attributes:
        value: The value the predicate did not hold for.
    """

    def __init__(self, value: object) -> None:
        """
        Initialize the error.

        Args:
            value: The rejected value.
        """
        super().__init__(f"Predicate does not hold for {value}")
        self.value = value
