"""Try: reify computations that may raise into Success or Failure values."""

from disruptables.errors import PredicateNotSatisfiedError
from disruptables.result import (
    EMPTY,
    Failure,
    Success,
    Try,
    failure,
    from_action,
    from_supplier,
    success,
)

__all__ = [
    "EMPTY",
    "Failure",
    "PredicateNotSatisfiedError",
    "Success",
    "Try",
    "failure",
    "from_action",
    "from_supplier",
    "success",
]
