"""
Argument guards for integer coercion, sign, finiteness and upper bounds.

Centralizes the fail-fast checks so primitives can assume clean input.
"""

import math
import operator
from typing import Any

from .errors import DomainError, RangeError


def require_integer(value: Any, argument: str = "n") -> int:
    """Coerce an integral value (int, numpy integer) to int.

    Args:
        value: candidate integer
        argument: name for error messages

    Returns:
        value as a plain int

    Raises:
        TypeError: if value is not integral (floats, strings, bools)
    """
    if isinstance(value, bool):
        raise TypeError(f"{argument}: expected an integer, got bool")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"{argument}: expected an integer, got {type(value).__name__}"
        ) from None


def require_non_negative(value: int, argument: str = "n") -> int:
    """Raise DomainError if value < 0."""
    if value < 0:
        raise DomainError("Must be at least zero.", argument, value)
    return value


def require_finite_non_negative(value: float, argument: str = "x") -> float:
    """Reject NaN, infinities and negatives, in that order."""
    value = float(value)
    if math.isnan(value):
        raise DomainError("Cannot be NaN.", argument, value)
    if math.isinf(value):
        raise DomainError("Must be finite.", argument, value)
    if value < 0:
        raise DomainError("Must be at least zero.", argument, value)
    return value


def require_at_most(value: int, maximum: int, argument: str = "n",
                    reason: str = "Exceeds maximum.") -> int:
    """Raise RangeError if value > maximum."""
    if value > maximum:
        raise RangeError(reason, argument, value)
    return value
