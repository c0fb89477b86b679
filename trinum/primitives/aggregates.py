"""
Aggregate Math Primitives

Integer-only power, bit-array packing, and NaN-aware product / average /
quotient reductions over float sequences.
"""

import math
from typing import Iterable, Sequence, Union

import numpy as np

from trinum.primitives.triangular import IntWidth
from trinum.validation import (
    DomainError,
    RangeError,
    require_integer,
)


def power_of(base: int, power: int, width: Union[IntWidth, str] = IntWidth.INT64) -> int:
    """
    Raise base to a non-negative integer power using integer math only.

    Parameters
    ----------
    base : int
        Value to multiply
    power : int
        Number of times to multiply by (non-negative)
    width : IntWidth or str
        Width the result must fit in (default int64)

    Returns
    -------
    int
        base ** power

    Raises
    ------
    DomainError
        power is negative
    RangeError
        The result does not fit in ``width``
    """
    base = require_integer(base, 'base')
    power = require_integer(power, 'power')
    if power < 0:
        raise DomainError(
            "In order to maintain the integer math, power cannot be negative.",
            'power', power,
        )
    w = IntWidth.parse(width)
    info = np.iinfo(w.dtype)
    low, high = int(info.min), int(info.max)
    limit = max(-low, high)

    # Square and multiply. A squared base past the limit always overflows
    # the result once the remaining power is applied.
    result = 1
    while power:
        if power & 1:
            result *= base
            if not low <= result <= high:
                raise RangeError(f"Result exceeds {w.description}.", 'result', result)
        power >>= 1
        if power:
            base *= base
            if base > limit:
                raise RangeError(f"Result exceeds {w.description}.", 'base', base)
    return result


def as_integer(bits: Sequence[bool], width: Union[IntWidth, str] = IntWidth.INT32) -> int:
    """
    Pack booleans into an integer, bits[0] being the least significant bit.

    Signed widths read the top bit as the sign (two's complement), so 32
    True values give -1 for int32.

    Raises
    ------
    RangeError
        More bits than the width holds
    """
    w = IntWidth.parse(width)
    if len(bits) > w.bits:
        raise RangeError(f"Array cannot be greater than {w.bits} bits.", 'bits', len(bits))

    result = 0
    for i, bit in enumerate(bits):
        if bit:
            result |= 1 << i

    if w.signed and result > w.max_value:
        result -= 1 << w.bits
    return result


def product(values: Iterable[float], default: float = math.nan) -> float:
    """Multiply a set of numbers together; NaN if any is NaN, default if empty."""
    any_value = False
    result = 1.0
    for v in values:
        if math.isnan(v):
            return math.nan
        any_value = True
        result *= v
    return result if any_value else default


def average(values: Iterable[float], default: float = math.nan) -> float:
    """Arithmetic mean; NaN if any value is NaN, default if empty."""
    total = 0.0
    count = 0
    for v in values:
        if math.isnan(v):
            return math.nan
        total += v
        count += 1
    return total / count if count else default


def quotient(values: Iterable[float]) -> float:
    """
    Divide the first element by each of the following elements.

    Returns
    -------
    float
        0 if the first element is 0, NaN for empty input, any NaN element
        or any later zero divisor
    """
    result = math.nan
    for index, v in enumerate(values):
        if math.isnan(v):
            return math.nan
        if index == 0:
            if v == 0:
                return 0.0
            result = v
        else:
            if v == 0:
                return math.nan
            result /= v
    return result


def quotient_of(divisors: Iterable[float], numerator: float) -> float:
    """
    Divide numerator by each divisor in turn.

    A NaN, infinite or zero numerator is returned unchanged. NaN if there
    are no divisors, or any divisor is NaN or zero.
    """
    if math.isnan(numerator) or math.isinf(numerator) or numerator == 0:
        return numerator

    any_divisor = False
    result = numerator
    for d in divisors:
        if d == 0 or math.isnan(d):
            return math.nan
        result /= d
        any_divisor = True
    return result if any_divisor else math.nan
