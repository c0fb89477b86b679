"""
Triangular Arithmetic Primitives

Forward and reverse triangular-number mappings over fixed integer widths.

    forward(n)    T(n) = n(n+1)/2, the number of items produced by
                  dispersing n source items
    reverse(k)    largest n with T(n) <= k
    coordinates   k -> (row, offset) with k = T(row) + offset, 0 <= offset <= row

Every width (signed/unsigned, 16/32/64 bit) has a precomputed MAX: the largest
n whose T(n) still fits in that width. forward() refuses anything larger.

Integer reverse uses math.isqrt and is exact. reverse_real() keeps the
floating point square root and is exact only up to float rounding.
"""

import math
from enum import Enum
from types import MappingProxyType
from typing import Optional, Tuple, Union

import numpy as np

from trinum.config import get_config
from trinum.validation import (
    DomainError,
    RangeError,
    require_integer,
    require_non_negative,
    require_finite_non_negative,
    require_at_most,
)


class IntWidth(Enum):
    """Fixed-width integer domains, backed by numpy dtypes."""

    INT16 = 'int16'
    UINT16 = 'uint16'
    INT32 = 'int32'
    UINT32 = 'uint32'
    INT64 = 'int64'
    UINT64 = 'uint64'

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(self.value)

    @property
    def bits(self) -> int:
        return self.dtype.itemsize * 8

    @property
    def signed(self) -> bool:
        return self.dtype.kind == 'i'

    @property
    def max_value(self) -> int:
        """Largest representable value of this width."""
        return int(np.iinfo(self.dtype).max)

    @property
    def max_input(self) -> int:
        """Largest n for which forward(n) fits in this width."""
        return _MAX_INPUT[self]

    @property
    def description(self) -> str:
        prefix = "a" if self.signed else "an unsigned"
        return f"{prefix} {self.bits} bit integer"

    @classmethod
    def parse(cls, width: Union['IntWidth', str, np.dtype, type]) -> 'IntWidth':
        """Accept an IntWidth, a name ('int32', 'UINT64') or a numpy dtype."""
        if isinstance(width, cls):
            return width
        if isinstance(width, str):
            try:
                return cls(width.lower())
            except ValueError:
                pass
        else:
            try:
                return cls(np.dtype(width).name)
            except (TypeError, ValueError):
                pass
        valid = ", ".join(w.value for w in cls)
        raise ValueError(f"Unknown integer width: {width!r}. Valid: {valid}")


def _resolve_width(width, section: str) -> IntWidth:
    if width is None:
        width = get_config()[section]['width']
    return IntWidth.parse(width)


def _triangle(n: int) -> int:
    return n * (n + 1) // 2


def _reverse(k: int) -> int:
    return (math.isqrt(8 * k + 1) - 1) // 2


# ─────────────────────────────────────────────────────────────────────
# Scalar mappings
# ─────────────────────────────────────────────────────────────────────

def forward(n: int, width: Optional[Union[IntWidth, str]] = None) -> int:
    """
    Total count of a triangular set bound by n.

    Parameters
    ----------
    n : int
        Number of source items (non-negative)
    width : IntWidth or str, optional
        Result width. Defaults to config ``triangular.width`` (uint64).

    Returns
    -------
    int
        T(n) = n(n+1)/2, exact

    Raises
    ------
    DomainError
        n is negative
    RangeError
        T(n) would exceed the maximum value of ``width``
    """
    n = require_non_negative(require_integer(n, 'n'), 'n')
    w = _resolve_width(width, 'triangular')
    require_at_most(
        n, w.max_input, 'n',
        f"Result will exceed maximum value for {w.description}.",
    )
    return _triangle(n)


def reverse(k: int, width: Optional[Union[IntWidth, str]] = None) -> int:
    """
    Source index for position k of a triangular set.

    Parameters
    ----------
    k : int or float
        Triangular position or count (non-negative). Floats are floored.
    width : IntWidth or str, optional
        When given, k must be representable in this width.

    Returns
    -------
    int
        Largest n with T(n) <= k

    Raises
    ------
    DomainError
        k is negative, NaN or infinite
    TypeError
        k is not a number

    Notes
    -----
    n = floor((sqrt(8k+1) - 1) / 2), evaluated with an integer square
    root so exact triangular boundaries never round the wrong way.
    """
    if isinstance(k, (float, np.floating)):
        k = math.floor(require_finite_non_negative(k, 'k'))
    k = require_non_negative(require_integer(k, 'k'), 'k')
    if width is not None:
        w = IntWidth.parse(width)
        require_at_most(k, w.max_value, 'k', f"Not representable as {w.description}.")
    return _reverse(k)


def reverse_real(x: float) -> float:
    """
    Real-valued source of a triangular position, without truncation.

    reverse_real(T(n)) == n up to float rounding; values between
    triangular numbers give fractional results.

    Raises
    ------
    DomainError
        x is NaN, infinite or negative
    """
    x = require_finite_non_negative(x, 'x')
    return (math.sqrt(8 * x + 1) - 1) / 2


def coordinates(k: int) -> Tuple[int, int]:
    """coordinates(k) -> (row, offset) such that k = T(row) + offset and 0 <= offset <= row."""
    row = reverse(k)
    return row, k - _triangle(row)


def index_of(row: int, offset: int) -> int:
    """index_of(row, offset) -> T(row) + offset, the inverse of coordinates()."""
    row = require_non_negative(require_integer(row, 'row'), 'row')
    offset = require_non_negative(require_integer(offset, 'offset'), 'offset')
    require_at_most(offset, row, 'offset', "Must not exceed row.")
    return _triangle(row) + offset


# Largest safe input per width, computed once at import.
_MAX_INPUT = MappingProxyType({w: _reverse(w.max_value) for w in IntWidth})

MAX_INT16 = _MAX_INPUT[IntWidth.INT16]
MAX_UINT16 = _MAX_INPUT[IntWidth.UINT16]
MAX_INT32 = _MAX_INPUT[IntWidth.INT32]
MAX_UINT32 = _MAX_INPUT[IntWidth.UINT32]
MAX_INT64 = _MAX_INPUT[IntWidth.INT64]
MAX_UINT64 = _MAX_INPUT[IntWidth.UINT64]


# ─────────────────────────────────────────────────────────────────────
# Vectorized mappings
# ─────────────────────────────────────────────────────────────────────

_ONE = np.uint64(1)
_TWO = np.uint64(2)


def _triangle_u64(n: np.ndarray) -> np.ndarray:
    # Halve the even factor first so n(n+1) never overflows.
    even = (n % _TWO) == 0
    return np.where(even, (n // _TWO) * (n + _ONE), n * ((n + _ONE) // _TWO))


def _as_index_array(values, argument: str) -> np.ndarray:
    arr = np.asarray(values)
    if arr.size == 0:
        return np.zeros(arr.shape, dtype=np.int64)
    if arr.dtype.kind not in 'iu':
        raise TypeError(f"{argument}: expected an integer array, got dtype {arr.dtype}")
    if arr.dtype.kind == 'i':
        low = int(arr.min())
        if low < 0:
            raise DomainError("Must be at least zero.", argument, low)
    return arr


def forward_array(n, width: Optional[Union[IntWidth, str]] = None) -> np.ndarray:
    """
    Vectorized forward().

    Parameters
    ----------
    n : array_like of int
        Non-negative source counts
    width : IntWidth or str, optional
        Result width. Defaults to config ``triangular.width``.

    Returns
    -------
    np.ndarray
        T(n) elementwise, with the dtype of ``width``
    """
    w = _resolve_width(width, 'triangular')
    arr = _as_index_array(n, 'n')
    if arr.size == 0:
        return arr.astype(w.dtype)

    high = int(arr.max())
    if high > w.max_input:
        raise RangeError(
            f"Result will exceed maximum value for {w.description}.", 'n', high
        )
    return _triangle_u64(arr.astype(np.uint64)).astype(w.dtype)


def reverse_array(k) -> np.ndarray:
    """
    Vectorized reverse().

    Parameters
    ----------
    k : array_like of int
        Non-negative triangular positions

    Returns
    -------
    np.ndarray
        int64 array, largest n with T(n) <= k elementwise

    Notes
    -----
    The float64 square root can land one off at exact triangular
    boundaries (and loses precision for large k), so the estimate is
    corrected by one step in each direction against T(n) in uint64.
    """
    arr = _as_index_array(k, 'k')
    if arr.size == 0:
        return arr

    ku = arr.astype(np.uint64)
    estimate = np.floor((np.sqrt(8.0 * ku.astype(np.float64) + 1.0) - 1.0) / 2.0)
    n = np.minimum(estimate.astype(np.uint64), np.uint64(MAX_UINT64))

    over = _triangle_u64(n) > ku
    n = np.where(over, n - _ONE, n)

    ceiling = np.uint64(MAX_UINT64)
    nxt = np.minimum(n + _ONE, ceiling)
    under = (n < ceiling) & (_triangle_u64(nxt) <= ku)
    n = np.where(under, nxt, n)

    return n.astype(np.int64)
