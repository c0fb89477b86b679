"""
Statistical Aggregate Primitives

Variance, covariance and Pearson correlation of plain numeric sequences.

Inputs may be lists, numpy arrays or one-shot iterators of floats. The
formulas are the single-pass sum / sum-of-squares forms with the division
rearranged to keep rounding error low:

    population variance  = Σx²/n - (Σx)²/n²
    sample variance      = Σx²/(n-1) - (Σx)²/(n(n-1))

NaN in, NaN out: these functions return NaN rather than raising for NaN
input, empty input and zero variance.
"""

from itertools import zip_longest
from typing import Iterable, Iterator, Union

import numpy as np

from trinum.validation import InsufficientDataError, ShapeMismatchError


ArrayLike = Union[np.ndarray, Iterable[float]]

_MISSING = object()


def _as_float_array(values: ArrayLike) -> np.ndarray:
    """Materialize a sequence or iterator as a 1D float64 array."""
    if values is None:
        raise TypeError("values cannot be None")
    if isinstance(values, np.ndarray) or hasattr(values, '__len__'):
        return np.asarray(values, dtype=np.float64).ravel()
    return np.fromiter(values, dtype=np.float64)


def variance(values: ArrayLike, sample: bool = False) -> float:
    """
    Compute the variance of a set of numbers.

    Parameters
    ----------
    values : array_like or iterable of float
        Input values
    sample : bool
        If True divide by (n-1) (sample variance), otherwise by n
        (population variance).

    Returns
    -------
    float
        Variance, or NaN for empty input, any NaN value, or a single
        value when sample=True
    """
    y = _as_float_array(values)
    n = len(y)

    if n == 0 or np.isnan(y).any():
        return np.nan

    total = float(np.sum(y))
    total2 = float(np.dot(y, y))

    if not sample:
        return total2 / n - total * total / (n * n)

    if n == 1:
        return np.nan

    n1 = n - 1
    return total2 / n1 - total * total / (n * n1)


def products(source: Iterable[float], target: Iterable[float]) -> Iterator[float]:
    """
    Yield the products of related entries of two sequences.

    Raises
    ------
    ShapeMismatchError
        The sequences have different lengths. Raised before iteration when
        both lengths are known, otherwise when the shorter one runs out.
    """
    if source is None or target is None:
        raise TypeError("source and target cannot be None")
    if hasattr(source, '__len__') and hasattr(target, '__len__'):
        if len(source) != len(target):
            raise ShapeMismatchError('products', len(source), len(target))
    return _products(source, target)


def _products(source: Iterable[float], target: Iterable[float]) -> Iterator[float]:
    for a, b in zip_longest(source, target, fillvalue=_MISSING):
        if a is _MISSING or b is _MISSING:
            raise ShapeMismatchError('products')
        yield a * b


def covariance(source: ArrayLike, target: ArrayLike, sample: bool = False) -> float:
    """
    Compute the covariance of two paired sequences.

    Parameters
    ----------
    source, target : array_like or iterable of float
        Paired values
    sample : bool
        If True divide by (n-1), otherwise by n.

    Returns
    -------
    float
        cov(a, b) = Σab/n - ΣaΣb/n²   (population)
                  = Σab/(n-1) - ΣaΣb/(n(n-1))   (sample)

    Raises
    ------
    ShapeMismatchError
        source and target have different lengths
    InsufficientDataError
        Fewer than 1 entry (2 when sample=True)
    """
    a = _as_float_array(source)
    b = _as_float_array(target)

    n = len(a)
    if len(b) != n:
        raise ShapeMismatchError('covariance', n, len(b))

    required = 2 if sample else 1
    if n < required:
        raise InsufficientDataError('covariance', required, n)

    prod = float(np.dot(a, b))
    sum_a = float(np.sum(a))
    sum_b = float(np.sum(b))

    if not sample:
        return prod / n - sum_a * sum_b / (n * n)

    n1 = n - 1
    return prod / n1 - sum_a * sum_b / (n * n1)


def correlation_from_variances(
    covariance_value: float,
    source_variance: float,
    target_variance: float,
) -> float:
    """
    Pearson correlation from a covariance and the two variances.

    Returns
    -------
    float
        cov / sqrt(var_a * var_b); NaN if either variance is NaN or zero
        or their product is negative; 0 if the covariance is 0.
    """
    if (np.isnan(source_variance) or np.isnan(target_variance)
            or source_variance == 0 or target_variance == 0):
        return np.nan

    if covariance_value == 0:
        return 0.0

    m = source_variance * target_variance
    if m < 0:
        return np.nan

    return float(covariance_value / np.sqrt(m))


def correlation_from_sequences(
    covariance_value: float,
    source: ArrayLike,
    target: ArrayLike,
) -> float:
    """Pearson correlation from a known covariance and the raw sequences (population variances)."""
    return correlation_from_variances(
        covariance_value, variance(source), variance(target)
    )


def correlation(source: ArrayLike, target: ArrayLike) -> float:
    """
    Compute the Pearson correlation coefficient of two paired sequences.

    Parameters
    ----------
    source, target : array_like or iterable of float
        Paired values. Iterators are consumed once.

    Returns
    -------
    float
        Correlation in [-1, 1], or NaN when either sequence is constant or
        contains NaN

    Notes
    -----
    Uses population covariance and population variances, so the n
    normalizations cancel.
    """
    a = _as_float_array(source)
    b = _as_float_array(target)
    return correlation_from_sequences(covariance(a, b), a, b)
