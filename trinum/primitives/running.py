"""
Streaming statistics (Welford).

Single-pass accumulators for unbounded streams, where the sequence
functions in statistics.py would need the whole input in memory.
Results follow the same NaN conventions as statistics.py.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Tuple

from trinum.validation import InsufficientDataError


@dataclass
class RunningStats:
    """Running count, mean and variance of a stream of floats."""

    count: int = 0
    mean: float = 0.0
    m2: float = 0.0
    saw_nan: bool = False

    def push(self, x: float) -> None:
        x = float(x)
        if math.isnan(x):
            self.saw_nan = True
            return
        self.count += 1
        delta = x - self.mean
        self.mean += delta / self.count
        self.m2 += delta * (x - self.mean)

    def extend(self, values: Iterable[float]) -> 'RunningStats':
        for x in values:
            self.push(x)
        return self

    def variance(self, sample: bool = False) -> float:
        """Population (or sample) variance of everything pushed so far."""
        if self.saw_nan or self.count == 0:
            return math.nan
        if not sample:
            return self.m2 / self.count
        if self.count == 1:
            return math.nan
        return self.m2 / (self.count - 1)

    def std(self, sample: bool = False) -> float:
        return math.sqrt(max(0.0, self.variance(sample)))


@dataclass
class RunningCovariance:
    """Running co-moment of a stream of (a, b) pairs."""

    count: int = 0
    mean_a: float = 0.0
    mean_b: float = 0.0
    c2: float = 0.0
    m2_a: float = 0.0
    m2_b: float = 0.0

    def push(self, a: float, b: float) -> None:
        a, b = float(a), float(b)
        self.count += 1
        delta_a = a - self.mean_a
        self.mean_a += delta_a / self.count
        delta_b = b - self.mean_b
        self.mean_b += delta_b / self.count
        self.c2 += delta_a * (b - self.mean_b)
        self.m2_a += delta_a * (a - self.mean_a)
        self.m2_b += delta_b * (b - self.mean_b)

    def extend(self, pairs: Iterable[Tuple[float, float]]) -> 'RunningCovariance':
        for a, b in pairs:
            self.push(a, b)
        return self

    def covariance(self, sample: bool = False) -> float:
        """
        Covariance of the pairs pushed so far.

        Raises:
            InsufficientDataError: fewer than 1 pair (2 when sample=True)
        """
        required = 2 if sample else 1
        if self.count < required:
            raise InsufficientDataError('covariance', required, self.count)
        return self.c2 / (self.count - 1 if sample else self.count)

    def correlation(self) -> float:
        """Pearson correlation; NaN when either side is constant."""
        if self.count == 0 or self.m2_a == 0 or self.m2_b == 0:
            return math.nan
        if self.c2 == 0:
            return 0.0
        return self.c2 / math.sqrt(self.m2_a * self.m2_b)
