"""
trinum Primitives Library

Atomic numeric functions organized by concern:

Triangular: forward/reverse triangular-number mappings
- triangular: IntWidth, forward, reverse, reverse_real, coordinates, index_of,
  forward_array, reverse_array, MAX_INT16 ... MAX_UINT64

Statistics: paired and single-sequence aggregates
- statistics: variance, products, covariance, correlation,
  correlation_from_variances, correlation_from_sequences
- running: RunningStats, RunningCovariance (streaming, single pass)

Aggregates: integer power, bit packing, NaN-aware reductions
- aggregates: power_of, as_integer, product, average, quotient, quotient_of

Arithmetic: operations bound to one numeric type
- arithmetic: Arithmetic, INTEGER, REAL
"""

# Triangular
from .triangular import (
    IntWidth,
    forward, reverse, reverse_real,
    coordinates, index_of,
    forward_array, reverse_array,
    MAX_INT16, MAX_UINT16, MAX_INT32, MAX_UINT32, MAX_INT64, MAX_UINT64,
)

# Statistics
from .statistics import (
    variance, products, covariance, correlation,
    correlation_from_variances, correlation_from_sequences,
)
from .running import RunningStats, RunningCovariance

# Aggregates
from .aggregates import (
    power_of, as_integer, product, average, quotient, quotient_of,
)

# Arithmetic
from .arithmetic import Arithmetic, INTEGER, REAL

__all__ = [
    # Triangular
    'IntWidth',
    'forward', 'reverse', 'reverse_real',
    'coordinates', 'index_of',
    'forward_array', 'reverse_array',
    'MAX_INT16', 'MAX_UINT16', 'MAX_INT32', 'MAX_UINT32', 'MAX_INT64', 'MAX_UINT64',
    # Statistics
    'variance', 'products', 'covariance', 'correlation',
    'correlation_from_variances', 'correlation_from_sequences',
    'RunningStats', 'RunningCovariance',
    # Aggregates
    'power_of', 'as_integer', 'product', 'average', 'quotient', 'quotient_of',
    # Arithmetic
    'Arithmetic', 'INTEGER', 'REAL',
]
