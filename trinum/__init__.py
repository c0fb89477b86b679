"""
trinum: triangular indexing and numeric aggregates.

Public API:
    from trinum import forward, reverse, triangular_indexer
    view = triangular_indexer(['A', 'B', 'C'])     # A B B C C C
    view[4]                                        # 'C'

Layers:
    trinum.primitives   Math: triangular mappings, statistics, aggregates
    trinum.core         Views: lazy dispersal, random-access indexers

Also:
    trinum.validation   Typed errors and argument guards
    trinum.config       Defaults, trinum.yaml loading, logging setup
"""

import logging

from trinum.primitives import (
    IntWidth,
    forward, reverse, reverse_real, coordinates,
    MAX_INT16, MAX_UINT16, MAX_INT32, MAX_UINT32, MAX_INT64, MAX_UINT64,
    variance, covariance, correlation,
)
from trinum.core import (
    Orientation,
    increasing, decreasing, descending, disperse,
    IncreasingIndexer, DecreasingIndexer, DescendingIndexer,
    triangular_indexer,
)
from trinum.validation import (
    TrinumError,
    DomainError,
    RangeError,
    SourceTooLargeError,
    IndexOutOfRangeError,
    ShapeMismatchError,
    InsufficientDataError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    'IntWidth',
    'forward', 'reverse', 'reverse_real', 'coordinates',
    'MAX_INT16', 'MAX_UINT16', 'MAX_INT32', 'MAX_UINT32', 'MAX_INT64', 'MAX_UINT64',
    'variance', 'covariance', 'correlation',
    'Orientation',
    'increasing', 'decreasing', 'descending', 'disperse',
    'IncreasingIndexer', 'DecreasingIndexer', 'DescendingIndexer',
    'triangular_indexer',
    'TrinumError', 'DomainError', 'RangeError', 'SourceTooLargeError',
    'IndexOutOfRangeError', 'ShapeMismatchError', 'InsufficientDataError',
]
