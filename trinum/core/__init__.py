"""
trinum Core

Dispersed views built on the triangular primitives:
    disperse    lazy, sequential (any iterable)
    indexer     random access (sized, indexable sources)
"""

from .disperse import (
    Orientation,
    Dispersal,
    increasing,
    decreasing,
    descending,
    disperse,
)
from .indexer import (
    TriangularCounts,
    TriangularIndexer,
    IncreasingIndexer,
    DecreasingIndexer,
    DescendingIndexer,
    triangular_indexer,
)

__all__ = [
    'Orientation',
    'Dispersal',
    'increasing',
    'decreasing',
    'descending',
    'disperse',
    'TriangularCounts',
    'TriangularIndexer',
    'IncreasingIndexer',
    'DecreasingIndexer',
    'DescendingIndexer',
    'triangular_indexer',
]
