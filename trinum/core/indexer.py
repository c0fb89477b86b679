"""
Triangular Indexer.

Random-access dispersed view over a sized, indexable source. Where a
Dispersal has to enumerate, an indexer maps a dispersed position straight
to its source position in O(1):

    source = ['A', 'B', 'C']                  T(3) = 6 positions
    IncreasingIndexer(source)  ->  A B B C C C
    DecreasingIndexer(source)  ->  A A B A B C
    DescendingIndexer(source)  ->  A A A B B C

The indexer never copies the source. Its length follows the live source:
the (source count, triangular count) pair is memoised and recomputed
whenever len(source) differs from the memoised source count.

Thread safety: none is provided. Sharing an indexer across threads needs
external locking, and mutating the source while another thread reads the
indexer is undefined.
"""

import logging
from abc import abstractmethod
from collections.abc import Sequence
from typing import Any, List, NamedTuple, Optional, Union

import numpy as np

from trinum.config import get_config
from trinum.core.disperse import Dispersal, Orientation
from trinum.primitives.triangular import (
    IntWidth,
    forward,
    forward_array,
    reverse,
    reverse_array,
    coordinates,
)
from trinum.validation import (
    IndexOutOfRangeError,
    SourceTooLargeError,
    require_integer,
)

logger = logging.getLogger(__name__)


class TriangularCounts(NamedTuple):
    """Memoised source size and the triangular count derived from it."""
    source: int
    triangular: int


class TriangularIndexer(Sequence):
    """
    Base class for triangular views.

    Subclasses must:
    1. Set the orientation class attribute
    2. Implement _source_index() (scalar mapping)
    3. Implement _source_indices() (vectorized mapping)

    Args:
        source: Object with __len__ and __getitem__ (list, tuple, numpy
                array, ...). Held by reference.
        width: Integer width bounding the source size. Defaults to config
               ``indexer.width`` (int32).

    Raises:
        TypeError: source is not sized and indexable
        SourceTooLargeError: len(source) exceeds width.max_input
    """

    orientation: Orientation

    def __init__(self, source: Any, width: Optional[Union[IntWidth, str]] = None):
        if source is None:
            raise TypeError("source cannot be None")
        if not (hasattr(source, '__len__') and hasattr(source, '__getitem__')):
            raise TypeError(
                f"source must be sized and indexable, got {type(source).__name__}"
            )
        if width is None:
            width = get_config()['indexer']['width']

        self.source = source
        self.width = IntWidth.parse(width)
        self._counts: Optional[TriangularCounts] = None

        count = len(source)
        if count > self.width.max_input:
            raise SourceTooLargeError(count, self.width.max_input)

    # ─── counts ──────────────────────────────────────────────────────

    def _observed_count(self) -> int:
        count = len(self.source)
        if count > self.width.max_input:
            raise SourceTooLargeError(count, self.width.max_input, grown=True)
        return count

    def counts(self) -> TriangularCounts:
        """Current (source, triangular) counts, recomputed if the source was resized."""
        count = self._observed_count()
        cached = self._counts
        if cached is None or cached.source != count:
            cached = TriangularCounts(count, forward(count, self.width))
            if self._counts is not None:
                logger.debug(
                    "Source resized %d -> %d, triangular count now %d",
                    self._counts.source, count, cached.triangular,
                )
            self._counts = cached
        return cached

    @property
    def triangular_count(self) -> int:
        return self.counts().triangular

    def __len__(self) -> int:
        return self.counts().triangular

    # ─── random access ───────────────────────────────────────────────

    @abstractmethod
    def _source_index(self, index: int, counts: TriangularCounts) -> int:
        """Map an in-range dispersed index to a source index."""

    @abstractmethod
    def _source_indices(self, indices: np.ndarray, counts: TriangularCounts) -> np.ndarray:
        """Vectorized _source_index() over in-range uint64 indices."""

    def _checked(self, index: Any, counts: TriangularCounts) -> int:
        index = require_integer(index, 'index')
        if not 0 <= index < counts.triangular:
            raise IndexOutOfRangeError(index, counts.triangular)
        return index

    def source_index(self, index: int) -> int:
        """Source position of dispersed position index."""
        counts = self.counts()
        return self._source_index(self._checked(index, counts), counts)

    def __getitem__(self, index):
        counts = self.counts()
        if isinstance(index, slice):
            positions = range(*index.indices(counts.triangular))
            return [self.source[self._source_index(i, counts)] for i in positions]
        return self.source[self._source_index(self._checked(index, counts), counts)]

    def source_indices(self, indices) -> np.ndarray:
        """
        Vectorized source_index().

        Args:
            indices: Integer array_like of dispersed positions

        Returns:
            int64 array of source positions, same shape as indices

        Raises:
            IndexOutOfRangeError: any index outside [0, len(self))
        """
        counts = self.counts()
        arr = np.asarray(indices)
        if arr.size == 0:
            return np.zeros(arr.shape, dtype=np.int64)
        if arr.dtype.kind not in 'iu':
            raise TypeError(f"indices: expected an integer array, got dtype {arr.dtype}")

        if arr.dtype.kind == 'i':
            negative = arr < 0
            if negative.any():
                raise IndexOutOfRangeError(int(arr[negative].flat[0]), counts.triangular)

        # Triangular counts of a uint64 width can pass the int64 maximum
        arr = arr.astype(np.uint64)
        past_end = arr >= np.uint64(counts.triangular)
        if past_end.any():
            raise IndexOutOfRangeError(int(arr[past_end].flat[0]), counts.triangular)

        return self._source_indices(arr, counts)

    def take(self, indices) -> Union[np.ndarray, List[Any]]:
        """
        Elements at many dispersed positions at once.

        Returns:
            source[...] fancy-indexed for numpy sources, a list otherwise
        """
        positions = self.source_indices(indices)
        if isinstance(self.source, np.ndarray):
            return self.source[positions]
        return [self.source[i] for i in positions.ravel().tolist()]

    # ─── enumeration ─────────────────────────────────────────────────

    def __iter__(self):
        self._observed_count()
        return iter(Dispersal(self.source, self.orientation))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(source={type(self.source).__name__}, "
            f"width={self.width.value})"
        )


class IncreasingIndexer(TriangularIndexer):
    """Source item i occupies i+1 consecutive positions."""

    orientation = Orientation.INCREASING

    def _source_index(self, index: int, counts: TriangularCounts) -> int:
        return reverse(index)

    def _source_indices(self, indices: np.ndarray, counts: TriangularCounts) -> np.ndarray:
        return reverse_array(indices)


class DecreasingIndexer(TriangularIndexer):
    """Positions replay the growing prefix: row r holds source items 0..r."""

    orientation = Orientation.DECREASING

    def _source_index(self, index: int, counts: TriangularCounts) -> int:
        _, offset = coordinates(index)
        return offset

    def _source_indices(self, indices: np.ndarray, counts: TriangularCounts) -> np.ndarray:
        rows = reverse_array(indices)
        return (indices - forward_array(rows, IntWidth.UINT64)).astype(np.int64)


class DescendingIndexer(TriangularIndexer):
    """Source item i occupies len-i consecutive positions."""

    orientation = Orientation.DESCENDING

    def _source_index(self, index: int, counts: TriangularCounts) -> int:
        return counts.source - 1 - reverse(counts.triangular - 1 - index)

    def _source_indices(self, indices: np.ndarray, counts: TriangularCounts) -> np.ndarray:
        mirrored = reverse_array(np.uint64(counts.triangular - 1) - indices)
        return counts.source - 1 - mirrored


INDEXERS = {
    Orientation.INCREASING: IncreasingIndexer,
    Orientation.DECREASING: DecreasingIndexer,
    Orientation.DESCENDING: DescendingIndexer,
}


def triangular_indexer(
    source: Any,
    orientation: Union[Orientation, str] = Orientation.INCREASING,
    width: Optional[Union[IntWidth, str]] = None,
) -> TriangularIndexer:
    """
    Build the indexer for an orientation.

    Args:
        source: Sized, indexable collection (not copied)
        orientation: Orientation or its name ('increasing', ...)
        width: Integer width bounding the source size

    Returns:
        IncreasingIndexer, DecreasingIndexer or DescendingIndexer
    """
    return INDEXERS[Orientation(orientation)](source, width)
