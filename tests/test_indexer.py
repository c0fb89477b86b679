"""
Tests for the random-access Triangular Indexer.

Validates:
    1. Index mapping for each orientation on a known source
    2. Random access agrees with sequential dispersal
    3. Count memo follows a growing / shrinking source
    4. Size limits at construction and after growth
    5. Vectorized mapping agrees with scalar mapping
"""

import logging

import numpy as np
import pytest

from trinum.core.disperse import Orientation, increasing, decreasing, descending
from trinum.core.indexer import (
    TriangularCounts,
    IncreasingIndexer,
    DecreasingIndexer,
    DescendingIndexer,
    triangular_indexer,
)
from trinum.primitives.triangular import IntWidth, MAX_INT16, MAX_INT32
from trinum.validation import IndexOutOfRangeError, SourceTooLargeError


ABC = ['A', 'B', 'C']

INDEXER_CLASSES = [IncreasingIndexer, DecreasingIndexer, DescendingIndexer]


class TestIncreasingIndexer:
    """Source item i spans i+1 positions."""

    def test_mapping(self):
        view = IncreasingIndexer(ABC)
        assert [view[i] for i in range(6)] == ['A', 'B', 'B', 'C', 'C', 'C']

    def test_count(self):
        view = IncreasingIndexer(ABC)
        assert len(view) == 6
        assert view.triangular_count == 6
        assert view.counts() == TriangularCounts(3, 6)

    def test_past_end(self):
        view = IncreasingIndexer(ABC)
        with pytest.raises(IndexOutOfRangeError):
            view[6]

    def test_out_of_range_is_index_error(self):
        view = IncreasingIndexer(ABC)
        with pytest.raises(IndexError):
            view[100]

    def test_negative_index_rejected(self):
        view = IncreasingIndexer(ABC)
        with pytest.raises(IndexOutOfRangeError):
            view[-1]

    def test_iteration(self):
        assert list(IncreasingIndexer(ABC)) == list(increasing(ABC))


class TestDecreasingIndexer:
    """Positions replay the growing prefix."""

    def test_mapping(self):
        view = DecreasingIndexer(ABC)
        assert [view[i] for i in range(6)] == ['A', 'A', 'B', 'A', 'B', 'C']

    def test_count(self):
        assert len(DecreasingIndexer(ABC)) == 6

    def test_past_end(self):
        with pytest.raises(IndexOutOfRangeError):
            DecreasingIndexer(ABC)[6]

    def test_iteration(self):
        assert list(DecreasingIndexer(ABC)) == list(decreasing(ABC))


class TestDescendingIndexer:
    """Source item i spans len-i positions."""

    def test_mapping(self):
        view = DescendingIndexer(ABC)
        assert [view[i] for i in range(6)] == ['A', 'A', 'A', 'B', 'B', 'C']

    def test_iteration(self):
        assert list(DescendingIndexer(ABC)) == list(descending(ABC))


class TestRandomAccessMatchesIteration:
    """view[i] for every i reproduces the lazy dispersal."""

    @pytest.mark.parametrize("cls", INDEXER_CLASSES)
    def test_all_sizes(self, cls):
        for m in range(31):
            source = list(range(m))
            view = cls(source)
            assert [view[i] for i in range(len(view))] == list(view)

    @pytest.mark.parametrize("cls", INDEXER_CLASSES)
    def test_source_index_in_range(self, cls):
        view = cls(list(range(40)))
        for i in range(len(view)):
            assert 0 <= view.source_index(i) < 40


class TestCountMemo:
    """Count tracks the live source size."""

    def test_growing_source(self):
        source = list(ABC)
        view = IncreasingIndexer(source)
        assert len(view) == 6

        source.append('D')
        assert len(view) == 10
        assert view[9] == 'D'
        assert view.counts() == TriangularCounts(4, 10)

    def test_shrinking_source(self):
        source = ['A', 'B', 'C', 'D']
        view = DecreasingIndexer(source)
        assert len(view) == 10

        source.pop()
        assert len(view) == 6
        with pytest.raises(IndexOutOfRangeError):
            view[6]

    def test_descending_follows_growth(self):
        source = ['A', 'B']
        view = DescendingIndexer(source)
        assert list(view) == ['A', 'A', 'B']

        source.append('C')
        assert [view[i] for i in range(len(view))] == ['A', 'A', 'A', 'B', 'B', 'C']

    def test_resize_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger='trinum.core.indexer')
        source = list(ABC)
        view = IncreasingIndexer(source)
        len(view)

        source.append('D')
        len(view)

        assert "Source resized 3 -> 4" in caplog.text

    def test_memo_reused_when_unchanged(self):
        view = IncreasingIndexer(ABC)
        first = view.counts()
        assert view.counts() is first


class TestSizeLimits:
    """Construction and growth beyond width.max_input."""

    def test_construction_too_large(self):
        with pytest.raises(SourceTooLargeError):
            IncreasingIndexer(range(MAX_INT16 + 1), width='int16')

    def test_default_width_is_int32(self):
        view = IncreasingIndexer(range(MAX_INT32))
        assert view.width is IntWidth.INT32
        with pytest.raises(SourceTooLargeError):
            IncreasingIndexer(range(MAX_INT32 + 1))

    def test_wider_width_accepts_more(self):
        view = IncreasingIndexer(range(MAX_INT32 + 1), width=IntWidth.INT64)
        assert len(view) == (MAX_INT32 + 1) * (MAX_INT32 + 2) // 2

    def test_grown_too_large(self):
        source = list(range(MAX_INT16))
        view = IncreasingIndexer(source, width='int16')
        assert len(view) == 32640

        source.append(0)
        with pytest.raises(SourceTooLargeError, match="grown"):
            len(view)
        with pytest.raises(SourceTooLargeError):
            view[0]

    def test_too_large_is_overflow_error(self):
        with pytest.raises(OverflowError):
            DecreasingIndexer(range(MAX_INT16 + 1), width='int16')


class TestSources:
    """Accepted source types."""

    def test_tuple(self):
        assert list(IncreasingIndexer(('x', 'y'))) == ['x', 'y', 'y']

    def test_numpy_array(self):
        view = IncreasingIndexer(np.array([10, 20, 30]))
        assert view[3] == 30
        assert len(view) == 6

    def test_not_copied(self):
        source = list(ABC)
        assert IncreasingIndexer(source).source is source

    @pytest.mark.parametrize("bad", [None, {1, 2}, 42])
    def test_rejects_non_indexable(self, bad):
        with pytest.raises(TypeError):
            IncreasingIndexer(bad)

    def test_empty_source(self):
        view = IncreasingIndexer([])
        assert len(view) == 0
        assert list(view) == []
        with pytest.raises(IndexOutOfRangeError):
            view[0]


class TestSequenceProtocol:
    """Behaves as a read-only Sequence."""

    def test_slice(self):
        view = IncreasingIndexer(ABC)
        assert view[1:4] == ['B', 'B', 'C']
        assert view[::2] == ['A', 'B', 'C']

    def test_contains_and_index(self):
        view = IncreasingIndexer(ABC)
        assert 'C' in view
        assert 'Z' not in view
        assert view.index('C') == 3

    def test_occurrences(self):
        view = DescendingIndexer(ABC)
        assert view.count('A') == 3
        assert view.count('C') == 1

    def test_reversed(self):
        assert list(reversed(IncreasingIndexer(ABC))) == ['C', 'C', 'C', 'B', 'B', 'A']


class TestVectorized:
    """source_indices / take agree with scalar access."""

    @pytest.mark.parametrize("cls", INDEXER_CLASSES)
    def test_source_indices_match_scalar(self, cls):
        view = cls(list(range(50)))
        positions = np.arange(len(view))
        expected = [view.source_index(i) for i in range(len(view))]
        assert view.source_indices(positions).tolist() == expected

    @pytest.mark.parametrize("cls", INDEXER_CLASSES)
    def test_take_numpy_source(self, cls):
        source = np.arange(100, 120)
        view = cls(source)
        positions = np.array([0, 5, len(view) - 1])
        taken = view.take(positions)
        assert isinstance(taken, np.ndarray)
        assert taken.tolist() == [view[int(i)] for i in positions]

    def test_take_list_source(self):
        view = DecreasingIndexer(ABC)
        assert view.take([0, 2, 5]) == ['A', 'B', 'C']

    def test_out_of_range(self):
        view = IncreasingIndexer(ABC)
        with pytest.raises(IndexOutOfRangeError):
            view.source_indices([0, 6])
        with pytest.raises(IndexOutOfRangeError):
            view.source_indices([-1])

    @pytest.mark.parametrize("cls", INDEXER_CLASSES)
    def test_uint64_width_past_int64_maximum(self, cls):
        m = 2**32 + 5
        view = cls(range(m), width='uint64')
        last = view.triangular_count - 1
        assert last > np.iinfo(np.int64).max

        positions = np.array([0, 1, last - 1, last], dtype=np.uint64)
        expected = [view.source_index(int(i)) for i in positions]
        assert view.source_indices(positions).tolist() == expected
        assert expected[-1] == m - 1

    def test_uint64_past_end(self):
        view = DescendingIndexer(range(2**32 + 5), width='uint64')
        with pytest.raises(IndexOutOfRangeError):
            view.source_indices(np.array([view.triangular_count], dtype=np.uint64))

    def test_float_indices_rejected(self):
        with pytest.raises(TypeError):
            IncreasingIndexer(ABC).source_indices([0.5])

    def test_empty(self):
        assert IncreasingIndexer(ABC).source_indices([]).size == 0


class TestFactory:
    """triangular_indexer() dispatch."""

    @pytest.mark.parametrize("orientation, cls", [
        (Orientation.INCREASING, IncreasingIndexer),
        (Orientation.DECREASING, DecreasingIndexer),
        (Orientation.DESCENDING, DescendingIndexer),
        ('decreasing', DecreasingIndexer),
    ])
    def test_orientation(self, orientation, cls):
        assert isinstance(triangular_indexer(ABC, orientation), cls)

    def test_default_is_increasing(self):
        assert isinstance(triangular_indexer(ABC), IncreasingIndexer)

    def test_width_passed_through(self):
        view = triangular_indexer(ABC, width='uint16')
        assert view.width is IntWidth.UINT16
