"""
Dispersal Sequencer.

Lazily expands a source sequence so each element repeats in a triangular
pattern:

    increasing   1, 2, 2, 3, 3, 3, 4, 4, 4, 4, ...
    decreasing   1, 1, 2, 1, 2, 3, 1, 2, 3, 4, ...
    descending   1, 1, 1, 1, 2, 2, 2, 3, 3, 4      (finite, sized sources only)

A Dispersal re-reads its source on every iteration, so it is restartable
exactly when the source is (a list is, a generator is not).
"""

from collections.abc import Sized
from enum import Enum
from itertools import repeat
from typing import Callable, Iterable, Iterator, Optional, TypeVar

from trinum.primitives.triangular import forward

T = TypeVar('T')


class Orientation(Enum):
    """Repeat pattern of a dispersed sequence."""

    INCREASING = 'increasing'
    DECREASING = 'decreasing'
    DESCENDING = 'descending'


def _increasing(source: Iterable[T]) -> Iterator[T]:
    for i, item in enumerate(source):
        yield from repeat(item, i + 1)


def _decreasing(source: Iterable[T]) -> Iterator[T]:
    seen = []
    for item in source:
        seen.append(item)
        yield from seen


def _descending(source: Iterable[T]) -> Iterator[T]:
    count = len(source)
    for i, item in enumerate(source):
        yield from repeat(item, count - i)


class Dispersal(Iterable[T]):
    """
    Lazy dispersed view of a source.

    Args:
        source: Items to disperse. Not copied.
        orientation: Repeat pattern
    """

    _generators = {
        Orientation.INCREASING: _increasing,
        Orientation.DECREASING: _decreasing,
        Orientation.DESCENDING: _descending,
    }

    def __init__(self, source: Iterable[T], orientation: Orientation):
        if source is None:
            raise TypeError("source cannot be None")
        orientation = Orientation(orientation)
        if orientation is Orientation.DESCENDING and not isinstance(source, Sized):
            raise TypeError(
                "descending dispersal requires a sized source, "
                f"got {type(source).__name__}"
            )
        self.source = source
        self.orientation = orientation
        self._generate: Callable[[Iterable[T]], Iterator[T]] = self._generators[orientation]

    def __iter__(self) -> Iterator[T]:
        return self._generate(self.source)

    def expected_length(self) -> Optional[int]:
        """T(len(source)) for sized sources, None when the length is unknown."""
        if not isinstance(self.source, Sized):
            return None
        return forward(len(self.source))

    def __repr__(self) -> str:
        return f"Dispersal({self.orientation.value}, source={type(self.source).__name__})"


def increasing(source: Iterable[T]) -> Dispersal[T]:
    """
    Repeat each element one more time than the previous one.

    The element at position i is emitted i+1 times before the next begins.
    Finite when the source is finite.
    """
    return Dispersal(source, Orientation.INCREASING)


def decreasing(source: Iterable[T]) -> Dispersal[T]:
    """
    Replay the growing prefix of the source.

    After consuming k source items, T(k) items have been emitted. Every
    item seen is buffered, so memory grows with the source length. An
    infinite source gives an infinite sequence.
    """
    return Dispersal(source, Orientation.DECREASING)


def descending(source: Iterable[T]) -> Dispersal[T]:
    """
    Mirror of increasing(): the element at position i is emitted len-i times.

    Raises TypeError immediately if the source has no len().
    """
    return Dispersal(source, Orientation.DESCENDING)


def disperse(source: Iterable[T], orientation: Orientation = Orientation.INCREASING) -> Dispersal[T]:
    """Dispersal of source in the given orientation."""
    return Dispersal(source, orientation)
