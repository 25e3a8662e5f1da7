"""
Cursors over indexable containers.

Anything with ``__len__``, ``__getitem__`` and ``__setitem__`` taking integer
indices qualifies: lists, ``array.array``, 1-D numpy arrays, user classes.

Three cursor classes share one (container, index) layout. The random-access
one is what ``sequence_range`` hands out by default; the two weaker ones hide
the offset arithmetic so the same list can be sorted through the forward or
bidirectional code paths. ``SequenceView`` wraps a sequence together with
such a tier so it can be passed wherever a container is expected.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Tuple, Type

from rangesort.cursors.base import (
    BidirectionalCursor,
    Capability,
    ForwardCursor,
    RandomAccessCursor,
)
from rangesort.errors import CapabilityError, InvalidRangeError

__all__ = [
    "SequenceForwardCursor",
    "SequenceBidirectionalCursor",
    "SequenceCursor",
    "SequenceView",
    "is_indexable",
    "sequence_range",
]


def is_indexable(obj: Any) -> bool:
    return all(hasattr(obj, attr) for attr in ("__len__", "__getitem__", "__setitem__"))


class SequenceForwardCursor(ForwardCursor):
    __slots__ = ("_seq", "_index")

    def __init__(self, seq: Any, index: int) -> None:
        self._seq = seq
        self._index = index

    @property
    def container(self) -> Any:
        return self._seq

    @property
    def index(self) -> int:
        return self._index

    def get(self) -> Any:
        return self._seq[self._index]

    def set(self, value: Any) -> None:
        self._seq[self._index] = value

    def next(self) -> "SequenceForwardCursor":
        if self._index >= len(self._seq):
            raise InvalidRangeError("cannot advance past the end of the sequence")
        return type(self)(self._seq, self._index + 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SequenceForwardCursor):
            return NotImplemented
        return other._seq is self._seq and other._index == self._index

    def __hash__(self) -> int:
        return hash((id(self._seq), self._index))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(index={self._index})"


class SequenceBidirectionalCursor(SequenceForwardCursor, BidirectionalCursor):
    __slots__ = ()

    def prev(self) -> "SequenceBidirectionalCursor":
        if self._index <= 0:
            raise InvalidRangeError("cannot step before the start of the sequence")
        return type(self)(self._seq, self._index - 1)


class SequenceCursor(SequenceBidirectionalCursor, RandomAccessCursor):
    """Random-access cursor over an indexable container."""

    __slots__ = ()

    def __add__(self, n: int) -> "SequenceCursor":
        if not isinstance(n, int):
            return NotImplemented
        index = self._index + n
        if not 0 <= index <= len(self._seq):
            raise InvalidRangeError(
                f"offset {n} from index {self._index} leaves the sequence (len={len(self._seq)})"
            )
        return SequenceCursor(self._seq, index)

    def distance_to(self, last: ForwardCursor) -> int:
        if not isinstance(last, SequenceForwardCursor) or last._seq is not self._seq:
            raise InvalidRangeError("cursors belong to different containers")
        return last._index - self._index

    # The random-access versions of these are O(1); the MRO would otherwise
    # pick the bounds-checked walking ones from the sequence bases.
    next = RandomAccessCursor.next
    prev = RandomAccessCursor.prev
    advance = RandomAccessCursor.advance


_CURSOR_FOR: Dict[Capability, Type[SequenceForwardCursor]] = {
    Capability.FORWARD: SequenceForwardCursor,
    Capability.BIDIRECTIONAL: SequenceBidirectionalCursor,
    Capability.RANDOM_ACCESS: SequenceCursor,
}


def sequence_range(
    seq: Any, capability: Capability = Capability.RANDOM_ACCESS
) -> Tuple[SequenceForwardCursor, SequenceForwardCursor]:
    """Return ``(first, last)`` cursors spanning all of ``seq`` at the given tier."""
    if not is_indexable(seq):
        raise CapabilityError(f"{type(seq).__name__} is not an indexable sequence")
    cls = _CURSOR_FOR[Capability(capability)]
    return cls(seq, 0), cls(seq, len(seq))


class SequenceView:
    """An indexable container seen through a restricted cursor tier."""

    def __init__(self, seq: Any, capability: Capability = Capability.FORWARD) -> None:
        if not is_indexable(seq):
            raise CapabilityError(f"{type(seq).__name__} is not an indexable sequence")
        self.seq = seq
        self.capability = Capability(capability)

    def begin(self) -> SequenceForwardCursor:
        return sequence_range(self.seq, self.capability)[0]

    def end(self) -> SequenceForwardCursor:
        return sequence_range(self.seq, self.capability)[1]

    def __len__(self) -> int:
        return len(self.seq)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.seq)

    def __repr__(self) -> str:
        return f"SequenceView({self.seq!r}, {self.capability.label})"
