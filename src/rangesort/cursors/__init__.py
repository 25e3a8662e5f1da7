"""
Cursor package public API.

Re-exports the capability tiers, the concrete cursor containers and the
traversal primitives so callers can write:
    from rangesort.cursors import Capability, full_range, iter_swap
"""

from .base import (
    BidirectionalCursor,
    Capability,
    ForwardCursor,
    RandomAccessCursor,
)
from .linked import DoublyLinkedList, ForwardListCursor, ListCursor, SinglyLinkedList
from .ops import (
    advance,
    capability_of,
    distance,
    full_range,
    iter_swap,
    require_capability,
    rotate,
)
from .sequence import (
    SequenceBidirectionalCursor,
    SequenceCursor,
    SequenceForwardCursor,
    SequenceView,
    sequence_range,
)

__all__ = [
    "Capability",
    "ForwardCursor",
    "BidirectionalCursor",
    "RandomAccessCursor",
    "SequenceForwardCursor",
    "SequenceBidirectionalCursor",
    "SequenceCursor",
    "SequenceView",
    "sequence_range",
    "SinglyLinkedList",
    "DoublyLinkedList",
    "ForwardListCursor",
    "ListCursor",
    "capability_of",
    "require_capability",
    "advance",
    "distance",
    "iter_swap",
    "rotate",
    "full_range",
]
