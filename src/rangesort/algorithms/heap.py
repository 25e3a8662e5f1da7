"""
Heap sort with two strategies, picked once per call from the cursor tier.

Random-access ranges get the classic in-place binary heap: build a max-heap
under ``pred``, then repeatedly swap the root to the shrinking end.

Anything weaker is sorted through a ``SurrogateHeap``: every element is
pushed into an ordered multiset keyed by the comparator, which is then
drained in ascending order back into the range, left to right. The range is
only read while the multiset fills, so a comparator that raises leaves it
exactly as it was.

Neither strategy is stable.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import Any, Callable, Iterator, List, Optional, Tuple

from rangesort.compare import Comparator, comparator_to_key, resolve_comparator
from rangesort.cursors.base import Capability, F, R
from rangesort.cursors.ops import iter_swap, require_capability

__all__ = ["heap_sort", "make_heap", "pop_heap", "SurrogateHeap"]

logger = logging.getLogger(__name__)


# ------------------------- in-place binary heap ------------------------- #


def _sift_down(first: R, start: int, n: int, pred: Comparator) -> None:
    root = start
    while True:
        child = 2 * root + 1
        if child >= n:
            return
        child_cursor = first + child
        if child + 1 < n:
            sibling = child_cursor + 1
            if pred(child_cursor.get(), sibling.get()):
                child, child_cursor = child + 1, sibling
        root_cursor = first + root
        if not pred(root_cursor.get(), child_cursor.get()):
            return
        iter_swap(root_cursor, child_cursor)
        root = child


def make_heap(first: R, last: R, pred: Comparator) -> None:
    """Arrange ``[first, last)`` as a max-heap under ``pred``."""
    n = last - first
    for start in range(n // 2 - 1, -1, -1):
        _sift_down(first, start, n, pred)


def pop_heap(first: R, last: R, pred: Comparator) -> None:
    """Move the root of heap ``[first, last)`` to ``last - 1`` and re-heap the rest."""
    n = last - first
    if n < 2:
        return
    iter_swap(first, last - 1)
    _sift_down(first, 0, n - 1, pred)


def _heap_sort_in_place(first: R, last: R, pred: Comparator) -> None:
    make_heap(first, last, pred)
    end = last
    while end - first > 1:
        pop_heap(first, end, pred)
        end = end - 1


# ------------------------- surrogate heap ------------------------- #


class SurrogateHeap:
    """
    Ordered multiset of values under a comparator.

    Equal values are all kept. Among equal values the drain order follows
    insertion order, which callers should not rely on.
    """

    def __init__(self, pred: Optional[Comparator] = None) -> None:
        self._key: Callable[[Any], Any] = comparator_to_key(pred)
        self._entries: List[Tuple[Any, int, Any]] = []
        self._counter = itertools.count()

    def push(self, value: Any) -> None:
        heapq.heappush(self._entries, (self._key(value), next(self._counter), value))

    def pop(self) -> Any:
        if not self._entries:
            raise IndexError("pop from empty surrogate heap")
        return heapq.heappop(self._entries)[2]

    def drain(self) -> Iterator[Any]:
        """Yield and remove every value in ascending order."""
        while self._entries:
            yield heapq.heappop(self._entries)[2]

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)


def _heap_sort_surrogate(first: F, last: F, pred: Comparator) -> None:
    heap = SurrogateHeap(pred)
    cursor = first
    while cursor != last:
        heap.push(cursor.get())
        cursor = cursor.next()  # type: ignore[assignment]
    logger.debug("heap_sort: surrogate heap holds %d values", len(heap))

    cursor = first
    for value in heap.drain():
        cursor.set(value)
        cursor = cursor.next()  # type: ignore[assignment]


# ------------------------- entry point ------------------------- #


def heap_sort(first: F, last: F, pred: Optional[Comparator] = None) -> None:
    tier = require_capability(first, last, Capability.FORWARD, "heap_sort")
    pred = resolve_comparator(pred)
    if first == last:
        return
    if tier >= Capability.RANDOM_ACCESS:
        logger.debug("heap_sort: in-place binary heap")
        _heap_sort_in_place(first, last, pred)  # type: ignore[arg-type]
    else:
        logger.debug("heap_sort: surrogate heap (%s cursors)", tier.label)
        _heap_sort_surrogate(first, last, pred)
