"""
Quick sort over bidirectional cursors.

Partitioning always takes the last element of a sub-range as pivot (no
randomisation, no median-of-three), so sorted and reverse-sorted inputs hit
the quadratic worst case. Pending sub-ranges are kept on an explicit stack
rather than the call stack, which keeps that worst case from running into
the interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from rangesort.compare import Comparator, resolve_comparator
from rangesort.cursors.base import B, Capability
from rangesort.cursors.ops import iter_swap, require_capability

__all__ = ["quick_sort", "make_partition"]

logger = logging.getLogger(__name__)


def make_partition(first: B, before_last: B, pred: Comparator) -> B:
    """
    Partition ``[first, before_last]`` around the value at ``before_last``.

    Every element the pivot does not have to precede is moved in front of
    it. Returns the pivot's final cursor.
    """
    pivot = before_last.get()
    less = first
    while first != before_last:
        if not pred(pivot, first.get()):
            if less != first:
                iter_swap(first, less)
            less = less.next()  # type: ignore[assignment]
        first = first.next()  # type: ignore[assignment]
    if less != before_last:
        iter_swap(less, before_last)
    return less


def quick_sort(first: B, last: B, pred: Optional[Comparator] = None) -> None:
    require_capability(first, last, Capability.BIDIRECTIONAL, "quick_sort")
    pred = resolve_comparator(pred)
    if first == last:
        return

    pending: List[Tuple[B, B]] = [(first, last.prev())]  # type: ignore[list-item]
    max_pending = 1
    while pending:
        lo, hi = pending.pop()
        if lo == hi:
            continue
        pivot = make_partition(lo, hi, pred)
        if pivot != lo:
            pending.append((lo, pivot.prev()))  # type: ignore[arg-type]
        if pivot != hi:
            pending.append((pivot.next(), hi))  # type: ignore[arg-type]
        max_pending = max(max_pending, len(pending))
    logger.debug("quick_sort: deepest work stack %d", max_pending)
