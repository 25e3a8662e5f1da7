"""
Top-down merge sort with one shared auxiliary buffer.

The buffer is as long as the range and is allocated once per call. Each
recursive step owns the inclusive buffer slice ``[lo, hi]`` that mirrors
its sub-range of the sequence; the split point is derived from that slice,
so sequence positions and buffer indices cannot drift apart. Recursion
depth is ceil(log2 n).

A sub-range of the sequence is only written after its two halves have been
merged completely into the buffer. If the comparator raises, the sequence
still holds a permutation of its input.
"""

from __future__ import annotations

import logging
from typing import Optional

from rangesort.buffer import LinearBuffer
from rangesort.compare import Comparator, resolve_comparator
from rangesort.cursors.base import Capability, F
from rangesort.cursors.ops import advance, distance, require_capability

__all__ = ["merge_sort", "merge_into"]

logger = logging.getLogger(__name__)


def merge_into(
    first1: F,
    last1: F,
    first2: F,
    last2: F,
    buffer: LinearBuffer,
    out: int,
    pred: Comparator,
) -> int:
    """
    Merge two sorted ranges into ``buffer`` starting at index ``out``.

    Ties go to the first range, which is what makes merge sort stable.
    Returns the index one past the last slot written.
    """
    while first1 != last1 and first2 != last2:
        a = first1.get()
        b = first2.get()
        if pred(b, a):
            buffer[out] = b
            first2 = first2.next()  # type: ignore[assignment]
        else:
            buffer[out] = a
            first1 = first1.next()  # type: ignore[assignment]
        out += 1
    while first1 != last1:
        buffer[out] = first1.get()
        first1 = first1.next()  # type: ignore[assignment]
        out += 1
    while first2 != last2:
        buffer[out] = first2.get()
        first2 = first2.next()  # type: ignore[assignment]
        out += 1
    return out


def _move_back(buffer: LinearBuffer, lo: int, hi: int, dest: F) -> None:
    for index in range(lo, hi + 1):
        dest.set(buffer.take(index))
        if index < hi:
            dest = dest.next()  # type: ignore[assignment]


def _merge_sort_impl(
    first: F, before_last: F, buffer: LinearBuffer, lo: int, hi: int, pred: Comparator
) -> None:
    if lo >= hi:
        return
    half = (hi - lo) // 2
    middle = advance(first, half)
    right_first = middle.next()

    _merge_sort_impl(first, middle, buffer, lo, lo + half, pred)
    _merge_sort_impl(right_first, before_last, buffer, lo + half + 1, hi, pred)

    merge_into(first, right_first, right_first, before_last.next(), buffer, lo, pred)
    _move_back(buffer, lo, hi, first)


def merge_sort(first: F, last: F, pred: Optional[Comparator] = None) -> None:
    require_capability(first, last, Capability.FORWARD, "merge_sort")
    pred = resolve_comparator(pred)
    if first == last:
        return
    n = distance(first, last)
    buffer = LinearBuffer(n)
    logger.debug("merge_sort: n=%d buffer=%d", n, len(buffer))
    _merge_sort_impl(first, advance(first, n - 1), buffer, 0, n - 1, pred)
