"""
Quadratic sorts: bubble, shaker, comb, insertion, selection.

All five work through ``iter_swap``/``rotate`` only and allocate nothing.

Minimum cursor tier and stability:

    bubble_sort      forward         stable
    shaker_sort      bidirectional   stable
    comb_sort        forward         not stable
    insertion_sort   bidirectional   stable
    selection_sort   forward         not stable

Every entry point takes ``(first, last, pred=None)`` and returns None.
"""

from __future__ import annotations

import logging
from typing import Optional

from rangesort.compare import Comparator, resolve_comparator
from rangesort.constants import COMB_SHRINK_FACTOR
from rangesort.cursors.base import B, Capability, F, R
from rangesort.cursors.ops import (
    advance,
    distance,
    iter_swap,
    require_capability,
    rotate,
)

__all__ = [
    "bubble_sort",
    "shaker_sort",
    "comb_sort",
    "insertion_sort",
    "selection_sort",
    "find_most_suitable",
]

logger = logging.getLogger(__name__)


# ------------------------- bubble ------------------------- #


def _bubble_passes(first: F, n: int, pred: Comparator) -> None:
    # After pass ``idx`` the last ``idx + 1`` slots hold their final values.
    for idx in range(n - 1):
        last_in_pass = advance(first, n - idx)
        it = first
        nxt = it.next()
        while nxt != last_in_pass:
            if pred(nxt.get(), it.get()):
                iter_swap(it, nxt)
            it = nxt
            nxt = nxt.next()


def bubble_sort(first: F, last: F, pred: Optional[Comparator] = None) -> None:
    require_capability(first, last, Capability.FORWARD, "bubble_sort")
    pred = resolve_comparator(pred)
    n = distance(first, last)
    logger.debug("bubble_sort: n=%d", n)
    _bubble_passes(first, n, pred)


# ------------------------- shaker ------------------------- #


def _pass_to_right(left: F, right: F, pred: Comparator) -> None:
    while left != right:
        nxt = left.next()
        if pred(nxt.get(), left.get()):
            iter_swap(left, nxt)
        left = nxt


def _pass_to_left(left: B, right: B, pred: Comparator) -> None:
    while right != left:
        before = right.prev()
        if pred(right.get(), before.get()):
            iter_swap(right, before)
        right = before


def _shaker_bidirectional(first: B, before_last: B, pred: Comparator) -> None:
    """Sort ``[first, before_last]`` using cursor equality only."""
    while first != before_last:
        _pass_to_right(first, before_last, pred)
        before_last = before_last.prev()
        _pass_to_left(first, before_last, pred)
        if first != before_last:
            first = first.next()
    if pred(before_last.get(), first.get()):
        iter_swap(first, before_last)


def _shaker_random_access(first: R, before_last: R, pred: Comparator) -> None:
    """Sort ``[first, before_last]``; ordering comparisons end the loop one pass early."""
    while first < before_last:
        _pass_to_right(first, before_last, pred)
        before_last = before_last.prev()
        _pass_to_left(first, before_last, pred)
        first = first.next()


def shaker_sort(first: B, last: B, pred: Optional[Comparator] = None) -> None:
    """Cocktail sort: alternate rightward and leftward bubbling passes."""
    tier = require_capability(first, last, Capability.BIDIRECTIONAL, "shaker_sort")
    pred = resolve_comparator(pred)
    if first == last:
        return
    if tier >= Capability.RANDOM_ACCESS:
        logger.debug("shaker_sort: random-access body")
        _shaker_random_access(first, last.prev(), pred)  # type: ignore[arg-type]
    else:
        logger.debug("shaker_sort: bidirectional body")
        _shaker_bidirectional(first, last.prev(), pred)


# ------------------------- comb ------------------------- #


def comb_sort(first: F, last: F, pred: Optional[Comparator] = None) -> None:
    """
    Bubble sort over a shrinking gap.

    The gap starts at the range length and is divided by
    ``COMB_SHRINK_FACTOR`` while it stays >= 1. Gap passes alone do not
    guarantee a sorted result, so a full bubble sort finishes the job.
    """
    require_capability(first, last, Capability.FORWARD, "comb_sort")
    pred = resolve_comparator(pred)
    n = distance(first, last)
    logger.debug("comb_sort: n=%d shrink=%.3f", n, COMB_SHRINK_FACTOR)

    step = float(n)
    while step >= 1:
        gap = int(step)
        pass_end = advance(first, n - gap)
        left = first
        right = advance(first, gap)
        while left != pass_end:
            if pred(right.get(), left.get()):
                iter_swap(left, right)
            left = left.next()
            right = right.next()
        step /= COMB_SHRINK_FACTOR

    _bubble_passes(first, n, pred)


# ------------------------- insertion ------------------------- #


def insertion_sort(first: B, last: B, pred: Optional[Comparator] = None) -> None:
    require_capability(first, last, Capability.BIDIRECTIONAL, "insertion_sort")
    pred = resolve_comparator(pred)
    right = first
    while right != last:
        value = right.get()
        left = right
        while left != first and pred(value, left.prev().get()):
            left = left.prev()
        # {left, ..., prev(right), right} -> {right, left, ..., prev(right)}
        after = right.next()
        rotate(left, right, after)
        right = after


# ------------------------- selection ------------------------- #


def find_most_suitable(first: F, last: F, pred: Comparator) -> F:
    """Return the first cursor in ``[first, last)`` no other element must precede."""
    result = first
    while first != last:
        if pred(first.get(), result.get()):
            result = first
        first = first.next()  # type: ignore[assignment]
    return result


def selection_sort(first: F, last: F, pred: Optional[Comparator] = None) -> None:
    require_capability(first, last, Capability.FORWARD, "selection_sort")
    pred = resolve_comparator(pred)
    while first != last:
        best = find_most_suitable(first, last, pred)
        if best != first:
            iter_swap(first, best)
        first = first.next()  # type: ignore[assignment]
