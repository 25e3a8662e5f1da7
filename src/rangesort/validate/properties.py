"""
Property helpers for validating sorting results.

These functions provide lightweight checks you can use in tests and inside
the benchmark runner for sanity validation.

Public API (stable):
    is_sorted_by(xs, pred=None) -> bool
    first_order_violation(xs, pred=None) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    is_stable(before, after, key) -> bool
    assert_no_mutation(before, after) -> None

Notes
-----
- Order is checked the way the algorithms promise it: for every adjacent
  pair (a, b) of the output, `not pred(b, a)`.
- Permutation checks count hashable elements with a Counter. Unhashable
  elements fall back to an O(n^2) equality match.
- Stability needs elements that carry a tie-breaker: sort (key, tag) items
  with a comparator that ignores the tag, then check that items with equal
  keys kept their input order.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Callable, Dict, List, Optional, Sequence

from rangesort.compare import Comparator, resolve_comparator

__all__ = [
    "is_sorted_by",
    "first_order_violation",
    "is_permutation",
    "permutation_counter_diff",
    "is_stable",
    "assert_no_mutation",
]


def first_order_violation(xs: Sequence[Any], pred: Optional[Comparator] = None) -> Optional[int]:
    """
    Return the first index i where pred(xs[i+1], xs[i]) holds, or None.

    Useful for precise error messages:
        i = first_order_violation(out)
        assert i is None, f"out of order at i={i}: {out[i]} then {out[i+1]}"
    """
    less = resolve_comparator(pred)
    for i in range(len(xs) - 1):
        if less(xs[i + 1], xs[i]):
            return i
    return None


def is_sorted_by(xs: Sequence[Any], pred: Optional[Comparator] = None) -> bool:
    return first_order_violation(xs, pred) is None


def _counter(xs: Sequence[Any]) -> Optional[Counter]:
    try:
        return Counter(xs)
    except TypeError:
        return None


def is_permutation(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Return True iff `a` and `b` hold exactly the same multiset of values."""
    if len(a) != len(b):
        return False
    ca, cb = _counter(a), _counter(b)
    if ca is not None and cb is not None:
        return ca == cb
    remaining: List[Any] = list(b)
    for item in a:
        for i, candidate in enumerate(remaining):
            if candidate == item:
                del remaining[i]
                break
        else:
            return False
    return True


def permutation_counter_diff(a: Sequence[Any], b: Sequence[Any]) -> Dict[Any, int]:
    """
    Return a dict of value -> count difference (count_a - count_b).

    Empty dict means `a` and `b` have identical multiplicities.
    Positive values indicate extra occurrences in `a`, negative in `b`.
    Elements must be hashable.
    """
    ca = Counter(a)
    cb = Counter(b)
    diff: Dict[Any, int] = {}
    for k in set(ca) | set(cb):
        d = ca.get(k, 0) - cb.get(k, 0)
        if d != 0:
            diff[k] = d
    return diff


def is_stable(before: Sequence[Any], after: Sequence[Any], key: Callable[[Any], Any]) -> bool:
    """
    Return True iff items with equal `key` appear in `after` in the same
    relative order as in `before`.

    Items are told apart by identity, so pass the very objects that were
    sorted (tuples or other immutable values are fine).
    """
    if len(before) != len(after):
        return False
    position = {id(item): i for i, item in enumerate(before)}
    if len(position) != len(before):
        raise ValueError("is_stable needs distinct objects in `before`")
    last_seen: Dict[Any, int] = {}
    for item in after:
        k = key(item)
        pos = position[id(item)]
        if k in last_seen and last_seen[k] > pos:
            return False
        last_seen[k] = pos
    return True


def assert_no_mutation(before: Sequence[Any], after: Sequence[Any]) -> None:
    """
    Assert that two sequences are exactly equal (element-wise), e.g. that a
    rejected call left its container untouched.

    Raises AssertionError with a concise message if they differ.
    """
    if len(before) != len(after):
        raise AssertionError(
            f"Input mutated: length changed from {len(before)} to {len(after)}"
        )
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(f"Input mutated at index {i}: before={x!r}, after={y!r}")
