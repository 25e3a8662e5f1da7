"""
Oracle for sorting correctness.

We use Python's built-in `sorted()` as the ground-truth oracle:
- Correct order for any strict weak ordering, via `comparator_to_key`
- Deterministic and portable
- Stable, so it is the exact expected output for the stable algorithms

Public API (stable):
    oracle_sort(xs, pred=None) -> list
    equals_oracle(xs, out, pred=None) -> bool

Conventions:
- The oracle never mutates its input and always returns a **new** list.
- Stable algorithms must match the oracle exactly. Unstable ones only have
  to match it up to the order of equal elements; compare them with
  `equals_oracle(..., stable=False)`.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from rangesort.compare import Comparator, comparator_to_key, resolve_comparator
from rangesort.validate.properties import is_permutation

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]


def oracle_sort(xs: Iterable[Any], pred: Optional[Comparator] = None) -> List[Any]:
    """
    Return the ground-truth sorted output for `xs` under `pred`.

    Parameters
    ----------
    xs : iterable
        Input elements. The oracle does not mutate `xs`.
    pred : callable, optional
        Comparator; ascending `<` when omitted.

    Returns
    -------
    list
        A new list with the same elements as `xs`, stably sorted.
    """
    return sorted(xs, key=comparator_to_key(pred))


def equals_oracle(
    xs: Iterable[Any],
    out: Iterable[Any],
    pred: Optional[Comparator] = None,
    *,
    stable: bool = True,
) -> bool:
    """
    Check whether an algorithm's output matches the oracle.

    With `stable=True` the match must be exact. With `stable=False`, runs
    of elements that are equal under `pred` may appear in any order.
    """
    expected = oracle_sort(xs, pred)
    got = list(out)
    if stable:
        return got == expected
    if len(got) != len(expected):
        return False
    less = resolve_comparator(pred)
    # Same ordering class at every index, and each class holds the same items.
    if any(less(a, b) or less(b, a) for a, b in zip(got, expected)):
        return False
    return is_permutation(got, expected)
