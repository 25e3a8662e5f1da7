"""
Comparator contract.

A comparator is a binary predicate ``pred(a, b) -> bool`` answering "must
``a`` come before ``b``?". It is expected to be a strict weak ordering.
Nothing here checks that: a bad comparator gives an unspecified order, but
every algorithm still leaves a permutation of its input.

Public API (stable):
    Comparator
    resolve_comparator(pred) -> Comparator
    make_comparator(pred=None, *, key=None, reverse=False) -> Comparator
    comparator_to_key(pred) -> key function for sorted()/heapq
"""

from __future__ import annotations

import operator
from functools import cmp_to_key
from typing import Any, Callable, Optional, TypeVar

__all__ = [
    "Comparator",
    "DEFAULT_COMPARATOR",
    "resolve_comparator",
    "make_comparator",
    "comparator_to_key",
]

T = TypeVar("T")

Comparator = Callable[[Any, Any], bool]

DEFAULT_COMPARATOR: Comparator = operator.lt


def resolve_comparator(pred: Optional[Comparator]) -> Comparator:
    """Return ``pred``, or ascending ``<`` when it is None."""
    if pred is None:
        return DEFAULT_COMPARATOR
    if not callable(pred):
        raise TypeError(f"comparator must be callable, got {type(pred).__name__}")
    return pred


def make_comparator(
    pred: Optional[Comparator] = None,
    *,
    key: Optional[Callable[[Any], Any]] = None,
    reverse: bool = False,
) -> Comparator:
    """
    Build a comparator from the usual ``sorted()`` knobs.

    ``key`` is applied to both arguments before ``pred``. ``reverse`` swaps
    the arguments, which keeps a strict weak ordering strict (negating it
    would not).
    """
    base = resolve_comparator(pred)
    if key is not None:
        inner = base

        def base(a: Any, b: Any) -> bool:
            return inner(key(a), key(b))

    if reverse:
        forward = base

        def base(a: Any, b: Any) -> bool:
            return forward(b, a)

    return base


def comparator_to_key(pred: Optional[Comparator] = None) -> Callable[[Any], Any]:
    """Adapt a predicate into a key object usable by ``sorted`` and ``heapq``."""
    less = resolve_comparator(pred)

    def three_way(a: Any, b: Any) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    return cmp_to_key(three_way)
