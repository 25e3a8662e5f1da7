"""
Traversal primitives shared by every algorithm.

Public API (stable):
    capability_of(cursor) -> Capability
    require_capability(first, last, needed, algorithm) -> Capability
    advance(cursor, n) -> cursor
    distance(first, last) -> int
    iter_swap(a, b) -> None
    rotate(first, middle, last) -> cursor
    full_range(container, capability=None) -> (first, last)

Notes
-----
- ``iter_swap`` reads both values before writing either.
- ``rotate`` only needs forward cursors and runs in a loop, so rotating a
  long range does not grow the call stack.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

from rangesort.cursors.base import Capability, F, ForwardCursor
from rangesort.cursors.sequence import is_indexable, sequence_range
from rangesort.errors import CapabilityError, InvalidRangeError

__all__ = [
    "capability_of",
    "require_capability",
    "advance",
    "distance",
    "iter_swap",
    "rotate",
    "full_range",
]


def capability_of(cursor: Any) -> Capability:
    if not isinstance(cursor, ForwardCursor):
        raise CapabilityError(
            f"expected a cursor, got {type(cursor).__name__}",
            details={"type": type(cursor).__name__},
        )
    return cursor.capability


def require_capability(
    first: Any, last: Any, needed: Capability, algorithm: str
) -> Capability:
    """
    Check that ``[first, last)`` is a range ``algorithm`` can work on.

    Runs before the algorithm touches any element, so a rejected call leaves
    the container as it was.

    Returns
    -------
    Capability
        The tier of the two cursors.

    Raises
    ------
    CapabilityError
        If either bound is not a cursor, the bounds are of different tiers,
        or their tier is weaker than ``needed``.
    InvalidRangeError
        If the bounds belong to different containers, or random-access
        bounds are in the wrong order.
    """
    tier = capability_of(first)
    other = capability_of(last)
    if tier != other:
        raise CapabilityError(
            f"{algorithm}: range bounds have different capabilities "
            f"({tier.label} vs {other.label})"
        )
    if tier < needed:
        raise CapabilityError(
            f"{algorithm} requires {needed.label} cursors; got {tier.label}",
            details={"algorithm": algorithm, "needed": needed.label, "got": tier.label},
        )
    if first.container is not last.container:
        raise InvalidRangeError(f"{algorithm}: range bounds belong to different containers")
    if tier >= Capability.RANDOM_ACCESS:
        span = first.distance_to(last)
        if span < 0:
            raise InvalidRangeError(
                f"{algorithm}: last precedes first by {-span}",
                details={"algorithm": algorithm, "distance": span},
            )
    return tier


def advance(cursor: F, n: int) -> F:
    return cursor.advance(n)  # type: ignore[return-value]


def distance(first: ForwardCursor, last: ForwardCursor) -> int:
    return first.distance_to(last)


def iter_swap(a: ForwardCursor, b: ForwardCursor) -> None:
    x = a.get()
    y = b.get()
    a.set(y)
    b.set(x)


def rotate(first: F, middle: F, last: F) -> F:
    """
    Rotate ``[first, last)`` so that ``middle`` becomes the first element.

    Returns the cursor where the element originally at ``first`` ends up.
    """
    if first == middle:
        return last
    if middle == last:
        return first

    result: Optional[F] = None
    while True:
        write = first
        next_read = first
        read = middle
        while read != last:
            if write == next_read:
                next_read = read
            iter_swap(write, read)
            write = write.next()  # type: ignore[assignment]
            read = read.next()  # type: ignore[assignment]
        if result is None:
            result = write
        # what is left is rotate(write, next_read, last)
        if write == next_read or next_read == last:
            return result
        first, middle = write, next_read


def full_range(container: Any, capability: Optional[Capability] = None) -> Tuple[Any, Any]:
    """
    Return ``(first, last)`` spanning ``container``.

    Containers exposing ``begin()``/``end()`` supply their own cursors.
    Indexable sequences get random-access cursors, or the tier given by
    ``capability``.
    """
    if hasattr(container, "begin") and hasattr(container, "end"):
        first, last = container.begin(), container.end()
        if capability is not None and capability_of(first) < capability:
            raise CapabilityError(
                f"{type(container).__name__} cannot provide {Capability(capability).label} cursors"
            )
        return first, last
    if is_indexable(container):
        return sequence_range(container, capability or Capability.RANDOM_ACCESS)
    raise CapabilityError(f"cannot build a range over {type(container).__name__}")
