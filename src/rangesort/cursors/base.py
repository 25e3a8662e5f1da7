"""
Cursor tiers.

A cursor addresses one slot of a container. Cursors are immutable values:
stepping returns a new cursor and leaves the old one untouched, so a cursor
can be kept as a range bound while others move.

The three abstract classes below double as capability tags. Each concrete
cursor class inherits the weakest base that matches what it can do and
thereby picks up the matching ``capability`` class attribute:

    ForwardCursor         get/set, next(), advance(n >= 0), walking distance
    BidirectionalCursor   + prev(), advance(n < 0)
    RandomAccessCursor    + O(1) offset arithmetic and ordering

Algorithms are typed against the weakest tier they accept and read
``capability`` once per call when they pick a strategy.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, ClassVar, TypeVar, Union

from rangesort.errors import CapabilityError, InvalidRangeError

__all__ = [
    "Capability",
    "ForwardCursor",
    "BidirectionalCursor",
    "RandomAccessCursor",
    "F",
    "B",
    "R",
]


class Capability(IntEnum):
    FORWARD = 1
    BIDIRECTIONAL = 2
    RANDOM_ACCESS = 3

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")


class ForwardCursor(ABC):
    """Single-direction cursor."""

    capability: ClassVar[Capability] = Capability.FORWARD
    __slots__ = ()

    @abstractmethod
    def get(self) -> Any:
        """Return the element at this position."""

    @abstractmethod
    def set(self, value: Any) -> None:
        """Store ``value`` at this position."""

    @abstractmethod
    def next(self) -> "ForwardCursor":
        """Return the cursor one slot further."""

    @property
    @abstractmethod
    def container(self) -> Any:
        """The container this cursor walks; compared by identity."""

    @abstractmethod
    def __eq__(self, other: object) -> bool: ...

    @abstractmethod
    def __hash__(self) -> int: ...

    def advance(self, n: int) -> "ForwardCursor":
        if n < 0:
            raise CapabilityError(
                f"{type(self).__name__} cannot move backwards (n={n})",
                details={"capability": self.capability.label},
            )
        cursor = self
        for _ in range(n):
            cursor = cursor.next()
        return cursor

    def distance_to(self, last: "ForwardCursor") -> int:
        """Count the steps from this cursor to ``last`` by walking."""
        if last.container is not self.container:
            raise InvalidRangeError("cursors belong to different containers")
        steps = 0
        cursor = self
        while cursor != last:
            cursor = cursor.next()
            steps += 1
        return steps


class BidirectionalCursor(ForwardCursor):
    capability: ClassVar[Capability] = Capability.BIDIRECTIONAL
    __slots__ = ()

    @abstractmethod
    def prev(self) -> "BidirectionalCursor":
        """Return the cursor one slot back."""

    def advance(self, n: int) -> "BidirectionalCursor":
        if n >= 0:
            return super().advance(n)  # type: ignore[return-value]
        cursor = self
        for _ in range(-n):
            cursor = cursor.prev()
        return cursor


class RandomAccessCursor(BidirectionalCursor):
    """
    Cursor with O(1) offsets.

    Subclasses provide ``__add__`` and ``distance_to``; subtraction and the
    ordering operators are derived from them.
    """

    capability: ClassVar[Capability] = Capability.RANDOM_ACCESS
    __slots__ = ()

    @abstractmethod
    def __add__(self, n: int) -> "RandomAccessCursor": ...

    @abstractmethod
    def distance_to(self, last: "ForwardCursor") -> int: ...

    def __radd__(self, n: int) -> "RandomAccessCursor":
        return self + n

    def __sub__(self, other: Union[int, "RandomAccessCursor"]) -> Any:
        if isinstance(other, int):
            return self + (-other)
        if isinstance(other, RandomAccessCursor):
            return other.distance_to(self)
        return NotImplemented

    def advance(self, n: int) -> "RandomAccessCursor":
        return self + n

    def next(self) -> "RandomAccessCursor":
        return self + 1

    def prev(self) -> "RandomAccessCursor":
        return self + (-1)

    def __lt__(self, other: "RandomAccessCursor") -> bool:
        return self.distance_to(other) > 0

    def __le__(self, other: "RandomAccessCursor") -> bool:
        return self.distance_to(other) >= 0

    def __gt__(self, other: "RandomAccessCursor") -> bool:
        return self.distance_to(other) < 0

    def __ge__(self, other: "RandomAccessCursor") -> bool:
        return self.distance_to(other) <= 0


F = TypeVar("F", bound=ForwardCursor)
B = TypeVar("B", bound=BidirectionalCursor)
R = TypeVar("R", bound=RandomAccessCursor)
