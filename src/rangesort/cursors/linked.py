"""
Linked-list containers and their cursors.

``SinglyLinkedList`` only offers forward cursors and ``DoublyLinkedList``
offers bidirectional ones, which makes them the natural inputs for the
non-random-access code paths. Sorting moves values between nodes; the node
chain itself is never relinked.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from rangesort.cursors.base import BidirectionalCursor, ForwardCursor
from rangesort.errors import InvalidRangeError

__all__ = [
    "SinglyLinkedList",
    "DoublyLinkedList",
    "ForwardListCursor",
    "ListCursor",
]


class _Node:
    __slots__ = ("value", "next", "prev")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.next: Optional[_Node] = None
        self.prev: Optional[_Node] = None


# ------------------------- singly linked ------------------------- #


class ForwardListCursor(ForwardCursor):
    """Cursor of a ``SinglyLinkedList``; ``node is None`` marks the end."""

    __slots__ = ("_owner", "_node")

    def __init__(self, owner: "SinglyLinkedList", node: Optional[_Node]) -> None:
        self._owner = owner
        self._node = node

    @property
    def container(self) -> "SinglyLinkedList":
        return self._owner

    def _checked(self) -> _Node:
        if self._node is None:
            raise InvalidRangeError("end cursor cannot be dereferenced")
        return self._node

    def get(self) -> Any:
        return self._checked().value

    def set(self, value: Any) -> None:
        self._checked().value = value

    def next(self) -> "ForwardListCursor":
        if self._node is None:
            raise InvalidRangeError("cannot advance past the end of the list")
        return ForwardListCursor(self._owner, self._node.next)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ForwardListCursor):
            return NotImplemented
        return other._owner is self._owner and other._node is self._node

    def __hash__(self) -> int:
        return hash((id(self._owner), id(self._node)))


class SinglyLinkedList:
    """Singly linked list with O(1) append."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def push_front(self, value: Any) -> None:
        node = _Node(value)
        node.next = self._head
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def begin(self) -> ForwardListCursor:
        return ForwardListCursor(self, self._head)

    def end(self) -> ForwardListCursor:
        return ForwardListCursor(self, None)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"


# ------------------------- doubly linked ------------------------- #


class ListCursor(BidirectionalCursor):
    """Cursor of a ``DoublyLinkedList``; the sentinel node marks the end."""

    __slots__ = ("_owner", "_node")

    def __init__(self, owner: "DoublyLinkedList", node: _Node) -> None:
        self._owner = owner
        self._node = node

    @property
    def container(self) -> "DoublyLinkedList":
        return self._owner

    def _checked(self) -> _Node:
        if self._node is self._owner._sentinel:
            raise InvalidRangeError("end cursor cannot be dereferenced")
        return self._node

    def get(self) -> Any:
        return self._checked().value

    def set(self, value: Any) -> None:
        self._checked().value = value

    def next(self) -> "ListCursor":
        if self._node is self._owner._sentinel:
            raise InvalidRangeError("cannot advance past the end of the list")
        return ListCursor(self._owner, self._node.next)  # type: ignore[arg-type]

    def prev(self) -> "ListCursor":
        node = self._node.prev
        if node is self._owner._sentinel:
            raise InvalidRangeError("cannot step before the start of the list")
        return ListCursor(self._owner, node)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListCursor):
            return NotImplemented
        return other._owner is self._owner and other._node is self._node

    def __hash__(self) -> int:
        return hash((id(self._owner), id(self._node)))


class DoublyLinkedList:
    """Circular doubly linked list around a sentinel node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._sentinel = _Node()
        self._sentinel.next = self._sentinel.prev = self._sentinel
        self._size = 0
        for value in values:
            self.append(value)

    def _link_before(self, anchor: _Node, value: Any) -> None:
        node = _Node(value)
        node.prev = anchor.prev
        node.next = anchor
        anchor.prev.next = node  # type: ignore[union-attr]
        anchor.prev = node
        self._size += 1

    def append(self, value: Any) -> None:
        self._link_before(self._sentinel, value)

    def appendleft(self, value: Any) -> None:
        self._link_before(self._sentinel.next, value)  # type: ignore[arg-type]

    def begin(self) -> ListCursor:
        return ListCursor(self, self._sentinel.next)  # type: ignore[arg-type]

    def end(self) -> ListCursor:
        return ListCursor(self, self._sentinel)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._sentinel.next
        while node is not self._sentinel:
            yield node.value  # type: ignore[union-attr]
            node = node.next  # type: ignore[union-attr]

    def __reversed__(self) -> Iterator[Any]:
        node = self._sentinel.prev
        while node is not self._sentinel:
            yield node.value  # type: ignore[union-attr]
            node = node.prev  # type: ignore[union-attr]

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"
