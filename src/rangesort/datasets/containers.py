"""
Build the containers the algorithms run on from plain Python lists.

Container kinds (see ``rangesort.constants``):
    "array"          the list itself, random-access cursors
    "bidirectional"  SequenceView over a copy, bidirectional cursors
    "forward"        SequenceView over a copy, forward cursors
    "linked"         DoublyLinkedList, bidirectional cursors
    "forward_list"   SinglyLinkedList, forward cursors
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from rangesort.constants import (
    CONTAINER_ARRAY,
    CONTAINER_BIDIRECTIONAL,
    CONTAINER_FORWARD,
    CONTAINER_FORWARD_LIST,
    CONTAINER_KINDS,
    CONTAINER_LINKED,
)
from rangesort.cursors import (
    Capability,
    DoublyLinkedList,
    SequenceView,
    SinglyLinkedList,
)
from rangesort.errors import ConfigError

__all__ = ["CONTAINER_CAPABILITY", "build_container", "read_container"]

CONTAINER_CAPABILITY: Dict[str, Capability] = {
    CONTAINER_ARRAY: Capability.RANDOM_ACCESS,
    CONTAINER_BIDIRECTIONAL: Capability.BIDIRECTIONAL,
    CONTAINER_FORWARD: Capability.FORWARD,
    CONTAINER_LINKED: Capability.BIDIRECTIONAL,
    CONTAINER_FORWARD_LIST: Capability.FORWARD,
}


def build_container(values: Sequence[Any], kind: str) -> Any:
    """Return a fresh container of `kind` holding `values` in order."""
    if kind == CONTAINER_ARRAY:
        return list(values)
    if kind == CONTAINER_BIDIRECTIONAL:
        return SequenceView(list(values), Capability.BIDIRECTIONAL)
    if kind == CONTAINER_FORWARD:
        return SequenceView(list(values), Capability.FORWARD)
    if kind == CONTAINER_LINKED:
        return DoublyLinkedList(values)
    if kind == CONTAINER_FORWARD_LIST:
        return SinglyLinkedList(values)
    raise ConfigError(f"Unknown container kind {kind!r}. Known: {list(CONTAINER_KINDS)}")


def read_container(container: Any) -> List[Any]:
    return list(container)
