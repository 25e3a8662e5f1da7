"""
Tests for cursor tiers, containers and traversal primitives.
"""

from __future__ import annotations

import array

import numpy as np
import pytest

from rangesort.cursors import (
    Capability,
    DoublyLinkedList,
    SequenceCursor,
    SequenceView,
    SinglyLinkedList,
    advance,
    capability_of,
    distance,
    full_range,
    iter_swap,
    require_capability,
    rotate,
    sequence_range,
)
from rangesort.errors import CapabilityError, InvalidRangeError


# ------------------------- capability tags ------------------------- #

@pytest.mark.parametrize(
    "container, expected",
    [
        ([1, 2, 3], Capability.RANDOM_ACCESS),
        (SequenceView([1, 2, 3], Capability.BIDIRECTIONAL), Capability.BIDIRECTIONAL),
        (SequenceView([1, 2, 3], Capability.FORWARD), Capability.FORWARD),
        (DoublyLinkedList([1, 2, 3]), Capability.BIDIRECTIONAL),
        (SinglyLinkedList([1, 2, 3]), Capability.FORWARD),
    ],
)
def test_capability_of_each_container(container, expected) -> None:
    first, last = full_range(container)
    assert capability_of(first) is expected
    assert capability_of(last) is expected


def test_capabilities_are_ordered() -> None:
    assert Capability.FORWARD < Capability.BIDIRECTIONAL < Capability.RANDOM_ACCESS
    assert Capability.RANDOM_ACCESS.label == "random-access"


def test_capability_of_rejects_non_cursors() -> None:
    with pytest.raises(CapabilityError):
        capability_of(3)


def test_full_range_rejects_unsupported_objects() -> None:
    with pytest.raises(CapabilityError):
        full_range({1, 2, 3})


def test_full_range_cannot_upgrade_a_linked_list() -> None:
    with pytest.raises(CapabilityError):
        full_range(SinglyLinkedList([1]), Capability.BIDIRECTIONAL)


# ------------------------- require_capability ------------------------- #

def test_require_capability_returns_tier() -> None:
    first, last = full_range([1, 2])
    assert require_capability(first, last, Capability.FORWARD, "t") is Capability.RANDOM_ACCESS


def test_require_capability_too_weak() -> None:
    first, last = full_range(SinglyLinkedList([1, 2]))
    with pytest.raises(CapabilityError) as info:
        require_capability(first, last, Capability.BIDIRECTIONAL, "insertion_sort")
    assert "insertion_sort requires bidirectional" in str(info.value)
    assert info.value.details["got"] == "forward"


def test_require_capability_mixed_tiers() -> None:
    data = [1, 2]
    first, _ = sequence_range(data, Capability.RANDOM_ACCESS)
    _, last = sequence_range(data, Capability.FORWARD)
    with pytest.raises(CapabilityError):
        require_capability(first, last, Capability.FORWARD, "t")


def test_require_capability_different_containers() -> None:
    first, _ = full_range([1, 2])
    _, last = full_range([1, 2])
    with pytest.raises(InvalidRangeError):
        require_capability(first, last, Capability.FORWARD, "t")


def test_capability_error_is_a_type_error() -> None:
    assert issubclass(CapabilityError, TypeError)
    assert issubclass(InvalidRangeError, ValueError)


# ------------------------- sequence cursors ------------------------- #

def test_random_access_arithmetic() -> None:
    data = [10, 20, 30, 40]
    first, last = full_range(data)
    assert isinstance(first, SequenceCursor)
    assert last - first == 4
    assert (first + 2).get() == 30
    assert (last - 1).get() == 40
    assert (2 + first).get() == 30
    assert first < last and first <= first and last > first and last >= last
    assert first.next().prev() == first
    assert first.advance(3) == last - 1


def test_random_access_offsets_stay_inside_the_sequence() -> None:
    data = [1, 2, 3]
    first, last = full_range(data)
    with pytest.raises(InvalidRangeError):
        first - 1
    with pytest.raises(InvalidRangeError):
        last.next()
    with pytest.raises(InvalidRangeError):
        first.prev()
    assert (first + 3) == last


def test_random_access_distance_across_containers_fails() -> None:
    a, _ = full_range([1])
    b, _ = full_range([1])
    with pytest.raises(InvalidRangeError):
        _ = a - b


def test_set_writes_through() -> None:
    data = [1, 2, 3]
    first, _ = full_range(data)
    (first + 1).set(99)
    assert data == [1, 99, 3]


def test_forward_view_cannot_step_back() -> None:
    first, last = full_range(SequenceView([1, 2, 3], Capability.FORWARD))
    assert not hasattr(first, "prev")
    with pytest.raises(CapabilityError):
        advance(last, -1)


def test_forward_view_cannot_run_past_end() -> None:
    _, last = full_range(SequenceView([1, 2], Capability.FORWARD))
    with pytest.raises(InvalidRangeError):
        last.next()


def test_bidirectional_view_walks_both_ways() -> None:
    first, last = full_range(SequenceView([1, 2, 3], Capability.BIDIRECTIONAL))
    assert distance(first, last) == 3
    assert advance(last, -3) == first
    assert last.prev().get() == 3
    with pytest.raises(InvalidRangeError):
        first.prev()


def test_cursors_are_hashable_values() -> None:
    data = [1, 2]
    first, _ = full_range(data)
    assert hash(first.next()) == hash(first + 1)
    assert len({first, first + 0, first.next()}) == 2


@pytest.mark.parametrize(
    "seq",
    [array.array("i", [3, 1, 2]), np.array([3, 1, 2])],
    ids=["array.array", "numpy"],
)
def test_other_indexable_sequences(seq) -> None:
    first, last = full_range(seq)
    assert distance(first, last) == 3
    iter_swap(first, first + 1)
    assert list(seq) == [1, 3, 2]


# ------------------------- linked lists ------------------------- #

def test_singly_linked_list_basics() -> None:
    ll = SinglyLinkedList([2, 3])
    ll.push_front(1)
    ll.append(4)
    assert list(ll) == [1, 2, 3, 4]
    assert len(ll) == 4
    first, last = full_range(ll)
    assert distance(first, last) == 4
    assert advance(first, 4) == last
    with pytest.raises(InvalidRangeError):
        last.get()
    with pytest.raises(InvalidRangeError):
        last.next()


def test_empty_linked_lists() -> None:
    for ll in (SinglyLinkedList(), DoublyLinkedList()):
        first, last = full_range(ll)
        assert first == last
        assert distance(first, last) == 0


def test_doubly_linked_list_basics() -> None:
    dl = DoublyLinkedList([2, 3])
    dl.appendleft(1)
    dl.append(4)
    assert list(dl) == [1, 2, 3, 4]
    assert list(reversed(dl)) == [4, 3, 2, 1]
    first, last = full_range(dl)
    assert last.prev().get() == 4
    assert advance(last, -4) == first
    assert distance(first, last) == 4
    with pytest.raises(InvalidRangeError):
        first.prev()
    with pytest.raises(InvalidRangeError):
        last.set(0)


def test_cursors_of_different_lists_differ() -> None:
    a = DoublyLinkedList([1])
    b = DoublyLinkedList([1])
    assert a.end() != b.end()
    assert a.end() == a.end()


# ------------------------- iter_swap / rotate ------------------------- #

def test_iter_swap_on_linked_list() -> None:
    ll = SinglyLinkedList([1, 2, 3])
    first, _ = full_range(ll)
    iter_swap(first, advance(first, 2))
    assert list(ll) == [3, 2, 1]


@pytest.mark.parametrize("mid", range(0, 7))
def test_rotate_matches_slicing(mid: int) -> None:
    data = list("abcdef")
    expected = data[mid:] + data[:mid]
    ll = SinglyLinkedList(data)
    first, last = full_range(ll)
    result = rotate(first, advance(first, mid), last)
    assert list(ll) == expected
    # The old first element lands len - mid slots in (or at `last` for mid == 0)
    if mid == 0:
        assert result == last
    else:
        assert result == advance(first, len(data) - mid)
        assert result.get() == "a"


def test_rotate_single_element_to_front() -> None:
    data = [1, 2, 3, 4, 0]
    first, last = full_range(data)
    rotate(first, last - 1, last)
    assert data == [0, 1, 2, 3, 4]


def test_rotate_long_range_does_not_recurse() -> None:
    data = list(range(5000))
    first, last = full_range(data)
    rotate(first, last - 1, last)
    assert data == [4999] + list(range(4999))
