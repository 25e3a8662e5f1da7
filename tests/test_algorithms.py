"""
Algorithm-specific behaviour: the partition, heap and merge primitives, the
two heap and shaker strategies, failure behaviour and capability checks.
"""

from __future__ import annotations

import logging
import operator
from typing import Any, List, Tuple

import numpy as np
import pytest

from conftest import UNSUPPORTED, pair_id, run_sort
from rangesort import COMB_SHRINK_FACTOR, sort_container
from rangesort.algorithms import (
    ALGORITHMS,
    SortAlgorithm,
    SurrogateHeap,
    bubble_sort,
    comb_sort,
    find_most_suitable,
    get_algorithm,
    heap_sort,
    insertion_sort,
    make_heap,
    make_partition,
    merge_into,
    merge_sort,
    pop_heap,
    quick_sort,
    selection_sort,
    shaker_sort,
)
from rangesort.buffer import LinearBuffer
from rangesort.cursors import DoublyLinkedList, SinglyLinkedList, full_range
from rangesort.errors import CapabilityError, InvalidRangeError, UnknownAlgorithmError
from rangesort.validate import is_permutation


class Boom(Exception):
    pass


def failing_after(calls: int):
    """A `<` comparator that raises on its `calls`-th invocation."""
    seen = {"n": 0}

    def pred(a: Any, b: Any) -> bool:
        seen["n"] += 1
        if seen["n"] >= calls:
            raise Boom()
        return a < b

    return pred


# ------------------------- scenarios ------------------------- #

def test_shaker_two_elements_bidirectional() -> None:
    assert run_sort(shaker_sort, [2, 1], "linked") == [1, 2]


def test_shaker_two_elements_random_access() -> None:
    assert run_sort(shaker_sort, [2, 1], "array") == [1, 2]


@pytest.mark.parametrize("kind", ["array", "bidirectional", "linked"])
def test_quick_sort_reverse_sorted(kind: str) -> None:
    assert run_sort(quick_sort, [9, 8, 7, 6, 5], kind) == [5, 6, 7, 8, 9]


def test_quick_sort_worst_case_beyond_recursion_limit() -> None:
    a = list(range(1200, 0, -1))
    assert run_sort(quick_sort, a, "array") == sorted(a)


def test_merge_sort_long_linked_list() -> None:
    a = list(range(3000, 0, -1))
    assert run_sort(merge_sort, a, "forward_list") == sorted(a)


@pytest.mark.parametrize("kind", ["array", "linked", "forward_list", "forward"])
def test_heap_sort_all_equal(kind: str) -> None:
    assert run_sort(heap_sort, [4, 4, 4, 4], kind) == [4, 4, 4, 4]


def test_heap_sort_logs_the_strategy(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="rangesort"):
        run_sort(heap_sort, [3, 1, 2], "array")
        run_sort(heap_sort, [3, 1, 2], "linked")
    messages = [r.getMessage() for r in caplog.records]
    assert "heap_sort: in-place binary heap" in messages
    assert "heap_sort: surrogate heap (bidirectional cursors)" in messages


def test_comb_sort_constant() -> None:
    assert COMB_SHRINK_FACTOR == pytest.approx(1.247)


def test_selection_sort_is_not_stable() -> None:
    items = [(1, "a"), (1, "b"), (0, "c")]
    out = run_sort(selection_sort, items, "array", lambda x, y: x[0] < y[0])
    assert out == [(0, "c"), (1, "b"), (1, "a")]


def test_numpy_array_in_place() -> None:
    arr = np.array([5, 3, 8, 1, 9, 2])
    sort_container(arr, "heap_sort")
    assert arr.tolist() == [1, 2, 3, 5, 8, 9]


def test_partial_range_leaves_the_rest_alone() -> None:
    data = [9, 5, 4, 3, 0]
    first, last = full_range(data)
    insertion_sort(first + 1, last - 1)
    assert data == [9, 3, 4, 5, 0]


# ------------------------- primitives ------------------------- #

def test_make_partition_returns_pivot_position() -> None:
    data = [3, 7, 1, 6, 4]
    first, last = full_range(data)
    pivot = make_partition(first, last - 1, operator.lt)
    assert pivot.get() == 4
    assert all(x <= 4 for x in data[: pivot.index])
    assert all(x > 4 for x in data[pivot.index + 1 :])


def test_make_heap_and_pop_heap() -> None:
    data = [3, 9, 1, 7, 5, 2]
    first, last = full_range(data)
    make_heap(first, last, operator.lt)
    assert data[0] == 9
    for i in range(len(data)):
        for child in (2 * i + 1, 2 * i + 2):
            if child < len(data):
                assert not data[i] < data[child]
    pop_heap(first, last, operator.lt)
    assert data[-1] == 9
    assert data[0] == 7


def test_merge_into_prefers_left_on_ties() -> None:
    left = [(1, "L"), (3, "L")]
    right = [(1, "R"), (2, "R")]
    buffer = LinearBuffer(4)
    lf, ll = full_range(left)
    rf, rl = full_range(right)
    end = merge_into(lf, ll, rf, rl, buffer, 0, lambda a, b: a[0] < b[0])
    assert end == 4
    assert [buffer[i] for i in range(4)] == [(1, "L"), (1, "R"), (2, "R"), (3, "L")]


def test_find_most_suitable_returns_first_of_equals() -> None:
    data = [3, 1, 2, 1]
    first, last = full_range(data)
    assert find_most_suitable(first, last, operator.lt) == first + 1


def test_surrogate_heap_keeps_duplicates() -> None:
    heap = SurrogateHeap(operator.gt)
    for v in [2, 5, 2, 9]:
        heap.push(v)
    assert len(heap) == 4
    assert heap.pop() == 9
    assert list(heap.drain()) == [5, 2, 2]
    assert not heap
    with pytest.raises(IndexError):
        heap.pop()


def test_linear_buffer_vacant_slots() -> None:
    buffer = LinearBuffer(2)
    assert buffer.is_vacant(0)
    buffer[0] = "x"
    assert buffer.take(0) == "x"
    assert buffer.is_vacant(0)
    with pytest.raises(LookupError):
        buffer[1]
    buffer.resize(4)
    assert len(buffer) == 4
    buffer[3] = None
    assert buffer[3] is None
    assert buffer.occupied() == 1
    buffer.clear()
    assert buffer.occupied() == 0
    with pytest.raises(ValueError):
        LinearBuffer(-1)


def test_merge_sort_accepts_objects_without_defaults() -> None:
    class Token:
        __slots__ = ("rank",)

        def __init__(self, rank: int) -> None:
            self.rank = rank

    tokens = [Token(r) for r in (3, 1, 2)]
    first, last = full_range(tokens)
    merge_sort(first, last, lambda a, b: a.rank < b.rank)
    assert [t.rank for t in tokens] == [1, 2, 3]


# ------------------------- failures ------------------------- #

@pytest.mark.parametrize("kind", ["array", "linked", "forward_list"])
def test_merge_sort_failure_keeps_a_permutation(kind: str) -> None:
    a = [8, 3, 5, 1, 9, 2, 7, 4, 6]
    container = SinglyLinkedList(a) if kind == "forward_list" else (
        DoublyLinkedList(a) if kind == "linked" else list(a)
    )
    first, last = full_range(container)
    with pytest.raises(Boom):
        merge_sort(first, last, failing_after(12))
    assert is_permutation(a, list(container))


@pytest.mark.parametrize("kind", ["linked", "forward_list"])
def test_surrogate_heap_failure_leaves_input_untouched(kind: str) -> None:
    a = [8, 3, 5, 1, 9, 2]
    container = DoublyLinkedList(a) if kind == "linked" else SinglyLinkedList(a)
    first, last = full_range(container)
    with pytest.raises(Boom):
        heap_sort(first, last, failing_after(5))
    assert list(container) == a


@pytest.mark.parametrize("func", [quick_sort, bubble_sort, comb_sort, insertion_sort, shaker_sort])
def test_swap_based_failure_keeps_a_permutation(func) -> None:
    a = [8, 3, 5, 1, 9, 2, 7]
    data = list(a)
    first, last = full_range(data)
    with pytest.raises(Boom):
        func(first, last, failing_after(6))
    assert is_permutation(a, data)


@pytest.mark.parametrize("pair", UNSUPPORTED, ids=pair_id)
def test_unsupported_tier_is_rejected_before_mutation(pair: Tuple[SortAlgorithm, str]) -> None:
    algo, kind = pair
    with pytest.raises(CapabilityError):
        run_sort(algo.func, [3, 2, 1], kind)


def test_rejected_call_leaves_container_untouched() -> None:
    ll = SinglyLinkedList([3, 2, 1])
    with pytest.raises(CapabilityError):
        quick_sort(*full_range(ll))
    assert list(ll) == [3, 2, 1]


def test_non_cursor_arguments_are_rejected() -> None:
    with pytest.raises(CapabilityError):
        bubble_sort([3, 1], None)  # type: ignore[arg-type]


def test_non_callable_comparator_is_rejected() -> None:
    first, last = full_range([2, 1])
    with pytest.raises(TypeError):
        bubble_sort(first, last, "ascending")  # type: ignore[arg-type]


# ------------------------- registry ------------------------- #

def test_registry_lists_eight_algorithms() -> None:
    assert sorted(ALGORITHMS) == [
        "bubble_sort",
        "comb_sort",
        "heap_sort",
        "insertion_sort",
        "merge_sort",
        "quick_sort",
        "selection_sort",
        "shaker_sort",
    ]


def test_get_algorithm_unknown() -> None:
    with pytest.raises(UnknownAlgorithmError) as info:
        get_algorithm("bogo_sort")
    assert "bogo_sort" in str(info.value)
    assert isinstance(info.value, KeyError)


@pytest.mark.parametrize("name", sorted(ALGORITHMS))
def test_sort_container_key_and_reverse(name: str) -> None:
    ll = DoublyLinkedList(["bb", "a", "cccc", "ddd"])
    if ALGORITHMS[name].supports(full_range(ll)[0].capability):
        sort_container(ll, name, key=len, reverse=True)
        assert list(ll) == ["cccc", "ddd", "bb", "a"]


def test_sort_container_on_forward_list() -> None:
    ll = SinglyLinkedList([3, 1, 2])
    sort_container(ll, "comb_sort")
    assert list(ll) == [1, 2, 3]


@pytest.mark.parametrize("name", sorted(ALGORITHMS))
def test_reversed_bounds_are_rejected_before_mutation(name: str) -> None:
    data = [5, 4, 3, 2, 1]
    first, _ = full_range(data)
    with pytest.raises(InvalidRangeError) as info:
        ALGORITHMS[name].func(first + 3, first)
    assert info.value.details["distance"] == -3
    assert data == [5, 4, 3, 2, 1]
