"""
Sorting algorithms public API.

Every function sorts the half-open cursor range ``[first, last)`` in place:
    from rangesort.algorithms import merge_sort
    merge_sort(first, last)               # ascending
    merge_sort(first, last, pred)         # pred(a, b): must a precede b?
"""

from .heap import SurrogateHeap, heap_sort, make_heap, pop_heap
from .merge import merge_into, merge_sort
from .quadratic import (
    bubble_sort,
    comb_sort,
    find_most_suitable,
    insertion_sort,
    selection_sort,
    shaker_sort,
)
from .quick import make_partition, quick_sort
from .registry import ALGORITHMS, SortAlgorithm, get_algorithm, sort_container

__all__ = [
    "bubble_sort",
    "shaker_sort",
    "comb_sort",
    "insertion_sort",
    "selection_sort",
    "quick_sort",
    "merge_sort",
    "heap_sort",
    "find_most_suitable",
    "make_partition",
    "merge_into",
    "make_heap",
    "pop_heap",
    "SurrogateHeap",
    "SortAlgorithm",
    "ALGORITHMS",
    "get_algorithm",
    "sort_container",
]
