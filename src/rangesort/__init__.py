"""
rangesort: in-place comparison sorts over cursor ranges.

    from rangesort import merge_sort, full_range
    data = [5, 3, 8, 1]
    merge_sort(*full_range(data))

    from rangesort import sort_container, DoublyLinkedList
    items = DoublyLinkedList([3, 1, 2])
    sort_container(items, "quick_sort")
"""

import logging

from .algorithms import (
    ALGORITHMS,
    SortAlgorithm,
    bubble_sort,
    comb_sort,
    get_algorithm,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
    shaker_sort,
    sort_container,
)
from .compare import Comparator, make_comparator
from .constants import COMB_SHRINK_FACTOR
from .cursors import (
    Capability,
    DoublyLinkedList,
    SequenceView,
    SinglyLinkedList,
    full_range,
)
from .errors import (
    CapabilityError,
    ConfigError,
    InvalidRangeError,
    RangeSortError,
    UnknownAlgorithmError,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "bubble_sort",
    "shaker_sort",
    "comb_sort",
    "insertion_sort",
    "selection_sort",
    "quick_sort",
    "merge_sort",
    "heap_sort",
    "ALGORITHMS",
    "SortAlgorithm",
    "get_algorithm",
    "sort_container",
    "Comparator",
    "make_comparator",
    "COMB_SHRINK_FACTOR",
    "Capability",
    "SequenceView",
    "SinglyLinkedList",
    "DoublyLinkedList",
    "full_range",
    "RangeSortError",
    "CapabilityError",
    "InvalidRangeError",
    "UnknownAlgorithmError",
    "ConfigError",
]
