"""
Algorithm registry.

``ALGORITHMS`` maps each public name to a ``SortAlgorithm`` record telling
callers (the benchmark runner, the tests) what cursor tier an algorithm
needs and what it guarantees.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, NamedTuple, Optional

from rangesort.algorithms.heap import heap_sort
from rangesort.algorithms.merge import merge_sort
from rangesort.algorithms.quadratic import (
    bubble_sort,
    comb_sort,
    insertion_sort,
    selection_sort,
    shaker_sort,
)
from rangesort.algorithms.quick import quick_sort
from rangesort.compare import Comparator, make_comparator
from rangesort.cursors.base import Capability
from rangesort.cursors.ops import full_range
from rangesort.errors import UnknownAlgorithmError

__all__ = ["SortAlgorithm", "ALGORITHMS", "get_algorithm", "sort_container"]

logger = logging.getLogger(__name__)


class SortAlgorithm(NamedTuple):
    name: str
    func: Callable[..., None]
    min_capability: Capability
    stable: bool
    allocates: bool = False

    def supports(self, capability: Capability) -> bool:
        return capability >= self.min_capability


ALGORITHMS: Dict[str, SortAlgorithm] = {
    a.name: a
    for a in (
        SortAlgorithm("bubble_sort", bubble_sort, Capability.FORWARD, stable=True),
        SortAlgorithm("shaker_sort", shaker_sort, Capability.BIDIRECTIONAL, stable=True),
        SortAlgorithm("comb_sort", comb_sort, Capability.FORWARD, stable=False),
        SortAlgorithm("insertion_sort", insertion_sort, Capability.BIDIRECTIONAL, stable=True),
        SortAlgorithm("selection_sort", selection_sort, Capability.FORWARD, stable=False),
        SortAlgorithm("quick_sort", quick_sort, Capability.BIDIRECTIONAL, stable=False),
        SortAlgorithm("merge_sort", merge_sort, Capability.FORWARD, stable=True, allocates=True),
        SortAlgorithm("heap_sort", heap_sort, Capability.FORWARD, stable=False, allocates=True),
    )
}


def get_algorithm(name: str) -> SortAlgorithm:
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise UnknownAlgorithmError(
            f"Unknown algorithm {name!r}. Known: {sorted(ALGORITHMS)}",
            details={"name": name},
        ) from None


def sort_container(
    container: Any,
    algorithm: str = "merge_sort",
    pred: Optional[Comparator] = None,
    *,
    key: Optional[Callable[[Any], Any]] = None,
    reverse: bool = False,
) -> None:
    """
    Sort a whole container in place with the named algorithm.

    ``container`` is anything ``full_range`` accepts: an indexable sequence,
    a ``SequenceView``, or a linked list.
    """
    algo = get_algorithm(algorithm)
    first, last = full_range(container)
    logger.debug("sort_container: %s on %s", algo.name, type(container).__name__)
    algo.func(first, last, make_comparator(pred, key=key, reverse=reverse))
