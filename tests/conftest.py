"""
Shared fixtures and helpers for the rangesort test-suite.

Inserts the project `src/` onto sys.path so tests run without installing the
package.
"""

from __future__ import annotations

import pathlib
import sys
from typing import Any, Callable, Iterator, List, Optional, Sequence, Tuple

import pytest

# Ensure `src/` is importable when running `pytest` from the repo root
_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from rangesort.algorithms import ALGORITHMS, SortAlgorithm  # noqa: E402
from rangesort.constants import CONTAINER_KINDS  # noqa: E402
from rangesort.cursors import full_range  # noqa: E402
from rangesort.datasets import CONTAINER_CAPABILITY, build_container, read_container  # noqa: E402


def supported_pairs() -> Iterator[Tuple[SortAlgorithm, str]]:
    """Every (algorithm, container kind) pair the algorithm's tier allows."""
    for algo in ALGORITHMS.values():
        for kind in CONTAINER_KINDS:
            if algo.supports(CONTAINER_CAPABILITY[kind]):
                yield algo, kind


def unsupported_pairs() -> Iterator[Tuple[SortAlgorithm, str]]:
    for algo in ALGORITHMS.values():
        for kind in CONTAINER_KINDS:
            if not algo.supports(CONTAINER_CAPABILITY[kind]):
                yield algo, kind


def pair_id(pair: Tuple[SortAlgorithm, str]) -> str:
    return f"{pair[0].name}-{pair[1]}"


SUPPORTED = list(supported_pairs())
UNSUPPORTED = list(unsupported_pairs())


def run_sort(
    func: Callable[..., None],
    values: Sequence[Any],
    kind: str = "array",
    pred: Optional[Callable[[Any, Any], bool]] = None,
) -> List[Any]:
    """Sort a fresh container of `kind` holding `values`; return its contents."""
    container = build_container(values, kind)
    first, last = full_range(container)
    if pred is None:
        func(first, last)
    else:
        func(first, last, pred)
    return read_container(container)


@pytest.fixture(params=SUPPORTED, ids=pair_id)
def algo_and_kind(request: pytest.FixtureRequest) -> Tuple[SortAlgorithm, str]:
    return request.param
