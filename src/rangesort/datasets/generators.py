"""
Dataset generators for sorting tests and benchmarks.

Currently implemented:
- dist == "random":
    Integer arrays drawn uniformly from an inclusive range.

- dist == "nearly_sorted":
    Start from strictly increasing [0, 1, ..., n-1] then perform
    ceil(swap_frac * n) random index swaps using the provided RNG.

- dist == "few_uniques":
    Fill the array with values drawn from k distinct integers. Heavy
    duplication exercises the tie handling of every algorithm.

- dist == "reversed":
    Deterministic reversed order: [n-1, n-2, ..., 0]. This is the worst case
    for the fixed last-element pivot of quick sort.

- dist == "sorted":
    Deterministic [0, 1, ..., n-1].

- dist == "all_equal":
    n copies of params["value"] (default 0).

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]
    tag_items(values) -> list[tuple[value, int]]

Conventions:
- Ranges in params["range"] are **inclusive** on both ends.
- Returns a Python `list[int]`; algorithms never see NumPy types.
- The caller supplies the RNG (for reproducibility across runs).
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple

import numpy as np

from rangesort.errors import ConfigError

SUPPORTED_DISTS = {
    "random",
    "nearly_sorted",
    "few_uniques",
    "reversed",
    "sorted",
    "all_equal",
}
__all__ = ["SUPPORTED_DISTS", "make_dataset", "tag_items"]

_DEFAULT_RANGE: Tuple[int, int] = (0, 2**31 - 1)


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate an integer dataset according to `spec`, using the provided RNG.

    Parameters
    ----------
    n : int
        Number of elements to generate. Must be >= 0.
    spec : dict
        Distribution specification, e.g.

            {"dist": "random", "params": {"range": [0, 1000]}}
            {"dist": "nearly_sorted", "params": {"swap_frac": 0.05}}
            {"dist": "few_uniques", "params": {"k": 4}}
            {"dist": "reversed"}

    rng : numpy.random.Generator
        Random number generator owned by the caller (seeded upstream).
        Deterministic distributions ignore it.

    Returns
    -------
    list[int]

    Raises
    ------
    ConfigError
        If inputs are invalid or if the distribution is unsupported.
    """
    _validate_n(n)

    if not isinstance(spec, dict):
        raise ConfigError("dataset spec must be a dict")

    dist = spec.get("dist", None)
    if dist not in SUPPORTED_DISTS:
        raise ConfigError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )

    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ConfigError(f"{dist}.params must be a dict")

    if n == 0:
        return []

    if dist == "random":
        lo, hi = _parse_range(params, dist)
        # Generator.integers is half-open; +1 makes `hi` inclusive.
        return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()

    if dist == "nearly_sorted":
        swap_frac = _parse_swap_frac(params)
        arr = list(range(n))
        num_swaps = int(np.ceil(swap_frac * n))
        if num_swaps <= 0:
            return arr
        idxs = rng.integers(0, n, size=2 * num_swaps)
        for k in range(num_swaps):
            i = int(idxs[2 * k])
            j = int(idxs[2 * k + 1])
            arr[i], arr[j] = arr[j], arr[i]
        return arr

    if dist == "few_uniques":
        k = _parse_k(params)
        lo, hi = _parse_range(params, dist, required=False)
        span = hi - lo + 1
        actual_k = int(min(k, n, span))
        values = rng.choice(span, size=actual_k, replace=False) + lo
        picks = rng.integers(0, actual_k, size=n)
        return [int(values[int(t)]) for t in picks]

    if dist == "reversed":
        return list(range(n - 1, -1, -1))

    if dist == "sorted":
        return list(range(n))

    if dist == "all_equal":
        value = params.get("value", 0)
        if not _is_int_like(value):
            raise ConfigError("all_equal.params.value must be an integer")
        return [int(value)] * n

    # Unreachable given the check above.
    raise ConfigError(f"Unhandled dataset dist: {dist!r}")


def tag_items(values: Sequence[Any]) -> List[Tuple[Any, int]]:
    """
    Pair each value with its input position: [(v0, 0), (v1, 1), ...].

    Sort the result with a comparator on the first field only; a stable
    algorithm keeps the tags of equal values increasing.
    """
    return [(v, i) for i, v in enumerate(values)]


# ------------------------- helpers ------------------------- #


def _validate_n(n: int) -> None:
    if not isinstance(n, int) or isinstance(n, bool):
        raise ConfigError("n must be an int")
    if n < 0:
        raise ConfigError("n must be nonnegative")


def _is_int_like(x: Any) -> bool:
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)


def _parse_range(params: Dict[str, Any], dist: str, required: bool = True) -> Tuple[int, int]:
    """
    Parse params["range"] == [min_int, max_int] (both inclusive).

    When `required` is False a missing range means the default 31-bit range.
    """
    if "range" not in params:
        if required:
            raise ConfigError(f"{dist}.params.range must be provided as [min, max] (inclusive)")
        return _DEFAULT_RANGE

    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ConfigError(f"{dist}.params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ConfigError(f"{dist}.params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ConfigError(f"{dist}.params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    """Parse swap_frac in [0.0, 1.0] for nearly_sorted; default 0.05."""
    val = params.get("swap_frac", 0.05)
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ConfigError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {val!r}"
        ) from e
    if not (0.0 <= x <= 1.0):
        raise ConfigError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}")
    return x


def _parse_k(params: Dict[str, Any]) -> int:
    if "k" not in params:
        raise ConfigError("few_uniques.params.k must be provided (int >= 1)")
    k = params["k"]
    if not _is_int_like(k) or k < 1:
        raise ConfigError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    return int(k)
