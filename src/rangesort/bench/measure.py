"""
Timing harness for sorting algorithms.

We measure exactly one `algo(first, last, pred)` call per sample, using a
monotonic high-resolution clock. Building the container, GC and validation
happen outside the timed block to keep measurements clean.

Public API (stable):
    time_sort_call(... ) -> dict

Returned dict schema:
    {
        "algo": str,
        "container": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns for each successful sample
        "status": "ok" | "timeout" | "error" | "invalid",
        "error": str | None,                # populated unless status == "ok"
        "timed_out_on_repeat": int | None,  # 0-based repeat index if timeout occurred
    }
"""

from __future__ import annotations

import gc
import logging
import time
from typing import Any, Callable, Dict, List, Optional

from rangesort.compare import Comparator
from rangesort.cursors import full_range
from rangesort.datasets import build_container, read_container
from rangesort.validate import first_order_violation, is_permutation

__all__ = ["time_sort_call"]

logger = logging.getLogger(__name__)


def _check_output(a: List[Any], out: List[Any], pred: Optional[Comparator]) -> Optional[str]:
    i = first_order_violation(out, pred)
    if i is not None:
        return f"out of order at i={i}: {out[i]!r} then {out[i + 1]!r}"
    if not is_permutation(a, out):
        return "output is not a permutation of the input"
    return None


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., None],
    a: List[Any],
    container: str,
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    validate: bool = True,
    pred: Optional[Comparator] = None,
) -> Dict[str, Any]:
    """
    Time repeated calls to `algo_fn(first, last, pred)` over fresh containers.

    Parameters
    ----------
    algo_name : str
        Logical name of the algorithm (for logs/records).
    algo_fn : Callable
        One of the rangesort entry points.
    a : list
        Input values. Never mutated; each sample sorts its own container.
    container : str
        Container kind passed to `build_container`.
    repeats : int
        Number of timed samples to collect.
    warmup : bool
        If True, make one untimed call before timing.
    disable_gc : bool
        If True, collect and disable Python GC during the timed loop; restore afterward.
    timeout_seconds : float
        Per-sample threshold. A sample above it marks status="timeout" and
        stops further sampling.
    validate : bool
        If True, check order and permutation after every sample.
    pred : callable, optional
        Comparator passed through to the algorithm.

    Returns
    -------
    dict
        See module docstring for exact schema.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    result: Dict[str, Any] = {
        "algo": algo_name,
        "container": container,
        "repeats": repeats,
        "samples_ns": [],  # type: List[int]
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }

    # ---- Warmup (outside GC disable & outside timed block) ----
    if warmup and repeats > 0:
        try:
            algo_fn(*full_range(build_container(a, container)), pred)
        except Exception as e:  # pragma: no cover
            logger.warning("%s/%s: warmup failed: %r", algo_name, container, e)
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    # ---- GC control ----
    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        # ---- Timed loop ----
        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            try:
                # Prepare input OUTSIDE the timed block
                target = build_container(a, container)
                first, last = full_range(target)

                t0 = time.perf_counter_ns()
                algo_fn(first, last, pred)
                t1 = time.perf_counter_ns()
            except Exception as e:  # pragma: no cover
                logger.warning("%s/%s: run failed at repeat %d: %r", algo_name, container, r, e)
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = t1 - t0
            result["samples_ns"].append(int(elapsed))

            if validate:
                problem = _check_output(a, read_container(target), pred)
                if problem is not None:
                    logger.error("%s/%s: %s", algo_name, container, problem)
                    result["status"] = "invalid"
                    result["error"] = problem
                    break

            if elapsed > threshold_ns:
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break

    finally:
        # Leave GC disabled if the caller had it disabled.
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result
