"""
Benchmark package public API.

    from rangesort.bench import run_experiment, time_sort_call
"""

from .measure import time_sort_call
from .runner import load_config, main, run_experiment

__all__ = ["time_sort_call", "run_experiment", "load_config", "main"]
