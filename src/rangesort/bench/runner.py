"""
Experiment runner: orchestrates a full benchmarking sweep from a YAML config.

Usage (from repo root):
    python -m rangesort.bench.runner experiments/configs/01_tier_scaling.yaml
    rangesort-bench experiments/configs/01_tier_scaling.yaml

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # environment info (python, numpy, cpu/ram, git commit)
    - results.jsonl           # one JSON line per timing sample or status event
    - summary.csv             # median + IQR per (algo, container, n)
    - (console) rich/tqdm summaries

Design notes:
- For each size n, we generate ONE dataset and give the same input to every
  (algorithm, container) pair.
- An algorithm is only run on containers whose cursor tier it supports;
  the others are recorded once as "skipped".
- On timeout/error for a pair at size n, we skip larger sizes for that pair.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from tqdm import tqdm

from rangesort.algorithms import SortAlgorithm, get_algorithm
from rangesort.bench.measure import time_sort_call
from rangesort.constants import CONTAINER_KINDS, LOGGER_NAME
from rangesort.datasets import CONTAINER_CAPABILITY, make_dataset
from rangesort.errors import ConfigError, UnknownAlgorithmError

__all__ = ["run_experiment", "load_config", "main"]

logger = logging.getLogger(__name__)
_console = Console()

REQUIRED_KEYS = [
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "dataset",
    "sizes",
    "containers",
    "algorithms",
]

_SUMMARY_COLUMNS = ["algo", "container", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns"]


# ------------------------- data structures ------------------------- #

@dataclass(frozen=True)
class ExperimentConfig:
    experiment_name: str
    output_dir: Path
    seed: int
    repeats: int
    warmup: bool
    disable_gc: bool
    timeout_seconds: float
    dataset: Dict[str, Any]
    sizes: List[int]
    containers: List[str]
    algorithms: List[SortAlgorithm]
    validate: bool = True
    log_level: str = "INFO"


# ------------------------- helpers: IO & meta ------------------------- #

def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    return data


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _timestamp() -> str:
    return _dt.datetime.now().strftime("%Y%m%d_%H%M%S")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    run_dir = base_dir / f"{_timestamp()}_{experiment_name}"
    suffix = 1
    while run_dir.exists():
        suffix += 1
        run_dir = base_dir / f"{_timestamp()}_{experiment_name}_{suffix}"
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
        return out.decode("utf-8").strip()
    except (OSError, subprocess.CalledProcessError):
        return None


def _gather_meta() -> Dict[str, Any]:
    import platform
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


# ------------------------- config ------------------------- #

def _resolve_algorithms(cfg_algos: List[Any]) -> List[SortAlgorithm]:
    algos: List[SortAlgorithm] = []
    seen = set()
    for entry in cfg_algos:
        name = entry.get("name") if isinstance(entry, dict) else entry
        if not name or not isinstance(name, str):
            raise ConfigError("Each algorithm must be a name or a mapping with a string 'name' field")
        if name in seen:
            raise ConfigError(f"Duplicate algorithm name in config: {name}")
        seen.add(name)
        try:
            algos.append(get_algorithm(name))
        except UnknownAlgorithmError as e:
            raise ConfigError(str(e)) from e
    return algos


def load_config(cfg: Dict[str, Any]) -> ExperimentConfig:
    """Validate a raw config mapping and resolve algorithm names."""
    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ConfigError(f"Missing required config keys: {missing}", details={"missing": missing})

    sizes = list(cfg["sizes"] or [])
    if not sizes or any(not isinstance(n, int) or n < 0 for n in sizes):
        raise ConfigError("Config 'sizes' must be a non-empty list of nonnegative integers")

    containers = list(cfg["containers"] or [])
    unknown = [c for c in containers if c not in CONTAINER_KINDS]
    if not containers or unknown:
        raise ConfigError(f"Config 'containers' must list kinds from {list(CONTAINER_KINDS)}; bad: {unknown}")

    if not isinstance(cfg["dataset"], dict):
        raise ConfigError("Config 'dataset' must be a mapping")
    if not isinstance(cfg["algorithms"], list) or not cfg["algorithms"]:
        raise ConfigError("Config 'algorithms' must be a non-empty list")

    try:
        return ExperimentConfig(
            experiment_name=str(cfg["experiment_name"]),
            output_dir=Path(cfg["output_dir"]),
            seed=int(cfg["seed"]),
            repeats=int(cfg["repeats"]),
            warmup=bool(cfg["warmup"]),
            disable_gc=bool(cfg["disable_gc"]),
            timeout_seconds=float(cfg["timeout_seconds"]),
            dataset=dict(cfg["dataset"]),
            sizes=sizes,
            containers=containers,
            algorithms=_resolve_algorithms(cfg["algorithms"]),
            validate=bool(cfg.get("validate", True)),
            log_level=str(cfg.get("log_level", "INFO")).upper(),
        )
    except ConfigError:
        raise
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid config value: {e}") from e


# ------------------------- summary ------------------------- #

def _iqr_ns(group: pd.DataFrame) -> int:
    q1 = group["time_ns"].quantile(0.25)
    q3 = group["time_ns"].quantile(0.75)
    return int(q3 - q1)


def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    if not jsonl_path.exists():
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)
    # Only successful samples carry time_ns
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)
    df = df.astype({"n": "int64", "time_ns": "int64"})

    keys = ["algo", "container", "n"]
    agg = (
        df.groupby(keys, as_index=False)
        .agg(
            samples_ok=("time_ns", "count"),
            median_ns=("time_ns", "median"),
            min_ns=("time_ns", "min"),
            max_ns=("time_ns", "max"),
        )
    )
    iqr_vals = (
        df.groupby(keys)[["time_ns"]]
        .apply(_iqr_ns)
        .rename("iqr_ns")
        .reset_index()
    )
    out = agg.merge(iqr_vals, on=keys, how="left")
    out[["median_ns", "min_ns", "max_ns", "iqr_ns"]] = out[["median_ns", "min_ns", "max_ns", "iqr_ns"]].astype("int64")
    return out[_SUMMARY_COLUMNS].sort_values(keys, ignore_index=True)


def _print_rich_summary(summary: pd.DataFrame, sizes: List[int]) -> None:
    table = Table(title="Benchmark Summary (median ± IQR in ms)")
    table.add_column("Algorithm", style="bold")
    table.add_column("Container")
    picks: List[Tuple[str, int]] = []
    for n in dict.fromkeys([sizes[0], sizes[len(sizes) // 2], sizes[-1]]):
        picks.append((f"n={n}", n))
        table.add_column(f"n={n}", justify="right")

    def _format_cell(median_ns: int, iqr_ns: int) -> str:
        return f"{median_ns / 1e6:.2f} ± {iqr_ns / 1e6:.2f}"

    if not summary.empty:
        for (algo, container), rows in summary.groupby(["algo", "container"], sort=True):
            row = [f"[bold]{algo}[/]", str(container)]
            for _, npick in picks:
                s = rows[rows["n"] == npick]
                if s.empty:
                    row.append("-")
                else:
                    row.append(_format_cell(int(s["median_ns"].values[0]), int(s["iqr_ns"].values[0])))
            table.add_row(*row)
    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path) -> Path:
    return _run_loaded(_load_yaml(Path(config_path)))


def _run_loaded(raw: Dict[str, Any]) -> Path:
    cfg = load_config(raw)

    run_dir = _ensure_run_dir(cfg.output_dir, cfg.experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    # Persist resolved config early
    _write_yaml(raw, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    logger.info("Run directory: %s", run_dir)
    logger.info("Algorithms: %s", ", ".join(a.name for a in cfg.algorithms))
    logger.info("Containers: %s", ", ".join(cfg.containers))

    rng = np.random.default_rng(cfg.seed)

    # Pairs the algorithm's minimum tier rules out, recorded once
    pairs: List[Tuple[SortAlgorithm, str]] = []
    for algo in cfg.algorithms:
        for kind in cfg.containers:
            if algo.supports(CONTAINER_CAPABILITY[kind]):
                pairs.append((algo, kind))
            else:
                logger.info("skip %s on %s: needs %s cursors", algo.name, kind, algo.min_capability.label)
                _append_jsonl(
                    {"algo": algo.name, "container": kind, "status": "skipped",
                     "needs": algo.min_capability.label},
                    results_path,
                )

    # Per-pair skip flags (set on timeout/error)
    stopped = {(a.name, k): False for a, k in pairs}

    for n in tqdm(cfg.sizes, desc="Sizes", unit="n"):
        base_a = make_dataset(int(n), cfg.dataset, rng)

        for algo, kind in pairs:
            if stopped[(algo.name, kind)]:
                continue

            res = time_sort_call(
                algo_name=algo.name,
                algo_fn=algo.func,
                a=base_a,
                container=kind,
                repeats=cfg.repeats,
                warmup=cfg.warmup,
                disable_gc=cfg.disable_gc,
                timeout_seconds=cfg.timeout_seconds,
                validate=cfg.validate,
            )

            for trial_idx, t_ns in enumerate(res["samples_ns"]):
                _append_jsonl(
                    {
                        "algo": algo.name,
                        "container": kind,
                        "n": int(n),
                        "dataset": cfg.dataset,
                        "trial": int(trial_idx),
                        "time_ns": int(t_ns),
                    },
                    results_path,
                )

            status = res.get("status", "ok")
            if status != "ok":
                stopped[(algo.name, kind)] = True
                logger.warning("%s on %s stopped at n=%d: %s", algo.name, kind, n, status)
                _append_jsonl(
                    {
                        "algo": algo.name,
                        "container": kind,
                        "n": int(n),
                        "status": status,
                        "error": res.get("error"),
                        "timed_out_on_repeat": res.get("timed_out_on_repeat"),
                    },
                    results_path,
                )

    summary_df = _aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)

    _print_rich_summary(summary_df, cfg.sizes)
    logger.info("Wrote %s, %s, %s, %s", results_path, summary_path, meta_path, cfg_resolved_path)
    return run_dir


# ------------------------- CLI ------------------------- #

def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_console, rich_tracebacks=True)],
    )
    logging.getLogger(LOGGER_NAME).setLevel(level)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run a sorting benchmark experiment from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    p.add_argument("--log-level", default=None, help="Override the config's log_level (DEBUG, INFO, ...)")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        raw = _load_yaml(config_path)
        configure_logging(str(args.log_level or raw.get("log_level", "INFO")).upper())
        _run_loaded(raw)
    except ConfigError as e:
        logger.error("Invalid config %s: %s", config_path, e)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
