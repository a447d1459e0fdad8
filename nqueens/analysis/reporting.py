"""CSV export utilities for benchmark outputs (per-run records and summaries).

Per-run records are flattened into a ``pandas.DataFrame`` with one row per
(algorithm, N); summaries aggregate each algorithm over all N values.
Filenames carry the optional run tag/date suffix from ``settings``.
"""
from __future__ import annotations

import os
from typing import Any, Dict, List

import pandas as pd

from . import settings
from .stats import ExperimentResults, compute_grouped_statistics
from nqueens.utils import format_positions


def build_suffix() -> str:
    """Return ``_<RUN_TAG>_<RUN_ID>`` according to settings (or empty)."""
    parts: List[str] = []
    if settings.RUN_TAG:
        parts.append(str(settings.RUN_TAG))
    if settings.DATE_IN_FILENAMES and settings.RUN_ID:
        parts.append(str(settings.RUN_ID))
    return ("_" + "_".join(parts)) if parts else ""


def results_to_dataframe(results: ExperimentResults) -> pd.DataFrame:
    """Flatten results into one row per (algorithm, N), sorted by N then algorithm."""
    rows: List[Dict[str, Any]] = []
    for label, per_n in results.items():
        for N, record in per_n.items():
            rows.append({
                "algorithm": label,
                "n": N,
                "success": record["success"],
                "exhausted": record["exhausted"],
                "timeout": record["timeout"],
                "iterations": record["iterations"],
                "evaluations": record["evals"],
                "time_seconds": record["time"],
                "initial_fitness": record["initial_fitness"],
                "final_fitness": record["final_fitness"],
                "positions": format_positions(record["positions"]),
            })
    columns = [
        "algorithm", "n", "success", "exhausted", "timeout", "iterations",
        "evaluations", "time_seconds", "initial_fitness", "final_fitness", "positions",
    ]
    frame = pd.DataFrame(rows, columns=columns)
    if not frame.empty:
        frame = frame.sort_values(["n", "algorithm"]).reset_index(drop=True)
    return frame


def save_raw_data_to_csv(results: ExperimentResults, out_dir: str) -> str:
    """Write one row per run to ``raw_runs<suffix>.csv`` and return the path."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"raw_runs{build_suffix()}.csv")
    results_to_dataframe(results).to_csv(filename, index=False)
    print(f"Raw data saved to: {filename}")
    return filename


def save_summary_to_csv(results: ExperimentResults, out_dir: str) -> str:
    """Write per-algorithm aggregates to ``summary<suffix>.csv`` and return the path.

    Columns follow lowercase snake_case: ``success_rate``, then mean/std of
    each metric over all runs and mean over successful runs only.
    """
    os.makedirs(out_dir, exist_ok=True)
    rows: List[Dict[str, Any]] = []
    for label, per_n in results.items():
        stats = compute_grouped_statistics(list(per_n.values()))
        row: Dict[str, Any] = {
            "algorithm": label,
            "total_runs": stats["total_runs"],
            "successes": stats["successes"],
            "exhausted": stats["exhausted"],
            "success_rate": stats["success_rate"],
        }
        for metric in ("iterations", "evals", "time", "final_fitness"):
            row[f"{metric}_mean"] = stats[f"all_{metric}"]["mean"]
            row[f"{metric}_std"] = stats[f"all_{metric}"]["std"]
            row[f"{metric}_success_mean"] = stats[f"success_{metric}"]["mean"]
        rows.append(row)

    filename = os.path.join(out_dir, f"summary{build_suffix()}.csv")
    pd.DataFrame(rows).to_csv(filename, index=False)
    print(f"Summary saved to: {filename}")
    return filename
