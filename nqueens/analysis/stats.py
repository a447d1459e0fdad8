"""Typed result shapes and statistics helpers for the analysis pipeline.

Defines ``TypedDict`` structures for benchmark outputs and provides utilities
to compute aggregate statistics across per-run records.
"""
from __future__ import annotations

import statistics
from typing import Any, Dict, List, Optional, TypedDict

from nqueens.utils import ProgressPrinter


class StatsSummary(TypedDict, total=False):
    count: int
    mean: Optional[float]
    median: Optional[float]
    std: Optional[float]
    min: Optional[float]
    max: Optional[float]
    q25: Optional[float]
    q75: Optional[float]
    range: Optional[float]


class RunRecord(TypedDict):
    algorithm: str
    n: int
    success: bool
    exhausted: bool
    timeout: bool
    iterations: int
    evals: int
    time: float
    initial_fitness: int
    final_fitness: int
    positions: List[int]


# algorithm label ("HC" | "SA") -> N -> run record
ExperimentResults = Dict[str, Dict[int, RunRecord]]


def compute_detailed_statistics(values: List[float], label: str = "") -> StatsSummary:
    """Compute summary statistics for a numeric sequence.

    Parameters
    ----------
    values : List[float]
        A list of numeric values to summarize.
    label : str, optional
        Carried for debugging contexts; not used in calculations.

    Returns
    -------
    StatsSummary
        count, mean, median, std, min, max, q25, q75 and range. When
        ``values`` is empty, all numeric fields are ``None`` and ``count`` is 0
        to keep CSV/plot generation consistent.
    """
    if not values:
        return {
            "count": 0,
            "mean": None,
            "median": None,
            "std": None,
            "min": None,
            "max": None,
            "q25": None,
            "q75": None,
            "range": None,
        }

    sorted_vals = sorted(values)
    n = len(values)

    mean_val = statistics.mean(values)
    median_val = statistics.median(values)
    min_val = min(values)
    max_val = max(values)
    range_val = max_val - min_val
    std_val = statistics.pstdev(values) if n > 1 else 0

    q25 = sorted_vals[n // 4] if n >= 4 else min_val
    q75 = sorted_vals[3 * n // 4] if n >= 4 else max_val

    return {
        "count": n,
        "mean": mean_val,
        "median": median_val,
        "std": std_val,
        "min": min_val,
        "max": max_val,
        "q25": q25,
        "q75": q75,
        "range": range_val,
    }


METRICS = ["iterations", "evals", "time", "final_fitness"]


def compute_grouped_statistics(records: List[RunRecord]) -> Dict[str, Any]:
    """Aggregate metrics over all runs and over successful runs only.

    Returns
    -------
    Dict[str, Any]
        Counters (``total_runs``, ``successes``, ``exhausted``), the
        ``success_rate`` and ``all_<metric>`` / ``success_<metric>`` summaries
        for each metric in ``METRICS``.
    """
    successes = [r for r in records if r["success"]]
    exhausted = [r for r in records if r["exhausted"]]

    stats: Dict[str, Any] = {
        "total_runs": len(records),
        "successes": len(successes),
        "exhausted": len(exhausted),
        "success_rate": len(successes) / len(records) if records else 0,
    }

    for metric in METRICS:
        stats[f"all_{metric}"] = compute_detailed_statistics([r[metric] for r in records], f"all_{metric}")
        stats[f"success_{metric}"] = compute_detailed_statistics(
            [r[metric] for r in successes], f"success_{metric}"
        )

    return stats
