"""Visualization utilities for benchmark outputs.

Overview
--------
Plotting helpers that turn ``ExperimentResults`` into PNG charts. The input is
first flattened with ``reporting.results_to_dataframe`` so every chart is drawn
from the same tidy table (one row per algorithm and N).

Chart map
---------
- 01_fitness_ratio_vs_N.png: final fitness / N per algorithm.
    - 1.0 means a solution was returned; SA may stop below it when ``10*N``
      iterations run out, HC when its benchmark cap is hit.
- 02_iterations_vs_N.png: iterations executed (log scale).
- 03_time_vs_N.png: wall time (log-log) with a fitted power-law trend per
  algorithm. Each iteration evaluates N^2 neighbors at O(N^2) each, so the
  slope is expected to be at least 4.
- 04_evaluations_vs_N.png: neighbor fitness evaluations (log scale).

Notes
-----
The module only has side effects (file creation, stdout prints). The Agg
backend is selected so charts can be produced on headless machines.
"""
from __future__ import annotations

import os
from typing import List

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns

from .reporting import build_suffix, results_to_dataframe
from .stats import ExperimentResults

ALGORITHM_NAMES = {"HC": "Hill Climbing", "SA": "Simulated Annealing"}


def fit_power_law(n_values: List[float], times: List[float]) -> float:
    """Return the exponent ``b`` of ``time ≈ a * N^b`` via a log-log linear fit.

    Non-positive samples are dropped; ``nan`` is returned when fewer than two
    usable points remain.
    """
    pairs = [(n, t) for n, t in zip(n_values, times) if n > 0 and t > 0]
    if len(pairs) < 2:
        return float("nan")
    x = np.log([p[0] for p in pairs])
    y = np.log([p[1] for p in pairs])
    slope, _ = np.polyfit(x, y, 1)
    return float(slope)


def _save(fig, out_dir: str, name: str) -> str:
    fname = os.path.join(out_dir, f"{name}{build_suffix()}.png")
    fig.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close(fig)
    print(f"Saved chart: {fname}")
    return fname


def plot_and_save(results: ExperimentResults, out_dir: str) -> List[str]:
    """Generate all benchmark charts into ``out_dir`` and return their paths.

    Parameters
    ----------
    results : ExperimentResults
        Per-algorithm, per-N run records.
    out_dir : str
        Destination directory; created if missing.
    """
    frame = results_to_dataframe(results)
    if frame.empty:
        print("Plotting skipped: no runs to plot.")
        return []

    os.makedirs(out_dir, exist_ok=True)
    sns.set_theme(style="whitegrid")
    frame = frame.assign(
        name=frame["algorithm"].map(ALGORITHM_NAMES).fillna(frame["algorithm"]),
        fitness_ratio=frame["final_fitness"] / frame["n"],
    )
    n_values = sorted(frame["n"].unique().tolist())
    saved: List[str] = []

    fig, ax = plt.subplots(figsize=(10, 6))
    sns.lineplot(data=frame, x="n", y="fitness_ratio", hue="name", marker="o", ax=ax)
    ax.set_xlabel("N (board size)")
    ax.set_ylabel("Final fitness / N")
    ax.set_title("Solution quality vs problem size")
    ax.set_ylim(-0.05, 1.05)
    ax.set_xticks(n_values)
    saved.append(_save(fig, out_dir, "01_fitness_ratio_vs_N"))

    fig, ax = plt.subplots(figsize=(10, 6))
    sns.lineplot(data=frame, x="n", y="iterations", hue="name", marker="s", ax=ax)
    ax.set_yscale("log")
    ax.set_xlabel("N (board size)")
    ax.set_ylabel("Iterations (log scale)")
    ax.set_title("Iterations vs problem size")
    ax.set_xticks(n_values)
    saved.append(_save(fig, out_dir, "02_iterations_vs_N"))

    fig, ax = plt.subplots(figsize=(10, 6))
    for name, group in frame.groupby("name"):
        times = np.maximum(group["time_seconds"].to_numpy(dtype=float), 1e-6)
        ns = group["n"].to_numpy(dtype=float)
        exponent = fit_power_law(ns.tolist(), times.tolist())
        label = f"{name} (slope {exponent:.2f})" if np.isfinite(exponent) else str(name)
        ax.loglog(ns, times, marker="o", linewidth=2, label=label)
    ax.set_xlabel("N (board size, log scale)")
    ax.set_ylabel("Time [s] (log scale)")
    ax.set_title("Wall time vs problem size")
    ax.legend()
    saved.append(_save(fig, out_dir, "03_time_vs_N"))

    fig, ax = plt.subplots(figsize=(10, 6))
    sns.barplot(data=frame, x="n", y="evaluations", hue="name", ax=ax)
    ax.set_yscale("log")
    ax.set_xlabel("N (board size)")
    ax.set_ylabel("Neighbor evaluations (log scale)")
    ax.set_title("Objective evaluations vs problem size")
    saved.append(_save(fig, out_dir, "04_evaluations_vs_N"))

    return saved
