"""Command-line interface and pipeline for the N-Queens local-search benchmark.

This module wires together configuration loading, the HC/SA benchmark runs,
CSV export and chart generation. It isolates I/O, argument parsing and
progress reporting from the core algorithmic modules so that the rest of the
codebase remains easy to test programmatically.
"""
from __future__ import annotations

import argparse
import tempfile
from pathlib import Path
from time import perf_counter
from typing import List, Optional, Tuple

from . import settings
from .experiments import run_experiments
from .plots import plot_and_save
from .reporting import save_raw_data_to_csv, save_summary_to_csv
from config_manager import ConfigManager
from nqueens.errors import ConfigurationError, SearchExhaustedError
from nqueens.hill_climbing import hill_climb
from nqueens.simulated_annealing import ZERO_TEMPERATURE_POLICIES, simulated_annealing
from nqueens.solver import Algorithm, initial_positions
from nqueens.utils import is_valid_solution


# ------------- Utils --------------------------------------------------------

def parse_algorithm_filters(alg_args: Optional[List[str]]):
    """Normalize algorithm filter CLI inputs into a list of labels.

    Accepts repeated flags and comma-separated lists. Valid values: HC, SA
    (or the integer codes 0 and 1). Returns None when no filter is provided
    (meaning all configured algorithms run).
    """
    if not alg_args:
        return None
    selected: List[str] = []
    for entry in alg_args:
        for token in entry.split(","):
            token = token.strip()
            if token:
                try:
                    selected.append(Algorithm.from_value(token).label)
                except ConfigurationError as exc:
                    raise ValueError(f"Unknown algorithm '{token}'. Allowed: HC, SA") from exc
    unique = list(dict.fromkeys(selected))  # preserve order, remove dups
    return unique or None


def parse_n_values(n_args: Optional[List[str]]):
    """Parse ``-n 8 -n 10,12`` style inputs into a sorted list of sizes."""
    if not n_args:
        return None
    values: List[int] = []
    for entry in n_args:
        for token in entry.split(","):
            token = token.strip()
            if not token:
                continue
            try:
                value = int(token)
            except ValueError as exc:
                raise ValueError(f"Invalid board size '{token}'") from exc
            if value < 1:
                raise ValueError(f"Board size must be >= 1, got {value}")
            values.append(value)
    return sorted(set(values)) or None


def apply_configuration(
    config_path: str, alg_filter: Optional[List[str]] = None
) -> Tuple[ConfigManager, List[str]]:
    """Load configuration and apply optional algorithm filtering.

    Updates the global ``settings`` module in-place from ``config.json`` (or a
    user-specified path). Returns the ``ConfigManager`` used and the list of
    selected algorithm labels.
    """
    config_mgr = ConfigManager(config_path)
    exp_settings = config_mgr.get_experiment_settings()
    search_settings = config_mgr.get_search_settings()

    if "n_values" in exp_settings:
        raw_sizes = exp_settings["n_values"]
        if not isinstance(raw_sizes, list):
            raise ValueError(f"n_values must be a list of board sizes, got {raw_sizes!r}")
        n_values = parse_n_values([str(size) for size in raw_sizes])
        if not n_values:
            raise ValueError("n_values must list at least one board size")
        settings.N_VALUES = n_values
    settings.OUT_DIR = exp_settings.get("output_dir", settings.OUT_DIR)
    settings.set_limits(
        hc_max_iter=search_settings.get("hc_max_iter", settings.HC_MAX_ITER),
        hc_time_limit=search_settings.get("hc_time_limit", settings.HC_TIME_LIMIT),
    )

    policy = search_settings.get("sa_zero_temperature", settings.SA_ZERO_TEMPERATURE)
    if policy not in ZERO_TEMPERATURE_POLICIES:
        raise ValueError(
            f"Invalid sa_zero_temperature '{policy}'. Allowed: {', '.join(ZERO_TEMPERATURE_POLICIES)}"
        )
    settings.SA_ZERO_TEMPERATURE = policy

    configured = parse_algorithm_filters(config_mgr.get_algorithms()) or list(settings.ALGORITHMS)
    settings.ALGORITHMS = configured
    if alg_filter:
        missing = [a for a in alg_filter if a not in configured]
        if missing:
            raise ValueError(
                f"Algorithms {', '.join(missing)} are not enabled in {config_path} "
                f"(configured: {', '.join(configured)})"
            )
        return config_mgr, list(alg_filter)
    return config_mgr, configured


# ------------- Pipeline -----------------------------------------------------

def run_pipeline(
    algorithms: List[str],
    n_values: Optional[List[int]] = None,
    validate: bool = False,
    make_plots: bool = True,
) -> None:
    """Run the benchmark, export CSV files and (optionally) charts."""
    start_total = perf_counter()
    n_values = n_values or settings.N_VALUES

    print("=" * 70)
    print("N-QUEENS LOCAL SEARCH BENCHMARK")
    print("=" * 70)
    print(f"Board sizes: {n_values}")
    print(f"Algorithms: {algorithms}")

    results = run_experiments(
        n_values,
        algorithms=algorithms,
        progress_label="Benchmark",
        validate=validate,
    )

    save_raw_data_to_csv(results, settings.OUT_DIR)
    save_summary_to_csv(results, settings.OUT_DIR)
    if make_plots:
        plot_and_save(results, settings.OUT_DIR)

    total_time = perf_counter() - start_total
    print("\nBenchmark completed!")
    print(f"Total time: {total_time:.1f}s ({total_time/60:.1f} minutes)")
    print(f"Results directory: {settings.OUT_DIR}")


# ------------- Quick regression -------------------------------------------

def run_quick_regression_tests() -> None:
    """Execute a fast, deterministic smoke test for HC/SA.

    Verifies that:
    - Hill climbing solves N=1 immediately and returns a valid solution (or a
      clean cap hit) for N=8.
    - Simulated annealing on N=8 stays within ``10*N`` iterations and never
      returns a board worse than its start.
    - Two runs with the same N produce the same board.
    - The benchmark pipeline produces non-empty CSV files in a temporary folder.
    """
    print("Running quick regression tests (N=8) for HC and SA...")

    trivial = hill_climb(initial_positions(1))
    if list(trivial.positions) != [1]:
        raise AssertionError(f"Hill climbing returned {list(trivial.positions)} for N=1.")

    try:
        hc = hill_climb(initial_positions(8), max_iter=2000)
    except SearchExhaustedError as exc:
        print(f"  Hill climbing: cap reached after {exc.iterations} iterations")
    else:
        if not is_valid_solution(list(hc.positions)):
            raise AssertionError(f"Hill climbing returned an invalid solution for N=8: {hc.positions}.")
        print(f"  Hill climbing: solution in {hc.iterations} iterations ({hc.elapsed:.4f}s)")

    sa = simulated_annealing(initial_positions(8))
    if sa.iterations > 80:
        raise AssertionError(f"Simulated annealing ran {sa.iterations} iterations for N=8.")
    if sa.fitness < sa.initial_fitness:
        raise AssertionError("Simulated annealing returned a board worse than its start.")
    if sa.success and not is_valid_solution(list(sa.positions)):
        raise AssertionError(f"Simulated annealing returned an invalid solution: {sa.positions}.")
    again = simulated_annealing(initial_positions(8))
    if again.positions != sa.positions:
        raise AssertionError("Simulated annealing is not reproducible for N=8.")
    print(f"  Simulated annealing: fitness {sa.fitness}/8 in {sa.iterations} iterations")

    results = run_experiments([4, 8], algorithms=["HC", "SA"], hc_max_iter=2000, validate=True)

    with tempfile.TemporaryDirectory() as tmpdir:
        raw_path = Path(save_raw_data_to_csv(results, tmpdir))
        summary_path = Path(save_summary_to_csv(results, tmpdir))
        for csv_path in (raw_path, summary_path):
            if not csv_path.exists() or csv_path.stat().st_size == 0:
                raise AssertionError(f"{csv_path.name} was not generated during quick tests.")

    print("Quick regression tests passed.")


# ------------- CLI wiring --------------------------------------------------

def build_arg_parser():
    """Construct the argument parser for the CLI entry point."""
    parser = argparse.ArgumentParser(description="Benchmark N-Queens hill climbing and simulated annealing.")
    parser.add_argument(
        "--alg",
        "-a",
        action="append",
        help="Filter algorithms to execute: HC, SA (comma-separated or multiple flags). Default: all configured.",
    )
    parser.add_argument(
        "-n",
        action="append",
        dest="n_values",
        help="Board sizes to run (comma-separated or multiple flags). Default: from the configuration.",
    )
    parser.add_argument("--config", default="config.json", help="Path to configuration file (default: config.json).")
    parser.add_argument("--no-plots", action="store_true", help="Skip chart generation.")
    parser.add_argument("--quick-test", action="store_true", help="Run quick regression tests (N=8) and exit.")
    parser.add_argument("--validate", action="store_true", help="Re-check every run record (extra assertions).")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point: parse arguments and run the benchmark."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.quick_test:
        run_quick_regression_tests()
        return

    try:
        alg_filter = parse_algorithm_filters(args.alg)
        n_values = parse_n_values(args.n_values)
        _, selected = apply_configuration(args.config, alg_filter)
    except FileNotFoundError as exc:
        print(f"Configuration file not found: {exc}")
        raise SystemExit(1) from exc
    except ValueError as exc:
        print(f"Configuration error: {exc}")
        raise SystemExit(1) from exc

    try:
        run_pipeline(selected, n_values=n_values, validate=args.validate, make_plots=not args.no_plots)
    except KeyboardInterrupt:
        print("\nExecution interrupted by user.")
        raise SystemExit(130) from None
