"""Benchmark runners for hill climbing (HC) and simulated annealing (SA).

Both searches reseed their generator from the iteration index, so a run is
fully determined by N. The runners therefore execute one run per
(algorithm, N) pair and shape the outcome into ``RunRecord`` dictionaries
suitable for CSV export and plotting.

Validation hooks optionally re-check reported solutions with the
independent pairwise conflict counter.
"""
from __future__ import annotations

from typing import Any, List, Optional

from . import settings
from .stats import ExperimentResults, ProgressPrinter, RunRecord
from nqueens.board import BoardState
from nqueens.errors import SearchExhaustedError
from nqueens.hill_climbing import hill_climb
from nqueens.result import SearchResult
from nqueens.simulated_annealing import simulated_annealing
from nqueens.solver import Algorithm, initial_positions
from nqueens.utils import is_valid_solution

# Marks a cap argument that was not passed; None then means "unbounded".
FROM_SETTINGS: Any = object()


def _record(algorithm: str, N: int, result: SearchResult) -> RunRecord:
    return {
        "algorithm": algorithm,
        "n": N,
        "success": result.success,
        "exhausted": False,
        "timeout": False,
        "iterations": result.iterations,
        "evals": result.evaluations,
        "time": result.elapsed,
        "initial_fitness": result.initial_fitness,
        "final_fitness": result.fitness,
        "positions": list(result.positions),
    }


def run_single_hc_experiment(
    N: int,
    max_iter: Optional[int] = None,
    time_limit: Optional[float] = None,
) -> RunRecord:
    """Run hill climbing once and turn a cap hit into an ``exhausted`` record."""
    start = BoardState(initial_positions(N))
    try:
        result = hill_climb(start, max_iter=max_iter, time_limit=time_limit)
    except SearchExhaustedError as exc:
        last = exc.state if exc.state is not None else start
        return {
            "algorithm": "HC",
            "n": N,
            "success": False,
            "exhausted": True,
            "timeout": exc.timeout,
            "iterations": exc.iterations,
            "evals": exc.evaluations,
            "time": exc.elapsed,
            "initial_fitness": start.get_fitness(),
            "final_fitness": last.get_fitness(),
            "positions": list(last.positions),
        }
    return _record("HC", N, result)


def run_single_sa_experiment(N: int, zero_temperature: str = "reject") -> RunRecord:
    """Run simulated annealing once; it always terminates within ``10 * N`` steps."""
    result = simulated_annealing(initial_positions(N), zero_temperature=zero_temperature)
    return _record("SA", N, result)


def _validate_record(record: RunRecord) -> None:
    if record["success"] and not is_valid_solution(record["positions"]):
        raise AssertionError(
            f"{record['algorithm']} reported an invalid solution for N={record['n']}: {record['positions']}"
        )
    if record["final_fitness"] > record["n"]:
        raise AssertionError(f"{record['algorithm']} fitness exceeds N={record['n']}")
    if record["algorithm"] == "SA":
        if record["iterations"] > 10 * record["n"]:
            raise AssertionError(f"SA ran {record['iterations']} iterations for N={record['n']}")
        if record["final_fitness"] < record["initial_fitness"]:
            raise AssertionError(f"SA returned a board worse than its start for N={record['n']}")


def run_experiments(
    N_values: List[int],
    algorithms: Optional[List[str]] = None,
    hc_max_iter: Optional[int] = FROM_SETTINGS,
    hc_time_limit: Optional[float] = FROM_SETTINGS,
    sa_zero_temperature: Optional[str] = None,
    progress_label: Optional[str] = None,
    validate: bool = False,
) -> ExperimentResults:
    """Run every selected algorithm once per N.

    Parameters
    ----------
    N_values : List[int]
        Board sizes, in the order they should be run.
    algorithms : List[str] | None
        Labels among ``"HC"``/``"SA"`` (or integer codes); defaults to
        ``settings.ALGORITHMS``.
    hc_max_iter, hc_time_limit : optional
        Hill-climbing caps. When omitted they come from ``settings``;
        an explicit ``None`` runs hill climbing unbounded.
    sa_zero_temperature : str | None
        Annealing zero-temperature policy; defaults to ``settings``.
    progress_label : str | None
        When set, prints one progress line per N.
    validate : bool
        Re-check every record (solution validity, SA iteration bound and
        fitness monotonicity) and raise ``AssertionError`` on inconsistencies.

    Returns
    -------
    ExperimentResults
        ``{"HC": {N: record}, "SA": {N: record}}`` restricted to the selected
        algorithms.
    """
    labels = [Algorithm.from_value(a).label for a in (algorithms or settings.ALGORITHMS)]
    max_iter = settings.HC_MAX_ITER if hc_max_iter is FROM_SETTINGS else hc_max_iter
    time_limit = settings.HC_TIME_LIMIT if hc_time_limit is FROM_SETTINGS else hc_time_limit
    zero_temperature = sa_zero_temperature or settings.SA_ZERO_TEMPERATURE

    results: ExperimentResults = {label: {} for label in labels}
    progress = ProgressPrinter(len(N_values), progress_label) if progress_label else None

    for index, N in enumerate(N_values, start=1):
        if progress:
            progress.update(index, f"N={N}")
        print(f"=== N = {N}, {'+'.join(labels)} ===")

        for label in labels:
            if label == "HC":
                record = run_single_hc_experiment(N, max_iter=max_iter, time_limit=time_limit)
            else:
                record = run_single_sa_experiment(N, zero_temperature=zero_temperature)
            if validate:
                _validate_record(record)
            results[label][N] = record

            outcome = "solution" if record["success"] else ("exhausted" if record["exhausted"] else "no solution")
            print(
                f"  [{label}] {outcome}: fitness={record['final_fitness']}/{N}, "
                f"iterations={record['iterations']}, evals={record['evals']}, time={record['time']:.4f}s"
            )

    return results
