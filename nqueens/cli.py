"""Command-line driver: run one local search and print the board.

Usage mirrors the classic flags ``-size`` and ``-alg`` (double-dash spellings
are accepted too)::

    python -m nqueens -size 8 -alg 0

On success a single line of comma-separated rows (1-based, column order) is
written to stdout. Diagnostics always go to stderr so the result line stays
machine-readable.

Exit codes
----------
- 0: a solution was printed.
- 1: the search ended without a solution (the best board is still printed) or
  hit an arithmetic error under the ``raise`` zero-temperature policy.
- 2: invalid arguments (unknown algorithm, size < 1, bad caps).
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .errors import AnnealingTemperatureError, ConfigurationError, SearchExhaustedError
from .simulated_annealing import ZERO_TEMPERATURE_POLICIES, default_kmax
from .solver import Algorithm, initial_positions, solve
from .utils import ProgressPrinter, format_positions

DEFAULT_SIZE = 100


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="nqueens",
        description="Solve the N-Queens problem with hill climbing or simulated annealing.",
    )
    parser.add_argument("-size", "--size", type=int, default=DEFAULT_SIZE, help=f"Board size N (default: {DEFAULT_SIZE}).")
    parser.add_argument(
        "-alg",
        "--alg",
        default="0",
        help="Algorithm: 0 = hill climbing (default), 1 = simulated annealing.",
    )
    parser.add_argument(
        "--max-iter",
        type=int,
        default=None,
        help="Stop hill climbing after this many iterations (default: unbounded).",
    )
    parser.add_argument(
        "--time-limit",
        type=float,
        default=None,
        help="Stop hill climbing after this many seconds (default: unbounded).",
    )
    parser.add_argument(
        "--zero-temperature",
        choices=ZERO_TEMPERATURE_POLICIES,
        default="reject",
        help="Simulated annealing: how to treat a worse move at zero temperature (default: reject).",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Print per-iteration progress to stderr.")
    return parser


def _make_progress(algorithm: Algorithm, size: int, max_iter: Optional[int]):
    total = default_kmax(size) if algorithm is Algorithm.SIMULATED_ANNEALING else max_iter
    printer = ProgressPrinter(total, algorithm.label, stream=sys.stderr)

    def _report(iteration: int, state) -> None:
        printer.update(iteration, f"fitness={state.get_fitness()}/{state.size}")

    return _report


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point: parse arguments, run the search and print the board."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        algorithm = Algorithm.from_value(args.alg)
        initial_positions(args.size)
    except ConfigurationError as exc:
        parser.error(str(exc))

    progress = _make_progress(algorithm, args.size, args.max_iter) if args.verbose else None

    try:
        result = solve(
            args.size,
            algorithm,
            max_iter=args.max_iter,
            time_limit=args.time_limit,
            zero_temperature=args.zero_temperature,
            progress=progress,
        )
    except ConfigurationError as exc:
        parser.error(str(exc))
    except SearchExhaustedError as exc:
        if exc.state is not None:
            print(format_positions(exc.state.positions))
        print(f"Search exhausted: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    except AnnealingTemperatureError as exc:
        print(f"Arithmetic error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(format_positions(result.positions))
    if not result.success:
        print(
            f"No solution found after {result.iterations} iterations "
            f"(best fitness {result.fitness}/{args.size}).",
            file=sys.stderr,
        )
        raise SystemExit(1)


if __name__ == "__main__":
    main()
