"""Tests for the command-line driver."""

from contextlib import redirect_stderr, redirect_stdout
from io import StringIO
from pathlib import Path
import subprocess
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nqueens.cli import build_arg_parser, main
from nqueens.errors import ConfigurationError
from nqueens.solver import Algorithm, initial_positions, solve
from nqueens.utils import ProgressPrinter


def _run(argv):
    """Run ``main`` and return (exit_code, stdout, stderr)."""
    out, err = StringIO(), StringIO()
    code = 0
    with redirect_stdout(out), redirect_stderr(err):
        try:
            main(argv)
        except SystemExit as exc:
            code = exc.code if isinstance(exc.code, int) else 1
    return code, out.getvalue(), err.getvalue()


class SolverDispatchTests(unittest.TestCase):

    def test_algorithm_codes(self):
        self.assertIs(Algorithm.from_value(0), Algorithm.HILL_CLIMB)
        self.assertIs(Algorithm.from_value("1"), Algorithm.SIMULATED_ANNEALING)
        self.assertIs(Algorithm.from_value("sa"), Algorithm.SIMULATED_ANNEALING)
        self.assertIs(Algorithm.from_value("hill-climb"), Algorithm.HILL_CLIMB)
        self.assertEqual(Algorithm.HILL_CLIMB.label, "HC")

    def test_unknown_algorithm_is_configuration_error(self):
        for value in (2, -1, "7", "bogus"):
            with self.assertRaises(ConfigurationError):
                Algorithm.from_value(value)

    def test_initial_positions(self):
        self.assertEqual(initial_positions(3), [1, 1, 1])
        with self.assertRaises(ConfigurationError):
            initial_positions(0)

    def test_solve_dispatches(self):
        self.assertEqual(list(solve(1, 0).positions), [1])
        self.assertEqual(list(solve(1, Algorithm.SIMULATED_ANNEALING).positions), [1])


class CliTests(unittest.TestCase):

    def test_defaults(self):
        args = build_arg_parser().parse_args([])
        self.assertEqual(args.size, 100)
        self.assertEqual(args.alg, "0")
        self.assertIsNone(args.max_iter)
        self.assertEqual(args.zero_temperature, "reject")

    def test_single_dash_flags(self):
        args = build_arg_parser().parse_args(["-size", "8", "-alg", "1"])
        self.assertEqual(args.size, 8)
        self.assertEqual(args.alg, "1")

    def test_prints_solution_line(self):
        for alg in ("0", "1"):
            code, out, err = _run(["-size", "1", "-alg", alg])
            self.assertEqual(code, 0)
            self.assertEqual(out, "1\n")
            self.assertEqual(err, "")

    def test_unknown_algorithm_exits_with_usage_error(self):
        code, out, err = _run(["--size", "4", "--alg", "2"])
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertIn("Unknown algorithm", err)

    def test_invalid_size_exits_with_usage_error(self):
        code, _, err = _run(["--size", "0"])
        self.assertEqual(code, 2)
        self.assertIn("Board size", err)

    def test_invalid_max_iter_exits_with_usage_error(self):
        code, _, err = _run(["--size", "4", "--max-iter", "0"])
        self.assertEqual(code, 2)
        self.assertIn("max_iter", err)

    def test_exhausted_search_prints_best_board_and_fails(self):
        code, out, err = _run(["--size", "8", "--max-iter", "3"])
        self.assertEqual(code, 1)
        line = out.strip()
        self.assertEqual(len(line.split(",")), 8)
        self.assertFalse(line.endswith(","))
        self.assertIn("Search exhausted", err)

    def test_annealing_without_solution_fails(self):
        code, out, err = _run(["--size", "3", "--alg", "1"])
        self.assertEqual(code, 1)
        self.assertEqual(len(out.strip().split(",")), 3)
        self.assertIn("No solution found after 30 iterations", err)

    def test_verbose_progress_goes_to_stderr(self):
        code, out, err = _run(["--size", "1", "--verbose"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "1\n")
        self.assertIn("[HC] 1 - fitness=1/1", err)

    def test_driver_does_not_load_benchmark_package(self):
        code = "import sys, nqueens.cli; print('nqueens.analysis' in sys.modules)"
        output = subprocess.run(
            [sys.executable, "-c", code], cwd=str(ROOT), capture_output=True, text=True, check=True
        ).stdout
        self.assertEqual(output.strip(), "False")

    def test_progress_printer_is_shared_with_analysis(self):
        from nqueens.analysis.stats import ProgressPrinter as AnalysisProgressPrinter

        self.assertIs(AnalysisProgressPrinter, ProgressPrinter)


if __name__ == "__main__":
    unittest.main()
