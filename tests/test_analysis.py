"""Tests for the benchmark pipeline: stats, runners, configuration and exports."""

from contextlib import redirect_stdout
import io
import json
import math
import os
from pathlib import Path
import sys
import tempfile
import unittest
from unittest import mock

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pandas as pd

from config_manager import ConfigManager
from nqueens.analysis import settings
from nqueens.analysis.cli import apply_configuration, parse_algorithm_filters, parse_n_values
from nqueens.analysis.cli import main as analysis_main
from nqueens.analysis.experiments import run_experiments, run_single_hc_experiment, run_single_sa_experiment
from nqueens.analysis.plots import fit_power_law, plot_and_save
from nqueens.analysis.reporting import results_to_dataframe, save_raw_data_to_csv, save_summary_to_csv
from nqueens.analysis.stats import ProgressPrinter, compute_detailed_statistics, compute_grouped_statistics


class StatsTests(unittest.TestCase):

    def test_detailed_statistics(self):
        empty = compute_detailed_statistics([])
        self.assertEqual(empty["count"], 0)
        self.assertIsNone(empty["mean"])

        summary = compute_detailed_statistics([4, 1, 3, 2])
        self.assertEqual(summary["count"], 4)
        self.assertEqual(summary["mean"], 2.5)
        self.assertEqual(summary["median"], 2.5)
        self.assertEqual(summary["q25"], 2)
        self.assertEqual(summary["q75"], 4)
        self.assertEqual(summary["range"], 3)

    def test_progress_printer(self):
        stream = io.StringIO()
        ProgressPrinter(4, "SA", stream=stream).update(1, "N=8")
        ProgressPrinter(None, "HC", stream=stream).update(3)
        self.assertEqual(stream.getvalue(), "[SA] 1/4 (25%) - N=8\n[HC] 3\n")

    def test_grouped_statistics(self):
        records = [run_single_sa_experiment(1), run_single_sa_experiment(3)]
        stats = compute_grouped_statistics(records)
        self.assertEqual(stats["total_runs"], 2)
        self.assertEqual(stats["successes"], 1)
        self.assertEqual(stats["success_rate"], 0.5)
        self.assertEqual(stats["all_iterations"]["max"], 30)
        self.assertEqual(stats["success_iterations"]["count"], 1)


class ExperimentTests(unittest.TestCase):

    def test_hc_cap_becomes_exhausted_record(self):
        record = run_single_hc_experiment(8, max_iter=3)
        self.assertTrue(record["exhausted"])
        self.assertFalse(record["success"])
        self.assertEqual(record["iterations"], 3)
        self.assertEqual(record["evals"], 192)
        self.assertEqual(len(record["positions"]), 8)

    def test_run_experiments_shape(self):
        results = run_experiments([1, 3], algorithms=["HC", "1"], hc_max_iter=50, validate=True)
        self.assertEqual(set(results), {"HC", "SA"})
        self.assertTrue(results["HC"][1]["success"])
        self.assertEqual(results["HC"][1]["positions"], [1])
        self.assertTrue(results["SA"][1]["success"])
        self.assertFalse(results["SA"][3]["success"])
        self.assertEqual(results["SA"][3]["iterations"], 30)
        self.assertTrue(results["HC"][3]["exhausted"])

    def test_omitted_hc_caps_come_from_settings(self):
        saved = (settings.HC_MAX_ITER, settings.HC_TIME_LIMIT)
        settings.HC_MAX_ITER, settings.HC_TIME_LIMIT = 3, None
        try:
            results = run_experiments([8], algorithms=["HC"])
        finally:
            settings.HC_MAX_ITER, settings.HC_TIME_LIMIT = saved
        self.assertTrue(results["HC"][8]["exhausted"])
        self.assertEqual(results["HC"][8]["iterations"], 3)

    def test_explicit_none_runs_hc_unbounded(self):
        record = run_single_hc_experiment(1)
        with mock.patch("nqueens.analysis.experiments.run_single_hc_experiment", return_value=record) as runner:
            run_experiments([1], algorithms=["HC"], hc_max_iter=None, hc_time_limit=None)
        runner.assert_called_once_with(1, max_iter=None, time_limit=None)


class ConfigurationTests(unittest.TestCase):

    def setUp(self):
        self._saved = {
            name: getattr(settings, name)
            for name in ("N_VALUES", "OUT_DIR", "HC_MAX_ITER", "HC_TIME_LIMIT", "SA_ZERO_TEMPERATURE", "ALGORITHMS")
        }
        self.tmpdir = tempfile.TemporaryDirectory()
        self.config_path = os.path.join(self.tmpdir.name, "config.json")
        with open(self.config_path, "w") as f:
            json.dump({
                "experiment_settings": {"n_values": [4, 5], "algorithms": ["SA"], "output_dir": "out"},
                "search_settings": {"hc_max_iter": 10, "hc_time_limit": None, "sa_zero_temperature": "accept"},
            }, f)

    def tearDown(self):
        for name, value in self._saved.items():
            setattr(settings, name, value)
        self.tmpdir.cleanup()

    def test_parse_filters(self):
        self.assertEqual(parse_algorithm_filters(["hc,1", "SA"]), ["HC", "SA"])
        self.assertIsNone(parse_algorithm_filters(None))
        with self.assertRaises(ValueError):
            parse_algorithm_filters(["GA"])
        self.assertEqual(parse_n_values(["8,4", "4"]), [4, 8])
        with self.assertRaises(ValueError):
            parse_n_values(["0"])

    def test_config_manager_roundtrip(self):
        mgr = ConfigManager(self.config_path)
        self.assertEqual(mgr.get_algorithms(), ["SA"])
        mgr.update_setting("search_settings", "hc_max_iter", 20)
        self.assertEqual(ConfigManager(self.config_path).get_search_settings()["hc_max_iter"], 20)

    def test_missing_config_file(self):
        with self.assertRaises(FileNotFoundError):
            ConfigManager(os.path.join(self.tmpdir.name, "missing.json"))

    def test_apply_configuration(self):
        _, selected = apply_configuration(self.config_path)
        self.assertEqual(selected, ["SA"])
        self.assertEqual(settings.N_VALUES, [4, 5])
        self.assertEqual(settings.OUT_DIR, "out")
        self.assertEqual(settings.HC_MAX_ITER, 10)
        self.assertIsNone(settings.HC_TIME_LIMIT)
        self.assertEqual(settings.SA_ZERO_TEMPERATURE, "accept")

    def test_filter_outside_configuration_is_rejected(self):
        with self.assertRaises(ValueError):
            apply_configuration(self.config_path, ["HC"])

    def test_invalid_configured_board_sizes_exit_cleanly(self):
        for n_values in ([0], [4, -2], ["x"], [], 8):
            with self.subTest(n_values=n_values):
                with open(self.config_path, "w") as f:
                    json.dump({"experiment_settings": {"n_values": n_values}}, f)
                with self.assertRaises(ValueError):
                    apply_configuration(self.config_path)
                stdout = io.StringIO()
                with redirect_stdout(stdout), self.assertRaises(SystemExit) as ctx:
                    analysis_main(["--config", self.config_path, "--no-plots"])
                self.assertEqual(ctx.exception.code, 1)
                self.assertIn("Configuration error", stdout.getvalue())


class ReportingTests(unittest.TestCase):

    def setUp(self):
        self.results = run_experiments([4, 6], algorithms=["HC", "SA"], hc_max_iter=200)

    def test_dataframe(self):
        frame = results_to_dataframe(self.results)
        self.assertEqual(len(frame), 4)
        self.assertEqual(frame["n"].tolist(), [4, 4, 6, 6])
        self.assertEqual(frame["algorithm"].tolist(), ["HC", "SA", "HC", "SA"])

    def test_csv_exports(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            raw = pd.read_csv(save_raw_data_to_csv(self.results, tmpdir))
            summary = pd.read_csv(save_summary_to_csv(self.results, tmpdir))
        self.assertEqual(len(raw), 4)
        self.assertEqual(sorted(summary["algorithm"].tolist()), ["HC", "SA"])
        self.assertIn("success_rate", summary.columns)

    def test_plots(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            saved = plot_and_save(self.results, tmpdir)
            self.assertEqual(len(saved), 4)
            for path in saved:
                self.assertTrue(os.path.getsize(path) > 0)

    def test_fit_power_law(self):
        self.assertAlmostEqual(fit_power_law([2, 4, 8], [4, 16, 64]), 2.0)
        self.assertTrue(math.isnan(fit_power_law([2], [1])))


if __name__ == "__main__":
    unittest.main()
