"""
Benchmark and reporting package for the N-Queens local searches.

This package contains:
- settings: global knobs and hill-climbing limits
- stats: typed records, aggregation helpers and a progress printer
- experiments: HC/SA runners with result shaping
- reporting: CSV exports (pandas)
- plots: chart generation (matplotlib/seaborn)
- cli: pipeline entry point and argument parser
"""

from . import settings as settings  # re-export for convenience
from .stats import (
    StatsSummary,
    RunRecord,
    ExperimentResults,
    compute_detailed_statistics,
    compute_grouped_statistics,
    ProgressPrinter,
)

__all__ = [
    # types
    "StatsSummary",
    "RunRecord",
    "ExperimentResults",
    # utils
    "compute_detailed_statistics",
    "compute_grouped_statistics",
    "ProgressPrinter",
    # settings module
    "settings",
]
