"""Global settings and limits for the N-Queens benchmark pipeline.

This module centralizes tunable constants used across the orchestration code.
Values can be overridden at runtime via the configuration loader in
`nqueens.analysis.cli.apply_configuration`.
"""
from __future__ import annotations

from typing import List, Optional
from datetime import datetime

# Board sizes to evaluate (in ascending order). Every iteration costs O(N^4),
# so the defaults stay small.
N_VALUES: List[int] = [4, 6, 8, 10, 12, 16]

# Algorithms to benchmark: HC (hill climbing) and/or SA (simulated annealing)
ALGORITHMS: List[str] = ["HC", "SA"]

# Hill climbing is unbounded on its own; the benchmark always caps it
HC_MAX_ITER: Optional[int] = 5000
HC_TIME_LIMIT: Optional[float] = 60.0

# Simulated annealing zero-temperature policy: reject | accept | raise
SA_ZERO_TEMPERATURE: str = "reject"

# Output directory for CSV and charts
OUT_DIR: str = "results_nqueens_local_search"

# When True, results and plots include a datestamp suffix (e.g., _20251113-142530)
DATE_IN_FILENAMES: bool = True

# Unique run identifier used for filename stamping; set once at import time.
RUN_ID: str = datetime.now().strftime("%Y%m%d-%H%M%S")

# Optional run label appended to output filenames
RUN_TAG: Optional[str] = None


def set_limits(
        hc_max_iter: Optional[int] = 5000,
        hc_time_limit: Optional[float] = 60.0,
) -> None:
        """Configure the hill-climbing caps used by the benchmark.

        Parameters
        - hc_max_iter: iteration cap (None disables it).
        - hc_time_limit: wall-clock limit in seconds (None disables it).

        Side effects
        - Updates module-level globals and prints a concise summary to stdout to
            make the active limits explicit at run start.
        """
        global HC_MAX_ITER, HC_TIME_LIMIT
        HC_MAX_ITER = hc_max_iter
        HC_TIME_LIMIT = hc_time_limit

        print("Hill-climbing limits configured:")
        print(f"   - max iterations: {HC_MAX_ITER}" if HC_MAX_ITER else "   - max iterations: unlimited")
        print(f"   - time limit: {HC_TIME_LIMIT}s" if HC_TIME_LIMIT else "   - time limit: unlimited")
