"""Steepest-ascent hill climbing for the N-Queens problem.

At each iteration the whole neighborhood of the current board is evaluated,
the best-fitness neighbors are kept, and one of them is picked uniformly at
random. The search stops as soon as the picked neighbor is a solution. There
is no restart and no plateau escape: a tie can move sideways forever, and a
board whose only best neighbor is itself is a fixed point.

Determinism
-----------
A fresh ``random.Random`` is created on every iteration and seeded with the
iteration index (0, 1, 2, ...). Given the same size, the same initial board and
the same Python ``random`` implementation, the output is identical across
runs. Do not replace this with a single long-lived generator: it would change
which tie is broken at every step.

Termination
-----------
Unbounded by default. ``max_iter`` and ``time_limit`` add optional caps that
raise ``SearchExhaustedError`` without altering the sequence of states visited
before the cap.
"""

from __future__ import annotations

import random
from time import perf_counter
from typing import Callable, Optional, Sequence, Union

from .board import BoardState
from .errors import ConfigurationError, SearchExhaustedError
from .neighbors import get_best_states
from .result import SearchResult

ProgressCallback = Callable[[int, BoardState], None]


def hill_climb(
    initial: Union[BoardState, Sequence[int]],
    max_iter: Optional[int] = None,
    time_limit: Optional[float] = None,
    progress: Optional[ProgressCallback] = None,
) -> SearchResult:
    """Climb from ``initial`` until a best neighbor is a solution.

    Parameters
    ----------
    initial : BoardState | Sequence[int]
        Starting board (1-based rows).
    max_iter : int | None
        Optional cap on iterations. ``None`` keeps the search unbounded.
    time_limit : float | None
        Optional wall-clock limit in seconds, checked before each iteration.
    progress : Callable[[int, BoardState], None] | None
        Called after each iteration with the 1-based iteration number and the
        picked neighbor.

    Returns
    -------
    SearchResult
        ``state`` is always a solution.

    Raises
    ------
    ConfigurationError
        If ``max_iter`` is smaller than 1 or ``time_limit`` is negative.
    SearchExhaustedError
        When a cap is reached before a solution is picked.
    """
    if max_iter is not None and max_iter < 1:
        raise ConfigurationError(f"max_iter must be >= 1, got {max_iter}")
    if time_limit is not None and time_limit < 0:
        raise ConfigurationError(f"time_limit must be >= 0, got {time_limit}")

    current = initial if isinstance(initial, BoardState) else BoardState(initial)
    initial_fitness = current.get_fitness()
    seed = 0
    evaluations = 0
    start = perf_counter()

    while True:
        if max_iter is not None and seed >= max_iter:
            raise SearchExhaustedError(
                f"Hill climbing reached max_iter={max_iter} without a solution",
                state=current,
                iterations=seed,
                evaluations=evaluations,
                elapsed=perf_counter() - start,
            )
        if time_limit is not None and (perf_counter() - start) > time_limit:
            raise SearchExhaustedError(
                f"Hill climbing exceeded time_limit={time_limit}s without a solution",
                state=current,
                iterations=seed,
                evaluations=evaluations,
                elapsed=perf_counter() - start,
                timeout=True,
            )

        neighbors = current.get_neighbors()
        best_states = get_best_states(neighbors)
        evaluations += len(neighbors)

        rng = random.Random(seed)
        neighbor = best_states[rng.randrange(len(best_states))]

        if progress is not None:
            progress(seed + 1, neighbor)

        if neighbor.is_solution():
            return SearchResult(
                state=neighbor,
                iterations=seed + 1,
                evaluations=evaluations,
                elapsed=perf_counter() - start,
                initial_fitness=initial_fitness,
            )

        seed += 1
        current = neighbor
