"""Simulated Annealing solver for the N-Queens problem.

The search starts from a given board and runs for at most ``kmax`` iterations
(``10 * size`` by default). Every iteration evaluates the full neighborhood,
keeps only the best-fitness neighbors and picks one at random, so candidates
are never worse than the current board's best move. The candidate is accepted
unconditionally when it is at least as fit as the current board; otherwise it
is accepted with a temperature-dependent probability.

Contract (public API)
---------------------
- Input: an initial board, optional ``kmax`` and a zero-temperature policy.
- Output: ``SearchResult`` whose ``state`` is the best board seen during the
  run. It is a solution only if one was reached before ``kmax`` ran out.

Temperature and acceptance
--------------------------
- ``temp = current.fitness // kmax`` (integer division). Because fitness never
  exceeds ``size`` and the default ``kmax`` is ``10 * size``, ``temp`` is 0
  for the default schedule.
- Energy of a worse move: ``current.fitness - neighbor.fitness // temp``. The
  division binds tighter than the subtraction. This is *not* the textbook
  ``(current - neighbor) / temp`` Metropolis term; it is kept as is so runs
  stay reproducible.
- A worse move is accepted iff ``exp(energy) > rng.random()``. An overflowing
  exponent counts as acceptance.

Zero temperature
----------------
``zero_temperature`` decides what happens to a worse move when ``temp == 0``:
``"reject"`` (default) keeps the current board, ``"accept"`` takes the move and
``"raise"`` raises ``AnnealingTemperatureError``.

Determinism
-----------
Each iteration creates ``random.Random(k)`` with ``k`` the iteration index.
The same generator provides the tie-break index and, when needed, the
acceptance threshold.
"""

from __future__ import annotations

import math
import random
from time import perf_counter
from typing import Callable, Optional, Sequence, Union

from .board import BoardState
from .errors import AnnealingTemperatureError, ConfigurationError
from .neighbors import get_best_states
from .result import SearchResult

ZERO_TEMPERATURE_POLICIES = ("reject", "accept", "raise")

ProgressCallback = Callable[[int, BoardState], None]


def default_kmax(size: int) -> int:
    """Return the default iteration budget ``10 * size``."""
    return 10 * size


def temperature(fitness: int, kmax: int) -> int:
    """Return the integer temperature ``fitness // kmax``."""
    return fitness // kmax


def annealing_energy(current_fitness: int, neighbor_fitness: int, temp: int) -> float:
    """Return ``current_fitness - neighbor_fitness // temp`` as a float.

    ``temp`` must be non-zero.
    """
    return float(current_fitness - neighbor_fitness // temp)


def accept_worse_move(
    current_fitness: int,
    neighbor_fitness: int,
    temp: int,
    threshold: float,
    zero_temperature: str = "reject",
) -> bool:
    """Decide whether a strictly worse neighbor replaces the current board.

    Parameters
    ----------
    current_fitness, neighbor_fitness : int
        Fitness of the current board and of the candidate.
    temp : int
        Current temperature.
    threshold : float
        Uniform draw in ``[0, 1)``.
    zero_temperature : str
        Policy applied when ``temp == 0``.

    Raises
    ------
    AnnealingTemperatureError
        When ``temp == 0`` and the policy is ``"raise"``.
    """
    if temp == 0:
        if zero_temperature == "reject":
            return False
        if zero_temperature == "accept":
            return True
        raise AnnealingTemperatureError(
            f"Zero temperature while evaluating a worse move "
            f"(current fitness {current_fitness}, neighbor fitness {neighbor_fitness})"
        )

    energy = annealing_energy(current_fitness, neighbor_fitness, temp)
    try:
        return math.exp(energy) > threshold
    except OverflowError:
        return True


def simulated_annealing(
    initial: Union[BoardState, Sequence[int]],
    kmax: Optional[int] = None,
    zero_temperature: str = "reject",
    progress: Optional[ProgressCallback] = None,
) -> SearchResult:
    """Run Simulated Annealing from ``initial`` and return the best board seen.

    Parameters
    ----------
    initial : BoardState | Sequence[int]
        Starting board (1-based rows).
    kmax : int | None
        Iteration budget; defaults to ``10 * size``.
    zero_temperature : str, default "reject"
        One of ``"reject"``, ``"accept"``, ``"raise"``.
    progress : Callable[[int, BoardState], None] | None
        Called after each iteration with the 1-based iteration number and the
        current board.

    Returns
    -------
    SearchResult
        ``state`` is the best board seen; ``iterations <= kmax``.

    Raises
    ------
    ConfigurationError
        On an unknown policy or a non-positive ``kmax``.
    AnnealingTemperatureError
        Only under the ``"raise"`` policy.
    """
    if zero_temperature not in ZERO_TEMPERATURE_POLICIES:
        raise ConfigurationError(
            f"Unknown zero_temperature policy '{zero_temperature}'. "
            f"Allowed: {', '.join(ZERO_TEMPERATURE_POLICIES)}"
        )

    current = initial if isinstance(initial, BoardState) else BoardState(initial)
    if kmax is None:
        kmax = default_kmax(current.size)
    if kmax < 1:
        raise ConfigurationError(f"kmax must be >= 1, got {kmax}")

    best = current
    initial_fitness = current.get_fitness()
    evaluations = 0
    k = 0
    start = perf_counter()

    while not current.is_solution() and k < kmax:
        temp = temperature(current.get_fitness(), kmax)
        neighbors = current.get_neighbors()
        best_states = get_best_states(neighbors)
        evaluations += len(neighbors)

        rng = random.Random(k)
        neighbor = best_states[rng.randrange(len(best_states))]

        if current.get_fitness() <= neighbor.get_fitness():
            current = neighbor
            if best.get_fitness() <= current.get_fitness():
                best = current
        elif accept_worse_move(
            current.get_fitness(),
            neighbor.get_fitness(),
            temp,
            rng.random(),
            zero_temperature,
        ):
            current = neighbor

        k += 1
        if progress is not None:
            progress(k, current)

    return SearchResult(
        state=best,
        iterations=k,
        evaluations=evaluations,
        elapsed=perf_counter() - start,
        initial_fitness=initial_fitness,
    )
