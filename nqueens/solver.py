"""Algorithm selection and the single entry point used by the CLI.

``solve`` builds the all-ones starting board for a size and runs the chosen
local search. Algorithm codes follow the command-line convention:
``0`` for hill climbing and ``1`` for simulated annealing.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, List, Optional, Union

from .board import BoardState
from .errors import ConfigurationError
from .hill_climbing import hill_climb
from .result import SearchResult
from .simulated_annealing import simulated_annealing


class Algorithm(IntEnum):
    HILL_CLIMB = 0
    SIMULATED_ANNEALING = 1

    @classmethod
    def from_value(cls, value: Union[int, str, "Algorithm"]) -> "Algorithm":
        """Resolve an integer code or a name (``"hill_climb"``, ``"HC"``, ``"SA"``...)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            token = value.strip().upper().replace("-", "_")
            aliases = {"HC": cls.HILL_CLIMB, "SA": cls.SIMULATED_ANNEALING}
            if token in aliases:
                return aliases[token]
            if token in cls.__members__:
                return cls[token]
            if token.isdigit():
                value = int(token)
            else:
                raise ConfigurationError(
                    f"Unknown algorithm '{value}'. Allowed: 0 (hill climbing), 1 (simulated annealing)"
                )
        try:
            return cls(value)
        except ValueError as exc:
            raise ConfigurationError(
                f"Unknown algorithm {value!r}. Allowed: 0 (hill climbing), 1 (simulated annealing)"
            ) from exc

    @property
    def label(self) -> str:
        return "HC" if self is Algorithm.HILL_CLIMB else "SA"


def initial_positions(size: int) -> List[int]:
    """Return the all-ones starting board ``[1] * size``.

    Raises
    ------
    ConfigurationError
        If ``size < 1``.
    """
    if size < 1:
        raise ConfigurationError(f"Board size must be >= 1, got {size}")
    return [1] * size


def solve(
    size: int,
    algorithm: Union[int, str, Algorithm] = Algorithm.HILL_CLIMB,
    max_iter: Optional[int] = None,
    time_limit: Optional[float] = None,
    zero_temperature: str = "reject",
    kmax: Optional[int] = None,
    progress: Optional[Callable[[int, BoardState], None]] = None,
) -> SearchResult:
    """Run one search on an ``size``-queens board from the all-ones start.

    ``max_iter`` and ``time_limit`` only apply to hill climbing;
    ``zero_temperature`` and ``kmax`` only apply to simulated annealing.
    """
    chosen = Algorithm.from_value(algorithm)
    start = BoardState(initial_positions(size))
    if chosen is Algorithm.HILL_CLIMB:
        return hill_climb(start, max_iter=max_iter, time_limit=time_limit, progress=progress)
    return simulated_annealing(start, kmax=kmax, zero_temperature=zero_temperature, progress=progress)
