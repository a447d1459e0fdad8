"""Result record shared by the local-search drivers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .board import BoardState


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one search run.

    Attributes
    ----------
    state : BoardState
        Returned board: the solution for hill climbing, the best board seen
        for simulated annealing.
    iterations : int
        Number of search iterations executed.
    evaluations : int
        Number of neighbor fitness evaluations performed.
    elapsed : float
        Wall time in seconds, measured with ``perf_counter()``.
    initial_fitness : int
        Fitness of the starting board.
    """

    state: BoardState
    iterations: int
    evaluations: int
    elapsed: float
    initial_fitness: int

    @property
    def success(self) -> bool:
        return self.state.is_solution()

    @property
    def positions(self) -> Tuple[int, ...]:
        return self.state.positions

    @property
    def fitness(self) -> int:
        return self.state.get_fitness()
