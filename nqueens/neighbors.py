"""Neighborhood generation and best-state selection.

The neighborhood of a board is every board obtained by moving exactly one
queen to any row of its column, including its current row. The list is
materialized in column-major, row-ascending order; both searches pick among
the best-fitness neighbors by index, so this order fixes which state a given
seed selects.

Performance
-----------
Every call builds ``N * N`` boards and each fitness evaluation is ``O(N^2)``,
so one search iteration costs ``O(N^4)``. This dominates run time for large N.
"""

from __future__ import annotations

from typing import List, Sequence

from .board import BoardState


def generate_neighbors(state: BoardState) -> List[BoardState]:
    """Return all single-column mutations of ``state``.

    Outer loop over columns ascending, inner loop over rows ``1..size``
    ascending. The result has exactly ``size * size`` entries and contains
    ``state`` itself (by value) once per column.
    """
    size = state.size
    neighbors: List[BoardState] = []
    for column in range(size):
        for row in range(1, size + 1):
            neighbors.append(state.with_row(column, row))
    return neighbors


def get_max_fitness(states: Sequence[BoardState]) -> int:
    """Return the highest fitness in a non-empty sequence of states.

    Raises
    ------
    ValueError
        If ``states`` is empty.
    """
    if not states:
        raise ValueError("get_max_fitness() requires at least one state")
    return max(state.get_fitness() for state in states)


def get_best_states(states: Sequence[BoardState]) -> List[BoardState]:
    """Return every state whose fitness equals the maximum, preserving order."""
    best = get_max_fitness(states)
    return [state for state in states if state.get_fitness() == best]
