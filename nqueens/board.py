"""Board state representation for the N-Queens local search.

Representation
--------------
A board is a tuple ``positions`` of length N where ``positions[col]`` is the
row of the queen placed in column ``col``. Columns are 0-based indexes; rows
are 1-based (``1..N``), which is also the format printed by the CLI.

Safety is evaluated as a prefix scan: a queen is *safe* when no queen in an
earlier column attacks it. Fitness is the number of safe queens, so a goal
state has ``fitness == size``.
"""

from __future__ import annotations

import operator
from typing import List, Optional, Sequence, Tuple


class BoardState:
    """Immutable placement of N queens, one per column.

    Parameters
    ----------
    positions : Sequence[int]
        Row (1-based) of the queen in each column.

    Raises
    ------
    ValueError
        If ``positions`` is empty, holds a non-integer row or a row outside
        ``1..N``.
    """

    __slots__ = ("_positions", "_fitness")

    def __init__(self, positions: Sequence[int]):
        rows: List[int] = []
        for column, row in enumerate(positions):
            try:
                rows.append(operator.index(row))
            except TypeError as exc:
                raise ValueError(f"Row {row!r} in column {column} is not an integer") from exc
        board = tuple(rows)
        size = len(board)
        if size == 0:
            raise ValueError("A board needs at least one column")
        for column, row in enumerate(board):
            if row < 1 or row > size:
                raise ValueError(f"Row {row} in column {column} is outside 1..{size}")
        self._positions: Tuple[int, ...] = board
        # None means "not computed yet"; 0 is a legitimate fitness.
        self._fitness: Optional[int] = None

    @classmethod
    def initial(cls, size: int) -> "BoardState":
        """Return the all-ones starting board of the given size."""
        return cls([1] * size)

    @property
    def positions(self) -> Tuple[int, ...]:
        return self._positions

    @property
    def size(self) -> int:
        return len(self._positions)

    @property
    def fitness(self) -> int:
        return self.get_fitness()

    def is_safe(self, column: int, row: int) -> bool:
        """Return True if a queen at ``(column, row)`` is not attacked from the left.

        Only columns ``0..column-1`` are inspected. A queen on the same row or
        on either diagonal makes the square unsafe.
        """
        for other_column in range(column):
            other_row = self._positions[other_column]
            distance = column - other_column
            if other_row == row or other_row == row - distance or other_row == row + distance:
                return False
        return True

    def is_solution(self) -> bool:
        """Return True when every queen is safe with respect to earlier columns."""
        for column, row in enumerate(self._positions):
            if not self.is_safe(column, row):
                return False
        return True

    def get_fitness(self) -> int:
        """Return the number of safe queens, computing it once."""
        if self._fitness is None:
            self._fitness = sum(
                1 for column, row in enumerate(self._positions) if self.is_safe(column, row)
            )
        return self._fitness

    def with_row(self, column: int, row: int) -> "BoardState":
        """Return a copy of this board with the queen of ``column`` moved to ``row``."""
        board = list(self._positions)
        board[column] = row
        return BoardState(board)

    def get_neighbors(self) -> List["BoardState"]:
        """Return the full one-move neighborhood (see ``nqueens.neighbors``)."""
        from .neighbors import generate_neighbors

        return generate_neighbors(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self._positions == other._positions

    def __hash__(self) -> int:
        return hash(self._positions)

    def __len__(self) -> int:
        return len(self._positions)

    def __repr__(self) -> str:
        return f"BoardState({list(self._positions)!r})"
