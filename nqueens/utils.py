"""Utility helpers for the N-Queens project.

Boards are encoded as a 1D sequence where ``board[col] = row`` with 1-based
rows. ``conflicts`` counts attacking pairs over the whole board and is used as
an independent cross-check of ``BoardState.is_solution``, which only scans
earlier columns. ``ProgressPrinter`` is the line-oriented progress reporter
shared by the CLI driver and the benchmark pipeline.
"""

from __future__ import annotations

import sys
from collections import Counter
from typing import Optional, Sequence, TextIO


def conflicts(board: Sequence[int]) -> int:
    """Compute the number of conflicting queen pairs in O(N).

    Counts occurrences per row and per diagonal with hash maps; every group of
    ``k`` queens sharing a line contributes ``k*(k-1)/2`` pairs. The row base
    (0 or 1) does not affect the result.
    """
    row_count: Counter[int] = Counter()
    diag1: Counter[int] = Counter()
    diag2: Counter[int] = Counter()

    for column, row in enumerate(board):
        row_count[row] += 1
        diag1[row - column] += 1
        diag2[row + column] += 1

    def _pairs(counter: Counter[int]) -> int:
        total = 0
        for count in counter.values():
            if count > 1:
                total += count * (count - 1) // 2
        return total

    return _pairs(row_count) + _pairs(diag1) + _pairs(diag2)


def is_valid_solution(board: Sequence[int]) -> bool:
    """Return True if the board represents a valid N-Queens solution.

    Contract
    - Input: sequence of length N where board[col] = row (1-based rows)
    - Valid if: all 1 <= row <= N and no pairs of queens attack each other
    """
    n = len(board)
    if n == 0:
        return False
    for row in board:
        if not isinstance(row, int):
            return False
        if row < 1 or row > n:
            return False
    return conflicts(board) == 0


def format_positions(board: Sequence[int]) -> str:
    """Render rows as a comma-separated line, e.g. ``"2,4,1,3"``."""
    return ",".join(str(row) for row in board)


class ProgressPrinter:
    """Minimal progress reporter for long-running loops.

    Parameters
    ----------
    total : int | None
        Total number of steps expected, or ``None`` when unbounded. Values
        <= 0 are coerced to 1 to avoid division by zero when reporting
        percentages.
    label : str
        Short label printed in front of the progress counters.
    stream : TextIO | None
        Destination; defaults to stdout.
    """

    def __init__(self, total: Optional[int], label: str, stream: Optional[TextIO] = None):
        self.total = max(1, total) if total is not None else None
        self.label = label
        self.stream = stream

    def update(self, index: int, detail: str = "") -> None:
        """Print a single-line progress update.

        Without a known total only the counter is printed.
        """
        suffix = f" - {detail}" if detail else ""
        if self.total is None:
            line = f"[{self.label}] {index}" + suffix
        else:
            percent = (index / self.total) * 100
            line = f"[{self.label}] {index}/{self.total} ({percent:.0f}%)" + suffix
        print(line, file=self.stream if self.stream is not None else sys.stdout)

