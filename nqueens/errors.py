"""Exception hierarchy for the N-Queens local-search package.

All errors raised on purpose by the solvers derive from ``NQueensError`` so
callers (the CLI in particular) can translate them into diagnostics and exit
codes without catching unrelated failures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .board import BoardState


class NQueensError(Exception):
    """Base class for all package-specific errors."""


class ConfigurationError(NQueensError, ValueError):
    """Raised for invalid solver inputs: unknown algorithm, bad size or option."""


class SearchExhaustedError(NQueensError):
    """Raised when an optional iteration or time cap stops a search early.

    Parameters
    ----------
    message : str
        Human-readable reason.
    state : BoardState | None
        Last state visited when the cap was reached.
    iterations : int
        Iterations executed.
    evaluations : int
        Neighbor fitness evaluations performed.
    elapsed : float
        Wall time in seconds.
    timeout : bool
        True when the wall-clock limit (rather than the iteration cap) fired.
    """

    def __init__(
        self,
        message: str,
        state: Optional["BoardState"] = None,
        iterations: int = 0,
        evaluations: int = 0,
        elapsed: float = 0.0,
        timeout: bool = False,
    ):
        super().__init__(message)
        self.state = state
        self.iterations = iterations
        self.evaluations = evaluations
        self.elapsed = elapsed
        self.timeout = timeout


class AnnealingTemperatureError(NQueensError, ArithmeticError):
    """Raised when annealing meets a zero temperature under the ``"raise"`` policy."""
