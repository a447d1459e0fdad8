"""N-Queens local search: hill climbing and simulated annealing."""

from .board import BoardState
from .errors import (
    AnnealingTemperatureError,
    ConfigurationError,
    NQueensError,
    SearchExhaustedError,
)
from .hill_climbing import hill_climb
from .neighbors import generate_neighbors, get_best_states, get_max_fitness
from .result import SearchResult
from .simulated_annealing import simulated_annealing
from .solver import Algorithm, initial_positions, solve
from .utils import conflicts, format_positions, is_valid_solution

__all__ = [
    "BoardState",
    "generate_neighbors",
    "get_max_fitness",
    "get_best_states",
    "hill_climb",
    "simulated_annealing",
    "Algorithm",
    "SearchResult",
    "initial_positions",
    "solve",
    "NQueensError",
    "ConfigurationError",
    "SearchExhaustedError",
    "AnnealingTemperatureError",
    "conflicts",
    "format_positions",
    "is_valid_solution",
]
