"""
Core abstractions shared across games, agents and search solvers.
"""
from .game import Game, GameState
from .agent import Agent
from .solver import SearchSolver, SearchResult, SearchError
from .deadline import Deadline
from .frontier import Frontier
from .persistence import ResultStore

__all__ = [
    "Game",
    "GameState",
    "Agent",
    "SearchSolver",
    "SearchResult",
    "SearchError",
    "Deadline",
    "Frontier",
    "ResultStore",
]
