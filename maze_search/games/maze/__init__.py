"""Grid collection maze game and its search solvers."""
from .grid import MazeConfig, EAST, WEST, SOUTH, NORTH, ACTION_NAMES
from .game import MazeGame, MazeState, generate_state
from .solver_greedy import GreedySolver, random_action, greedy_action
from .solver_beam import BeamSearchSolver, beam_search_action, beam_search_action_with_time_threshold
from .solver_chokudai import (
    ChokudaiSearchSolver,
    chokudai_search_action,
    chokudai_search_action_with_time_threshold,
)

__all__ = [
    "MazeConfig",
    "EAST",
    "WEST",
    "SOUTH",
    "NORTH",
    "ACTION_NAMES",
    "MazeGame",
    "MazeState",
    "generate_state",
    "GreedySolver",
    "BeamSearchSolver",
    "ChokudaiSearchSolver",
    "random_action",
    "greedy_action",
    "beam_search_action",
    "beam_search_action_with_time_threshold",
    "chokudai_search_action",
    "chokudai_search_action_with_time_threshold",
]
