from __future__ import annotations

from ...games.maze.solver_greedy import GreedySolver
from ..search_agent import SearchAgent


class GreedyAgent(SearchAgent):
    """One-ply greedy policy."""

    def __init__(self):
        super().__init__(GreedySolver())
