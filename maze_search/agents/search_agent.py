from __future__ import annotations

from typing import Any

from ..core.agent import Agent
from ..core.game import GameState
from ..core.solver import SearchResult, SearchSolver


class SearchAgent(Agent):
    """Agent that re-runs a search solver every turn and plays its first action."""

    def __init__(self, solver: SearchSolver):
        self.solver = solver
        self.last_result: SearchResult | None = None

    def act(self, state: GameState) -> Any:
        self.last_result = self.solver.search(state)
        return self.last_result.action

    def reset(self) -> None:
        self.last_result = None
