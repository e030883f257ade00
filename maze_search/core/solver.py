from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from .game import GameState


class SearchError(RuntimeError):
    """Internal-consistency failure inside a search (e.g. an empty frontier
    where the bookkeeping guarantees at least one state)."""


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one search invocation.

    ``action`` is always an immediately executable move from the searched
    state. ``fallback`` is set when the search ran out of time before it
    could produce a plan and the action came from one-ply greedy evaluation.
    """

    action: Any
    score: int = 0
    expanded: int = 0
    depth: int = 0
    rounds: int = 0
    timed_out: bool = False
    fallback: bool = False


class SearchSolver(ABC):
    """
    Classical search algorithm that explores the future state tree under a
    resource budget and returns the next move to play.
    """

    @abstractmethod
    def search(self, state: GameState) -> SearchResult:
        """
        Search from ``state`` and return the chosen first action.
        """
        raise NotImplementedError

    def __call__(self, state: GameState) -> Any:
        return self.search(state).action
