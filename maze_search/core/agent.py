from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .game import GameState


class Agent(ABC):
    """
    Base class for all policies (random, greedy or search based).
    """

    @abstractmethod
    def act(self, state: GameState) -> Any:
        """
        Choose an action given the current GameState.
        """
        raise NotImplementedError

    def reset(self) -> None:
        """
        Called at the start of every episode; default is a no-op.
        """
