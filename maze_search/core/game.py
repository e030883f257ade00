from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Tuple, List


@dataclass(frozen=True)
class GameState(ABC):
    """
    Immutable snapshot of a turn-limited episode.

    Searches branch many hypothetical futures from one state, so a state is
    never changed in place: every transition returns a new one.
    """

    @property
    @abstractmethod
    def is_terminal(self) -> bool:
        """True once the episode has used up its turns."""
        raise NotImplementedError


class Game(ABC):
    """
    Episode driver used by the benchmark harness: it owns the current state
    and applies the moves a policy picks.
    """

    @abstractmethod
    def reset(self, seed: int | None = None) -> GameState:
        """
        Generate the grid for ``seed`` and return the turn-0 state.
        """
        raise NotImplementedError

    @abstractmethod
    def step(
        self, action: Any
    ) -> Tuple[GameState, float, bool, Dict[str, Any]]:
        """
        Play one move and return (next_state, reward, done, info).

        ``reward`` is the points collected by this move (0 when the cell was
        empty or already collected); ``done`` is True on the last turn.
        An illegal move raises ``ValueError``.
        """
        raise NotImplementedError

    @abstractmethod
    def legal_actions(self, state: GameState | None = None) -> List[Any]:
        """
        Moves whose destination stays on the grid, for ``state`` or the
        current state.
        """
        raise NotImplementedError

    @abstractmethod
    def render(self, state: GameState | None = None, mode: str = "human") -> Any:
        """
        Render the current or provided state.

        mode:
            'human'     → print the text grid
            'ansi'      → return the text grid
            'rgb_array' → np.ndarray image
        """
        raise NotImplementedError
