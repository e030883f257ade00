from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from ...core.game import Game, GameState
from .grid import DX, DY, MazeConfig, generate_points
from .rendering import render_rgb, render_text

Action = int  # 0: east, 1: west, 2: south, 3: north
Coord = Tuple[int, int]  # (y, x)


@dataclass(frozen=True)
class MazeState(GameState):
    """Snapshot of one grid-collection episode.

    ``points`` is the immutable reward grid of the episode and is shared by
    reference between every state derived from it. Collected cells are
    tracked in ``collected``, a bitset over ``y * width + x``, so branching
    a state never copies the grid.
    """

    # Shared read-only reward grid, excluded from equality/hash
    points: np.ndarray = field(compare=False, hash=False, repr=False)
    character: Coord
    turn: int = 0
    game_score: int = 0
    # Ranking key; stale until evaluate() is called after advance()
    evaluated_score: int = 0
    # Move taken from the searched root; None outside a search
    first_action: Optional[Action] = None
    collected: int = 0
    config: MazeConfig = field(default_factory=MazeConfig, compare=False)

    @classmethod
    def from_points(
        cls,
        points: Any,
        character: Coord,
        config: MazeConfig | None = None,
    ) -> "MazeState":
        """Build a turn-0 state from an explicit reward layout."""
        grid = np.array(points, dtype=np.int64)
        if config is None:
            config = MazeConfig(height=grid.shape[0], width=grid.shape[1])
        if grid.shape != (config.height, config.width):
            raise ValueError(
                f"points shape {grid.shape} does not match {config.height}x{config.width} config"
            )
        if (grid < 0).any():
            raise ValueError("rewards must be non-negative")
        y, x = character
        if not config.in_bounds(y, x):
            raise ValueError(f"start cell {character} is outside the grid")
        if grid[y, x] != 0:
            raise ValueError("start cell must hold no reward")
        grid.setflags(write=False)
        return cls(points=grid, character=(int(y), int(x)), config=config)

    # ------------------------------------------------------------------
    # Transition model
    # ------------------------------------------------------------------
    @property
    def is_terminal(self) -> bool:
        return self.turn == self.config.end_turn

    def legal_actions(self) -> List[Action]:
        y, x = self.character
        return [
            action
            for action in range(4)
            if self.config.in_bounds(y + DY[action], x + DX[action])
        ]

    def advance(self, action: Action) -> "MazeState":
        """Return the state after moving one cell in ``action``'s direction.

        The destination's reward, if any, is added to the score and the cell
        is marked collected. ``evaluated_score`` is carried over unchanged.
        """
        if self.is_terminal:
            raise ValueError(f"cannot advance a finished episode (turn {self.turn})")
        if not 0 <= action < 4:
            raise ValueError(f"unknown action {action!r}")
        y = self.character[0] + DY[action]
        x = self.character[1] + DX[action]
        if not self.config.in_bounds(y, x):
            raise ValueError(f"illegal action {action} from {self.character}")

        game_score = self.game_score
        collected = self.collected
        bit = 1 << (y * self.config.width + x)
        if not collected & bit:
            point = int(self.points[y, x])
            if point > 0:
                game_score += point
                collected |= bit
        return replace(
            self,
            character=(y, x),
            turn=self.turn + 1,
            game_score=game_score,
            collected=collected,
        )

    def evaluate(self) -> "MazeState":
        """Refresh the ranking key from the cumulative score."""
        if self.evaluated_score == self.game_score:
            return self
        return replace(self, evaluated_score=self.game_score)

    def with_first_action(self, action: Action) -> "MazeState":
        return replace(self, first_action=action)

    # ------------------------------------------------------------------
    # Grid queries
    # ------------------------------------------------------------------
    def is_collected(self, y: int, x: int) -> bool:
        return bool(self.collected >> (y * self.config.width + x) & 1)

    def reward_at(self, y: int, x: int) -> int:
        if self.is_collected(y, x):
            return 0
        return int(self.points[y, x])

    def remaining_points(self) -> np.ndarray:
        """Writable copy of the reward grid with collected cells zeroed."""
        grid = np.array(self.points, copy=True)
        flat = grid.reshape(-1)
        mask, idx = self.collected, 0
        while mask:
            if mask & 1:
                flat[idx] = 0
            mask >>= 1
            idx += 1
        return grid

    def __str__(self) -> str:
        return render_text(self)


def generate_state(seed: int, config: MazeConfig | None = None) -> MazeState:
    """Seeded initial state: start cell and rewards drawn from ``numpy.random.default_rng(seed)``."""
    config = config or MazeConfig()
    rng = np.random.default_rng(seed)
    points, character = generate_points(rng, config)
    return MazeState.from_points(points, character, config)


class MazeGame(Game):
    """
    Single-agent grid collection game.

    - Agent moves one cell east/west/south/north per turn.
    - Each cell's reward is collected at most once.
    - Episode ends after ``config.end_turn`` turns.
    - Reward for a step is the points collected on that step.
    """

    def __init__(
        self,
        config: MazeConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or MazeConfig()
        self.rng = rng or random.Random()

        # internal state
        self._state: MazeState | None = None

    # ------------------------------------------------------------------
    # Game interface
    # ------------------------------------------------------------------
    def reset(self, seed: int | None = None) -> MazeState:
        if seed is None:
            seed = self.rng.randrange(2**32)
        self._state = generate_state(seed, self.config)
        return self._state

    def set_state(self, state: MazeState) -> None:
        self._state = state

    @property
    def state(self) -> MazeState:
        if self._state is None:
            raise RuntimeError("Game not reset")
        return self._state

    def step(self, action: Action) -> Tuple[MazeState, float, bool, Dict[str, Any]]:
        prev = self.state
        new_state = prev.advance(action)
        self._state = new_state
        reward = float(new_state.game_score - prev.game_score)
        done = new_state.is_terminal
        info: Dict[str, Any] = {"turn": new_state.turn, "score": new_state.game_score}
        return new_state, reward, done, info

    def legal_actions(self, state: MazeState | None = None) -> List[Action]:
        st = state if state is not None else self.state
        return st.legal_actions()

    def render(self, state: MazeState | None = None, mode: str = "human") -> Any:
        st = state if state is not None else self.state
        if mode == "human":
            print(render_text(st))
        elif mode == "ansi":
            return render_text(st)
        elif mode == "rgb_array":
            return render_rgb(st, scale=20)
        else:
            raise ValueError(f"Unsupported render mode {mode}")
