from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

# Action indices
EAST, WEST, SOUTH, NORTH = range(4)
DX = (1, -1, 0, 0)
DY = (0, 0, 1, -1)
ACTION_NAMES = ("east", "west", "south", "north")

MAX_POINT = 9


@dataclass(frozen=True)
class MazeConfig:
    """Grid size and episode length shared by the transition model and searches."""

    height: int = 30
    width: int = 30
    end_turn: int = 100

    def __post_init__(self):
        if self.height < 1 or self.width < 1:
            raise ValueError(f"grid must be at least 1x1, got {self.height}x{self.width}")
        if self.height * self.width < 2:
            # a single cell has no legal move
            raise ValueError("grid must have at least two cells")
        if self.end_turn < 0:
            raise ValueError("end_turn must be non-negative")

    @property
    def num_cells(self) -> int:
        return self.height * self.width

    def in_bounds(self, y: int, x: int) -> bool:
        return 0 <= y < self.height and 0 <= x < self.width


def generate_points(
    rng: np.random.Generator, config: MazeConfig
) -> Tuple[np.ndarray, Tuple[int, int]]:
    """Draw an agent start cell and a reward grid.

    Every cell except the start holds a reward uniform in [0, MAX_POINT];
    the start cell is always 0.
    """
    y = int(rng.integers(config.height))
    x = int(rng.integers(config.width))
    points = rng.integers(0, MAX_POINT + 1, size=(config.height, config.width), dtype=np.int64)
    points[y, x] = 0
    return points, (y, x)
