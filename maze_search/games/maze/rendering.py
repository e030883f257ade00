from __future__ import annotations

import numpy as np

from .grid import MAX_POINT


def render_text(state) -> str:
    """
    Text snapshot: turn and score header, then one row per grid row with
    ``@`` for the agent, the digit of any uncollected reward and ``.`` for
    empty cells.
    """
    lines = [f"turn:\t{state.turn}", f"score:\t{state.game_score}"]
    cy, cx = state.character
    for y in range(state.config.height):
        row = []
        for x in range(state.config.width):
            if (y, x) == (cy, cx):
                row.append("@")
                continue
            point = state.reward_at(y, x)
            row.append(str(point) if point > 0 else ".")
        lines.append("".join(row))
    return "\n".join(lines)


def render_rgb(state, scale: int = 20) -> np.ndarray:
    """
    Render the given state as an HWC uint8 RGB image.

    - rewards: green squares, brighter for larger rewards
    - collected / empty cells: white
    - agent: solid red square

    Parameters
    ----------
    state: MazeState
        The state to draw
    scale: int
        Pixels per cell (min 4 so the cell padding stays visible)
    """
    scale = max(4, int(scale))
    height, width = state.config.height, state.config.width
    img = np.ones((height * scale, width * scale, 3), dtype=np.uint8) * 255  # white background

    grid = state.remaining_points()
    pad = max(1, scale // 8)
    for y in range(height):
        for x in range(width):
            point = int(grid[y, x])
            if point <= 0:
                continue
            cy, cx = y * scale, x * scale
            shade = int(200 - 150 * point / MAX_POINT)
            img[cy + pad : cy + scale - pad, cx + pad : cx + scale - pad, :] = (shade, 255, shade)

    # Grid lines
    img[::scale, :, :] = 180
    img[:, ::scale, :] = 180

    # Agent
    ay, ax = state.character
    cy, cx = ay * scale, ax * scale
    img[cy + pad : cy + scale - pad, cx + pad : cx + scale - pad, :] = (255, 0, 0)

    return img
