"""Node expansion shared by the maze search solvers."""
from __future__ import annotations

from typing import List

from ...core.frontier import Frontier
from ...core.solver import SearchError
from .game import MazeState


def ranking_key(state: MazeState) -> int:
    return state.evaluated_score


def new_frontier() -> Frontier[MazeState]:
    return Frontier(ranking_key)


def check_root(state: MazeState) -> None:
    if state.is_terminal:
        raise ValueError(f"cannot search from a finished episode (turn {state.turn})")


def expand(state: MazeState, tag_first_action: bool) -> List[MazeState]:
    """One evaluated child per legal action.

    Children of the search root get their own action as first-action tag;
    deeper children inherit the parent's tag.
    """
    actions = state.legal_actions()
    if not actions:
        raise SearchError(f"no legal actions from non-terminal state at {state.character}")
    children: List[MazeState] = []
    for action in actions:
        child = state.advance(action).evaluate()
        if tag_first_action:
            child = child.with_first_action(action)
        children.append(child)
    return children
