from __future__ import annotations

import random

from ...core.solver import SearchError, SearchResult, SearchSolver
from .expansion import check_root
from .game import Action, MazeState


class GreedySolver(SearchSolver):
    """One-ply lookahead: play the move whose successor ranks highest."""

    def search(self, state: MazeState) -> SearchResult:
        check_root(state)
        legal_actions = state.legal_actions()
        if not legal_actions:
            raise SearchError(f"no legal actions from non-terminal state at {state.character}")
        best_action = None
        highest = None
        for action in legal_actions:
            next_state = state.advance(action).evaluate()
            # strict comparison: the first of several equal moves wins
            if highest is None or next_state.evaluated_score > highest:
                highest = next_state.evaluated_score
                best_action = action
        return SearchResult(action=best_action, score=highest, expanded=1, depth=1)


def random_action(state: MazeState, rng: random.Random) -> Action:
    legal_actions = state.legal_actions()
    if not legal_actions:
        raise SearchError(f"no legal actions from state at {state.character}")
    return legal_actions[rng.randrange(len(legal_actions))]


def greedy_action(state: MazeState) -> Action:
    return GreedySolver().search(state).action


def greedy_fallback(state: MazeState, expanded: int = 0, rounds: int = 0) -> SearchResult:
    """Answer for a time-boxed search that ran out of budget before producing a plan."""
    result = GreedySolver().search(state)
    return SearchResult(
        action=result.action,
        score=result.score,
        expanded=expanded + result.expanded,
        depth=result.depth,
        rounds=rounds,
        timed_out=True,
        fallback=True,
    )
