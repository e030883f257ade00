from __future__ import annotations

import time
from typing import Callable, Optional

from ...core.deadline import Deadline
from ...core.solver import SearchError, SearchResult, SearchSolver
from .expansion import check_root, expand, new_frontier
from .game import Action, MazeState
from .solver_greedy import greedy_fallback


class BeamSearchSolver(SearchSolver):
    """
    Beam search over a single ranked frontier.

    Each level pops up to ``beam_width`` of the best states in the current
    beam, expands every legal move and ranks the children into the next
    beam. The answer is the first-action tag of the best state of the last
    completed level.

    Two budgets are supported:

    - fixed: ``beam_depth`` levels (stops early once the best state is terminal)
    - time-boxed: ``time_threshold_ms`` of wall clock, polled before every pop;
      depth is unbounded unless ``beam_depth`` is also given.

    If the time budget runs out before the first level completes there is
    no plan yet, and the move comes from one-ply greedy evaluation instead.
    """

    def __init__(
        self,
        beam_width: int,
        beam_depth: Optional[int] = None,
        time_threshold_ms: Optional[float] = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        if beam_width < 1:
            raise ValueError("beam_width must be at least 1")
        if beam_depth is None and time_threshold_ms is None:
            raise ValueError("beam search needs a beam_depth, a time_threshold_ms, or both")
        if beam_depth is not None and beam_depth < 1:
            raise ValueError("beam_depth must be at least 1")
        if time_threshold_ms is not None and time_threshold_ms < 0:
            raise ValueError("time_threshold_ms must be non-negative")
        self.beam_width = beam_width
        self.beam_depth = beam_depth
        self.time_threshold_ms = time_threshold_ms
        self.clock = clock

    def search(self, state: MazeState) -> SearchResult:
        check_root(state)
        deadline = None
        if self.time_threshold_ms is not None:
            deadline = Deadline(self.time_threshold_ms, clock=self.clock)

        now_beam = new_frontier()
        now_beam.push(state)
        best_state: MazeState | None = None
        expanded = 0
        depth = 0

        t = 0
        while self.beam_depth is None or t < self.beam_depth:
            next_beam = new_frontier()
            for _ in range(self.beam_width):
                if deadline is not None and deadline.is_expired():
                    if best_state is None:
                        return greedy_fallback(state, expanded=expanded)
                    return self._result(best_state, expanded, depth, timed_out=True)
                if not now_beam:
                    break
                now_state = now_beam.pop()
                for child in expand(now_state, tag_first_action=(t == 0)):
                    next_beam.push(child)
                expanded += 1
            if not next_beam:
                raise SearchError(f"beam emptied at depth {t}")
            now_beam = next_beam
            best_state = now_beam.peek()
            depth = t + 1
            if best_state.is_terminal:
                break
            t += 1

        if best_state is None:
            raise SearchError("beam search finished without completing a level")
        return self._result(best_state, expanded, depth, timed_out=False)

    @staticmethod
    def _result(best_state: MazeState, expanded: int, depth: int, timed_out: bool) -> SearchResult:
        return SearchResult(
            action=best_state.first_action,
            score=best_state.evaluated_score,
            expanded=expanded,
            depth=depth,
            timed_out=timed_out,
        )


def beam_search_action(state: MazeState, beam_width: int, beam_depth: int) -> Action:
    return BeamSearchSolver(beam_width, beam_depth=beam_depth).search(state).action


def beam_search_action_with_time_threshold(
    state: MazeState, beam_width: int, time_threshold_ms: float
) -> Action:
    return BeamSearchSolver(beam_width, time_threshold_ms=time_threshold_ms).search(state).action
