from __future__ import annotations

import time
from typing import Callable, List, Optional, Tuple

from ...core.deadline import Deadline
from ...core.frontier import Frontier
from ...core.solver import SearchResult, SearchSolver
from .expansion import check_root, expand, new_frontier
from .game import Action, MazeState
from .solver_greedy import greedy_fallback


class ChokudaiSearchSolver(SearchSolver):
    """
    Chokudai search: one ranked frontier per depth, refined over rounds.

    Each round walks depths 0..beam_depth-1 and moves up to ``beam_width``
    of the best states of frontier ``t`` into frontier ``t + 1`` (a terminal
    state at the top of a frontier stops that depth for the round). Rounds
    repeat ``beam_num`` times, or until ``time_threshold_ms`` runs out; in
    the time-boxed variant the deadline is polled before every pop as well as
    between rounds, so a round may be cut short. This is stricter than
    checking the clock only after each full round: no round is guaranteed
    to complete, and a budget of 0 ms can expand nothing at all.

    Frontier 0 is seeded once with the root and never refilled: after the
    first round it is empty and only the deeper frontiers keep improving.
    The answer is the first-action tag of the best state in the deepest
    non-empty frontier. The root itself carries no tag, so when nothing was
    expanded (a zero budget) the move comes from one-ply greedy evaluation.
    """

    def __init__(
        self,
        beam_width: int,
        beam_depth: int,
        beam_num: Optional[int] = None,
        time_threshold_ms: Optional[float] = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        if beam_width < 1:
            raise ValueError("beam_width must be at least 1")
        if beam_depth < 1:
            raise ValueError("beam_depth must be at least 1")
        if (beam_num is None) == (time_threshold_ms is None):
            raise ValueError("exactly one of beam_num and time_threshold_ms must be given")
        if beam_num is not None and beam_num < 1:
            raise ValueError("beam_num must be at least 1")
        if time_threshold_ms is not None and time_threshold_ms < 0:
            raise ValueError("time_threshold_ms must be non-negative")
        self.beam_width = beam_width
        self.beam_depth = beam_depth
        self.beam_num = beam_num
        self.time_threshold_ms = time_threshold_ms
        self.clock = clock

    def search(self, state: MazeState) -> SearchResult:
        check_root(state)
        deadline = None
        if self.time_threshold_ms is not None:
            deadline = Deadline(self.time_threshold_ms, clock=self.clock)

        beams = [new_frontier() for _ in range(self.beam_depth + 1)]
        beams[0].push(state)

        rounds = 0
        expanded = 0
        timed_out = False
        while self.beam_num is None or rounds < self.beam_num:
            if deadline is not None and deadline.is_expired():
                timed_out = True
                break
            round_expanded, interrupted = self._run_round(beams, deadline)
            expanded += round_expanded
            if interrupted:
                timed_out = True
                break
            rounds += 1
            if round_expanded == 0:
                # every frontier is empty or topped by a terminal state
                break

        return self._select(state, beams, expanded, rounds, timed_out)

    def _run_round(
        self, beams: List[Frontier[MazeState]], deadline: Deadline | None
    ) -> Tuple[int, bool]:
        expanded = 0
        for t in range(self.beam_depth):
            now_beam = beams[t]
            next_beam = beams[t + 1]
            for _ in range(self.beam_width):
                if deadline is not None and deadline.is_expired():
                    return expanded, True
                if not now_beam:
                    break
                if now_beam.peek().is_terminal:
                    break
                now_state = now_beam.pop()
                for child in expand(now_state, tag_first_action=(t == 0)):
                    next_beam.push(child)
                expanded += 1
        return expanded, False

    def _select(
        self,
        root: MazeState,
        beams: List[Frontier[MazeState]],
        expanded: int,
        rounds: int,
        timed_out: bool,
    ) -> SearchResult:
        # frontier 0 only ever holds the untagged root
        for t in range(self.beam_depth, 0, -1):
            if beams[t]:
                best_state = beams[t].peek()
                return SearchResult(
                    action=best_state.first_action,
                    score=best_state.evaluated_score,
                    expanded=expanded,
                    depth=t,
                    rounds=rounds,
                    timed_out=timed_out,
                )
        return greedy_fallback(root, expanded=expanded, rounds=rounds)


def chokudai_search_action(
    state: MazeState, beam_width: int, beam_depth: int, beam_num: int
) -> Action:
    return ChokudaiSearchSolver(beam_width, beam_depth, beam_num=beam_num).search(state).action


def chokudai_search_action_with_time_threshold(
    state: MazeState, beam_width: int, beam_depth: int, time_threshold_ms: float
) -> Action:
    solver = ChokudaiSearchSolver(beam_width, beam_depth, time_threshold_ms=time_threshold_ms)
    return solver.search(state).action
