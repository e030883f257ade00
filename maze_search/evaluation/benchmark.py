from __future__ import annotations

import time
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any, Dict, List, Optional

import wandb

from ..core.agent import Agent
from ..core.solver import SearchError
from ..games.maze import ACTION_NAMES, MazeConfig, MazeGame, MazeState


@dataclass
class EpisodeResult:
    seed: int
    score: int
    turns: int
    actions: List[int] = field(default_factory=list)
    elapsed_s: float = 0.0


@dataclass
class BenchmarkResult:
    """Scores of completed episodes plus the seeds whose episode was aborted."""

    episodes: List[EpisodeResult] = field(default_factory=list)
    aborted: Dict[int, str] = field(default_factory=dict)
    elapsed_s: float = 0.0

    @property
    def scores(self) -> List[int]:
        return [episode.score for episode in self.episodes]

    @property
    def num_completed(self) -> int:
        return len(self.episodes)

    @property
    def mean_score(self) -> float:
        # aborted episodes are excluded from the mean
        if not self.episodes:
            return 0.0
        return sum(self.scores) / len(self.episodes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mean_score": self.mean_score,
            "num_completed": self.num_completed,
            "num_aborted": len(self.aborted),
            "scores": {str(ep.seed): ep.score for ep in self.episodes},
            "aborted": {str(seed): reason for seed, reason in self.aborted.items()},
            "elapsed_s": self.elapsed_s,
        }


class Benchmark:
    """
    Plays many seeded episodes with one agent and averages the final scores.

    A search failure (``SearchError``) or a rejected move (``ValueError``)
    aborts only the episode in which it happened.
    """

    def __init__(
        self,
        agent: Agent,
        game: MazeGame,
        use_wandb: bool = False,
        wandb_project: str = "maze-search",
        wandb_run_name: Optional[str] = None,
        verbose: bool = True,
    ):
        self.agent = agent
        self.game = game
        self.use_wandb = use_wandb
        self.verbose = verbose

        if self.use_wandb:
            wandb.init(
                project=wandb_project,
                name=wandb_run_name or f"benchmark-{int(time.time())}",
                config=self._get_config(),
            )

    def _get_config(self) -> Dict[str, Any]:
        """Get configuration for logging."""
        config: Dict[str, Any] = {
            "agent_type": type(self.agent).__name__,
            "height": self.game.config.height,
            "width": self.game.config.width,
            "end_turn": self.game.config.end_turn,
        }
        solver = getattr(self.agent, "solver", None)
        if solver is not None:
            config["solver_type"] = type(solver).__name__
            for name in ("beam_width", "beam_depth", "beam_num", "time_threshold_ms"):
                if hasattr(solver, name):
                    config[name] = getattr(solver, name)
        return config

    def play_episode(self, seed: int) -> EpisodeResult:
        self.agent.reset()
        state = self.game.reset(seed=seed)
        actions: List[int] = []
        t_start = perf_counter()
        while not state.is_terminal:
            action = self.agent.act(state)
            state, _, _, _ = self.game.step(action)
            actions.append(action)
        return EpisodeResult(
            seed=seed,
            score=state.game_score,
            turns=state.turn,
            actions=actions,
            elapsed_s=perf_counter() - t_start,
        )

    def run(self, num_games: int, seed_offset: int = 0) -> BenchmarkResult:
        if self.verbose:
            print(f"[benchmark] {type(self.agent).__name__}: {num_games} games from seed {seed_offset}")
        result = BenchmarkResult()
        t_start = perf_counter()
        for seed in range(seed_offset, seed_offset + num_games):
            try:
                episode = self.play_episode(seed)
            except (SearchError, ValueError) as exc:
                result.aborted[seed] = str(exc)
                if self.verbose:
                    print(f"[benchmark] seed {seed} aborted: {exc}")
                continue
            result.episodes.append(episode)
            if self.use_wandb:
                wandb.log(
                    {
                        "episode/score": episode.score,
                        "time/episode_s": episode.elapsed_s,
                        "time/turn_ms": episode.elapsed_s / max(episode.turns, 1) * 1000.0,
                    },
                    step=seed - seed_offset,
                )
        result.elapsed_s = perf_counter() - t_start

        if self.verbose:
            print(f"[timing] benchmark_s={result.elapsed_s:.3f}s | per_game_s={result.elapsed_s / max(num_games, 1):.3f}")
            if result.aborted:
                print(f"[benchmark] {len(result.aborted)} aborted episodes excluded from the mean")
            print(f"score_mean: {result.mean_score}")
        if self.use_wandb:
            wandb.log(
                {
                    "benchmark/mean_score": result.mean_score,
                    "benchmark/num_completed": result.num_completed,
                    "benchmark/num_aborted": len(result.aborted),
                }
            )
        return result

    def close(self) -> None:
        if self.use_wandb:
            wandb.finish()


def play_game(seed: int, agent: Agent, config: MazeConfig | None = None, verbose: bool = True) -> MazeState:
    """Play one episode, printing the state after every move."""
    game = MazeGame(config)
    agent.reset()
    state = game.reset(seed=seed)
    if verbose:
        print(state)
    while not state.is_terminal:
        action = agent.act(state)
        state, _, _, _ = game.step(action)
        if verbose:
            print(f"action: {ACTION_NAMES[action]}")
            print(state)
    return state
