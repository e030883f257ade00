from __future__ import annotations

import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..agents import GreedyAgent, RandomAgent, SearchAgent
from ..core.agent import Agent
from ..games.maze import BeamSearchSolver, ChokudaiSearchSolver, MazeConfig, MazeGame

POLICY_TYPES = ("random", "greedy", "beam", "beam_timed", "chokudai", "chokudai_timed")


@dataclass
class BenchmarkConfig:
    """Everything needed to run a benchmark, usually loaded from YAML."""

    game: MazeConfig = field(default_factory=MazeConfig)
    policy: Dict[str, Any] = field(default_factory=lambda: {"type": "greedy"})
    num_games: int = 100
    seed_offset: int = 0
    verbose: bool = True
    use_wandb: bool = False
    wandb_project: str = "maze-search"
    wandb_run_name: Optional[str] = None
    save_dir: Optional[str] = None

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "BenchmarkConfig":
        game_config = config.get("game", {})
        benchmark_config = config.get("benchmark", {})
        logging_config = config.get("logging", {})
        results_config = config.get("results", {})

        policy = dict(config.get("policy", {"type": "greedy"}))
        if policy.get("type") not in POLICY_TYPES:
            raise ValueError(f"Unknown policy type: {policy.get('type')}")

        return cls(
            game=MazeConfig(
                height=game_config.get("height", 30),
                width=game_config.get("width", 30),
                end_turn=game_config.get("end_turn", 100),
            ),
            policy=policy,
            num_games=benchmark_config.get("num_games", 100),
            seed_offset=benchmark_config.get("seed_offset", 0),
            verbose=logging_config.get("verbose", True),
            use_wandb=logging_config.get("use_wandb", False),
            wandb_project=logging_config.get("wandb_project", "maze-search"),
            wandb_run_name=logging_config.get("wandb_run_name"),
            save_dir=results_config.get("save_dir"),
        )


def load_config(path: str | Path) -> BenchmarkConfig:
    """Read a YAML benchmark configuration."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")
    with config_path.open() as f:
        config = yaml.safe_load(f) or {}
    return BenchmarkConfig.from_dict(config)


def create_agent(policy_config: Dict[str, Any], game: MazeGame) -> Agent:
    """Create agent instance from a policy config section."""
    policy_type = policy_config["type"]

    if policy_type == "random":
        return RandomAgent(game, rng=random.Random(policy_config.get("seed", 0)))
    elif policy_type == "greedy":
        return GreedyAgent()
    elif policy_type == "beam":
        return SearchAgent(
            BeamSearchSolver(
                beam_width=policy_config["beam_width"],
                beam_depth=policy_config["beam_depth"],
            )
        )
    elif policy_type == "beam_timed":
        return SearchAgent(
            BeamSearchSolver(
                beam_width=policy_config["beam_width"],
                beam_depth=policy_config.get("beam_depth"),
                time_threshold_ms=policy_config["time_threshold_ms"],
            )
        )
    elif policy_type == "chokudai":
        return SearchAgent(
            ChokudaiSearchSolver(
                beam_width=policy_config["beam_width"],
                beam_depth=policy_config.get("beam_depth", game.config.end_turn),
                beam_num=policy_config["beam_num"],
            )
        )
    elif policy_type == "chokudai_timed":
        return SearchAgent(
            ChokudaiSearchSolver(
                beam_width=policy_config["beam_width"],
                beam_depth=policy_config.get("beam_depth", game.config.end_turn),
                time_threshold_ms=policy_config["time_threshold_ms"],
            )
        )
    else:
        raise ValueError(f"Unknown policy type: {policy_type}")
