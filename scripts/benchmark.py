#!/usr/bin/env python3
"""
Benchmark a maze policy over many seeded episodes.

Usage:
    python scripts/benchmark.py configs/beam_timed.yaml
    python scripts/benchmark.py configs/chokudai_timed.yaml --num-games 10 --no-wandb
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from maze_search.core.persistence import ResultStore
from maze_search.evaluation import Benchmark, create_agent, load_config
from maze_search.games.maze import MazeGame


def main():
    parser = argparse.ArgumentParser(description="Benchmark search policies on the maze game")
    parser.add_argument("config", type=str, help="Path to YAML configuration file")
    parser.add_argument("--num-games", type=int, help="Override benchmark.num_games")
    parser.add_argument("--seed-offset", type=int, help="Override benchmark.seed_offset")
    parser.add_argument("--no-wandb", action="store_true", help="Disable Weights & Biases logging")
    args = parser.parse_args()

    try:
        config = load_config(args.config)
    except FileNotFoundError as exc:
        print(exc)
        sys.exit(1)

    print(f"Loaded configuration from {args.config}")
    print(f"Policy: {config.policy}")

    game = MazeGame(config.game)
    agent = create_agent(config.policy, game)
    benchmark = Benchmark(
        agent=agent,
        game=game,
        use_wandb=config.use_wandb and not args.no_wandb,
        wandb_project=config.wandb_project,
        wandb_run_name=config.wandb_run_name,
        verbose=config.verbose,
    )

    num_games = args.num_games if args.num_games is not None else config.num_games
    seed_offset = args.seed_offset if args.seed_offset is not None else config.seed_offset
    try:
        result = benchmark.run(num_games, seed_offset=seed_offset)
    finally:
        benchmark.close()

    if config.save_dir:
        store = ResultStore(config.save_dir)
        path = store.save_json(result.to_dict(), f"benchmark_{config.policy['type']}")
        print(f"Saved results to {path}")


if __name__ == "__main__":
    main()
