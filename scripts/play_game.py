#!/usr/bin/env python3
"""
Play one episode and print the board after every move.

Usage:
    python scripts/play_game.py --seed 3 --policy chokudai_timed --beam-width 1 --time-ms 1
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from maze_search.evaluation import create_agent, play_game
from maze_search.evaluation.config import POLICY_TYPES
from maze_search.games.maze import MazeConfig, MazeGame


def main():
    parser = argparse.ArgumentParser(description="Play a single maze episode")
    parser.add_argument("--seed", type=int, default=0, help="Grid generation seed")
    parser.add_argument("--policy", choices=POLICY_TYPES, default="chokudai_timed")
    parser.add_argument("--height", type=int, default=30)
    parser.add_argument("--width", type=int, default=30)
    parser.add_argument("--end-turn", type=int, default=100)
    parser.add_argument("--beam-width", type=int, default=1)
    parser.add_argument("--beam-depth", type=int, help="Search depth (defaults to end turn for chokudai)")
    parser.add_argument("--beam-num", type=int, default=1)
    parser.add_argument("--time-ms", type=float, default=1.0, help="Per-move budget for timed policies")
    args = parser.parse_args()

    config = MazeConfig(height=args.height, width=args.width, end_turn=args.end_turn)
    policy = {
        "type": args.policy,
        "beam_width": args.beam_width,
        "beam_num": args.beam_num,
        "time_threshold_ms": args.time_ms,
    }
    if args.beam_depth is not None:
        policy["beam_depth"] = args.beam_depth
    elif args.policy == "beam":
        policy["beam_depth"] = 10

    agent = create_agent(policy, MazeGame(config))
    final_state = play_game(args.seed, agent, config)
    print(f"final score: {final_state.game_score}")


if __name__ == "__main__":
    main()
