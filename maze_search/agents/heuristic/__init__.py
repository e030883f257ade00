"""Baseline (no lookahead beyond one ply) agents."""
from .random_agent import RandomAgent
from .greedy_agent import GreedyAgent

__all__ = [
    "RandomAgent",
    "GreedyAgent",
]
