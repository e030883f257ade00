"""Policies that pick the next move of an episode."""
from .heuristic import RandomAgent, GreedyAgent
from .search_agent import SearchAgent

__all__ = [
    "RandomAgent",
    "GreedyAgent",
    "SearchAgent",
]
