"""Benchmark harness and configuration."""
from .config import BenchmarkConfig, load_config, create_agent
from .benchmark import Benchmark, BenchmarkResult, EpisodeResult, play_game

__all__ = [
    "BenchmarkConfig",
    "load_config",
    "create_agent",
    "Benchmark",
    "BenchmarkResult",
    "EpisodeResult",
    "play_game",
]
