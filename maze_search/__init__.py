"""Anytime, time-budgeted search policies for a turn-limited grid-collection game."""

__version__ = "0.1.0"
