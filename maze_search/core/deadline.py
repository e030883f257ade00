"""Wall-clock budget for time-boxed searches."""
from __future__ import annotations

import time
from typing import Callable


class Deadline:
    """
    Polled stopwatch: reports whether ``time_threshold_ms`` has elapsed since
    construction. Nothing is interrupted; callers check ``is_expired()`` at
    the top of each expansion step, so a search may overshoot by the cost of
    one node expansion.

    ``Deadline(None)`` never expires.
    """

    def __init__(
        self,
        time_threshold_ms: float | None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        if time_threshold_ms is not None and time_threshold_ms < 0:
            raise ValueError("time_threshold_ms must be non-negative")
        self.time_threshold_ms = time_threshold_ms
        self._clock = clock
        self.start_time = clock()

    def elapsed_ms(self) -> float:
        return (self._clock() - self.start_time) * 1000.0

    def remaining_ms(self) -> float:
        if self.time_threshold_ms is None:
            return float("inf")
        return max(0.0, self.time_threshold_ms - self.elapsed_ms())

    def is_expired(self) -> bool:
        if self.time_threshold_ms is None:
            return False
        return self.elapsed_ms() >= self.time_threshold_ms
