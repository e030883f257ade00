from __future__ import annotations

import heapq
import itertools
from typing import Callable, Generic, List, Tuple, TypeVar

T = TypeVar("T")


class Frontier(Generic[T]):
    """
    Max-priority queue of search nodes ranked by ``key(node)``.

    Backed by ``heapq`` with negated keys. A monotonically increasing counter
    sits between key and node so that nodes themselves are never compared;
    as a side effect, equal keys pop in insertion order.
    """

    def __init__(self, key: Callable[[T], float]):
        self._key = key
        self._heap: List[Tuple[float, int, T]] = []
        self._counter = itertools.count()

    def push(self, node: T) -> None:
        heapq.heappush(self._heap, (-self._key(node), next(self._counter), node))

    def pop(self) -> T:
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        return heapq.heappop(self._heap)[2]

    def peek(self) -> T:
        if not self._heap:
            raise IndexError("peek at an empty frontier")
        return self._heap[0][2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
