"""Priority-ordered open list."""

from __future__ import annotations

import heapq
import itertools
from typing import Any, Callable

from toadsfrogs.models.board import PuzzleState


def score_then_depth(state: PuzzleState) -> tuple[int, int]:
    """Default ordering: lowest score first, shallower state on equal score.

    With a consistent heuristic this keeps the first path cost recorded
    for any state minimal.
    """
    return state.score(), state.moves_taken


class Frontier:
    """Min-heap of states ordered by ``key(state)``.

    Items with equal keys come out in an unspecified order; callers must
    not depend on which equal-cost solution is found first.
    """

    def __init__(self, key: Callable[[PuzzleState], Any] = score_then_depth) -> None:
        self._key = key
        self._heap: list[tuple[Any, int, PuzzleState]] = []
        # States themselves are never compared by the heap.
        self._counter = itertools.count()
        self.peak = 0

    def push(self, state: PuzzleState) -> None:
        heapq.heappush(self._heap, (self._key(state), next(self._counter), state))
        self.peak = max(self.peak, len(self._heap))

    def pop(self) -> PuzzleState:
        """Remove and return the lowest-key state. Raises ``IndexError`` if empty."""
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        return heapq.heappop(self._heap)[2]

    def peek(self) -> PuzzleState:
        if not self._heap:
            raise IndexError("peek at an empty frontier")
        return self._heap[0][2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
