"""Tracks the board of a replay in progress."""

from __future__ import annotations

import time

from toadsfrogs.models.board import PuzzleState


class GameState:
    """Holds the current board, move counter, and elapsed time."""

    def __init__(self, board: PuzzleState) -> None:
        self.board = board
        self.moves: int = 0
        self._start_time: float = time.time()

    @property
    def elapsed_time(self) -> float:
        return time.time() - self._start_time

    def advance(self, board: PuzzleState) -> None:
        self.board = board
        self.moves += 1

    @property
    def is_solved(self) -> bool:
        return self.board.is_goal()
