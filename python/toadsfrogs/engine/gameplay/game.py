"""Replays move sequences against the puzzle rules."""

from __future__ import annotations

from typing import Iterable

from toadsfrogs.engine.gamegenerator import GameGenerator
from toadsfrogs.engine.gamestate import GameState
from toadsfrogs.models.board import PuzzleState
from toadsfrogs.models.move import Move


class GamePlay:
    """Orchestrates a single replay session."""

    def __init__(self, size: int) -> None:
        self.size = size
        self.state = GameState(GameGenerator.start(size))

    @classmethod
    def from_state(cls, board: PuzzleState) -> "GamePlay":
        """Create a session that continues from an existing board."""
        obj = object.__new__(cls)
        obj.size = board.size
        obj.state = GameState(board)
        return obj

    def move(self, move: Move) -> bool:
        """Apply *move* to the current board.

        Returns False, leaving the board as it was, if the move is illegal.
        """
        board = self.state.board
        if not board.is_legal(move):
            return False
        self.state.advance(board.apply(move))
        return True

    def play(self, moves: Iterable[Move]) -> int:
        """Apply *moves* in order; return how many were legal before the first failure."""
        done = 0
        for move in moves:
            if not self.move(move):
                break
            done += 1
        return done

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
