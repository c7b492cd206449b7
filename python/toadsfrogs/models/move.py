"""Moves and the move generator.

A move is named after the direction the *token* travels, the way the
sliding-puzzle ``Direction`` names where the tile goes: ``SHIFT_LEFT``
pulls the right-hand neighbour of the gap one cell left, so the gap
itself moves right.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Sequence


class Move(StrEnum):
    SHIFT_LEFT = "shift left"
    SHIFT_RIGHT = "shift right"
    JUMP_LEFT = "jump left"
    JUMP_RIGHT = "jump right"

    @property
    def offset(self) -> int:
        """Index of the moving token relative to the gap."""
        return _OFFSETS[self]

    @property
    def is_jump(self) -> bool:
        return self in (Move.JUMP_LEFT, Move.JUMP_RIGHT)


_OFFSETS: dict[Move, int] = {
    Move.SHIFT_LEFT: 1,
    Move.SHIFT_RIGHT: -1,
    Move.JUMP_LEFT: 2,
    Move.JUMP_RIGHT: -2,
}

# Expansion order used by the search driver.
MOVE_ORDER: tuple[Move, ...] = (
    Move.SHIFT_LEFT,
    Move.SHIFT_RIGHT,
    Move.JUMP_LEFT,
    Move.JUMP_RIGHT,
)


def is_legal(tokens: Sequence[bool], gap: int, move: Move) -> bool:
    """Return True if *move* can be made on the board ``(tokens, gap)``.

    Shifts only need a neighbour on that side. A jump needs two cells on
    that side, and the token jumped over must differ in type from the
    jumping one.
    """
    n = len(tokens)
    if move is Move.SHIFT_LEFT:
        return gap < n - 1
    if move is Move.SHIFT_RIGHT:
        return gap > 0
    if move is Move.JUMP_LEFT:
        return gap <= n - 3 and tokens[gap + 1] != tokens[gap + 2]
    if move is Move.JUMP_RIGHT:
        return gap >= 2 and tokens[gap - 1] != tokens[gap - 2]
    return False


def legal_moves(tokens: Sequence[bool], gap: int) -> list[Move]:
    """All legal moves for ``(tokens, gap)`` in :data:`MOVE_ORDER`."""
    return [m for m in MOVE_ORDER if is_legal(tokens, gap, m)]
