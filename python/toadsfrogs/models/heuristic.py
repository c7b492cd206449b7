"""Cost-to-go estimate for A*."""

from __future__ import annotations

from typing import Sequence

from toadsfrogs.models.tokens import TOKEN_A, TOKEN_B


def misplaced(tokens: Sequence[bool], gap: int) -> int:
    """Count cells not yet holding their goal-side token.

    Left of the centre the goal token is B, right of it A. The gap counts
    as misplaced wherever it sits except the centre, which is outside both
    ranges. A single move changes this count by at most one, so the value
    never overestimates the remaining moves.
    """
    size = len(tokens) // 2
    count = 0
    for i in range(size):
        if tokens[i] != TOKEN_B or i == gap:
            count += 1
    for i in range(size + 1, len(tokens)):
        if tokens[i] != TOKEN_A or i == gap:
            count += 1
    return count


def score(moves_taken: int, heuristic: int) -> int:
    """Priority of a state: path cost plus estimate."""
    return moves_taken + heuristic
