"""Builds start, goal and reachable boards."""

from __future__ import annotations

import random
from collections import deque
from typing import Iterator

from toadsfrogs.models.board import PuzzleState
from toadsfrogs.models.tokens import TOKEN_A, TOKEN_B


class GameGenerator:
    """Creates boards for the solver, the replay session and the tests."""

    @staticmethod
    def start(size: int, use_heuristic: bool = False) -> PuzzleState:
        return PuzzleState.make_start(size, use_heuristic=use_heuristic)

    @staticmethod
    def goal(size: int) -> PuzzleState:
        """Return the mirrored board: B tokens, the gap, then A tokens."""
        tokens = [TOKEN_B] * size + [TOKEN_A] * (size + 1)
        return PuzzleState.from_tokens(tokens, size)

    @staticmethod
    def reachable(size: int) -> Iterator[PuzzleState]:
        """Yield every board reachable from the start, once each, breadth first.

        Boards are told apart by ``(tokens, gap)``, not by fingerprint, so
        the result can be used to check fingerprints for collisions.
        """
        start = PuzzleState.make_start(size)
        seen = {(start.tokens, start.gap)}
        queue = deque([start])
        while queue:
            state = queue.popleft()
            yield state
            for move in state.legal_moves():
                child = state.apply(move)
                key = (child.tokens, child.gap)
                if key not in seen:
                    seen.add(key)
                    queue.append(child)

    @staticmethod
    def scramble(size: int, num_moves: int, seed: int | None = None) -> PuzzleState:
        """Random legal walk of *num_moves* from the start, without immediate undo."""
        rng = random.Random(seed)
        state = PuzzleState.make_start(size)
        prev_gap: int | None = None

        for _ in range(num_moves):
            moves = state.legal_moves()
            back = [m for m in moves if state.gap + m.offset == prev_gap]
            if back and len(moves) > 1:
                moves.remove(back[0])
            prev_gap = state.gap
            state = state.apply(rng.choice(moves))

        return state
