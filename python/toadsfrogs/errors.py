"""Exceptions raised by the puzzle model and the search engine."""

from __future__ import annotations


class ToadsFrogsError(Exception):
    """Base class for every error raised by this package."""


class InvalidSizeError(ToadsFrogsError, ValueError):
    """Puzzle size is not a positive int within the configured bound."""

    def __init__(self, size: object, max_size: int) -> None:
        super().__init__(
            f"Puzzle size must be an integer in 1..{max_size}, got {size!r}."
        )
        self.size = size
        self.max_size = max_size


class IllegalMoveError(ToadsFrogsError, ValueError):
    """A move was applied to a state it is not legal for."""

    def __init__(self, move: object, gap: int) -> None:
        super().__init__(f"Move {move!s} is not legal with the gap at {gap}.")
        self.move = move
        self.gap = gap
