"""Board model for the toads and frogs puzzle."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Sequence

from toadsfrogs.config import MAX_SIZE
from toadsfrogs.errors import IllegalMoveError, InvalidSizeError
from toadsfrogs.models.heuristic import misplaced, score
from toadsfrogs.models.move import Move, is_legal, legal_moves
from toadsfrogs.models.tokens import TOKEN_A, TOKEN_B, symbol

GAP_SHIFT = 32


def _check_size(size: object, max_size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidSizeError(size, max_size)
    if not 1 <= size <= max_size:
        raise InvalidSizeError(size, max_size)
    return size


@dataclass(frozen=True)
class PuzzleState:
    """Immutable snapshot of the row.

    ``tokens`` holds ``2 * size + 1`` cells, ``False`` for an A token and
    ``True`` for a B token. The cell under ``gap`` is kept at ``TOKEN_A``
    so that two states with the same layout compare equal.
    """

    size: int
    tokens: tuple[bool, ...]
    gap: int
    moves_taken: int = 0
    heuristic: int = 0
    path: tuple[Move, ...] = ()
    use_heuristic: bool = field(default=False, compare=False)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def make_start(
        cls, size: int, use_heuristic: bool = False, max_size: int = MAX_SIZE
    ) -> PuzzleState:
        """Return the start board: A tokens, the gap, then B tokens.

        Example::

            PuzzleState.make_start(2).render()  # '0 0 _ 1 1'
        """
        size = _check_size(size, max_size)
        tokens = (TOKEN_A,) * (size + 1) + (TOKEN_B,) * size
        return cls._build(size, tokens, size, use_heuristic)

    @classmethod
    def from_tokens(
        cls,
        tokens: Sequence[bool],
        gap: int,
        use_heuristic: bool = False,
        max_size: int = MAX_SIZE,
    ) -> PuzzleState:
        """Create a board from an explicit cell list and gap index.

        The value given for the gap cell is ignored.
        """
        if len(tokens) % 2 != 1:
            raise ValueError(f"Expected an odd number of cells, got {len(tokens)}.")
        size = _check_size(len(tokens) // 2, max_size)
        if not 0 <= gap < len(tokens):
            raise ValueError(f"Gap {gap} is outside 0..{len(tokens) - 1}.")
        cells = [bool(t) for t in tokens]
        cells[gap] = TOKEN_A
        return cls._build(size, tuple(cells), gap, use_heuristic)

    @classmethod
    def _build(
        cls, size: int, tokens: tuple[bool, ...], gap: int, use_heuristic: bool
    ) -> PuzzleState:
        h = misplaced(tokens, gap) if use_heuristic else 0
        return cls(
            size=size,
            tokens=tokens,
            gap=gap,
            heuristic=h,
            use_heuristic=use_heuristic,
        )

    # -- queries --------------------------------------------------------------

    @property
    def length(self) -> int:
        return len(self.tokens)

    def legal_moves(self) -> list[Move]:
        return legal_moves(self.tokens, self.gap)

    def is_legal(self, move: Move) -> bool:
        return is_legal(self.tokens, self.gap, move)

    def is_goal(self) -> bool:
        """True once every B sits left of the centre, every A right of it,
        and the gap is back in the centre."""
        if self.gap != self.size:
            return False
        left = self.tokens[: self.size]
        right = self.tokens[self.size + 1 :]
        return all(t == TOKEN_B for t in left) and all(t == TOKEN_A for t in right)

    def score(self) -> int:
        return score(self.moves_taken, self.heuristic)

    def fingerprint(self) -> int:
        """Pack the layout into the low 32 bits and the gap above them."""
        bits = 0
        for i, token in enumerate(self.tokens):
            if i != self.gap and token:
                bits |= 1 << i
        return bits | (self.gap << GAP_SHIFT)

    # -- transitions ----------------------------------------------------------

    def apply(self, move: Move) -> PuzzleState:
        """Return the state reached by *move*; ``self`` is never modified."""
        if not self.is_legal(move):
            raise IllegalMoveError(move, self.gap)

        source = self.gap + move.offset
        cells = list(self.tokens)
        cells[self.gap] = cells[source]
        cells[source] = TOKEN_A
        tokens = tuple(cells)

        return PuzzleState(
            size=self.size,
            tokens=tokens,
            gap=source,
            moves_taken=self.moves_taken + 1,
            heuristic=misplaced(tokens, source) if self.use_heuristic else 0,
            path=self.path + (move,),
            use_heuristic=self.use_heuristic,
        )

    def rescored(self, use_heuristic: bool) -> PuzzleState:
        """Same board and path, scored for the other search mode."""
        if use_heuristic == self.use_heuristic:
            return self
        h = misplaced(self.tokens, self.gap) if use_heuristic else 0
        return replace(self, heuristic=h, use_heuristic=use_heuristic)

    # -- display --------------------------------------------------------------

    def render(self) -> str:
        """Return the row as text, e.g. ``0 _ 1``."""
        return " ".join(
            "_" if i == self.gap else symbol(t) for i, t in enumerate(self.tokens)
        )

    def __str__(self) -> str:
        return self.render()
