from toadsfrogs.models.board import PuzzleState
from toadsfrogs.models.heuristic import misplaced
from toadsfrogs.models.move import MOVE_ORDER, Move, legal_moves
from toadsfrogs.models.tokens import TOKEN_A, TOKEN_B

__all__ = [
    "MOVE_ORDER",
    "Move",
    "PuzzleState",
    "TOKEN_A",
    "TOKEN_B",
    "legal_moves",
    "misplaced",
]
