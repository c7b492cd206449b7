"""Best-first search solver for the toads and frogs sliding puzzle."""

from toadsfrogs.config import SearchConfig, SearchMode
from toadsfrogs.errors import IllegalMoveError, InvalidSizeError, ToadsFrogsError
from toadsfrogs.models import Move, PuzzleState

__all__ = [
    "IllegalMoveError",
    "InvalidSizeError",
    "Move",
    "PuzzleState",
    "SearchConfig",
    "SearchMode",
    "ToadsFrogsError",
]

__version__ = "0.1.0"
