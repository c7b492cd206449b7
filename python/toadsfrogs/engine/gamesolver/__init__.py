from toadsfrogs.engine.gamesolver.driver import (
    SearchDriver,
    SearchResult,
    SearchStatus,
    TraceStep,
)
from toadsfrogs.engine.gamesolver.frontier import Frontier
from toadsfrogs.engine.gamesolver.solver import Solver
from toadsfrogs.engine.gamesolver.visited import VisitedSet

__all__ = [
    "Frontier",
    "SearchDriver",
    "SearchResult",
    "SearchStatus",
    "Solver",
    "TraceStep",
    "VisitedSet",
]
