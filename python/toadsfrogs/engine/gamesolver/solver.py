"""Toads and frogs solver."""

from __future__ import annotations

from toadsfrogs.config import SearchConfig, SearchMode
from toadsfrogs.engine.gamesolver.driver import Observer, SearchDriver, SearchResult
from toadsfrogs.models.board import PuzzleState
from toadsfrogs.models.move import Move


class Solver:
    """Stateless solver; all methods are static."""

    @staticmethod
    def solve(
        size: int,
        config: SearchConfig | None = None,
        observer: Observer | None = None,
    ) -> SearchResult:
        """Search for the shortest swap of a *size* puzzle.

        Raises ``InvalidSizeError`` before any search if *size* is out of range.
        """
        config = config or SearchConfig()
        start = PuzzleState.make_start(
            size, use_heuristic=config.use_heuristic, max_size=config.max_size
        )
        return SearchDriver(config, observer).run(start)

    @staticmethod
    def compare(size: int, config: SearchConfig | None = None) -> list[SearchResult]:
        """Run branch-and-bound, then A*, on the same puzzle."""
        config = config or SearchConfig()
        results: list[SearchResult] = []
        for mode in (SearchMode.BNB, SearchMode.ASTAR):
            results.append(Solver.solve(size, config.with_mode(mode)))
        return results

    @staticmethod
    def hint(state: PuzzleState, config: SearchConfig | None = None) -> Move | None:
        """Return the first move of a shortest solution from *state*.

        ``None`` if *state* is already solved or the search gives up.
        """
        if state.is_goal():
            return None
        result = SearchDriver(config or SearchConfig()).run(state)
        if not result.solved or not result.moves:
            return None
        return result.moves[0]
