"""Best-first search loop.

One :class:`SearchDriver` owns one frontier and one visited set and runs
exactly once. With the heuristic and de-duplication switched on it is A*;
with both off it is a plain branch-and-bound over path cost.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable

from toadsfrogs.config import SearchConfig, SearchMode
from toadsfrogs.engine.gamesolver.frontier import Frontier
from toadsfrogs.engine.gamesolver.visited import VisitedSet
from toadsfrogs.models.board import PuzzleState
from toadsfrogs.models.move import MOVE_ORDER, Move

logger = logging.getLogger(__name__)


class SearchStatus(StrEnum):
    READY = "ready"
    RUNNING = "running"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    LIMIT_REACHED = "limit reached"

    @property
    def is_terminal(self) -> bool:
        return self not in (SearchStatus.READY, SearchStatus.RUNNING)


@dataclass(frozen=True)
class TraceStep:
    """One observation of the search.

    ``move`` is ``None`` when *state* was just popped for expansion,
    otherwise *state* is the successor that *move* produced.
    """

    iteration: int
    state: PuzzleState
    move: Move | None = None


Observer = Callable[[TraceStep], None]


@dataclass(frozen=True)
class SearchResult:
    size: int
    mode: SearchMode
    status: SearchStatus
    iterations: int
    moves: tuple[Move, ...] | None = None
    visited: int = 0
    peak_frontier: int = 0
    elapsed: float = 0.0

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SOLVED

    @property
    def length(self) -> int | None:
        return len(self.moves) if self.moves is not None else None


class SearchDriver:
    """Runs the pop / expand / filter / push loop for one start state."""

    def __init__(self, config: SearchConfig | None = None, observer: Observer | None = None) -> None:
        self.config = config or SearchConfig()
        self.observer = observer if self.config.trace else None
        self.status = SearchStatus.READY
        self.iterations = 0
        self.frontier = Frontier()
        self.visited = VisitedSet()

    # -- public API -----------------------------------------------------------

    def run(self, start: PuzzleState) -> SearchResult:
        """Search from *start* until solved, exhausted or out of iterations."""
        if self.status is not SearchStatus.READY:
            raise RuntimeError(f"SearchDriver already used (status: {self.status}).")

        cfg = self.config
        start = start.rescored(cfg.use_heuristic)
        self.status = SearchStatus.RUNNING
        t0 = time.perf_counter()
        logger.debug(
            "Starting %s on size %d (limit %d): %s",
            cfg.mode.label, start.size, cfg.step_limit, start.render(),
        )

        if start.is_goal():
            return self._finish(start, SearchStatus.SOLVED, (), t0)

        self.frontier.push(start)
        if cfg.deduplicate:
            self.visited.add(start)

        while self.iterations < cfg.step_limit:
            if not self.frontier:
                logger.warning(
                    "Frontier exhausted after %d iterations without a solution.",
                    self.iterations,
                )
                return self._finish(start, SearchStatus.EXHAUSTED, None, t0)

            self.iterations += 1
            state = self.frontier.pop()
            self._emit(state)

            for move in MOVE_ORDER:
                if not state.is_legal(move):
                    continue
                child = state.apply(move)
                self._emit(child, move)

                if child.is_goal():
                    solution = child.path[len(start.path) :]
                    return self._finish(start, SearchStatus.SOLVED, solution, t0)
                if cfg.deduplicate and not self.visited.add(child):
                    continue
                self.frontier.push(child)

        logger.debug("Reached limit of %d iterations.", cfg.step_limit)
        return self._finish(start, SearchStatus.LIMIT_REACHED, None, t0)

    # -- helpers --------------------------------------------------------------

    def _emit(self, state: PuzzleState, move: Move | None = None) -> None:
        if self.observer is not None:
            self.observer(TraceStep(self.iterations, state, move))

    def _finish(
        self,
        start: PuzzleState,
        status: SearchStatus,
        moves: tuple[Move, ...] | None,
        t0: float,
    ) -> SearchResult:
        self.status = status
        result = SearchResult(
            size=start.size,
            mode=self.config.mode,
            status=status,
            iterations=self.iterations,
            moves=moves,
            visited=len(self.visited),
            peak_frontier=self.frontier.peak,
            elapsed=time.perf_counter() - t0,
        )
        logger.debug(
            "%s finished: %s after %d iterations (length %s).",
            self.config.mode.label, status, result.iterations, result.length,
        )
        return result
