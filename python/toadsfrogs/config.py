"""Search configuration.

The iteration ceiling, tracing and solution printing are runtime fields
of :class:`SearchConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum

DEFAULT_STEP_LIMIT = 2_000_000

# 2 * 15 + 1 = 31 cells, the most the low 32 bits of a fingerprint can hold.
MAX_SIZE = 15


class SearchMode(StrEnum):
    ASTAR = "astar"
    BNB = "bnb"

    @property
    def label(self) -> str:
        return "A*" if self is SearchMode.ASTAR else "B&B"


@dataclass(frozen=True)
class SearchConfig:
    """Options for one search run."""

    use_heuristic: bool = True
    deduplicate: bool = True
    step_limit: int = DEFAULT_STEP_LIMIT
    max_size: int = MAX_SIZE
    trace: bool = False
    solution_output: bool = True

    def __post_init__(self) -> None:
        if self.step_limit < 0:
            raise ValueError(f"step_limit must be >= 0, got {self.step_limit}.")
        if not 1 <= self.max_size <= MAX_SIZE:
            raise ValueError(
                f"max_size must be in 1..{MAX_SIZE}, got {self.max_size}."
            )

    @classmethod
    def for_mode(cls, mode: SearchMode, **overrides: object) -> SearchConfig:
        """Default options for *mode*, with *overrides* applied on top."""
        base = cls().with_mode(mode)
        return replace(base, **overrides) if overrides else base

    def with_mode(self, mode: SearchMode) -> SearchConfig:
        """A* pairs the heuristic with de-duplication; B&B uses neither."""
        astar = SearchMode(mode) is SearchMode.ASTAR
        return replace(self, use_heuristic=astar, deduplicate=astar)

    @property
    def mode(self) -> SearchMode:
        return SearchMode.ASTAR if self.use_heuristic else SearchMode.BNB
