"""Fingerprint set used to skip states the search has already queued."""

from __future__ import annotations

from toadsfrogs.models.board import PuzzleState


class VisitedSet:
    """Membership by :meth:`PuzzleState.fingerprint` only.

    Entries are plain ints, so a state can be tested but never recovered.
    """

    def __init__(self) -> None:
        self._seen: set[int] = set()

    def add(self, state: PuzzleState) -> bool:
        """Mark *state* visited. Returns False if it already was."""
        key = state.fingerprint()
        if key in self._seen:
            return False
        self._seen.add(key)
        return True

    def __contains__(self, state: PuzzleState) -> bool:
        return state.fingerprint() in self._seen

    def __len__(self) -> int:
        return len(self._seen)
