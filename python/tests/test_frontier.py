"""Frontier ordering and the visited set."""

from __future__ import annotations

import pytest

from toadsfrogs.engine.gamegenerator import GameGenerator
from toadsfrogs.engine.gamesolver import Frontier, VisitedSet
from toadsfrogs.models.board import PuzzleState
from toadsfrogs.models.move import Move


def _chain(size: int, moves: list[Move], use_heuristic: bool = False) -> PuzzleState:
    state = PuzzleState.make_start(size, use_heuristic=use_heuristic)
    for move in moves:
        state = state.apply(move)
    return state


# -- frontier -----------------------------------------------------------------


def test_pops_lowest_score_first() -> None:
    frontier = Frontier()
    deep = _chain(2, [Move.SHIFT_LEFT, Move.SHIFT_RIGHT, Move.SHIFT_LEFT])
    shallow = _chain(2, [Move.SHIFT_LEFT])
    start = PuzzleState.make_start(2)
    for state in (deep, shallow, start):
        frontier.push(state)

    assert len(frontier) == 3
    assert frontier.peek() is start
    assert [frontier.pop().moves_taken for _ in range(3)] == [0, 1, 3]
    assert not frontier


def test_equal_score_prefers_shallower_state() -> None:
    shallow = _chain(1, [Move.SHIFT_RIGHT], use_heuristic=True)  # _ 0 1
    deep = _chain(1, [Move.SHIFT_RIGHT, Move.JUMP_LEFT], use_heuristic=True)  # 1 0 _
    assert shallow.score() == deep.score() == 3

    frontier = Frontier()
    frontier.push(deep)
    frontier.push(shallow)
    assert frontier.pop() is shallow
    assert frontier.pop() is deep


def test_custom_key() -> None:
    frontier = Frontier(key=lambda s: -s.moves_taken)
    frontier.push(PuzzleState.make_start(1))
    frontier.push(_chain(1, [Move.SHIFT_LEFT]))
    assert frontier.pop().moves_taken == 1


def test_peak_tracks_high_water_mark() -> None:
    frontier = Frontier()
    frontier.push(PuzzleState.make_start(1))
    frontier.push(PuzzleState.make_start(2))
    frontier.pop()
    frontier.pop()
    assert frontier.peak == 2
    assert len(frontier) == 0


def test_empty_frontier_raises() -> None:
    frontier = Frontier()
    with pytest.raises(IndexError):
        frontier.pop()
    with pytest.raises(IndexError):
        frontier.peek()


# -- visited set --------------------------------------------------------------


def test_add_reports_new_states() -> None:
    visited = VisitedSet()
    start = PuzzleState.make_start(2)
    assert visited.add(start)
    assert not visited.add(start)
    assert start in visited
    assert len(visited) == 1


def test_same_board_by_another_path_is_visited() -> None:
    visited = VisitedSet()
    visited.add(PuzzleState.make_start(2))
    assert _chain(2, [Move.SHIFT_LEFT, Move.SHIFT_RIGHT]) in visited
    assert _chain(2, [Move.SHIFT_LEFT]) not in visited


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5])
def test_fingerprint_injective_over_reachable_states(size: int) -> None:
    states = list(GameGenerator.reachable(size))
    visited = VisitedSet()
    assert all(visited.add(s) for s in states)
    assert len(visited) == len(states)
