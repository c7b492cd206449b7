"""Vanilla terminal frontend, no third-party dependencies.

Uses only print and ANSI codes to show the start board, an optional
step-by-step trace, the solution, and how long each algorithm took.
"""

from __future__ import annotations

from toadsfrogs.config import SearchConfig, SearchMode
from toadsfrogs.engine.gameplay import GamePlay
from toadsfrogs.engine.gamesolver import SearchResult, SearchStatus, Solver, TraceStep
from toadsfrogs.models.board import PuzzleState


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


def _format_time(seconds: float) -> str:
    micros = int(seconds * 1_000_000)
    return f"{micros} microseconds"


# -- board rendering ----------------------------------------------------------


def _render_board(board: PuzzleState) -> str:
    """Return the row with cells already on their goal side in green."""
    cells: list[str] = []
    for i, text in enumerate(board.render().split(" ")):
        if i == board.gap:
            cells.append(f"{_DIM}{text}{_R}")
        elif (i < board.size) == board.tokens[i] and i != board.size:
            cells.append(f"{_G}{text}{_R}")
        else:
            cells.append(text)
    return " ".join(cells)


def _print_trace(step: TraceStep) -> None:
    if step.move is None:
        print()
        print(f"-------- step: {step.iteration}, distance: {step.state.moves_taken}")
        print(_render_board(step.state))
    else:
        print(f"Move: {step.move.value}")
        print(_render_board(step.state))


# -- result rendering ---------------------------------------------------------


def _print_result(result: SearchResult, config: SearchConfig) -> None:
    label = result.mode.label
    if result.status is SearchStatus.SOLVED:
        print(
            f"{_G}The shortest solution has been found.{_R}  It took "
            f"{_Y}{result.iterations}{_R} iterations! Solution is "
            f"{_Y}{result.length}{_R} steps long."
        )
        if config.solution_output and result.moves:
            print()
            print("Solution:")
            game = GamePlay(result.size)
            for move in result.moves:
                game.move(move)
                print(f"  {move.value:<12} {_render_board(game.state.board)}")
    elif result.status is SearchStatus.LIMIT_REACHED:
        print(
            f"{_Y}Reached limit of {config.step_limit} iterations "
            f"before reaching the solution.{_R}"
        )
    else:
        print(f"{_Y}Search space exhausted after {result.iterations} iterations.{_R}")
    print()
    print(f"{_C}{label} algorithm took {_format_time(result.elapsed)} to execute.{_R}")


# -- public entry point -------------------------------------------------------


def run(size: int, config: SearchConfig, modes: list[SearchMode]) -> list[SearchResult]:
    """Solve *size* once per mode in *modes* and print each run."""
    results: list[SearchResult] = []
    for mode in modes:
        mode_config = config.with_mode(mode)
        start = PuzzleState.make_start(size, max_size=mode_config.max_size)

        print(f"Doing {_C}{mode.label}{_R} with size {size}, Starting state:")
        print(_render_board(start))

        result = Solver.solve(size, mode_config, observer=_print_trace)
        print()
        _print_result(result, mode_config)
        print()
        results.append(result)
    return results
