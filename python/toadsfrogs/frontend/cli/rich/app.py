"""Rich terminal frontend with tables and panels.

Uses the ``rich`` library for styled output while sharing the same
solver backend as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from toadsfrogs.config import SearchConfig, SearchMode
from toadsfrogs.engine.gameplay import GamePlay
from toadsfrogs.engine.gamesolver import SearchResult, SearchStatus, Solver, TraceStep
from toadsfrogs.models.board import PuzzleState

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: PuzzleState) -> Table:
    """Return a one-row Rich Table with a cell per position."""
    table = Table(
        show_header=False,
        show_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.length):
        table.add_column(width=1, justify="center")

    cells: list[str] = []
    for i, text in enumerate(board.render().split(" ")):
        if i == board.gap:
            cells.append("[dim]·[/dim]")
        elif i != board.size and (i < board.size) == board.tokens[i]:
            cells.append(f"[bold green]{text}[/bold green]")
        else:
            cells.append(f"[bold white]{text}[/bold white]")
    table.add_row(*cells)
    return table


def _print_trace(step: TraceStep) -> None:
    if step.move is None:
        console.rule(
            f"step {step.iteration}  •  distance {step.state.moves_taken}",
            style="dim",
        )
        console.print(step.state.render(), style="bold")
    else:
        console.print(f"  [cyan]{step.move.value:<12}[/cyan] {step.state.render()}")


# -- result rendering ---------------------------------------------------------


def _solution_table(result: SearchResult) -> Table:
    table = Table(
        box=rich.box.ROUNDED,
        border_style="dim",
        show_lines=False,
    )
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Move", style="cyan")
    table.add_column("Board", style="bold")

    game = GamePlay(result.size)
    for i, move in enumerate(result.moves or (), 1):
        game.move(move)
        table.add_row(str(i), move.value, game.state.board.render())
    return table


def _draw_result(result: SearchResult, config: SearchConfig) -> None:
    stats = Text()
    stats.append("  Iterations: ", style="dim")
    stats.append(str(result.iterations), style="bold yellow")
    stats.append("    Visited: ", style="dim")
    stats.append(str(result.visited), style="bold yellow")
    stats.append("    Peak frontier: ", style="dim")
    stats.append(str(result.peak_frontier), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(f"{result.elapsed * 1_000_000:.0f} µs", style="bold yellow")

    parts: list = []
    if result.status is SearchStatus.SOLVED:
        parts.append(
            Text.from_markup(
                f"[bold green]Shortest solution found:[/bold green] "
                f"{result.length} moves"
            )
        )
        border = "green"
    elif result.status is SearchStatus.LIMIT_REACHED:
        parts.append(
            Text.from_markup(
                f"[yellow]Reached limit of {config.step_limit} iterations "
                f"before reaching the solution.[/yellow]"
            )
        )
        border = "yellow"
    else:
        parts.append(Text.from_markup("[red]Search space exhausted.[/red]"))
        border = "red"

    parts.append(stats)
    if result.solved and config.solution_output and result.moves:
        parts.append(Text(""))
        parts.append(_solution_table(result))

    panel = Panel(
        Group(*parts),
        title=f"[bold]{result.mode.label}  size {result.size}[/bold]",
        border_style=border,
        padding=(1, 2),
    )
    console.print(panel)


# -- public entry point -------------------------------------------------------


def run(size: int, config: SearchConfig, modes: list[SearchMode]) -> list[SearchResult]:
    """Solve *size* once per mode in *modes* and draw each run."""
    results: list[SearchResult] = []
    for mode in modes:
        mode_config = config.with_mode(mode)
        start = PuzzleState.make_start(size, max_size=mode_config.max_size)

        console.print()
        console.print(
            Text.from_markup(
                f"Doing [bold cyan]{mode.label}[/bold cyan] with size {size}, "
                f"starting state:"
            )
        )
        console.print(Align.left(_render_board(start)))

        result = Solver.solve(size, mode_config, observer=_print_trace)
        _draw_result(result, mode_config)
        results.append(result)
    return results
