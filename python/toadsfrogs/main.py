"""Toads and frogs solver.

Usage::

    toadsfrogs                     # prompts for the size, runs A*
    toadsfrogs -s 3 -f rich        # Rich terminal output
    toadsfrogs -s 2 -m both        # branch-and-bound, then A*
    toadsfrogs -s 1 --trace        # print every expansion
"""

from __future__ import annotations

import importlib
import logging
from enum import StrEnum
from typing import Optional

import typer
from rich.logging import RichHandler

from toadsfrogs.config import DEFAULT_STEP_LIMIT, MAX_SIZE, SearchConfig, SearchMode
from toadsfrogs.errors import InvalidSizeError

# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


class Mode(StrEnum):
    astar = "astar"
    bnb = "bnb"
    both = "both"


_RUNNERS = {
    Frontend.vanilla: "toadsfrogs.frontend.cli.vanilla.app",
    Frontend.rich: "toadsfrogs.frontend.cli.rich.app",
}

_MODES = {
    Mode.astar: [SearchMode.ASTAR],
    Mode.bnb: [SearchMode.BNB],
    Mode.both: [SearchMode.BNB, SearchMode.ASTAR],
}


# -- helpers ------------------------------------------------------------------


def _setup_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def _ask_size() -> int:
    return typer.prompt(f"Enter problem size (max {MAX_SIZE})", type=int)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    size: Optional[int] = typer.Option(
        None, "-s", "--size",
        help=f"Tokens per side (1-{MAX_SIZE}). Omit to be prompted.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output style.",
    ),
    mode: Mode = typer.Option(
        Mode.astar, "-m", "--mode",
        help="A*, branch-and-bound (slow beyond size 3), or both.",
    ),
    limit: int = typer.Option(
        DEFAULT_STEP_LIMIT, "--limit",
        min=0,
        help="Iteration ceiling per search.",
    ),
    trace: bool = typer.Option(
        False, "--trace",
        help="Print every expanded state and move.",
    ),
    no_solution: bool = typer.Option(
        False, "--no-solution",
        help="Do not print the solution moves.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Debug logging.",
    ),
) -> None:
    """Find the shortest swap of toads and frogs."""
    _setup_logging(verbose)

    if size is None:
        size = _ask_size()

    config = SearchConfig(
        step_limit=limit,
        trace=trace,
        solution_output=not no_solution,
    )
    mod = importlib.import_module(_RUNNERS[frontend])
    try:
        mod.run(size=size, config=config, modes=_MODES[mode])
    except InvalidSizeError as exc:
        typer.secho(f"Game size is not valid: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)


if __name__ == "__main__":
    app()
