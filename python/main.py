#!/usr/bin/env python3
"""8-Puzzle solver.

Usage::

    python main.py solve 123405678              # A* with Manhattan distance
    python main.py solve 123405678 -a ids       # iterative deepening
    python main.py solve 867254301 -a astar -H euclidean
    python main.py play                         # interactive Rich session
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from eightpuzzle.engine.gameplay import GamePlay, Outcome  # noqa: E402
from eightpuzzle.engine.gamesolver import Algorithm, Heuristic  # noqa: E402
from eightpuzzle.models.board import Configuration  # noqa: E402
from eightpuzzle.settings import load_settings  # noqa: E402


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _parse_start(text: str) -> Configuration:
    try:
        return Configuration.from_string(text)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="8-Puzzle solver.")


@app.command()
def solve(
    start: str = typer.Argument(
        ..., help="Start configuration, 9 digits row-major, 0 = blank.",
    ),
    algorithm: Optional[Algorithm] = typer.Option(
        None, "-a", "--algorithm",
        help="Search algorithm.",
    ),
    heuristic: Optional[Heuristic] = typer.Option(
        None, "-H", "--heuristic",
        help="A* heuristic.",
    ),
    max_depth: Optional[int] = typer.Option(
        None, "--max-depth",
        min=0,
        help="IDS depth limit.",
    ),
    config: Optional[Path] = typer.Option(
        None, "-c", "--config",
        help="Settings file (default: ./config.json).",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search details.",
    ),
) -> None:
    """Solve START and print the path with search statistics."""
    from eightpuzzle.frontend.cli.rich import print_solution

    _configure_logging(verbose)
    settings = load_settings(config)
    game = GamePlay(
        _parse_start(start),
        algorithm=algorithm or Algorithm(settings["algorithm"]),
        heuristic=heuristic or Heuristic(settings["heuristic"]),
        max_depth=settings["ids_max_depth"] if max_depth is None else max_depth,
    )
    outcome = game.solve()
    print_solution(game)
    if outcome is not Outcome.SOLVED:
        raise typer.Exit(code=1)


@app.command()
def play(
    start: Optional[str] = typer.Option(
        None, "-s", "--start",
        help="Start configuration (default from settings).",
    ),
    config: Optional[Path] = typer.Option(
        None, "-c", "--config",
        help="Settings file (default: ./config.json).",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search details.",
    ),
) -> None:
    """Interactive session: move tiles, solve and play back."""
    from eightpuzzle.frontend.cli.rich import run

    _configure_logging(verbose)
    settings = load_settings(config)
    run(_parse_start(start or settings["start"]), settings, config)


if __name__ == "__main__":
    app()
