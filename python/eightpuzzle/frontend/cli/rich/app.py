"""Rich terminal frontend: board, solver controls and playback.

Uses the ``rich`` library for styled output.  Every search goes through
:class:`GamePlay`, which checks solvability before calling the solver.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from eightpuzzle.engine.gameplay import GamePlay, Outcome
from eightpuzzle.engine.gamesolver import Algorithm, Heuristic
from eightpuzzle.frontend.cli.input_handler import get_key, get_key_timeout
from eightpuzzle.models.board import Configuration, Direction
from eightpuzzle.models.result import SolutionResult
from eightpuzzle.settings import save_settings

console = Console()

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def _cycle(options: list, current: Any) -> Any:
    return options[(options.index(current) + 1) % len(options)]


# -- rendering ----------------------------------------------------------------


def render_board(config: Configuration) -> Table:
    """Return a Rich Table representing the 3×3 grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(3):
        table.add_column(width=2, justify="center")

    for r, row in enumerate(config.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif config.is_tile_correct(r * 3 + c):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def render_stats(result: SolutionResult) -> Table:
    """Return a two-column table of the search statistics."""
    table = Table(show_header=False, box=rich.box.ROUNDED, border_style="dim")
    table.add_column(style="dim")
    table.add_column(justify="right", style="bold yellow")

    algorithm = Algorithm(result.algorithm).label
    if result.heuristic:
        algorithm += f" ({result.heuristic})"
    table.add_row("Algorithm", algorithm)
    table.add_row(
        "Moves", "—" if result.move_count is None else str(result.move_count)
    )
    table.add_row("Nodes expanded", f"{result.stats.nodes_expanded:,}")
    table.add_row("Max depth", str(result.stats.max_depth))
    table.add_row("Time", f"{result.stats.elapsed_time_ms:.1f} ms")
    return table


def print_solution(game: GamePlay) -> None:
    """Print the outcome of ``game.solve()`` (non-interactive mode)."""
    style = "green" if game.outcome is Outcome.SOLVED else "red"
    console.print(Text(game.message, style=f"bold {style}"))
    if game.result is None:
        return

    if game.result.path is not None:
        frames = [
            Panel(render_board(config), title=f"{i}", border_style="dim")
            for i, config in enumerate(game.result.path)
        ]
        console.print(Columns(frames))
    console.print(render_stats(game.result))


# -- screens ------------------------------------------------------------------


def _draw(game: GamePlay, status: str = "") -> None:
    console.clear()

    choice = Text()
    choice.append("  Algorithm: ", style="dim")
    choice.append(game.algorithm.label, style="bold cyan")
    if game.algorithm is Algorithm.ASTAR:
        choice.append("    Heuristic: ", style="dim")
        choice.append(str(game.heuristic), style="bold cyan")

    parts: list[Any] = [Align.center(render_board(game.board))]
    if game.playback is not None:
        parts.append(
            Align.center(
                Text(
                    f"step {game.playback.step}/{game.playback.last_step}",
                    style="dim",
                )
            )
        )

    panel = Panel(
        Group(*parts),
        title="[bold cyan]8-Puzzle[/bold cyan]",
        subtitle=f"[dim]start {game.start}[/dim]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    controls = Text()
    for key, label in (
        ("↑↓←→", "move"),
        ("V", "solve"),
        ("G", "algorithm"),
        ("E", "heuristic"),
        ("N/B", "step"),
        ("R", "reset"),
        ("P", "play"),
        ("X", "scramble"),
        ("Q", "quit"),
    ):
        controls.append(f"  {key}", style="bold cyan")
        controls.append(f" {label} ", style="dim")

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(choice))
    if game.result is not None:
        console.print(Align.center(render_stats(game.result)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _play(game: GamePlay, interval: float) -> str:
    if game.playback is None:
        return "[yellow]Solve first (V).[/yellow]"
    for _ in game.playback.frames():
        _draw(game, "[cyan]Playing… any key stops[/cyan]")
        if get_key_timeout(interval) is not None:
            return "[yellow]Paused.[/yellow]"
    return "[bold green]Solved![/bold green]"


def _solve(game: GamePlay) -> str:
    _draw(game, "[cyan]Searching…[/cyan]")
    outcome = game.solve()
    style = {
        Outcome.SOLVED: "bold green",
        Outcome.NO_SOLUTION: "yellow",
        Outcome.NOT_SOLVABLE: "red",
    }[outcome]
    return f"[{style}]{game.message}[/{style}]"


# -- main loop ----------------------------------------------------------------


def run(
    start: Configuration,
    settings: dict[str, Any],
    settings_path: Path | None = None,
) -> None:
    """Launch the interactive session on *start*."""
    game = GamePlay(
        start,
        algorithm=Algorithm(settings["algorithm"]),
        heuristic=Heuristic(settings["heuristic"]),
        max_depth=int(settings["ids_max_depth"]),
    )
    interval = settings["playback_interval_ms"] / 1000
    status = ""

    while True:
        _draw(game, status)
        status = ""
        key = get_key()

        if key in _DIRECTIONS:
            if game.move(_DIRECTIONS[key]):
                status = "[dim]Manual move applied.[/dim]"
        elif key == "solve":
            status = _solve(game)
        elif key == "algorithm":
            game.algorithm = _cycle(list(Algorithm), game.algorithm)
            settings["algorithm"] = str(game.algorithm)
            save_settings(settings, settings_path)
        elif key == "heuristic":
            game.heuristic = _cycle(list(Heuristic), game.heuristic)
            settings["heuristic"] = str(game.heuristic)
            save_settings(settings, settings_path)
        elif key == "next" and game.playback is not None:
            game.playback.step_forward()
        elif key == "back" and game.playback is not None:
            game.playback.step_back()
        elif key == "reset" and game.playback is not None:
            game.playback.reset()
        elif key == "play":
            status = _play(game, interval)
        elif key == "scramble":
            game.scramble(int(settings["scramble_moves"]))
            status = "[yellow]Scrambled![/yellow]"
        elif key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
