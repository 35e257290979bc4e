from eightpuzzle.frontend.cli.rich.app import print_solution, render_board, render_stats, run

__all__ = ["print_solution", "render_board", "render_stats", "run"]
