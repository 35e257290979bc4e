from eightpuzzle.engine.gamesolver.strategies.astar import solve_astar
from eightpuzzle.engine.gamesolver.strategies.bfs import solve_bfs
from eightpuzzle.engine.gamesolver.strategies.dfs import solve_dfs
from eightpuzzle.engine.gamesolver.strategies.ids import DEFAULT_MAX_DEPTH, solve_ids

__all__ = ["DEFAULT_MAX_DEPTH", "solve_astar", "solve_bfs", "solve_dfs", "solve_ids"]
