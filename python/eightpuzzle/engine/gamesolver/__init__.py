from eightpuzzle.engine.gamesolver.heuristics import Heuristic, euclidean, manhattan
from eightpuzzle.engine.gamesolver.instrument import reconstruct_path
from eightpuzzle.engine.gamesolver.solver import Algorithm, Solver, is_solvable
from eightpuzzle.engine.gamesolver.strategies import (
    DEFAULT_MAX_DEPTH,
    solve_astar,
    solve_bfs,
    solve_dfs,
    solve_ids,
)

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "Algorithm",
    "Heuristic",
    "Solver",
    "euclidean",
    "is_solvable",
    "manhattan",
    "reconstruct_path",
    "solve_astar",
    "solve_bfs",
    "solve_dfs",
    "solve_ids",
]
