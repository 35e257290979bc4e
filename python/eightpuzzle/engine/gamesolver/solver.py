"""8-puzzle solver entry points."""

from __future__ import annotations

from enum import StrEnum
from typing import Callable

from eightpuzzle.engine.gamesolver.heuristics import Heuristic
from eightpuzzle.engine.gamesolver.strategies import (
    DEFAULT_MAX_DEPTH,
    solve_astar,
    solve_bfs,
    solve_dfs,
    solve_ids,
)
from eightpuzzle.models.board import BLANK, Configuration
from eightpuzzle.models.result import SolutionResult


class Algorithm(StrEnum):
    BFS = "bfs"
    DFS = "dfs"
    IDS = "ids"
    ASTAR = "astar"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Algorithm.BFS: "Breadth-first",
    Algorithm.DFS: "Depth-first",
    Algorithm.IDS: "Iterative deepening",
    Algorithm.ASTAR: "A*",
}

_RUNNERS: dict[Algorithm, Callable[..., SolutionResult]] = {
    Algorithm.BFS: lambda start, heuristic, max_depth: solve_bfs(start),
    Algorithm.DFS: lambda start, heuristic, max_depth: solve_dfs(start),
    Algorithm.IDS: lambda start, heuristic, max_depth: solve_ids(start, max_depth),
    Algorithm.ASTAR: lambda start, heuristic, max_depth: solve_astar(start, heuristic),
}


def is_solvable(config: Configuration) -> bool:
    """Return True if *config* can reach the goal.

    Solvable iff the tiles, read in row-major order without the blank,
    contain an even number of inversions.
    """
    arr = [x for x in config.tiles if x != BLANK]
    inv = 0
    for i in range(len(arr)):
        for j in range(i + 1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return inv % 2 == 0


class Solver:
    """Stateless solver; all methods are static."""

    is_solvable = staticmethod(is_solvable)

    @staticmethod
    def solve(
        start: Configuration,
        algorithm: Algorithm | str = Algorithm.ASTAR,
        heuristic: Heuristic | str = Heuristic.MANHATTAN,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> SolutionResult:
        """Run *algorithm* from *start*.

        Does not check solvability; callers gate on :meth:`is_solvable`.
        *heuristic* is used by A* only, *max_depth* by IDS only.
        """
        runner = _RUNNERS[Algorithm(algorithm)]
        return runner(start, Heuristic(heuristic), max_depth)
