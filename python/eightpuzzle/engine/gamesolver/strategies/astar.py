"""A* search."""

from __future__ import annotations

import heapq
import itertools
from typing import Optional

from eightpuzzle.engine.gamesolver.heuristics import Heuristic
from eightpuzzle.engine.gamesolver.instrument import (
    Parents,
    instrumented,
    reconstruct_path,
)
from eightpuzzle.models.board import Configuration
from eightpuzzle.models.result import SearchStats, SolutionResult


@instrumented("astar")
def _search(
    start: Configuration, stats: SearchStats, heuristic: Heuristic
) -> Optional[list[Configuration]]:
    hfun = heuristic.function
    counter = itertools.count()

    best_g: dict[Configuration, int] = {start: 0}
    parents: Parents = {start: None}
    open_heap: list[tuple[float, int, int, Configuration]] = [
        (hfun(start), next(counter), 0, start)
    ]

    while open_heap:
        _, _, g, cur = heapq.heappop(open_heap)
        if g > best_g[cur]:
            # superseded by a cheaper entry
            continue
        stats.observe(g)

        if cur.is_goal():
            return reconstruct_path(cur, parents)

        g2 = g + 1
        for nxt, _ in cur.neighbors():
            if nxt in best_g and g2 >= best_g[nxt]:
                continue
            best_g[nxt] = g2
            parents[nxt] = cur
            heapq.heappush(open_heap, (g2 + hfun(nxt), next(counter), g2, nxt))
    return None


def solve_astar(
    start: Configuration, heuristic: Heuristic | str = Heuristic.MANHATTAN
) -> SolutionResult:
    """Return a minimum-move path using A* guided by *heuristic*.

    Ties on f are broken by insertion order.  Both heuristics are
    admissible, so the path length always matches BFS.
    """
    return _search(start, heuristic=Heuristic(heuristic))
