"""Breadth-first search."""

from __future__ import annotations

from collections import deque
from typing import Optional

from eightpuzzle.engine.gamesolver.instrument import (
    Parents,
    instrumented,
    reconstruct_path,
)
from eightpuzzle.models.board import Configuration
from eightpuzzle.models.result import SearchStats, SolutionResult


@instrumented("bfs")
def _search(start: Configuration, stats: SearchStats) -> Optional[list[Configuration]]:
    q: deque[tuple[Configuration, int]] = deque([(start, 0)])
    parents: Parents = {start: None}

    while q:
        cur, depth = q.popleft()
        stats.observe(depth)
        for nxt, _ in cur.neighbors():
            if nxt in parents:
                continue
            parents[nxt] = cur
            if nxt.is_goal():
                stats.max_depth = max(stats.max_depth, depth + 1)
                return reconstruct_path(nxt, parents)
            q.append((nxt, depth + 1))
    return None


def solve_bfs(start: Configuration) -> SolutionResult:
    """Return a shortest path from *start* to the goal.

    The predecessor map doubles as the visited set.  The goal test runs
    when a configuration is discovered, so the goal itself is never
    dequeued and does not count as an expansion.
    """
    return _search(start)
