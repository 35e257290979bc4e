"""Depth-first search with a global visited set."""

from __future__ import annotations

from typing import NamedTuple, Optional

from eightpuzzle.engine.gamesolver.instrument import (
    Parents,
    instrumented,
    reconstruct_path,
)
from eightpuzzle.models.board import Configuration
from eightpuzzle.models.result import SearchStats, SolutionResult


class _Entry(NamedTuple):
    state: Configuration
    depth: int
    parent: Optional[Configuration]


@instrumented("dfs")
def _search(start: Configuration, stats: SearchStats) -> Optional[list[Configuration]]:
    stack: list[_Entry] = [_Entry(start, 0, None)]
    parents: Parents = {}
    visited: set[Configuration] = set()

    while stack:
        cur, depth, parent = stack.pop()
        if cur in visited:
            continue
        visited.add(cur)
        parents[cur] = parent
        stats.observe(depth)

        if cur.is_goal():
            return reconstruct_path(cur, parents)

        for nxt, _ in cur.neighbors():
            if nxt not in visited:
                stack.append(_Entry(nxt, depth + 1, cur))
    return None


def solve_dfs(start: Configuration) -> SolutionResult:
    """Return *a* path from *start* to the goal, or a result without one.

    A configuration may be pushed several times but is committed to the
    visited set only when popped; later pops of it are skipped.  Neighbors
    are pushed in generator order, so the last one is explored first.
    The path is not necessarily the shortest.
    """
    return _search(start)
