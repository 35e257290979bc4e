"""Iterative deepening search."""

from __future__ import annotations

from typing import Optional

from eightpuzzle.engine.gamesolver.instrument import (
    Parents,
    instrumented,
    reconstruct_path,
)
from eightpuzzle.models.board import GOAL, Configuration
from eightpuzzle.models.result import SearchStats, SolutionResult

DEFAULT_MAX_DEPTH = 40


def _depth_limited(
    cur: Configuration,
    depth: int,
    limit: int,
    on_path: set[Configuration],
    parents: Parents,
    stats: SearchStats,
) -> bool:
    stats.observe(depth)
    if cur.is_goal():
        return True
    if depth == limit:
        return False

    for nxt, _ in cur.neighbors():
        if nxt in on_path:
            continue
        on_path.add(nxt)
        parents[nxt] = cur
        if _depth_limited(nxt, depth + 1, limit, on_path, parents, stats):
            return True
        on_path.discard(nxt)
    return False


@instrumented("ids")
def _search(
    start: Configuration, stats: SearchStats, max_depth: int
) -> Optional[list[Configuration]]:
    for limit in range(max_depth + 1):
        # Both structures belong to this iteration only.
        parents: Parents = {start: None}
        on_path: set[Configuration] = {start}
        if _depth_limited(start, 0, limit, on_path, parents, stats):
            return reconstruct_path(GOAL, parents)
    return None


def solve_ids(
    start: Configuration, max_depth: int = DEFAULT_MAX_DEPTH
) -> SolutionResult:
    """Run depth-limited searches with limits ``0..max_depth``.

    Returns the path found at the smallest limit that admits one.
    ``nodes_expanded`` and ``max_depth`` in the stats add up over all
    iterations.  A ``None`` path does not tell an unsolvable start apart
    from one whose solution is longer than *max_depth*.
    """
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}.")
    return _search(start, max_depth=max_depth)
