"""Shared plumbing for the search strategies: timing and path rebuilding."""

from __future__ import annotations

import functools
import logging
import time
from typing import Callable, Optional

from eightpuzzle.models.board import Configuration
from eightpuzzle.models.result import SearchStats, SolutionResult

logger = logging.getLogger(__name__)

Parents = dict[Configuration, Optional[Configuration]]
SearchBody = Callable[..., Optional[list[Configuration]]]


def reconstruct_path(goal: Configuration, parents: Parents) -> list[Configuration]:
    """Walk *parents* back from *goal* and return the start→goal path."""
    path: list[Configuration] = []
    cur: Configuration | None = goal
    while cur is not None:
        path.append(cur)
        cur = parents.get(cur)
    path.reverse()
    return path


def instrumented(name: str) -> Callable[[SearchBody], Callable[..., SolutionResult]]:
    """Wrap a search body into a timed solver entry point.

    The body is called as ``body(start, stats, *args, **kwargs)`` and
    returns the path or ``None``.  A start that already is the goal is
    answered here without calling the body.
    """

    def decorator(body: SearchBody) -> Callable[..., SolutionResult]:
        @functools.wraps(body)
        def wrapper(start: Configuration, *args, **kwargs) -> SolutionResult:
            stats = SearchStats()
            t0 = time.perf_counter()
            if start.is_goal():
                path: list[Configuration] | None = [start]
            else:
                path = body(start, stats, *args, **kwargs)
            stats.elapsed_time_ms = (time.perf_counter() - t0) * 1000

            heuristic = kwargs.get("heuristic")
            logger.debug(
                "%s from %s: %s, expanded=%d max_depth=%d time=%.1fms",
                name,
                start,
                f"{len(path) - 1} moves" if path is not None else "no solution",
                stats.nodes_expanded,
                stats.max_depth,
                stats.elapsed_time_ms,
            )
            return SolutionResult(
                path=tuple(path) if path is not None else None,
                stats=stats,
                algorithm=name,
                heuristic=str(heuristic) if heuristic is not None else None,
            )

        return wrapper

    return decorator
