"""Search outcome and instrumentation."""

from __future__ import annotations

from dataclasses import dataclass, field

from eightpuzzle.models.board import Configuration, Direction, Move


@dataclass
class SearchStats:
    """Performance figures for one search invocation.

    Attributes:
        elapsed_time_ms: Wall-clock time spent in the search body
        nodes_expanded: Configurations popped and processed
        max_depth: Deepest move count observed while expanding
    """

    elapsed_time_ms: float = 0.0
    nodes_expanded: int = 0
    max_depth: int = 0

    def observe(self, depth: int) -> None:
        """Count one expansion at *depth*."""
        self.nodes_expanded += 1
        if depth > self.max_depth:
            self.max_depth = depth


@dataclass(frozen=True)
class SolutionResult:
    """Result of a solver call.

    ``path`` runs from the start to the goal inclusive, or is ``None``
    when no solution was found.  A ``None`` path from IDS can also mean
    the solution lies beyond the depth limit; the two cases are not
    distinguished.
    """

    path: tuple[Configuration, ...] | None
    stats: SearchStats = field(default_factory=SearchStats)
    algorithm: str = ""
    heuristic: str | None = None

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def move_count(self) -> int | None:
        """Number of moves in the path, or ``None`` if not found."""
        if self.path is None:
            return None
        return len(self.path) - 1

    @property
    def moves(self) -> list[Move]:
        if self.path is None:
            return []
        return [Move.between(a, b) for a, b in zip(self.path, self.path[1:])]

    @property
    def directions(self) -> list[Direction]:
        return [m.direction for m in self.moves]
