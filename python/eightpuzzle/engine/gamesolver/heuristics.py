"""Goal-distance estimates used by A*."""

from __future__ import annotations

import math
from enum import StrEnum
from typing import Callable

from eightpuzzle.models.board import BLANK, GOAL, SIZE, Configuration

_GOAL_POS: dict[int, tuple[int, int]] = {
    tile: divmod(i, SIZE) for i, tile in enumerate(GOAL.tiles)
}


def manhattan(config: Configuration) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    dist = 0
    for idx, tile in enumerate(config.tiles):
        if tile == BLANK:
            continue
        r, c = divmod(idx, SIZE)
        gr, gc = _GOAL_POS[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist


def euclidean(config: Configuration) -> float:
    """Sum of straight-line distances to goal positions (blank ignored)."""
    dist = 0.0
    for idx, tile in enumerate(config.tiles):
        if tile == BLANK:
            continue
        r, c = divmod(idx, SIZE)
        gr, gc = _GOAL_POS[tile]
        dist += math.hypot(r - gr, c - gc)
    return dist


class Heuristic(StrEnum):
    MANHATTAN = "manhattan"
    EUCLIDEAN = "euclidean"

    @property
    def function(self) -> Callable[[Configuration], float]:
        return _FUNCTIONS[self]


_FUNCTIONS: dict[Heuristic, Callable[[Configuration], float]] = {
    Heuristic.MANHATTAN: manhattan,
    Heuristic.EUCLIDEAN: euclidean,
}
