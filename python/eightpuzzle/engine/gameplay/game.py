"""Session logic: working start, manual moves, gated solving."""

from __future__ import annotations

import logging
from enum import StrEnum

from eightpuzzle.engine.gamegenerator import GameGenerator
from eightpuzzle.engine.gamesolver import (
    DEFAULT_MAX_DEPTH,
    Algorithm,
    Heuristic,
    Solver,
)
from eightpuzzle.engine.gamestate import PlaybackState
from eightpuzzle.models.board import Configuration, Direction
from eightpuzzle.models.result import SolutionResult

logger = logging.getLogger(__name__)


class Outcome(StrEnum):
    NOT_SOLVABLE = "not_solvable"
    NO_SOLUTION = "no_solution"
    SOLVED = "solved"


class GamePlay:
    """Orchestrates a single solving session.

    Manual moves change the working start only; the solver runs when
    :meth:`solve` is called.
    """

    def __init__(
        self,
        start: Configuration,
        algorithm: Algorithm = Algorithm.ASTAR,
        heuristic: Heuristic = Heuristic.MANHATTAN,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self.start = start
        self.algorithm = algorithm
        self.heuristic = heuristic
        self.max_depth = max_depth
        self.result: SolutionResult | None = None
        self.playback: PlaybackState | None = None
        self.outcome: Outcome | None = None

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the blank.

        Returns True if the move was valid.
        """
        return self._set_start(self.start.slide(direction))

    def move_tile(self, index: int) -> bool:
        """Move the tile at *index* into the blank if they are adjacent."""
        return self._set_start(self.start.move_tile(index))

    def scramble(self, moves: int, seed: int | None = None) -> None:
        self._set_start(GameGenerator.generate(moves, seed))

    # -- solving --------------------------------------------------------------

    def solve(self) -> Outcome:
        """Solve the working start with the selected algorithm."""
        self._clear_solution()
        if not Solver.is_solvable(self.start):
            logger.info("Start %s is not solvable; skipping search", self.start)
            self.outcome = Outcome.NOT_SOLVABLE
            return self.outcome

        logger.info("Solving %s with %s", self.start, self.algorithm)
        self.result = Solver.solve(
            self.start, self.algorithm, self.heuristic, self.max_depth
        )
        if self.result.path is None:
            self.outcome = Outcome.NO_SOLUTION
        else:
            self.playback = PlaybackState(self.result.path)
            self.outcome = Outcome.SOLVED
        return self.outcome

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Configuration:
        """Configuration to display: the playback frame, else the start."""
        if self.playback is not None:
            return self.playback.current
        return self.start

    @property
    def message(self) -> str:
        if self.outcome is Outcome.NOT_SOLVABLE:
            return "Configuration is not solvable"
        if self.outcome is Outcome.NO_SOLUTION:
            return "No solution found"
        if self.outcome is Outcome.SOLVED and self.result is not None:
            return f"Solution found in {self.result.move_count} moves"
        return ""

    # -- helpers --------------------------------------------------------------

    def _set_start(self, config: Configuration | None) -> bool:
        if config is None:
            return False
        self.start = config
        self._clear_solution()
        return True

    def _clear_solution(self) -> None:
        self.result = None
        self.playback = None
        self.outcome = None
