from eightpuzzle.models.board import GOAL, Configuration, Direction, Move
from eightpuzzle.models.result import SearchStats, SolutionResult

__all__ = [
    "GOAL",
    "Configuration",
    "Direction",
    "Move",
    "SearchStats",
    "SolutionResult",
]
