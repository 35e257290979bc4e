"""Tracks playback through a found solution path."""

from __future__ import annotations

from typing import Iterator

from eightpuzzle.models.board import Configuration


class PlaybackState:
    """Cursor over a start→goal path, with single-step navigation."""

    def __init__(self, path: tuple[Configuration, ...]) -> None:
        if not path:
            raise ValueError("Cannot play back an empty path.")
        self.path = path
        self.step: int = 0

    # -- queries --------------------------------------------------------------

    @property
    def current(self) -> Configuration:
        return self.path[self.step]

    @property
    def last_step(self) -> int:
        return len(self.path) - 1

    @property
    def is_at_goal(self) -> bool:
        return self.step == self.last_step

    # -- navigation -----------------------------------------------------------

    def step_forward(self) -> bool:
        """Advance one frame.  Returns False if already at the goal."""
        if self.is_at_goal:
            return False
        self.step += 1
        return True

    def step_back(self) -> bool:
        """Go back one frame.  Returns False if already at the start."""
        if self.step == 0:
            return False
        self.step -= 1
        return True

    def reset(self) -> None:
        self.step = 0

    def frames(self) -> Iterator[Configuration]:
        """Yield each remaining frame, advancing the cursor as it goes.

        Starts over from the first frame when the cursor is already at
        the goal.
        """
        if self.is_at_goal:
            self.reset()
        yield self.current
        while self.step_forward():
            yield self.current
