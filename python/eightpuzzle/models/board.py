"""Configuration model for the 8-puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable

SIZE = 3
CELLS = SIZE * SIZE
BLANK = 0

# Blank destinations per blank index, ascending.  Search results (DFS in
# particular) depend on this order, so it must stay fixed.
ADJACENT: dict[int, tuple[int, ...]] = {
    0: (1, 3),
    1: (0, 2, 4),
    2: (1, 5),
    3: (0, 4, 6),
    4: (1, 3, 5, 7),
    5: (2, 4, 8),
    6: (3, 7),
    7: (4, 6, 8),
    8: (5, 7),
}


class Direction(StrEnum):
    """Direction the *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Offset from the blank to the tile that slides in.
# UP   -> tile below the blank moves up    -> blank shifts down
# DOWN -> tile above the blank moves down  -> blank shifts up
# LEFT -> tile right of the blank moves left
# RIGHT-> tile left of the blank moves right
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


@dataclass(frozen=True)
class Move:
    """Blank moving from ``blank_from`` to ``blank_to`` (row-major indices)."""

    blank_from: int
    blank_to: int

    @classmethod
    def between(cls, before: Configuration, after: Configuration) -> Move:
        """Return the move that turns *before* into *after*."""
        move = cls(before.blank, after.blank)
        if move.blank_to not in ADJACENT[move.blank_from] or before.apply(move) != after:
            raise ValueError(f"{before} and {after} are not one move apart.")
        return move

    def inverse(self) -> Move:
        return Move(self.blank_to, self.blank_from)

    @property
    def direction(self) -> Direction:
        fr, fc = divmod(self.blank_from, SIZE)
        tr, tc = divmod(self.blank_to, SIZE)
        offset = (tr - fr, tc - fc)
        for direction, delta in _OFFSETS.items():
            if delta == offset:
                return direction
        raise ValueError(f"Move {self} is not between adjacent cells.")

    def __str__(self) -> str:
        return f"{self.blank_from}->{self.blank_to}"


@dataclass(frozen=True)
class Configuration:
    """One arrangement of the tiles, stored as a row-major tuple.

    ``0`` represents the blank.  Instances are immutable; every move
    returns a new configuration.
    """

    tiles: tuple[int, ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: Iterable[int]) -> Configuration:
        """Create a configuration from a flat row-major tile sequence.

        Example::

            Configuration.from_flat([1, 2, 3, 4, 0, 5, 6, 7, 8])
        """
        tiles = tuple(flat)
        if len(tiles) != CELLS:
            raise ValueError(
                f"Expected {CELLS} tiles for a {SIZE}×{SIZE} board, "
                f"got {len(tiles)}."
            )
        if sorted(tiles) != list(range(CELLS)):
            raise ValueError(
                f"Tiles must be a permutation of 0-{CELLS - 1} "
                f"with 0 as the blank, got {tiles}."
            )
        return cls(tiles)

    @classmethod
    def from_string(cls, text: str) -> Configuration:
        """Parse the 9-character form, e.g. ``"123405678"``."""
        text = text.strip()
        if len(text) != CELLS or not (text.isascii() and text.isdigit()):
            raise ValueError(
                f"Expected {CELLS} digits (0 for the blank), got {text!r}."
            )
        return cls.from_flat(int(ch) for ch in text)

    def to_string(self) -> str:
        return "".join(str(v) for v in self.tiles)

    def __str__(self) -> str:
        return self.to_string()

    # -- queries --------------------------------------------------------------

    @property
    def blank(self) -> int:
        return self.tiles.index(BLANK)

    def is_goal(self) -> bool:
        return self == GOAL

    def rows(self) -> tuple[tuple[int, ...], ...]:
        return tuple(self.tiles[r * SIZE : (r + 1) * SIZE] for r in range(SIZE))

    def is_tile_correct(self, index: int) -> bool:
        """Check if the value at *index* is in its goal position."""
        return self.tiles[index] == GOAL.tiles[index]

    # -- successors -----------------------------------------------------------

    def neighbors(self) -> list[tuple[Configuration, Move]]:
        """Return every configuration one move away, with the move taken."""
        i = self.blank
        out: list[tuple[Configuration, Move]] = []
        for j in ADJACENT[i]:
            lst = list(self.tiles)
            lst[i], lst[j] = lst[j], lst[i]
            out.append((Configuration(tuple(lst)), Move(i, j)))
        return out

    def apply(self, move: Move) -> Configuration:
        """Return the configuration after *move*."""
        if move.blank_from != self.blank:
            raise ValueError(
                f"Move {move} does not start at the blank ({self.blank})."
            )
        if move.blank_to not in ADJACENT[move.blank_from]:
            raise ValueError(f"Move {move} is not between adjacent cells.")
        lst = list(self.tiles)
        i, j = move.blank_from, move.blank_to
        lst[i], lst[j] = lst[j], lst[i]
        return Configuration(tuple(lst))

    def slide(self, direction: Direction) -> Configuration | None:
        """Slide the tile next to the blank in *direction*.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns ``None`` if there is no such tile.
        """
        br, bc = divmod(self.blank, SIZE)
        dr, dc = _OFFSETS[direction]
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < SIZE and 0 <= tc < SIZE):
            return None
        return self.apply(Move(self.blank, tr * SIZE + tc))

    def move_tile(self, index: int) -> Configuration | None:
        """Move the tile at *index* into the blank if they are adjacent."""
        if index not in ADJACENT[self.blank]:
            return None
        return self.apply(Move(self.blank, index))


GOAL = Configuration((1, 2, 3, 4, 5, 6, 7, 8, 0))
