"""Generates solvable 8-puzzle start configurations."""

from __future__ import annotations

import random

from eightpuzzle.models.board import ADJACENT, GOAL, Configuration, Move

DEFAULT_SCRAMBLE_MOVES = 30


class GameGenerator:
    """Creates solvable puzzles by walking randomly away from the goal."""

    @staticmethod
    def solved() -> Configuration:
        """Return the goal configuration."""
        return GOAL

    @staticmethod
    def scramble(
        config: Configuration,
        moves: int = DEFAULT_SCRAMBLE_MOVES,
        rng: random.Random | None = None,
    ) -> Configuration:
        """Return *config* after *moves* random legal moves.

        The blank never steps straight back to where it just came from.
        Every result is reachable from *config*, so solvability is kept.
        """
        rng = rng or random.Random()
        prev_pos: int | None = None

        for _ in range(moves):
            blank = config.blank
            candidates = list(ADJACENT[blank])
            if prev_pos in candidates and len(candidates) > 1:
                candidates.remove(prev_pos)
            target = rng.choice(candidates)
            prev_pos = blank
            config = config.apply(Move(blank, target))
        return config

    @staticmethod
    def generate(
        moves: int = DEFAULT_SCRAMBLE_MOVES, seed: int | None = None
    ) -> Configuration:
        """Return a random *solvable* configuration other than the goal."""
        if moves < 1:
            raise ValueError(f"moves must be >= 1, got {moves}.")
        rng = random.Random(seed)
        while True:
            config = GameGenerator.scramble(GameGenerator.solved(), moves, rng)
            if not config.is_goal():
                return config
