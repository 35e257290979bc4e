"""Session, playback and generator behaviour."""

from __future__ import annotations

import pytest

from eightpuzzle.engine.gamegenerator import GameGenerator
from eightpuzzle.engine.gameplay import GamePlay, Outcome
from eightpuzzle.engine.gamesolver import Algorithm, Heuristic, is_solvable
from eightpuzzle.engine.gamestate import PlaybackState
from eightpuzzle.models.board import GOAL, Configuration, Direction

ONE_MOVE = Configuration.from_string("123456708")
TWO_MOVES = Configuration.from_string("123456078")


# -- session ------------------------------------------------------------------


def test_unsolvable_start_is_not_searched() -> None:
    game = GamePlay(Configuration.from_string("213456780"), Algorithm.BFS)
    assert game.solve() is Outcome.NOT_SOLVABLE
    assert game.result is None
    assert game.playback is None
    assert game.message == "Configuration is not solvable"


@pytest.mark.parametrize("algorithm", list(Algorithm), ids=str)
def test_solve_sets_up_playback(algorithm: Algorithm) -> None:
    game = GamePlay(TWO_MOVES, algorithm, Heuristic.EUCLIDEAN)
    assert game.solve() is Outcome.SOLVED
    assert game.result.path[-1] == GOAL
    assert game.board == TWO_MOVES
    assert game.message == f"Solution found in {game.result.move_count} moves"


def test_ids_limit_too_small_reports_no_solution() -> None:
    game = GamePlay(TWO_MOVES, Algorithm.IDS, max_depth=1)
    assert game.solve() is Outcome.NO_SOLUTION
    assert game.message == "No solution found"
    assert game.playback is None


def test_manual_moves_change_start_only() -> None:
    game = GamePlay(ONE_MOVE)
    assert not game.move(Direction.UP)
    assert game.start == ONE_MOVE
    assert game.move(Direction.LEFT)
    assert game.start == GOAL
    assert game.result is None

    assert game.move_tile(7)
    assert game.start == ONE_MOVE
    assert not game.move_tile(0)


def test_manual_move_discards_previous_solution() -> None:
    game = GamePlay(TWO_MOVES)
    game.solve()
    assert game.move(Direction.LEFT)
    assert game.result is None
    assert game.playback is None
    assert game.outcome is None
    assert game.message == ""


def test_scramble_gives_solvable_start() -> None:
    game = GamePlay(GOAL)
    game.scramble(20, seed=3)
    assert not game.start.is_goal()
    assert is_solvable(game.start)


# -- playback -----------------------------------------------------------------


def test_playback_navigation() -> None:
    game = GamePlay(TWO_MOVES, Algorithm.BFS)
    game.solve()
    playback = game.playback
    assert playback.step == 0
    assert not playback.step_back()

    assert playback.step_forward()
    assert playback.step_forward()
    assert playback.is_at_goal
    assert game.board == GOAL
    assert not playback.step_forward()

    assert playback.step_back()
    assert playback.step == 1
    playback.reset()
    assert game.board == TWO_MOVES


def test_playback_frames_restart_after_goal() -> None:
    path = (TWO_MOVES, TWO_MOVES.slide(Direction.LEFT), GOAL)
    playback = PlaybackState(path)
    assert tuple(playback.frames()) == path
    assert playback.is_at_goal
    assert tuple(playback.frames()) == path


def test_playback_rejects_empty_path() -> None:
    with pytest.raises(ValueError):
        PlaybackState(())


# -- generator ----------------------------------------------------------------


def test_generate_is_seeded() -> None:
    assert GameGenerator.generate(25, seed=7) == GameGenerator.generate(25, seed=7)


@pytest.mark.parametrize("seed", range(20))
def test_generate_is_solvable(seed: int) -> None:
    config = GameGenerator.generate(30, seed=seed)
    assert is_solvable(config)
    assert not config.is_goal()


def test_generate_rejects_zero_moves() -> None:
    with pytest.raises(ValueError):
        GameGenerator.generate(0)


def test_scramble_zero_moves_is_identity() -> None:
    assert GameGenerator.scramble(ONE_MOVE, 0) == ONE_MOVE
