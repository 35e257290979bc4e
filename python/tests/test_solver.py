"""Solver test suite.

Start boards come from seeded scrambles of the goal plus a few
hand-picked cases.  Every returned path is replayed through the real
session engine to verify it is legal and ends at the goal.
"""

from __future__ import annotations

import inspect

import pytest

from eightpuzzle.engine.gamegenerator import GameGenerator
from eightpuzzle.engine.gameplay import GamePlay
from eightpuzzle.engine.gamesolver import (
    Algorithm,
    Heuristic,
    Solver,
    solve_astar,
    solve_bfs,
    solve_dfs,
    solve_ids,
)
from eightpuzzle.models.board import GOAL, Configuration
from eightpuzzle.models.result import SolutionResult

SAMPLE = Configuration.from_string("123405678")
ONE_MOVE = [
    Configuration.from_string("123456708"),
    Configuration.from_string("123450786"),
]
# One of the two hardest starts: 31 moves is the diameter of the puzzle.
HARDEST = Configuration.from_string("867254301")
UNSOLVABLE = Configuration.from_string("213456780")

_SHALLOW = [GameGenerator.generate(moves=12, seed=seed) for seed in range(8)]


# -- helpers ------------------------------------------------------------------


_SOLVERS = [
    pytest.param(solve_bfs, id="bfs"),
    pytest.param(solve_dfs, id="dfs"),
    pytest.param(solve_ids, id="ids"),
    pytest.param(lambda s: solve_astar(s, Heuristic.MANHATTAN), id="astar-manhattan"),
    pytest.param(lambda s: solve_astar(s, Heuristic.EUCLIDEAN), id="astar-euclidean"),
]


def _assert_replays(start: Configuration, result: SolutionResult) -> None:
    """Replay the result's moves and check each frame matches the path."""
    assert result.path is not None, f"No solution from {start}"
    assert result.path[0] == start
    assert result.path[-1] == GOAL

    config = start
    for i, move in enumerate(result.moves, 1):
        config = config.apply(move)
        assert config == result.path[i], f"Frame {i} differs ({start})"

    # Directions through the session engine must solve the board too.
    game = GamePlay(start)
    for i, direction in enumerate(result.directions):
        ok = game.move(direction)
        assert ok, f"Move {i} ({direction.value}) was invalid from {start}"
    assert game.start == GOAL


# -- trivial inputs -----------------------------------------------------------


@pytest.mark.parametrize("solver", _SOLVERS)
def test_goal_is_its_own_solution(solver) -> None:
    result = solver(GOAL)
    assert result.path == (GOAL,)
    assert result.stats.nodes_expanded == 0
    assert result.stats.max_depth == 0
    assert result.move_count == 0


@pytest.mark.parametrize("start", ONE_MOVE, ids=str)
@pytest.mark.parametrize("solver", _SOLVERS)
def test_one_move_from_goal(solver, start: Configuration) -> None:
    result = solver(start)
    assert result.path == (start, GOAL)
    _assert_replays(start, result)


@pytest.mark.parametrize("solver", _SOLVERS)
def test_sample_start_reaches_goal(solver) -> None:
    assert Solver.is_solvable(SAMPLE)
    result = solver(SAMPLE)
    assert result.path[-1].to_string() == "123456780"
    _assert_replays(SAMPLE, result)


# -- optimality ---------------------------------------------------------------


@pytest.mark.parametrize("start", _SHALLOW, ids=str)
def test_bfs_and_astar_agree(start: Configuration) -> None:
    bfs = solve_bfs(start)
    manhattan = solve_astar(start, Heuristic.MANHATTAN)
    euclidean = solve_astar(start, Heuristic.EUCLIDEAN)

    assert bfs.move_count == manhattan.move_count == euclidean.move_count
    assert bfs.move_count <= 12
    for result in (bfs, manhattan, euclidean):
        _assert_replays(start, result)


@pytest.mark.parametrize("start", _SHALLOW, ids=str)
def test_ids_matches_bfs_length(start: Configuration) -> None:
    bfs = solve_bfs(start)
    ids = solve_ids(start, max_depth=bfs.move_count)
    assert ids.move_count == bfs.move_count
    _assert_replays(start, ids)


@pytest.mark.parametrize("start", _SHALLOW[:3] + [SAMPLE], ids=str)
def test_dfs_never_shorter_than_bfs(start: Configuration) -> None:
    bfs = solve_bfs(start)
    dfs = solve_dfs(start)
    assert dfs.move_count >= bfs.move_count
    assert len(set(dfs.path)) == len(dfs.path)
    assert dfs.stats.max_depth >= dfs.move_count
    _assert_replays(start, dfs)


def test_hardest_start_needs_31_moves() -> None:
    bfs = solve_bfs(HARDEST)
    astar = solve_astar(HARDEST)
    assert bfs.move_count == 31
    assert astar.move_count == 31
    _assert_replays(HARDEST, astar)


def test_astar_expands_fewer_nodes_than_bfs() -> None:
    bfs = solve_bfs(HARDEST)
    astar = solve_astar(HARDEST, Heuristic.MANHATTAN)
    assert astar.stats.nodes_expanded < bfs.stats.nodes_expanded


# -- instrumentation ----------------------------------------------------------


def test_stats_one_move_from_goal() -> None:
    start = ONE_MOVE[0]

    bfs = solve_bfs(start)
    assert (bfs.stats.nodes_expanded, bfs.stats.max_depth) == (1, 1)

    dfs = solve_dfs(start)
    assert (dfs.stats.nodes_expanded, dfs.stats.max_depth) == (2, 1)

    # limit 0: start only; limit 1: start + three children (goal last).
    ids = solve_ids(start)
    assert (ids.stats.nodes_expanded, ids.stats.max_depth) == (5, 1)

    astar = solve_astar(start)
    assert (astar.stats.nodes_expanded, astar.stats.max_depth) == (2, 1)


def test_result_metadata() -> None:
    result = solve_astar(SAMPLE, "euclidean")
    assert result.algorithm == "astar"
    assert result.heuristic == "euclidean"
    assert result.stats.elapsed_time_ms >= 0
    assert solve_bfs(SAMPLE).heuristic is None


@pytest.mark.parametrize("solve", [solve_bfs, solve_dfs], ids=["bfs", "dfs"])
def test_uninformed_solvers_take_only_a_start(solve) -> None:
    params = inspect.signature(solve).parameters
    assert list(params) == ["start"]
    assert isinstance(solve(SAMPLE), SolutionResult)


def test_ids_stats_accumulate_over_iterations() -> None:
    start = Configuration.from_string("123456078")
    ids = solve_ids(start)
    bfs = solve_bfs(start)
    assert ids.move_count == bfs.move_count == 2
    assert ids.stats.nodes_expanded > bfs.stats.nodes_expanded


# -- failure ------------------------------------------------------------------


def test_unsolvable_start_exhausts_bfs() -> None:
    assert not Solver.is_solvable(UNSOLVABLE)
    result = solve_bfs(UNSOLVABLE)
    assert result.path is None
    assert not result.found
    assert result.move_count is None
    assert result.moves == []
    # The odd-parity half of the state space: 9!/2 configurations.
    assert result.stats.nodes_expanded == 181_440


def test_unsolvable_start_exhausts_dfs() -> None:
    result = solve_dfs(UNSOLVABLE)
    assert result.path is None
    assert result.stats.nodes_expanded == 181_440


def test_unsolvable_start_exhausts_astar() -> None:
    result = solve_astar(UNSOLVABLE, Heuristic.MANHATTAN)
    assert result.path is None


def test_ids_reports_no_solution_beyond_limit() -> None:
    start = Configuration.from_string("123456078")
    assert solve_ids(start, max_depth=1).path is None
    assert solve_ids(start, max_depth=2).move_count == 2
    # Unsolvable and too-shallow look the same.
    assert solve_ids(UNSOLVABLE, max_depth=6).path is None


def test_ids_rejects_negative_limit() -> None:
    with pytest.raises(ValueError):
        solve_ids(SAMPLE, max_depth=-1)


# -- dispatch -----------------------------------------------------------------


@pytest.mark.parametrize("algorithm", list(Algorithm), ids=str)
def test_solver_dispatch(algorithm: Algorithm) -> None:
    start = ONE_MOVE[1]
    result = Solver.solve(start, algorithm)
    assert result.algorithm == algorithm.value
    assert result.path == (start, GOAL)


def test_solver_dispatch_accepts_names() -> None:
    result = Solver.solve(SAMPLE, "astar", "euclidean")
    assert result.heuristic == "euclidean"
    assert result.move_count == solve_bfs(SAMPLE).move_count

    with pytest.raises(ValueError):
        Solver.solve(SAMPLE, "greedy")
