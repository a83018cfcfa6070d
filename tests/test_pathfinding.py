"""Tests for breadth-first pursuit paths."""

import pytest

from mazechase.maze import EntityKind, MazeGrid, default_maze
from mazechase.pathfinding import shortest_path


@pytest.fixture
def loop_grid():
    # A ring corridor around a wall block: two equal routes between corners.
    return MazeGrid.from_rows(
        [
            "#######",
            "#.....#",
            "#.###.#",
            "#.....#",
            "#######",
        ]
    )


def _assert_valid_path(grid, start, path, kind=EntityKind.PURSUER):
    previous = start
    for tile in path:
        assert abs(tile[0] - previous[0]) + abs(tile[1] - previous[1]) == 1
        assert grid.is_passable(tile, kind)
        previous = tile


def test_path_length_matches_hop_count(loop_grid):
    path = shortest_path(loop_grid, (1, 1), (5, 3))
    # 4 steps across + 2 steps down
    assert len(path) == 6
    assert path[-1] == (5, 3)
    assert (1, 1) not in path
    _assert_valid_path(loop_grid, (1, 1), path)


def test_ties_break_in_fixed_neighbor_order(loop_grid):
    # Right is explored before down, so the top corridor wins the tie.
    path = shortest_path(loop_grid, (1, 1), (5, 3))
    assert path == [(2, 1), (3, 1), (4, 1), (5, 1), (5, 2), (5, 3)]
    assert shortest_path(loop_grid, (1, 1), (5, 3)) == path


def test_enclosed_goal_is_unreachable():
    grid = MazeGrid.from_rows(
        [
            "#######",
            "#.....#",
            "#.###.#",
            "#.#.#.#",
            "#.###.#",
            "#.....#",
            "#######",
        ]
    )
    assert shortest_path(grid, (1, 1), (3, 3)) == []


def test_start_equal_to_goal_needs_no_steps(loop_grid):
    assert shortest_path(loop_grid, (1, 1), (1, 1)) == []


def test_doors_respect_entity_kind():
    grid = MazeGrid.from_rows(["#####", "#.=.#", "#####"])
    assert shortest_path(grid, (1, 1), (3, 1), EntityKind.PURSUER) == [(2, 1), (3, 1)]
    assert shortest_path(grid, (1, 1), (3, 1), EntityKind.PLAYER) == []


def test_pursuer_leaves_house_through_door():
    grid = default_maze()
    path = shortest_path(grid, (13, 14), (13, 11))
    assert path == [(13, 13), (13, 12), (13, 11)]
    # The house is sealed for the player.
    assert shortest_path(grid, (13, 14), (13, 11), EntityKind.PLAYER) == []


@pytest.mark.parametrize(
    "start, goal, expected",
    [
        ((6, 14), (-1, 14), [(x, 14) for x in range(5, -2, -1)]),
        ((21, 14), (28, 14), [(x, 14) for x in range(22, 29)]),
    ],
)
def test_tunnel_mouths_are_reachable(start, goal, expected):
    assert shortest_path(default_maze(), start, goal) == expected


def test_search_stops_one_column_past_the_grid():
    grid = default_maze()
    assert shortest_path(grid, (6, 14), (-2, 14)) == []
    assert shortest_path(grid, (21, 14), (29, 14)) == []


def test_pursuer_in_tunnel_mouth_can_plan_back_into_maze():
    grid = default_maze()
    path = shortest_path(grid, (-1, 14), (6, 14))
    assert path == [(x, 14) for x in range(0, 7)]


def test_long_path_on_default_maze_is_valid():
    grid = default_maze()
    path = shortest_path(grid, (1, 1), (26, 29))
    assert path[-1] == (26, 29)
    # Manhattan distance is a lower bound on the hop count.
    assert len(path) >= 25 + 28
    _assert_valid_path(grid, (1, 1), path)
