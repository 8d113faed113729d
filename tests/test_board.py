import random

import pytest

from gridpath.core.board import Board
from gridpath.core.errors import BoardConfigError, GoalNotFoundError
from gridpath.core.types import Cell, CellKind, WallRange


def test_same_seed_builds_same_board():
    a = Board(16, 9, random.Random())
    b = Board(16, 9, random.Random())
    a.setup(7, WallRange(10, 50))
    b.setup(7, WallRange(10, 50))
    assert a.to_rows() == b.to_rows()


def test_setup_twice_with_same_seed_is_repeatable():
    board = Board(16, 9)
    board.setup(3, WallRange(10, 50))
    first = board.to_rows()
    board.setup(99, WallRange(10, 50))
    board.setup(3, WallRange(10, 50))
    assert board.to_rows() == first


def test_setup_places_walls_in_range_and_one_goal():
    board = Board(16, 9)
    board.setup(2, WallRange(10, 50))
    assert 10 <= board.wall_count() < 50
    goals = [c for c in board.cells() if c.kind is CellKind.GOAL]
    assert len(goals) == 1
    assert board.goal() is goals[0]


@pytest.mark.parametrize("columns, rows", [(0, 3), (3, 0), (-1, 2)])
def test_bad_dimensions_raise(columns, rows):
    with pytest.raises(BoardConfigError):
        Board(columns, rows)


@pytest.mark.parametrize("wall_range", [WallRange(5, 5), WallRange(-1, 3), WallRange(0, 10)])
def test_bad_wall_range_raises(wall_range):
    board = Board(3, 3)
    with pytest.raises(BoardConfigError):
        board.setup(1, wall_range)


def test_goal_missing_before_setup():
    with pytest.raises(GoalNotFoundError):
        Board(4, 4).goal()


def test_neighbors_order_up_left_down_right():
    board = Board(3, 3)
    center = board.cell(1, 1)
    assert [n.position for n in board.neighbors(center)] == [(1, 2), (0, 1), (1, 0), (2, 1)]


def test_neighbors_use_none_for_walls_and_edges():
    board = Board.from_rows([
        "...",
        "#..",
        "...",
    ])
    corner = board.cell(0, 0)
    # up is a wall, left and down are off the board
    assert board.neighbors(corner) == [None, None, None, board.cell(1, 0)]
    assert board.walkable_neighbors(corner) == [board.cell(1, 0)]


def test_from_rows_first_line_is_top_row():
    board = Board.from_rows([
        "G.",
        ".#",
    ])
    assert board.goal().position == (0, 1)
    assert board.is_wall(1, 0)
    assert board.to_rows() == ["G.", ".#"]


def test_from_rows_rejects_unknown_glyph():
    with pytest.raises(BoardConfigError):
        Board.from_rows([".x"])


def test_set_kind_goal_demotes_previous_goal():
    board = Board(3, 1)
    board.set_kind(0, 0, CellKind.GOAL)
    board.set_kind(2, 0, CellKind.GOAL)
    assert board.cell(0, 0).kind is CellKind.FLOOR
    assert board.goal().position == (2, 0)


def test_cell_equality_ignores_kind():
    assert Cell(1, 2, CellKind.WALL) == Cell(1, 2)
    assert hash(Cell(1, 2, CellKind.GOAL)) == hash(Cell(1, 2))
    assert Cell(1, 2).id == "1,2"


def test_clone_is_independent():
    board = Board.from_rows(["..G"])
    copy = board.clone()
    copy.set_kind(1, 0, CellKind.WALL)
    assert not board.is_wall(1, 0)
    assert copy.goal().position == (2, 0)
