import random

import pytest

from gridpath.core.board import Board
from gridpath.core.types import SearchState, WallRange


def _run(pathfinder, board, start=(0, 0), limit=10_000):
    """Initialize and advance until the search stops. Returns the last StepResult."""
    pathfinder.initialize(board.cell_at(start), board.goal())
    result = None
    for _ in range(limit):
        result = pathfinder.advance(board)
        if pathfinder.state is not SearchState.RUNNING:
            return result
    raise AssertionError(f"{pathfinder.name} did not stop within {limit} steps")


@pytest.fixture
def solve():
    return _run


@pytest.fixture
def walled_4x4():
    # goal (3,3), walls (1,1) and (2,1), start expected at (0,0)
    return Board.from_rows([
        "...G",
        "....",
        ".##.",
        "....",
    ])


@pytest.fixture
def seeded_boards():
    boards = []
    for seed in range(12):
        board = Board(10, 8, random.Random())
        board.setup(seed, WallRange(10, 30))
        if not board.is_wall(0, 0):
            boards.append(board)
    return boards


def assert_valid_path(board, start, path):
    """Every step is one orthogonal move onto a non-wall cell, ending on the goal."""
    prev = start
    for cell in path:
        assert abs(cell.column - prev[0]) + abs(cell.row - prev[1]) == 1
        assert not board.is_wall(cell.column, cell.row)
        prev = cell.position
    assert prev == board.goal().position


@pytest.fixture
def check_path():
    return assert_valid_path
