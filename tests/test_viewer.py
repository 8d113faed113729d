import pytest

pytest.importorskip("pygame")

from gridpath.app.settings import Settings
from gridpath.app.viewer import find_next_board


def test_find_next_board_moves_to_a_later_seed():
    found = find_next_board(Settings(seed=2), 2)
    assert found is not None
    board, start, seed = found
    assert seed > 2
    assert not board.cell_at(start).is_wall


def test_find_next_board_gives_up_after_tries():
    # start is off the board for every seed
    assert find_next_board(Settings(start=(50, 50)), 0, tries=5) is None
