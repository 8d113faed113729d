import pytest

from gridpath.app.agent import Agent, Locomotion
from gridpath.core.algorithms import Algorithm, create_pathfinder
from gridpath.core.board import Board
from gridpath.core.errors import BoardConfigError, StartOnWallError
from gridpath.core.types import Direction, SearchState


@pytest.fixture
def small_board():
    return Board.from_rows([
        "#G",
        "..",
    ])


def _agent(board, start=(0, 0), **kwargs):
    agent = Agent(board, create_pathfinder(Algorithm.BFS), start, **kwargs)
    agent.init()
    return agent


def test_search_advances_once_per_delay(small_board):
    agent = _agent(small_board, delay=0.5)
    assert agent.update(0.1) is not None      # first frame runs straight away
    assert agent.update(0.1) is None
    assert agent.update(0.3) is None
    assert agent.update(0.2) is not None


def test_walks_the_path_to_the_goal(walled_4x4):
    agent = _agent(walled_4x4, delay=0.0, speed=10.0)
    for _ in range(200):
        agent.update(0.1)
        if agent.reached_goal():
            break
    assert agent.pathfinder.is_finished()
    assert agent.reached_goal()
    assert agent.locomotion.target == walled_4x4.goal()


def test_manual_moves_are_blocked_by_walls_and_edges(small_board):
    agent = _agent(small_board, speed=10.0, keyboard_control=True)
    agent.update(0.1, Direction.UP)
    assert agent.locomotion.target.position == (0, 0)
    agent.update(0.1, Direction.LEFT)
    assert agent.locomotion.target.position == (0, 0)
    agent.update(0.1, Direction.RIGHT)
    assert agent.locomotion.target.position == (1, 0)
    agent.update(0.1, Direction.UP)
    agent.update(0.1, Direction.UP)
    assert agent.locomotion.target.position == (1, 1)


def test_manual_mode_never_advances_the_search(small_board):
    agent = _agent(small_board, keyboard_control=True)
    for _ in range(5):
        assert agent.update(0.1) is None
    assert agent.pathfinder.popped_count == 0


def test_leaving_manual_mode_replans_from_current_cell(small_board):
    agent = _agent(small_board, speed=10.0, keyboard_control=True)
    agent.update(0.1, Direction.RIGHT)
    agent.update(0.1)
    agent.set_manual_control(False)
    assert agent.pathfinder.start.position == (1, 0)
    assert agent.pathfinder.state is SearchState.RUNNING


def test_start_on_wall(small_board):
    with pytest.raises(StartOnWallError):
        _agent(small_board, start=(0, 1))


def test_start_off_board(small_board):
    with pytest.raises(BoardConfigError):
        _agent(small_board, start=(5, 5))


def test_locomotion_interpolates(small_board):
    loco = Locomotion(speed=2.0)
    loco.init(small_board.cell(0, 0))
    loco.reset_position()
    loco.update_target(Direction.RIGHT, small_board)
    assert loco.move_towards_target(0.25) == (0.5, 0.0)
    assert not loco.is_on_target()
    assert loco.move_towards_target(0.25) == (1.0, 0.0)
    assert loco.is_on_target()
