import pytest

from gridpath.app.settings import Settings, SettingsError, resolve_settings
from gridpath.core.algorithms import Algorithm
from gridpath.core.heuristics import HeuristicType
from gridpath.core.types import WallRange


def test_defaults():
    settings = resolve_settings(argv=[], environ={})
    assert settings == Settings()
    assert settings.wall_range == WallRange(10, 50)
    assert settings.algorithm is Algorithm.ASTAR


def test_env_then_argv():
    settings = resolve_settings(
        argv=["--seed=9", "--algorithm=bfs"],
        environ={"GRIDPATH_SEED": "7", "GRIDPATH_ROWS": "12"},
    )
    assert settings.seed == 9
    assert settings.rows == 12
    assert settings.algorithm is Algorithm.BFS


def test_dashes_and_bare_flag():
    settings = resolve_settings(
        argv=["--keyboard-control", "--start=3,4", "--heuristic=octile",
              "--path-generation-delay=0.5"],
        environ={},
    )
    assert settings.keyboard_control is True
    assert settings.start == (3, 4)
    assert settings.heuristic is HeuristicType.DIAGONAL_OCTILE
    assert settings.path_generation_delay == 0.5


def test_unknown_option_is_ignored():
    assert resolve_settings(argv=["--colour=red", "positional"], environ={}) == Settings()


@pytest.mark.parametrize("argv", [
    ["--seed=abc"],
    ["--algorithm=greedy"],
    ["--columns=0"],
    ["--movement-speed=0"],
    ["--path-generation-delay=-1"],
    ["--keyboard-control=maybe"],
    ["--seed"],
])
def test_bad_values_raise(argv):
    with pytest.raises(SettingsError):
        resolve_settings(argv=argv, environ={})


def test_bad_env_value_raises():
    with pytest.raises(SettingsError):
        resolve_settings(argv=[], environ={"GRIDPATH_START": "nope"})
