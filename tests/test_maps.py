import json
from pathlib import Path

import pytest

from gridpath.core.algorithms import Algorithm, create_pathfinder
from gridpath.core.errors import MapFormatError
from gridpath.core.maps import load_map, parse_map

MAPS = Path(__file__).resolve().parent.parent / "maps"


def _data(**overrides):
    data = {
        "width": 3,
        "height": 2,
        "cells": [[0, 0, 0], [0, 1, 0]],
        "start": [0, 0],
        "goal": [2, 1],
    }
    data.update(overrides)
    return data


def test_parse_map_rows_start_at_the_bottom():
    board, start = parse_map(_data())
    assert start.position == (0, 0)
    assert board.is_wall(1, 1)
    assert board.goal().position == (2, 1)
    assert board.to_rows() == [".#G", "..."]


@pytest.mark.parametrize("overrides", [
    {"width": None},
    {"cells": [[0, 0, 0]]},
    {"start": [5, 0]},
    {"goal": [0, 9]},
    {"start": [1, 1]},
    {"goal": [1, 1]},
    {"cells": [[0, 2, 0], [0, 0, 0]]},
    {"cells": 5},
    {"cells": [5, [0, 0, 0]]},
])
def test_parse_map_rejects_bad_data(overrides):
    with pytest.raises(MapFormatError):
        parse_map(_data(**overrides))


def test_parse_map_missing_field():
    data = _data()
    del data["goal"]
    with pytest.raises(MapFormatError):
        parse_map(data)


def test_load_map_bad_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(MapFormatError):
        load_map(path)


def test_load_map_round_trip(tmp_path):
    path = tmp_path / "small.json"
    path.write_text(json.dumps(_data()), encoding="utf-8")
    board, start = load_map(path)
    assert (board.num_columns, board.num_rows) == (3, 2)


def test_corridor_map(solve, check_path):
    board, start = load_map(MAPS / "corridor.json")
    pf = create_pathfinder(Algorithm.BFS)
    assert solve(pf, board, start.position).status == "done"
    check_path(board, start.position, pf.path_cells)
    assert len(pf.path_cells) == 19


def test_walled_off_map(solve):
    board, start = load_map(MAPS / "walled_off.json")
    pf = create_pathfinder(Algorithm.ASTAR)
    assert solve(pf, board, start.position).status == "no_path"
