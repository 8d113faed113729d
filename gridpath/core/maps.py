# gridpath/core/maps.py
#!/usr/bin/env python3
"""
Hand-made boards stored as JSON:

    {"width": 6, "height": 4,
     "cells": [[0, 0, 1, 0, 0, 0], ...],   # cells[row][col], 0 floor / 1 wall
     "start": [0, 0], "goal": [5, 3]}      # (col, row), row 0 is the bottom row
"""

import json
import logging
from pathlib import Path
from typing import Tuple, Union

from gridpath.core.board import Board
from gridpath.core.errors import MapFormatError
from gridpath.core.types import Cell, CellKind

logger = logging.getLogger(__name__)

FLOOR, WALL = 0, 1


def parse_map(data: dict) -> Tuple[Board, Cell]:
    try:
        width = int(data["width"])
        height = int(data["height"])
        sx, sy = (int(v) for v in data["start"])
        gx, gy = (int(v) for v in data["goal"])
        cells = data["cells"]
    except (KeyError, TypeError, ValueError) as ex:
        raise MapFormatError(f"missing or invalid map field: {ex}") from ex

    if width <= 0 or height <= 0:
        raise MapFormatError(f"map must be at least 1x1, got {width}x{height}")
    if not isinstance(cells, list) or not all(isinstance(r, list) for r in cells):
        raise MapFormatError("cells must be a list of rows")
    if len(cells) != height or any(len(r) != width for r in cells):
        raise MapFormatError("cells size mismatch")
    if not (0 <= sx < width and 0 <= sy < height):
        raise MapFormatError("start out of bounds")
    if not (0 <= gx < width and 0 <= gy < height):
        raise MapFormatError("goal out of bounds")

    board = Board(width, height)
    for row, values in enumerate(cells):
        for col, v in enumerate(values):
            if v == WALL:
                board.set_kind(col, row, CellKind.WALL)
            elif v != FLOOR:
                raise MapFormatError(f"unknown cell value {v!r} at ({col}, {row})")

    if board.is_wall(sx, sy):
        raise MapFormatError("start is on a wall")
    if board.is_wall(gx, gy):
        raise MapFormatError("goal is on a wall")
    board.set_kind(gx, gy, CellKind.GOAL)
    return board, board.cell(sx, sy)


def load_map(path: Union[str, Path]) -> Tuple[Board, Cell]:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as ex:
            raise MapFormatError(f"{path}: {ex}") from ex
    board, start = parse_map(data)
    logger.info("Loaded map %s (%dx%d)", path, board.num_columns, board.num_rows)
    return board, start
