# gridpath/core/board.py
#!/usr/bin/env python3
"""
Board — dense columns x rows grid of Cells.

Row 0 is the bottom row, so "Up" means row + 1.

Generation is seeded through a random.Random owned by the board, never the
module-level generator, so the same seed always rebuilds the same board.
"""

import logging
import random
from typing import Iterator, List, Optional, Sequence

from gridpath.core.errors import BoardConfigError, GoalNotFoundError
from gridpath.core.types import Cell, CellKind, Coord, WallRange

logger = logging.getLogger(__name__)


class Board:
    def __init__(self, columns: int, rows: int, rng: Optional[random.Random] = None):
        if columns <= 0 or rows <= 0:
            raise BoardConfigError(f"board must be at least 1x1, got {columns}x{rows}")
        self.num_columns = columns
        self.num_rows = rows
        self.rng = rng or random.Random()
        self.squares: List[List[Cell]] = []   # [col][row]
        self._reset_squares()

    # -------------------- setup --------------------

    def _reset_squares(self) -> None:
        self.squares = [[Cell(c, r) for r in range(self.num_rows)]
                        for c in range(self.num_columns)]

    @property
    def total_squares(self) -> int:
        return self.num_columns * self.num_rows

    def setup(self, seed: int, wall_range: WallRange) -> None:
        """Reseed, reset every cell to Floor, then place walls and one goal."""
        if wall_range.min < 0 or wall_range.min >= wall_range.max:
            raise BoardConfigError(f"invalid wall range [{wall_range.min}, {wall_range.max})")
        if wall_range.max > self.total_squares:
            raise BoardConfigError(
                f"wall range max {wall_range.max} leaves no floor for the goal "
                f"on a {self.num_columns}x{self.num_rows} board")

        self.rng.seed(seed)
        self._reset_squares()
        walls = self._place_walls_randomly(wall_range.min, wall_range.max)
        goal = self._place_goal_randomly()
        logger.info("Board %dx%d seeded with %d: %d walls, goal at %s",
                    self.num_columns, self.num_rows, seed, walls, goal.position)

    def _place_walls_randomly(self, min_walls: int, max_walls: int) -> int:
        num_walls = self.rng.randrange(min_walls, max_walls)
        remaining = num_walls
        while remaining > 0:
            col = self.rng.randrange(self.num_columns)
            row = self.rng.randrange(self.num_rows)
            square = self.squares[col][row]
            if square.kind is CellKind.WALL:
                continue
            square.kind = CellKind.WALL
            remaining -= 1
        return num_walls

    def _place_goal_randomly(self) -> Cell:
        floors = self.floor_cells()
        goal = floors[self.rng.randrange(len(floors))]
        goal.kind = CellKind.GOAL
        return goal

    def set_kind(self, column: int, row: int, kind: CellKind) -> Cell:
        """Hand-place a cell kind (maps and tests). Placing a goal demotes the old one."""
        square = self.cell(column, row)
        if kind is CellKind.GOAL:
            for other in self.cells():
                if other.kind is CellKind.GOAL:
                    other.kind = CellKind.FLOOR
        square.kind = kind
        return square

    @classmethod
    def from_rows(cls, lines: Sequence[str]) -> "Board":
        """
        Build a board from ASCII rows: '#' wall, '.' floor, 'G' goal.
        The first line is the TOP row.
        """
        if not lines:
            raise BoardConfigError("no rows given")
        width = len(lines[0])
        if any(len(line) != width for line in lines):
            raise BoardConfigError("rows have different lengths")
        board = cls(width, len(lines))
        for i, line in enumerate(lines):
            row = len(lines) - 1 - i
            for col, ch in enumerate(line):
                if ch == "#":
                    board.set_kind(col, row, CellKind.WALL)
                elif ch == "G":
                    board.set_kind(col, row, CellKind.GOAL)
                elif ch != ".":
                    raise BoardConfigError(f"unknown board character {ch!r}")
        return board

    def clone(self) -> "Board":
        copy = Board(self.num_columns, self.num_rows)
        for square in self.cells():
            copy.squares[square.column][square.row].kind = square.kind
        return copy

    # -------------------- queries --------------------

    def in_bounds(self, column: int, row: int) -> bool:
        return 0 <= column < self.num_columns and 0 <= row < self.num_rows

    def cell(self, column: int, row: int) -> Cell:
        if not self.in_bounds(column, row):
            raise BoardConfigError(f"({column}, {row}) is outside the board")
        return self.squares[column][row]

    def cell_at(self, coord: Coord) -> Cell:
        return self.cell(coord[0], coord[1])

    def is_wall(self, column: int, row: int) -> bool:
        return self.squares[column][row].kind is CellKind.WALL

    def cells(self) -> Iterator[Cell]:
        """All cells, column-major."""
        for column in self.squares:
            yield from column

    def floor_cells(self) -> List[Cell]:
        return [c for c in self.cells() if c.kind is CellKind.FLOOR]

    def wall_count(self) -> int:
        return sum(1 for c in self.cells() if c.kind is CellKind.WALL)

    def goal(self) -> Cell:
        for square in self.cells():
            if square.kind is CellKind.GOAL:
                return square
        raise GoalNotFoundError("board has no goal cell; run setup() first")

    def _walkable(self, column: int, row: int) -> Optional[Cell]:
        if not self.in_bounds(column, row) or self.is_wall(column, row):
            return None
        return self.squares[column][row]

    def neighbors(self, cell: Cell) -> List[Optional[Cell]]:
        """
        Four slots, always in the order Up, Left, Down, Right.
        A slot is None when it is off the board or a wall. Search
        tie-breaking depends on this order.
        """
        c, r = cell.column, cell.row
        return [
            self._walkable(c, r + 1),   # up
            self._walkable(c - 1, r),   # left
            self._walkable(c, r - 1),   # down
            self._walkable(c + 1, r),   # right
        ]

    def walkable_neighbors(self, cell: Cell) -> List[Cell]:
        return [n for n in self.neighbors(cell) if n is not None]

    def to_rows(self) -> List[str]:
        """Inverse of from_rows (handy in logs and test failures)."""
        glyph = {CellKind.FLOOR: ".", CellKind.WALL: "#", CellKind.GOAL: "G"}
        return ["".join(glyph[self.squares[c][r].kind] for c in range(self.num_columns))
                for r in reversed(range(self.num_rows))]
