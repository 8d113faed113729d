# gridpath/app/agent.py
#!/usr/bin/env python3
"""
The character walking the board: it consumes a Pathfinder.

Automatic mode: while the search runs, advance() is called once every
`delay` seconds; once finished, next_move() is drained one cell at a time and
Locomotion slides between cells at `speed` cells per second.

Manual mode: the caller passes the held key as a Direction; the move is only
taken when the target cell is on the board and not a wall.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from gridpath.core.board import Board
from gridpath.core.errors import BoardConfigError, StartOnWallError
from gridpath.core.pathfinding import Pathfinder
from gridpath.core.types import Cell, Coord, Direction, SearchState, StepResult

logger = logging.getLogger(__name__)


@dataclass
class Locomotion:
    speed: float = 3.0
    current: Optional[Cell] = None
    target: Optional[Cell] = None
    distance_traveled: float = 1.0

    def init(self, start: Cell) -> None:
        # 1 == already standing on the target
        self.distance_traveled = 1.0
        self.current = self.target = start

    def update_target(self, direction: Direction, board: Board) -> None:
        if direction is Direction.NONE:
            return
        dx, dy = direction.delta
        self.target = board.cell(self.target.column + dx, self.target.row + dy)

    def is_on_target(self) -> bool:
        return self.distance_traveled >= 1

    def standing_cell(self) -> Cell:
        return self.target if self.is_on_target() else self.current

    def reset_position(self) -> None:
        self.distance_traveled = 0.0
        self.current = self.target

    def move_towards_target(self, dt: float) -> Tuple[float, float]:
        """Advance the interpolation and return the (x, y) position in cell units."""
        if self.distance_traveled < 1:
            self.distance_traveled += dt * self.speed
            t = min(1.0, self.distance_traveled)
            return (self.current.column + (self.target.column - self.current.column) * t,
                    self.current.row + (self.target.row - self.current.row) * t)
        self.distance_traveled = 1.0
        return (float(self.target.column), float(self.target.row))


class Agent:
    def __init__(self, board: Board, pathfinder: Pathfinder, start: Coord,
                 delay: float = 0.02, speed: float = 3.0, keyboard_control: bool = False):
        self.board = board
        self.pathfinder = pathfinder
        self.start = start
        self.delay = delay
        self.keyboard_control = keyboard_control
        self.locomotion = Locomotion(speed=speed)
        self.cooldown = 0.0
        self.position: Tuple[float, float] = (float(start[0]), float(start[1]))

    def init(self) -> None:
        """Validate the start square and seed the search from it."""
        col, row = self.start
        if not self.board.in_bounds(col, row):
            raise BoardConfigError(f"start {self.start} is outside the board")
        if self.board.is_wall(col, row):
            logger.error("It can't start on a wall, change the start position %s", self.start)
            raise StartOnWallError(f"start {self.start} is a wall")
        self._initialize_position(self.start)

    def _initialize_position(self, position: Coord) -> None:
        cell = self.board.cell_at(position)
        self.locomotion.init(cell)
        self.position = (float(cell.column), float(cell.row))
        self.cooldown = 0.0
        self.pathfinder.initialize(cell, self.board.goal())

    def set_manual_control(self, value: bool) -> None:
        self.keyboard_control = value
        if value:
            self.pathfinder.restart(self.board, start=self.locomotion.standing_cell())
        else:
            self._initialize_position(self.locomotion.standing_cell().position)
        logger.info("Manual control %s", "on" if value else "off")

    # -------------------- per-frame --------------------

    def update(self, dt: float, key_direction: Optional[Direction] = None) -> Optional[StepResult]:
        """
        One frame. Returns the StepResult when the search advanced this
        frame, otherwise None.
        """
        if self.keyboard_control:
            self.position = self.locomotion.move_towards_target(dt)
            if key_direction is not None and key_direction is not Direction.NONE:
                self._execute_next_movement(lambda: self._input_direction(key_direction))
            return None

        if self.pathfinder.state is SearchState.RUNNING:
            return self._search_path(dt)

        if self.pathfinder.is_finished():
            self.position = self.locomotion.move_towards_target(dt)
            self._execute_next_movement(self.pathfinder.next_move)
        return None

    def _search_path(self, dt: float) -> Optional[StepResult]:
        self.cooldown -= dt
        if not self.cooldown < 0:
            return None
        self.cooldown = self.delay
        return self.pathfinder.advance(self.board)

    def _execute_next_movement(self, get_direction: Callable[[], Direction]) -> None:
        if not self.locomotion.is_on_target():
            return
        self.locomotion.reset_position()
        direction = get_direction()
        self.locomotion.update_target(direction, self.board)
        if direction is not Direction.NONE:
            logger.debug("Moving %s to %s", direction.value, self.locomotion.target.position)

    def _input_direction(self, direction: Direction) -> Direction:
        current = self.locomotion.current
        dx, dy = direction.delta
        if self.can_move_to(current.column + dx, current.row + dy):
            return direction
        return Direction.NONE

    def can_move_to(self, column: int, row: int) -> bool:
        return self.board.in_bounds(column, row) and not self.board.is_wall(column, row)

    def reached_goal(self) -> bool:
        goal = self.board.goal()
        loco = self.locomotion
        return loco.target == goal and (loco.is_on_target() or loco.current == goal)
