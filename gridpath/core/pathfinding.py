# gridpath/core/pathfinding.py
#!/usr/bin/env python3
"""
Stepwise pathfinding base — one expansion per advance() for animation.

Lifecycle shared by every algorithm:
- initialize(start, goal)   -> RUNNING
- advance(board)            -> StepResult, one unit of work per call
- is_finished()             -> goal reached
- reconstruct_path()        -> cells from the one next to start up to the goal
- next_move()               -> pops one Direction at a time for locomotion
- restart(board)            -> clear markings and search again

When the frontier runs dry the search parks in UNREACHABLE and every later
advance() returns status "no_path" without touching any state.

Subclasses implement _reset_frontier(), _step() and _frontier_size();
bidirectional search also overrides _trace_path().
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Union

from gridpath.core.board import Board
from gridpath.core.errors import SearchNotFinishedError, StartOnWallError
from gridpath.core.types import Cell, Coord, Direction, SearchState, StepResult

logger = logging.getLogger(__name__)


def check_direction(last: Cell, current: Cell) -> Direction:
    """Axis with the larger delta wins; ties go vertical."""
    x = current.column - last.column
    y = current.row - last.row
    if abs(x) > abs(y):
        return Direction.RIGHT if x > 0 else Direction.LEFT
    return Direction.UP if y > 0 else Direction.DOWN


def format_elapsed(seconds: float) -> str:
    minutes, rest = divmod(seconds, 60)
    return f"{int(minutes):02d}:{int(rest):02d}:{int((rest % 1) * 100):02d}"


@dataclass
class Pathfinder(ABC):
    name: str = "base"

    # Internal state
    start: Optional[Cell] = None
    goal: Optional[Cell] = None
    state: SearchState = SearchState.UNINITIALIZED
    parent: Dict[str, Cell] = field(default_factory=dict)    # cell id -> parent
    path_cells: List[Cell] = field(default_factory=list)     # start-exclusive, goal last
    path_stack: List[Cell] = field(default_factory=list)     # top = next step
    last_cell: Optional[Cell] = None
    popped_count: int = 0

    # markings for renderers
    searched: Set[Coord] = field(default_factory=set)
    selected: List[Coord] = field(default_factory=list)

    started_at: float = 0.0
    elapsed: float = 0.0

    # -------------------- lifecycle --------------------

    def initialize(self, start: Cell, goal: Cell) -> None:
        """Reset every structure and seed the frontier from start."""
        if start.is_wall:
            raise StartOnWallError(f"{self.name}: cannot start on a wall at {start.position}")
        self.start = start
        self.goal = goal
        self.last_cell = start
        self.parent.clear()
        self.path_cells = []
        self.path_stack.clear()
        self.searched.clear()
        self.selected.clear()
        self.popped_count = 0
        self.elapsed = 0.0
        self._reset_frontier()
        self.state = SearchState.RUNNING
        self.started_at = time.perf_counter()
        logger.debug("%s initialized: start=%s goal=%s", self.name, start.position, goal.position)

    def restart(self, board: Board, start: Optional[Union[Cell, Coord]] = None) -> None:
        """Drop finished flag and markings, then plan again (optionally from a new start)."""
        if start is None:
            if self.start is None:
                raise SearchNotFinishedError(f"{self.name}: restart() before initialize() needs a start")
            start = self.start.position
        elif isinstance(start, Cell):
            start = start.position
        goal = board.goal()
        logger.info("%s restarting from %s", self.name, start)
        self.initialize(board.cell_at(start), goal)

    def is_finished(self) -> bool:
        return self.state is SearchState.FINISHED

    def is_unreachable(self) -> bool:
        return self.state is SearchState.UNREACHABLE

    # -------------------- stepping --------------------

    def advance(self, board: Board) -> StepResult:
        if self.state is SearchState.UNINITIALIZED:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.state is SearchState.FINISHED:
            return StepResult(status="done", path=list(self.selected),
                              metrics=self._metrics(path_len=len(self.path_cells)))

        if self.state is SearchState.UNREACHABLE:
            return StepResult(status="no_path", metrics=self._metrics())

        result = self._step(board)
        self.searched.update(result.closed)
        if self.state is SearchState.FINISHED:
            return self._complete(result)
        result.metrics = self._metrics()
        return result

    def _finish(self) -> None:
        self.state = SearchState.FINISHED

    def _give_up(self) -> StepResult:
        self.state = SearchState.UNREACHABLE
        logger.warning("%s: frontier exhausted, %s is unreachable from %s",
                       self.name, self.goal.position, self.start.position)
        return StepResult(status="no_path", metrics=self._metrics())

    def _complete(self, result: StepResult) -> StepResult:
        self.elapsed = time.perf_counter() - self.started_at
        path = self._trace_path()
        self.path_cells = path
        self.path_stack = list(reversed(path))
        self.selected = [self.start.position] + [c.position for c in path]
        logger.info("%s: time taken to solve the algorithm: %s - path length: %d",
                    self.name, format_elapsed(self.elapsed), len(path))
        result.status = "done"
        result.path = list(self.selected)
        result.metrics = self._metrics(path_len=len(path))
        return result

    # -------------------- path --------------------

    def reconstruct_path(self) -> List[Cell]:
        if self.state is not SearchState.FINISHED:
            raise SearchNotFinishedError(f"{self.name}: search is {self.state.value}, not finished")
        return self._trace_path()

    def _trace_path(self) -> List[Cell]:
        path: List[Cell] = []
        node = self.goal
        while node != self.start:
            path.append(node)
            node = self.parent[node.id]
        path.reverse()
        return path

    def next_move(self) -> Direction:
        if not self.path_stack:
            return Direction.NONE
        current = self.path_stack.pop()
        direction = check_direction(self.last_cell, current)
        self.last_cell = current
        return direction

    # -------------------- per-algorithm hooks --------------------

    @abstractmethod
    def _reset_frontier(self) -> None:
        ...

    @abstractmethod
    def _step(self, board: Board) -> StepResult:
        """One expansion. Calls _finish() on reaching the goal, _give_up() when stuck."""

    @abstractmethod
    def _frontier_size(self) -> int:
        ...

    # -------------------- metrics --------------------

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": self._frontier_size() if self.start is not None else 0,
            "closed_count": len(self.searched),
            "path_len": path_len,
            "elapsed_ms": round(self.elapsed * 1000, 3),
        }
