# gridpath/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Optional, Dict, Any

Coord = Tuple[int, int]  # (col, row)


class CellKind(Enum):
    FLOOR = "floor"
    WALL = "wall"
    GOAL = "goal"


@dataclass(unsafe_hash=True)
class Cell:
    """One board square. Equality and hashing only look at (column, row)."""
    column: int
    row: int
    kind: CellKind = field(default=CellKind.FLOOR, compare=False)

    @property
    def id(self) -> str:
        return f"{self.column},{self.row}"

    @property
    def position(self) -> Coord:
        return (self.column, self.row)

    @property
    def is_wall(self) -> bool:
        return self.kind is CellKind.WALL

    def __repr__(self) -> str:
        return f"Cell({self.column}, {self.row}, {self.kind.name})"


@dataclass(frozen=True)
class WallRange:
    min: int            # inclusive
    max: int            # exclusive


class Direction(Enum):
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"
    NONE = "none"

    @property
    def delta(self) -> Coord:
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (0, 1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.NONE: (0, 0),
}


class SearchState(Enum):
    UNINITIALIZED = "uninitialized"
    RUNNING = "running"
    FINISHED = "finished"
    UNREACHABLE = "unreachable"


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    opened: List[Coord] = field(default_factory=list)
    closed: List[Coord] = field(default_factory=list)
    current: Optional[Coord] = None
    path: Optional[List[Coord]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
