# gridpath/core/dfs.py
#!/usr/bin/env python3
"""
Depth-first search — explores one branch as far as it goes before backtracking.

Visited is checked when a cell is popped, not when it is pushed, so the stack
may hold stale duplicates. Neighbours are pushed Up, Left, Down, Right, which
makes Right the first one explored. Paths are valid but not shortest.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Set

from gridpath.core.board import Board
from gridpath.core.pathfinding import Pathfinder
from gridpath.core.types import Cell, Coord, StepResult


@dataclass
class DepthFirstSearch(Pathfinder):
    name: str = "DFS"

    stack: List[Cell] = field(default_factory=list)
    visited: Set[Cell] = field(default_factory=set)

    def _reset_frontier(self) -> None:
        self.stack = [self.start]
        self.visited = set()

    def _frontier_size(self) -> int:
        return len(self.stack)

    def _pop_unvisited(self) -> Optional[Cell]:
        while self.stack:
            cell = self.stack.pop()
            if cell not in self.visited:
                return cell
        return None

    def _step(self, board: Board) -> StepResult:
        current = self._pop_unvisited()
        if current is None:
            return self._give_up()

        self.visited.add(current)
        self.popped_count += 1

        if current == self.goal:
            self._finish()
            return StepResult(status="running", closed=[current.position], current=current.position)

        opened_now: List[Coord] = []
        for neighbor in board.neighbors(current):
            if neighbor is None or neighbor in self.visited:
                continue
            # last pusher wins the parent slot
            self.parent[neighbor.id] = current
            self.stack.append(neighbor)
            opened_now.append(neighbor.position)

        return StepResult(status="running", opened=opened_now,
                          closed=[current.position], current=current.position)
