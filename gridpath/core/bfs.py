# gridpath/core/bfs.py
#!/usr/bin/env python3
"""Breadth-first search: level by level, first discovery wins the parent slot."""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List

from gridpath.core.board import Board
from gridpath.core.pathfinding import Pathfinder
from gridpath.core.types import Cell, Coord, StepResult


@dataclass
class BreadthFirstSearch(Pathfinder):
    name: str = "BFS"

    queue: Deque[Cell] = field(default_factory=deque)

    def _reset_frontier(self) -> None:
        self.queue = deque([self.start])

    def _frontier_size(self) -> int:
        return len(self.queue)

    def _seen(self, cell: Cell) -> bool:
        return cell == self.start or cell.id in self.parent

    def _step(self, board: Board) -> StepResult:
        if not self.queue:
            return self._give_up()

        current = self.queue.popleft()
        self.popped_count += 1

        if current == self.goal:
            self._finish()
            return StepResult(status="running", closed=[current.position], current=current.position)

        opened_now: List[Coord] = []
        for neighbor in board.neighbors(current):
            if neighbor is None or self._seen(neighbor):
                continue
            self.parent[neighbor.id] = current
            self.queue.append(neighbor)
            opened_now.append(neighbor.position)

        return StepResult(status="running", opened=opened_now,
                          closed=[current.position], current=current.position)
