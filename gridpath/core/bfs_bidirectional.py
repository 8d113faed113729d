# gridpath/core/bfs_bidirectional.py
#!/usr/bin/env python3
"""
Bidirectional BFS — one search grows from the start, another from the goal.

Each advance() dequeues one cell from each side. Contact happens when the
goal-side cell has already been reached from the start side (checked first)
or the start-side cell has already been reached from the goal side.

The two frontiers do not grow level by level in lockstep, so the contact cell
alone can be one hop off the shortest route. On contact every cell reached by
both sides is a candidate and the one with the smallest start depth + goal
depth becomes the meeting cell (the contact cell wins ties). At that moment
every shortest route already crosses a cell known to both sides.

The path is the start chain up to the meeting cell followed by the goal chain
down to the goal. self.parent holds the start-side parents; end_parents the
goal-side ones.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional

from gridpath.core.board import Board
from gridpath.core.pathfinding import Pathfinder
from gridpath.core.types import Cell, Coord, StepResult


@dataclass
class BidirectionalBFS(Pathfinder):
    name: str = "BFS (bidirectional)"

    start_queue: Deque[Cell] = field(default_factory=deque)
    end_queue: Deque[Cell] = field(default_factory=deque)
    end_parents: Dict[str, Cell] = field(default_factory=dict)
    start_depth: Dict[str, int] = field(default_factory=dict)
    end_depth: Dict[str, int] = field(default_factory=dict)
    meeting_cell: Optional[Cell] = None

    def _reset_frontier(self) -> None:
        self.start_queue = deque([self.start])
        self.end_queue = deque([self.goal])
        self.end_parents = {}
        self.start_depth = {self.start.id: 0}
        self.end_depth = {self.goal.id: 0}
        self.meeting_cell = None

    def _frontier_size(self) -> int:
        return len(self.start_queue) + len(self.end_queue)

    def _reached_from_start(self, cell: Cell) -> bool:
        return cell.id in self.start_depth

    def _reached_from_end(self, cell: Cell) -> bool:
        return cell.id in self.end_depth

    @staticmethod
    def _expand(board: Board, cell: Cell, queue: Deque[Cell],
                parents: Dict[str, Cell], depth: Dict[str, int]) -> List[Coord]:
        opened: List[Coord] = []
        for neighbor in board.neighbors(cell):
            if neighbor is None or neighbor.id in depth:
                continue
            parents[neighbor.id] = cell
            depth[neighbor.id] = depth[cell.id] + 1
            queue.append(neighbor)
            opened.append(neighbor.position)
        return opened

    def _best_meeting(self, contact: Cell, board: Board) -> Cell:
        best = contact
        best_len = self.start_depth[contact.id] + self.end_depth[contact.id]
        for cell_id, ds in self.start_depth.items():
            de = self.end_depth.get(cell_id)
            if de is not None and ds + de < best_len:
                col, row = cell_id.split(",")
                best, best_len = board.cell(int(col), int(row)), ds + de
        return best

    def _step(self, board: Board) -> StepResult:
        if not self.start_queue or not self.end_queue:
            return self._give_up()

        from_start = self.start_queue.popleft()
        from_end = self.end_queue.popleft()
        self.popped_count += 2

        closed = [from_start.position]
        if from_end != from_start:
            closed.append(from_end.position)

        contact: Optional[Cell] = None
        if self._reached_from_start(from_end):
            contact = from_end
        elif self._reached_from_end(from_start):
            contact = from_start

        if contact is not None:
            self.meeting_cell = self._best_meeting(contact, board)
            self._finish()
            return StepResult(status="running", closed=closed, current=self.meeting_cell.position)

        opened_now = self._expand(board, from_start, self.start_queue, self.parent, self.start_depth)
        opened_now += self._expand(board, from_end, self.end_queue, self.end_parents, self.end_depth)

        return StepResult(status="running", opened=opened_now, closed=closed,
                          current=from_start.position)

    def _trace_path(self) -> List[Cell]:
        towards_start: List[Cell] = []
        node = self.meeting_cell
        while node != self.start:
            towards_start.append(node)
            node = self.parent[node.id]
        towards_start.reverse()

        towards_goal: List[Cell] = []
        node = self.meeting_cell
        while node != self.goal:
            node = self.end_parents[node.id]
            towards_goal.append(node)

        return towards_start + towards_goal
