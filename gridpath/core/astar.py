# gridpath/core/astar.py
#!/usr/bin/env python3
"""
A* — one expansion per advance() for animation.

f(n) = g(n) + h(n):
- g(n): steps taken from the start (every step costs 1).
- h(n): heuristic estimate to the goal, selected with `distance`
  (Manhattan, Euclidean, Chebyshev or Octile).

The open set is a dict used as an insertion-ordered set; the lowest f is
found by scanning it, and on equal f the node that entered first wins.
g and f are keyed by cell id.
"""

from dataclasses import dataclass, field
from math import inf
from typing import Dict, List, Optional, Set

from gridpath.core.board import Board
from gridpath.core.heuristics import HeuristicType, estimate
from gridpath.core.pathfinding import Pathfinder
from gridpath.core.types import Cell, Coord, StepResult


@dataclass
class AStar(Pathfinder):
    name: str = "A*"
    distance: HeuristicType = HeuristicType.MANHATTAN

    # Internal state
    open_set: Dict[Cell, None] = field(default_factory=dict)
    closed_set: Set[Cell] = field(default_factory=set)
    g: Dict[str, float] = field(default_factory=dict)
    f: Dict[str, float] = field(default_factory=dict)

    # -------------------- helpers --------------------

    def _h(self, cell: Cell) -> float:
        return estimate(self.distance, cell.position, self.goal.position)

    def _update_scores(self, cell: Cell, g_score: float) -> None:
        self.g[cell.id] = g_score
        self.f[cell.id] = g_score + self._h(cell)

    def _lowest_f(self) -> Optional[Cell]:
        best: Optional[Cell] = None
        best_f = inf
        for cell in self.open_set:
            f_score = self.f[cell.id]
            if f_score < best_f:
                best, best_f = cell, f_score
        return best

    # -------------------- lifecycle --------------------

    def _reset_frontier(self) -> None:
        self.open_set = {self.start: None}
        self.closed_set = set()
        self.g = {}
        self.f = {}
        self._update_scores(self.start, 0.0)

    def _frontier_size(self) -> int:
        return len(self.open_set)

    # -------------------- main stepping logic --------------------

    def _step(self, board: Board) -> StepResult:
        """
        Run ONE A* expansion step:
          - Pick the lowest-f node of the open set.
          - If goal, finish.
          - Else close it and relax its open neighbours with g + 1.
        """
        if not self.open_set:
            return self._give_up()

        u = self._lowest_f()
        self.popped_count += 1

        if u == self.goal:
            self._finish()
            return StepResult(status="running", closed=[u.position], current=u.position)

        del self.open_set[u]
        self.closed_set.add(u)

        opened_now: List[Coord] = []
        for v in board.neighbors(u):
            if v is None or v in self.closed_set:
                continue
            alt = self.g[u.id] + 1
            if v not in self.open_set:
                self._update_scores(v, alt)
                self.parent[v.id] = u
                self.open_set[v] = None
                opened_now.append(v.position)
            elif alt < self.g[v.id]:
                self._update_scores(v, alt)
                self.parent[v.id] = u

        return StepResult(status="running", opened=opened_now, closed=[u.position], current=u.position)
