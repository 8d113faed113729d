# gridpath/core/astar_dijkstra.py
#!/usr/bin/env python3
"""
A*/Dijkstra hybrid — Dijkstra's bookkeeping ordered by A*'s f = g + h.

There is no explicit open set: every step scans all known, not yet closed
nodes of the g map for the lowest f. Same results as AStar, slower on big
boards. g and f are keyed by Cell.
"""

import logging
from dataclasses import dataclass, field
from math import inf
from typing import Dict, List, Optional, Set, Tuple

from gridpath.core.board import Board
from gridpath.core.heuristics import HeuristicType, estimate
from gridpath.core.pathfinding import Pathfinder
from gridpath.core.types import Cell, Coord, StepResult

logger = logging.getLogger(__name__)


@dataclass
class AStarDijkstra(Pathfinder):
    name: str = "A*/Dijkstra"
    distance: HeuristicType = HeuristicType.MANHATTAN

    g: Dict[Cell, float] = field(default_factory=dict)
    f: Dict[Cell, float] = field(default_factory=dict)
    closed_set: Set[Cell] = field(default_factory=set)

    def _h(self, cell: Cell) -> float:
        return estimate(self.distance, cell.position, self.goal.position)

    def _reset_frontier(self) -> None:
        self.closed_set = set()
        self.g = {self.start: 0.0}
        self.f = {self.start: self._h(self.start)}

    def _frontier_size(self) -> int:
        return len(self.g) - len(self.closed_set)

    def _lowest_f(self) -> Optional[Tuple[Cell, float]]:
        best: Optional[Tuple[Cell, float]] = None
        best_f = inf
        for cell, g_score in self.g.items():
            if cell in self.closed_set:
                continue
            f_score = self.f[cell]
            if f_score < best_f:
                best, best_f = (cell, g_score), f_score
            logger.debug("lowest f scan: %s f=%s best=%s", cell.position, f_score, best_f)
        return best

    def _step(self, board: Board) -> StepResult:
        lowest = self._lowest_f()
        if lowest is None:
            return self._give_up()
        u, g_u = lowest

        self.closed_set.add(u)
        self.popped_count += 1

        if u == self.goal:
            self._finish()
            return StepResult(status="running", closed=[u.position], current=u.position)

        opened_now: List[Coord] = []
        for v in board.neighbors(u):
            if v is None:
                continue
            alt = g_u + 1
            if v in self.closed_set or self.g.get(v, inf) <= alt:
                continue
            if v not in self.g:
                opened_now.append(v.position)
            self.g[v] = alt
            self.f[v] = alt + self._h(v)
            self.parent[v.id] = u

        return StepResult(status="running", opened=opened_now, closed=[u.position], current=u.position)
