# gridpath/core/dijkstra.py
#!/usr/bin/env python3

from dataclasses import dataclass, field
from math import inf
from typing import Dict, List, Optional, Set, Tuple

from gridpath.core.board import Board
from gridpath.core.pathfinding import Pathfinder
from gridpath.core.types import Cell, Coord, StepResult


@dataclass
class Dijkstra(Pathfinder):
    name: str = "Dijkstra"

    visited: Set[Cell] = field(default_factory=set)
    distances: Dict[Cell, float] = field(default_factory=dict)   # insertion ordered

    def _reset_frontier(self) -> None:
        self.visited = set()
        self.distances = {self.start: 0.0}

    def _frontier_size(self) -> int:
        return len(self.distances) - len(self.visited)

    def _closest_unvisited(self) -> Optional[Tuple[Cell, float]]:
        # linear scan instead of a heap; first inserted wins ties
        best: Optional[Tuple[Cell, float]] = None
        best_d = inf
        for cell, d in self.distances.items():
            if d < best_d and cell not in self.visited:
                best, best_d = (cell, d), d
        return best

    def _step(self, board: Board) -> StepResult:
        closest = self._closest_unvisited()
        if closest is None:
            return self._give_up()
        u, d_u = closest

        self.visited.add(u)
        self.popped_count += 1

        # stop when the goal is popped, not when it is first reached
        if u == self.goal:
            self._finish()
            return StepResult(status="running", closed=[u.position], current=u.position)

        opened_now: List[Coord] = []
        for v in board.neighbors(u):
            if v is None:
                continue
            alt = d_u + 1
            if v in self.visited or self.distances.get(v, inf) <= alt:
                continue
            if v not in self.distances:
                opened_now.append(v.position)
            self.distances[v] = alt
            self.parent[v.id] = u

        return StepResult(status="running", opened=opened_now, closed=[u.position], current=u.position)
