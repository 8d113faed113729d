# gridpath/core/algorithms.py
#!/usr/bin/env python3
"""Algorithm selection: the variant is picked once, when the pathfinder is built."""

from enum import Enum
from typing import Any, Dict, Type, Union

from gridpath.core.astar import AStar
from gridpath.core.astar_dijkstra import AStarDijkstra
from gridpath.core.bfs import BreadthFirstSearch
from gridpath.core.bfs_bidirectional import BidirectionalBFS
from gridpath.core.dfs import DepthFirstSearch
from gridpath.core.dijkstra import Dijkstra
from gridpath.core.heuristics import HeuristicType
from gridpath.core.pathfinding import Pathfinder


class Algorithm(Enum):
    DFS = "dfs"
    BFS = "bfs"
    BIDIRECTIONAL_BFS = "bfs_bidirectional"
    DIJKSTRA = "dijkstra"
    ASTAR = "astar"
    ASTAR_DIJKSTRA = "astar_dijkstra"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Algorithm.DFS: "DFS",
    Algorithm.BFS: "BFS",
    Algorithm.BIDIRECTIONAL_BFS: "BFS (bidirectional)",
    Algorithm.DIJKSTRA: "Dijkstra",
    Algorithm.ASTAR: "A*",
    Algorithm.ASTAR_DIJKSTRA: "A*/Dijkstra",
}

ALGORITHMS: Dict[Algorithm, Type[Pathfinder]] = {
    Algorithm.DFS: DepthFirstSearch,
    Algorithm.BFS: BreadthFirstSearch,
    Algorithm.BIDIRECTIONAL_BFS: BidirectionalBFS,
    Algorithm.DIJKSTRA: Dijkstra,
    Algorithm.ASTAR: AStar,
    Algorithm.ASTAR_DIJKSTRA: AStarDijkstra,
}

HEURISTIC_ALGORITHMS = (Algorithm.ASTAR, Algorithm.ASTAR_DIJKSTRA)


def parse_algorithm(value: Union[Algorithm, str]) -> Algorithm:
    if isinstance(value, Algorithm):
        return value
    try:
        return Algorithm(str(value).lower())
    except ValueError:
        available = ", ".join(a.value for a in Algorithm)
        raise ValueError(f"Unknown algorithm: {value}. Available: {available}") from None


def create_pathfinder(algorithm: Union[Algorithm, str],
                      heuristic: Union[HeuristicType, str, None] = None,
                      **kwargs: Any) -> Pathfinder:
    """
    Build a pathfinder for `algorithm`.

    `heuristic` only applies to the A* family and is ignored otherwise.
    """
    algo = parse_algorithm(algorithm)
    cls = ALGORITHMS[algo]
    if heuristic is not None and algo in HEURISTIC_ALGORITHMS:
        kwargs["distance"] = heuristic if isinstance(heuristic, HeuristicType) \
            else HeuristicType(str(heuristic).lower())
    return cls(**kwargs)
