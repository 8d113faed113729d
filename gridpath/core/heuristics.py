# gridpath/core/heuristics.py
#!/usr/bin/env python3
"""
Distance estimates h(n) for the A* family.

All four are admissible on a 4-connected grid with unit step cost.
"""

from enum import Enum
from math import sqrt
from typing import Tuple

Point = Tuple[float, float]


class HeuristicType(Enum):
    MANHATTAN = "manhattan"
    EUCLIDEAN = "euclidean"
    DIAGONAL_CHEBYSHEV = "chebyshev"
    DIAGONAL_OCTILE = "octile"


def manhattan(a: Point, b: Point) -> float:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def euclidean(a: Point, b: Point) -> float:
    return sqrt((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2)


def diagonal(a: Point, b: Point, kind: HeuristicType) -> float:
    """Chebyshev (D2 = 1) or Octile (D2 = sqrt 2) distance with D = 1."""
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    d = 1
    d2 = sqrt(2) if kind is HeuristicType.DIAGONAL_OCTILE else 1
    return d * (dx + dy) + (d2 - 2 * d) * min(dx, dy)


def estimate(kind: HeuristicType, a: Point, b: Point) -> float:
    if kind is HeuristicType.MANHATTAN:
        return manhattan(a, b)
    if kind is HeuristicType.EUCLIDEAN:
        return euclidean(a, b)
    if kind in (HeuristicType.DIAGONAL_CHEBYSHEV, HeuristicType.DIAGONAL_OCTILE):
        return diagonal(a, b, kind)
    raise NotImplementedError(f"unsupported heuristic: {kind!r}")
