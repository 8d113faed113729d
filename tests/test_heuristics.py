from math import sqrt

import pytest

from gridpath.core.heuristics import HeuristicType, diagonal, estimate, euclidean, manhattan


def test_manhattan():
    assert manhattan((0, 0), (3, 4)) == 7


def test_euclidean():
    assert euclidean((0, 0), (3, 4)) == 5


def test_chebyshev_is_the_larger_axis():
    assert diagonal((0, 0), (3, 5), HeuristicType.DIAGONAL_CHEBYSHEV) == 5


def test_octile():
    assert diagonal((0, 0), (3, 5), HeuristicType.DIAGONAL_OCTILE) == pytest.approx(2 + 3 * sqrt(2))


@pytest.mark.parametrize("kind", list(HeuristicType))
def test_estimate_never_exceeds_grid_steps(kind):
    # 4-connected unit grid: true distance is the Manhattan distance
    for b in [(0, 0), (1, 0), (4, 2), (7, 7)]:
        assert estimate(kind, (0, 0), b) <= manhattan((0, 0), b) + 1e-9


def test_estimate_is_zero_on_the_goal():
    for kind in HeuristicType:
        assert estimate(kind, (2, 3), (2, 3)) == 0


def test_unsupported_heuristic():
    with pytest.raises(NotImplementedError):
        estimate("zigzag", (0, 0), (1, 1))
