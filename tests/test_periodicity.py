"""
Tests for toral map bijectivity and periods.
"""

import numpy as np
import pytest

from TMAP.dynamics.toral_map import CAT_MATRIX, Matrix, apply_toral_map
from TMAP.tools.periodicity import is_bijective, toral_period


@pytest.mark.parametrize("N,period", [(2, 3), (3, 4), (4, 3), (5, 10), (6, 12), (7, 8), (10, 30)])
def test_cat_map_periods(N, period):
    assert toral_period(N, N, CAT_MATRIX) == period


def test_identity_period():
    assert toral_period(7, 3, Matrix(1, 0, 0, 1)) == 1


def test_period_returns_grid():
    N = 6
    grid = np.arange(N*N).reshape((N, N))
    period = toral_period(N, N, CAT_MATRIX)
    assert np.array_equal(apply_toral_map(grid, CAT_MATRIX, period), grid)
    for t in range(1, period):
        assert not np.array_equal(apply_toral_map(grid, CAT_MATRIX, t), grid)


def test_is_bijective():
    assert is_bijective(6, 6, CAT_MATRIX)
    assert is_bijective(5, 5, Matrix(2, 0, 0, 1))
    assert not is_bijective(4, 4, Matrix(2, 0, 0, 1))
    assert not is_bijective(4, 3, Matrix(1, 0, 0, 0))


def test_non_bijective_period():
    assert toral_period(4, 3, Matrix(1, 0, 0, 0)) is None
