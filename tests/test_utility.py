import math
import sys

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from stmesh.utility import (
    all_corners,
    exp_n,
    factorial,
    kernel,
    n_choose_k,
    newton_sqrt,
    sgn,
    vector_hash,
)

EPS = sys.float_info.epsilon


@pytest.mark.parametrize(
    ("n", "expected"),
    [(0, 1), (1, 1), (2, 2), (3, 6), (10, 3628800)],
)
def test_factorial(n, expected):
    assert factorial(n) == expected


def test_sqrt_small_values():
    assert abs(newton_sqrt(EPS * EPS) - EPS) < EPS
    assert abs(newton_sqrt(EPS) * newton_sqrt(EPS) - EPS) < EPS


@pytest.mark.parametrize(("x", "expected"), [(0.0, 0.0), (1.0, 1.0), (4.0, 2.0), (16.0, 4.0)])
def test_sqrt_exact(x, expected):
    assert newton_sqrt(x) == expected


@pytest.mark.parametrize(("x", "tolerance"), [(2.0, 3.0), (3.0, 3.0), (5.0, 5.0)])
def test_sqrt_squares_back(x, tolerance):
    root = newton_sqrt(x)
    assert abs(root * root - x) < tolerance * EPS


@pytest.mark.parametrize("x", [-1.0, float("inf")])
def test_sqrt_invalid_is_nan(x):
    result = newton_sqrt(x)
    assert math.isnan(result) is True
    assert str(float(result)) == "nan"


@pytest.mark.parametrize(
    ("n", "k", "expected"),
    [
        (0, 0, 1),
        (1, 0, 1),
        (1, 1, 1),
        (2, 0, 1),
        (2, 1, 2),
        (2, 2, 1),
        (4, 0, 1),
        (4, 1, 4),
        (4, 2, 6),
        (4, 3, 4),
        (4, 4, 1),
        (6, 0, 1),
        (6, 1, 6),
        (6, 2, 15),
        (6, 3, 20),
        (6, 4, 15),
        (6, 5, 6),
        (6, 6, 1),
        (10, 0, 1),
        (10, 1, 10),
        (10, 2, 45),
        (10, 5, 252),
        (10, 8, 45),
        (10, 9, 10),
        (10, 10, 1),
    ],
)
def test_n_choose_k(n, k, expected):
    assert n_choose_k(n, k) == expected


def test_n_choose_k_larger_k_is_zero():
    assert n_choose_k(3, 5) == 0


def test_exp_n():
    assert exp_n(0, 7) == 1
    assert exp_n(4, 2) == 16
    with pytest.raises(ValueError):
        exp_n(-1, 2)


@pytest.mark.parametrize(("val", "expected"), [(-3.5, -1), (0.0, 0), (2, 1), (-7, -1)])
def test_sgn(val, expected):
    assert sgn(val) == expected


def test_all_corners_covers_box():
    lo = [0.0, -1.0, 2.0, 3.0]
    hi = [1.0, 1.0, 5.0, 4.0]
    corners = all_corners(lo, hi)
    assert corners.shape == (16, 4)
    assert len({tuple(c) for c in corners}) == 16
    assert np.array_equal(corners[0], lo)
    assert np.array_equal(corners[-1], hi)
    for corner in corners:
        assert all(c in (a, b) for c, a, b in zip(corner, lo, hi))


def test_all_corners_mismatch():
    with pytest.raises(ValueError):
        all_corners([0.0, 0.0], [1.0])


@given(st.integers(min_value=0, max_value=2**31))
def test_kernel_orthonormal_complement(seed):
    rng = np.random.default_rng(seed)
    mat = rng.normal(size=(4, 3))
    ker = kernel(mat)
    assert ker.shape == (4, 1)
    assert np.allclose(mat.T @ ker, 0.0, atol=1e-9)
    assert np.allclose(ker.T @ ker, np.eye(1))


def test_kernel_rejects_wide_matrix():
    with pytest.raises(ValueError):
        kernel(np.zeros((2, 3)))


def test_vector_hash_equal_vectors():
    assert vector_hash(np.array([1.0, 2.0, 3.0])) == vector_hash([1.0, 2.0, 3.0])