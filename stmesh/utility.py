"""Small numeric helpers shared across the mesher."""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np

__all__ = [
    "factorial",
    "n_choose_k",
    "exp_n",
    "sgn",
    "newton_sqrt",
    "all_corners",
    "kernel",
    "vector_hash",
]


def factorial(n: int) -> int:
    """Return n! for a non-negative integer n."""
    return math.factorial(n)


def n_choose_k(n: int, k: int) -> int:
    """Return the number of ways to choose k elements out of n (0 if k > n)."""
    return math.comb(n, k)


def exp_n(x: int, n: int) -> int:
    """Return n raised to the non-negative integer power x."""
    if x < 0:
        raise ValueError("exponent must be non-negative")
    return n**x


def sgn(val) -> int:
    """Return -1, 0 or 1 according to the sign of val."""
    zero = type(val)(0)
    return int(zero < val) - int(val < zero)


def newton_sqrt(x: float) -> float:
    """Square root by Newton-Raphson iteration; NaN for negative or infinite input."""
    x = float(x)
    if not 0.0 <= x < math.inf:
        return math.nan
    curr, prev = x, 0.0
    before_prev = None
    while curr != prev:
        if curr == before_prev:
            # two-cycle between neighbouring floats: either value is converged
            break
        curr, prev, before_prev = (curr + x / curr) / 2, curr, prev
    return curr


def all_corners(box_min: Iterable[float], box_max: Iterable[float]) -> np.ndarray:
    """Return all 2**D corners of an axis-aligned box, one per row.

    Bit j of the row index selects the maximum along dimension j.
    """
    lo = np.asarray(box_min, dtype=float).ravel()
    hi = np.asarray(box_max, dtype=float).ravel()
    if lo.shape != hi.shape:
        raise ValueError("box_min and box_max must have the same dimension")
    dims = lo.size
    return np.array(
        [np.where([(index >> dim) & 1 for dim in range(dims)], hi, lo) for index in range(1 << dims)],
        dtype=float,
    ).reshape(1 << dims, dims)


def kernel(matrix) -> np.ndarray:
    """Return a D x (D - N) matrix whose columns are an orthonormal basis of the
    complement of the column space of a D x N matrix."""
    mat = np.asarray(matrix, dtype=float)
    if mat.ndim != 2:
        raise ValueError("matrix must be two-dimensional")
    rows, cols = mat.shape
    if cols > rows:
        raise ValueError("matrix must have at least as many rows as columns")
    u, _, _ = np.linalg.svd(mat, full_matrices=True)
    return u[:, cols:]


def vector_hash(vector) -> int:
    """Hash a vector by combining the hashes of its elements."""
    return hash(tuple(np.asarray(vector, dtype=float).ravel().tolist()))