# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

from .errors import DimensionMismatch, DivisionByZero

EPS: float = 1e-12


def det_tol(A: np.ndarray) -> float:
    """
    Tolerance under which a determinant of A counts as zero.

    |det A| is bounded by the product of the row norms (Hadamard), so
    comparing against EPS times that bound does not depend on the scale
    of the entries.
    """
    A = np.asarray(A, dtype=float)
    return EPS * float(np.prod(np.linalg.norm(A, axis=1)))


def as_matrix(A) -> np.ndarray:
    """
    Copy A into a new 2-D ndarray, checking that it is rectangular
    with at least one row and one column.
    """
    try:
        M = np.array(A)
    except ValueError as e:  # ragged nested sequences
        raise DimensionMismatch(f"Matrix rows must all have the same length: {e}") from e
    if M.ndim != 2:
        raise DimensionMismatch(f"Expected a 2-D matrix, got {M.ndim} dimension(s)")
    if M.shape[0] == 0 or M.shape[1] == 0:
        raise DimensionMismatch("A matrix needs at least one row and one column")
    return M


def as_vector(v) -> np.ndarray:
    """Copy v into a new non-empty 1-D ndarray."""
    try:
        V = np.array(v)
    except ValueError as e:
        raise DimensionMismatch(f"Not a flat sequence of numbers: {e}") from e
    if V.ndim != 1:
        raise DimensionMismatch(f"Expected a 1-D vector, got {V.ndim} dimension(s)")
    if V.shape[0] == 0:
        raise DimensionMismatch("A vector needs at least one element")
    return V


def require_square(A: np.ndarray, what: str) -> int:
    m, n = A.shape
    if m != n:
        raise DimensionMismatch(f"{what} is undefined for non-square matrices ({m}x{n})")
    return n


def inverse_multiplier(pivot: float, value: float) -> float:
    """
    Multiplier that eliminates `value` against `pivot`: -value / pivot.

    Raises DivisionByZero rather than returning inf or nan.
    """
    if pivot == 0:
        raise DivisionByZero("Cannot divide by a zero pivot")
    return -value / pivot


def random_nonsingular(n, low=-100, high=100, seed=None) -> np.ndarray:
    """
    Build a random n-by-n matrix that is strictly diagonally dominant,
    hence nonsingular and safe for elimination without pivot search.

    Returns
    -------
    Matrix with float64 dtype
    """
    rng = np.random.default_rng(seed)
    A = rng.uniform(low, high, size=(n, n))
    # push every diagonal entry past the sum of its row
    off_diag = np.abs(A).sum(axis=1) - np.abs(np.diag(A))
    signs = np.where(np.diag(A) < 0, -1.0, 1.0)
    margin = rng.uniform(1.0, max(2.0, high), size=n)
    A[np.diag_indices(n)] = signs * (off_diag + margin)
    return np.asarray(A)
