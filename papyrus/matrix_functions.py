# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np

from .elimination import echelon_form
from .errors import DimensionMismatch, SingularMatrix
from .matrix import multiply_linear, transpose
from .utils import as_matrix, det_tol, require_square

logger = logging.getLogger(__name__)

# comatrix() costs n^2 determinant calls, warn past this order
COFACTOR_WARN_ORDER = 8


def det_by_echelon(A) -> float:
    """
    Calculate the determinant of n-by-n matrix A using echelon form

    The product of the reduced diagonal, with one sign flip per row swap.

    Examples
    --------
    >>> det_by_echelon([[0, 4, 5], [1, 2, 3], [6, 7, 8]])
    15.0
    """
    A = as_matrix(A)
    n = require_square(A, "The determinant")
    if n == 1:
        return float(A[0, 0])
    U, swaps = echelon_form(A, track_swaps=True)
    diag_prod = float(np.prod(np.diag(U)))
    return diag_prod * (-1) ** swaps


def minor_matrix(A, i: int, j: int) -> np.ndarray:
    """Sub-matrix of A with row i and column j deleted."""
    A = as_matrix(A)
    m, n = A.shape
    if m < 2 or n < 2:
        raise DimensionMismatch(f"A {m}x{n} matrix has no non-empty minors")
    if not (0 <= i < m and 0 <= j < n):
        raise IndexError(f"Entry ({i}, {j}) out of range for a {m}x{n} matrix")
    return A[np.arange(m) != i][:, np.arange(n) != j]


def minor(A, i: int, j: int) -> float:
    A = as_matrix(A)
    if require_square(A, "A minor") == 1:
        if not (i == 0 and j == 0):
            raise IndexError(f"Entry ({i}, {j}) out of range for a 1x1 matrix")
        # determinant of the empty matrix
        return 1.0
    return det_by_echelon(minor_matrix(A, i, j))


def cofactor(A, i: int, j: int) -> float:
    return ((-1) ** (i + j)) * minor(A, i, j)


def comatrix(A) -> np.ndarray:
    """
    Matrix of cofactors of a square matrix A.

    Each entry needs its own O(n^3) determinant, so the whole matrix is
    O(n^5).
    """
    A = as_matrix(A)
    n = require_square(A, "The comatrix")
    if n > COFACTOR_WARN_ORDER:
        logger.warning(f"comatrix(): cofactor expansion on a {n}x{n} matrix, O(n^5)")

    C = np.empty((n, n), dtype=float)
    for i in range(n):
        for j in range(n):
            C[i, j] = cofactor(A, i, j)
    return C


def adjoint(A) -> np.ndarray:
    """Adjugate (classical adjoint): the transposed comatrix."""
    return transpose(comatrix(A))


def inverse(A) -> np.ndarray:
    """
    Inverse of a square matrix from its adjugate, adj(A) / det(A).

    Raises
    ------
    SingularMatrix : if det(A) is zero up to det_tol(A).
    """
    A = as_matrix(A)
    require_square(A, "The inverse")
    d = det_by_echelon(A)
    tol = det_tol(A)
    logger.debug(f"inverse(): det = {d}, singular below {tol}")
    if abs(d) <= tol:
        raise SingularMatrix(f"Matrix is singular (det = {d}), no inverse exists")
    return multiply_linear(adjoint(A), 1 / d)
