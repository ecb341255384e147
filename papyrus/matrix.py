# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Matrix arithmetic primitives.

Every function accepts nested sequences or ndarrays and returns a new
ndarray; arguments are never written to.
"""

import numpy as np

from .errors import DimensionMismatch, InvalidArgument
from .utils import as_matrix, as_vector


def add_row(row_a, row_b) -> np.ndarray:
    """Element-wise sum of two rows of equal length."""
    a = as_vector(row_a)
    b = as_vector(row_b)
    if a.shape != b.shape:
        raise DimensionMismatch(
            f"Rows must have the same length, got {a.shape[0]} and {b.shape[0]}"
        )
    return a + b


def add(A, B) -> np.ndarray:
    """
    Element-wise sum of two matrices.

    Examples
    --------
    >>> add([[1, 2], [3, 4]], [[5, 6], [7, 8]])
    array([[ 6,  8],
           [10, 12]])
    """
    A = as_matrix(A)
    B = as_matrix(B)
    if A.shape[0] != B.shape[0]:
        raise DimensionMismatch(
            f"Matrices must have the same dimensions, got {A.shape} and {B.shape}"
        )
    return np.array([add_row(a, b) for a, b in zip(A, B)])


def multiply_row(row, scalar) -> np.ndarray:
    """Multiply every entry of one row by a scalar."""
    return as_vector(row) * scalar


def multiply_linear(A, scalar) -> np.ndarray:
    """Multiply every entry of A by a scalar."""
    return as_matrix(A) * scalar


def transpose(A) -> np.ndarray:
    """Column i of A becomes row i of the result."""
    A = as_matrix(A)
    return np.array([A[:, i] for i in range(A.shape[1])])


def multiply_row_col(row, col):
    """Dot product of a row and a column of equal length."""
    r = as_vector(row)
    c = as_vector(col)
    if r.shape != c.shape:
        raise DimensionMismatch(
            f"Row and column lengths must be the same, got {r.shape[0]} and {c.shape[0]}"
        )
    return r @ c


def multiply(A, B) -> np.ndarray:
    """
    Matrix product A B, built one row-column dot product at a time.

    Examples
    --------
    >>> multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]])
    array([[19, 22],
           [43, 50]])
    """
    A = as_matrix(A)
    B = as_matrix(B)
    if A.shape[1] != B.shape[0]:
        raise DimensionMismatch(
            f"Cannot multiply a {A.shape[0]}x{A.shape[1]} matrix "
            f"by a {B.shape[0]}x{B.shape[1]} matrix"
        )
    cols = transpose(B)
    return np.array([[multiply_row_col(row, col) for col in cols] for row in A])


def swap_rows(A, i: int, j: int) -> np.ndarray:
    """Return A with rows i and j exchanged."""
    A = as_matrix(A)
    m = A.shape[0]
    for k in (i, j):
        if not -m <= k < m:
            raise IndexError(f"Row index {k} out of range for {m} rows")
    A[[i, j]] = A[[j, i]]
    return A


def replace_row(A, i: int, row) -> np.ndarray:
    """Return A with row i replaced by `row`."""
    A = as_matrix(A)
    r = as_vector(row)
    if r.shape[0] != A.shape[1]:
        raise DimensionMismatch(
            f"Replacement row has length {r.shape[0]}, matrix has {A.shape[1]} columns"
        )
    # widen the dtype when an integer matrix receives float entries
    A = A.astype(np.result_type(A, r), copy=False)
    A[i] = r
    return A


def identity(n: int) -> np.ndarray:
    """The n-by-n identity matrix."""
    if n < 1:
        raise InvalidArgument(f"Identity order must be at least 1, got {n}")
    return np.eye(n)
