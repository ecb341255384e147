# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import Tuple, Union

import numpy as np

from .errors import DimensionMismatch
from .matrix import add_row, multiply_row, replace_row, swap_rows
from .utils import as_matrix, inverse_multiplier

logger = logging.getLogger(__name__)


def echelon_form(
    A,
    track_swaps: bool = False,
) -> Union[np.ndarray, Tuple[np.ndarray, int]]:
    """
    Row-echelon reduction of A by forward elimination, no pivot search.

    A zero pivot is handled by swapping the pivot row with the row right
    below it, once per step. The new pivot is not checked again before
    the next step, so a column with zeros in several leading rows does
    not end up triangular.

    Parameters
    ----------
    A : (m, n) array_like
        Input matrix; it is copied, never modified.
    track_swaps : bool
        Also return the number of row swaps performed.

    Returns
    -------
    U     : np.ndarray          (m, n)
        Reduced matrix, float dtype.
    swaps : int
        Only when track_swaps is True. Each swap flips the sign of
        the determinant.

    Examples
    --------
    >>> echelon_form([[0, 4, 5], [1, 2, 3], [6, 7, 8]], track_swaps=True)
    (array([[ 1.  ,  2.  ,  3.  ],
           [ 0.  ,  4.  ,  5.  ],
           [ 0.  ,  0.  , -3.75]]), 1)
    """
    U = as_matrix(A).astype(float)
    n = U.shape[0]
    if n - 1 > U.shape[1]:
        raise DimensionMismatch(
            f"Cannot reduce {n} rows with only {U.shape[1]} pivot column(s)"
        )
    swaps = 0

    for i in range(n - 1):
        for j in range(i, n - 1):
            pivot = U[i, i]
            if pivot == 0:
                U = swap_rows(U, i, i + 1)
                swaps += 1
                logger.debug(f"zero pivot at column {i}, swapped rows {i} and {i + 1}")
                continue
            # eliminate column i of row j + 1 against the pivot row
            multiplier = inverse_multiplier(pivot, U[j + 1, i])
            U = replace_row(U, j + 1, add_row(U[j + 1], multiply_row(U[i], multiplier)))

    if track_swaps:
        return U, swaps
    return U
