# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np
import pytest

from papyrus.elimination import echelon_form
from papyrus.errors import DimensionMismatch, DivisionByZero
from papyrus.utils import inverse_multiplier, random_nonsingular

TEST_ITERATIONS = 50
logger = logging.getLogger(__name__)


def test_echelon_form_2_by_2():
    np.testing.assert_allclose(echelon_form([[1, 2], [3, 4]]), [[1, 2], [0, -2]])


def test_echelon_form_with_zero_pivot():
    U = echelon_form([[0, 4, 5], [1, 2, 3], [6, 7, 8]])
    np.testing.assert_allclose(U, [[1, 2, 3], [0, 4, 5], [0, 0, -3.75]])


def test_echelon_form_tracking_swap():
    U, swaps = echelon_form([[0, 4, 5], [1, 2, 3], [6, 7, 8]], track_swaps=True)
    np.testing.assert_allclose(U, [[1, 2, 3], [0, 4, 5], [0, 0, -3.75]])
    # 1 swap was made
    assert swaps == 1


def test_echelon_form_without_swaps():
    U, swaps = echelon_form([[2, 1], [4, 5]], track_swaps=True)
    np.testing.assert_allclose(U, [[2, 1], [0, 3]])
    assert swaps == 0


def test_echelon_form_single_swap_policy():
    # Two leading zeros in column 0: the row is swapped down and straight
    # back again, column 0 is never cleared.
    A = [[0, 1, 2], [0, 3, 4], [5, 6, 7]]
    U, swaps = echelon_form(A, track_swaps=True)
    assert swaps == 2
    np.testing.assert_allclose(U, [[0, 1, 2], [0, 3, 4], [5, 0, -1]])


def test_echelon_form_single_row():
    U, swaps = echelon_form([[3, 1, 4]], track_swaps=True)
    np.testing.assert_allclose(U, [[3, 1, 4]])
    assert swaps == 0


def test_echelon_form_rectangular():
    U = echelon_form([[1, 2, 3, 4], [2, 4, 7, 9]])
    np.testing.assert_allclose(U, [[1, 2, 3, 4], [0, 0, 1, 1]])
    with pytest.raises(DimensionMismatch):
        echelon_form([[1], [2], [3]])


def test_echelon_form_is_upper_triangular():
    for i in range(TEST_ITERATIONS):
        n = 2 + i % 7
        A = random_nonsingular(n, seed=i)
        logger.debug(f"\nRunning Test\n{A}\n")
        U = echelon_form(A)
        assert np.allclose(np.tril(U, k=-1), 0, atol=1e-9)


def test_echelon_form_does_not_mutate_input():
    A = np.array([[0.0, 4, 5], [1, 2, 3], [6, 7, 8]])
    before = A.copy()
    echelon_form(A, track_swaps=True)
    np.testing.assert_array_equal(A, before)


def test_inverse_multiplier():
    assert inverse_multiplier(2, 6) == -3
    assert inverse_multiplier(4, -5) == 1.25
    with pytest.raises(DivisionByZero):
        inverse_multiplier(0, 1)
    with pytest.raises(ZeroDivisionError):
        inverse_multiplier(0.0, 3.0)


def test_echelon_form_logs_zero_pivot_swaps(caplog):
    with caplog.at_level(logging.DEBUG, logger="papyrus.elimination"):
        echelon_form([[0, 4, 5], [1, 2, 3], [6, 7, 8]])
    swaps = [r for r in caplog.records if "zero pivot" in r.getMessage()]
    assert len(swaps) == 1
    assert swaps[0].levelno == logging.DEBUG
    assert "swapped rows 0 and 1" in swaps[0].getMessage()
