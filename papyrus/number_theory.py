# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numbers
from typing import Tuple

from .errors import InvalidArgument


def extended_euclid(m: int, n: int) -> Tuple[int, int, int]:
    """
    Extended Euclidean algorithm.

    Returns (g, a, b) with g = gcd(m, n). The larger argument is used as
    the first dividend, and the coefficients belong to that order:
    g == a * max(m, n) + b * min(m, n).

    Both arguments must be non-negative integers; bools are rejected.

    Examples
    --------
    >>> extended_euclid(1769, 551)
    (29, 5, -16)
    """
    for x in (m, n):
        if isinstance(x, bool) or not isinstance(x, numbers.Integral):
            raise InvalidArgument(f"Expected integers, got {x!r}")
        if x < 0:
            raise InvalidArgument("Both numbers must be non-negative")

    dividend, divisor = (int(n), int(m)) if n > m else (int(m), int(n))
    if divisor == 0:
        return dividend, 1, 0

    # coefficients expressing the divisor (a, b) and dividend (a_, b_)
    a, b = 0, 1
    a_, b_ = 1, 0
    while True:
        q, r = divmod(dividend, divisor)
        if r == 0:
            return divisor, a, b
        a, b, a_, b_ = a_ - q * a, b_ - q * b, a, b
        dividend, divisor = divisor, r


def gcd(m: int, n: int) -> int:
    return extended_euclid(m, n)[0]
