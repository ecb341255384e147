# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exception types raised by papyrus.

Each error also derives from the builtin exception a NumPy user would
expect, so ``except ValueError`` keeps working.
"""


class PapyrusError(Exception):
    """Base class for every error raised by this package."""


class DimensionMismatch(PapyrusError, ValueError):
    """Operand shapes or lengths are incompatible for the operation."""


class DivisionByZero(PapyrusError, ZeroDivisionError):
    """A zero divisor reached a pivot or normalisation step."""


class SingularMatrix(PapyrusError, ValueError):
    """The matrix has zero determinant and cannot be inverted."""


class InvalidArgument(PapyrusError, ValueError):
    """An argument is outside the domain of the operation."""
