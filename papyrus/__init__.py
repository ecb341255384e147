# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
papyrus
=======

A small linear-algebra and number-theory toolkit: matrix arithmetic,
echelon reduction, determinants, cofactor-based inverses, vector
arithmetic and the extended Euclidean algorithm.

Public API
~~~~~~~~~~
- Matrix arithmetic
    - `add`, `add_row`, `multiply`, `multiply_linear`, `multiply_row`,
      `multiply_row_col`, `transpose`, `swap_rows`, `replace_row`,
      `identity`
- Elimination
    - `echelon_form`, `inverse_multiplier`
- Matrix functions
    - `det_by_echelon`, `minor_matrix`, `minor`, `cofactor`,
      `comatrix`, `adjoint`, `inverse`
- Vectors (module `papyrus.vectors`)
    - `add`, `multiply`, `dot_product`, `cross_product`, `magnitude`,
      `euclidean_distance`, `cosine_similarity`, `angle`
- Number theory
    - `extended_euclid`, `gcd`

Vector functions share names with the matrix ones, so they are only
reachable through their sub-module.

Example
-------
>>> import numpy as np, papyrus as pp
>>> A = pp.utils.random_nonsingular(4, seed=0)
>>> np.allclose(pp.multiply(pp.inverse(A), A), np.eye(4))
True
"""

from importlib.metadata import version as _pkg_version

from . import utils, vectors
from .elimination import echelon_form
from .errors import (
    DimensionMismatch,
    DivisionByZero,
    InvalidArgument,
    PapyrusError,
    SingularMatrix,
)
from .matrix import (
    add,
    add_row,
    identity,
    multiply,
    multiply_linear,
    multiply_row,
    multiply_row_col,
    replace_row,
    swap_rows,
    transpose,
)
from .matrix_functions import (
    adjoint,
    cofactor,
    comatrix,
    det_by_echelon,
    inverse,
    minor,
    minor_matrix,
)
from .number_theory import extended_euclid, gcd
from .utils import inverse_multiplier

__all__ = [
    "add",
    "add_row",
    "identity",
    "multiply",
    "multiply_linear",
    "multiply_row",
    "multiply_row_col",
    "replace_row",
    "swap_rows",
    "transpose",
    "echelon_form",
    "inverse_multiplier",
    "det_by_echelon",
    "minor_matrix",
    "minor",
    "cofactor",
    "comatrix",
    "adjoint",
    "inverse",
    "extended_euclid",
    "gcd",
    "vectors",
    "utils",
    "PapyrusError",
    "DimensionMismatch",
    "DivisionByZero",
    "SingularMatrix",
    "InvalidArgument",
]

# ---------------------------------------------------------------------
# Version string (helps "pip show papyrus", Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library logging stays silent unless the application configures it.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
