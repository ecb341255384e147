# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Vector operations in python
"""
import math

import numpy as np

from .errors import DimensionMismatch, DivisionByZero
from .utils import as_vector


def _exact(u: np.ndarray) -> np.ndarray:
    # integer entries go through Python ints, which do not wrap around
    if np.issubdtype(u.dtype, np.integer):
        return u.astype(object)
    return u


def _same_length(u: np.ndarray, v: np.ndarray) -> None:
    if u.shape != v.shape:
        raise DimensionMismatch(
            f"Vectors must have the same length, got {u.shape[0]} and {v.shape[0]}"
        )


def add(u, v) -> np.ndarray:
    u = as_vector(u)
    v = as_vector(v)
    _same_length(u, v)
    return u + v


def multiply(v, s) -> np.ndarray:
    return as_vector(v) * s


def dot_product(u, v):
    """
    Implements the scalar (dot) product between two vectors.
    """
    u = as_vector(u)
    v = as_vector(v)
    _same_length(u, v)
    return np.dot(_exact(u), _exact(v))


def cross_product(u, v) -> np.ndarray:
    """
    Implements classical cross product u x v in R^3
    Defines a vector orthogonal to u and v with magnitude
    equal to the parallelogram area.
    """
    u = as_vector(u)
    v = as_vector(v)
    if u.shape[0] != 3 or v.shape[0] != 3:
        raise DimensionMismatch(
            "Cross product is only defined between two 3 dimensional vectors"
        )
    return np.array(
        [
            u[1] * v[2] - u[2] * v[1],
            u[2] * v[0] - u[0] * v[2],
            u[0] * v[1] - u[1] * v[0],
        ]
    )


def magnitude(u) -> float:
    u = _exact(as_vector(u))
    return math.sqrt(sum(x * x for x in u))


def euclidean_distance(u, v) -> float:
    return magnitude(add(u, multiply(v, -1)))


def cosine_similarity(u, v) -> float:
    product = dot_product(u, v)
    u_len = magnitude(u)
    v_len = magnitude(v)
    if u_len == 0 or v_len == 0:
        raise DivisionByZero("Cosine similarity undefined for zero-length vector")
    return float(product) / (u_len * v_len)


def angle(u, v) -> float:
    """Angle between u and v in radians."""
    cos_theta = cosine_similarity(u, v)
    # clamp angle radians between [-1, 1]
    cos_theta = max(-1.0, min(1.0, cos_theta))
    return math.acos(cos_theta)
