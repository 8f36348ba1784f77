"""Point and vector primitives shared by the shape modules.

Points are float64 numpy arrays of shape (2,) or (3,). The scalar helpers
spell out every product and sum in a fixed order instead of going through
BLAS-backed reductions, so a boundary hit that is exact in IEEE arithmetic
stays exact and results do not depend on the linked BLAS.
"""
from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from .errors import InvalidArgumentError, InvalidShapeError

__all__ = [
    'as_point', 'as_vertices', 'validate_tolerance',
    'cross2d', 'cross3d', 'dot', 'length', 'distance', 'unit_vector',
    'points_equal', 'points_hash_key',
]


def _readonly(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


def as_point(p, dim: int, name: str = 'point') -> np.ndarray:
    """Return a read-only float64 copy of ``p`` with shape (dim,)."""
    try:
        arr = np.array(p, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"{name} must be {dim} numbers: {e}") from e
    if arr.shape != (dim,):
        raise InvalidArgumentError(f"{name} must have shape ({dim},), got {arr.shape}")
    return _readonly(arr)


def as_vertices(points: Iterable, count: int, dim: int, kind: str) -> np.ndarray:
    """Copy ``points`` into a read-only (count, dim) float64 array.

    Accepts any iterable of point-likes, including generators. Raises
    InvalidShapeError when the input cannot be ``count`` points of dimension
    ``dim``.
    """
    try:
        pts = list(points)
    except TypeError as e:
        raise InvalidShapeError(f"{kind} expects an iterable of points") from e
    if len(pts) != count:
        raise InvalidShapeError(f"{kind} requires exactly {count} vertices, got {len(pts)}")
    try:
        arr = np.array(pts, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidShapeError(f"{kind} vertices must be {dim}D points: {e}") from e
    if arr.shape != (count, dim):
        raise InvalidShapeError(f"{kind} vertices must have shape ({count}, {dim}), got {arr.shape}")
    return _readonly(arr)


def validate_tolerance(tolerance: float) -> float:
    if tolerance < 0:
        raise InvalidArgumentError(f"tolerance must be >= 0, got {tolerance!r}")
    return tolerance


def cross2d(u, v) -> float:
    """Scalar 2D cross product (z component of the 3D cross product)."""
    return float(u[0] * v[1] - u[1] * v[0])


def cross3d(u, v) -> np.ndarray:
    return np.array([
        u[1] * v[2] - u[2] * v[1],
        u[2] * v[0] - u[0] * v[2],
        u[0] * v[1] - u[1] * v[0],
    ], dtype=np.float64)


def dot(u, v) -> float:
    total = u[0] * v[0] + u[1] * v[1]
    if len(u) == 3:
        total = total + u[2] * v[2]
    return float(total)


def length(v) -> float:
    return math.sqrt(dot(v, v))


def distance(p, q) -> float:
    return length(np.subtract(p, q))


def unit_vector(v) -> np.ndarray:
    """Return ``v`` scaled to unit length; zero vectors have no direction."""
    n = length(v)
    if n == 0.0:
        raise InvalidArgumentError("cannot normalize a zero-length vector")
    return _readonly(np.asarray(v, dtype=np.float64) / n)


def points_equal(p, q, tolerance: float) -> bool:
    """True when every coordinate of p and q differs by less than tolerance."""
    validate_tolerance(tolerance)
    return all(abs(a - b) < tolerance for a, b in zip(p, q))


def points_hash_key(arr: np.ndarray) -> tuple:
    # tolist() yields Python floats, so -0.0 and 0.0 hash alike, matching ==
    return tuple(map(tuple, np.atleast_2d(arr).tolist()))
