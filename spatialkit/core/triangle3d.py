"""Triangle embedded in 3D space."""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .circles import Circle3D
from .constants import DEFAULT_TOLERANCE
from .errors import InvalidShapeError
from .logging_utils import get_logger
from .plane import Plane
from .vectors import (
    as_point, as_vertices, cross3d, distance, dot, length, points_equal,
    points_hash_key, unit_vector, validate_tolerance,
)

__all__ = ['Triangle3D']

logger = get_logger('spatialkit.triangle3d')


@dataclass(frozen=True, eq=False)
class Triangle3D:
    """Triangle A, B, C in space.

    There is no orientation without a reference direction, so ``area`` is
    unsigned; the winding only shows up in the direction of ``normal``.
    """
    vertices: np.ndarray

    def __post_init__(self):
        pts = as_vertices(self.vertices, 3, 3, 'Triangle3D')
        a, b, c = pts
        if np.array_equal(a, b) or np.array_equal(b, c) or np.array_equal(c, a):
            logger.debug('rejecting triangle with repeated vertex: %s', pts.tolist())
            raise InvalidShapeError("Triangle3D vertices must be distinct")
        if length(cross3d(b - a, c - a)) == 0.0:
            logger.debug('rejecting collinear triangle: %s', pts.tolist())
            raise InvalidShapeError("Triangle3D vertices cannot lie on the same line")
        object.__setattr__(self, 'vertices', pts)

    def _edge_cross(self) -> np.ndarray:
        a, b, c = self.vertices
        return cross3d(b - a, c - a)

    @property
    def area(self) -> float:
        return length(self._edge_cross()) / 2

    @property
    def normal(self) -> np.ndarray:
        """Unit vector of (B - A) x (C - A); flips with the winding."""
        return unit_vector(self._edge_cross())

    def plane(self) -> Plane:
        """Supporting plane, oriented along ``normal``."""
        n = self.normal
        return Plane(n, dot(n, self.vertices[0]))

    def circum_circle(self) -> Circle3D:
        a, b, c = self.vertices
        return Circle3D.from_points(a, b, c)

    def in_circle(self) -> Circle3D:
        A, B, C = self.vertices
        a = distance(B, C)
        b = distance(C, A)
        c = distance(A, B)
        perimeter = a + b + c
        center = (a * A + b * B + c * C) / perimeter
        with np.errstate(invalid='ignore'):
            r = np.sqrt((-a + b + c) * (a + b - c) * (a - b + c) / perimeter) / 2
        return Circle3D(center, self.normal, float(r))

    def contains(self, point, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """True if ``point`` is on a vertex, on an edge or inside the triangle.

        Uses unsigned sub-triangle areas normalised by the triangle area and
        accepts when they sum to at most one (plus tolerance). Distance from
        the supporting plane is not checked on its own: an off-plane point
        passes as long as the excess of the sum stays within ``tolerance``.
        """
        validate_tolerance(tolerance)
        p = as_point(point, 3)
        v = self.vertices
        # weak early reject: only points outside on all three axes at once
        if np.all(p < v.min(axis=0) - tolerance) or np.all(p > v.max(axis=0) + tolerance):
            return False

        A, B, C = v
        pa = p - A
        pb = p - B
        pc = p - C
        if length(pa) <= tolerance or length(pb) <= tolerance or length(pc) <= tolerance:
            return True

        twice_area = 2.0 * self.area
        # magnitudes are never negative, only the sum can rule the point out
        s0 = length(cross3d(C - B, pb)) / twice_area
        s1 = length(cross3d(A - C, pc)) / twice_area
        s2 = length(cross3d(B - A, pa)) / twice_area
        return 1.0 - (s0 + s1 + s2) >= -tolerance

    def equals(self, other: 'Triangle3D', tolerance: float) -> bool:
        validate_tolerance(tolerance)
        return all(points_equal(p, q, tolerance) for p, q in zip(self.vertices, other.vertices))

    def __eq__(self, other):
        if not isinstance(other, Triangle3D):
            return NotImplemented
        return np.array_equal(self.vertices, other.vertices)

    def __hash__(self):
        return hash(points_hash_key(self.vertices))
