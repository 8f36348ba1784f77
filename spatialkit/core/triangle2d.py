"""Planar triangle with signed area, circles and point containment."""
from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .circles import Circle2D
from .constants import DEFAULT_TOLERANCE
from .errors import InvalidShapeError
from .logging_utils import get_logger
from .vectors import (
    as_point, as_vertices, cross2d, distance, length, points_equal,
    points_hash_key, validate_tolerance,
)

__all__ = ['Triangle2D']

logger = get_logger('spatialkit.triangle2d')


@dataclass(frozen=True, eq=False)
class Triangle2D:
    """Triangle A, B, C in the plane.

    Vertex order is significant: it fixes the sign of ``signed_area`` and the
    direction of ``normal``. ``vertices`` is a read-only (3, 2) copy of the
    input points.

    Raises
    ------
    InvalidShapeError
        If there are not exactly three 2D points, two vertices coincide, or
        the three points are collinear.
    """
    vertices: np.ndarray

    def __post_init__(self):
        pts = as_vertices(self.vertices, 3, 2, 'Triangle2D')
        a, b, c = pts
        if np.array_equal(a, b) or np.array_equal(b, c) or np.array_equal(c, a):
            logger.debug('rejecting triangle with repeated vertex: %s', pts.tolist())
            raise InvalidShapeError("Triangle2D vertices must be distinct")
        # 2*area = (B-A) x (C-A)
        if cross2d(b - a, c - a) == 0.0:
            logger.debug('rejecting collinear triangle: %s', pts.tolist())
            raise InvalidShapeError("Triangle2D vertices cannot lie on the same line")
        object.__setattr__(self, 'vertices', pts)

    @property
    def signed_area(self) -> float:
        """Area, positive when A -> B -> C runs counter-clockwise."""
        a, b, c = self.vertices
        return cross2d(b - a, c - a) / 2

    @property
    def area(self) -> float:
        return abs(self.signed_area)

    @property
    def normal(self) -> np.ndarray:
        """Out-of-plane unit vector: +z for CCW, -z for CW."""
        normal = np.array([0.0, 0.0, math.copysign(1.0, self.signed_area)])
        normal.setflags(write=False)
        return normal

    def circum_circle(self) -> Circle2D:
        a, b, c = self.vertices
        return Circle2D.from_points(a, b, c)

    def in_circle(self) -> Circle2D:
        """Inscribed circle.

        Near-degenerate triangles can drive the radicand below zero; the
        resulting NaN radius is returned as is.
        """
        A, B, C = self.vertices
        a = distance(B, C)
        b = distance(C, A)
        c = distance(A, B)
        perimeter = a + b + c
        center = (a * A + b * B + c * C) / perimeter
        with np.errstate(invalid='ignore'):
            r = np.sqrt((-a + b + c) * (a + b - c) * (a - b + c) / perimeter) / 2
        return Circle2D(center, float(r))

    def contains(self, point, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """True if ``point`` is on a vertex, on an edge or inside the triangle.

        Barycentric test: P = s0*A + s1*B + s2*C with
        s0 = area(BCP)/area, s1 = area(CAP)/area, s2 = area(ABP)/area,
        using signed areas so both windings work. The signed coordinates
        always sum to one, so only their lower bounds are checked.
        """
        validate_tolerance(tolerance)
        p = as_point(point, 2)
        v = self.vertices
        # weak early reject: only points outside on both axes at once
        if np.all(p < v.min(axis=0) - tolerance) or np.all(p > v.max(axis=0) + tolerance):
            return False

        A, B, C = v
        pa = p - A
        pb = p - B
        pc = p - C
        if length(pa) <= tolerance or length(pb) <= tolerance or length(pc) <= tolerance:
            return True

        twice_area = 2.0 * self.signed_area
        s0 = cross2d(C - B, pb) / twice_area
        if s0 < -tolerance:
            return False
        s1 = cross2d(A - C, pc) / twice_area
        if s1 < -tolerance:
            return False
        s2 = cross2d(B - A, pa) / twice_area
        return s2 >= -tolerance

    def equals(self, other: 'Triangle2D', tolerance: float) -> bool:
        """Vertex-wise comparison within ``tolerance`` (order-sensitive)."""
        validate_tolerance(tolerance)
        return all(points_equal(p, q, tolerance) for p, q in zip(self.vertices, other.vertices))

    def __eq__(self, other):
        if not isinstance(other, Triangle2D):
            return NotImplemented
        return np.array_equal(self.vertices, other.vertices)

    def __hash__(self):
        return hash(points_hash_key(self.vertices))
