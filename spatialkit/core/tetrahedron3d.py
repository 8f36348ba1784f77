"""Tetrahedron with signed volume, circumsphere and point containment."""
from __future__ import annotations

from dataclasses import dataclass, field
from itertools import combinations

import numpy as np

from .constants import DEFAULT_TOLERANCE
from .errors import InvalidShapeError
from .logging_utils import get_logger
from .sphere3d import Sphere3D
from .vectors import (
    as_point, as_vertices, cross3d, dot, length, points_equal, points_hash_key,
    validate_tolerance,
)

__all__ = ['Tetrahedron3D']

logger = get_logger('spatialkit.tetrahedron3d')


@dataclass(frozen=True, eq=False)
class Tetrahedron3D:
    """Tetrahedron A, B, C, D.

    ``signed_volume`` is computed once at construction and is positive when
    A, B, C run counter-clockwise seen from the side opposite D.

    Raises
    ------
    InvalidShapeError
        If there are not exactly four 3D points, any two vertices coincide,
        or the four points are coplanar.
    """
    vertices: np.ndarray
    signed_volume: float = field(init=False)

    def __post_init__(self):
        pts = as_vertices(self.vertices, 4, 3, 'Tetrahedron3D')
        for i, j in combinations(range(4), 2):
            if np.array_equal(pts[i], pts[j]):
                logger.debug('rejecting tetrahedron with repeated vertex %d/%d: %s', i, j, pts.tolist())
                raise InvalidShapeError("Tetrahedron3D vertices must be distinct")
        a, b, c, d = pts
        # 6*volume = (A-D) . (B-D) x (C-D)
        signed_volume = dot(a - d, cross3d(b - d, c - d)) / 6
        if signed_volume == 0.0:
            logger.debug('rejecting coplanar tetrahedron: %s', pts.tolist())
            raise InvalidShapeError("Tetrahedron3D vertices cannot lie on the same plane")
        object.__setattr__(self, 'vertices', pts)
        object.__setattr__(self, 'signed_volume', signed_volume)

    @property
    def volume(self) -> float:
        return abs(self.signed_volume)

    def circum_sphere(self) -> Sphere3D:
        """Sphere through all four vertices (recomputed on every call)."""
        a, b, c, d = self.vertices
        return Sphere3D.from_points(a, b, c, d)

    def contains(self, point, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """True if ``point`` is on a vertex, edge or face, or inside.

        Writes P = A + s*(B-A) + t*(C-A) + u*(D-A) and solves

            [ x21 x31 x41 ] [ s ]   [ xp1 ]
            [ y21 y31 y41 ] [ t ] = [ yp1 ]
            [ z21 z31 z41 ] [ u ]   [ zp1 ]

        with the adjugate of the edge matrix divided by its determinant
        (6 times the volume of ABCD). P is inside when s, t, u and
        1 - s - t - u are all non-negative, up to ``tolerance``.
        """
        validate_tolerance(tolerance)
        p = as_point(point, 3)
        v = self.vertices
        # weak early reject: only points outside on all three axes at once
        if np.all(p < v.min(axis=0) - tolerance) or np.all(p > v.max(axis=0) + tolerance):
            return False

        for vertex in v:
            if length(p - vertex) <= tolerance:
                return True

        A, B, C, D = v
        x21, y21, z21 = B - A
        x31, y31, z31 = C - A
        x41, y41, z41 = D - A
        xp1, yp1, zp1 = p - A

        det = (x21 * (y31 * z41 - y41 * z31)
               + y21 * (x41 * z31 - x31 * z41)
               + z21 * (x31 * y41 - x41 * y31))
        s = ((y31 * z41 - y41 * z31) * xp1 + (x41 * z31 - x31 * z41) * yp1 + (x31 * y41 - x41 * y31) * zp1) / det
        t = ((y41 * z21 - y21 * z41) * xp1 + (x21 * z41 - x41 * z21) * yp1 + (x41 * y21 - x21 * y41) * zp1) / det
        u = ((y21 * z31 - y31 * z21) * xp1 + (x31 * z21 - x21 * z31) * yp1 + (x21 * y31 - x31 * y21) * zp1) / det

        return bool(s >= -tolerance
                    and t >= -tolerance
                    and u >= -tolerance
                    and 1.0 - s - t - u >= -tolerance)

    def equals(self, other: 'Tetrahedron3D', tolerance: float) -> bool:
        validate_tolerance(tolerance)
        return all(points_equal(p, q, tolerance) for p, q in zip(self.vertices, other.vertices))

    def __eq__(self, other):
        if not isinstance(other, Tetrahedron3D):
            return NotImplemented
        return np.array_equal(self.vertices, other.vertices)

    def __hash__(self):
        return hash(points_hash_key(self.vertices))
