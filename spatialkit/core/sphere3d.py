"""Sphere value type and the four-point circumsphere solver."""
from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .constants import DEFAULT_TOLERANCE
from .errors import CoplanarPointsError
from .logging_utils import get_logger
from .vectors import (
    as_point, distance, dot, points_equal, points_hash_key, validate_tolerance,
)

__all__ = ['Sphere3D']

logger = get_logger('spatialkit.sphere3d')


@dataclass(frozen=True, eq=False)
class Sphere3D:
    """Sphere given by centre and radius.

    The radius is not validated; a negative radius is stored as given and the
    derived measures follow its sign.
    """
    center: np.ndarray
    radius: float

    def __post_init__(self):
        object.__setattr__(self, 'center', as_point(self.center, 3, 'center'))
        object.__setattr__(self, 'radius', float(self.radius))

    @property
    def diameter(self) -> float:
        return 2 * self.radius

    @property
    def circumference(self) -> float:
        return 2 * self.radius * math.pi

    @property
    def surface_area(self) -> float:
        return 4 * self.radius * self.radius * math.pi

    @property
    def volume(self) -> float:
        return 4 * self.radius * self.radius * self.radius * math.pi / 3

    def contains(self, point, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """True if ``point`` lies on or inside the sphere."""
        validate_tolerance(tolerance)
        return distance(as_point(point, 3), self.center) <= self.radius + tolerance

    @classmethod
    def from_points(cls, a, b, c, d) -> 'Sphere3D':
        """Circumsphere of four non-coplanar points.

        The sphere through p1..p4 satisfies the determinant equation

            | x^2+y^2+z^2      x   y   z   1 |
            | x1^2+y1^2+z1^2   x1  y1  z1  1 |
            |      ...                       |  = 0
            | x4^2+y4^2+z4^2   x4  y4  z4  1 |

        and cofactor expansion along the first row gives the centre and
        radius from five 4x4 determinants. Row i of every matrix below comes
        from point i; the column order fixes the signs used in the formulas.

        Raises
        ------
        CoplanarPointsError
            If the homogeneous determinant of the points is exactly zero.
        """
        pts = np.array([as_point(p, 3, name) for p, name in zip((a, b, c, d), 'abcd')])
        x, y, z = pts[:, 0], pts[:, 1], pts[:, 2]
        sq = x * x + y * y + z * z
        one = np.ones(4)

        det_a = np.linalg.det(np.column_stack([x, y, z, one]))
        if det_a == 0.0:
            logger.debug('from_points: coplanar input %s', pts.tolist())
            raise CoplanarPointsError("a sphere cannot be created from coplanar points")

        det_x = np.linalg.det(np.column_stack([sq, y, z, one]))
        det_y = np.linalg.det(np.column_stack([x, sq, z, one]))
        det_z = np.linalg.det(np.column_stack([x, y, sq, one]))
        det_c = np.linalg.det(np.column_stack([sq, x, y, z]))

        center = np.array([det_x / det_a / 2, det_y / det_a / 2, det_z / det_a / 2])
        with np.errstate(invalid='ignore'):
            radius = np.sqrt(dot(center, center) - det_c / det_a)
        return cls(center, float(radius))

    def equals(self, other: 'Sphere3D', tolerance: float) -> bool:
        validate_tolerance(tolerance)
        return abs(other.radius - self.radius) < tolerance and points_equal(self.center, other.center, tolerance)

    def __eq__(self, other):
        if not isinstance(other, Sphere3D):
            return NotImplemented
        return self.radius == other.radius and np.array_equal(self.center, other.center)

    def __hash__(self):
        return hash((points_hash_key(self.center), self.radius))
