"""Circle value types used as results of the triangle queries.

``Circle2D`` lives in the plane, ``Circle3D`` carries the unit axis of the
plane it lies in. Both offer a three-point circumcircle solver.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .errors import CollinearPointsError
from .vectors import (
    as_point, cross2d, cross3d, dot, length, points_equal, points_hash_key,
    unit_vector, validate_tolerance,
)

__all__ = ['Circle2D', 'Circle3D']


@dataclass(frozen=True, eq=False)
class Circle2D:
    center: np.ndarray
    radius: float

    def __post_init__(self):
        object.__setattr__(self, 'center', as_point(self.center, 2, 'center'))
        object.__setattr__(self, 'radius', float(self.radius))

    @property
    def diameter(self) -> float:
        return 2 * self.radius

    @property
    def circumference(self) -> float:
        return 2 * self.radius * math.pi

    @property
    def area(self) -> float:
        return self.radius * self.radius * math.pi

    @classmethod
    def from_points(cls, a, b, c) -> 'Circle2D':
        """Circle through three points (the circumcircle of triangle abc).

        Raises CollinearPointsError when the points lie on one line.
        """
        a = as_point(a, 2, 'a')
        u = as_point(b, 2, 'b') - a
        v = as_point(c, 2, 'c') - a
        d = 2.0 * cross2d(u, v)
        if d == 0.0:
            raise CollinearPointsError("a circle cannot be created from collinear points")
        uu = dot(u, u)
        vv = dot(v, v)
        offset = np.array([(v[1] * uu - u[1] * vv) / d, (u[0] * vv - v[0] * uu) / d])
        return cls(a + offset, length(offset))

    def equals(self, other: 'Circle2D', tolerance: float) -> bool:
        validate_tolerance(tolerance)
        return abs(other.radius - self.radius) < tolerance and points_equal(self.center, other.center, tolerance)

    def __eq__(self, other):
        if not isinstance(other, Circle2D):
            return NotImplemented
        return self.radius == other.radius and np.array_equal(self.center, other.center)

    def __hash__(self):
        return hash((points_hash_key(self.center), self.radius))


@dataclass(frozen=True, eq=False)
class Circle3D:
    center: np.ndarray
    axis: np.ndarray
    radius: float

    def __post_init__(self):
        object.__setattr__(self, 'center', as_point(self.center, 3, 'center'))
        object.__setattr__(self, 'axis', unit_vector(as_point(self.axis, 3, 'axis')))
        object.__setattr__(self, 'radius', float(self.radius))

    @property
    def diameter(self) -> float:
        return 2 * self.radius

    @property
    def circumference(self) -> float:
        return 2 * self.radius * math.pi

    @property
    def area(self) -> float:
        return self.radius * self.radius * math.pi

    @classmethod
    def from_points(cls, a, b, c) -> 'Circle3D':
        """Circle through three points in space.

        The axis is the unit normal of (b - a) x (c - a), so it follows the
        winding of the input. Raises CollinearPointsError for collinear points.
        """
        a = as_point(a, 3, 'a')
        u = as_point(b, 3, 'b') - a
        v = as_point(c, 3, 'c') - a
        w = cross3d(u, v)
        ww = dot(w, w)
        if ww == 0.0:
            raise CollinearPointsError("a circle cannot be created from collinear points")
        # circumcentre - a = (|u|^2 v - |v|^2 u) x w / (2 |w|^2)
        offset = cross3d(dot(u, u) * v - dot(v, v) * u, w) / (2.0 * ww)
        return cls(a + offset, w, length(offset))

    def equals(self, other: 'Circle3D', tolerance: float) -> bool:
        validate_tolerance(tolerance)
        return (abs(other.radius - self.radius) < tolerance
                and points_equal(self.center, other.center, tolerance)
                and points_equal(self.axis, other.axis, tolerance))

    def __eq__(self, other):
        if not isinstance(other, Circle3D):
            return NotImplemented
        return (self.radius == other.radius
                and np.array_equal(self.center, other.center)
                and np.array_equal(self.axis, other.axis))

    def __hash__(self):
        return hash((points_hash_key(self.center), points_hash_key(self.axis), self.radius))
