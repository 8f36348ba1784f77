"""Oriented plane ``{p : normal . p = d}``."""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .constants import ZERO_TOLERANCE
from .errors import CollinearPointsError
from .vectors import (
    as_point, cross3d, dot, points_equal, points_hash_key, unit_vector,
    validate_tolerance,
)

__all__ = ['Plane']


@dataclass(frozen=True, eq=False)
class Plane:
    normal: np.ndarray
    d: float

    def __post_init__(self):
        object.__setattr__(self, 'normal', unit_vector(as_point(self.normal, 3, 'normal')))
        object.__setattr__(self, 'd', float(self.d))

    @classmethod
    def from_points(cls, a, b, c) -> 'Plane':
        a = as_point(a, 3, 'a')
        n = cross3d(as_point(b, 3, 'b') - a, as_point(c, 3, 'c') - a)
        if not n.any():
            raise CollinearPointsError("a plane cannot be created from collinear points")
        n = unit_vector(n)
        return cls(n, dot(n, a))

    def signed_distance_to(self, point) -> float:
        """Positive on the side the normal points to."""
        return dot(self.normal, as_point(point, 3)) - self.d

    def contains(self, point, tolerance: float = ZERO_TOLERANCE) -> bool:
        validate_tolerance(tolerance)
        return abs(self.signed_distance_to(point)) <= tolerance

    def equals(self, other: 'Plane', tolerance: float) -> bool:
        validate_tolerance(tolerance)
        return abs(other.d - self.d) < tolerance and points_equal(self.normal, other.normal, tolerance)

    def __eq__(self, other):
        if not isinstance(other, Plane):
            return NotImplemented
        return self.d == other.d and np.array_equal(self.normal, other.normal)

    def __hash__(self):
        return hash((points_hash_key(self.normal), self.d))
