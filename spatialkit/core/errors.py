"""Exception taxonomy for shape construction and queries.

Every error derives from ``ValueError`` so callers that already guard shape
input with ``except ValueError`` keep working.
"""
from __future__ import annotations


class GeometryError(ValueError):
    """Base class for spatialkit errors."""


class InvalidShapeError(GeometryError):
    """Vertices cannot form the requested shape (count, duplicates, degeneracy)."""


class InvalidArgumentError(GeometryError):
    """A query argument is out of range, e.g. a negative tolerance."""


class CoplanarPointsError(GeometryError):
    """Four points lie on one plane and have no unique circumsphere."""


class CollinearPointsError(GeometryError):
    """Three points lie on one line and define no circle or plane."""


__all__ = [
    'GeometryError',
    'InvalidShapeError',
    'InvalidArgumentError',
    'CoplanarPointsError',
    'CollinearPointsError',
]
