"""Structural interface shared by the vertex-based shapes.

Triangle2D, Triangle3D and Tetrahedron3D satisfy this protocol without
inheriting from it; there is no common base class.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np

__all__ = ['VertexShape']


@runtime_checkable
class VertexShape(Protocol):
    @property
    def vertices(self) -> np.ndarray:
        ...

    def contains(self, point, tolerance: float = ...) -> bool:
        ...
