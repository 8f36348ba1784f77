"""Public package API for the spatialkit geometry kernel.

Flat import surface over the implementation package ``spatialkit.core``:
validated shape constructors (triangles, tetrahedra, spheres), their measures
and their tolerance-aware containment tests.

Example
-------
    from spatialkit import Triangle2D, Tetrahedron3D

    tri = Triangle2D([(0, 0), (1, 0), (0, 1)])
    tri.signed_area            # 0.5
    tri.contains((0.2, 0.2))   # True

The deeper modules (``spatialkit.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
from importlib import import_module as _imp
import logging as _logging

try:  # Python 3.8+ runtime version export
    from importlib.metadata import version as _pkg_version
    __version__ = _pkg_version("spatialkit")  # populated when installed
except Exception:  # pragma: no cover - editable / unknown state
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

_const = _imp('spatialkit.core.constants')
_errors = _imp('spatialkit.core.errors')
_log = _imp('spatialkit.core.logging_utils')

from .core.circles import Circle2D, Circle3D
from .core.plane import Plane
from .core.shapes import VertexShape
from .core.sphere3d import Sphere3D
from .core.tetrahedron3d import Tetrahedron3D
from .core.triangle2d import Triangle2D
from .core.triangle3d import Triangle3D

# Tolerances
DEFAULT_TOLERANCE = _const.DEFAULT_TOLERANCE
ZERO_TOLERANCE = _const.ZERO_TOLERANCE

# Errors
GeometryError = _errors.GeometryError
InvalidShapeError = _errors.InvalidShapeError
InvalidArgumentError = _errors.InvalidArgumentError
CoplanarPointsError = _errors.CoplanarPointsError
CollinearPointsError = _errors.CollinearPointsError

# Logging
get_logger = _log.get_logger
configure_logging = _log.configure_logging

# Namespace submodules
constants = _const
errors = _errors

__all__ = [
    '__version__',
    # shapes
    'Triangle2D', 'Triangle3D', 'Tetrahedron3D', 'Sphere3D', 'VertexShape',
    # collaborators
    'Circle2D', 'Circle3D', 'Plane',
    # tolerances
    'DEFAULT_TOLERANCE', 'ZERO_TOLERANCE',
    # errors
    'GeometryError', 'InvalidShapeError', 'InvalidArgumentError',
    'CoplanarPointsError', 'CollinearPointsError',
    # logging
    'get_logger', 'configure_logging',
    'constants', 'errors',
]
