"""Central numerical tolerances.

Tolerances used by the shape queries are defined here once so they can be
referenced by name instead of scattering literals across modules.
"""
from __future__ import annotations

import numpy as np

# Default slack of every ``contains`` query: the smallest positive
# single-precision value (~1.4e-45). Only exact boundary hits count.
DEFAULT_TOLERANCE: float = float(np.finfo(np.float32).smallest_subnormal)

# Exact comparison
ZERO_TOLERANCE: float = 0.0

__all__ = [
    'DEFAULT_TOLERANCE',
    'ZERO_TOLERANCE',
]
