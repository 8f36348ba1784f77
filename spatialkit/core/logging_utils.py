"""Logging utilities for spatialkit.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. Library modules obtain their loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = 'spatialkit'

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _ensure_root() -> logging.Logger:
    """Ensure the 'spatialkit' logger has a single stream handler and is
    isolated from the process root logger. Returns the 'spatialkit' logger.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    # Only NullHandlers (added by the package __init__) -> swap in a StreamHandler
    has_non_null = any(not isinstance(h, logging.NullHandler) for h in root.handlers)
    if not has_non_null:
        for h in list(root.handlers):
            root.removeHandler(h)
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)
    root.propagate = False
    return root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    value = getattr(logging, str(level).upper(), None)
    return value if isinstance(value, int) else default


def configure_logging(level: Union[str, int] = 'INFO') -> logging.Logger:
    """Configure the 'spatialkit' logger family level.

    This does NOT modify the process root logger.
    """
    root = _ensure_root()
    root.setLevel(_to_level(level))
    return root


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'spatialkit' namespace.

    Without an explicit level the logger is left at NOTSET so it inherits
    whatever configure_logging() set on the 'spatialkit' parent.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + '.'):
        name = f'{ROOT_LOGGER_NAME}.{name}'
    log = logging.getLogger(name)
    if level is not None:
        log.setLevel(_to_level(level))
    else:
        log.setLevel(logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging', 'ROOT_LOGGER_NAME']
