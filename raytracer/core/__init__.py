"""
Core infrastructure: configuration, logging and exceptions.
"""

from .config import Settings, get_settings, settings
from .errors import CanvasError, MatrixIndexError, RayTracerError, ShapeError
from .logging import get_context_logger, get_logger, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "RayTracerError",
    "ShapeError",
    "MatrixIndexError",
    "CanvasError",
    "get_logger",
    "get_context_logger",
    "setup_logging",
]
