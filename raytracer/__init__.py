"""
raytracer - numeric substrate for a ray tracer

Submodules:
    math: matrices, points, vectors and colors
    canvas: pixel grid and PPM output
    core: configuration, logging and exceptions
"""

__version__ = "0.1.0"

from raytracer.canvas import Canvas
from raytracer.core.errors import CanvasError, MatrixIndexError, RayTracerError, ShapeError
from raytracer.math import (
    BLACK,
    WHITE,
    Color,
    Matrix1,
    Matrix2,
    Matrix3,
    Matrix4,
    Point,
    SquareMatrix,
    Vector,
)

__all__ = [
    "__version__",
    "Canvas",
    "Color",
    "BLACK",
    "WHITE",
    "Point",
    "Vector",
    "SquareMatrix",
    "Matrix1",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "RayTracerError",
    "ShapeError",
    "MatrixIndexError",
    "CanvasError",
]
