"""
raytracer.math - value types for the ray tracer

- Fixed-order square matrices (orders 1-4) with determinant and inverse
- Points and vectors in 3D space
- RGB colors
"""

from .color import BLACK, WHITE, Color
from .geometric import Point, Vector
from .matrix import Matrix1, Matrix2, Matrix3, Matrix4, MatrixEntry, SquareMatrix, matrix_type
from .value import MathValue, ToleranceMode, fuzzy_compare

__all__ = [
    "MathValue",
    "ToleranceMode",
    "fuzzy_compare",
    "SquareMatrix",
    "Matrix1",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "MatrixEntry",
    "matrix_type",
    "Point",
    "Vector",
    "Color",
    "BLACK",
    "WHITE",
]
