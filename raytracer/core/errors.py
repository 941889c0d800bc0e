"""
Library exceptions.

Defines the exception hierarchy raised by the matrix engine and the canvas.
"""

from typing import Any, Dict, Optional


class RayTracerError(Exception):
    """Base exception for ray tracer errors"""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ShapeError(RayTracerError, ValueError):
    """Raised when a grid does not match the order of the matrix type"""

    def __init__(self, type_name: str, expected: tuple[int, int], actual: Any):
        super().__init__(
            message=f"{type_name} expects a {expected[0]}x{expected[1]} grid, got {actual}",
            details={"type": type_name, "expected": expected, "actual": actual}
        )


class MatrixIndexError(RayTracerError, IndexError):
    """Raised when a row or column index is outside the matrix"""

    def __init__(self, row: int, col: int, order: int):
        super().__init__(
            message=f"Index ({row}, {col}) out of range for order {order} matrix",
            details={"row": row, "col": col, "order": order}
        )


class CanvasError(RayTracerError, IndexError):
    """Raised when a pixel coordinate lies outside the canvas"""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(
            message=f"Pixel ({x}, {y}) outside {width}x{height} canvas",
            details={"x": x, "y": y, "width": width, "height": height}
        )
