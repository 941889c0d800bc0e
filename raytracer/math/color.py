"""
RGB color values.

Channels are unbounded floats; 0.0-1.0 maps onto the displayable range when a
color is written out as a PPM pixel.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict

from .geometric import Point, Vector
from .value import MathValue

_SCALAR_TYPES = (int, float)


def _scale_channel(channel: float, max_value: int) -> int:
    """Truncate channel * max_value into [0, max_value]; NaN maps to 0."""
    scaled = channel * max_value
    if math.isnan(scaled):
        return 0
    return int(min(max(scaled, 0.0), float(max_value)))


class Color(BaseModel, MathValue):
    """Color with red, green and blue channels."""

    model_config = ConfigDict(frozen=True)

    r: float
    g: float
    b: float

    def __init__(self, r: float, g: float, b: float, **kwargs: Any) -> None:
        super().__init__(r=r, g=g, b=b, **kwargs)

    @classmethod
    def zero(cls) -> Color:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Color:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def gray(cls, value: float) -> Color:
        """Color with the same value in every channel."""
        return cls(value, value, value)

    @classmethod
    def from_point(cls, point: Point) -> Color:
        return cls(point.x, point.y, point.z)

    @classmethod
    def from_vector(cls, vector: Vector) -> Color:
        return cls(vector.x, vector.y, vector.z)

    def components(self) -> tuple[float, ...]:
        return (self.r, self.g, self.b)

    def to_string(self) -> str:
        return f"rgb({self.r}, {self.g}, {self.b})"

    def to_python(self) -> tuple[float, ...]:
        return self.components()

    def to_ppm(self, max_value: int = 255) -> str:
        """
        Render as a PPM pixel.

        Args:
            max_value: Maximum channel value of the image

        Returns:
            Three space separated integers, e.g. "255 127 0"
        """
        return " ".join(str(_scale_channel(c, max_value)) for c in self.components())

    def __str__(self) -> str:
        return self.to_ppm()

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"

    # Arithmetic operators

    def __add__(self, other: Any) -> Color:
        """Color addition."""
        if isinstance(other, Color):
            return Color(self.r + other.r, self.g + other.g, self.b + other.b)
        return NotImplemented

    def __sub__(self, other: Any) -> Color:
        """Color subtraction."""
        if isinstance(other, Color):
            return Color(self.r - other.r, self.g - other.g, self.b - other.b)
        return NotImplemented

    def __mul__(self, other: Any) -> Color:
        """Hadamard product with a color, or scaling by a scalar."""
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, _SCALAR_TYPES):
            return self * Color.gray(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Color:
        """Right scalar multiplication."""
        if isinstance(other, _SCALAR_TYPES):
            return self.__mul__(other)
        return NotImplemented


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
