"""
Geometric value types: Point, Vector.

Both are three-component, double precision, immutable values with exact
equality. Points are positions, vectors are displacements:
- point + vector = point
- point - point = vector
- vector supports the full vector algebra (dot, cross, normalize, ...)
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict

from .value import MathValue

_SCALAR_TYPES = (int, float)


class Point(BaseModel, MathValue):
    """
    Point in 3D space.

    Represented as coordinates (x, y, z).
    Points can be moved by vectors but do not support vector operations.
    """

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float

    def __init__(self, x: float, y: float, z: float, **kwargs: Any) -> None:
        super().__init__(x=x, y=y, z=z, **kwargs)

    @classmethod
    def zero(cls) -> Point:
        """The origin."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Point:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def from_vector(cls, vector: Vector) -> Point:
        """Point at the tip of a vector from the origin."""
        return cls(vector.x, vector.y, vector.z)

    def components(self) -> tuple[float, ...]:
        return (self.x, self.y, self.z)

    def to_string(self) -> str:
        """Convert to string."""
        return f"({self.x}, {self.y}, {self.z})"

    def to_python(self) -> tuple[float, ...]:
        """Convert to Python tuple."""
        return self.components()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Point{self.to_string()}"

    def to(self, other: Point) -> Vector:
        """Vector pointing from this point to another."""
        return other - self

    # Arithmetic operators (limited for points)

    def __add__(self, other: Any) -> Point:
        """Move a point: point + vector = point."""
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __radd__(self, other: Any) -> Point:
        """Right addition: vector + point = point."""
        return self.__add__(other)

    def __sub__(self, other: Any) -> Point | Vector:
        """Subtraction: point - point = vector, point - vector = point."""
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        elif isinstance(other, Vector):
            return self + (-other)
        return NotImplemented


class Vector(BaseModel, MathValue):
    """
    Vector in 3D space.

    Supports vector operations: dot product, cross product, length, etc.
    Division by zero raises ZeroDivisionError, unlike SquareMatrix division,
    which follows IEEE 754 and yields inf or NaN elements.
    """

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float

    def __init__(self, x: float, y: float, z: float, **kwargs: Any) -> None:
        super().__init__(x=x, y=y, z=z, **kwargs)

    @classmethod
    def zero(cls) -> Vector:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Vector:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def from_point(cls, point: Point) -> Vector:
        """Vector from the origin to a point."""
        return cls(point.x, point.y, point.z)

    def components(self) -> tuple[float, ...]:
        return (self.x, self.y, self.z)

    def to_string(self) -> str:
        """Convert to string."""
        return f"<{self.x}, {self.y}, {self.z}>"

    def to_python(self) -> tuple[float, ...]:
        """Convert to Python tuple."""
        return self.components()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Vector({self.x}, {self.y}, {self.z})"

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_squared())

    def normalize(self) -> Vector:
        """
        Unit vector in the same direction.

        Raises:
            ZeroDivisionError: If the vector has zero length
        """
        return self / self.length()

    def dot(self, other: Vector) -> float:
        """
        Calculate dot product with another vector.

        Args:
            other: Another vector

        Returns:
            Dot product (scalar)
        """
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        """
        Calculate cross product with another vector.

        Order matters: a.cross(b) == -(b.cross(a)).

        Args:
            other: Another vector

        Returns:
            Vector orthogonal to both
        """
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def hadamard(self, other: Vector) -> Vector:
        """Component-wise product."""
        return Vector(self.x * other.x, self.y * other.y, self.z * other.z)

    # Arithmetic operators

    def __neg__(self) -> Vector:
        """Negation."""
        return Vector(-self.x, -self.y, -self.z)

    def __add__(self, other: Any) -> Vector:
        """Vector addition, or adding a scalar to every component."""
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, _SCALAR_TYPES):
            return Vector(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    def __radd__(self, other: Any) -> Vector:
        """Right addition (scalar only; vector + point is handled by Point)."""
        if isinstance(other, _SCALAR_TYPES):
            return self.__add__(other)
        return NotImplemented

    def __sub__(self, other: Any) -> Vector:
        """Vector subtraction."""
        if isinstance(other, Vector):
            return self + (-other)
        return NotImplemented

    def __mul__(self, other: Any) -> Vector:
        """Scalar multiplication."""
        if isinstance(other, _SCALAR_TYPES):
            return Vector(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Vector:
        """Right scalar multiplication."""
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Vector:
        """Scalar division."""
        if isinstance(other, _SCALAR_TYPES):
            if other == 0:
                raise ZeroDivisionError("Cannot divide vector by zero")
            return Vector(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __rtruediv__(self, other: Any) -> Vector:
        """Right division not supported (scalar / vector makes no sense)."""
        raise TypeError("Cannot divide scalar by Vector")
