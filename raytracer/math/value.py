"""
Base MathValue class for the ray tracer value types.

This module provides the foundation shared by matrices, points, vectors and
colors:
- Tolerance-based comparison (equality operators stay exact)
- Multiple output formats (string, Python natives)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ToleranceMode:
    """Modes for fuzzy comparison."""

    RELATIVE = "relative"  # |a - b| / max(|a|, |b|) <= tol
    ABSOLUTE = "absolute"  # |a - b| <= tol


def fuzzy_compare(a: float, b: float, tolerance: float, mode: str) -> bool:
    """
    Compare two floats with tolerance.

    Args:
        a: First value
        b: Second value
        tolerance: Tolerance value
        mode: Comparison mode (relative, absolute)

    Returns:
        True if values are equal within tolerance

    Raises:
        ValueError: If mode is not a known ToleranceMode
    """
    # Exact equality (also covers matching infinities)
    if a == b:
        return True

    if mode == ToleranceMode.ABSOLUTE:
        return abs(a - b) <= tolerance

    elif mode == ToleranceMode.RELATIVE:
        max_abs = max(abs(a), abs(b))
        if max_abs == 0:
            return abs(a - b) <= tolerance
        return abs(a - b) / max_abs <= tolerance

    raise ValueError(f"Unknown tolerance mode: {mode}")


class MathValue(ABC):
    """
    Base class for all ray tracer value objects.

    Provides:
    - Fuzzy comparison with tolerances over the flattened components
    - Multiple output formats (string, Python natives)

    Subclasses must implement:
    - components(): the floats compared by compare()
    - to_string(), to_python()

    Note: Concrete subclasses inherit from both BaseModel and MathValue,
    e.g., `class Vector(BaseModel, MathValue):`. MathValue itself is abstract
    and does not inherit from BaseModel to avoid MRO conflicts.
    """

    @abstractmethod
    def components(self) -> tuple[float, ...]:
        """Flattened float components in a fixed order."""
        pass

    @abstractmethod
    def to_string(self) -> str:
        """Convert to human-readable string."""
        pass

    @abstractmethod
    def to_python(self) -> Any:
        """Convert to Python native types."""
        pass

    def compare(
        self,
        other: MathValue,
        tolerance: float | None = None,
        mode: str = ToleranceMode.ABSOLUTE,
    ) -> bool:
        """
        Fuzzy comparison with tolerance.

        Values of different types never compare equal. Exact equality is
        what ``==`` gives; this is the escape hatch for round-trip checks.

        Args:
            other: Value to compare against
            tolerance: Tolerance for comparison (None = settings.COMPARE_TOLERANCE)
            mode: Tolerance mode (relative, absolute)

        Returns:
            True if every component is equal within tolerance
        """
        if type(other) is not type(self):
            return False

        if tolerance is None:
            from raytracer.core.config import settings

            tolerance = settings.COMPARE_TOLERANCE

        return all(
            fuzzy_compare(a, b, tolerance, mode)
            for a, b in zip(self.components(), other.components())
        )
