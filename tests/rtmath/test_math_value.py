"""Tests for MathValue base class behaviors."""

import pytest
from pydantic import BaseModel

from raytracer.core.config import settings
from raytracer.math.value import MathValue, ToleranceMode, fuzzy_compare


class DummyValue(BaseModel, MathValue):
    """Simple concrete MathValue for testing abstract helpers."""

    value: float

    def components(self) -> tuple[float, ...]:
        return (self.value,)

    def to_string(self) -> str:
        return str(self.value)

    def to_python(self) -> float:
        return self.value


class OtherDummyValue(DummyValue):
    """Distinct type with the same components."""


class TestFuzzyCompare:
    """Test scalar tolerance comparison."""

    def test_exact_values_match(self):
        assert fuzzy_compare(1.0, 1.0, 0.0, ToleranceMode.ABSOLUTE)

    def test_matching_infinities(self):
        assert fuzzy_compare(float("inf"), float("inf"), 1e-9, ToleranceMode.RELATIVE)

    def test_absolute_mode(self):
        assert fuzzy_compare(1.0, 1.0005, 1e-3, ToleranceMode.ABSOLUTE)
        assert not fuzzy_compare(1.0, 1.01, 1e-3, ToleranceMode.ABSOLUTE)

    def test_relative_mode_scales_with_magnitude(self):
        assert fuzzy_compare(1000.0, 1000.5, 1e-3, ToleranceMode.RELATIVE)
        assert not fuzzy_compare(1.0, 1.5, 1e-3, ToleranceMode.RELATIVE)

    def test_relative_mode_at_zero(self):
        assert fuzzy_compare(0.0, -0.0, 1e-9, ToleranceMode.RELATIVE)

    def test_nan_never_matches(self):
        nan = float("nan")
        assert not fuzzy_compare(nan, nan, 1.0, ToleranceMode.ABSOLUTE)

    def test_unknown_mode_raises(self):
        with pytest.raises(ValueError):
            fuzzy_compare(1.0, 2.0, 1e-3, "sigfigs")


class TestMathValueCompare:
    """Test compare() on concrete values."""

    def test_compare_uses_settings_tolerance_by_default(self):
        a = DummyValue(value=1.0)
        assert a.compare(DummyValue(value=1.0 + settings.COMPARE_TOLERANCE / 2))
        assert not a.compare(DummyValue(value=1.0 + settings.COMPARE_TOLERANCE * 10))

    def test_compare_explicit_tolerance(self):
        a = DummyValue(value=1.0)
        assert a.compare(DummyValue(value=1.4), tolerance=0.5)

    def test_compare_requires_same_type(self):
        assert not DummyValue(value=1.0).compare(OtherDummyValue(value=1.0))

    def test_math_value_is_abstract(self):
        with pytest.raises(TypeError):
            MathValue()
