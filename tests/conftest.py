"""
Shared pytest fixtures and utilities for testing the raytracer value types.

This module provides:
- Fixtures with well-known matrices (invertible and singular)
- Helpers for tolerance-based matrix comparison
- Utilities for testing Pydantic validation and serialization
"""

import numpy as np
import pytest
from typing import Any, Type, TypeVar
from pydantic import BaseModel, ValidationError

from raytracer.math import Matrix4, SquareMatrix


T = TypeVar('T', bound=BaseModel)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def invertible_matrix4() -> Matrix4:
    """4x4 matrix with determinant 532."""
    return Matrix4([
        [-5, 2, 6, -8],
        [1, -5, 1, 8],
        [7, 7, -6, -7],
        [1, -3, 7, 4],
    ])


@pytest.fixture
def singular_matrix4() -> Matrix4:
    """4x4 matrix whose second and fourth rows are identical."""
    return Matrix4([
        [1, 2, 3, 4],
        [5, 6, 7, 8],
        [9, 1, 2, 3],
        [5, 6, 7, 8],
    ])


@pytest.fixture
def assert_matrix_close():
    """Helper to assert two matrices agree elementwise within an absolute tolerance."""
    def _assert_close(actual: SquareMatrix, expected: SquareMatrix, atol: float = 1e-9) -> None:
        assert type(actual) is type(expected), f"{type(actual).__name__} != {type(expected).__name__}"
        np.testing.assert_allclose(actual.to_numpy(), expected.to_numpy(), rtol=0, atol=atol)

    return _assert_close


@pytest.fixture
def assert_validation_error():
    """Helper to assert that a ValidationError is raised with expected details."""
    def _assert_validation(
        model_class: Type[BaseModel],
        data: dict[str, Any],
        expected_field: str | None = None,
    ) -> ValidationError:
        """
        Assert that creating a model raises ValidationError.

        Args:
            model_class: The Pydantic model class
            data: Invalid data to pass to model
            expected_field: Expected field name in error (optional)

        Returns:
            The ValidationError that was raised
        """
        with pytest.raises(ValidationError) as exc_info:
            model_class(**data)

        error = exc_info.value
        if expected_field:
            field_errors = [e for e in error.errors() if e['loc'][0] == expected_field]
            assert len(field_errors) > 0, f"Expected error for field '{expected_field}' not found"

        return error

    return _assert_validation


@pytest.fixture
def assert_serializable():
    """Helper to assert that a model can be serialized and deserialized."""
    def _assert_serialization(model: BaseModel, model_class: Type[T]) -> T:
        """
        Assert that a model can be serialized to dict and reconstructed.

        Args:
            model: The model instance to test
            model_class: The model class for reconstruction

        Returns:
            The reconstructed model
        """
        serialized = model.model_dump()
        reconstructed = model_class(**serialized)

        assert reconstructed == model
        return reconstructed

    return _assert_serialization
