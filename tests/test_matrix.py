"""
Tests for the matrix utility and array helpers.
"""

from __future__ import annotations

import numpy as np
import pytest

from csscolor.utils import as_color, distance_squared, multiply_matrices, signed_power


def test_multiply_matrices_rectangular() -> None:
    result = multiply_matrices([[1, 2], [3, 4]], [5, 6])
    np.testing.assert_array_equal(result, [17.0, 39.0])


def test_multiply_matrices_stack_of_vectors() -> None:
    matrix = np.array([[1.0, 0.0, 0.0], [0.0, 2.0, 0.0], [0.0, 0.0, 3.0]])
    vectors = np.ones((4, 5, 3))
    result = multiply_matrices(matrix, vectors)
    assert result.shape == (4, 5, 3)
    np.testing.assert_allclose(result[2, 3], [1.0, 2.0, 3.0])


def test_multiply_matrices_dimension_mismatch() -> None:
    with pytest.raises(ValueError, match="dimension mismatch"):
        multiply_matrices([[1, 2], [3, 4]], [1, 2, 3])


def test_multiply_matrices_requires_2d_matrix() -> None:
    with pytest.raises(ValueError):
        multiply_matrices([1, 2], [1, 2])


def test_as_color_copies_and_validates() -> None:
    original = np.array([0.1, 0.2, 0.3])
    color = as_color(original)
    color[0] = 5.0
    assert original[0] == 0.1

    with pytest.raises(ValueError):
        as_color([0.1, 0.2])


def test_signed_power_keeps_sign() -> None:
    result = signed_power(np.array([-8.0, 0.0, 8.0]), 1.0 / 3.0)
    np.testing.assert_allclose(result, [-2.0, 0.0, 2.0])


def test_distance_squared() -> None:
    assert distance_squared([0, 0, 0], [1, 2, 2]) == pytest.approx(9.0)

    table = np.array([[0.0, 0.0, 0.0], [1.0, 1.0, 1.0], [0.5, 0.5, 0.5]])
    distances = distance_squared(table, [0.45, 0.5, 0.55])
    assert int(np.argmin(distances)) == 2

    with pytest.raises(ValueError):
        distance_squared([0, 0, 0], [0, 0])
