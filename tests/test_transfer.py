"""
Tests for the per-space transfer functions.
"""

from __future__ import annotations

import numpy as np
import pytest

from csscolor.transfer import (
    gam_2020,
    gam_a98rgb,
    gam_p3,
    gam_prophoto,
    gam_srgb,
    lin_2020,
    lin_a98rgb,
    lin_p3,
    lin_prophoto,
    lin_srgb,
)

CURVES = [
    (lin_srgb, gam_srgb),
    (lin_p3, gam_p3),
    (lin_prophoto, gam_prophoto),
    (lin_a98rgb, gam_a98rgb),
    (lin_2020, gam_2020),
]

# Includes negative and > 1 (extended range) values
SAMPLES = np.linspace(-1.5, 1.5, 30).reshape(10, 3)


def test_lin_srgb_known_values() -> None:
    np.testing.assert_allclose(lin_srgb([0, 0, 0]), [0, 0, 0], atol=1e-4)
    np.testing.assert_allclose(lin_srgb([1, 1, 1]), [1, 1, 1], atol=1e-4)
    np.testing.assert_allclose(lin_srgb([0.5, 0.5, 0.5]), [0.2140, 0.2140, 0.2140], atol=1e-4)


def test_lin_srgb_negative_values() -> None:
    np.testing.assert_allclose(lin_srgb([-0.5, 0, 0.5]), [-0.2140, 0, 0.2140], atol=1e-4)


def test_lin_srgb_linear_segment() -> None:
    np.testing.assert_allclose(lin_srgb([0.04, -0.04, 0.0]), [0.04 / 12.92, -0.04 / 12.92, 0.0])


def test_p3_uses_srgb_curve() -> None:
    np.testing.assert_allclose(lin_p3([0.5, 0.5, 0.5]), [0.2140, 0.2140, 0.2140], atol=1e-4)
    np.testing.assert_array_equal(gam_p3(SAMPLES), gam_srgb(SAMPLES))


def test_prophoto_black_and_linear_segment() -> None:
    np.testing.assert_allclose(lin_prophoto([0, 0, 0]), [0, 0, 0])
    np.testing.assert_allclose(lin_prophoto([0.01, 0.02, 0.03]), [0.01 / 16, 0.02 / 16, 0.03 / 16])


def test_a98rgb_power_law() -> None:
    result = lin_a98rgb([-0.5, 0.25, 1.0])
    expected = [-(0.5 ** (563 / 256)), 0.25 ** (563 / 256), 1.0]
    np.testing.assert_allclose(result, expected)


def test_rec2020_linear_segment() -> None:
    np.testing.assert_allclose(lin_2020([0.045, -0.045, 0.0]), [0.01, -0.01, 0.0])
    np.testing.assert_allclose(gam_2020([0.01, -0.01, 0.0]), [0.045, -0.045, 0.0])


@pytest.mark.parametrize("linearize, encode", CURVES)
def test_encode_inverts_linearize(linearize, encode) -> None:
    np.testing.assert_allclose(encode(linearize(SAMPLES)), SAMPLES, atol=1e-4)


@pytest.mark.parametrize("linearize, encode", CURVES)
def test_linearize_inverts_encode(linearize, encode) -> None:
    np.testing.assert_allclose(linearize(encode(SAMPLES)), SAMPLES, atol=1e-4)


@pytest.mark.parametrize("linearize, encode", CURVES)
def test_curves_are_odd_functions(linearize, encode) -> None:
    np.testing.assert_allclose(linearize(-SAMPLES), -linearize(SAMPLES))
    np.testing.assert_allclose(encode(-SAMPLES), -encode(SAMPLES))


def test_srgb_extremes_roundtrip() -> None:
    np.testing.assert_allclose(gam_srgb(lin_srgb([0.001] * 3)), [0.001] * 3, atol=1e-4)
    np.testing.assert_allclose(gam_srgb(lin_srgb([0.999] * 3)), [0.999] * 3, atol=1e-3)


def test_transfer_preserves_image_shape() -> None:
    img = np.random.default_rng(0).random((8, 6, 3))
    assert lin_srgb(img).shape == img.shape
    assert gam_2020(img).shape == img.shape


@pytest.mark.parametrize("linearize, encode", CURVES)
def test_curves_require_color_triples(linearize, encode) -> None:
    with pytest.raises(ValueError):
        linearize(0.5)
    with pytest.raises(ValueError):
        encode([0.5])
