"""
Tests for OKLab and OKLCH.
"""

from __future__ import annotations

import numpy as np

from csscolor.adaptation import D65
from csscolor.perceptual.oklab import oklab_to_oklch, oklab_to_xyz, oklch_to_oklab, xyz_to_oklab


def test_lightness_in_range() -> None:
    oklab = xyz_to_oklab([0.4, 0.5, 0.6])
    assert 0.0 <= oklab[0] <= 1.0


def test_d65_white() -> None:
    np.testing.assert_allclose(xyz_to_oklab(D65), [1.0, 0.0, 0.0], atol=1e-4)


def test_oklab_roundtrip() -> None:
    xyz = np.array([0.4, 0.5, 0.6])
    np.testing.assert_allclose(oklab_to_xyz(xyz_to_oklab(xyz)), xyz, atol=1e-4)


def test_negative_lms_stays_real() -> None:
    xyz = np.array([-0.1, 0.05, 0.2])
    oklab = xyz_to_oklab(xyz)
    assert np.isfinite(oklab).all()
    np.testing.assert_allclose(oklab_to_xyz(oklab), xyz, atol=1e-4)


def test_oklch_preserves_lightness() -> None:
    oklab = np.array([0.5, 0.1, -0.05])
    oklch = oklab_to_oklch(oklab)
    assert oklch[0] == 0.5
    assert oklch[1] >= 0
    assert 0 <= oklch[2] < 360


def test_oklch_roundtrip() -> None:
    oklab = np.array([0.5, 0.1, -0.05])
    np.testing.assert_allclose(oklch_to_oklab(oklab_to_oklch(oklab)), oklab, atol=1e-4)


def test_achromatic_threshold() -> None:
    assert np.isnan(oklab_to_oklch([0.5, 0.000002, 0.000002])[2])
    assert not np.isnan(oklab_to_oklch([0.5, 0.00001, 0.0])[2])


def test_oklab_image_shape() -> None:
    xyz = np.random.default_rng(1).random((4, 4, 3))
    oklab = xyz_to_oklab(xyz)
    assert oklab.shape == xyz.shape
    np.testing.assert_allclose(oklab_to_xyz(oklab), xyz, atol=1e-4)


def test_hue_just_below_zero_wraps_to_zero() -> None:
    oklch = oklab_to_oklch([0.5, 0.1, -1e-300])
    assert oklch[2] == 0.0
