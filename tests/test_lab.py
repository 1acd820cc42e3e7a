"""
Tests for CIE Lab and LCH.
"""

from __future__ import annotations

import numpy as np

from csscolor.adaptation import D50
from csscolor.perceptual.lab import EPSILON, KAPPA, lab_to_lch, lab_to_xyz, lch_to_lab, xyz_to_lab


def test_d50_white_is_lab_100() -> None:
    np.testing.assert_allclose(xyz_to_lab(D50), [100.0, 0.0, 0.0], atol=1e-9)


def test_lightness_in_range() -> None:
    lab = xyz_to_lab([0.5, 0.6, 0.7])
    assert 0.0 <= lab[0] <= 100.0


def test_lab_roundtrip() -> None:
    xyz = np.array([0.5, 0.6, 0.7])
    np.testing.assert_allclose(lab_to_xyz(xyz_to_lab(xyz)), xyz, atol=1e-4)


def test_lab_roundtrip_dark_colors() -> None:
    xyz = np.array([[0.001, 0.002, 0.003], [0.0, 0.0, 0.0]])
    np.testing.assert_allclose(lab_to_xyz(xyz_to_lab(xyz)), xyz, atol=1e-6)


def test_lab_to_xyz_luminance_branch_uses_lightness() -> None:
    # L below kappa * epsilon takes the linear branch for Y
    L = 5.0
    assert L < KAPPA * EPSILON
    xyz = lab_to_xyz([L, 0.0, 0.0])
    np.testing.assert_allclose(xyz[1], L / KAPPA * D50[1])


def test_lch_preserves_lightness_and_ranges() -> None:
    lch = lab_to_lch([50, 25, -50])
    assert lch[0] == 50
    assert lch[1] >= 0
    assert 0 <= lch[2] < 360
    np.testing.assert_allclose(lch[1], np.hypot(25, -50))
    np.testing.assert_allclose(lch[2], 360.0 + np.degrees(np.arctan2(-50, 25)))


def test_lch_roundtrip() -> None:
    lab = np.array([50, 25, -50])
    np.testing.assert_allclose(lch_to_lab(lab_to_lch(lab)), lab, atol=1e-4)


def test_achromatic_hue_is_nan() -> None:
    assert np.isnan(lab_to_lch([50, 0, 0])[2])
    assert np.isnan(lab_to_lch([50, 0.001, -0.001])[2])
    assert not np.isnan(lab_to_lch([50, 0.002, 0.0])[2])


def test_achromatic_epsilon_override() -> None:
    assert np.isnan(lab_to_lch([50, 0.002, 0.0], achromatic_epsilon=0.01)[2])


def test_nan_hue_propagates_to_lab() -> None:
    lab = lch_to_lab([50, 0, np.nan])
    assert lab[0] == 50
    assert np.isnan(lab[1]) and np.isnan(lab[2])


def test_lch_stack() -> None:
    lab = np.array([[60.0, 10.0, 10.0], [40.0, -10.0, 0.0], [70.0, 0.0, 0.0]])
    lch = lab_to_lch(lab)
    np.testing.assert_allclose(lch[:2, 2], [45.0, 180.0])
    assert np.isnan(lch[2, 2])


def test_hue_just_below_zero_wraps_to_zero() -> None:
    # atan2 gives a tiny negative angle; adding 360 rounds to exactly 360
    lch = lab_to_lch([50.0, 1.0, -1e-300])
    assert lch[2] == 0.0
    assert 0.0 <= lch[2] < 360.0
