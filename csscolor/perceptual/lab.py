"""
CIE Lab and LCH, relative to the D50 reference white.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from csscolor.adaptation.chromatic import D50
from csscolor.perceptual.polar import from_polar, to_polar
from csscolor.utils.color import as_color

EPSILON = 216.0 / 24389.0  # 6^3/29^3
KAPPA = 24389.0 / 27.0  # 29^3/3^3

LCH_ACHROMATIC_EPSILON = 0.0015


def xyz_to_lab(xyz: ArrayLike) -> np.ndarray:
    """
    Convert D50-relative CIE XYZ to CIE Lab.

    Parameters
    ----------
    xyz : array_like
        XYZ relative to D50 with Y of white = 1, shape (..., 3)

    Returns
    -------
    np.ndarray
        (L*, a*, b*), L* nominally in [0, 100]
    """

    scaled = as_color(xyz) / D50
    f = np.where(scaled > EPSILON, np.cbrt(scaled), (KAPPA * scaled + 16.0) / 116.0)

    return np.stack(
        [
            116.0 * f[..., 1] - 16.0,
            500.0 * (f[..., 0] - f[..., 1]),
            200.0 * (f[..., 1] - f[..., 2]),
        ],
        axis=-1,
    )


def lab_to_xyz(lab: ArrayLike) -> np.ndarray:
    """
    Convert CIE Lab to D50-relative CIE XYZ.

    X and Z pick their branch by comparing the cubed intermediate with
    epsilon; Y compares L* with kappa * epsilon directly.
    """

    lab = as_color(lab)
    L = lab[..., 0]

    f1 = (L + 16.0) / 116.0
    f0 = lab[..., 1] / 500.0 + f1
    f2 = f1 - lab[..., 2] / 200.0

    f0_cubed = f0**3
    f2_cubed = f2**3

    x = np.where(f0_cubed > EPSILON, f0_cubed, (116.0 * f0 - 16.0) / KAPPA)
    y = np.where(L > KAPPA * EPSILON, f1**3, L / KAPPA)
    z = np.where(f2_cubed > EPSILON, f2_cubed, (116.0 * f2 - 16.0) / KAPPA)

    return np.stack([x, y, z], axis=-1) * D50


def lab_to_lch(lab: ArrayLike, achromatic_epsilon: float = LCH_ACHROMATIC_EPSILON) -> np.ndarray:
    """Convert Lab to LCH; hue is NaN when chroma <= ``achromatic_epsilon``."""

    return to_polar(as_color(lab), achromatic_epsilon)


def lch_to_lab(lch: ArrayLike) -> np.ndarray:
    return from_polar(as_color(lch))
