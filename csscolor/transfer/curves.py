"""
Transfer functions (gamma decode/encode) of the CSS Color 4 RGB spaces.

Every curve is the "extended" variant: it works on the magnitude of each
channel and reapplies the sign, so out-of-gamut negative values survive a
round trip.

The curves act per channel but take whole colors: inputs must have shape
(..., 3), a single triple or a stack of triples. Scalars and other channel
counts raise ``ValueError``.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from csscolor.utils.color import as_color, signed_power

# Rec. 2020 curve parameters (ITU-R BT.2020, 12-bit precision)
REC2020_ALPHA = 1.09929682680944
REC2020_BETA = 0.018053968510807

# ProPhoto linear segment limits
PROPHOTO_ET = 1.0 / 512.0
PROPHOTO_ET2 = 16.0 / 512.0

A98_GAMMA = 563.0 / 256.0


def lin_srgb(rgb: ArrayLike) -> np.ndarray:
    """
    Convert gamma-encoded sRGB to linear light.

    Parameters
    ----------
    rgb : array_like
        sRGB values, in-gamut range [0, 1], shape (..., 3)

    Raises
    ------
    ValueError
        If the last axis of ``rgb`` does not hold exactly 3 channels.
    """

    v = as_color(rgb)
    a = np.abs(v)
    return np.where(a <= 0.04045, v / 12.92, np.sign(v) * np.power((a + 0.055) / 1.055, 2.4))


def gam_srgb(rgb: ArrayLike) -> np.ndarray:
    """Convert linear-light sRGB to gamma-encoded form."""

    v = as_color(rgb)
    a = np.abs(v)
    return np.where(
        a > 0.0031308,
        np.sign(v) * (1.055 * np.power(a, 1.0 / 2.4) - 0.055),
        12.92 * v,
    )


def lin_p3(rgb: ArrayLike) -> np.ndarray:
    """Display P3 shares the sRGB transfer curve."""

    return lin_srgb(rgb)


def gam_p3(rgb: ArrayLike) -> np.ndarray:
    """Display P3 shares the sRGB transfer curve."""

    return gam_srgb(rgb)


def lin_prophoto(rgb: ArrayLike) -> np.ndarray:
    """Convert gamma-encoded ProPhoto RGB to linear light (gamma 1.8)."""

    v = as_color(rgb)
    a = np.abs(v)
    return np.where(a <= PROPHOTO_ET2, v / 16.0, np.sign(v) * np.power(a, 1.8))


def gam_prophoto(rgb: ArrayLike) -> np.ndarray:
    """Convert linear-light ProPhoto RGB to gamma-encoded form."""

    v = as_color(rgb)
    a = np.abs(v)
    return np.where(a >= PROPHOTO_ET, np.sign(v) * np.power(a, 1.0 / 1.8), 16.0 * v)


def lin_a98rgb(rgb: ArrayLike) -> np.ndarray:
    """Adobe RGB (a98-rgb): pure power law with no linear segment."""

    return signed_power(as_color(rgb), A98_GAMMA)


def gam_a98rgb(rgb: ArrayLike) -> np.ndarray:
    return signed_power(as_color(rgb), 1.0 / A98_GAMMA)


def lin_2020(rgb: ArrayLike) -> np.ndarray:
    """Convert gamma-encoded Rec. 2020 to linear light."""

    v = as_color(rgb)
    a = np.abs(v)
    return np.where(
        a < REC2020_BETA * 4.5,
        v / 4.5,
        np.sign(v) * np.power((a + REC2020_ALPHA - 1.0) / REC2020_ALPHA, 1.0 / 0.45),
    )


def gam_2020(rgb: ArrayLike) -> np.ndarray:
    """Convert linear-light Rec. 2020 to gamma-encoded form."""

    v = as_color(rgb)
    a = np.abs(v)
    return np.where(
        a > REC2020_BETA,
        np.sign(v) * (REC2020_ALPHA * np.power(a, 0.45) - (REC2020_ALPHA - 1.0)),
        4.5 * v,
    )
