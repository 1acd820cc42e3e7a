"""
Rectangular <-> polar form shared by LCH and OKLCH.
"""

from __future__ import annotations

import numpy as np


def to_polar(color: np.ndarray, achromatic_epsilon: float) -> np.ndarray:
    """
    Convert (L, a, b) to (L, C, H) with H in degrees in [0, 360).

    H is NaN when C <= ``achromatic_epsilon``; downstream interpolation
    treats that as "no hue".
    """

    a = color[..., 1]
    b = color[..., 2]
    chroma = np.hypot(a, b)
    hue = np.degrees(np.arctan2(b, a))
    hue = np.where(hue < 0, hue + 360.0, hue)
    # tiny negative angles can round up to exactly 360
    hue = np.where(hue >= 360.0, hue - 360.0, hue)
    hue = np.where(chroma <= achromatic_epsilon, np.nan, hue)
    return np.stack([color[..., 0], chroma, hue], axis=-1)


def from_polar(color: np.ndarray) -> np.ndarray:
    """Convert (L, C, H) back to (L, a, b). A NaN hue yields NaN a and b."""

    chroma = color[..., 1]
    hue = np.radians(color[..., 2])
    return np.stack([color[..., 0], chroma * np.cos(hue), chroma * np.sin(hue)], axis=-1)
