"""
Premultiplied alpha conversions used when interpolating colors.

Rectangular encodings (RGB, Lab, OKLab) scale every channel by alpha. Polar
encodings (LCH, OKLCH, HSL) leave the hue channel alone. Un-premultiplying
with alpha == 0 returns the input values unchanged instead of dividing by
zero.

``alpha`` may be a scalar or an array matching the leading axes of
``color`` (for example an H x W alpha mask for an H x W x 3 image).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from csscolor.utils.color import as_color


def _channel_alpha(alpha: ArrayLike) -> np.ndarray:
    return np.asarray(alpha, dtype=np.float64)[..., np.newaxis]


def _safe_alpha(alpha: ArrayLike) -> np.ndarray:
    a = _channel_alpha(alpha)
    return np.where(a == 0.0, 1.0, a)


def _hue_preserving(factors: np.ndarray, shape, hue_index: int) -> np.ndarray:
    full = np.array(np.broadcast_to(factors, shape))
    full[..., hue_index] = 1.0
    return full


def rectangular_premultiply(color: ArrayLike, alpha: ArrayLike) -> np.ndarray:
    """Multiply every channel by ``alpha``."""

    return as_color(color) * _channel_alpha(alpha)


def rectangular_unpremultiply(color: ArrayLike, alpha: ArrayLike) -> np.ndarray:
    """Divide every channel by ``alpha``; alpha == 0 leaves the color as is."""

    return as_color(color) / _safe_alpha(alpha)


def polar_premultiply(color: ArrayLike, alpha: ArrayLike, hue_index: int) -> np.ndarray:
    """
    Multiply every channel except ``hue_index`` by ``alpha``.

    Raises
    ------
    IndexError
        If ``hue_index`` does not address one of the three channels.
    """

    c = as_color(color)
    return c * _hue_preserving(_channel_alpha(alpha), c.shape, hue_index)


def polar_unpremultiply(color: ArrayLike, alpha: ArrayLike, hue_index: int) -> np.ndarray:
    """Inverse of :func:`polar_premultiply`; alpha == 0 leaves the color as is."""

    c = as_color(color)
    return c / _hue_preserving(_safe_alpha(alpha), c.shape, hue_index)


def hsl_premultiply(color: ArrayLike, alpha: ArrayLike) -> np.ndarray:
    """HSL stores hue first."""

    return polar_premultiply(color, alpha, 0)


def hsl_unpremultiply(color: ArrayLike, alpha: ArrayLike) -> np.ndarray:
    return polar_unpremultiply(color, alpha, 0)
