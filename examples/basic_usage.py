"""
Basic usage examples for csscolor.
"""

from __future__ import annotations

import numpy as np

from csscolor import (
    ColorConverter,
    ColorSpace,
    convert,
    gam_srgb,
    lin_srgb,
    lin_srgb_to_xyz,
    oklab_to_oklch,
    xyz_to_oklab,
)


def example_manual_pipeline() -> np.ndarray:
    """Chain the individual transforms: sRGB -> linear -> XYZ -> OKLab -> OKLCH."""

    srgb = np.array([0.5, 0.3, 0.8])
    oklch = oklab_to_oklch(xyz_to_oklab(lin_srgb_to_xyz(lin_srgb(srgb))))
    print(f"sRGB {srgb} -> OKLCH {np.round(oklch, 4)}")
    return oklch


def example_converter() -> np.ndarray:
    """Convert through the routing converter using CSS identifiers."""

    converter = ColorConverter()
    p3 = converter.convert([1.0, 0.0, 0.0], ColorSpace.SRGB, ColorSpace.DISPLAY_P3)
    print(f"sRGB red in display-p3: {np.round(p3, 4)}")
    return p3


def example_image() -> np.ndarray:
    """Convert a whole image at once and back."""

    img = np.random.rand(256, 256, 3)
    oklab = convert(img, "srgb", "oklab")
    restored = convert(oklab, "oklab", "srgb")
    print(f"Image round-trip max error: {np.max(np.abs(restored - img)):0.2e}")
    return oklab


def example_extended_range() -> np.ndarray:
    """Out-of-gamut values keep their sign through the transfer curves."""

    values = np.array([-0.25, 0.5, 1.25])
    encoded = gam_srgb(lin_srgb(values))
    print(f"Extended sRGB round trip: {values} -> {np.round(encoded, 6)}")
    return encoded


if __name__ == "__main__":
    print("Running csscolor basic examples...")
    example_manual_pipeline()
    example_converter()
    example_image()
    example_extended_range()
