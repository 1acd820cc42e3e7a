"""
Advanced csscolor usage scenarios.
"""

from __future__ import annotations

import logging

import numpy as np

from csscolor import (
    ColorConverter,
    ConversionConfig,
    distance_squared,
    polar_premultiply,
    polar_unpremultiply,
    srgb_bytes_to_oklab,
)


def example_nearest_color() -> str:
    """Pick the perceptually closest entry of a small palette in OKLab."""

    palette = {
        "tomato": [255, 99, 71],
        "gold": [255, 215, 0],
        "teal": [0, 128, 128],
        "slateblue": [106, 90, 205],
    }
    sample = [240, 110, 80]

    names = list(palette)
    distances = distance_squared(
        srgb_bytes_to_oklab([palette[name] for name in names]),
        srgb_bytes_to_oklab(sample),
    )
    best = names[int(np.argmin(distances))]
    print(f"Nearest palette color to {sample}: {best}")
    return best


def example_premultiplied_midpoint() -> np.ndarray:
    """Midpoint of two translucent OKLCH colors in premultiplied form."""

    converter = ColorConverter()
    a = converter.convert([0.9, 0.2, 0.1], "srgb", "oklch")
    b = converter.convert([0.1, 0.3, 0.9], "srgb", "oklch")
    alpha_a, alpha_b = 0.8, 0.4

    premul_a = polar_premultiply(a, alpha_a, 2)
    premul_b = polar_premultiply(b, alpha_b, 2)
    alpha = 0.5 * (alpha_a + alpha_b)
    mid = polar_unpremultiply(0.5 * (premul_a + premul_b), alpha, 2)
    print(f"Premultiplied OKLCH midpoint: {np.round(mid, 4)} (alpha {alpha})")
    return mid


def example_custom_configuration() -> np.ndarray:
    """Keep NaN inputs flowing and use a custom hue for achromatic colors."""

    config = ConversionConfig(reject_non_finite=False, powerless_hue=120.0)
    converter = ColorConverter(config)
    lab = converter.convert([[60.0, 0.0, np.nan], [60.0, 20.0, 120.0]], "lch", "lab")
    print(f"LCH -> Lab with powerless hue 120: {np.round(lab, 4)}")
    return lab


def example_torch_transform():
    """Demonstrate the PyTorch transforms (requires torch)."""
    try:
        import torch
        from csscolor.torch import TorchColorTransform  # type: ignore
    except Exception:  # pragma: no cover - torch optional
        print("PyTorch is not available; skipping GPU example.")
        return None

    device = torch.device("cuda" if torch.cuda.is_available() else "cpu")
    transform = TorchColorTransform(device=device)
    img = torch.rand(256, 256, 3, dtype=torch.float64, device=device)
    oklch = transform.convert(img, "srgb", "oklch")
    print(f"Torch OKLCH on {device}: max chroma={oklch[..., 1].max():0.3f}")
    return oklch


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    print("Running csscolor advanced examples...")
    example_nearest_color()
    example_premultiplied_midpoint()
    example_custom_configuration()
    example_torch_transform()
