"""CSS Color Module Level 4 color conversions (csscolor).

Gamma encoding, linear RGB <-> XYZ matrices, chromatic adaptation, CIE
Lab/LCH, OKLab/OKLCH and alpha premultiplication for sRGB, Display P3,
a98-rgb, ProPhoto RGB and Rec. 2020, operating on numeric color triples.
"""

from csscolor.adaptation import D50, D65, d50_to_d65, d65_to_d50
from csscolor.alpha import (
    hsl_premultiply,
    hsl_unpremultiply,
    polar_premultiply,
    polar_unpremultiply,
    rectangular_premultiply,
    rectangular_unpremultiply,
)
from csscolor.core.config import ColorSpace, ConversionConfig
from csscolor.core.pipeline import ColorConverter, convert, srgb_bytes_to_oklab
from csscolor.perceptual import (
    lab_to_lch,
    lab_to_xyz,
    lch_to_lab,
    oklab_to_oklch,
    oklab_to_xyz,
    oklch_to_oklab,
    xyz_to_lab,
    xyz_to_oklab,
)
from csscolor.spaces import (
    lin_2020_to_xyz,
    lin_a98rgb_to_xyz,
    lin_p3_to_xyz,
    lin_prophoto_to_xyz,
    lin_srgb_to_xyz,
    xyz_to_lin_2020,
    xyz_to_lin_a98rgb,
    xyz_to_lin_p3,
    xyz_to_lin_prophoto,
    xyz_to_lin_srgb,
)
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
from csscolor.utils import distance_squared, multiply_matrices

__all__ = [
    "ColorConverter",
    "ColorSpace",
    "ConversionConfig",
    "convert",
    "srgb_bytes_to_oklab",
    "D50",
    "D65",
    "multiply_matrices",
    "distance_squared",
    "lin_srgb",
    "gam_srgb",
    "lin_p3",
    "gam_p3",
    "lin_prophoto",
    "gam_prophoto",
    "lin_a98rgb",
    "gam_a98rgb",
    "lin_2020",
    "gam_2020",
    "lin_srgb_to_xyz",
    "xyz_to_lin_srgb",
    "lin_p3_to_xyz",
    "xyz_to_lin_p3",
    "lin_prophoto_to_xyz",
    "xyz_to_lin_prophoto",
    "lin_a98rgb_to_xyz",
    "xyz_to_lin_a98rgb",
    "lin_2020_to_xyz",
    "xyz_to_lin_2020",
    "d65_to_d50",
    "d50_to_d65",
    "xyz_to_lab",
    "lab_to_xyz",
    "lab_to_lch",
    "lch_to_lab",
    "xyz_to_oklab",
    "oklab_to_xyz",
    "oklab_to_oklch",
    "oklch_to_oklab",
    "rectangular_premultiply",
    "rectangular_unpremultiply",
    "polar_premultiply",
    "polar_unpremultiply",
    "hsl_premultiply",
    "hsl_unpremultiply",
]

try:  # Optional PyTorch acceleration
    from csscolor.torch import TorchColorTransform  # type: ignore

    __all__.append("TorchColorTransform")
except Exception:  # pragma: no cover - torch not installed
    TorchColorTransform = None  # type: ignore

__version__ = "1.0.0"
