"""Linear RGB to XYZ transforms."""

from csscolor.spaces.rgb import (
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

__all__ = [
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
]
