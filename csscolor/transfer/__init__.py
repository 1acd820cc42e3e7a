"""Per-space transfer functions."""

from csscolor.transfer.curves import (
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

__all__ = [
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
]
