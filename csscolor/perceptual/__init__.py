"""Perceptual color spaces: CIE Lab/LCH and OKLab/OKLCH."""

from csscolor.perceptual.lab import lab_to_lch, lab_to_xyz, lch_to_lab, xyz_to_lab
from csscolor.perceptual.oklab import oklab_to_oklch, oklab_to_xyz, oklch_to_oklab, xyz_to_oklab

__all__ = [
    "xyz_to_lab",
    "lab_to_xyz",
    "lab_to_lch",
    "lch_to_lab",
    "xyz_to_oklab",
    "oklab_to_xyz",
    "oklab_to_oklch",
    "oklch_to_oklab",
]
