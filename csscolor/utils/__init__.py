"""Numeric helpers."""

from csscolor.utils.color import as_color, distance_squared, signed_power
from csscolor.utils.matrix import multiply_matrices

__all__ = [
    "as_color",
    "distance_squared",
    "multiply_matrices",
    "signed_power",
]
