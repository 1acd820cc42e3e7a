"""Alpha premultiplication helpers."""

from csscolor.alpha.premultiply import (
    hsl_premultiply,
    hsl_unpremultiply,
    polar_premultiply,
    polar_unpremultiply,
    rectangular_premultiply,
    rectangular_unpremultiply,
)

__all__ = [
    "rectangular_premultiply",
    "rectangular_unpremultiply",
    "polar_premultiply",
    "polar_unpremultiply",
    "hsl_premultiply",
    "hsl_unpremultiply",
]
