"""Chromatic adaptation and reference whites."""

from csscolor.adaptation.chromatic import D50, D65, d50_to_d65, d65_to_d50

__all__ = [
    "D50",
    "D65",
    "d65_to_d50",
    "d50_to_d65",
]
