"""
Configuration primitives for csscolor.

Defines the enum of supported color spaces and a dataclass collecting the
tunable parameters of :class:`~csscolor.core.pipeline.ColorConverter`.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import numpy as np

from csscolor.perceptual.lab import LCH_ACHROMATIC_EPSILON
from csscolor.perceptual.oklab import OKLCH_ACHROMATIC_EPSILON


class ColorSpace(Enum):
    """CSS Color 4 color spaces, keyed by their CSS identifiers."""

    SRGB = "srgb"
    SRGB_LINEAR = "srgb-linear"
    DISPLAY_P3 = "display-p3"
    A98_RGB = "a98-rgb"
    PROPHOTO_RGB = "prophoto-rgb"
    REC2020 = "rec2020"
    XYZ_D65 = "xyz-d65"
    XYZ_D50 = "xyz-d50"
    LAB = "lab"        # CIE Lab, D50
    LCH = "lch"        # polar CIE Lab
    OKLAB = "oklab"
    OKLCH = "oklch"    # polar OKLab

    @classmethod
    def parse(cls, space: Union["ColorSpace", str]) -> "ColorSpace":
        """Accept an enum member or its CSS identifier (case-insensitive)."""

        if isinstance(space, cls):
            return space
        try:
            return cls(str(space).lower())
        except ValueError:
            raise ValueError(f"Unknown color space: {space!r}") from None

    @property
    def is_polar(self) -> bool:
        return self in (ColorSpace.LCH, ColorSpace.OKLCH)

    @property
    def hue_index(self) -> Optional[int]:
        """Channel holding the hue angle, or None for rectangular spaces."""

        return 2 if self.is_polar else None


@dataclass(frozen=True)
class ConversionConfig:
    """
    Parameters for space-to-space conversion.

    All parameters default to CSS Color 4 behaviour.
    """

    # Input policy
    reject_non_finite: bool = True  # NaN hue of polar inputs is always accepted
    powerless_hue: float = 0.0  # degrees, used in place of a NaN hue

    # Achromatic thresholds for polar outputs
    lch_achromatic_epsilon: float = LCH_ACHROMATIC_EPSILON
    oklch_achromatic_epsilon: float = OKLCH_ACHROMATIC_EPSILON

    def validate(self) -> None:
        """Validate configuration parameters."""

        if not np.isfinite(self.powerless_hue):
            raise ValueError(f"Powerless hue {self.powerless_hue} must be finite")

        for name in ("lch_achromatic_epsilon", "oklch_achromatic_epsilon"):
            value = getattr(self, name)
            if not (np.isfinite(value) and value >= 0):
                raise ValueError(f"{name} {value} must be finite and non-negative")
