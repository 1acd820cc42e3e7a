"""
Space-to-space color conversion pipeline.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Tuple, Union

import numpy as np
from numpy.typing import ArrayLike

from csscolor.adaptation.chromatic import d50_to_d65, d65_to_d50
from csscolor.core.config import ColorSpace, ConversionConfig
from csscolor.perceptual.lab import lab_to_lch, lab_to_xyz, lch_to_lab, xyz_to_lab
from csscolor.perceptual.oklab import oklab_to_oklch, oklab_to_xyz, oklch_to_oklab, xyz_to_oklab
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
from csscolor.utils.color import as_color

logger = logging.getLogger(__name__)

Stage = Tuple[str, Callable[[np.ndarray], np.ndarray]]
SpaceLike = Union[ColorSpace, str]


class ColorConverter:
    """
    Convert colors between any two CSS Color 4 spaces.

    Every conversion is routed through XYZ relative to D65:
        1. Source encoding -> linear light / rectangular form
        2. Linear / rectangular form -> XYZ (native white point)
        3. Chromatic adaptation to D65 (D50 spaces only)
        4. The same steps in reverse towards the target space
    """

    def __init__(self, config: Optional[ConversionConfig] = None) -> None:
        self.config = config or ConversionConfig()
        self.config.validate()

        logger.info("Initializing ColorConverter")
        logger.info("  Reject non-finite input: %s", self.config.reject_non_finite)
        logger.info("  Powerless hue: %s", self.config.powerless_hue)

        self._to_hub = self._init_to_hub()
        self._from_hub = self._init_from_hub()

    def _init_to_hub(self) -> Dict[ColorSpace, List[Stage]]:
        return {
            ColorSpace.SRGB: [("linearize sRGB", lin_srgb), ("linear sRGB -> XYZ", lin_srgb_to_xyz)],
            ColorSpace.SRGB_LINEAR: [("linear sRGB -> XYZ", lin_srgb_to_xyz)],
            ColorSpace.DISPLAY_P3: [("linearize P3", lin_p3), ("linear P3 -> XYZ", lin_p3_to_xyz)],
            ColorSpace.A98_RGB: [
                ("linearize a98-rgb", lin_a98rgb),
                ("linear a98-rgb -> XYZ", lin_a98rgb_to_xyz),
            ],
            ColorSpace.PROPHOTO_RGB: [
                ("linearize ProPhoto", lin_prophoto),
                ("linear ProPhoto -> XYZ-D50", lin_prophoto_to_xyz),
                ("D50 -> D65", d50_to_d65),
            ],
            ColorSpace.REC2020: [
                ("linearize Rec. 2020", lin_2020),
                ("linear Rec. 2020 -> XYZ", lin_2020_to_xyz),
            ],
            ColorSpace.XYZ_D65: [],
            ColorSpace.XYZ_D50: [("D50 -> D65", d50_to_d65)],
            ColorSpace.LAB: [("Lab -> XYZ-D50", lab_to_xyz), ("D50 -> D65", d50_to_d65)],
            ColorSpace.LCH: [
                ("LCH -> Lab", lch_to_lab),
                ("Lab -> XYZ-D50", lab_to_xyz),
                ("D50 -> D65", d50_to_d65),
            ],
            ColorSpace.OKLAB: [("OKLab -> XYZ", oklab_to_xyz)],
            ColorSpace.OKLCH: [("OKLCH -> OKLab", oklch_to_oklab), ("OKLab -> XYZ", oklab_to_xyz)],
        }

    def _init_from_hub(self) -> Dict[ColorSpace, List[Stage]]:
        lch_eps = self.config.lch_achromatic_epsilon
        oklch_eps = self.config.oklch_achromatic_epsilon

        return {
            ColorSpace.SRGB: [("XYZ -> linear sRGB", xyz_to_lin_srgb), ("encode sRGB", gam_srgb)],
            ColorSpace.SRGB_LINEAR: [("XYZ -> linear sRGB", xyz_to_lin_srgb)],
            ColorSpace.DISPLAY_P3: [("XYZ -> linear P3", xyz_to_lin_p3), ("encode P3", gam_p3)],
            ColorSpace.A98_RGB: [
                ("XYZ -> linear a98-rgb", xyz_to_lin_a98rgb),
                ("encode a98-rgb", gam_a98rgb),
            ],
            ColorSpace.PROPHOTO_RGB: [
                ("D65 -> D50", d65_to_d50),
                ("XYZ-D50 -> linear ProPhoto", xyz_to_lin_prophoto),
                ("encode ProPhoto", gam_prophoto),
            ],
            ColorSpace.REC2020: [
                ("XYZ -> linear Rec. 2020", xyz_to_lin_2020),
                ("encode Rec. 2020", gam_2020),
            ],
            ColorSpace.XYZ_D65: [],
            ColorSpace.XYZ_D50: [("D65 -> D50", d65_to_d50)],
            ColorSpace.LAB: [("D65 -> D50", d65_to_d50), ("XYZ-D50 -> Lab", xyz_to_lab)],
            ColorSpace.LCH: [
                ("D65 -> D50", d65_to_d50),
                ("XYZ-D50 -> Lab", xyz_to_lab),
                ("Lab -> LCH", lambda lab: lab_to_lch(lab, lch_eps)),
            ],
            ColorSpace.OKLAB: [("XYZ -> OKLab", xyz_to_oklab)],
            ColorSpace.OKLCH: [
                ("XYZ -> OKLab", xyz_to_oklab),
                ("OKLab -> OKLCH", lambda oklab: oklab_to_oklch(oklab, oklch_eps)),
            ],
        }

    def convert(self, color: ArrayLike, source: SpaceLike, target: SpaceLike) -> np.ndarray:
        """
        Convert ``color`` from ``source`` to ``target``.

        Parameters
        ----------
        color : array_like
            Color triple(s), shape (..., 3)
        source, target : ColorSpace or str
            Spaces as enum members or CSS identifiers such as ``"display-p3"``

        Returns
        -------
        np.ndarray
            Converted color(s) with the same shape as ``color``
        """

        source = ColorSpace.parse(source)
        target = ColorSpace.parse(target)
        values = self._prepare_input(color, source)

        if source == target:
            return values

        logger.debug("Converting %s -> %s: shape=%s", source.value, target.value, values.shape)
        xyz = self._run_stages(self._to_hub[source], self._release_hue(values, source))
        return self._run_stages(self._from_hub[target], xyz)

    def to_xyz_d65(self, color: ArrayLike, source: SpaceLike) -> np.ndarray:
        """Convert ``color`` from ``source`` to XYZ relative to D65."""

        source = ColorSpace.parse(source)
        values = self._prepare_input(color, source)
        return self._run_stages(self._to_hub[source], self._release_hue(values, source))

    def from_xyz_d65(self, xyz: ArrayLike, target: SpaceLike) -> np.ndarray:
        """Convert D65-relative XYZ to ``target``."""

        target = ColorSpace.parse(target)
        values = self._prepare_input(xyz, ColorSpace.XYZ_D65)
        return self._run_stages(self._from_hub[target], values)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _prepare_input(self, color: ArrayLike, space: ColorSpace) -> np.ndarray:
        values = as_color(color)

        if self.config.reject_non_finite:
            finite = np.isfinite(values)
            if space.is_polar:
                finite[..., space.hue_index] |= np.isnan(values[..., space.hue_index])
            if not finite.all():
                raise ValueError(f"Input in {space.value} contains NaN or Inf values")

        return values

    def _release_hue(self, values: np.ndarray, space: ColorSpace) -> np.ndarray:
        """Replace the achromatic NaN sentinel before leaving polar form."""

        if not space.is_polar:
            return values

        hue = values[..., space.hue_index]
        powerless = np.isnan(hue)
        if powerless.any():
            logger.debug(
                "Substituting hue %s for %d achromatic value(s)",
                self.config.powerless_hue,
                int(powerless.sum()),
            )
            values = values.copy()
            values[..., space.hue_index] = np.where(powerless, self.config.powerless_hue, hue)
        return values

    @staticmethod
    def _run_stages(stages: List[Stage], values: np.ndarray) -> np.ndarray:
        for name, stage in stages:
            logger.debug("Stage: %s", name)
            values = stage(values)
        return values


def convert(
    color: ArrayLike,
    source: SpaceLike,
    target: SpaceLike,
    config: Optional[ConversionConfig] = None,
) -> np.ndarray:
    """
    Convenience wrapper for one-off conversions.
    """

    return ColorConverter(config).convert(color, source, target)


def srgb_bytes_to_oklab(rgb: ArrayLike) -> np.ndarray:
    """
    Convert 8-bit sRGB channel values (0-255) to OKLab.

    Parameters
    ----------
    rgb : array_like
        sRGB channel values, shape (..., 3), e.g. a decoded H x W x 3 image
    """

    normalized = as_color(rgb) / 255.0
    return xyz_to_oklab(lin_srgb_to_xyz(lin_srgb(normalized)))
