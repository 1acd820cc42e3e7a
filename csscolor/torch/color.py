"""
Color space transforms implemented with torch tensors.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, List, Optional, Union

import numpy as np
import torch

from csscolor.adaptation import chromatic
from csscolor.core.config import ColorSpace, ConversionConfig
from csscolor.perceptual import oklab
from csscolor.perceptual.lab import EPSILON, KAPPA, LCH_ACHROMATIC_EPSILON
from csscolor.perceptual.oklab import OKLCH_ACHROMATIC_EPSILON
from csscolor.spaces import rgb
from csscolor.torch.common import ensure_color_tensor, signed_pow
from csscolor.transfer.curves import A98_GAMMA, PROPHOTO_ET, PROPHOTO_ET2, REC2020_ALPHA, REC2020_BETA

_MATRICES: Dict[str, np.ndarray] = {
    "lin_srgb_to_xyz": rgb.LIN_SRGB_TO_XYZ,
    "xyz_to_lin_srgb": rgb.XYZ_TO_LIN_SRGB,
    "lin_p3_to_xyz": rgb.LIN_P3_TO_XYZ,
    "xyz_to_lin_p3": rgb.XYZ_TO_LIN_P3,
    "lin_prophoto_to_xyz": rgb.LIN_PROPHOTO_TO_XYZ,
    "xyz_to_lin_prophoto": rgb.XYZ_TO_LIN_PROPHOTO,
    "lin_a98rgb_to_xyz": rgb.LIN_A98RGB_TO_XYZ,
    "xyz_to_lin_a98rgb": rgb.XYZ_TO_LIN_A98RGB,
    "lin_2020_to_xyz": rgb.LIN_2020_TO_XYZ,
    "xyz_to_lin_2020": rgb.XYZ_TO_LIN_2020,
    "d65_to_d50": chromatic.D65_TO_D50,
    "d50_to_d65": chromatic.D50_TO_D65,
    "xyz_to_lms": oklab.XYZ_TO_LMS,
    "lms_to_oklab": oklab.LMS_TO_OKLAB,
    "oklab_to_lms": oklab.OKLAB_TO_LMS,
    "lms_to_xyz": oklab.LMS_TO_XYZ,
}


class TorchColorTransform:
    """
    Torch equivalent of the numpy conversion functions (channel-last tensors).

    The individual transforms only check the channel count. ``convert``,
    ``to_xyz_d65`` and ``from_xyz_d65`` apply the same
    :class:`~csscolor.core.config.ConversionConfig` policy as
    :class:`~csscolor.core.pipeline.ColorConverter`.
    """

    def __init__(
        self,
        device: torch.device = torch.device("cpu"),
        dtype: torch.dtype = torch.float64,
        config: Optional[ConversionConfig] = None,
    ) -> None:
        self.device = device
        self.dtype = dtype
        self.config = config or ConversionConfig()
        self.config.validate()

        self.matrices = {
            name: torch.tensor(np.array(matrix), dtype=dtype, device=device)
            for name, matrix in _MATRICES.items()
        }
        self.d50 = torch.tensor(np.array(chromatic.D50), dtype=dtype, device=device)

    def _tensor(self, data) -> torch.Tensor:
        return ensure_color_tensor(data, device=self.device, dtype=self.dtype)

    def _matmul(self, name: str, values) -> torch.Tensor:
        """
        Multiply a named 3x3 matrix with tensor(s) of shape (..., 3).
        """

        return torch.matmul(self._tensor(values), self.matrices[name].T)

    # ------------------------------------------------------------------
    # Transfer functions
    # ------------------------------------------------------------------

    def lin_srgb(self, values) -> torch.Tensor:
        v = self._tensor(values)
        a = torch.abs(v)
        return torch.where(a <= 0.04045, v / 12.92, torch.sign(v) * torch.pow((a + 0.055) / 1.055, 2.4))

    def gam_srgb(self, values) -> torch.Tensor:
        v = self._tensor(values)
        a = torch.abs(v)
        return torch.where(a > 0.0031308, torch.sign(v) * (1.055 * torch.pow(a, 1.0 / 2.4) - 0.055), 12.92 * v)

    lin_p3 = lin_srgb
    gam_p3 = gam_srgb

    def lin_prophoto(self, values) -> torch.Tensor:
        v = self._tensor(values)
        return torch.where(torch.abs(v) <= PROPHOTO_ET2, v / 16.0, signed_pow(v, 1.8))

    def gam_prophoto(self, values) -> torch.Tensor:
        v = self._tensor(values)
        return torch.where(torch.abs(v) >= PROPHOTO_ET, signed_pow(v, 1.0 / 1.8), 16.0 * v)

    def lin_a98rgb(self, values) -> torch.Tensor:
        return signed_pow(self._tensor(values), A98_GAMMA)

    def gam_a98rgb(self, values) -> torch.Tensor:
        return signed_pow(self._tensor(values), 1.0 / A98_GAMMA)

    def lin_2020(self, values) -> torch.Tensor:
        v = self._tensor(values)
        a = torch.abs(v)
        curve = torch.sign(v) * torch.pow((a + REC2020_ALPHA - 1.0) / REC2020_ALPHA, 1.0 / 0.45)
        return torch.where(a < REC2020_BETA * 4.5, v / 4.5, curve)

    def gam_2020(self, values) -> torch.Tensor:
        v = self._tensor(values)
        a = torch.abs(v)
        curve = torch.sign(v) * (REC2020_ALPHA * torch.pow(a, 0.45) - (REC2020_ALPHA - 1.0))
        return torch.where(a > REC2020_BETA, curve, 4.5 * v)

    # ------------------------------------------------------------------
    # Linear RGB <-> XYZ and chromatic adaptation
    # ------------------------------------------------------------------

    def lin_srgb_to_xyz(self, values) -> torch.Tensor:
        return self._matmul("lin_srgb_to_xyz", values)

    def xyz_to_lin_srgb(self, values) -> torch.Tensor:
        return self._matmul("xyz_to_lin_srgb", values)

    def lin_p3_to_xyz(self, values) -> torch.Tensor:
        return self._matmul("lin_p3_to_xyz", values)

    def xyz_to_lin_p3(self, values) -> torch.Tensor:
        return self._matmul("xyz_to_lin_p3", values)

    def lin_prophoto_to_xyz(self, values) -> torch.Tensor:
        return self._matmul("lin_prophoto_to_xyz", values)

    def xyz_to_lin_prophoto(self, values) -> torch.Tensor:
        return self._matmul("xyz_to_lin_prophoto", values)

    def lin_a98rgb_to_xyz(self, values) -> torch.Tensor:
        return self._matmul("lin_a98rgb_to_xyz", values)

    def xyz_to_lin_a98rgb(self, values) -> torch.Tensor:
        return self._matmul("xyz_to_lin_a98rgb", values)

    def lin_2020_to_xyz(self, values) -> torch.Tensor:
        return self._matmul("lin_2020_to_xyz", values)

    def xyz_to_lin_2020(self, values) -> torch.Tensor:
        return self._matmul("xyz_to_lin_2020", values)

    def d65_to_d50(self, values) -> torch.Tensor:
        return self._matmul("d65_to_d50", values)

    def d50_to_d65(self, values) -> torch.Tensor:
        return self._matmul("d50_to_d65", values)

    # ------------------------------------------------------------------
    # Lab / LCH and OKLab / OKLCH
    # ------------------------------------------------------------------

    def xyz_to_lab(self, values) -> torch.Tensor:
        scaled = self._tensor(values) / self.d50
        f = torch.where(scaled > EPSILON, signed_pow(scaled, 1.0 / 3.0), (KAPPA * scaled + 16.0) / 116.0)
        return torch.stack(
            [
                116.0 * f[..., 1] - 16.0,
                500.0 * (f[..., 0] - f[..., 1]),
                200.0 * (f[..., 1] - f[..., 2]),
            ],
            dim=-1,
        )

    def lab_to_xyz(self, values) -> torch.Tensor:
        lab = self._tensor(values)
        L = lab[..., 0]
        f1 = (L + 16.0) / 116.0
        f0 = lab[..., 1] / 500.0 + f1
        f2 = f1 - lab[..., 2] / 200.0

        x = torch.where(f0**3 > EPSILON, f0**3, (116.0 * f0 - 16.0) / KAPPA)
        y = torch.where(L > KAPPA * EPSILON, f1**3, L / KAPPA)
        z = torch.where(f2**3 > EPSILON, f2**3, (116.0 * f2 - 16.0) / KAPPA)
        return torch.stack([x, y, z], dim=-1) * self.d50

    def _to_polar(self, values, achromatic_epsilon: float) -> torch.Tensor:
        color = self._tensor(values)
        chroma = torch.hypot(color[..., 1], color[..., 2])
        hue = torch.rad2deg(torch.atan2(color[..., 2], color[..., 1]))
        hue = torch.where(hue < 0, hue + 360.0, hue)
        hue = torch.where(hue >= 360.0, hue - 360.0, hue)
        hue = torch.where(chroma <= achromatic_epsilon, torch.full_like(hue, math.nan), hue)
        return torch.stack([color[..., 0], chroma, hue], dim=-1)

    def _from_polar(self, values) -> torch.Tensor:
        color = self._tensor(values)
        hue = torch.deg2rad(color[..., 2])
        return torch.stack(
            [color[..., 0], color[..., 1] * torch.cos(hue), color[..., 1] * torch.sin(hue)],
            dim=-1,
        )

    def lab_to_lch(self, values, achromatic_epsilon: float = LCH_ACHROMATIC_EPSILON) -> torch.Tensor:
        return self._to_polar(values, achromatic_epsilon)

    def lch_to_lab(self, values) -> torch.Tensor:
        return self._from_polar(values)

    def xyz_to_oklab(self, values) -> torch.Tensor:
        lms = self._matmul("xyz_to_lms", values)
        return self._matmul("lms_to_oklab", signed_pow(lms, 1.0 / 3.0))

    def oklab_to_xyz(self, values) -> torch.Tensor:
        lms_nonlinear = self._matmul("oklab_to_lms", values)
        return self._matmul("lms_to_xyz", lms_nonlinear**3)

    def oklab_to_oklch(self, values, achromatic_epsilon: float = OKLCH_ACHROMATIC_EPSILON) -> torch.Tensor:
        return self._to_polar(values, achromatic_epsilon)

    def oklch_to_oklab(self, values) -> torch.Tensor:
        return self._from_polar(values)

    # ------------------------------------------------------------------
    # Space-to-space routing through XYZ-D65
    # ------------------------------------------------------------------

    def _route_to_hub(self, space: ColorSpace) -> List[Callable]:
        return {
            ColorSpace.SRGB: [self.lin_srgb, self.lin_srgb_to_xyz],
            ColorSpace.SRGB_LINEAR: [self.lin_srgb_to_xyz],
            ColorSpace.DISPLAY_P3: [self.lin_p3, self.lin_p3_to_xyz],
            ColorSpace.A98_RGB: [self.lin_a98rgb, self.lin_a98rgb_to_xyz],
            ColorSpace.PROPHOTO_RGB: [self.lin_prophoto, self.lin_prophoto_to_xyz, self.d50_to_d65],
            ColorSpace.REC2020: [self.lin_2020, self.lin_2020_to_xyz],
            ColorSpace.XYZ_D65: [],
            ColorSpace.XYZ_D50: [self.d50_to_d65],
            ColorSpace.LAB: [self.lab_to_xyz, self.d50_to_d65],
            ColorSpace.LCH: [self.lch_to_lab, self.lab_to_xyz, self.d50_to_d65],
            ColorSpace.OKLAB: [self.oklab_to_xyz],
            ColorSpace.OKLCH: [self.oklch_to_oklab, self.oklab_to_xyz],
        }[space]

    def _route_from_hub(self, space: ColorSpace) -> List[Callable]:
        return {
            ColorSpace.SRGB: [self.xyz_to_lin_srgb, self.gam_srgb],
            ColorSpace.SRGB_LINEAR: [self.xyz_to_lin_srgb],
            ColorSpace.DISPLAY_P3: [self.xyz_to_lin_p3, self.gam_p3],
            ColorSpace.A98_RGB: [self.xyz_to_lin_a98rgb, self.gam_a98rgb],
            ColorSpace.PROPHOTO_RGB: [self.d65_to_d50, self.xyz_to_lin_prophoto, self.gam_prophoto],
            ColorSpace.REC2020: [self.xyz_to_lin_2020, self.gam_2020],
            ColorSpace.XYZ_D65: [],
            ColorSpace.XYZ_D50: [self.d65_to_d50],
            ColorSpace.LAB: [self.d65_to_d50, self.xyz_to_lab],
            ColorSpace.LCH: [
                self.d65_to_d50,
                self.xyz_to_lab,
                lambda lab_values: self.lab_to_lch(lab_values, self.config.lch_achromatic_epsilon),
            ],
            ColorSpace.OKLAB: [self.xyz_to_oklab],
            ColorSpace.OKLCH: [
                self.xyz_to_oklab,
                lambda lab_values: self.oklab_to_oklch(lab_values, self.config.oklch_achromatic_epsilon),
            ],
        }[space]

    def _prepare_input(self, values, space: ColorSpace) -> torch.Tensor:
        color = self._tensor(values)

        if self.config.reject_non_finite:
            finite = torch.isfinite(color)
            if space.is_polar:
                finite[..., space.hue_index] |= torch.isnan(color[..., space.hue_index])
            if not bool(finite.all()):
                raise ValueError(f"Input in {space.value} contains NaN or Inf values")

        return color

    def _release_hue(self, color: torch.Tensor, space: ColorSpace) -> torch.Tensor:
        """Replace the achromatic NaN sentinel (and only NaN) before leaving polar form."""

        if not space.is_polar:
            return color

        hue = color[..., space.hue_index]
        color = color.clone()
        color[..., space.hue_index] = torch.where(
            torch.isnan(hue), torch.full_like(hue, self.config.powerless_hue), hue
        )
        return color

    def to_xyz_d65(self, values, source: Union[ColorSpace, str]) -> torch.Tensor:
        """Convert ``values`` from ``source`` to XYZ relative to D65."""

        source = ColorSpace.parse(source)
        color = self._release_hue(self._prepare_input(values, source), source)
        for stage in self._route_to_hub(source):
            color = stage(color)
        return color

    def from_xyz_d65(self, values, target: Union[ColorSpace, str]) -> torch.Tensor:
        """Convert D65-relative XYZ to ``target``."""

        color = self._prepare_input(values, ColorSpace.XYZ_D65)
        return self._run_from_hub(color, ColorSpace.parse(target))

    def _run_from_hub(self, color: torch.Tensor, target: ColorSpace) -> torch.Tensor:
        for stage in self._route_from_hub(target):
            color = stage(color)
        return color

    def convert(
        self,
        values,
        source: Union[ColorSpace, str],
        target: Union[ColorSpace, str],
    ) -> torch.Tensor:
        """Convert ``values`` between any two supported spaces."""

        source = ColorSpace.parse(source)
        target = ColorSpace.parse(target)
        if source == target:
            return self._prepare_input(values, source).clone()

        return self._run_from_hub(self.to_xyz_d65(values, source), target)
