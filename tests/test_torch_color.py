"""
Tests for the torch transforms. Skipped automatically when torch is unavailable.
"""

from __future__ import annotations

import numpy as np
import pytest

torch = pytest.importorskip("torch")

from csscolor import ColorConverter, ColorSpace, ConversionConfig  # noqa: E402
from csscolor.perceptual import lab_to_lch, xyz_to_oklab  # noqa: E402
from csscolor.torch import TorchColorTransform  # noqa: E402
from csscolor.transfer import gam_2020, lin_srgb  # noqa: E402


def test_transfer_matches_numpy() -> None:
    transform = TorchColorTransform()
    values = np.linspace(-1.2, 1.2, 24).reshape(8, 3)
    np.testing.assert_allclose(transform.lin_srgb(values).numpy(), lin_srgb(values), atol=1e-12)
    np.testing.assert_allclose(transform.gam_2020(values).numpy(), gam_2020(values), atol=1e-12)


def test_oklab_matches_numpy_for_negative_lms() -> None:
    transform = TorchColorTransform()
    xyz = np.array([[-0.1, 0.05, 0.2], [0.4, 0.5, 0.6]])
    result = transform.xyz_to_oklab(xyz)
    assert torch.isfinite(result).all()
    np.testing.assert_allclose(result.numpy(), xyz_to_oklab(xyz), atol=1e-10)


def test_achromatic_hue_is_nan() -> None:
    transform = TorchColorTransform()
    lch = transform.lab_to_lch([[50.0, 0.0, 0.0], [50.0, 25.0, -50.0]])
    assert torch.isnan(lch[0, 2])
    np.testing.assert_allclose(lch[1].numpy(), lab_to_lch([50.0, 25.0, -50.0]), atol=1e-10)


@pytest.mark.parametrize("space", list(ColorSpace), ids=lambda s: s.value)
def test_convert_matches_numpy(space: ColorSpace) -> None:
    transform = TorchColorTransform()
    converter = ColorConverter()
    srgb = np.random.default_rng(3).random((5, 3)) * 0.8 + 0.1

    result = transform.convert(torch.from_numpy(srgb), ColorSpace.SRGB, space)
    expected = converter.convert(srgb, ColorSpace.SRGB, space)
    np.testing.assert_allclose(result.numpy(), expected, atol=1e-9)


def test_nan_hue_uses_powerless_hue() -> None:
    transform = TorchColorTransform()
    oklab = transform.convert([0.6, 0.1, float("nan")], "oklch", "oklab")
    np.testing.assert_allclose(oklab.numpy(), [0.6, 0.1, 0.0], atol=1e-6)


def test_rejects_bad_shape() -> None:
    transform = TorchColorTransform()
    with pytest.raises(ValueError):
        transform.lin_srgb(torch.zeros(4, 2))


def test_infinite_hue_is_rejected() -> None:
    transform = TorchColorTransform()
    with pytest.raises(ValueError, match="NaN or Inf"):
        transform.convert([50.0, 10.0, float("inf")], "lch", "lab")


def test_infinite_hue_is_not_made_finite() -> None:
    transform = TorchColorTransform(config=ConversionConfig(reject_non_finite=False))
    lab = transform.convert([[50.0, 10.0, float("inf")], [50.0, 10.0, float("-inf")]], "lch", "lab")
    assert not torch.isfinite(lab[:, 1:]).any()


def test_nan_hue_replaced_by_configured_hue() -> None:
    transform = TorchColorTransform(config=ConversionConfig(powerless_hue=90.0))
    oklab = transform.convert([0.6, 0.1, float("nan")], "oklch", "oklab")
    np.testing.assert_allclose(oklab.numpy(), [0.6, 0.0, 0.1], atol=1e-6)


def test_achromatic_epsilon_from_config() -> None:
    transform = TorchColorTransform(config=ConversionConfig(oklch_achromatic_epsilon=1.0))
    oklch = transform.convert([0.9, 0.1, 0.1], "srgb", "oklch")
    assert torch.isnan(oklch[2])


def test_invalid_config_rejected() -> None:
    with pytest.raises(ValueError):
        TorchColorTransform(config=ConversionConfig(lch_achromatic_epsilon=-1.0))


def test_hue_just_below_zero_wraps_to_zero() -> None:
    transform = TorchColorTransform()
    lch = transform.lab_to_lch([50.0, 1.0, -1e-300])
    assert lch[2].item() == 0.0
