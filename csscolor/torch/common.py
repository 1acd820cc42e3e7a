"""
Shared helpers for the torch-based csscolor implementation.
"""

from __future__ import annotations

from typing import Optional

import torch


def ensure_tensor(
    data,
    device: Optional[torch.device] = None,
    dtype: torch.dtype = torch.float64,
) -> torch.Tensor:
    """
    Convert input data to a torch tensor on the requested device.
    """

    if isinstance(data, torch.Tensor):
        tensor = data.to(dtype=dtype)
        if device is not None:
            tensor = tensor.to(device)
        return tensor

    tensor = torch.as_tensor(data, dtype=dtype, device=device)
    return tensor


def ensure_color_tensor(
    data,
    device: Optional[torch.device] = None,
    dtype: torch.dtype = torch.float64,
) -> torch.Tensor:
    """
    Convert color triple(s) to a channel-last tensor of shape (..., 3).
    """

    tensor = ensure_tensor(data, device=device, dtype=dtype)
    if tensor.dim() == 0 or tensor.shape[-1] != 3:
        raise ValueError(f"Expected color triple(s) with shape (..., 3), got shape {tuple(tensor.shape)}")
    return tensor


def signed_pow(values: torch.Tensor, exponent: float) -> torch.Tensor:
    """Sign-preserving power; also serves as a real cube root for negatives."""

    return torch.sign(values) * torch.pow(torch.abs(values), exponent)
