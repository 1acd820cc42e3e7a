"""
GPU-capable csscolor transforms backed by PyTorch.
"""

from csscolor.torch.color import TorchColorTransform
from csscolor.torch.common import ensure_color_tensor, ensure_tensor

__all__ = ["TorchColorTransform", "ensure_tensor", "ensure_color_tensor"]
