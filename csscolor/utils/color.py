"""
Array helpers shared by the conversion modules.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike


def as_color(color: ArrayLike) -> np.ndarray:
    """
    Convert ``color`` to a float64 array whose last axis holds 3 channels.

    Always returns a new array so callers never alias their input.
    """

    arr = np.array(color, dtype=np.float64)
    if arr.ndim == 0 or arr.shape[-1] != 3:
        raise ValueError(f"Expected color triple(s) with shape (..., 3), got shape {arr.shape}")
    return arr


def signed_power(values: np.ndarray, exponent: float) -> np.ndarray:
    """Raise ``|values|`` to ``exponent`` and restore the sign of each entry."""

    return np.sign(values) * np.power(np.abs(values), exponent)


def constant_matrix(rows) -> np.ndarray:
    """Build a read-only float64 coefficient matrix."""

    matrix = np.array(rows, dtype=np.float64)
    matrix.setflags(write=False)
    return matrix


def distance_squared(a: ArrayLike, b: ArrayLike) -> np.ndarray:
    """
    Squared Euclidean distance between colors along the last axis.

    Used for nearest-color search in whichever space both inputs share.
    """

    a_arr = np.asarray(a, dtype=np.float64)
    b_arr = np.asarray(b, dtype=np.float64)
    if a_arr.shape[-1:] != b_arr.shape[-1:]:
        raise ValueError(f"Cannot compare colors of shapes {a_arr.shape} and {b_arr.shape}")

    diff = a_arr - b_arr
    return np.sum(diff * diff, axis=-1)
