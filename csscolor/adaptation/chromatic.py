"""
Reference white points and Bradford chromatic adaptation between D65 and D50.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from csscolor.utils.color import as_color, constant_matrix
from csscolor.utils.matrix import multiply_matrices


def _white_point(x: float, y: float) -> np.ndarray:
    white = np.array([x / y, 1.0, (1.0 - x - y) / y])
    white.setflags(write=False)
    return white


# Standard white points, from 4-figure CIE x,y chromaticities
D50 = _white_point(0.3457, 0.3585)
D65 = _white_point(0.3127, 0.3290)

# The pair is truncated, so a round trip is only exact to about 1e-3.
D65_TO_D50 = constant_matrix(
    [
        [1.0479297925449969, 0.022946870601609652, -0.05019226628920524],
        [0.02962780877005599, 0.9904344267538799, -0.017073799063418826],
        [-0.009243040646204504, 0.015055191490298152, 0.7518742814281371],
    ]
)

D50_TO_D65 = constant_matrix(
    [
        [0.955473421488075, -0.02309845494876471, 0.06325924320057072],
        [-0.0283697093338637, 1.0099953980813041, 0.021041441191917323],
        [0.012314014864481998, -0.020507649298898964, 1.330365926242124],
    ]
)


def d65_to_d50(xyz: ArrayLike) -> np.ndarray:
    """Adapt XYZ relative to D65 into XYZ relative to D50 (Bradford)."""

    return multiply_matrices(D65_TO_D50, as_color(xyz))


def d50_to_d65(xyz: ArrayLike) -> np.ndarray:
    """Adapt XYZ relative to D50 into XYZ relative to D65 (Bradford)."""

    return multiply_matrices(D50_TO_D65, as_color(xyz))
