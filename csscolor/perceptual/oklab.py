"""
OKLab and OKLCH.

Reference: https://bottosson.github.io/posts/oklab/ with the XYZ (D65) based
matrices used by CSS Color 4.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from csscolor.perceptual.polar import from_polar, to_polar
from csscolor.utils.color import as_color, constant_matrix
from csscolor.utils.matrix import multiply_matrices

OKLCH_ACHROMATIC_EPSILON = 0.000004

XYZ_TO_LMS = constant_matrix(
    [
        [0.8190224379967030, 0.3619062600528904, -0.1288737815209879],
        [0.0329836539323885, 0.9292868615863434, 0.0361446663506424],
        [0.0481771893596242, 0.2642395317527308, 0.6335478284694309],
    ]
)

LMS_TO_OKLAB = constant_matrix(
    [
        [0.2104542683093140, 0.7936177747023054, -0.0040720430116193],
        [1.9779985324311684, -2.4285922420485799, 0.4505937096174110],
        [0.0259040424655478, 0.7827717124575296, -0.8086757549230774],
    ]
)

LMS_TO_XYZ = constant_matrix(
    [
        [1.2268798758459243, -0.5578149944602171, 0.2813910456659647],
        [-0.0405757452148008, 1.1122868032803170, -0.0717110580655164],
        [-0.0763729366746601, -0.4214933324022432, 1.5869240198367816],
    ]
)

OKLAB_TO_LMS = constant_matrix(
    [
        [1.0000000000000000, 0.3963377773761749, 0.2158037573099136],
        [1.0000000000000000, -0.1055613458156586, -0.0638541728258133],
        [1.0000000000000000, -0.0894841775298119, -1.2914855480194092],
    ]
)


def xyz_to_oklab(xyz: ArrayLike) -> np.ndarray:
    """
    Convert CIE XYZ (D65) to OKLab.

    Out-of-gamut colors can produce negative LMS values; ``np.cbrt`` keeps
    the cube root real and signed for those.
    """

    lms = multiply_matrices(XYZ_TO_LMS, as_color(xyz))
    return multiply_matrices(LMS_TO_OKLAB, np.cbrt(lms))


def oklab_to_xyz(oklab: ArrayLike) -> np.ndarray:
    """Convert OKLab to CIE XYZ (D65)."""

    lms_nonlinear = multiply_matrices(OKLAB_TO_LMS, as_color(oklab))
    return multiply_matrices(LMS_TO_XYZ, lms_nonlinear**3)


def oklab_to_oklch(oklab: ArrayLike, achromatic_epsilon: float = OKLCH_ACHROMATIC_EPSILON) -> np.ndarray:
    """Convert OKLab to OKLCH; hue is NaN when chroma <= ``achromatic_epsilon``."""

    return to_polar(as_color(oklab), achromatic_epsilon)


def oklch_to_oklab(oklch: ArrayLike) -> np.ndarray:
    return from_polar(as_color(oklch))
