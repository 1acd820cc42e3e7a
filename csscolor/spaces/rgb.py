"""
Linear-light RGB to CIE XYZ transforms.

sRGB, Display P3, a98-rgb and Rec. 2020 are relative to D65; ProPhoto RGB is
relative to D50. Forward and inverse matrices are the published CSS Color 4
constants; inverses are not recomputed at runtime.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from csscolor.utils.color import as_color, constant_matrix
from csscolor.utils.matrix import multiply_matrices

LIN_SRGB_TO_XYZ = constant_matrix(
    [
        [506752 / 1228815, 87881 / 245763, 12673 / 70218],
        [87098 / 409605, 175762 / 245763, 12673 / 175545],
        [7918 / 409605, 87881 / 737289, 1001167 / 1053270],
    ]
)

XYZ_TO_LIN_SRGB = constant_matrix(
    [
        [12831 / 3959, -329 / 214, -1974 / 3959],
        [-851781 / 878810, 1648619 / 878810, 36519 / 878810],
        [705 / 12673, -2585 / 12673, 705 / 667],
    ]
)

LIN_P3_TO_XYZ = constant_matrix(
    [
        [608311 / 1250200, 189793 / 714400, 198249 / 1000160],
        [35783 / 156275, 247089 / 357200, 198249 / 2500400],
        [0 / 1, 32229 / 714400, 5220557 / 5000800],
    ]
)

XYZ_TO_LIN_P3 = constant_matrix(
    [
        [446124 / 178915, -333277 / 357830, -72051 / 178915],
        [-14852 / 17905, 63121 / 35810, 423 / 17905],
        [11844 / 330415, -50337 / 660830, 316169 / 330415],
    ]
)

# D50, no adaptation step needed
LIN_PROPHOTO_TO_XYZ = constant_matrix(
    [
        [0.79776664490064230, 0.13518129740053308, 0.03134773412839220],
        [0.28807482881940130, 0.71183523424187300, 0.00008993693872564],
        [0.00000000000000000, 0.00000000000000000, 0.82510460251046020],
    ]
)

XYZ_TO_LIN_PROPHOTO = constant_matrix(
    [
        [1.34578688164715830, -0.25557208737979464, -0.05110186497554526],
        [-0.54463070512490190, 1.50824774284514680, 0.02052744743642139],
        [0.00000000000000000, 0.00000000000000000, 1.21196754563894520],
    ]
)

LIN_A98RGB_TO_XYZ = constant_matrix(
    [
        [573536 / 994567, 263643 / 1420810, 187206 / 994567],
        [591459 / 1989134, 6239551 / 9945670, 374412 / 4972835],
        [53769 / 1989134, 351524 / 4972835, 4929758 / 4972835],
    ]
)

XYZ_TO_LIN_A98RGB = constant_matrix(
    [
        [1829569 / 896150, -506331 / 896150, -308931 / 896150],
        [-851781 / 878810, 1648619 / 878810, 36519 / 878810],
        [16779 / 1248040, -147721 / 1248040, 1266979 / 1248040],
    ]
)

LIN_2020_TO_XYZ = constant_matrix(
    [
        [63426534 / 99577255, 20160776 / 139408157, 47086771 / 278816314],
        [26158966 / 99577255, 472592308 / 697040785, 8267143 / 139408157],
        [0 / 1, 19567812 / 697040785, 295819943 / 278816314],
    ]
)

XYZ_TO_LIN_2020 = constant_matrix(
    [
        [30757411 / 17917100, -6372589 / 17917100, -4539589 / 17917100],
        [-19765991 / 29648200, 47925759 / 29648200, 467509 / 29648200],
        [792561 / 44930125, -1921689 / 44930125, 42328811 / 44930125],
    ]
)


def lin_srgb_to_xyz(rgb: ArrayLike) -> np.ndarray:
    """
    Convert linear-light sRGB to CIE XYZ (D65).

    Parameters
    ----------
    rgb : array_like
        Linear sRGB, shape (..., 3)
    """

    return multiply_matrices(LIN_SRGB_TO_XYZ, as_color(rgb))


def xyz_to_lin_srgb(xyz: ArrayLike) -> np.ndarray:
    """Convert CIE XYZ (D65) to linear-light sRGB."""

    return multiply_matrices(XYZ_TO_LIN_SRGB, as_color(xyz))


def lin_p3_to_xyz(rgb: ArrayLike) -> np.ndarray:
    """Convert linear-light Display P3 to CIE XYZ (D65)."""

    return multiply_matrices(LIN_P3_TO_XYZ, as_color(rgb))


def xyz_to_lin_p3(xyz: ArrayLike) -> np.ndarray:
    return multiply_matrices(XYZ_TO_LIN_P3, as_color(xyz))


def lin_prophoto_to_xyz(rgb: ArrayLike) -> np.ndarray:
    """Convert linear-light ProPhoto RGB to CIE XYZ (D50)."""

    return multiply_matrices(LIN_PROPHOTO_TO_XYZ, as_color(rgb))


def xyz_to_lin_prophoto(xyz: ArrayLike) -> np.ndarray:
    """Convert CIE XYZ (D50) to linear-light ProPhoto RGB."""

    return multiply_matrices(XYZ_TO_LIN_PROPHOTO, as_color(xyz))


def lin_a98rgb_to_xyz(rgb: ArrayLike) -> np.ndarray:
    """Convert linear-light a98-rgb to CIE XYZ (D65)."""

    return multiply_matrices(LIN_A98RGB_TO_XYZ, as_color(rgb))


def xyz_to_lin_a98rgb(xyz: ArrayLike) -> np.ndarray:
    return multiply_matrices(XYZ_TO_LIN_A98RGB, as_color(xyz))


def lin_2020_to_xyz(rgb: ArrayLike) -> np.ndarray:
    """Convert linear-light Rec. 2020 to CIE XYZ (D65)."""

    return multiply_matrices(LIN_2020_TO_XYZ, as_color(rgb))


def xyz_to_lin_2020(xyz: ArrayLike) -> np.ndarray:
    return multiply_matrices(XYZ_TO_LIN_2020, as_color(xyz))
