"""
Matrix-vector multiplication shared by every linear color transform.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike


def multiply_matrices(matrix: ArrayLike, vector: ArrayLike) -> np.ndarray:
    """
    Multiply an m x n matrix with a vector of length n.

    Parameters
    ----------
    matrix : array_like
        Coefficients, shape (m, n)
    vector : array_like
        A single vector of shape (n,) or a stack of vectors, shape (..., n)

    Returns
    -------
    np.ndarray
        Products of shape (m,) or (..., m)

    Raises
    ------
    ValueError
        If ``matrix`` is not two-dimensional or its row length does not
        match the length of ``vector``.
    """

    m = np.asarray(matrix, dtype=np.float64)
    v = np.asarray(vector, dtype=np.float64)

    if m.ndim != 2:
        raise ValueError(f"Expected a 2D matrix, got shape {m.shape}")
    if v.ndim == 0 or v.shape[-1] != m.shape[1]:
        raise ValueError(
            f"dimension mismatch: matrix rows have {m.shape[1]} entries, "
            f"vector has shape {v.shape}"
        )

    return np.dot(v, m.T)
