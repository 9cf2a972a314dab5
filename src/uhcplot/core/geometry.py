"""
Polygon helpers for the simulation band.
"""

import numpy as np


def band_polygon(x: np.ndarray, upper: np.ndarray, lower: np.ndarray) -> np.ndarray:
    """
    Vertices of the closed region between two curves on a shared grid.

    The outline runs along the upper curve left to right, then back along
    the lower curve right to left.

    Parameters
    ----------
    x : np.ndarray
        Grid points of shape (G,).
    upper : np.ndarray
        Upper curve of shape (G,).
    lower : np.ndarray
        Lower curve of shape (G,).

    Returns
    -------
    np.ndarray
        Polygon vertices of shape (2G, 2).
    """
    x = np.asarray(x, dtype=np.float64)
    upper = np.asarray(upper, dtype=np.float64)
    lower = np.asarray(lower, dtype=np.float64)

    if not (x.shape == upper.shape == lower.shape):
        raise ValueError(
            f"Grid and curves must share a shape, got {x.shape}, "
            f"{upper.shape}, {lower.shape}"
        )

    xs = np.concatenate([x, x[::-1]])
    ys = np.concatenate([upper, lower[::-1]])
    return np.column_stack([xs, ys])
