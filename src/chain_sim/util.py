# MIT License (see LICENSE)
"""
Utility functions for vector math and numeric operations.

Single vectors are numpy arrays of shape (2,); particle buffers are
arrays of shape (N, 2). Everything is stored as float64.
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Always returns a fresh copy, so tuples, lists and caller-owned arrays
    can be passed in without aliasing simulation state.
    """
    return np.array(x, dtype=np.float64)


def vec2(x, name: str = "vector") -> np.ndarray:
    """
    Convert x to a finite 2D vector of shape (2,).

    Raises:
        ValueError: If x has the wrong shape or contains NaN/inf.
    """
    v = f64(x)
    if v.shape != (2,):
        raise ValueError(f"{name} must be a 2D vector, got shape {v.shape}")
    if not np.all(np.isfinite(v)):
        raise ValueError(f"{name} must be finite, got {v.tolist()}")
    return v


def vec2_array(x, name: str = "array") -> np.ndarray:
    """Convert x to a finite float64 array of shape (N, 2)."""
    a = f64(x)
    if a.ndim != 2 or a.shape[1] != 2:
        raise ValueError(f"{name} must have shape (N, 2), got {a.shape}")
    if not np.all(np.isfinite(a)):
        raise ValueError(f"{name} must be finite")
    return a


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector. Avoids sqrt for performance."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))


def dot(a: np.ndarray, b: np.ndarray) -> float:
    """Dot product of two 2D vectors as a Python float."""
    return float(a[0] * b[0] + a[1] * b[1])


def lerp_points(a: np.ndarray, b: np.ndarray, n: int) -> np.ndarray:
    """
    Return n points evenly spaced strictly between a and b.

    The segment a-b is divided into n + 1 equal parts and the n interior
    division points are returned in order from a to b, shape (n, 2).
    """
    t = np.arange(1, n + 1, dtype=np.float64) / (n + 1)
    return a[None, :] + t[:, None] * (b - a)[None, :]
