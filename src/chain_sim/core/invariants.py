# MIT License (see LICENSE)
"""
Diagnostics for the chain: segment lengths and conserved quantities.

Used for verifying simulation correctness and debugging stability issues.
Every particle has unit mass, so momentum and kinetic energy are plain
sums over the velocity buffer.
"""
from __future__ import annotations
import numpy as np


def segment_lengths(start: np.ndarray, end: np.ndarray, positions: np.ndarray) -> np.ndarray:
    """
    Lengths of all N + 1 constrained segments, in solver order.

    Index 0 is start anchor to particle 0, indices 1..N-1 are the links
    between consecutive particles, index N is particle N-1 to end anchor.
    """
    points = np.vstack([start[None, :], positions, end[None, :]])
    return np.linalg.norm(np.diff(points, axis=0), axis=1)


def max_stretch(start: np.ndarray, end: np.ndarray, positions: np.ndarray, length: float) -> float:
    """
    Largest amount by which any segment exceeds the rest length.

    Returns 0.0 when no segment is stretched; compression never counts.
    """
    return float(max(0.0, float(np.max(segment_lengths(start, end, positions))) - length))


def kinetic_energy(velocities: np.ndarray) -> float:
    """
    Total kinetic energy of unit-mass particles.

    T = Σ 0.5 * |v|²
    """
    return 0.5 * float(np.sum(velocities * velocities))


def linear_momentum(velocities: np.ndarray) -> np.ndarray:
    """
    Total linear momentum of unit-mass particles.

    P = Σ v

    Returns:
        Momentum vector [Px, Py].
    """
    return np.sum(velocities, axis=0)
