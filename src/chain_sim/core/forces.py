# MIT License (see LICENSE)
"""
Acceleration generators for the chain simulation.

Particles carry no mass in this model, so generators write directly into
the (N, 2) acceleration buffer that the integrator reads. Generators
accumulate; call clear_accelerations() first to rebuild the buffer.
"""
from __future__ import annotations

import numpy as np


def clear_accelerations(accelerations: np.ndarray) -> None:
    """Zero the acceleration buffer in place."""
    accelerations.fill(0.0)


def apply_gravity(accelerations: np.ndarray, g: np.ndarray) -> None:
    """
    Add a uniform acceleration g to every particle.

    Args:
        accelerations: Acceleration buffer [N, 2], modified in place.
        g: Acceleration vector [gx, gy].
    """
    accelerations += g
