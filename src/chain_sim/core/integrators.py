# MIT License (see LICENSE)
"""
Time integration for the particle chain.

The chain is advanced with semi-implicit (symplectic) Euler, the first
half of a Störmer-Verlet update:

    v(t+dt) = v(t) + a(t)*dt
    x(t+dt) = x(t) + v(t+dt)*dt

Velocity is updated before it is used for the position update. Unlike
explicit Euler this keeps oscillating and constrained systems bounded,
and it is what lets the velocity-level constraint solver correct the
next position through the velocities it writes.

Reference:
    https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations

import numpy as np


def semi_implicit_euler_step(
    positions: np.ndarray,
    velocities: np.ndarray,
    accelerations: np.ndarray,
    dt: float,
) -> None:
    """
    Advance every particle by dt.

    Args:
        positions: Particle positions [N, 2], modified in-place.
        velocities: Particle velocities [N, 2], modified in-place.
        accelerations: External accelerations [N, 2], read-only.
        dt: Timestep in seconds.
    """
    velocities += accelerations * dt
    positions += velocities * dt
