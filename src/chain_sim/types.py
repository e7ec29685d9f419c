# MIT License (see LICENSE)
"""
Core type definitions for the chain simulation.

Defines ChainState, the particle buffers of a chain of point masses:
  - positions, velocities, accelerations: float64 arrays of shape (N, 2)
  - initial_positions: the snapshot restored by reset()

Particle order is significant: particle i is linked to particle i + 1,
particle 0 to the start anchor and particle N - 1 to the end anchor.
"""
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from .util import vec2_array


@dataclass
class ChainState:
    """
    Kinematic state of an N-particle chain.

    Attributes:
        positions: Current particle positions [N, 2].
        velocities: Current particle velocities [N, 2]. Zero if omitted.
        accelerations: External acceleration per particle [N, 2]. Zero if
                       omitted. Read-only for the integrator.
        initial_positions: Reset snapshot [N, 2]. Copied from positions
                           if omitted.

    Note:
        All buffers are converted to fresh float64 arrays on init, so the
        state never aliases caller-owned data. The integrator and solver
        write into them in place; their identity never changes.
    """
    positions: np.ndarray
    velocities: np.ndarray | None = None
    accelerations: np.ndarray | None = None
    initial_positions: np.ndarray | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.positions = vec2_array(self.positions, "positions")
        n = len(self.positions)
        if n < 1:
            raise ValueError("a chain needs at least one particle")

        if self.velocities is None:
            self.velocities = np.zeros((n, 2), dtype=np.float64)
        else:
            self.velocities = vec2_array(self.velocities, "velocities")

        if self.accelerations is None:
            self.accelerations = np.zeros((n, 2), dtype=np.float64)
        else:
            self.accelerations = vec2_array(self.accelerations, "accelerations")

        if self.initial_positions is None:
            self.initial_positions = self.positions.copy()
        else:
            self.initial_positions = vec2_array(self.initial_positions, "initial_positions")

        for name in ("velocities", "accelerations", "initial_positions"):
            shape = getattr(self, name).shape
            if shape != (n, 2):
                raise ValueError(f"{name} has shape {shape}, expected {(n, 2)}")

    def __len__(self) -> int:
        return len(self.positions)

    def reset(self) -> None:
        """Restore the snapshot positions and zero every velocity."""
        self.positions[:] = self.initial_positions
        self.velocities.fill(0.0)

    def copy(self) -> "ChainState":
        """Deep copy of all buffers, including the reset snapshot."""
        return ChainState(
            positions=self.positions,
            velocities=self.velocities,
            accelerations=self.accelerations,
            initial_positions=self.initial_positions,
        )
