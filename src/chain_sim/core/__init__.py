# MIT License (see LICENSE)
"""
Core chain simulation components.

This subpackage provides:
    - Acceleration generators: uniform gravity.
    - Integrators: semi-implicit (symplectic) Euler.
    - Invariants: segment lengths, stretch, momentum, kinetic energy.

Typical usage:
    from chain_sim.core import apply_gravity, semi_implicit_euler_step

    apply_gravity(accelerations, np.array([0.0, -10.0]))
    semi_implicit_euler_step(positions, velocities, accelerations, dt=0.01)
"""
from .forces import apply_gravity, clear_accelerations
from .integrators import semi_implicit_euler_step
from .invariants import segment_lengths, max_stretch, kinetic_energy, linear_momentum

__all__ = [
    # Forces
    "apply_gravity",
    "clear_accelerations",
    # Integrators
    "semi_implicit_euler_step",
    # Invariants
    "segment_lengths",
    "max_stretch",
    "kinetic_energy",
    "linear_momentum",
]
