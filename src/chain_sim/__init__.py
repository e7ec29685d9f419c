# MIT License (see LICENSE)
"""
chain_sim - A 2D particle chain simulation core.

A chain of point masses hangs between two fixed anchors. Every frame is
split into sub-steps; each sub-step integrates the particles with
semi-implicit Euler and then resolves one-sided distance constraints with
velocity impulses.

Main entry points:
    - ChainSimulation: Owns the chain and exposes advance/reset/snapshot.
    - ChainState: The particle buffers and their reset snapshot.

Submodules:
    - core: Acceleration generators, integrator and diagnostics.
    - constraints: Anchor and link distance constraint solver.
    - renderer: Optional read-only visualization adapters.

Example:
    from chain_sim import ChainSimulation

    sim = ChainSimulation(n_links=15, link_length=50.0, substeps=5)
    sim.advance(0.05)
    positions, velocities = sim.snapshot()
"""
from .simulation import ChainSimulation
from .types import ChainState
from .profiler import Profiler

__all__ = [
    "ChainSimulation",
    "ChainState",
    "Profiler",
]
