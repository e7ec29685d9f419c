# MIT License (see LICENSE)
"""
Default parameters of the reference chain scenario.

Units are screen units (pixels) and seconds; the values reproduce the
interactive demo: fifteen links hanging between two anchors 800 units
apart under a downward acceleration of 10 units/s².
"""
from __future__ import annotations

# Uniform downward acceleration applied to every particle.
GRAVITY: tuple[float, float] = (0.0, -10.0)

# Baumgarte factor. 0 disables positional drift correction entirely.
BIAS_FACTOR: float = 0.0

NR_CHAIN_LINKS: int = 15
LINK_LENGTH: float = 50.0
START_ANCHOR: tuple[float, float] = (-400.0, 100.0)
END_ANCHOR: tuple[float, float] = (400.0, 100.0)

# Outer frame delta and number of sub-steps it is split into.
FRAME_DELTA: float = 0.05
NR_SUBSTEPS: int = 5

# A single Gauss-Seidel sweep per sub-step.
SOLVER_ITERS: int = 1

# Pairs closer than this have no usable constraint axis and are skipped.
DEGENERATE_EPS: float = 1e-12
