# MIT License (see LICENSE)
"""
Constraint solvers for the chain simulation.

This subpackage provides one-sided distance constraints:
    - solve_anchor_constraint: particle tied to a fixed anchor.
    - solve_link_constraint: two neighbouring particles.
    - solve_chain_constraints: Gauss-Seidel sweeps over a whole chain.
    - SolveStats: applied and skipped-degenerate counters.

Typical usage:
    from chain_sim.constraints import solve_chain_constraints

    solve_chain_constraints(start, end, positions, velocities, length=50.0, dt=0.01)
"""
from .solver import SolveStats, solve_anchor_constraint, solve_link_constraint, solve_chain_constraints

__all__ = [
    "SolveStats",
    "solve_anchor_constraint",
    "solve_link_constraint",
    "solve_chain_constraints",
]
