# MIT License (see LICENSE)
"""
Distance constraint solver for the particle chain.

Constraints are one-sided rope links: a segment may be shorter than its
rest length but never longer. Violations are resolved at the velocity
level with sequential impulses (Gauss-Seidel), optionally with Baumgarte
stabilization to also bleed off the positional error.

For a stretched segment with unit axis n pointing from the first point to
the second:

    C    = |d| - L                    (> 0 when stretched)
    v_n  = (v_b - v_a) · n
    bias = -beta * C / dt
    λ    = (-v_n + bias) * m_eff

m_eff is 1 against an anchor and 1/2 between two free unit-mass
particles, in which case the impulse is split equal and opposite.

Only velocities are written. Positions follow on the next integration
step, so this is velocity projection rather than position projection.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass

import numpy as np

from ..constants import BIAS_FACTOR, DEGENERATE_EPS
from ..util import norm, dot

logger = logging.getLogger(__name__)


@dataclass
class SolveStats:
    """
    Counters accumulated over one or more sweeps.

    Attributes:
        applied: Impulses applied to stretched segments.
        degenerate: Stretched segments skipped because they were too short
                    to define an axis.
    """
    applied: int = 0
    degenerate: int = 0


def _stretch_axis(
    d: np.ndarray,
    length: float,
    stats: SolveStats | None = None,
) -> tuple[np.ndarray, float] | None:
    """
    Unit axis and stretch of segment d, or None if it needs no impulse.

    The axis is only computed once the segment is known to be stretched.
    A segment too short to define an axis is skipped and counted in stats.
    """
    dist = norm(d)
    diff = dist - length
    if diff <= 0.0:
        return None
    if dist < DEGENERATE_EPS:
        logger.debug("skipping degenerate constraint: distance %.3g has no axis", dist)
        if stats is not None:
            stats.degenerate += 1
        return None
    return d / dist, diff


def solve_anchor_constraint(
    anchor: np.ndarray,
    i: int,
    positions: np.ndarray,
    velocities: np.ndarray,
    length: float,
    dt: float,
    beta: float = BIAS_FACTOR,
    stats: SolveStats | None = None,
) -> float | None:
    """
    Keep particle i within length of a fixed anchor.

    The anchor has infinite mass, so the whole impulse goes to the
    particle.

    Returns:
        The impulse magnitude λ applied along the anchor-to-particle axis,
        or None if the segment was not stretched.
    """
    axis = _stretch_axis(positions[i] - anchor, length, stats)
    if axis is None:
        return None
    n, diff = axis

    vn = dot(velocities[i], n)
    bias = -beta * diff / dt
    lam = -vn + bias
    velocities[i] += n * lam
    if stats is not None:
        stats.applied += 1
    return lam


def solve_link_constraint(
    i: int,
    j: int,
    positions: np.ndarray,
    velocities: np.ndarray,
    length: float,
    dt: float,
    beta: float = BIAS_FACTOR,
    stats: SolveStats | None = None,
) -> float | None:
    """
    Keep particles i and j within length of each other.

    Both particles are free, so each receives half of the impulse in
    opposite directions and the pair's total momentum is unchanged.

    Returns:
        The impulse λ added to particle j along the i-to-j axis (particle i
        receives -λ), or None if the segment was not stretched.
    """
    axis = _stretch_axis(positions[j] - positions[i], length, stats)
    if axis is None:
        return None
    n, diff = axis

    vn = dot(velocities[j] - velocities[i], n)
    bias = -beta * diff / dt
    lam = 0.5 * (-vn + bias)
    impulse = n * lam
    velocities[i] -= impulse
    velocities[j] += impulse
    if stats is not None:
        stats.applied += 1
    return lam


def solve_chain_constraints(
    start: np.ndarray,
    end: np.ndarray,
    positions: np.ndarray,
    velocities: np.ndarray,
    length: float,
    dt: float,
    beta: float = BIAS_FACTOR,
    iters: int = 1,
    stats: SolveStats | None = None,
) -> int:
    """
    Resolve every constraint of an anchored chain.

    Each sweep visits the constraints in a fixed order, and later
    constraints see the velocities written by earlier ones:
        1. start anchor - particle 0
        2. particle i - particle i+1, for i = 0..N-2
        3. particle N-1 - end anchor

    Args:
        start: Start anchor position [x, y]. Never modified.
        end: End anchor position [x, y]. Never modified.
        positions: Particle positions [N, 2]. Read-only.
        velocities: Particle velocities [N, 2], modified in-place.
        length: Rest length shared by every segment.
        dt: Sub-step duration, used for the Baumgarte bias.
        beta: Baumgarte factor in [0, 1]. 0 corrects velocities only.
        iters: Number of sweeps. 1 reproduces the reference behaviour.
        stats: Optional counters, accumulated across calls.

    Returns:
        Number of impulses applied over all sweeps of this call.
    """
    if stats is None:
        stats = SolveStats()
    applied_before = stats.applied
    n = len(positions)
    for _ in range(iters):
        solve_anchor_constraint(start, 0, positions, velocities, length, dt, beta, stats)
        for i in range(n - 1):
            solve_link_constraint(i, i + 1, positions, velocities, length, dt, beta, stats)
        solve_anchor_constraint(end, n - 1, positions, velocities, length, dt, beta, stats)
    return stats.applied - applied_before
