# MIT License (see LICENSE)
"""
The chain simulation driver.

ChainSimulation owns a ChainState and advances it frame by frame. Each
frame is split into a fixed number of equal sub-steps, and every sub-step
runs, strictly in this order:
    1. Integration (semi-implicit Euler with the stored accelerations).
    2. Constraint solving (Gauss-Seidel sweep over the anchored chain).

Structure:
    - User creates a ChainSimulation (or ChainSimulation.from_positions).
    - User calls advance() once per displayed frame.
    - Consumers read copies through snapshot(); reset() restores the
      initial configuration.
"""
from __future__ import annotations
import logging
from contextlib import nullcontext
from dataclasses import dataclass, field

import numpy as np

from .constants import (
    BIAS_FACTOR,
    END_ANCHOR,
    FRAME_DELTA,
    GRAVITY,
    LINK_LENGTH,
    NR_CHAIN_LINKS,
    NR_SUBSTEPS,
    SOLVER_ITERS,
    START_ANCHOR,
)
from .constraints.solver import SolveStats, solve_chain_constraints
from .core.forces import apply_gravity, clear_accelerations
from .core.integrators import semi_implicit_euler_step
from .core.invariants import max_stretch, segment_lengths
from .profiler import Profiler
from .types import ChainState
from .util import lerp_points, norm, vec2, vec2_array

logger = logging.getLogger(__name__)

_FIXED_FIELDS = ("start", "end")


@dataclass
class ChainSimulation:
    """
    A chain of particles hanging between two fixed anchors.

    Attributes:
        n_links: Number of particles N (>= 1).
        start: Start anchor [x, y]. Cannot be reassigned after construction;
               read it back through anchors().
        end: End anchor [x, y]. Same rules as start.
        link_length: Rest length L of every segment (> 0).
        gravity: Uniform acceleration applied to every particle.
        dt: Default frame delta in seconds (> 0), used by advance().
        substeps: Sub-steps per frame (>= 1). Each lasts dt / substeps.
        beta: Baumgarte bias factor in [0, 1]. 0 means velocity-only
              correction with no positional drift correction.
        solver_iters: Constraint sweeps per sub-step (>= 1).
        initial_positions: Optional explicit starting positions [N, 2].
              If None, the start-end segment is divided into N + 1 equal
              parts and particles are placed on the interior points.
        profiler: Optional Profiler timing "integrate" and "solve".
        state: The owned particle buffers (created on init).
        time: Simulated time in seconds since creation or last reset.
        frame: Number of advance() calls since creation or last reset.
    """
    n_links: int = NR_CHAIN_LINKS
    start: tuple[float, float] = START_ANCHOR
    end: tuple[float, float] = END_ANCHOR
    link_length: float = LINK_LENGTH
    gravity: tuple[float, float] = GRAVITY
    dt: float = FRAME_DELTA
    substeps: int = NR_SUBSTEPS
    beta: float = BIAS_FACTOR
    solver_iters: int = SOLVER_ITERS
    initial_positions: np.ndarray | None = field(default=None, repr=False)
    profiler: Profiler | None = None

    # Internal state
    state: ChainState = field(init=False, repr=False)
    time: float = field(default=0.0, init=False)
    frame: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Validate configuration and build the initial chain state."""
        self._validate()

        self._start = vec2(self.start, "start")
        self._end = vec2(self.end, "end")
        self._g = vec2(self.gravity, "gravity")
        # Anchors are read by the solver and never written
        self._start.flags.writeable = False
        self._end.flags.writeable = False

        if self.initial_positions is None:
            if norm(self._end - self._start) == 0.0:
                raise ValueError("start and end anchors coincide; cannot seed chain positions")
            positions = lerp_points(self._start, self._end, self.n_links)
        else:
            positions = vec2_array(self.initial_positions, "initial_positions")
            if len(positions) != self.n_links:
                raise ValueError(
                    f"initial_positions has {len(positions)} particles, expected n_links={self.n_links}"
                )

        self.state = ChainState(positions=positions)
        self.set_gravity(self._g)

        logger.debug(
            "chain created: %d links, length=%g, %d substeps of %g s, beta=%g",
            self.n_links, self.link_length, self.substeps, self.substep_dt(), self.beta,
        )

    def __setattr__(self, name: str, value) -> None:
        # Anchors are fixed once the state exists; anchors() is the read accessor
        if name in _FIXED_FIELDS and "_start" in self.__dict__:
            raise AttributeError(f"{name} anchor cannot be changed after construction")
        super().__setattr__(name, value)

    def _validate(self) -> None:
        for name in ("n_links", "substeps", "solver_iters"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.n_links < 1:
            raise ValueError(f"n_links must be >= 1, got {self.n_links}")
        if not (np.isfinite(self.link_length) and self.link_length > 0):
            raise ValueError(f"link_length must be > 0, got {self.link_length}")
        if not (np.isfinite(self.dt) and self.dt > 0):
            raise ValueError(f"dt must be > 0, got {self.dt}")
        if self.substeps < 1:
            raise ValueError(f"substeps must be >= 1, got {self.substeps}")
        if self.solver_iters < 1:
            raise ValueError(f"solver_iters must be >= 1, got {self.solver_iters}")
        if not 0.0 <= self.beta <= 1.0:
            raise ValueError(f"beta must be in [0, 1], got {self.beta}")

    @classmethod
    def from_positions(
        cls,
        positions,
        start: tuple[float, float],
        end: tuple[float, float],
        link_length: float,
        **kwargs,
    ) -> "ChainSimulation":
        """
        Create a simulation from explicit starting positions.

        The number of links is taken from positions. Remaining keyword
        arguments are passed to the constructor.
        """
        positions = vec2_array(positions, "positions")
        return cls(
            n_links=len(positions),
            start=start,
            end=end,
            link_length=link_length,
            initial_positions=positions,
            **kwargs,
        )

    def set_gravity(self, g) -> None:
        """Replace every particle's acceleration with the uniform vector g."""
        self._g = vec2(g, "gravity")
        clear_accelerations(self.state.accelerations)
        apply_gravity(self.state.accelerations, self._g)

    def substep_dt(self, frame_delta: float | None = None) -> float:
        """Duration of one sub-step for the given (or default) frame delta."""
        frame_delta = float(self.dt if frame_delta is None else frame_delta)
        return frame_delta / self.substeps

    def _section(self, name: str):
        return self.profiler.section(name) if self.profiler else nullcontext()

    def _substep(self, h: float, stats: SolveStats) -> None:
        s = self.state
        with self._section("integrate"):
            semi_implicit_euler_step(s.positions, s.velocities, s.accelerations, h)
        with self._section("solve"):
            solve_chain_constraints(
                self._start, self._end, s.positions, s.velocities,
                self.link_length, h, beta=self.beta, iters=self.solver_iters, stats=stats,
            )

    def advance(self, frame_delta: float | None = None) -> None:
        """
        Advance the simulation by one displayed frame.

        Runs `substeps` sub-steps of frame_delta / substeps each. Simulated
        time advances by exactly frame_delta.

        Args:
            frame_delta: Frame duration in seconds. Defaults to self.dt.

        Raises:
            ValueError: If frame_delta is not a positive finite number.
        """
        frame_delta = float(self.dt if frame_delta is None else frame_delta)
        if not (np.isfinite(frame_delta) and frame_delta > 0):
            raise ValueError(f"frame_delta must be > 0, got {frame_delta}")

        h = frame_delta / self.substeps
        stats = SolveStats()
        for _ in range(self.substeps):
            self._substep(h, stats)

        self.time += frame_delta
        self.frame += 1
        if stats.degenerate:
            logger.warning(
                "frame %d: skipped %d degenerate constraints (coincident points have no axis)",
                self.frame, stats.degenerate,
            )
        logger.debug(
            "frame %d: %d constraint impulses in %d substeps", self.frame, stats.applied, self.substeps
        )

    def reset(self) -> None:
        """Restore the initial positions and zero all velocities."""
        self.state.reset()
        self.time = 0.0
        self.frame = 0
        logger.debug("chain reset to initial positions")

    def snapshot(self) -> tuple[np.ndarray, np.ndarray]:
        """
        Copies of the current (positions, velocities) for read-only consumers.

        Mutating the returned arrays never affects the simulation.
        """
        return self.state.positions.copy(), self.state.velocities.copy()

    def anchors(self) -> tuple[np.ndarray, np.ndarray]:
        """Copies of the (start, end) anchor positions."""
        return self._start.copy(), self._end.copy()

    def segment_lengths(self) -> np.ndarray:
        """Current lengths of all N + 1 segments in solver order."""
        return segment_lengths(self._start, self._end, self.state.positions)

    def max_stretch(self) -> float:
        """Largest current excess of any segment over link_length."""
        return max_stretch(self._start, self._end, self.state.positions, self.link_length)
