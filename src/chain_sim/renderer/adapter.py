# MIT License (see LICENSE)
"""
Renderer adapters for chain visualization.

Renderers are read-only consumers of the simulation: render_simulation()
only sees the copies returned by ChainSimulation.snapshot() and anchors(),
so a renderer can never observe a half-finished sub-step or write back
into the chain. The core has no rendering dependency.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

import numpy as np

if TYPE_CHECKING:
    from ..simulation import ChainSimulation


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses integrate with a graphics backend by drawing anchors,
    particle markers with their constraint radius, and velocity vectors.

    Usage:
        renderer = MyRenderer()
        sim.advance()
        renderer.render_simulation(sim)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame for rendering.

        Args:
            time: Current simulation time in seconds.
        """
        ...

    @abstractmethod
    def draw_anchors(self, start: np.ndarray, end: np.ndarray) -> None:
        """Draw the two fixed anchor points."""
        ...

    @abstractmethod
    def draw_particles(self, positions: np.ndarray, velocities: np.ndarray, link_length: float) -> None:
        """
        Draw all particles.

        Args:
            positions: Particle positions [N, 2].
            velocities: Particle velocities [N, 2], for velocity arrows.
            link_length: Constraint radius drawn around each particle.
        """
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_simulation(self, sim: "ChainSimulation") -> None:
        """Render the current state of sim through its read-only accessors."""
        positions, velocities = sim.snapshot()
        start, end = sim.anchors()
        self.begin_frame(sim.time)
        self.draw_anchors(start, end)
        self.draw_particles(positions, velocities, sim.link_length)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Console/text renderer for development and headless runs.

    Example output:
        === Frame t=0.0500 ===
        anchors (-400.00, 100.00) -> (400.00, 100.00)
        [0] @ (-350.00, 99.98) v=(0.00, -0.50)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True, velocity_scale: float = 1.0):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include velocities.
            velocity_scale: Display-only factor applied to printed velocities.
        """
        self.output = output or sys.stdout
        self.verbose = verbose
        self.velocity_scale = velocity_scale

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_anchors(self, start: np.ndarray, end: np.ndarray) -> None:
        self.output.write(
            f"anchors ({start[0]:.2f}, {start[1]:.2f}) -> ({end[0]:.2f}, {end[1]:.2f})\n"
        )

    def draw_particles(self, positions: np.ndarray, velocities: np.ndarray, link_length: float) -> None:
        for i, pos in enumerate(positions):
            line = f"[{i}] @ ({pos[0]:.2f}, {pos[1]:.2f})"
            if self.verbose:
                vel = velocities[i] * self.velocity_scale
                line += f" v=({vel[0]:.2f}, {vel[1]:.2f})"
            self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for benchmarking without rendering overhead."""

    def begin_frame(self, time: float) -> None:
        pass

    def draw_anchors(self, start: np.ndarray, end: np.ndarray) -> None:
        pass

    def draw_particles(self, positions: np.ndarray, velocities: np.ndarray, link_length: float) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records every frame as plain Python data.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            sim.advance()
            renderer.render_simulation(sim)

        for frame in renderer.frames:
            print(frame["time"], frame["positions"][0])
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {"time": time}

    def draw_anchors(self, start: np.ndarray, end: np.ndarray) -> None:
        if self._current_frame is None:
            return
        self._current_frame["anchors"] = [start.tolist(), end.tolist()]

    def draw_particles(self, positions: np.ndarray, velocities: np.ndarray, link_length: float) -> None:
        if self._current_frame is None:
            return
        self._current_frame["positions"] = positions.tolist()
        self._current_frame["velocities"] = velocities.tolist()
        self._current_frame["link_length"] = link_length

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()
