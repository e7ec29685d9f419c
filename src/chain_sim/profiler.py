# MIT License (see LICENSE)
"""
Section timing for the simulation loop.

ChainSimulation times its "integrate" and "solve" phases when given a
Profiler, so the cost of sub-stepping can be measured without an external
profiler.

Example:
    profiler = Profiler()
    sim = ChainSimulation(profiler=profiler)
    for _ in range(100):
        sim.advance()
    profiler.log_summary()
"""
from __future__ import annotations
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

logger = logging.getLogger(__name__)


@dataclass
class ProfileStats:
    """Timing samples (seconds) per named section."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Compute summary statistics for all recorded sections.

        Returns:
            Dict mapping section name to stats dict with keys:
            - 'n': sample count
            - 'total_ms': summed time in milliseconds
            - 'mean_ms': average time in milliseconds
            - 'max_ms': maximum time in milliseconds
        """
        out = {}
        for name, times in self.samples.items():
            n = len(times)
            total = sum(times)
            out[name] = {
                "n": n,
                "total_ms": 1e3 * total,
                "mean_ms": 1e3 * (total / n),
                "max_ms": 1e3 * max(times),
            }
        return out

    def clear(self) -> None:
        self.samples.clear()


class Profiler:
    """
    Context-manager based profiler.

    Usage:
        profiler = Profiler()
        with profiler.section("solve"):
            solve_chain_constraints(...)
        profiler.stats.summary()["solve"]["mean_ms"]
    """

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block and record it under name."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)

    def log_summary(self, level: int = logging.INFO) -> None:
        """Write one log line per recorded section."""
        for name, s in sorted(self.stats.summary().items()):
            logger.log(
                level,
                "%s: n=%d mean=%.3fms max=%.3fms total=%.1fms",
                name, s["n"], s["mean_ms"], s["max_ms"], s["total_ms"],
            )
