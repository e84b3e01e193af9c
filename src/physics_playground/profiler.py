# MIT License (see LICENSE)
"""
Per-tick timing of the physics and render phases.

Example:
    profiler = Profiler()
    driver = FrameDriver(profiler=profiler)
    driver.start(); driver.run(max_ticks=600); driver.stop()
    profiler.summary()["physics"]["mean_ms"]
"""
from __future__ import annotations
import logging
import time
from contextlib import contextmanager
from collections.abc import Iterator

logger = logging.getLogger(__name__)


class Profiler:
    """
    Accumulates wall-clock samples (seconds) per named section.

    Only used for diagnostics; the simulation itself never reads the clock.
    """

    def __init__(self) -> None:
        self.samples: dict[str, list[float]] = {}

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block and record it under `name`."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.samples.setdefault(name, []).append(time.perf_counter() - t0)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per section: 'n' sample count, 'mean_ms' and 'max_ms'.
        """
        out = {}
        for name, times in self.samples.items():
            out[name] = {
                "n": len(times),
                "mean_ms": 1e3 * sum(times) / len(times),
                "max_ms": 1e3 * max(times),
            }
        return out

    def log_summary(self) -> None:
        for name, stats in self.summary().items():
            logger.info(
                "%s: n=%d mean=%.3f ms max=%.3f ms",
                name, stats["n"], stats["mean_ms"], stats["max_ms"],
            )

    def reset(self) -> None:
        self.samples.clear()
