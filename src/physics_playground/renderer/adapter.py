# MIT License (see LICENSE)
"""
Renderer adapters for the sandbox.

The render pass produces backend-independent draw commands; an adapter
replays them onto a concrete surface. The simulation core has no rendering
dependency.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TextIO
import sys

from .commands import ClearRect, DrawCommand, FilledCircle, FilledTriangle, Line


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses implement one method per primitive. The driver calls
    render_commands() once per tick:

        renderer.begin_frame(tick)
        for command in commands:
            renderer.draw(command)
        renderer.end_frame()
    """

    @abstractmethod
    def begin_frame(self, tick: int) -> None:
        """
        Begin a new frame.

        Args:
            tick: Index of the tick being drawn (0-based).
        """
        ...

    @abstractmethod
    def clear(self, cmd: ClearRect) -> None:
        ...

    @abstractmethod
    def circle(self, cmd: FilledCircle) -> None:
        ...

    @abstractmethod
    def line(self, cmd: Line) -> None:
        ...

    @abstractmethod
    def triangle(self, cmd: FilledTriangle) -> None:
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def draw(self, cmd: DrawCommand) -> None:
        """Dispatch a single command to the matching primitive."""
        if isinstance(cmd, ClearRect):
            self.clear(cmd)
        elif isinstance(cmd, FilledCircle):
            self.circle(cmd)
        elif isinstance(cmd, Line):
            self.line(cmd)
        elif isinstance(cmd, FilledTriangle):
            self.triangle(cmd)
        else:
            raise TypeError(f"Unknown draw command: {type(cmd).__name__}")

    def render_commands(self, tick: int, commands: Iterable[DrawCommand]) -> None:
        """Convenience method to draw a whole frame."""
        self.begin_frame(tick)
        for cmd in commands:
            self.draw(cmd)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development without a display.

    Output:
        === Frame 12 ===
        clear 0,0 960x500
        circle (192.0, 58.4) r=20.0
        line (192.0, 58.4) -> (192.0, 60.0)
    """

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def begin_frame(self, tick: int) -> None:
        self.output.write(f"=== Frame {tick} ===\n")

    def clear(self, cmd: ClearRect) -> None:
        self.output.write(f"clear {cmd.x:g},{cmd.y:g} {cmd.width:g}x{cmd.height:g}\n")

    def circle(self, cmd: FilledCircle) -> None:
        x, y = cmd.center
        self.output.write(f"circle ({x:.1f}, {y:.1f}) r={cmd.radius:.1f}\n")

    def line(self, cmd: Line) -> None:
        (x0, y0), (x1, y1) = cmd.start, cmd.end
        self.output.write(f"line ({x0:.1f}, {y0:.1f}) -> ({x1:.1f}, {y1:.1f})\n")

    def triangle(self, cmd: FilledTriangle) -> None:
        pts = " ".join(f"({x:.1f}, {y:.1f})" for x, y in cmd.points)
        self.output.write(f"triangle {pts}\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for headless runs and benchmarks."""

    def begin_frame(self, tick: int) -> None:
        pass

    def clear(self, cmd: ClearRect) -> None:
        pass

    def circle(self, cmd: FilledCircle) -> None:
        pass

    def line(self, cmd: Line) -> None:
        pass

    def triangle(self, cmd: FilledTriangle) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records every frame's commands.

    Example:
        renderer = BufferedRenderer()
        driver = FrameDriver(renderer=renderer)
        driver.start()
        driver.run(max_ticks=10)
        last = renderer.frames[-1]["commands"]
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current: dict | None = None

    def begin_frame(self, tick: int) -> None:
        self._current = {"tick": tick, "commands": []}

    def _record(self, cmd: DrawCommand) -> None:
        if self._current is not None:
            self._current["commands"].append(cmd)

    def clear(self, cmd: ClearRect) -> None:
        self._record(cmd)

    def circle(self, cmd: FilledCircle) -> None:
        self._record(cmd)

    def line(self, cmd: Line) -> None:
        self._record(cmd)

    def triangle(self, cmd: FilledTriangle) -> None:
        self._record(cmd)

    def end_frame(self) -> None:
        if self._current is not None:
            self.frames.append(self._current)
            self._current = None

    def clear_frames(self) -> None:
        """Drop all recorded frames."""
        self.frames.clear()
