# MIT License (see LICENSE)
"""
Draw primitives emitted by the render pass.

Commands are plain immutable records in screen pixels, so any 2D surface
(pygame, a test buffer, a text log) can replay them in order.
"""
from __future__ import annotations
from dataclasses import dataclass

Point = tuple[float, float]
RGBA = tuple[int, ...]


@dataclass(frozen=True)
class ClearRect:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class FilledCircle:
    center: Point
    radius: float
    color: RGBA


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    color: RGBA
    width: int = 1


@dataclass(frozen=True)
class FilledTriangle:
    points: tuple[Point, Point, Point]
    color: RGBA


DrawCommand = ClearRect | FilledCircle | Line | FilledTriangle
