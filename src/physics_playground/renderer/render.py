# MIT License (see LICENSE)
"""
Render pass: current state → list of draw commands.

The functions here only read state; they never mutate bodies or the
pendulum. The caller (FrameDriver) hands the commands to a renderer adapter.

Pendulum frame:
    clear, rod, pivot, bob, velocity line, arrowhead
Body frame:
    clear, (circle, velocity line) per body, ground line
"""
from __future__ import annotations
import math
from collections.abc import Sequence

from .. import constants as C
from ..config import SimulationSettings, Viewport
from ..core.pendulum import bob_position, bob_velocity, pivot_for
from ..types import Body, PendulumState
from .commands import ClearRect, DrawCommand, FilledCircle, FilledTriangle, Line, Point


def _pt(x: float, y: float) -> Point:
    return (float(x), float(y))


def arrowhead(tip: Point, direction: float, size: float = C.ARROW_SIZE,
              spread: float = C.ARROW_SPREAD) -> tuple[Point, Point, Point]:
    """
    Triangle with its apex at `tip`, pointing along `direction` (radians).

    The two base corners sit `size` px behind the tip at ±spread from the
    reversed direction.
    """
    tx, ty = tip
    left = _pt(tx - size * math.cos(direction - spread), ty - size * math.sin(direction - spread))
    right = _pt(tx - size * math.cos(direction + spread), ty - size * math.sin(direction + spread))
    return (_pt(tx, ty), left, right)


def render_pendulum(state: PendulumState, viewport: Viewport,
                    settings: SimulationSettings | None = None) -> list[DrawCommand]:
    s = settings or SimulationSettings()
    pivot = pivot_for(viewport)
    bob = bob_position(state, pivot)
    vel = bob_velocity(state, s.pendulum_velocity_scale)
    tip = _pt(bob[0] + vel[0], bob[1] + vel[1])
    # atan2(0, 0) == 0, so a resting bob still gets a (degenerate) arrowhead
    direction = math.atan2(vel[1], vel[0])

    return [
        ClearRect(0.0, 0.0, viewport.width, viewport.height),
        Line(_pt(*pivot), _pt(*bob), C.ROD_COLOR, 3),
        FilledCircle(_pt(*pivot), C.PIVOT_RADIUS, C.PIVOT_COLOR),
        FilledCircle(_pt(*bob), C.BOB_RADIUS, C.BLUE),
        Line(_pt(*bob), tip, C.ARROW_COLOR, 2),
        FilledTriangle(arrowhead(tip, direction), C.ARROW_COLOR),
    ]


def render_bodies(bodies: Sequence[Body], viewport: Viewport,
                  settings: SimulationSettings | None = None) -> list[DrawCommand]:
    s = settings or SimulationSettings()
    w, h = viewport.width, viewport.height
    commands: list[DrawCommand] = [ClearRect(0.0, 0.0, w, h)]
    for b in bodies:
        center = _pt(b.position[0], b.position[1])
        end = _pt(b.position[0] + b.velocity[0] * s.velocity_scale,
                  b.position[1] + b.velocity[1] * s.velocity_scale)
        commands.append(FilledCircle(center, b.radius, b.color))
        commands.append(Line(center, end, C.VELOCITY_COLOR, 2))
    commands.append(Line(_pt(0, h - 1), _pt(w, h - 1), C.GROUND_COLOR, 2))
    return commands


def render_frame(state, viewport: Viewport,
                 settings: SimulationSettings | None = None) -> list[DrawCommand]:
    """
    Draw commands for one frame of the active variant.

    Args:
        state: PendulumState, BodyListState, or a sequence of bodies.
        viewport: Drawable area.
        settings: Provides the velocity display scales.
    """
    if isinstance(state, PendulumState):
        return render_pendulum(state, viewport, settings)
    bodies = getattr(state, "bodies", state)
    return render_bodies(bodies, viewport, settings)
