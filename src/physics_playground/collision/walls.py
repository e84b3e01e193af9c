# MIT License (see LICENSE)
"""
Wall reflection for circular bodies inside the viewport.

Each wall is tested independently after the position update, in the fixed
order left, right, floor, ceiling. A body touching two walls (a corner) gets
both corrections in that order; there is no iterative re-resolution.

Reflection model, with elasticity e:
    v_axis ← -e · v_axis          (coefficient of restitution)
    position clamped to the wall  (no penetration after the tick)
The floor additionally applies rolling friction to vx.
"""
from __future__ import annotations

from ..types import Body

LEFT = "left"
RIGHT = "right"
FLOOR = "floor"
CEILING = "ceiling"


def reflect_walls(
    body: Body,
    width: float,
    height: float,
    elasticity: float,
    floor_friction: float = 0.98,
) -> tuple[str, ...]:
    """
    Clamp a body into [0, width] x [0, height] and reflect its velocity.

    Args:
        body: Body to correct (modified in-place).
        width: Viewport width in pixels.
        height: Viewport height in pixels (the floor is at y = height).
        elasticity: Fraction of the normal velocity kept after a bounce.
        floor_friction: Multiplier applied to vx on each floor contact.

    Returns:
        Names of the walls hit this call, in resolution order.
    """
    p, v, r = body.position, body.velocity, body.radius
    hits = []

    if p[0] - r < 0:
        p[0] = r
        v[0] = -elasticity * v[0]
        hits.append(LEFT)
    if p[0] + r > width:
        p[0] = width - r
        v[0] = -elasticity * v[0]
        hits.append(RIGHT)
    if p[1] + r > height:
        p[1] = height - r
        v[1] = -elasticity * v[1]
        v[0] *= floor_friction
        hits.append(FLOOR)
    if p[1] - r < 0:
        p[1] = r
        v[1] = -elasticity * v[1]
        hits.append(CEILING)

    return tuple(hits)
