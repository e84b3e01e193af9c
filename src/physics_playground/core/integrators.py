# MIT License (see LICENSE)
"""
Fixed-step integrator for the circle-body modes.

Each tick advances every body with semi-implicit (symplectic) Euler:
    vy ← vy + g·s·dt        (s = gravity_scale, slider units → px/s²)
    x  ← x + vx·dt
    y  ← y + vy·dt
followed by wall reflection and, in collision mode, pair resolution.

The step size is constant; measured frame time is never used.
"""
from __future__ import annotations
from collections.abc import Sequence

from ..collision.contact import correct_against_others, resolve_pairs
from ..collision.walls import reflect_walls
from ..config import SimulationSettings, Viewport
from ..types import Body


def integrate_body(body: Body, gravity: float, dt: float, gravity_scale: float = 10.0) -> None:
    """
    Advance one body by dt under downward gravity.

    Args:
        body: Body to integrate (modified in-place).
        gravity: Slider gravity in m/s².
        dt: Timestep in seconds.
        gravity_scale: Conversion from slider units to px/s².
    """
    body.velocity[1] += gravity * gravity_scale * dt
    body.position[0] += body.velocity[0] * dt
    body.position[1] += body.velocity[1] * dt


def step_bodies(
    bodies: Sequence[Body],
    gravity: float,
    elasticity: float,
    viewport: Viewport,
    settings: SimulationSettings | None = None,
    resolve: bool = False,
) -> int:
    """
    Advance a body list by one tick.

    For each body in order: integrate, reflect off the walls and, when
    `resolve` is set with the positional resolver, correct it against every
    other body. Later bodies in the list therefore see earlier ones already
    moved this tick. With the impulse resolver the pair pass runs once after
    all bodies have moved.

    Args:
        bodies: Bodies to advance (modified in-place).
        gravity: Slider gravity in m/s².
        elasticity: Coefficient of restitution for walls (and impulse pairs).
        viewport: Drawable area; walls are its edges.
        settings: Solver constants (defaults if None).
        resolve: Enable body-body collisions (collision mode).

    Returns:
        Number of pair corrections applied this tick.
    """
    s = settings or SimulationSettings()
    width, height = viewport.width, viewport.height
    contacts = 0

    for i, body in enumerate(bodies):
        integrate_body(body, gravity, s.dt, s.gravity_scale)
        reflect_walls(body, width, height, elasticity, s.floor_friction)
        if resolve and s.resolver == "positional":
            contacts += correct_against_others(bodies, i)

    if resolve and s.resolver == "impulse":
        contacts += resolve_pairs(bodies, elasticity)

    return contacts
