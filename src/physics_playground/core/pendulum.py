# MIT License (see LICENSE)
"""
Single pendulum solver.

Equation of motion for a point mass on a massless rod of length L:
    θ'' = -(g/L) · sin θ

Integrated with semi-implicit Euler and a per-tick damping multiplier:
    α ← -(g·s/L) · sin θ
    ω ← ω + α·dt
    θ ← θ + ω·dt
    ω ← ω · damping

The damping is applied per tick, so its effective rate depends on the tick
rate (60 Hz). θ is never wrapped into [-π, π].

Screen coordinates have y pointing down, so the bob sits at
    pivot + L · (sin θ, cos θ)
and its linear velocity is the time derivative of that position.
"""
from __future__ import annotations
import math

import numpy as np

from ..config import Viewport
from ..constants import PIVOT_Y
from ..types import PendulumState


def angular_acceleration(state: PendulumState, gravity: float, gravity_scale: float = 10.0) -> float:
    """θ'' for the current angle (rad/s²)."""
    return -(gravity * gravity_scale / state.length) * math.sin(state.angle)


def pendulum_step(
    state: PendulumState,
    gravity: float,
    dt: float,
    gravity_scale: float = 10.0,
    damping: float = 0.999,
) -> None:
    """
    Advance the pendulum by one tick.

    Args:
        state: Pendulum to advance (modified in-place).
        gravity: Slider gravity in m/s².
        dt: Timestep in seconds.
        gravity_scale: Conversion from slider units to px/s².
        damping: Multiplier applied to the angular velocity after the step.
    """
    alpha = angular_acceleration(state, gravity, gravity_scale)
    state.angular_velocity += alpha * dt
    state.angle += state.angular_velocity * dt
    state.angular_velocity *= damping


def pivot_for(viewport: Viewport) -> np.ndarray:
    """Fixed pivot: horizontally centered, 100 px below the top edge."""
    return np.array([viewport.width / 2, PIVOT_Y], dtype=np.float64)


def bob_position(state: PendulumState, pivot: np.ndarray) -> np.ndarray:
    return pivot + state.length * np.array([math.sin(state.angle), math.cos(state.angle)])


def bob_velocity(state: PendulumState, scale: float = 1.0) -> np.ndarray:
    """
    Linear velocity of the bob in px/s, multiplied by `scale`.

    The renderer draws it with scale 0.5.
    """
    w, a, L = state.angular_velocity, state.angle, state.length
    return np.array([w * math.cos(a) * L * scale, -w * math.sin(a) * L * scale], dtype=np.float64)
