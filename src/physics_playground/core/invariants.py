# MIT License (see LICENSE)
"""
Energy diagnostics for verifying solver behavior.

Bodies carry no mass; for diagnostics a uniform disk is assumed, so mass is
proportional to r². Pendulum energy is per unit mass. With elasticity < 1,
floor friction and pendulum damping, both quantities should never increase
over time (up to integration error).
"""
from __future__ import annotations
import math
from collections.abc import Iterable

import numpy as np

from ..types import Body, PendulumState


def kinetic_energy(bodies: Iterable[Body]) -> float:
    """
    T = Σ 0.5 · r² · |v|²   (area-weighted, arbitrary units)
    """
    ke = 0.0
    for b in bodies:
        ke += 0.5 * b.radius * b.radius * float(np.dot(b.velocity, b.velocity))
    return ke


def pendulum_energy(state: PendulumState, gravity: float, gravity_scale: float = 10.0) -> float:
    """
    Mechanical energy per unit mass, zero at the bottom of the swing.

    E = 0.5 · (L·ω)² + g·s·L·(1 - cos θ)
    """
    L = state.length
    g = gravity * gravity_scale
    return 0.5 * (L * state.angular_velocity) ** 2 + g * L * (1.0 - math.cos(state.angle))
