# MIT License (see LICENSE)
"""
Core type definitions for the sandbox.

Defines the simulation modes and the two kinds of state a mode can own:
- Body: a circle with position, velocity, radius and display color
  (gravity, projectile and collision modes).
- PendulumState: a single angular degree of freedom (pendulum mode).

The pendulum is deliberately not a Body: it has an angle and an angular
velocity rather than a position/velocity pair.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

import numpy as np

from .constants import PENDULUM_LENGTH, PENDULUM_START_ANGLE
from .util import f64


Color = tuple[int, int, int]


class Mode(str, Enum):
    """The four mutually exclusive simulation scenarios."""
    GRAVITY = "gravity"
    PROJECTILE = "projectile"
    PENDULUM = "pendulum"
    COLLISION = "collision"

    @classmethod
    def parse(cls, value: "Mode | str") -> "Mode":
        """Accept a Mode or its string value (case-insensitive)."""
        if isinstance(value, Mode):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown mode {value!r} (expected one of: {choices})") from None

    @property
    def uses_bodies(self) -> bool:
        """True for the modes driven by the circle-body integrator."""
        return self is not Mode.PENDULUM


@dataclass
class Body:
    """
    A simulated circular mass.

    Attributes:
        position: Center [x, y] in pixels (y grows downward).
        velocity: Velocity [vx, vy] in pixels per second.
        radius: Radius in pixels. Must be positive.
        color: RGB tuple used by the renderer.

    Note:
        Position and velocity are converted to float64 numpy arrays on init
        and are mutated in place by the integrator and the resolvers. They
        may leave the visible area transiently (e.g. a projectile spawned
        near the top edge).
    """
    position: np.ndarray | tuple[float, float]
    velocity: np.ndarray | tuple[float, float] = (0.0, 0.0)
    radius: float = 20.0
    color: Color = (96, 165, 250)

    def __post_init__(self) -> None:
        self.position = f64(self.position)
        self.velocity = f64(self.velocity)
        self.radius = float(self.radius)
        if not self.radius > 0:
            raise ValueError(f"Body radius must be positive, got {self.radius}")

    @property
    def x(self) -> float:
        return float(self.position[0])

    @property
    def y(self) -> float:
        return float(self.position[1])

    @property
    def vx(self) -> float:
        return float(self.velocity[0])

    @property
    def vy(self) -> float:
        return float(self.velocity[1])

    def copy(self) -> "Body":
        """Independent copy (arrays are not shared)."""
        return Body(self.position.copy(), self.velocity.copy(), self.radius, self.color)


@dataclass
class PendulumState:
    """
    Simple pendulum described by its angle from the downward vertical.

    Attributes:
        angle: Radians, counterclockwise on screen toward +x. Never wrapped.
        angular_velocity: Radians per second.
        length: Rod length in pixels, constant for the life of the state.
    """
    angle: float = PENDULUM_START_ANGLE
    angular_velocity: float = 0.0
    length: float = PENDULUM_LENGTH
