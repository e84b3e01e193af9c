# MIT License (see LICENSE)
"""
Configuration objects read by the simulation core.

- Configuration: the four user-facing inputs (gravity, elasticity, mode,
  paused). Written by the control collaborator, sampled once per tick.
- SimulationSettings: fixed tuning constants of the solvers. Defaults
  match the interactive sandbox; they can be overridden from the
  environment for experiments.
- Viewport: drawable area in device-independent pixels.
"""
from __future__ import annotations
from dataclasses import dataclass

from . import constants as C
from .types import Mode
from .util import env_value

RESOLVERS = ("positional", "impulse")


@dataclass
class Configuration:
    """
    User-facing simulation inputs.

    Attributes:
        gravity: Slider value in m/s², expected range [0, 20].
        elasticity: Coefficient of restitution, expected range [0, 1].
        mode: Active scenario.
        paused: When True the physics step is skipped but rendering continues.

    Note:
        Ranges are enforced by ControlPanel, not here. The core accepts any
        float and may produce nonsensical (but finite) motion for
        out-of-range values.
    """
    gravity: float = C.DEFAULT_GRAVITY
    elasticity: float = C.DEFAULT_ELASTICITY
    mode: Mode = Mode.GRAVITY
    paused: bool = False

    def __post_init__(self) -> None:
        self.mode = Mode.parse(self.mode)


@dataclass(frozen=True)
class SimulationSettings:
    """
    Solver constants.

    Attributes:
        dt: Fixed timestep in seconds.
        gravity_scale: Slider units to pixel-space acceleration.
        floor_friction: Horizontal velocity multiplier on each floor bounce.
        pendulum_damping: Angular velocity multiplier per tick.
        velocity_scale: Length of drawn body velocity lines per px/s.
        pendulum_velocity_scale: Length of the drawn bob velocity per px/s.
        max_bodies: Projectile capacity; the oldest body is evicted beyond it.
        resolver: "positional" (position-error correction, ordered
                  pairs) or "impulse" (mass-weighted restitution impulse,
                  unordered pairs).
        fps: Target display rate of the interactive application.
    """
    dt: float = C.DT
    gravity_scale: float = C.GRAVITY_SCALE
    floor_friction: float = C.FLOOR_FRICTION
    pendulum_damping: float = C.PENDULUM_DAMPING
    velocity_scale: float = C.VELOCITY_SCALE
    pendulum_velocity_scale: float = C.PENDULUM_VELOCITY_SCALE
    max_bodies: int = C.MAX_BODIES
    resolver: str = "positional"
    fps: int = C.FPS

    def __post_init__(self) -> None:
        if self.resolver not in RESOLVERS:
            raise ValueError(f"Unknown resolver {self.resolver!r} (expected one of: {', '.join(RESOLVERS)})")
        if self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if self.max_bodies < 1:
            raise ValueError(f"max_bodies must be at least 1, got {self.max_bodies}")
        if self.fps < 1:
            raise ValueError(f"fps must be at least 1, got {self.fps}")

    @classmethod
    def from_env(cls, **overrides) -> "SimulationSettings":
        """
        Build settings from PHYSICS_PLAYGROUND_* environment variables.

        Recognized: DT, MAX_BODIES, RESOLVER, FPS. Explicit keyword overrides
        win over the environment.

        Raises:
            ValueError: If a variable cannot be parsed.
        """
        parsed = {}
        for key, conv in (("dt", float), ("max_bodies", int), ("resolver", str), ("fps", int)):
            raw = env_value(key.upper())
            if raw is None:
                continue
            try:
                parsed[key] = conv(raw)
            except ValueError:
                raise ValueError(f"Invalid PHYSICS_PLAYGROUND_{key.upper()}={raw!r}") from None
        parsed.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**parsed)


@dataclass(frozen=True)
class Viewport:
    """Drawable area in device-independent pixels."""
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Viewport must have a positive size, got {self.width}x{self.height}")

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)
