# MIT License (see LICENSE)
"""
Tuning constants, initial layouts and colors used throughout the sandbox.

Units are screen pixels and seconds. The y axis points down, so gravity
accelerates bodies toward larger y values.
"""
from __future__ import annotations

import math

# Fixed physics step (seconds). Ticks never use measured wall-clock time.
DT: float = 1 / 60

# Gravity slider values are in m/s²; multiplying by this factor gives a
# pixel-space acceleration that looks right at typical window sizes.
GRAVITY_SCALE: float = 10.0

# Per-tick multipliers. They assume a 60 Hz tick rate.
FLOOR_FRICTION: float = 0.98
PENDULUM_DAMPING: float = 0.999

# Control ranges (inclusive) and slider resolution.
GRAVITY_RANGE: tuple[float, float] = (0.0, 20.0)
GRAVITY_STEP: float = 0.1
ELASTICITY_RANGE: tuple[float, float] = (0.0, 1.0)
ELASTICITY_STEP: float = 0.01
DEFAULT_GRAVITY: float = 9.8
DEFAULT_ELASTICITY: float = 0.8

# Projectile spawning
MAX_BODIES: int = 250
SPAWN_VX_RANGE: tuple[float, float] = (-150.0, 150.0)
SPAWN_VY_RANGE: tuple[float, float] = (-400.0, -100.0)
SPAWN_RADIUS_RANGE: tuple[float, float] = (15.0, 30.0)

# Pendulum
PENDULUM_LENGTH: float = 200.0
PENDULUM_START_ANGLE: float = math.pi / 4
PIVOT_Y: float = 100.0
PIVOT_RADIUS: float = 8.0
BOB_RADIUS: float = 25.0

# Render scales
VELOCITY_SCALE: float = 0.1
PENDULUM_VELOCITY_SCALE: float = 0.5
ARROW_SIZE: float = 8.0
ARROW_SPREAD: float = math.pi / 6

# Collision demo
COLLISION_RADIUS: float = 25.0
COLLISION_SPEED: float = 150.0

# Colors (RGB / RGBA)
BLUE = (96, 165, 250)
GREEN = (52, 211, 153)
PINK = (244, 114, 182)
AMBER = (251, 191, 36)
VIOLET = (167, 139, 250)

SPAWN_PALETTE: tuple[tuple[int, int, int], ...] = (BLUE, GREEN, PINK, AMBER, VIOLET)

ROD_COLOR = (148, 163, 184)
PIVOT_COLOR = (100, 116, 139)
GROUND_COLOR = (71, 85, 105)
VELOCITY_COLOR = (251, 191, 36, 204)
ARROW_COLOR = AMBER
BACKGROUND_COLOR = (30, 41, 59)
HUD_COLOR = (191, 219, 254)
HELP_COLOR = (148, 163, 184)

# Gravity mode layout: (fraction of width, y, radius, color)
GRAVITY_LAYOUT: tuple[tuple[float, float, float, tuple[int, int, int]], ...] = (
    (0.2, 50.0, 20.0, BLUE),
    (0.4, 100.0, 25.0, GREEN),
    (0.6, 80.0, 15.0, PINK),
    (0.8, 120.0, 30.0, AMBER),
)

# Window
DEFAULT_WIDTH: int = 960
DEFAULT_HEIGHT: int = 500
FPS: int = 60
