# MIT License (see LICENSE)
"""
Mode state controller.

Owns the active scenario and its state. Exactly one variant exists at a
time:
    - BodyListState for gravity, projectile and collision modes.
    - PendulumState for pendulum mode.

Switching modes (or resizing the viewport) discards the previous state and
runs the entry action of the target mode. Nothing carries over between
modes. Entry actions are deterministic given the viewport, so re-entering a
mode always reproduces the same initial conditions.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field

import numpy as np

from . import constants as C
from .config import Viewport
from .types import Body, Mode, PendulumState

logger = logging.getLogger(__name__)


@dataclass
class BodyListState:
    """
    Variant state for the circle-body modes.

    Attributes:
        bodies: Owned, ordered sequence of bodies. For projectile mode it is
                bounded by `capacity`; appending beyond it evicts the oldest.
        capacity: Maximum number of bodies, or None for unbounded.
    """
    bodies: list[Body] = field(default_factory=list)
    capacity: int | None = None

    def append(self, body: Body) -> Body | None:
        """
        Append a body, evicting the oldest one if the list is full.

        Returns:
            The evicted body, or None.
        """
        evicted = None
        if self.capacity is not None and len(self.bodies) >= self.capacity:
            evicted = self.bodies.pop(0)
        self.bodies.append(body)
        return evicted


State = BodyListState | PendulumState


def initial_bodies(mode: Mode, viewport: Viewport) -> list[Body]:
    """Fixed body layout for a body mode (empty for projectile mode)."""
    w, h = viewport.width, viewport.height
    if mode is Mode.GRAVITY:
        return [
            Body(position=(fx * w, y), velocity=(0.0, 0.0), radius=r, color=color)
            for fx, y, r, color in C.GRAVITY_LAYOUT
        ]
    if mode is Mode.COLLISION:
        return [
            Body(position=(0.3 * w, h / 2), velocity=(C.COLLISION_SPEED, 0.0),
                 radius=C.COLLISION_RADIUS, color=C.BLUE),
            Body(position=(0.7 * w, h / 2), velocity=(-C.COLLISION_SPEED, 0.0),
                 radius=C.COLLISION_RADIUS, color=C.PINK),
        ]
    if mode is Mode.PROJECTILE:
        return []
    raise ValueError(f"Mode {mode.value!r} has no body layout")


def random_projectile(x: float, y: float, rng: np.random.Generator) -> Body:
    """
    Body launched from (x, y) with a random palette color, velocity and size.

    vx ∈ [-150, 150], vy ∈ [-400, -100] (upward), radius ∈ [15, 30].
    """
    color = C.SPAWN_PALETTE[int(rng.integers(len(C.SPAWN_PALETTE)))]
    vx = float(rng.uniform(*C.SPAWN_VX_RANGE))
    vy = float(rng.uniform(*C.SPAWN_VY_RANGE))
    radius = float(rng.uniform(*C.SPAWN_RADIUS_RANGE))
    return Body(position=(x, y), velocity=(vx, vy), radius=radius, color=color)


class ModeStateController:
    """
    State machine over {gravity, projectile, pendulum, collision}.

    Transitions happen only through reset() (explicit mode selection) and
    resize() (which re-runs the current mode's entry action).

    Args:
        mode: Initial mode.
        viewport: Initial drawable area.
        max_bodies: Projectile capacity (oldest evicted first).
    """

    def __init__(self, mode: Mode | str, viewport: Viewport, max_bodies: int = C.MAX_BODIES):
        self.max_bodies = max_bodies
        self._mode = Mode.parse(mode)
        self._viewport = viewport
        self._state: State = BodyListState()
        self.reset(self._mode, viewport)

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def state(self) -> State:
        return self._state

    @property
    def bodies(self) -> list[Body] | tuple[()]:
        """Body list of the active variant (empty tuple in pendulum mode)."""
        if isinstance(self._state, BodyListState):
            return self._state.bodies
        return ()

    @property
    def pendulum(self) -> PendulumState | None:
        if isinstance(self._state, PendulumState):
            return self._state
        return None

    def reset(self, mode: Mode | str | None = None, viewport: Viewport | None = None) -> State:
        """
        Discard the current state and run the entry action of `mode`.

        Args:
            mode: Target mode (defaults to the current one).
            viewport: New drawable area (defaults to the current one).

        Returns:
            The freshly created state.
        """
        self._mode = Mode.parse(mode) if mode is not None else self._mode
        self._viewport = viewport or self._viewport

        if self._mode is Mode.PENDULUM:
            self._state = PendulumState()
        else:
            capacity = self.max_bodies if self._mode is Mode.PROJECTILE else None
            self._state = BodyListState(initial_bodies(self._mode, self._viewport), capacity)

        logger.info(
            "Initialized %s mode (%gx%g)", self._mode.value,
            self._viewport.width, self._viewport.height,
        )
        return self._state

    def resize(self, viewport: Viewport) -> State:
        """Re-run the current mode's entry action for a new viewport size."""
        logger.debug("Viewport resized to %gx%g", viewport.width, viewport.height)
        return self.reset(self._mode, viewport)

    def spawn(self, x: float, y: float, rng: np.random.Generator) -> Body | None:
        """
        Launch a projectile at (x, y).

        Only valid in projectile mode; other modes ignore the input.

        Returns:
            The new body, or None if the input was ignored.
        """
        if self._mode is not Mode.PROJECTILE or not isinstance(self._state, BodyListState):
            return None
        body = random_projectile(x, y, rng)
        evicted = self._state.append(body)
        logger.debug(
            "Spawned body at (%.1f, %.1f) r=%.1f v=(%.1f, %.1f); %d bodies",
            x, y, body.radius, body.vx, body.vy, len(self._state.bodies),
        )
        if evicted is not None:
            logger.debug("Capacity %d reached, evicted oldest body", self._state.capacity)
        return body
