# MIT License (see LICENSE)
"""
Frame driver: the per-frame simulation loop.

Each tick:
    1. Physics (skipped while paused): the mode's solver mutates the state.
         - gravity / projectile: integrator + walls
         - collision:            integrator + walls + pair resolver
         - pendulum:             pendulum solver
    2. Render: the render pass turns the state into draw commands (the first
       one clears the frame) and the renderer adapter replays them.
    3. Schedule the next tick.

Scheduling goes through FrameScheduler, a single-threaded stand-in for a
display refresh callback. The interactive app pumps it once per displayed
frame; tests and headless runs pump it directly. Ticks never overlap.
"""
from __future__ import annotations
import itertools
import logging
from collections.abc import Callable

import numpy as np

from .config import Configuration, SimulationSettings, Viewport
from .constants import DEFAULT_HEIGHT, DEFAULT_WIDTH
from .core.integrators import step_bodies
from .core.pendulum import pendulum_step
from .modes import ModeStateController
from .profiler import Profiler
from .renderer.adapter import NullRenderer, RendererAdapter
from .renderer.commands import DrawCommand
from .renderer.render import render_frame
from .types import Body, Mode, PendulumState

logger = logging.getLogger(__name__)


class FrameScheduler:
    """
    Holds frame callbacks until the next pump().

    Mirrors requestAnimationFrame/cancelAnimationFrame: request() returns a
    handle, cancel() drops a pending callback, and pump() runs the callbacks
    that were pending when it was called. Callbacks requested while pumping
    run on the next pump; one cancelled by an earlier callback of the same
    pump does not run.
    """

    def __init__(self) -> None:
        self._pending: dict[int, Callable[[], None]] = {}
        self._due: dict[int, Callable[[], None]] = {}
        self._handles = itertools.count(1)

    def request(self, callback: Callable[[], None]) -> int:
        handle = next(self._handles)
        self._pending[handle] = callback
        return handle

    def cancel(self, handle: int) -> None:
        self._pending.pop(handle, None)
        # may be queued in the pump currently running
        self._due.pop(handle, None)

    @property
    def pending(self) -> int:
        """Number of callbacks waiting for the next pump."""
        return len(self._pending)

    def pump(self) -> int:
        """
        Run the callbacks due this frame.

        Returns:
            Number of callbacks run.
        """
        self._due, self._pending = self._pending, {}
        ran = 0
        while self._due:
            handle = next(iter(self._due))
            callback = self._due.pop(handle)
            callback()
            ran += 1
        return ran


class FrameDriver:
    """
    Owns the animation lifecycle, the mode state and input injection.

    Args:
        config: User-facing inputs, read once per tick (never mutated by the
                physics or render steps).
        viewport: Initial drawable area.
        settings: Solver constants.
        renderer: Adapter receiving each frame's draw commands.
        scheduler: Frame scheduler (a private one by default).
        rng: Random generator for projectile spawns.
        seed: Seed for a new generator when `rng` is not given.
        profiler: Optional timing of the physics and render phases.
    """

    def __init__(
        self,
        config: Configuration | None = None,
        viewport: Viewport | None = None,
        settings: SimulationSettings | None = None,
        renderer: RendererAdapter | None = None,
        scheduler: FrameScheduler | None = None,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
        profiler: Profiler | None = None,
    ):
        self.config = config or Configuration()
        self.settings = settings or SimulationSettings()
        self.renderer = renderer or NullRenderer()
        self.scheduler = scheduler or FrameScheduler()
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.profiler = profiler
        self.controller = ModeStateController(
            self.config.mode,
            viewport or Viewport(DEFAULT_WIDTH, DEFAULT_HEIGHT),
            max_bodies=self.settings.max_bodies,
        )
        self.tick_count = 0
        self.last_commands: list[DrawCommand] = []
        self._handle: int | None = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def running(self) -> bool:
        """True while a tick is scheduled (or executing)."""
        return self._handle is not None

    def start(self) -> None:
        """Schedule the first tick. No-op if already running."""
        if self._handle is not None:
            return
        self._handle = self.scheduler.request(self._on_frame)
        logger.info("Frame loop started in %s mode", self.controller.mode.value)

    def _cancel(self) -> None:
        if self._handle is not None:
            self.scheduler.cancel(self._handle)
            self._handle = None

    def stop(self) -> None:
        """Cancel the pending tick so nothing runs after teardown."""
        if self._handle is None:
            return
        self._cancel()
        logger.info("Frame loop stopped after %d ticks", self.tick_count)
        if self.profiler is not None:
            self.profiler.log_summary()

    def restart(self) -> None:
        """
        Tear down and reschedule the loop after an input change.

        If the configured mode differs from the active one, the new mode is
        initialized first. A stopped driver stays stopped.
        """
        was_running = self.running
        self._cancel()
        if self.config.mode is not self.controller.mode:
            self.controller.reset(self.config.mode)
        logger.debug(
            "Restart: mode=%s gravity=%.2f elasticity=%.2f paused=%s",
            self.config.mode.value, self.config.gravity, self.config.elasticity, self.config.paused,
        )
        if was_running:
            self._handle = self.scheduler.request(self._on_frame)

    def _on_frame(self) -> None:
        self.tick()
        # A callback may have stopped the loop during the tick
        if self._handle is not None:
            self._handle = self.scheduler.request(self._on_frame)

    def run(self, max_ticks: int | None = None) -> int:
        """
        Pump the scheduler until stopped or `max_ticks` ticks have run.

        Returns:
            Number of ticks run.
        """
        start = self.tick_count
        while self.running and (max_ticks is None or self.tick_count - start < max_ticks):
            self.scheduler.pump()
        return self.tick_count - start

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def step(self) -> None:
        """Advance the active state by one fixed step, unless paused."""
        cfg, s = self.config, self.settings
        if cfg.paused:
            return
        state = self.controller.state
        if isinstance(state, PendulumState):
            pendulum_step(state, cfg.gravity, s.dt, s.gravity_scale, s.pendulum_damping)
        else:
            step_bodies(
                state.bodies, cfg.gravity, cfg.elasticity, self.controller.viewport, s,
                resolve=self.controller.mode is Mode.COLLISION,
            )

    def render(self) -> list[DrawCommand]:
        commands = render_frame(self.controller.state, self.controller.viewport, self.settings)
        self.renderer.render_commands(self.tick_count, commands)
        return commands

    def tick(self) -> list[DrawCommand]:
        """
        Run one physics + render pass.

        Returns:
            The draw commands issued this tick.
        """
        if self.profiler is not None:
            with self.profiler.section("physics"):
                self.step()
            with self.profiler.section("render"):
                commands = self.render()
        else:
            self.step()
            commands = self.render()
        self.last_commands = commands
        self.tick_count += 1
        return commands

    # ------------------------------------------------------------------
    # External inputs
    # ------------------------------------------------------------------

    def set_mode(self, mode: Mode | str) -> None:
        self.config.mode = Mode.parse(mode)
        self.restart()

    def set_gravity(self, gravity: float) -> None:
        self.config.gravity = float(gravity)
        self.restart()

    def set_elasticity(self, elasticity: float) -> None:
        self.config.elasticity = float(elasticity)
        self.restart()

    def set_paused(self, paused: bool) -> None:
        self.config.paused = bool(paused)
        self.restart()

    def reset(self) -> None:
        """Re-run the current mode's initializer."""
        self.controller.reset()

    def resize(self, width: float, height: float) -> None:
        """New viewport size; the current mode is re-initialized."""
        self.controller.resize(Viewport(width, height))

    def click(self, x: float, y: float) -> Body | None:
        """
        Pointer input at viewport coordinates (x, y).

        Spawns one projectile in projectile mode; ignored otherwise.
        """
        return self.controller.spawn(x, y, self.rng)
