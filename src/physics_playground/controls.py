# MIT License (see LICENSE)
"""
Control panel: the slider and button collaborator of the frame driver.

Inputs are clamped and snapped to the slider resolution here, before they
reach the core:
    gravity     ∈ [0, 20], step 0.1
    elasticity  ∈ [0, 1],  step 0.01
"""
from __future__ import annotations
from dataclasses import dataclass

from . import constants as C
from .driver import FrameDriver
from .types import Mode
from .util import clamp, quantize


@dataclass(frozen=True)
class ModeInfo:
    mode: Mode
    label: str
    description: str


MODE_CATALOG: tuple[ModeInfo, ...] = (
    ModeInfo(Mode.GRAVITY, "Gravity", "Falling objects with bounce"),
    ModeInfo(Mode.PROJECTILE, "Projectile", "Click to launch objects"),
    ModeInfo(Mode.PENDULUM, "Pendulum", "Simple harmonic motion"),
    ModeInfo(Mode.COLLISION, "Collision", "Elastic collision demo"),
)


def mode_info(mode: Mode | str) -> ModeInfo:
    mode = Mode.parse(mode)
    for info in MODE_CATALOG:
        if info.mode is mode:
            return info
    raise ValueError(f"No catalog entry for {mode!r}")


def clamp_gravity(value: float) -> float:
    lo, hi = C.GRAVITY_RANGE
    return clamp(quantize(float(value), C.GRAVITY_STEP, lo), lo, hi)


def clamp_elasticity(value: float) -> float:
    lo, hi = C.ELASTICITY_RANGE
    return clamp(quantize(float(value), C.ELASTICITY_STEP, lo), lo, hi)


class ControlPanel:
    """
    Writes validated configuration changes to a FrameDriver.

    Every setter goes through the driver so the loop restarts (and the mode
    re-initializes on a mode change).
    """

    def __init__(self, driver: FrameDriver):
        self.driver = driver

    @property
    def config(self):
        return self.driver.config

    def select_mode(self, mode: Mode | str) -> Mode:
        mode = Mode.parse(mode)
        if mode is not self.config.mode:
            self.driver.set_mode(mode)
        return mode

    def set_gravity(self, value: float) -> float:
        value = clamp_gravity(value)
        self.driver.set_gravity(value)
        return value

    def set_elasticity(self, value: float) -> float:
        value = clamp_elasticity(value)
        self.driver.set_elasticity(value)
        return value

    def nudge_gravity(self, steps: int) -> float:
        """Move the gravity slider by `steps` increments."""
        return self.set_gravity(self.config.gravity + steps * C.GRAVITY_STEP)

    def nudge_elasticity(self, steps: int) -> float:
        return self.set_elasticity(self.config.elasticity + steps * C.ELASTICITY_STEP)

    def toggle_pause(self) -> bool:
        paused = not self.config.paused
        self.driver.set_paused(paused)
        return paused

    def status_lines(self) -> list[str]:
        """HUD text for the current configuration."""
        cfg = self.config
        info = mode_info(cfg.mode)
        lines = [
            f"{info.label}: {info.description}",
            f"Gravity {cfg.gravity:.1f} m/s²   Elasticity {cfg.elasticity:.2f}",
        ]
        state = "Paused" if cfg.paused else "Running"
        if cfg.mode.uses_bodies:
            state += f" | Bodies: {len(self.driver.controller.bodies)}"
        lines.append(state)
        return lines
