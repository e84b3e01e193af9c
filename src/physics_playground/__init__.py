# MIT License (see LICENSE)
"""
physics_playground - An interactive 2D physics sandbox.

Four fixed scenarios run on a fixed-step (1/60 s) loop: free fall with
bounce, click-to-launch projectiles, a single pendulum and a two-body
collision. Two global parameters (gravity, elasticity) are tuned live.

Main entry points:
    - FrameDriver: The per-frame loop (physics -> render -> schedule).
    - ModeStateController: Active mode and its state.
    - Configuration / SimulationSettings / Viewport: Inputs and constants.
    - Body, PendulumState, Mode: State types.

Submodules:
    - core: Integrator, pendulum solver, energy diagnostics.
    - collision: Wall reflection and circle-circle response.
    - renderer: Draw commands, render pass and renderer adapters.
    - app: pygame window (``python -m physics_playground``).

Example:
    from physics_playground import FrameDriver, Configuration, Viewport

    driver = FrameDriver(Configuration(mode="collision"), Viewport(800, 500))
    driver.start()
    driver.run(max_ticks=120)
    driver.stop()
"""
from .types import Body, Mode, PendulumState
from .config import Configuration, SimulationSettings, Viewport
from .modes import BodyListState, ModeStateController
from .driver import FrameDriver, FrameScheduler

__all__ = [
    # State
    "Body",
    "Mode",
    "PendulumState",
    "BodyListState",
    # Configuration
    "Configuration",
    "SimulationSettings",
    "Viewport",
    # Loop
    "ModeStateController",
    "FrameDriver",
    "FrameScheduler",
]
