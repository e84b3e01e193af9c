# MIT License (see LICENSE)
"""
Numerical solvers.

This subpackage provides:
    - integrators: Fixed-step gravity integrator for body lists.
    - pendulum: Angular solver and bob kinematics for the pendulum mode.
    - invariants: Energy diagnostics.

Typical usage:
    from physics_playground.core import step_bodies, pendulum_step

    step_bodies(bodies, gravity=9.8, elasticity=0.8, viewport=viewport)
    pendulum_step(pendulum, gravity=9.8, dt=1/60)
"""
from .integrators import integrate_body, step_bodies
from .pendulum import (
    angular_acceleration,
    pendulum_step,
    pivot_for,
    bob_position,
    bob_velocity,
)
from .invariants import kinetic_energy, pendulum_energy

__all__ = [
    # Integrators
    "integrate_body",
    "step_bodies",
    # Pendulum
    "angular_acceleration",
    "pendulum_step",
    "pivot_for",
    "bob_position",
    "bob_velocity",
    # Diagnostics
    "kinetic_energy",
    "pendulum_energy",
]
