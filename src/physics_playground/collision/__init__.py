# MIT License (see LICENSE)
"""
Boundary and collision resolution.

This subpackage provides:
    - walls: Reflection off the four viewport edges with energy loss.
    - contact: Circle-circle response (positional correction or impulse).

Typical usage:
    from physics_playground.collision import reflect_walls, correct_against_others

    for i, body in enumerate(bodies):
        reflect_walls(body, width, height, elasticity)
        correct_against_others(bodies, i)
"""
from .walls import reflect_walls, LEFT, RIGHT, FLOOR, CEILING
from .contact import (
    penetration,
    positional_correction,
    correct_against_others,
    impulse_response,
    resolve_pairs,
)

__all__ = [
    # Walls
    "reflect_walls",
    "LEFT",
    "RIGHT",
    "FLOOR",
    "CEILING",
    # Pairs
    "penetration",
    "positional_correction",
    "correct_against_others",
    "impulse_response",
    "resolve_pairs",
]
