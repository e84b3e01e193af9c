# MIT License (see LICENSE)
"""
Pairwise circle-circle collision response.

Two models are provided:

- Positional correction (the default). For an ordered
  pair (a, b) that penetrates, the ideal non-overlapping position of b is
  computed along the contact normal, and half of the positional error is
  used both as a velocity impulse and as a separation displacement:

      n      = (cos φ, sin φ),  φ = atan2(b - a)
      target = a + n · (ra + rb)
      c      = (target - b) / 2
      a.v -= c;  b.v += c;  b.p += c;  a.p -= c

  This is not mass-weighted and does not use the elasticity. Pairs are
  visited in both orders per tick, so a pair may be corrected twice.

- Impulse response (opt-in via SimulationSettings.resolver = "impulse").
  Mass is taken proportional to r² (uniform disks). Bodies are separated by
  their inverse-mass share of the overlap, then an impulse along the normal
  applies the coefficient of restitution:

      j = -(1 + e) · (v_rel · n) / (1/ma + 1/mb)

  Each unordered pair is visited once per tick.
"""
from __future__ import annotations
import math
from collections.abc import Sequence

import numpy as np

from ..types import Body
from ..util import norm


def penetration(a: Body, b: Body) -> float:
    """Overlap depth (positive when the circles intersect)."""
    d = b.position - a.position
    return (a.radius + b.radius) - math.hypot(d[0], d[1])


def positional_correction(a: Body, b: Body) -> bool:
    """
    Apply the position-error correction for the ordered pair (a, b).

    Args:
        a: Body whose position anchors the target.
        b: The other body, pushed toward its target.

    Returns:
        True if the pair was penetrating and a correction was applied.
    """
    dx = b.position[0] - a.position[0]
    dy = b.position[1] - a.position[1]
    distance = math.sqrt(dx * dx + dy * dy)
    min_distance = a.radius + b.radius
    if distance >= min_distance:
        return False

    angle = math.atan2(dy, dx)
    target_x = a.position[0] + math.cos(angle) * min_distance
    target_y = a.position[1] + math.sin(angle) * min_distance
    cx = (target_x - b.position[0]) * 0.5
    cy = (target_y - b.position[1]) * 0.5

    a.velocity[0] -= cx
    a.velocity[1] -= cy
    b.velocity[0] += cx
    b.velocity[1] += cy

    b.position[0] += cx
    b.position[1] += cy
    a.position[0] -= cx
    a.position[1] -= cy
    return True


def correct_against_others(bodies: Sequence[Body], i: int) -> int:
    """
    Run positional_correction for every ordered pair (i, j), j != i.

    Returns:
        Number of corrections applied.
    """
    a = bodies[i]
    hits = 0
    for j, other in enumerate(bodies):
        if j != i and positional_correction(a, other):
            hits += 1
    return hits


def impulse_response(a: Body, b: Body, restitution: float) -> bool:
    """
    Separate two penetrating circles and apply a restitution impulse.

    Args:
        a: First body.
        b: Second body.
        restitution: Coefficient of restitution in [0, 1].

    Returns:
        True if the pair was penetrating.
    """
    d = b.position - a.position
    dist = norm(d)
    overlap = a.radius + b.radius - dist
    if overlap <= 0:
        return False

    n = d / dist if dist > 1e-12 else np.array([1.0, 0.0], dtype=np.float64)
    inv_ma = 1.0 / (a.radius * a.radius)
    inv_mb = 1.0 / (b.radius * b.radius)
    inv_sum = inv_ma + inv_mb

    # Split the overlap by inverse mass so the lighter body moves more
    a.position -= n * (overlap * inv_ma / inv_sum)
    b.position += n * (overlap * inv_mb / inv_sum)

    vn = float(np.dot(b.velocity - a.velocity, n))
    if vn < 0:
        j = -(1.0 + restitution) * vn / inv_sum
        a.velocity -= n * (j * inv_ma)
        b.velocity += n * (j * inv_mb)
    return True


def resolve_pairs(bodies: Sequence[Body], restitution: float) -> int:
    """
    Run impulse_response over every unordered pair once.

    Returns:
        Number of penetrating pairs resolved.
    """
    hits = 0
    n = len(bodies)
    for i in range(n):
        for j in range(i + 1, n):
            if impulse_response(bodies[i], bodies[j], restitution):
                hits += 1
    return hits
