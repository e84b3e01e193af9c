# MIT License (see LICENSE)
"""
Small numeric helpers shared by the solvers and the renderer.

Vectors are numpy float64 arrays of shape (2,).
"""
from __future__ import annotations
import math
import os

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Lets callers pass tuples or lists for positions and velocities.
    """
    return np.array(x, dtype=np.float64)


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(math.hypot(v[0], v[1]))


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def quantize(x: float, step: float, origin: float = 0.0) -> float:
    """
    Snap x to the nearest multiple of step measured from origin.

    Rounded to 10 decimals so that e.g. 9.8 stays 9.8 instead of 9.800000000000001.
    """
    if step <= 0:
        return x
    return round(origin + round((x - origin) / step) * step, 10)


def env_value(name: str, default: str | None = None) -> str | None:
    """Read a PHYSICS_PLAYGROUND_<name> environment variable."""
    return os.environ.get(f"PHYSICS_PLAYGROUND_{name}", default)
