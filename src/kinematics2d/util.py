# MIT License (see LICENSE)
"""
Utility functions for numeric checks and conversions.

Small helpers shared by the vector, solid and integrator modules:
float64 conversion, finiteness checks, heading normalization and the
environment-driven configuration lookups.
"""
from __future__ import annotations
import math
import os

import numpy as np

from .constants import DEFAULT_MIN_STEP, MIN_STEP_ENV, TWO_PI
from .errors import InvalidArgumentError


def f64(x) -> np.ndarray:
    """Convert any array-like to a float64 numpy array."""
    return np.array(x, dtype=np.float64)


def is_finite(value: float) -> bool:
    """True when value is a real number that is neither NaN nor infinite."""
    try:
        return math.isfinite(value)
    except TypeError:
        return False


def normalize_heading(heading: float) -> float:
    """
    Wrap an angle in radians into [0, 2π).

    A heading just below zero wraps to just under 2π and one just past 2π
    wraps to just above zero. NaN is returned unchanged.
    """
    heading = math.fmod(heading, TWO_PI)
    if heading < 0.0:
        heading += TWO_PI
    # -tiny + 2π can round up to exactly 2π
    if heading >= TWO_PI:
        heading -= TWO_PI
    return heading


def default_min_step() -> float:
    """
    Minimal RK4 substep, taken from the environment when set.

    Reads KINEMATICS2D_MIN_STEP and falls back to DEFAULT_MIN_STEP.

    Raises:
        InvalidArgumentError: If the variable is set but is not a positive
            finite number.
    """
    raw = os.environ.get(MIN_STEP_ENV)
    if raw is None or raw.strip() == "":
        return DEFAULT_MIN_STEP
    try:
        value = float(raw)
    except ValueError as exc:
        raise InvalidArgumentError(f"{MIN_STEP_ENV} must be a number, got {raw!r}") from exc
    if not is_finite(value) or value <= 0:
        raise InvalidArgumentError(f"{MIN_STEP_ENV} must be positive and finite, got {raw!r}")
    return value
