# MIT License (see LICENSE)
"""
Numeric constants and tuning defaults used throughout the engine.
"""
from __future__ import annotations
import math

# One full turn in radians. Headings are kept in [0, TWO_PI).
TWO_PI: float = 2.0 * math.pi

# Angular velocity is expressed per full turn of 360 units. The heading
# update divides by this without a 2π factor, see core/integrators.py.
DEGREES_PER_TURN: float = 360.0

# Smallest substep the RK4 integrator takes before subdividing dt.
# At least one substep is taken per DEFAULT_MIN_STEP units of elapsed time.
DEFAULT_MIN_STEP: float = 0.01

# Environment variable overriding DEFAULT_MIN_STEP (see util.default_min_step).
MIN_STEP_ENV: str = "KINEMATICS2D_MIN_STEP"
