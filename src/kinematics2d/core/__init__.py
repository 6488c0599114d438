# MIT License (see LICENSE)
"""
Core integration components.

This subpackage provides:
    - Integrators: substepped RK4 and semi-implicit Euler, plus a registry
      to build them by name.
    - Invariants: kinetic energy and linear momentum of a set of solids.

Typical usage:
    from kinematics2d.core import RK4Integrator

    solid.integrator = RK4Integrator(min_step=0.005)
    solid.update(1 / 60)
"""
from .integrators import (
    Integrator,
    RK4Integrator,
    SemiImplicitEulerIntegrator,
    advance_heading,
    check_dt,
    check_step,
    get_integrator,
    integrator_from_json,
)
from .invariants import kinetic_energy, linear_momentum

__all__ = [
    # Integrators
    "Integrator",
    "RK4Integrator",
    "SemiImplicitEulerIntegrator",
    "advance_heading",
    "check_dt",
    "check_step",
    "get_integrator",
    "integrator_from_json",
    # Invariants
    "kinetic_energy",
    "linear_momentum",
]
