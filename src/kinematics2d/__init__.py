# MIT License (see LICENSE)
"""
kinematics2d - kinematic integration of 2D point masses.

A host game loop owns a set of solids, sets or clears the force on each,
and calls update(dt) once per tick. Each update advances heading, velocity
and position under the current constant force.

Main entry points:
    - Vector2d: 2D vector with consistent cartesian and polar views.
    - Solid, create_solid, destroy_solid: rigid-body state and lifecycle.
    - RK4Integrator, SemiImplicitEulerIntegrator: update methods.
    - World: optional container that steps many solids together.

Submodules:
    - core: Integrators and conserved quantities.
    - io: JSON serialization/deserialization.
    - logging_config: Console/file logging for scripts.

Example:
    from kinematics2d import create_solid

    ship = create_solid(mass=2.0)
    ship.set_force(4.0, 0.0)
    ship.update(1.0)
    ship.position.x, ship.velocity.x    # (1.0, 2.0)
"""
from .core.integrators import Integrator, RK4Integrator, SemiImplicitEulerIntegrator, get_integrator
from .errors import AllocationFailedError, InvalidArgumentError, InvalidStateError, KinematicsError
from .solid import Solid, create_solid, destroy_solid
from .vector import Vector2d, copy_vector
from .world import World

__all__ = [
    # Vectors
    "Vector2d",
    "copy_vector",
    # Solids
    "Solid",
    "create_solid",
    "destroy_solid",
    # Integrators
    "Integrator",
    "RK4Integrator",
    "SemiImplicitEulerIntegrator",
    "get_integrator",
    # Container
    "World",
    # Errors
    "KinematicsError",
    "InvalidArgumentError",
    "InvalidStateError",
    "AllocationFailedError",
]
