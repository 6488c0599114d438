# MIT License (see LICENSE)
"""
Rigid-body state record and its lifecycle.

A Solid is a point mass with a heading:
  - position, velocity and the currently applied force (Vector2d each)
  - heading in radians, kept in [0, 2π)
  - angular velocity in degrees per unit time
  - the integrator that advances it by one tick

The host loop sets or clears the force, then calls update(dt) once per tick.
Every Solid owns its vectors; nothing is shared between solids.

Lifecycle:
    solid = create_solid(2.0, velocity=(1.0, 0.0))
    solid.set_force(4.0, 0.0)
    solid.update(0.016)
    destroy_solid(solid)   # later updates raise InvalidStateError
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field

import numpy as np

from .core.integrators import Integrator, RK4Integrator
from .errors import AllocationFailedError, InvalidArgumentError, InvalidStateError
from .util import is_finite
from .vector import Vector2d, to_vector

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Solid:
    """
    A 2D point mass with kinematic heading.

    Attributes:
        mass: Mass, must be positive and finite when updated.
        velocity: Linear velocity.
        position: Position of the center of mass.
        force: Force applied during the next update. A zero-length force
               means "no force this step".
        heading: Orientation in radians, in [0, 2π).
        angular_velocity: Heading rate in degrees per unit time.
        integrator: Update method used by update().
        id: Identifier assigned by World.add_solid(), -1 otherwise.
        destroyed: Set by destroy_solid(); a destroyed Solid cannot be updated.

    Use create_solid() rather than the constructor so that mass is checked
    and the initial vectors are copied.
    """
    mass: float
    velocity: Vector2d = field(default_factory=Vector2d)
    position: Vector2d = field(default_factory=Vector2d)
    force: Vector2d = field(default_factory=Vector2d)
    heading: float = 0.0
    angular_velocity: float = 0.0
    integrator: Integrator = field(default_factory=RK4Integrator)
    id: int = -1
    destroyed: bool = False

    def update(self, dt: float) -> None:
        """
        Advance heading, velocity and position by dt.

        Raises:
            InvalidArgumentError: If dt is negative or not finite.
            InvalidStateError: If the Solid was destroyed or its mass is
                not a positive finite number.
        """
        self.integrator.step(self, dt)

    def set_force(self, fx: float, fy: float) -> None:
        """Apply a constant force for the following updates."""
        self.force.set_cartesian(fx, fy)

    def clear_force(self) -> None:
        """Remove the applied force."""
        self.force.zero()

    @property
    def has_force(self) -> bool:
        """True when a non-zero force is applied."""
        return not self.force.is_zero()

    @property
    def acceleration(self) -> np.ndarray:
        """Acceleration F/m as [ax, ay]."""
        return self.force.as_array() / self.mass

    def check_updatable(self) -> None:
        """
        Raise InvalidStateError unless this Solid can be integrated.

        Called before any state is touched so that a failed update leaves
        the Solid unchanged.
        """
        if self.destroyed:
            raise InvalidStateError("Solid has been destroyed")
        if not is_finite(self.mass) or self.mass <= 0:
            raise InvalidStateError(f"Solid mass must be positive and finite, got {self.mass}")


def create_solid(
    mass: float,
    velocity: Vector2d | tuple[float, float] | None = None,
    position: Vector2d | tuple[float, float] | None = None,
    integrator: Integrator | None = None,
) -> Solid:
    """
    Create a Solid at rest heading, with no applied force.

    Args:
        mass: Positive, finite mass.
        velocity: Initial velocity (Vector2d or (x, y)); zero when None.
        position: Initial position (Vector2d or (x, y)); zero when None.
        integrator: Update method; RK4Integrator() when None.

    Returns:
        The new Solid. Vectors passed in are copied, never shared.

    Raises:
        InvalidArgumentError: If mass is not positive and finite.
        AllocationFailedError: If memory runs out while building the Solid.
    """
    if not is_finite(mass) or mass <= 0:
        raise InvalidArgumentError(f"Solid mass must be positive and finite, got {mass}")

    try:
        solid = Solid(
            mass=float(mass),
            velocity=to_vector(velocity),
            position=to_vector(position),
            integrator=integrator if integrator is not None else RK4Integrator(),
        )
    except MemoryError as exc:
        raise AllocationFailedError("Out of memory while creating Solid") from exc

    logger.debug("Created solid mass=%g integrator=%s", solid.mass, solid.integrator.name)
    return solid


def destroy_solid(solid: Solid) -> None:
    """
    Release a Solid's state and mark it destroyed.

    The vectors are zeroed and any further update() through an outstanding
    reference raises InvalidStateError.

    Raises:
        InvalidStateError: If the Solid was already destroyed.
    """
    if solid.destroyed:
        raise InvalidStateError("Solid has already been destroyed")
    solid.velocity.zero()
    solid.position.zero()
    solid.force.zero()
    solid.destroyed = True
    logger.debug("Destroyed solid id=%d", solid.id)
