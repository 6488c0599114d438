# MIT License (see LICENSE)
"""
A container that updates a population of solids once per tick.

The World is a convenience for hosts that own many solids. Each Solid is
still integrated on its own with its own integrator; there is no coupling
between solids.

Structure:
    - User creates a World.
    - User creates solids with create_solid() and adds them via add_solid().
    - The host loop sets forces, then calls world.step(dt).
"""
from __future__ import annotations
import logging
from contextlib import nullcontext
from dataclasses import dataclass, field

from .core.integrators import check_dt
from .errors import InvalidArgumentError, InvalidStateError
from .profiler import Profiler
from .solid import Solid, destroy_solid
from .util import is_finite

logger = logging.getLogger(__name__)


@dataclass
class World:
    """
    Collection of independently integrated solids.

    Attributes:
        solids: Registered solids, in insertion order.
        time: Total simulated time advanced by step().
        profiler: Optional Profiler; step() is timed under "integrate".
    """
    solids: list[Solid] = field(default_factory=list)
    time: float = 0.0
    profiler: Profiler | None = None

    def __post_init__(self) -> None:
        self._next_id = 1
        registered, self.solids = self.solids, []
        for solid in registered:
            self.add_solid(solid)

    def add_solid(self, solid: Solid) -> int:
        """
        Register a Solid and assign it a unique id.

        Returns:
            The assigned id.

        Raises:
            InvalidStateError: If the Solid is destroyed or already
                registered, here or with another World.
        """
        if solid.destroyed:
            raise InvalidStateError("Cannot add a destroyed Solid")
        # a Solid belongs to at most one world at a time
        if solid.id != -1:
            raise InvalidStateError(f"Solid id={solid.id} is already registered with a world")
        solid.id = self._next_id
        self._next_id += 1
        self.solids.append(solid)
        logger.debug("Added solid id=%d", solid.id)
        return solid.id

    def remove_solid(self, solid: Solid) -> None:
        """Detach a Solid without destroying it; it may then join another World."""
        if solid in self.solids:
            self.solids.remove(solid)
            logger.debug("Removed solid id=%d", solid.id)
            solid.id = -1

    def destroy_solid(self, solid: Solid) -> None:
        """Detach a Solid and destroy it."""
        self.remove_solid(solid)
        destroy_solid(solid)

    def get_solid(self, solid_id: int) -> Solid | None:
        """Look up a registered Solid by id."""
        for solid in self.solids:
            if solid.id == solid_id:
                return solid
        return None

    def step(self, dt: float) -> None:
        """
        Update every solid by dt and advance the world clock.

        Preconditions of all solids are checked first; if any fails, no
        Solid is modified.

        Raises:
            InvalidArgumentError: If dt is negative or not finite.
            InvalidStateError: If a registered Solid cannot be updated.
        """
        check_dt(dt)
        for solid in self.solids:
            solid.check_updatable()

        section = self.profiler.section("integrate") if self.profiler else nullcontext()
        with section:
            # Id order keeps the update sequence reproducible
            for solid in sorted(self.solids, key=lambda s: s.id):
                solid.update(dt)

        self.time += dt

    def run(self, duration: float, dt: float) -> int:
        """
        Step repeatedly until duration has elapsed.

        The last step is shortened so the steps add up to duration.
        Progress is tracked on the remaining duration, not on the clock,
        so the loop ends even when time is too large for dt to change it.

        Returns:
            Number of steps taken.

        Raises:
            InvalidArgumentError: If duration is negative or not finite, or
                dt is not positive and finite.
        """
        if not is_finite(duration) or duration < 0:
            raise InvalidArgumentError(f"duration must be finite and non-negative, got {duration}")
        if not is_finite(dt) or dt <= 0:
            raise InvalidArgumentError(f"dt must be positive and finite, got {dt}")
        remaining = duration
        steps = 0
        while remaining > 1e-12:
            h = min(dt, remaining)
            self.step(h)
            remaining -= h
            steps += 1
        return steps
