# MIT License (see LICENSE)
"""
Numerical integrators that advance a Solid by one tick.

Motion model, with F held constant over the tick:
    dx/dt = v,        dv/dt = F/m
    dθ/dt = ω / 360   (heading, see advance_heading)

Available integrators:
- RK4Integrator: substepped update, exact for constant acceleration (default)
- SemiImplicitEulerIntegrator: single first-order step

Both share the same preconditions and heading update, implemented once in
Integrator.step(). Subclasses only provide the forced-motion update; a
Solid with no applied force drifts linearly, which every method gets
exactly right.

Reference:
    Runge-Kutta methods: https://en.wikipedia.org/wiki/Runge-Kutta_methods
    Semi-implicit Euler: https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations
import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..constants import DEGREES_PER_TURN
from ..errors import InvalidArgumentError
from ..util import default_min_step, is_finite, normalize_heading

if TYPE_CHECKING:
    from ..solid import Solid

logger = logging.getLogger(__name__)


def advance_heading(heading: float, angular_velocity: float, dt: float) -> float:
    """
    Return the heading after dt, wrapped into [0, 2π).

    The angular velocity is divided by 360 and added to the radian heading
    without a 2π factor, so one "degree per unit time" turns the heading by
    1/360 rad, not π/180 rad.
    """
    return normalize_heading(heading + angular_velocity / DEGREES_PER_TURN * dt)


def check_dt(dt: float) -> None:
    """Raise InvalidArgumentError unless dt is finite and non-negative."""
    if not is_finite(dt) or dt < 0:
        raise InvalidArgumentError(f"dt must be finite and non-negative, got {dt}")


def check_step(solid: Solid, dt: float) -> None:
    """
    Validate a pending update without touching the Solid.

    Raises:
        InvalidArgumentError: If dt is negative or not finite.
        InvalidStateError: If the Solid is destroyed or has an unusable mass.
    """
    check_dt(dt)
    solid.check_updatable()


class Integrator(ABC):
    """
    Abstract base class for Solid update methods.

    Subclasses implement _integrate_force(); step() handles validation, the
    heading update and the force-free case.

    Usage:
        solid.integrator = RK4Integrator(min_step=0.005)
        solid.update(dt)          # calls solid.integrator.step(solid, dt)
    """

    name: str = "integrator"

    def step(self, solid: Solid, dt: float) -> None:
        """
        Advance solid by dt in place.

        All preconditions are checked before anything is mutated.
        """
        check_step(solid, dt)

        solid.heading = advance_heading(solid.heading, solid.angular_velocity, dt)

        if solid.has_force:
            self._integrate_force(solid, dt)
        else:
            # Force-free motion is exactly linear
            solid.position.set_cartesian(
                solid.position.x + solid.velocity.x * dt,
                solid.position.y + solid.velocity.y * dt,
            )

    @abstractmethod
    def _integrate_force(self, solid: Solid, dt: float) -> None:
        """
        Advance velocity and position of a Solid under its constant force.

        Must commit both vectors through set_cartesian.
        """
        ...

    def to_json(self) -> dict[str, Any]:
        """Serialize the integrator configuration."""
        return {"type": self.name}


@dataclass(frozen=True)
class RK4Integrator(Integrator):
    """
    Substepped update for motion under constant acceleration.

    dt is split into N = max(1, ceil(dt / min_step)) equal substeps of
    length h = dt / N. Each substep applies

        x += v·h + ½·a·h²
        v += a·h

    which is what classical RK4 produces for dv/dt = a constant: the four
    stage slopes for x are v, v + a·h/2, v + a·h/2, v + a·h, whose (1,2,2,1)/6
    average is v + a·h/2. The result therefore does not depend on N
    beyond rounding. Substepping only adds work; the substep loop is kept
    so that no single substep spans more than min_step, and it does not
    change the result.

    Attributes:
        min_step: Substep threshold. At least one substep is taken per
                  min_step units of elapsed time. Defaults to
                  KINEMATICS2D_MIN_STEP from the environment, or 0.01.
    """
    min_step: float = field(default_factory=default_min_step)

    name = "rk4"

    def __post_init__(self) -> None:
        if not is_finite(self.min_step) or self.min_step <= 0:
            raise InvalidArgumentError(f"min_step must be positive and finite, got {self.min_step}")

    def substeps(self, dt: float) -> int:
        """Number of substeps used for an update of length dt."""
        return max(1, math.ceil(dt / self.min_step))

    def _integrate_force(self, solid: Solid, dt: float) -> None:
        n = self.substeps(dt)
        h = dt / n
        logger.debug("rk4 dt=%g substeps=%d h=%g", dt, n, h)

        a = solid.acceleration
        x = solid.position.as_array()
        v = solid.velocity.as_array()

        dv = a * h
        dx_accel = 0.5 * a * h * h
        for _ in range(n):
            x += v * h + dx_accel
            v += dv

        solid.velocity.set_cartesian(v[0], v[1])
        solid.position.set_cartesian(x[0], x[1])

    def to_json(self) -> dict[str, Any]:
        return {"type": self.name, "min_step": self.min_step}


@dataclass(frozen=True)
class SemiImplicitEulerIntegrator(Integrator):
    """
    Single-step semi-implicit (symplectic) Euler.

    Updates velocity before position:
        v(t+dt) = v(t) + a·dt
        x(t+dt) = x(t) + v(t+dt)·dt

    First order: under constant force the position overshoots the exact
    answer by ½·a·dt², so keep dt small.
    """

    name = "euler"

    def _integrate_force(self, solid: Solid, dt: float) -> None:
        a = solid.acceleration
        v = solid.velocity.as_array() + a * dt
        x = solid.position.as_array() + v * dt

        solid.velocity.set_cartesian(v[0], v[1])
        solid.position.set_cartesian(x[0], x[1])


INTEGRATORS: dict[str, type[Integrator]] = {
    RK4Integrator.name: RK4Integrator,
    SemiImplicitEulerIntegrator.name: SemiImplicitEulerIntegrator,
}


def get_integrator(name: str, **options: Any) -> Integrator:
    """
    Build an integrator by name.

    Args:
        name: "rk4" or "euler".
        **options: Integrator fields, e.g. min_step for "rk4".

    Raises:
        InvalidArgumentError: If the name is unknown or an option is invalid.
    """
    try:
        cls = INTEGRATORS[name]
    except (KeyError, TypeError):
        raise InvalidArgumentError(
            f"Unknown integrator: {name!r} (expected one of {sorted(INTEGRATORS)})"
        ) from None
    try:
        return cls(**options)
    except TypeError as exc:
        raise InvalidArgumentError(f"Bad options for integrator {name!r}: {exc}") from exc


def integrator_from_json(d: dict[str, Any]) -> Integrator:
    """Inverse of Integrator.to_json()."""
    if not isinstance(d, dict):
        raise InvalidArgumentError(f"Integrator definition must be an object, got {d!r}")
    if "type" not in d:
        raise InvalidArgumentError("Integrator definition missing required 'type' field.")
    options = {k: v for k, v in d.items() if k != "type"}
    return get_integrator(d["type"], **options)
