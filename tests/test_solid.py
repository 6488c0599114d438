import logging
import math

import numpy as np
import pytest

from kinematics2d.core.integrators import RK4Integrator, SemiImplicitEulerIntegrator
from kinematics2d.errors import (
    AllocationFailedError,
    InvalidArgumentError,
    InvalidStateError,
    KinematicsError,
)
from kinematics2d.solid import Solid, create_solid, destroy_solid
from kinematics2d.vector import Vector2d


def test_create_defaults():
    s = create_solid(3.0)
    assert s.mass == 3.0
    assert s.velocity.is_zero()
    assert s.position.is_zero()
    assert s.force.is_zero()
    assert not s.has_force
    assert s.heading == 0.0
    assert s.angular_velocity == 0.0
    assert isinstance(s.integrator, RK4Integrator)
    assert s.id == -1
    assert not s.destroyed


def test_create_copies_initial_vectors():
    vel = Vector2d.from_cartesian(1.0, 2.0)
    pos = Vector2d.from_polar(5.0, 0.5)
    s = create_solid(1.0, velocity=vel, position=pos)

    assert s.velocity is not vel
    assert s.position is not pos
    vel.zero()
    pos.zero()
    assert s.velocity.x == 1.0
    assert s.position.magnitude == 5.0


def test_create_accepts_pairs_and_integrator():
    s = create_solid(1.0, velocity=(0.5, -0.5), position=[10.0, 20.0],
                     integrator=SemiImplicitEulerIntegrator())
    assert (s.velocity.x, s.velocity.y) == (0.5, -0.5)
    assert (s.position.x, s.position.y) == (10.0, 20.0)
    assert s.integrator.name == "euler"


def test_solids_do_not_share_vectors():
    a = create_solid(1.0)
    b = create_solid(1.0)
    a.set_force(1.0, 0.0)
    assert b.force.is_zero()
    assert a.velocity is not b.velocity


@pytest.mark.parametrize("mass", [0.0, -1.0, float("nan"), float("inf"), "heavy"])
def test_create_rejects_bad_mass(mass):
    with pytest.raises(InvalidArgumentError):
        create_solid(mass)


def test_error_hierarchy():
    assert issubclass(InvalidArgumentError, ValueError)
    assert issubclass(InvalidStateError, RuntimeError)
    assert issubclass(AllocationFailedError, MemoryError)
    for exc in (InvalidArgumentError, InvalidStateError, AllocationFailedError):
        assert issubclass(exc, KinematicsError)


def test_allocation_failure_is_surfaced(monkeypatch):
    def exhausted(value):
        raise MemoryError

    monkeypatch.setattr("kinematics2d.solid.to_vector", exhausted)
    with pytest.raises(AllocationFailedError):
        create_solid(1.0)


def test_force_helpers():
    s = create_solid(2.0)
    s.set_force(4.0, -2.0)
    assert s.has_force
    np.testing.assert_allclose(s.acceleration, [2.0, -1.0])
    s.clear_force()
    assert not s.has_force
    assert s.force.magnitude == 0.0


def test_update_dispatches_to_integrator():
    calls = []

    class Recording(RK4Integrator):
        def step(self, solid, dt):
            calls.append((solid, dt))

    s = create_solid(1.0, integrator=Recording())
    s.update(0.25)
    assert calls == [(s, 0.25)]


def test_destroy_invalidates_handle():
    s = create_solid(1.0, velocity=(1.0, 1.0), position=(2.0, 2.0))
    handle = s
    destroy_solid(s)

    assert handle.destroyed
    assert handle.position.is_zero()
    with pytest.raises(InvalidStateError):
        handle.update(0.1)
    with pytest.raises(InvalidStateError):
        destroy_solid(handle)


def test_update_rejects_zero_mass_without_mutation():
    s = create_solid(1.0, velocity=(1.0, 0.0))
    s.set_force(1.0, 0.0)
    s.angular_velocity = 90.0
    s.mass = 0.0

    with pytest.raises(InvalidStateError):
        s.update(1.0)
    assert s.heading == 0.0
    assert s.position.is_zero()
    assert s.velocity.x == 1.0


@pytest.mark.parametrize("dt", [-0.1, float("nan"), float("inf")])
def test_update_rejects_bad_dt(dt):
    s = create_solid(1.0, velocity=(1.0, 0.0))
    with pytest.raises(InvalidArgumentError):
        s.update(dt)
    assert s.position.is_zero()


def test_direct_construction_uses_rk4():
    s = Solid(mass=1.0)
    s.update(0.5)
    assert isinstance(s.integrator, RK4Integrator)
    assert math.isclose(s.heading, 0.0)


def test_lifecycle_logging(caplog):
    with caplog.at_level(logging.DEBUG, logger="kinematics2d"):
        s = create_solid(2.0)
        destroy_solid(s)
    messages = [r.getMessage() for r in caplog.records]
    assert any("Created solid" in m for m in messages)
    assert any("Destroyed solid" in m for m in messages)
