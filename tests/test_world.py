import numpy as np
import pytest

from kinematics2d.core.invariants import kinetic_energy, linear_momentum
from kinematics2d.errors import InvalidArgumentError, InvalidStateError
from kinematics2d.profiler import Profiler
from kinematics2d.solid import create_solid, destroy_solid
from kinematics2d.world import World


def test_add_assigns_unique_ids():
    world = World()
    a, b = create_solid(1.0), create_solid(2.0)
    assert world.add_solid(a) == 1
    assert world.add_solid(b) == 2
    assert world.get_solid(2) is b
    assert world.get_solid(99) is None

    with pytest.raises(InvalidStateError):
        world.add_solid(a)


def test_initial_solids_are_registered():
    a, b = create_solid(1.0), create_solid(1.0)
    world = World(solids=[a, b])
    assert [s.id for s in world.solids] == [1, 2]


def test_add_destroyed_solid_fails():
    s = create_solid(1.0)
    destroy_solid(s)
    with pytest.raises(InvalidStateError):
        World().add_solid(s)


def test_step_updates_every_solid_independently():
    world = World()
    pusher = create_solid(2.0)
    pusher.set_force(4.0, 0.0)
    drifter = create_solid(1.0, velocity=(0.0, 1.0))
    world.add_solid(pusher)
    world.add_solid(drifter)

    world.step(1.0)

    assert world.time == 1.0
    assert pusher.position.x == pytest.approx(1.0)
    assert pusher.velocity.x == pytest.approx(2.0)
    assert drifter.position.y == pytest.approx(1.0)
    assert drifter.position.x == 0.0


def test_step_is_all_or_nothing():
    world = World()
    good = create_solid(1.0, velocity=(1.0, 0.0))
    bad = create_solid(1.0, velocity=(1.0, 0.0))
    world.add_solid(good)
    world.add_solid(bad)
    bad.mass = -1.0

    with pytest.raises(InvalidStateError):
        world.step(0.5)
    assert good.position.is_zero()
    assert world.time == 0.0


def test_step_rejects_bad_dt_even_when_empty():
    with pytest.raises(InvalidArgumentError):
        World().step(-1.0)


def test_remove_and_destroy():
    world = World()
    a, b = create_solid(1.0), create_solid(1.0)
    world.add_solid(a)
    world.add_solid(b)

    world.remove_solid(a)
    assert a not in world.solids
    assert not a.destroyed

    world.destroy_solid(b)
    assert world.solids == []
    assert b.destroyed
    with pytest.raises(InvalidStateError):
        b.update(0.1)


def test_run_ends_exactly_on_duration():
    world = World()
    s = create_solid(1.0, velocity=(1.0, 0.0))
    world.add_solid(s)

    steps = world.run(1.0, 0.3)

    assert steps == 4
    assert world.time == pytest.approx(1.0)
    assert s.position.x == pytest.approx(1.0)

    with pytest.raises(InvalidArgumentError):
        world.run(1.0, 0.0)


def test_profiler_times_integration():
    profiler = Profiler()
    world = World(profiler=profiler)
    world.add_solid(create_solid(1.0))
    for _ in range(3):
        world.step(1 / 60)

    summary = profiler.stats.summary()
    assert summary["integrate"]["n"] == 3
    assert summary["integrate"]["max_ms"] >= summary["integrate"]["mean_ms"] >= 0.0
    assert profiler.stats.total("integrate") >= 0.0
    assert profiler.stats.total("missing") == 0.0

    profiler.reset()
    assert profiler.stats.summary() == {}


def test_momentum_changes_by_impulse():
    world = World()
    a = create_solid(2.0, velocity=(1.0, 0.0))
    b = create_solid(3.0, velocity=(0.0, -1.0))
    world.add_solid(a)
    world.add_solid(b)

    np.testing.assert_allclose(linear_momentum(world.solids), [2.0, -3.0])
    assert kinetic_energy(world.solids) == pytest.approx(0.5 * 2.0 + 0.5 * 3.0)

    a.set_force(4.0, 2.0)
    world.step(0.5)
    np.testing.assert_allclose(linear_momentum(world.solids), [2.0 + 2.0, -3.0 + 1.0])

    # without forces the totals are conserved
    a.clear_force()
    p0, ke0 = linear_momentum(world.solids), kinetic_energy(world.solids)
    world.run(2.0, 0.1)
    np.testing.assert_allclose(linear_momentum(world.solids), p0)
    assert kinetic_energy(world.solids) == pytest.approx(ke0)


def test_invariants_skip_destroyed():
    a = create_solid(1.0, velocity=(2.0, 0.0))
    b = create_solid(1.0, velocity=(5.0, 0.0))
    destroy_solid(b)
    assert kinetic_energy([a, b]) == pytest.approx(2.0)
    np.testing.assert_allclose(linear_momentum([a, b]), [2.0, 0.0])


@pytest.mark.parametrize("duration", [float("inf"), float("nan"), -5.0])
def test_run_rejects_bad_duration(duration):
    world = World()
    s = create_solid(1.0, velocity=(1.0, 0.0))
    world.add_solid(s)

    with pytest.raises(InvalidArgumentError):
        world.run(duration, 0.1)
    assert world.time == 0.0
    assert s.position.is_zero()


@pytest.mark.parametrize("dt", [float("inf"), float("nan"), -0.1])
def test_run_rejects_bad_dt(dt):
    with pytest.raises(InvalidArgumentError):
        World().run(1.0, dt)


def test_run_terminates_when_clock_cannot_advance():
    # at this magnitude time + 1.0 == time
    world = World(time=1e17)
    s = create_solid(1.0, velocity=(1.0, 0.0))
    world.add_solid(s)

    assert world.run(100.0, 1.0) == 100
    assert s.position.x == pytest.approx(100.0)


def test_run_zero_duration_takes_no_steps():
    world = World()
    assert world.run(0.0, 0.1) == 0
    assert world.time == 0.0


def test_solid_belongs_to_one_world_at_a_time():
    first, second = World(), World()
    s = create_solid(1.0)
    first.add_solid(s)

    with pytest.raises(InvalidStateError):
        second.add_solid(s)
    assert first.get_solid(s.id) is s

    first.remove_solid(s)
    assert s.id == -1
    assert second.add_solid(s) == 1
    assert second.get_solid(1) is s
    assert first.get_solid(1) is None
