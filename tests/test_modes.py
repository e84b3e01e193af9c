import math

import numpy as np
import pytest
from physics_playground.config import Viewport
from physics_playground.modes import BodyListState, ModeStateController, initial_bodies
from physics_playground.types import Body, Mode, PendulumState

VP = Viewport(1000, 500)


def test_gravity_mode_layout():
    ctl = ModeStateController(Mode.GRAVITY, VP)
    bodies = ctl.bodies
    assert len(bodies) == 4
    assert [b.x for b in bodies] == pytest.approx([200.0, 400.0, 600.0, 800.0])
    assert [b.y for b in bodies] == [50.0, 100.0, 80.0, 120.0]
    assert [b.radius for b in bodies] == [20.0, 25.0, 15.0, 30.0]
    assert all(np.array_equal(b.velocity, (0.0, 0.0)) for b in bodies)
    assert len({b.color for b in bodies}) == 4
    assert ctl.pendulum is None


def test_collision_mode_layout():
    ctl = ModeStateController("collision", VP)
    a, b = ctl.bodies
    assert (a.x, a.y, a.vx, a.vy, a.radius) == pytest.approx((300.0, 250.0, 150.0, 0.0, 25.0))
    assert (b.x, b.y, b.vx, b.vy, b.radius) == pytest.approx((700.0, 250.0, -150.0, 0.0, 25.0))


def test_projectile_mode_starts_empty():
    ctl = ModeStateController(Mode.PROJECTILE, VP)
    assert ctl.bodies == []
    assert isinstance(ctl.state, BodyListState)


def test_pendulum_mode_state():
    ctl = ModeStateController(Mode.PENDULUM, VP)
    p = ctl.pendulum
    assert isinstance(p, PendulumState)
    assert p.angle == pytest.approx(math.pi / 4)
    assert p.angular_velocity == 0.0
    assert p.length == 200.0
    assert ctl.bodies == ()


def test_switching_modes_restores_initial_conditions():
    """collision -> gravity -> collision gives the same start as a fresh load."""
    fresh = ModeStateController(Mode.COLLISION, VP)
    ctl = ModeStateController(Mode.COLLISION, VP)
    for b in ctl.bodies:
        b.position += 37.0
        b.velocity *= -3.0

    ctl.reset(Mode.GRAVITY)
    assert len(ctl.bodies) == 4
    ctl.reset(Mode.COLLISION)

    for got, want in zip(ctl.bodies, fresh.bodies):
        assert np.array_equal(got.position, want.position)
        assert np.array_equal(got.velocity, want.velocity)
        assert got.radius == want.radius


def test_pendulum_resets_only_on_reentry():
    ctl = ModeStateController(Mode.PENDULUM, VP)
    ctl.pendulum.angle = 2.0
    ctl.reset(Mode.PROJECTILE)
    assert ctl.pendulum is None
    ctl.reset(Mode.PENDULUM)
    assert ctl.pendulum.angle == pytest.approx(math.pi / 4)


def test_resize_reinitializes_current_mode():
    ctl = ModeStateController(Mode.COLLISION, VP)
    ctl.bodies[0].position[:] = (0.0, 0.0)
    ctl.resize(Viewport(600, 400))
    assert ctl.mode is Mode.COLLISION
    assert ctl.viewport == Viewport(600, 400)
    assert ctl.bodies[0].x == pytest.approx(180.0)
    assert ctl.bodies[1].x == pytest.approx(420.0)
    assert ctl.bodies[0].y == 200.0


def test_initialization_is_idempotent():
    a = initial_bodies(Mode.GRAVITY, VP)
    b = initial_bodies(Mode.GRAVITY, VP)
    assert all(np.array_equal(x.position, y.position) for x, y in zip(a, b))
    # fresh objects, no shared arrays
    assert all(x.position is not y.position for x, y in zip(a, b))


def test_spawn_only_in_projectile_mode():
    rng = np.random.default_rng(0)
    ctl = ModeStateController(Mode.GRAVITY, VP)
    assert ctl.spawn(10, 10, rng) is None
    assert len(ctl.bodies) == 4

    ctl.reset(Mode.PENDULUM)
    assert ctl.spawn(10, 10, rng) is None


@pytest.mark.parametrize("seed", range(20))
def test_spawned_projectile_ranges(seed):
    rng = np.random.default_rng(seed)
    ctl = ModeStateController(Mode.PROJECTILE, VP)
    body = ctl.spawn(321.5, 77.0, rng)
    assert ctl.bodies == [body]
    assert (body.x, body.y) == (321.5, 77.0)
    assert 15.0 <= body.radius <= 30.0
    assert -150.0 <= body.vx <= 150.0
    assert -400.0 <= body.vy <= -100.0
    assert body.color in {
        (96, 165, 250), (52, 211, 153), (244, 114, 182), (251, 191, 36), (167, 139, 250),
    }


def test_projectile_capacity_evicts_oldest():
    rng = np.random.default_rng(1)
    ctl = ModeStateController(Mode.PROJECTILE, VP, max_bodies=3)
    spawned = [ctl.spawn(float(i), 0.0, rng) for i in range(5)]
    assert len(ctl.bodies) == 3
    assert ctl.bodies == spawned[2:]
    assert [b.x for b in ctl.bodies] == [2.0, 3.0, 4.0]


def test_capacity_only_applies_to_projectile_mode():
    ctl = ModeStateController(Mode.GRAVITY, VP, max_bodies=1)
    assert len(ctl.bodies) == 4
    assert ctl.state.capacity is None


def test_body_list_state_unbounded_append():
    state = BodyListState()
    for i in range(10):
        assert state.append(Body(position=(i, 0), radius=1)) is None
    assert len(state.bodies) == 10


def test_invalid_inputs():
    with pytest.raises(ValueError):
        ModeStateController("orbit", VP)
    with pytest.raises(ValueError):
        Viewport(0, 100)
    with pytest.raises(ValueError):
        Body(position=(0, 0), radius=0)
    with pytest.raises(ValueError):
        initial_bodies(Mode.PENDULUM, VP)
