import numpy as np
import pytest
from physics_playground.config import SimulationSettings, Viewport
from physics_playground.core.integrators import integrate_body, step_bodies
from physics_playground.collision.walls import reflect_walls, LEFT, RIGHT, FLOOR, CEILING
from physics_playground.types import Body

W, H = 800.0, 500.0
DT = 1 / 60


def test_integrate_body_semi_implicit_euler():
    """
    vy is updated first, then the position uses the new velocity:
      vy' = vy + g*10*dt
      x'  = x + vx*dt,  y' = y + vy'*dt
    """
    b = Body(position=(100.0, 100.0), velocity=(30.0, -20.0), radius=10)
    integrate_body(b, gravity=9.8, dt=DT)

    vy = -20.0 + 9.8 * 10 * DT
    assert b.vy == pytest.approx(vy)
    assert b.x == pytest.approx(100.0 + 30.0 * DT)
    assert b.y == pytest.approx(100.0 + vy * DT)
    assert b.vx == 30.0


def test_floor_bounce_clamps_and_reflects():
    """
    If a body crosses the floor during a step, it ends exactly on the floor
    with vy = -e * (vy before the clamp).
    """
    e, g, r = 0.8, 9.8, 20.0
    b = Body(position=(400.0, H - r - 1.0), velocity=(0.0, 200.0), radius=r)
    assert b.y + r <= H

    vy_before_clamp = 200.0 + g * 10 * DT
    step_bodies([b], g, e, Viewport(W, H))

    assert b.y == H - r
    assert b.vy == pytest.approx(-e * vy_before_clamp)


def test_floor_applies_friction_only_on_floor():
    b = Body(position=(400.0, H - 10.0), velocity=(100.0, 50.0), radius=20)
    hits = reflect_walls(b, W, H, elasticity=1.0)
    assert hits == (FLOOR,)
    assert b.vx == pytest.approx(98.0)

    c = Body(position=(400.0, 5.0), velocity=(100.0, -50.0), radius=20)
    hits = reflect_walls(c, W, H, elasticity=1.0)
    assert hits == (CEILING,)
    assert c.vx == 100.0
    assert c.y == 20.0


@pytest.mark.parametrize("e", [0.0, 0.25, 0.5, 0.99])
def test_wall_bounce_never_adds_speed(e):
    """|v_axis| after a bounce <= before, for e < 1."""
    for pos, vel, axis in [
        ((5.0, 250.0), (-120.0, 0.0), 0),     # left
        ((W - 5.0, 250.0), (120.0, 0.0), 0),  # right
        ((400.0, H - 5.0), (0.0, 120.0), 1),  # floor
        ((400.0, 5.0), (0.0, -120.0), 1),     # ceiling
    ]:
        b = Body(position=pos, velocity=vel, radius=10)
        before = abs(b.velocity[axis])
        reflect_walls(b, W, H, e)
        assert abs(b.velocity[axis]) <= before


def test_wall_bounce_perfectly_elastic():
    """With e = 1 the reflected component keeps its magnitude and flips sign."""
    b = Body(position=(3.0, 250.0), velocity=(-75.0, 0.0), radius=10)
    assert reflect_walls(b, W, H, 1.0) == (LEFT,)
    assert b.vx == 75.0
    assert b.x == 10.0

    b = Body(position=(400.0, H - 3.0), velocity=(0.0, 75.0), radius=10)
    reflect_walls(b, W, H, 1.0)
    assert b.vy == -75.0


def test_corner_applies_both_walls_in_order():
    """A body in the bottom-right corner gets right then floor corrections."""
    b = Body(position=(W - 2.0, H - 2.0), velocity=(100.0, 100.0), radius=10)
    hits = reflect_walls(b, W, H, 0.5)
    assert hits == (RIGHT, FLOOR)
    assert b.x == W - 10
    assert b.y == H - 10
    # vx: reflected at the right wall, then floor friction
    assert b.vx == pytest.approx(-0.5 * 100.0 * 0.98)
    assert b.vy == pytest.approx(-50.0)


def test_bodies_come_to_rest_on_floor():
    """With e < 1 a dropped body loses height every bounce and settles."""
    b = Body(position=(400.0, 50.0), velocity=(0.0, 0.0), radius=20)
    vp = Viewport(W, H)
    for _ in range(60 * 20):
        step_bodies([b], 9.8, 0.5, vp)
    print("rest y", b.y, "vy", b.vy)
    assert b.y == pytest.approx(H - 20, abs=1.0)
    assert abs(b.vy) < 5.0


def test_gravity_zero_keeps_straight_line():
    b = Body(position=(100.0, 100.0), velocity=(60.0, 0.0), radius=10)
    for _ in range(60):
        step_bodies([b], 0.0, 0.8, Viewport(W, H))
    assert b.x == pytest.approx(160.0)
    assert b.y == 100.0


def test_step_bodies_without_resolve_ignores_overlap():
    a = Body(position=(400.0, 250.0), velocity=(0.0, 0.0), radius=25)
    b = Body(position=(410.0, 250.0), velocity=(0.0, 0.0), radius=25)
    n = step_bodies([a, b], 0.0, 0.8, Viewport(W, H), SimulationSettings(), resolve=False)
    assert n == 0
    assert np.allclose(a.position, (400.0, 250.0))
    assert np.allclose(b.position, (410.0, 250.0))
