import io
import math

import numpy as np
import pytest
from physics_playground.config import Viewport
from physics_playground.modes import ModeStateController
from physics_playground.renderer import (
    BufferedRenderer,
    ClearRect,
    DebugRenderer,
    FilledCircle,
    FilledTriangle,
    Line,
    NullRenderer,
    arrowhead,
    render_frame,
)
from physics_playground.types import Body, Mode, PendulumState

VP = Viewport(800, 500)


def test_pendulum_frame_at_rest():
    """Vertical pendulum, ω = 0: zero-length velocity vector at the bob."""
    cmds = render_frame(PendulumState(angle=0.0, angular_velocity=0.0), VP)
    clear, rod, pivot, bob, vel, head = cmds

    assert clear == ClearRect(0.0, 0.0, 800, 500)
    assert rod.start == (400.0, 100.0)
    assert rod.end == pytest.approx((400.0, 300.0))
    assert isinstance(pivot, FilledCircle) and pivot.radius == 8.0
    assert pivot.center == (400.0, 100.0)
    assert isinstance(bob, FilledCircle) and bob.radius == 25.0
    assert bob.center == pytest.approx((400.0, 300.0))
    assert vel.start == vel.end
    assert isinstance(head, FilledTriangle)
    tip, left, right = head.points
    # atan2(0, 0) = 0: base corners 8 px to the left at ±30°
    assert tip == pytest.approx((400.0, 300.0))
    assert left == pytest.approx((400.0 - 8 * math.cos(math.pi / 6), 300.0 + 4.0))
    assert right == pytest.approx((400.0 - 8 * math.cos(math.pi / 6), 300.0 - 4.0))


def test_pendulum_velocity_vector():
    """At the bottom of the swing with ω = 1 the drawn vector is (100, 0)."""
    cmds = render_frame(PendulumState(angle=0.0, angular_velocity=1.0), VP)
    vel = cmds[4]
    assert isinstance(vel, Line)
    assert vel.end == pytest.approx((500.0, 300.0))


def test_arrowhead_points_along_direction():
    tip = (10.0, 10.0)
    _, left, right = arrowhead(tip, math.pi / 2)  # pointing down the screen
    # both base corners are above the tip, mirrored about x = 10
    assert left[1] < 10.0 and right[1] < 10.0
    assert left[0] - 10.0 == pytest.approx(-(right[0] - 10.0))
    for p in (left, right):
        assert math.dist(p, tip) == pytest.approx(8.0)


def test_body_frame_structure():
    ctl = ModeStateController(Mode.GRAVITY, VP)
    cmds = render_frame(ctl.state, VP)
    assert len(cmds) == 1 + 2 * 4 + 1
    assert isinstance(cmds[0], ClearRect)
    ground = cmds[-1]
    assert isinstance(ground, Line)
    assert ground.start == (0.0, 499.0) and ground.end == (800.0, 499.0)

    circles = [c for c in cmds if isinstance(c, FilledCircle)]
    assert [c.radius for c in circles] == [20.0, 25.0, 15.0, 30.0]


def test_body_velocity_line_scaled():
    b = Body(position=(100.0, 200.0), velocity=(50.0, -30.0), radius=10, color=(1, 2, 3))
    cmds = render_frame([b], VP)
    circle, line = cmds[1], cmds[2]
    assert circle == FilledCircle((100.0, 200.0), 10.0, (1, 2, 3))
    assert line.start == (100.0, 200.0)
    assert line.end == pytest.approx((105.0, 197.0))


def test_empty_projectile_frame_draws_ground_only():
    ctl = ModeStateController(Mode.PROJECTILE, VP)
    cmds = render_frame(ctl.state, VP)
    assert len(cmds) == 2
    assert isinstance(cmds[1], Line)


def test_pendulum_frame_has_no_ground_line():
    cmds = render_frame(PendulumState(), VP)
    assert not any(isinstance(c, Line) and c.start[0] == 0.0 for c in cmds)


def test_render_does_not_mutate_state():
    ctl = ModeStateController(Mode.COLLISION, VP)
    before = [b.copy() for b in ctl.bodies]
    render_frame(ctl.state, VP)
    for b, c in zip(ctl.bodies, before):
        assert np.array_equal(b.position, c.position)
        assert np.array_equal(b.velocity, c.velocity)

    p = PendulumState(angle=1.0, angular_velocity=-0.5)
    render_frame(p, VP)
    assert (p.angle, p.angular_velocity) == (1.0, -0.5)


def test_debug_renderer_output():
    out = io.StringIO()
    r = DebugRenderer(output=out)
    r.render_commands(7, render_frame(PendulumState(angle=0.0), VP))
    text = out.getvalue()
    assert text.startswith("=== Frame 7 ===")
    assert "clear 0,0 800x500" in text
    assert "circle (400.0, 300.0) r=25.0" in text
    assert "triangle" in text


def test_buffered_and_null_renderers():
    cmds = render_frame(PendulumState(), VP)
    buf = BufferedRenderer()
    buf.render_commands(0, cmds)
    buf.render_commands(1, cmds)
    assert [f["tick"] for f in buf.frames] == [0, 1]
    assert buf.frames[0]["commands"] == cmds
    buf.clear_frames()
    assert buf.frames == []

    NullRenderer().render_commands(0, cmds)


def test_unknown_command_rejected():
    with pytest.raises(TypeError):
        NullRenderer().draw("circle")
