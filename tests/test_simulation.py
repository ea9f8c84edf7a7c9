import io

import pytest

from raytrace.canvas import Canvas
from raytrace.color import Color
from raytrace.simulation import (
    Environment,
    Projectile,
    format_tuple,
    plot_trajectory,
    run_canvas,
    run_projectiles,
    trajectory,
)
from raytrace.tuples import Tuple
from raytrace.utils import EPSILON


def _env():
    return Environment(Tuple.vector(0.0, -0.1, 0.0), Tuple.vector(-0.01, 0.0, 0.0))


def _projectile():
    return Projectile(
        Tuple.point(0.0, 1.0, 0.0), Tuple.vector(1.0, 1.0, 0.0).normalize()
    )


def test_projectile_rejects_vector_position():
    with pytest.raises(ValueError):
        Projectile(Tuple.vector(0.0, 1.0, 0.0), Tuple.vector(1.0, 1.0, 0.0))


def test_projectile_rejects_point_velocity():
    with pytest.raises(ValueError):
        Projectile(Tuple.point(0.0, 1.0, 0.0), Tuple.point(1.0, 1.0, 0.0))


def test_environment_rejects_points():
    with pytest.raises(ValueError):
        Environment(Tuple.point(0.0, -0.1, 0.0), Tuple.vector(-0.01, 0.0, 0.0))


def test_tick_moves_and_accelerates():
    proj = _projectile()
    env = _env()
    start_pos, start_vel = proj.position, proj.velocity
    proj.tick(env)
    assert proj.position == start_pos + start_vel
    assert proj.velocity == start_vel + env.gravity + env.wind
    assert proj.position.is_point()
    assert proj.velocity.is_vector()


def test_format_tuple_two_decimals():
    assert format_tuple(Tuple.point(1.0, 2.5, -3.0)) == "Tuple(1.00, 2.50, -3.00)"


def test_trajectory_stays_above_ground():
    proj = _projectile()
    states = list(trajectory(proj, _env()))
    assert states
    assert states[0][0] == Tuple.point(0.0, 1.0, 0.0)
    assert all(pos.y > EPSILON for pos, _ in states)
    assert proj.position.y <= EPSILON


def test_run_projectiles_prints_table():
    buf = io.StringIO()
    rows = run_projectiles(buf)
    lines = buf.getvalue().splitlines()
    assert lines[0] == "Position".ljust(25) + "  " + "Velocity".ljust(25)
    assert lines[1] == "-" * 24 + "  " + "-" * 25
    assert len(lines) == rows + 2
    assert rows == len(list(trajectory(_projectile(), _env())))
    assert lines[2].startswith(format_tuple(Tuple.point(0.0, 1.0, 0.0)))


def test_plot_trajectory_marks_start_pixel(recwarn):
    canvas = Canvas(900, 550)
    color = Color(0.0, 1.0, 1.0)
    states = plot_trajectory(_projectile(), _env(), canvas, color)
    assert states
    assert canvas.get_pixel(0, 549) == color
    assert canvas.get_pixel(899, 0) == Color.black()


def test_plot_trajectory_stops_at_canvas_edge():
    full = list(trajectory(_projectile(), _env()))
    canvas = Canvas(3, 3)
    states = plot_trajectory(_projectile(), _env(), canvas, Color.white())
    assert len(states) < len(full)


def test_run_canvas_writes_ppm(tmp_path):
    buf = io.StringIO()
    path = run_canvas(buf, tmp_path)
    assert path == tmp_path / "chapter01.ppm"
    assert path.read_text().startswith("P3\n900 550\n255\n")
    assert "Writing into file" in buf.getvalue()