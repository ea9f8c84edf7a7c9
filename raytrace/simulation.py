"""Projectile simulation: a point moving under gravity and wind."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from raytrace.canvas import RENDERS_PATH, Canvas
from raytrace.color import Color
from raytrace.tuples import Tuple
from raytrace.utils import EPSILON

COLUMN_WIDTH = 25
CANVAS_FILENAME = "chapter01.ppm"


@dataclass
class Environment:
    """Constant forces acting on a projectile on every tick."""

    gravity: Tuple
    wind: Tuple

    def __post_init__(self) -> None:
        if not (self.gravity.is_vector() and self.wind.is_vector()):
            raise ValueError("Environment: gravity and wind must be vectors")


@dataclass
class Projectile:
    """A moving body with a position (point) and a velocity (vector)."""

    position: Tuple
    velocity: Tuple

    def __post_init__(self) -> None:
        if not (self.position.is_point() and self.velocity.is_vector()):
            raise ValueError(
                "Projectile: position must be a point and velocity a vector"
            )

    def tick(self, env: Environment) -> None:
        """Advance the projectile one time step in ``env``."""
        self.position = self.position + self.velocity
        self.velocity = self.velocity + env.gravity + env.wind


def format_tuple(t: Tuple) -> str:
    """Short form of a tuple's coordinates with two decimals each."""
    return f"Tuple({t.x:.2f}, {t.y:.2f}, {t.z:.2f})"


def _header() -> list[str]:
    return [
        f"{'Position':<{COLUMN_WIDTH}}  {'Velocity':<{COLUMN_WIDTH}}",
        f"{'-' * (COLUMN_WIDTH - 1)}  {'-' * COLUMN_WIDTH}",
    ]


def _row(position: Tuple, velocity: Tuple) -> str:
    return (
        f"{format_tuple(position):<{COLUMN_WIDTH}}  "
        f"{format_tuple(velocity):<{COLUMN_WIDTH}}"
    )


def trajectory(
    projectile: Projectile, env: Environment
) -> Iterator[tuple[Tuple, Tuple]]:
    """Yield (position, velocity) each tick while the projectile is above ground.

    The projectile is advanced in place.
    """
    while projectile.position.y > EPSILON:
        yield projectile.position, projectile.velocity
        projectile.tick(env)


def _round_to_pixel(value: float) -> int:
    """Round half away from zero, saturating negative results at zero."""
    rounded = math.floor(abs(value) + 0.5)
    return 0 if value < 0 else rounded


def plot_trajectory(
    projectile: Projectile, env: Environment, canvas: Canvas, color: Color
) -> list[tuple[Tuple, Tuple]]:
    """Plot the flight onto ``canvas`` with y pointing up.

    Stops when the projectile lands or leaves the canvas. Returns every
    (position, velocity) state visited, including the one that stopped it.
    """
    states: list[tuple[Tuple, Tuple]] = []
    while projectile.position.y > EPSILON:
        states.append((projectile.position, projectile.velocity))
        y = canvas.height - projectile.position.y
        if y < 0.0:
            break
        x_px = _round_to_pixel(projectile.position.x)
        if not canvas.set_pixel(x_px, _round_to_pixel(y), color):
            break
        projectile.tick(env)
    return states


def _default_environment() -> Environment:
    return Environment(Tuple.vector(0.0, -0.1, 0.0), Tuple.vector(-0.01, 0.0, 0.0))


def run_projectiles(out: TextIO | None = None) -> int:
    """Print a projectile's flight table; return the number of rows printed."""
    out = sys.stdout if out is None else out
    projectile = Projectile(
        Tuple.point(0.0, 1.0, 0.0), Tuple.vector(1.0, 1.0, 0.0).normalize()
    )
    env = _default_environment()
    for line in _header():
        print(line, file=out)
    count = 0
    for position, velocity in trajectory(projectile, env):
        print(_row(position, velocity), file=out)
        count += 1
    return count


def run_canvas(
    out: TextIO | None = None, directory: str | Path | None = None
) -> Path | None:
    """Plot a projectile's flight onto a 900x550 canvas and save it as PPM.

    Returns the written path, or None if the file could not be written.
    """
    out = sys.stdout if out is None else out
    projectile = Projectile(
        Tuple.point(0.0, 1.0, 0.0),
        Tuple.vector(1.0, 1.8, 0.0).normalize() * 11.25,
    )
    env = _default_environment()
    canvas = Canvas(900, 550)
    color = Color(0.0, 1.0, 1.0)

    for line in _header():
        print(line, file=out)
    for position, velocity in plot_trajectory(projectile, env, canvas, color):
        print(_row(position, velocity), file=out)

    folder = Path(directory) if directory is not None else RENDERS_PATH
    print(f"Writing into file '{folder / CANVAS_FILENAME}'", file=out)
    try:
        return canvas.write_ppm(CANVAS_FILENAME, folder)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None