# raytrace

This package provides the building blocks of a small ray tracer:

- points and vectors
- colors
- a pixel canvas that writes plain-text PPM images
- a projectile simulation that can plot its trajectory onto a canvas

## Installation

```
pip install .
```

The package is pure Python and has no dependencies at run time. It needs Python 3.10 or later.

## Library

```python
from raytrace.tuples import Tuple
from raytrace.color import Color
from raytrace.canvas import Canvas

p = Tuple.point(1.0, 2.0, 3.0)
v = Tuple.vector(1.0, 2.0, 3.0)
print(p + v)                 # Point(x: 2, y: 4, z: 6)
print(v.normalize())         # unit vector
print(v.cross(Tuple.vector(2.0, 3.0, 4.0)))

c = Color(1.0, 0.8, 0.6)
print(c.clamped_u8())        # (255, 204, 153)

canvas = Canvas(10, 2, c)
canvas.set_pixel(0, 0, Color.white())
text = canvas.to_ppm_string()
canvas.write_ppm("example.ppm", "./renders")
```

### Tuples

`raytrace.tuples.Tuple` has the fields `x`, `y`, `z` and `w`. You create one with `Tuple.point` (w = 1) or `Tuple.vector` (w = 0).

Tuples support these operations:

- `+` and `-` between tuples
- unary `-`
- `*` and `/` by a number
- `magnitude_squared`, `magnitude` and `normalize`
- `dot` and `cross`

Some of these operations make no sense for points, and they raise an exception:

- adding two points raises `ValueError`
- subtracting a point from a vector raises `ValueError`
- negating a point raises `ValueError`
- taking the magnitude, normalizing, or taking a dot or cross product of a point raises `ValueError`
- dividing by zero raises `ZeroDivisionError`

### Colors

`raytrace.color.Color` has the channels `r`, `g` and `b`. `Color.black()` and `Color.white()` give the two fixed colors.

Colors support `+` and `-` with another color. `*` scales a color by a number, or multiplies it channel by channel with another color. `clamped_u8()` clamps each channel to `[0, 1]` and scales it to an integer from 0 to 255.

### Approximate equality

Equality between tuples and between colors is approximate: each component must agree to within `raytrace.utils.EPSILON` (`1e-5`). `raytrace.utils.approx_eq` does the same check for a single pair of floats.

### Canvas

`raytrace.canvas.Canvas(width, height, color=None)` is a grid filled with black by default, or with the given color. Negative dimensions raise `ValueError`. A canvas with no pixels issues a `RuntimeWarning`.

Pixel access works as follows:

- `set_pixel(x, y, color)` returns `False` if the point lies outside the canvas.
- `get_pixel(x, y)` returns `None` if the point lies outside the canvas.
- `index(x, y)` raises `IndexError` if the point lies outside the canvas.

`to_ppm_string()` renders the canvas as P3 PPM text, and each pixel row starts on a new line. Values are wrapped so that no line is longer than 70 characters.

`write_ppm(filename=None, directory=None)` writes the same text to a file. The file name defaults to `test.ppm` and the directory to `./renders`. The directory is created if it is missing, and the method returns the path it wrote.

## Simulation

`raytrace.simulation` provides these names:

- `Projectile` has a point `position` and a vector `velocity`. `tick(env)` moves it one step.
- `Environment` has the vectors `gravity` and `wind`.
- `trajectory(projectile, env)` yields `(position, velocity)` pairs while the projectile is above ground.
- `plot_trajectory(projectile, env, canvas, color)` draws the path with y pointing up. It stops when the projectile lands or leaves the canvas.
- `format_tuple(t)` formats a tuple as `Tuple(x, y, z)` with two decimals per coordinate.
- `run_projectiles(out=None)` prints a position/velocity table and returns the number of rows.
- `run_canvas(out=None, directory=None)` plots a flight onto a 900×550 canvas and saves it as `chapter01.ppm`.

## Command line

```
raytrace [demo|projectiles|canvas] [--output-dir DIR]
```

Each command does the following:

- `demo` (the default) prints a sample point, a vector and a color. It then writes a 10×2 image, `chapter02.ppm`.
- `projectiles` prints the projectile's position/velocity table.
- `canvas` prints the table and writes the trajectory image, `chapter01.ppm`.

Images go to `./renders` unless `--output-dir` is given. The command exits with status 1 if the image cannot be written.

## What this package does not do

It does not cast rays, and it has no shapes, lights or cameras. Images are made only by setting canvas pixels directly, for example by plotting a projectile's path.

## Tests

```
pip install .[test]
pytest
```