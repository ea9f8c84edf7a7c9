[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raytrace"
version = "0.1.0"
description = "Tuples, colors, canvases and PPM output for a small ray tracer, with projectile demos"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracer", "graphics", "ppm", "vector", "canvas"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
raytrace = "raytrace.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["raytrace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
