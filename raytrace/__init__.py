"""Tuples, colors, canvases, PPM output and projectile demos for a small ray tracer."""

__version__ = "0.1.0"
__all__ = ["canvas", "cli", "color", "simulation", "tuples", "utils"]