"""Shared constants and helpers for floating-point comparisons."""

EPSILON = 0.00001
"""Tolerance used for approximate floating-point comparisons."""


def approx_eq(a: float, b: float) -> bool:
    """Return True if ``a`` and ``b`` differ by less than EPSILON."""
    return abs(a - b) < EPSILON