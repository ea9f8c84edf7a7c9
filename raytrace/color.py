"""RGB colours with approximate equality and arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from raytrace.tuples import _format_float
from raytrace.utils import approx_eq


def _to_u8(value: float) -> int:
    """Clamp a channel to [0, 1] and scale it to an integer in 0..255."""
    if math.isnan(value):
        return 0
    return math.floor(min(max(value, 0.0), 1.0) * 255.0)


@dataclass(frozen=True, eq=False)
class Color:
    """A colour with red, green and blue channels, nominally in [0, 1]."""

    r: float
    g: float
    b: float

    @classmethod
    def black(cls) -> Color:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def white(cls) -> Color:
        return cls(1.0, 1.0, 1.0)

    def clamped_u8(self) -> tuple[int, int, int]:
        """Return the channels clamped to [0, 1] and scaled to 0..255."""
        return _to_u8(self.r), _to_u8(self.g), _to_u8(self.b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            approx_eq(self.r, other.r)
            and approx_eq(self.g, other.g)
            and approx_eq(self.b, other.b)
        )

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other: Color | float) -> Color:
        """Scale by a number, or take the Hadamard product with another colour."""
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, Real):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Color:
        if isinstance(other, Real):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __str__(self) -> str:
        return (
            f"Color(r: {_format_float(self.r)}, "
            f"g: {_format_float(self.g)}, b: {_format_float(self.b)})"
        )