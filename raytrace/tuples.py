"""Points and vectors in 3D space, distinguished by their w component."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from numbers import Real

from raytrace.utils import approx_eq

POINT_W = 1.0
VECTOR_W = 0.0


def _format_float(value: float) -> str:
    """Format a float the shortest way, without exponent or trailing '.0'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0.0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    if float(value).is_integer():
        return str(int(value))
    return format(Decimal(repr(float(value))), "f")


@dataclass(frozen=True, eq=False)
class Tuple:
    """A 3D point (w=1.0) or vector (w=0.0)."""

    x: float
    y: float
    z: float
    w: float

    @classmethod
    def point(cls, x: float, y: float, z: float) -> Tuple:
        """Create a point (w = 1.0)."""
        return cls(x, y, z, POINT_W)

    @classmethod
    def vector(cls, x: float, y: float, z: float) -> Tuple:
        """Create a vector (w = 0.0)."""
        return cls(x, y, z, VECTOR_W)

    def is_point(self) -> bool:
        return approx_eq(self.w, POINT_W)

    def is_vector(self) -> bool:
        return approx_eq(self.w, VECTOR_W)

    def magnitude_squared(self) -> float:
        """Squared length of a vector; raises ValueError for a point."""
        if not self.is_vector():
            raise ValueError("magnitude_squared: argument is not a vector")
        return self.x**2 + self.y**2 + self.z**2

    def magnitude(self) -> float:
        """Length of a vector; raises ValueError for a point."""
        return math.sqrt(self.magnitude_squared())

    def normalize(self) -> Tuple:
        """Unit vector in the same direction; raises ValueError for a point."""
        return self / self.magnitude()

    def dot(self, other: Tuple) -> float:
        """Dot product of two vectors."""
        if not (self.is_vector() and other.is_vector()):
            raise ValueError("dot: both arguments must be vectors")
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Tuple) -> Tuple:
        """Cross product of two vectors."""
        if not (self.is_vector() and other.is_vector()):
            raise ValueError("cross: both arguments must be vectors")
        return Tuple(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
            VECTOR_W,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (
            approx_eq(self.x, other.x)
            and approx_eq(self.y, other.y)
            and approx_eq(self.z, other.z)
            and approx_eq(self.w, other.w)
        )

    def __add__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        w = self.w + other.w
        if not (approx_eq(w, VECTOR_W) or approx_eq(w, POINT_W)):
            raise ValueError("Cannot add two points.")
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, w)

    def __sub__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        w = self.w - other.w
        if not (approx_eq(w, VECTOR_W) or approx_eq(w, POINT_W)):
            raise ValueError("Cannot subtract point from vector.")
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, w)

    def __neg__(self) -> Tuple:
        if not approx_eq(self.w, VECTOR_W):
            raise ValueError("Cannot negate a point.")
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Tuple:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Tuple:
        if not isinstance(scalar, Real):
            return NotImplemented
        if approx_eq(scalar, 0.0):
            raise ZeroDivisionError("Division by zero.")
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def __str__(self) -> str:
        name = "Vector" if self.is_vector() else "Point"
        return (
            f"{name}(x: {_format_float(self.x)}, "
            f"y: {_format_float(self.y)}, z: {_format_float(self.z)})"
        )