"""Point/vector value type."""

import math
from dataclasses import dataclass

from geosweep.geometry.numeric import float_equals


@dataclass(frozen=True)
class Point:
    """Immutable 2D point that doubles as a vector.

    ``==`` and ``hash`` are exact so points can key dictionaries; use
    :meth:`eq` for tolerance-aware comparison.
    """

    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"

    def dot(self, other: "Point") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Point") -> float:
        """Z component of the 3D cross product of two vectors."""
        return self.x * other.y - self.y * other.x

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def eq(self, other: "Point", epsilon: float = 0.0) -> bool:
        """Compare coordinates allowing ``epsilon`` difference on each axis."""
        return float_equals(self.x, other.x, epsilon) and float_equals(self.y, other.y, epsilon)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)
