"""Line segment primitive with canonical endpoint ordering."""

import math
from dataclasses import dataclass

from shapely.geometry import LineString

from geosweep.geometry.point import Point


def _is_upper(a: Point, b: Point) -> bool:
    """True when ``a`` comes before ``b`` in sweep order."""
    return a.y > b.y or (a.y == b.y and a.x < b.x)


@dataclass(frozen=True)
class LineSegment:
    """A segment whose endpoints are stored as ``upper`` and ``lower``.

    The upper endpoint has the greater y; on a tie it has the smaller x.
    Endpoints may be passed in either order and the stored value is the same,
    so ``LineSegment(a, b) == LineSegment(b, a)``.
    """

    upper: Point
    lower: Point

    def __post_init__(self):
        if not _is_upper(self.upper, self.lower) and self.upper != self.lower:
            upper, lower = self.lower, self.upper
            object.__setattr__(self, "upper", upper)
            object.__setattr__(self, "lower", lower)

    @classmethod
    def from_coords(cls, x1: float, y1: float, x2: float, y2: float) -> "LineSegment":
        return cls(Point(x1, y1), Point(x2, y2))

    @classmethod
    def from_linestring(cls, line: LineString) -> "LineSegment":
        """Build a segment from a two-point shapely LineString."""
        coords = list(line.coords)
        if len(coords) != 2:
            raise ValueError(f"LineString must have exactly 2 coordinates, got {len(coords)}")
        (x1, y1), (x2, y2) = coords[0][:2], coords[1][:2]
        return cls.from_coords(x1, y1, x2, y2)

    def __str__(self) -> str:
        return f"{self.upper}-{self.lower}"

    @property
    def direction(self) -> Point:
        """Vector from the upper to the lower endpoint."""
        return self.lower - self.upper

    def sort_key(self) -> tuple[float, float, float, float]:
        """Canonical ordering key: upper y desc, upper x, lower y desc, lower x."""
        return (-self.upper.y, self.upper.x, -self.lower.y, self.lower.x)

    def length(self) -> float:
        return self.upper.distance_to(self.lower)

    def center(self) -> Point:
        return Point((self.upper.x + self.lower.x) / 2, (self.upper.y + self.lower.y) / 2)

    def is_vertical(self) -> bool:
        return self.upper.x == self.lower.x

    def is_horizontal(self) -> bool:
        return self.upper.y == self.lower.y

    def is_degenerate(self, epsilon: float = 0.0) -> bool:
        """True for zero-length segments (endpoints equal within epsilon)."""
        return self.upper.eq(self.lower, epsilon)

    def slope(self) -> float:
        """Slope dy/dx, or NaN for vertical segments."""
        dx = self.lower.x - self.upper.x
        if dx == 0:
            return math.nan
        return (self.lower.y - self.upper.y) / dx

    def x_at_y(self, y: float) -> float:
        """Return the x where the segment crosses height ``y``.

        NaN when ``y`` is outside the segment's vertical extent or the
        segment is horizontal (every x on it shares that y).
        """
        if y > self.upper.y or y < self.lower.y:
            return math.nan
        if self.is_vertical():
            return self.upper.x
        if self.is_horizontal():
            return math.nan
        if y == self.upper.y:
            return self.upper.x
        if y == self.lower.y:
            return self.lower.x
        t = (self.upper.y - y) / (self.upper.y - self.lower.y)
        return self.upper.x + t * (self.lower.x - self.upper.x)

    def y_at_x(self, x: float) -> float:
        """Return the y where the segment crosses ``x``; NaN when undefined."""
        left, right = sorted((self.upper.x, self.lower.x))
        if x < left or x > right or self.is_vertical():
            return math.nan
        t = (x - self.upper.x) / (self.lower.x - self.upper.x)
        return self.upper.y + t * (self.lower.y - self.upper.y)

    def project_point(self, point: Point) -> Point:
        """Closest point on the segment to ``point``."""
        direction = self.direction
        length_sq = direction.dot(direction)
        if length_sq == 0:
            return self.upper
        t = (point - self.upper).dot(direction) / length_sq
        if t <= 0:
            return self.upper
        if t >= 1:
            return self.lower
        return self.upper + direction * t

    def distance_to_point(self, point: Point) -> float:
        return point.distance_to(self.project_point(point))

    def contains_point(self, point: Point, epsilon: float = 0.0) -> bool:
        """True when ``point`` lies on the segment within ``epsilon`` distance."""
        return self.distance_to_point(point) <= epsilon

    def intersects(self, other: "LineSegment", epsilon: float = 0.0) -> bool:
        """True when the two segments share at least one point."""
        from geosweep.geometry.intersection import intersect_segments

        return not intersect_segments(self, other, epsilon).is_none

    def distance_to_segment(self, other: "LineSegment", epsilon: float = 0.0) -> float:
        """Shortest distance between the two segments; 0 when they intersect."""
        if self.intersects(other, epsilon):
            return 0.0
        return min(
            self.distance_to_point(other.upper),
            self.distance_to_point(other.lower),
            other.distance_to_point(self.upper),
            other.distance_to_point(self.lower),
        )

    def eq(self, other: "LineSegment", epsilon: float = 0.0) -> bool:
        return self.upper.eq(other.upper, epsilon) and self.lower.eq(other.lower, epsilon)

    def translate(self, delta: Point) -> "LineSegment":
        return LineSegment(self.upper + delta, self.lower + delta)

    def to_linestring(self) -> LineString:
        return LineString([self.upper.as_tuple(), self.lower.as_tuple()])
