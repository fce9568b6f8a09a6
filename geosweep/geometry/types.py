"""Type definitions for the intersection engine.

Contains the result enum and the immutable result record shared by the
pairwise intersection, the sweep and the brute-force search.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Optional

from geosweep.geometry.point import Point
from geosweep.geometry.segment import LineSegment


class IntersectionType(str, Enum):
    """Kinds of intersection between two segments."""

    NONE = "none"
    POINT = "point"
    OVERLAPPING_SEGMENT = "overlapping_segment"


def canonical_segments(segments: Iterable[LineSegment]) -> tuple[LineSegment, ...]:
    """Deduplicate segments and return them in canonical order."""
    return tuple(sorted(set(segments), key=LineSegment.sort_key))


@dataclass(frozen=True)
class IntersectionResult:
    """An intersection point or overlap together with the segments forming it."""

    type: IntersectionType
    point: Optional[Point] = None
    overlapping_segment: Optional[LineSegment] = None
    input_segments: tuple[LineSegment, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "input_segments", canonical_segments(self.input_segments))

    @classmethod
    def none(cls, *segments: LineSegment) -> "IntersectionResult":
        return cls(IntersectionType.NONE, input_segments=segments)

    @classmethod
    def at_point(cls, point: Point, *segments: LineSegment) -> "IntersectionResult":
        return cls(IntersectionType.POINT, point=point, input_segments=segments)

    @classmethod
    def overlap(cls, overlap: LineSegment, *segments: LineSegment) -> "IntersectionResult":
        return cls(
            IntersectionType.OVERLAPPING_SEGMENT,
            overlapping_segment=overlap,
            input_segments=segments,
        )

    @property
    def is_none(self) -> bool:
        return self.type is IntersectionType.NONE

    @property
    def upper(self) -> Optional[Point]:
        """Upper extent of the result (the point itself for point results)."""
        if self.type is IntersectionType.POINT:
            return self.point
        if self.type is IntersectionType.OVERLAPPING_SEGMENT:
            return self.overlapping_segment.upper
        return None

    @property
    def lower(self) -> Optional[Point]:
        if self.type is IntersectionType.POINT:
            return self.point
        if self.type is IntersectionType.OVERLAPPING_SEGMENT:
            return self.overlapping_segment.lower
        return None

    def sort_key(self) -> tuple:
        """Result ordering: lower y desc, lower x, upper y desc, upper x, type."""
        lower, upper = self.lower, self.upper
        if lower is None:
            return (0.0, 0.0, 0.0, 0.0, self.type.value)
        return (-lower.y, lower.x, -upper.y, upper.x, self.type.value)

    def with_segments(self, segments: Iterable[LineSegment]) -> "IntersectionResult":
        """Return a copy whose contributors are the union with ``segments``."""
        return replace(self, input_segments=self.input_segments + tuple(segments))

    def eq(self, other: "IntersectionResult", epsilon: float = 0.0) -> bool:
        """Tolerance-aware equality; contributors are compared as sets."""
        if self.type is not other.type:
            return False
        if self.type is IntersectionType.POINT and not self.point.eq(other.point, epsilon):
            return False
        if self.type is IntersectionType.OVERLAPPING_SEGMENT and not self.overlapping_segment.eq(
            other.overlapping_segment, epsilon
        ):
            return False
        if len(self.input_segments) != len(other.input_segments):
            return False
        return all(
            any(mine.eq(theirs, epsilon) for theirs in other.input_segments)
            for mine in self.input_segments
        )


def results_equal(
    a: list[IntersectionResult],
    b: list[IntersectionResult],
    epsilon: float = 0.0,
) -> bool:
    """Compare two result lists as sets using :meth:`IntersectionResult.eq`."""
    if len(a) != len(b):
        return False
    return all(any(x.eq(y, epsilon) for y in b) for x in a) and all(
        any(y.eq(x, epsilon) for x in a) for y in b
    )
