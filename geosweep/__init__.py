"""geosweep: line-segment intersection with a sweep line.

Example:
    >>> from geosweep import LineSegment, find_intersections_fast
    >>> segments = [
    ...     LineSegment.from_coords(0, 0, 10, 10),
    ...     LineSegment.from_coords(0, 10, 10, 0),
    ... ]
    >>> [str(result.point) for result in find_intersections_fast(segments, 1e-9)]
    ['(5, 5)']
"""

from geosweep.geometry import (
    IntersectionResult,
    IntersectionType,
    LineSegment,
    Point,
    find_intersections_fast,
    find_intersections_slow,
    intersect_segments,
    results_equal,
)

__version__ = "0.1.0"

__all__ = [
    "Point",
    "LineSegment",
    "IntersectionResult",
    "IntersectionType",
    "intersect_segments",
    "results_equal",
    "find_intersections_fast",
    "find_intersections_slow",
]
