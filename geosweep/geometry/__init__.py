"""Geometry engine package for segment intersection.

Provides the point and segment primitives, pairwise intersection, and the
sweep-line and brute-force searches over sets of segments.
"""

from geosweep.geometry.point import Point
from geosweep.geometry.segment import LineSegment
from geosweep.geometry.types import IntersectionResult, IntersectionType, results_equal
from geosweep.geometry.intersection import intersect_segments
from geosweep.geometry.results import IntersectionResults
from geosweep.geometry.brute_force import find_intersections_slow
from geosweep.geometry.sweep import SweepLineIntersector, find_intersections_fast

__all__ = [
    "Point",
    "LineSegment",
    "IntersectionResult",
    "IntersectionType",
    "IntersectionResults",
    "SweepLineIntersector",
    "intersect_segments",
    "results_equal",
    "find_intersections_fast",
    "find_intersections_slow",
]
