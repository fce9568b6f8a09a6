"""Pairwise segment intersection.

Classifies how two segments meet: not at all, in a single point, or along a
shared collinear piece. Both the sweep and the brute-force search call
:func:`intersect_segments`, so its output is the single source of truth for
what counts as an intersection.
"""

from geosweep.geometry.numeric import snap_to_epsilon
from geosweep.geometry.point import Point
from geosweep.geometry.segment import LineSegment
from geosweep.geometry.types import IntersectionResult


def _snap(point: Point, epsilon: float) -> Point:
    return Point(snap_to_epsilon(point.x, epsilon), snap_to_epsilon(point.y, epsilon))


def _intersect_degenerate(first: LineSegment, second: LineSegment, epsilon: float) -> IntersectionResult:
    """Handle inputs where at least one segment has zero length."""
    if first.is_degenerate() and second.is_degenerate():
        if first.upper.eq(second.upper, epsilon):
            return IntersectionResult.at_point(first.upper, first, second)
        return IntersectionResult.none(first, second)

    point, other = (first.upper, second) if first.is_degenerate() else (second.upper, first)
    if other.contains_point(point, epsilon):
        return IntersectionResult.at_point(_snap(point, epsilon), first, second)
    return IntersectionResult.none(first, second)


def _intersect_parallel(first: LineSegment, second: LineSegment, epsilon: float) -> IntersectionResult:
    """Intersect two parallel segments, which only meet when collinear."""
    origin = first.upper
    direction = first.direction
    length = direction.length()

    if abs(direction.cross(second.upper - origin)) / length > epsilon:
        return IntersectionResult.none(first, second)

    length_sq = length * length
    candidates = sorted(
        [
            ((second.upper - origin).dot(direction) / length_sq, second.upper),
            ((second.lower - origin).dot(direction) / length_sq, second.lower),
        ],
        key=lambda candidate: candidate[0],
    )
    (start_t, start), (end_t, end) = candidates

    # clip to this segment, keeping exact endpoint coordinates
    if start_t <= 0:
        start_t, start = 0.0, first.upper
    if end_t >= 1:
        end_t, end = 1.0, first.lower

    overlap = (end_t - start_t) * length
    if overlap < -epsilon:
        return IntersectionResult.none(first, second)
    if overlap <= epsilon:
        return IntersectionResult.at_point(_snap(start, epsilon), first, second)

    return IntersectionResult.overlap(
        LineSegment(_snap(start, epsilon), _snap(end, epsilon)),
        first,
        second,
    )


def intersect_segments(a: LineSegment, b: LineSegment, epsilon: float) -> IntersectionResult:
    """Compute the intersection of two segments.

    The result does not depend on argument order: the pair is put into
    canonical order before any arithmetic happens.

    Args:
        a: First segment
        b: Second segment
        epsilon: Distance tolerance for touching and collinearity tests

    Returns:
        IntersectionResult of type NONE, POINT or OVERLAPPING_SEGMENT whose
        contributors are both inputs
    """
    first, second = sorted((a, b), key=LineSegment.sort_key)

    if first.is_degenerate() or second.is_degenerate():
        return _intersect_degenerate(first, second, epsilon)

    d1 = first.direction
    d2 = second.direction
    len1 = d1.length()
    len2 = d2.length()

    denominator = d1.cross(d2)
    if abs(denominator) <= epsilon * len1 * len2:
        return _intersect_parallel(first, second, epsilon)

    offset = second.upper - first.upper
    t = offset.cross(d2) / denominator
    u = offset.cross(d1) / denominator

    tol_t = epsilon / len1
    tol_u = epsilon / len2
    if t < -tol_t or t > 1 + tol_t or u < -tol_u or u > 1 + tol_u:
        return IntersectionResult.none(first, second)

    if t <= tol_t:
        point = first.upper
    elif t >= 1 - tol_t:
        point = first.lower
    elif u <= tol_u:
        point = second.upper
    elif u >= 1 - tol_u:
        point = second.lower
    else:
        point = first.upper + d1 * t

    return IntersectionResult.at_point(_snap(point, epsilon), first, second)
