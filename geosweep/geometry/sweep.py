"""Sweep-line intersection search.

A horizontal line moves from top to bottom over the plane. The event queue
holds the positions where something happens (segment endpoints and
intersections found on the way) and the status structure holds the segments
currently crossing the line. Only segments that become neighbors in the
status structure are tested against each other.
"""

import logging
from typing import Iterable

from geosweep.geometry.brute_force import collect_pairwise
from geosweep.geometry.event_queue import Event, EventQueue, event_key
from geosweep.geometry.intersection import intersect_segments
from geosweep.geometry.point import Point
from geosweep.geometry.prepare import prepare_segments
from geosweep.geometry.results import IntersectionResults
from geosweep.geometry.segment import LineSegment
from geosweep.geometry.status import StatusStructure
from geosweep.geometry.types import IntersectionResult, IntersectionType

logger = logging.getLogger(__name__)


class SweepLineIntersector:
    """Finds all intersections among a set of segments with one sweep.

    Each instance runs a single search; create a new one per input.
    """

    def __init__(self, segments: Iterable[LineSegment], epsilon: float):
        self.epsilon = epsilon
        self.segments = prepare_segments(segments, epsilon)
        self.queue = EventQueue()
        self.status = StatusStructure(epsilon)
        self.results = IntersectionResults(epsilon)
        self.events_processed = 0

        for segment in self.segments:
            self.queue.add_segment(segment)

    def run(self) -> list[IntersectionResult]:
        """Process events until the queue is empty and return the results."""
        while not self.queue.is_empty():
            self.handle_event(self.queue.pop())

        logger.debug(
            f"Sweep processed {self.events_processed} events for {len(self.segments)} segments, "
            f"found {len(self.results)} intersection(s)"
        )
        return self.results.results()

    def handle_event(self, event: Event) -> None:
        """Update the status structure for one event and report what meets there."""
        point = event.point
        upper = list(event.segments)
        self.events_processed += 1

        self.status.rebuild(point)
        containing = self.status.find_containing(point)
        lower = [segment for segment in containing if segment.lower.eq(point, self.epsilon)]
        crossing = [segment for segment in containing if not segment.lower.eq(point, self.epsilon)]

        logger.debug(
            f"Event {point}: {len(upper)} starting, {len(lower)} ending, {len(crossing)} crossing"
        )

        involved = list(dict.fromkeys(lower + upper + crossing))
        if len(involved) > 1:
            collect_pairwise(involved, self.epsilon, self.results)

        for segment in lower + crossing:
            self.status.remove(segment)
        self.status.rebuild(point)

        for segment in upper + crossing:
            self.status.insert(segment)
        self.status.rebuild(point)

        left, leftmost, rightmost, right = self.status.span(point)
        if leftmost is None:
            if left is not None and right is not None:
                self.find_new_event(left, right, point)
            return

        if left is not None:
            self.find_new_event(left, leftmost, point)
        if right is not None:
            self.find_new_event(rightmost, right, point)

    def find_new_event(self, a: LineSegment, b: LineSegment, point: Point) -> None:
        """Test two neighbors and record what they have in common.

        Overlaps and crossing points are recorded right away. A crossing
        point that comes after ``point`` in event order is also queued so the
        status order is refreshed there; one at or before ``point`` is only
        recorded, even when it lies within epsilon of the sweep line.
        """
        result = intersect_segments(a, b, self.epsilon)
        if result.is_none:
            return

        self.results.add(result)
        if result.type is IntersectionType.POINT and event_key(result.point) > event_key(point):
            self.queue.add_point(result.point)


def find_intersections_fast(segments: Iterable[LineSegment], epsilon: float) -> list[IntersectionResult]:
    """Find all intersections among ``segments`` with a sweep line.

    Args:
        segments: Input segments; zero-length and duplicate ones are ignored
        epsilon: Comparison tolerance

    Returns:
        Deduplicated intersection results in deterministic order, identical
        to :func:`find_intersections_slow` for the same input
    """
    return SweepLineIntersector(segments, epsilon).run()
