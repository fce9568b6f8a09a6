"""Priority queue of sweep events.

Events are ordered top to bottom, then left to right: a larger y comes first
and points on the same height come in increasing x.
"""

import heapq
import logging
from dataclasses import dataclass, field

from geosweep.core.exceptions import EmptyEventQueueError
from geosweep.geometry.point import Point
from geosweep.geometry.segment import LineSegment

logger = logging.getLogger(__name__)


@dataclass
class Event:
    """A sweep position and the segments whose upper endpoint it is."""

    point: Point
    segments: list[LineSegment] = field(default_factory=list)

    def add_segment(self, segment: LineSegment) -> None:
        if segment not in self.segments:
            self.segments.append(segment)


def event_key(point: Point) -> tuple[float, float]:
    return (-point.y, point.x)


class EventQueue:
    """Heap-backed event queue with unique point keys.

    Inserting a point that is already queued merges into the existing event
    instead of creating a second one.
    """

    def __init__(self):
        self._events: dict[Point, Event] = {}
        self._heap: list[tuple[float, float]] = []

    def __len__(self) -> int:
        return len(self._events)

    def __contains__(self, point: Point) -> bool:
        return point in self._events

    def is_empty(self) -> bool:
        return not self._events

    def _push(self, point: Point) -> Event:
        event = self._events.get(point)
        if event is None:
            event = Event(point)
            self._events[point] = event
            heapq.heappush(self._heap, event_key(point))
        return event

    def add_segment(self, segment: LineSegment) -> None:
        """Queue both endpoints; only the upper event carries the segment."""
        self._push(segment.upper).add_segment(segment)
        self._push(segment.lower)

    def add_point(self, point: Point) -> None:
        """Queue a discovered intersection point unless it is already queued."""
        if point in self._events:
            return
        self._push(point)
        logger.debug(f"Queued intersection event at {point}")

    def peek(self) -> Event:
        if not self._events:
            raise EmptyEventQueueError()
        neg_y, x = self._heap[0]
        return self._events[Point(x, -neg_y)]

    def pop(self) -> Event:
        """Remove and return the next event in sweep order."""
        if not self._events:
            raise EmptyEventQueueError()
        neg_y, x = heapq.heappop(self._heap)
        return self._events.pop(Point(x, -neg_y))
