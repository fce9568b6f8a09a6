"""Ordered set of the segments crossing the sweep line.

The order is only meaningful for one sweep position, so the structure is
rebuilt from scratch whenever the sweep moves or its membership changes.
Querying it in between raises :class:`StaleStatusError`.
"""

import logging
import math
from bisect import bisect_left, bisect_right
from dataclasses import dataclass
from functools import cmp_to_key, partial
from typing import Optional

from geosweep.core.exceptions import StaleStatusError, SweepInvariantError
from geosweep.geometry.numeric import float_equals, float_greater_than
from geosweep.geometry.point import Point
from geosweep.geometry.segment import LineSegment

logger = logging.getLogger(__name__)


def descent_run(segment: LineSegment) -> float:
    """Change in x per unit the segment descends.

    Zero for vertical segments and +inf for horizontal ones, so ordering by
    run orders segments through a common point left to right just below it.
    """
    if segment.is_horizontal():
        return math.inf
    if segment.is_vertical():
        return 0.0
    return (segment.lower.x - segment.upper.x) / (segment.upper.y - segment.lower.y)


@dataclass(frozen=True)
class StatusItem:
    """A segment positioned for one particular sweep event."""

    segment: LineSegment
    event: Point
    x: float
    run: float
    contains_event: bool

    @classmethod
    def at_event(cls, segment: LineSegment, event: Point, epsilon: float) -> "StatusItem":
        contains = segment.contains_point(event, epsilon)
        if contains or segment.is_horizontal():
            x = event.x
        else:
            y = min(max(event.y, segment.lower.y), segment.upper.y)
            x = segment.x_at_y(y)
        return cls(segment, event, x, descent_run(segment), contains)

    @property
    def is_vertical(self) -> bool:
        return self.segment.is_vertical()

    @property
    def is_horizontal(self) -> bool:
        return self.segment.is_horizontal()

    @property
    def is_diagonal(self) -> bool:
        return not (self.is_vertical or self.is_horizontal)


def _sign(a: float, b: float) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def compare_status_items(a: StatusItem, b: StatusItem, event: Point, epsilon: float) -> int:
    """Order two status items left to right at ``event``.

    Args:
        a: First item
        b: Second item
        event: Current sweep event both items must have been built for
        epsilon: Tolerance for x and run comparisons

    Returns:
        Negative when ``a`` is left of ``b``, positive when right, 0 if equal
    """
    if a.event != event or b.event != event:
        raise StaleStatusError(f"items built for {a.event} and {b.event}, sweep is at {event}")

    if a.segment.eq(b.segment, epsilon):
        return 0

    if a.contains_event and b.contains_event:
        if a.is_vertical and b.is_diagonal:
            return -1 if b.segment.slope() < 0 else 1
        if b.is_vertical and a.is_diagonal:
            return 1 if a.segment.slope() < 0 else -1
        if a.is_horizontal and not b.is_horizontal:
            return 1
        if b.is_horizontal and not a.is_horizontal:
            return -1

    if not float_equals(a.x, b.x, epsilon):
        return _sign(a.x, b.x)

    if a.run == b.run or float_equals(a.run, b.run, epsilon):
        return _sign(a.segment.sort_key(), b.segment.sort_key())

    # crossings on the sweep line right of the event are not processed yet
    crossing_x = (a.x + b.x) / 2
    if not (a.contains_event and b.contains_event) and float_greater_than(crossing_x, event.x, epsilon):
        return _sign(b.run, a.run)
    return _sign(a.run, b.run)


class StatusStructure:
    """Left-to-right ordered set of active segments."""

    def __init__(self, epsilon: float):
        self.epsilon = epsilon
        self._segments: dict[LineSegment, None] = {}
        self._items: list[StatusItem] = []
        self._xs: list[float] = []
        self._event: Optional[Point] = None
        self._stale = True

    def __len__(self) -> int:
        return len(self._segments)

    def __contains__(self, segment: LineSegment) -> bool:
        return segment in self._segments

    def _require_fresh(self) -> None:
        if self._stale:
            raise StaleStatusError("modified since the last rebuild")

    def insert(self, segment: LineSegment) -> None:
        self._segments[segment] = None
        self._stale = True

    def remove(self, segment: LineSegment) -> None:
        if segment not in self._segments:
            raise SweepInvariantError(f"Segment {segment} is not in the status structure")
        del self._segments[segment]
        self._stale = True

    def rebuild(self, event: Point) -> None:
        """Reorder every active segment for the sweep position at ``event``."""
        items = [StatusItem.at_event(segment, event, self.epsilon) for segment in self._segments]
        compare = partial(compare_status_items, event=event, epsilon=self.epsilon)
        items.sort(key=cmp_to_key(compare))

        self._items = items
        self._xs = [item.x for item in items]
        self._event = event
        self._stale = False

    def segments(self) -> list[LineSegment]:
        """Active segments in left-to-right order."""
        self._require_fresh()
        return [item.segment for item in self._items]

    def find_containing(self, point: Point) -> list[LineSegment]:
        """Active segments whose extent includes ``point``, left to right."""
        self._require_fresh()
        if point == self._event:
            return [item.segment for item in self._items if item.contains_event]
        return [
            item.segment
            for item in self._items
            if item.segment.contains_point(point, self.epsilon)
        ]

    def _probe(self, point: Point) -> tuple[int, int]:
        """Index range of the items sitting exactly at the probe's x."""
        self._require_fresh()
        if point != self._event:
            raise StaleStatusError(f"probe at {point} but the sweep is at {self._event}")
        return bisect_left(self._xs, point.x), bisect_right(self._xs, point.x)

    def neighbors(self, point: Point) -> tuple[Optional[LineSegment], Optional[LineSegment]]:
        """Closest segments strictly left and strictly right of ``point``."""
        lo, hi = self._probe(point)
        left = self._items[lo - 1].segment if lo > 0 else None
        right = self._items[hi].segment if hi < len(self._items) else None
        return left, right

    def span(self, point: Point) -> tuple[
        Optional[LineSegment],
        Optional[LineSegment],
        Optional[LineSegment],
        Optional[LineSegment],
    ]:
        """Segments through ``point`` and their outer neighbors.

        Returns:
            (left neighbor, leftmost through point, rightmost through point,
            right neighbor); the middle two are None when nothing passes
            through the point
        """
        lo, hi = self._probe(point)
        left, right = self.neighbors(point)
        if lo == hi:
            return left, None, None, right
        return left, self._items[lo].segment, self._items[hi - 1].segment, right
