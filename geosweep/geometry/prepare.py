"""Input cleanup shared by the sweep and the brute-force search."""

import logging
from typing import Iterable

from geosweep.geometry.segment import LineSegment

logger = logging.getLogger(__name__)


def prepare_segments(segments: Iterable[LineSegment], epsilon: float) -> list[LineSegment]:
    """Drop zero-length and duplicate segments, keeping first-seen order.

    Segments are stored canonically, so a segment given with its endpoints
    swapped is a duplicate of the first one.
    """
    prepared: dict[LineSegment, None] = {}
    degenerate = 0
    duplicates = 0

    for segment in segments:
        if segment.is_degenerate(epsilon):
            degenerate += 1
            continue
        if segment in prepared:
            duplicates += 1
            continue
        prepared[segment] = None

    if degenerate or duplicates:
        logger.debug(f"Ignoring {degenerate} degenerate and {duplicates} duplicate segment(s)")

    return list(prepared)
