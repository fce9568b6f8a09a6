"""Brute-force O(n^2) intersection search.

Tests every pair of segments. Slow, but simple enough to serve as the
reference the sweep is checked against.
"""

import logging
from itertools import combinations
from typing import Iterable

from geosweep.geometry.intersection import intersect_segments
from geosweep.geometry.prepare import prepare_segments
from geosweep.geometry.results import IntersectionResults
from geosweep.geometry.segment import LineSegment
from geosweep.geometry.types import IntersectionResult

logger = logging.getLogger(__name__)


def collect_pairwise(
    segments: Iterable[LineSegment],
    epsilon: float,
    results: IntersectionResults,
) -> None:
    """Intersect every unordered pair and add the hits to ``results``."""
    for a, b in combinations(segments, 2):
        results.add(intersect_segments(a, b, epsilon))


def find_intersections_slow(segments: Iterable[LineSegment], epsilon: float) -> list[IntersectionResult]:
    """Find all intersections by testing every pair of segments.

    Args:
        segments: Input segments; zero-length and duplicate ones are ignored
        epsilon: Comparison tolerance

    Returns:
        Deduplicated intersection results in deterministic order
    """
    prepared = prepare_segments(segments, epsilon)
    results = IntersectionResults(epsilon)
    collect_pairwise(prepared, epsilon, results)
    logger.debug(f"Brute force found {len(results)} intersection(s) among {len(prepared)} segments")
    return results.results()
