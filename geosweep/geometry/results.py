"""Deduplicating collector for intersection results."""

from typing import Hashable

from geosweep.geometry.numeric import quantize
from geosweep.geometry.point import Point
from geosweep.geometry.types import IntersectionResult, IntersectionType


class IntersectionResults:
    """Collects results keyed by their geometry.

    Results landing on the same (epsilon-quantized) point or overlap are
    merged and their contributing segments unioned, so adding the same
    intersection twice is harmless.
    """

    def __init__(self, epsilon: float):
        self.epsilon = epsilon
        self._results: dict[Hashable, IntersectionResult] = {}

    def __len__(self) -> int:
        return len(self._results)

    def __contains__(self, result: IntersectionResult) -> bool:
        return not result.is_none and self._key(result) in self._results

    def _point_key(self, point: Point) -> tuple:
        return (quantize(point.x, self.epsilon), quantize(point.y, self.epsilon))

    def _key(self, result: IntersectionResult) -> tuple:
        if result.type is IntersectionType.POINT:
            return (result.type.value, self._point_key(result.point))
        segment = result.overlapping_segment
        return (
            result.type.value,
            self._point_key(segment.upper),
            self._point_key(segment.lower),
        )

    def add(self, result: IntersectionResult) -> None:
        """Record a result, merging with an existing one at the same key."""
        if result.is_none:
            return
        key = self._key(result)
        existing = self._results.get(key)
        if existing is None:
            self._results[key] = result
        else:
            self._results[key] = existing.with_segments(result.input_segments)

    def results(self) -> list[IntersectionResult]:
        """Return all results in deterministic order."""
        return sorted(self._results.values(), key=IntersectionResult.sort_key)
