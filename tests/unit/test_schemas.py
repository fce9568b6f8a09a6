"""Unit tests for segment input validation schemas."""

import pytest

from geosweep.core.exceptions import InvalidSegmentError
from geosweep.geometry.intersection import intersect_segments
from geosweep.geometry.segment import LineSegment
from geosweep.models.schemas.segments import (
    IntersectionResultSchema,
    LineObject,
    PolylineObject,
    parse_segments,
    segments_to_objects,
    validate_segment_objects,
)

seg = LineSegment.from_coords


class TestLineObject:
    def test_valid_line(self):
        line = LineObject.model_validate({"type": "LINE", "start": [0, 0], "end": [3, 4]})
        assert line.to_segments() == [seg(0, 0, 3, 4)]

    def test_rejects_bad_point(self):
        with pytest.raises(ValueError):
            LineObject.model_validate({"type": "LINE", "start": [0], "end": [3, 4]})

    def test_rejects_non_finite(self):
        with pytest.raises(ValueError):
            LineObject.model_validate({"type": "LINE", "start": [0, float("nan")], "end": [3, 4]})


class TestPolylineObject:
    def test_open_polyline(self):
        polyline = PolylineObject.model_validate({"type": "POLYLINE", "points": [[0, 0], [1, 0], [1, 1]]})
        assert polyline.to_segments() == [seg(0, 0, 1, 0), seg(1, 0, 1, 1)]

    def test_closed_polyline_adds_closing_segment(self):
        polyline = PolylineObject.model_validate(
            {"type": "POLYLINE", "points": [[0, 0], [1, 0], [1, 1]], "closed": True}
        )
        assert len(polyline.to_segments()) == 3
        assert polyline.to_segments()[-1] == seg(1, 1, 0, 0)

    def test_too_few_points(self):
        with pytest.raises(ValueError):
            PolylineObject.model_validate({"type": "POLYLINE", "points": [[0, 0]]})


class TestValidateSegmentObjects:
    def test_mixed_objects(self):
        objects = [
            {"type": "LINE", "start": [0, 0], "end": [10, 10]},
            {"type": "POLYLINE", "points": [[0, 10], [5, 5], [10, 0]]},
        ]
        segments, warnings, errors = validate_segment_objects(objects)
        assert len(segments) == 3
        assert warnings == []
        assert errors == []

    def test_invalid_type(self):
        _, _, errors = validate_segment_objects([{"type": "CIRCLE"}])
        assert "invalid type" in errors[0]

    def test_not_a_list(self):
        _, _, errors = validate_segment_objects({"type": "LINE"})
        assert errors == ["objects must be an array"]

    def test_too_many_objects(self):
        objects = [{"type": "LINE", "start": [0, 0], "end": [1, 1]}] * 3
        _, _, errors = validate_segment_objects(objects, max_objects=2)
        assert errors == ["too many objects: 3 (max 2)"]

    def test_polyline_point_limit(self):
        objects = [{"type": "POLYLINE", "points": [[i, 0] for i in range(5)]}]
        _, _, errors = validate_segment_objects(objects, max_points_per_polyline=4)
        assert "polyline has 5 points" in errors[0]

    def test_zero_length_line_warns(self):
        segments, warnings, errors = validate_segment_objects(
            [{"type": "LINE", "start": [1, 1], "end": [1, 1]}]
        )
        assert len(segments) == 1
        assert "zero-length" in warnings[0]
        assert errors == []

    def test_error_is_prefixed_with_index(self):
        _, _, errors = validate_segment_objects(
            [{"type": "LINE", "start": [0, 0], "end": [1, 1]}, {"type": "LINE", "start": "x", "end": [1, 1]}]
        )
        assert errors[0].startswith("object[1]:")


class TestParseSegments:
    def test_raises_with_all_errors(self):
        with pytest.raises(InvalidSegmentError) as exc_info:
            parse_segments([{"type": "ARC"}, "line"])
        assert len(exc_info.value.errors) == 2
        assert exc_info.value.code == "INVALID_SEGMENT"

    def test_round_trip_through_objects(self):
        segments = [seg(0, 0, 10, 10), seg(0, 10, 10, 0)]
        assert parse_segments(segments_to_objects(segments)) == segments


class TestIntersectionResultSchema:
    def test_point_result(self, epsilon):
        result = intersect_segments(seg(0, 0, 10, 10), seg(0, 10, 10, 0), epsilon)
        dumped = IntersectionResultSchema.from_result(result).model_dump()
        assert dumped["type"] == "point"
        assert dumped["point"] == (5.0, 5.0)
        assert dumped["overlapping_segment"] is None
        assert len(dumped["input_segments"]) == 2

    def test_overlap_result(self, epsilon):
        result = intersect_segments(seg(0, 0, 10, 0), seg(5, 0, 15, 0), epsilon)
        dumped = IntersectionResultSchema.from_result(result).model_dump()
        assert dumped["type"] == "overlapping_segment"
        assert dumped["overlapping_segment"] == {"upper": (5.0, 0.0), "lower": (10.0, 0.0)}
