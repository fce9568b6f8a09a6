"""Segment input validation and result output schemas."""

import math
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from geosweep.core.exceptions import InvalidSegmentError
from geosweep.geometry.point import Point
from geosweep.geometry.segment import LineSegment
from geosweep.geometry.types import IntersectionResult


def _validate_coordinates(v: Any, label: str) -> tuple[float, float]:
    if not isinstance(v, (list, tuple)):
        raise ValueError(f"{label} must be an array [x, y]")
    if len(v) != 2:
        raise ValueError(f"{label} must have exactly 2 coordinates, got {len(v)}")

    try:
        x, y = float(v[0]), float(v[1])
    except (TypeError, ValueError) as e:
        raise ValueError(f"{label} coordinates must be numbers: {e}")

    if not (math.isfinite(x) and math.isfinite(y)):
        raise ValueError(f"{label} coordinates must be finite numbers (not NaN or Infinity)")

    return (x, y)


class LineObject(BaseModel):
    """LINE object with start and end points."""

    type: Literal["LINE"] = "LINE"
    start: tuple[float, float]
    end: tuple[float, float]

    @field_validator("start", "end", mode="before")
    @classmethod
    def validate_point(cls, v: Any) -> tuple[float, float]:
        return _validate_coordinates(v, "point")

    def to_segments(self) -> list[LineSegment]:
        return [LineSegment(Point(*self.start), Point(*self.end))]


class PolylineObject(BaseModel):
    """POLYLINE object; each pair of consecutive points forms a segment."""

    type: Literal["POLYLINE"] = "POLYLINE"
    points: list[tuple[float, float]] = Field(..., min_length=2)
    closed: bool = False

    @field_validator("points", mode="before")
    @classmethod
    def validate_points(cls, v: Any) -> list[tuple[float, float]]:
        if not isinstance(v, list):
            raise ValueError("points must be an array")
        if len(v) < 2:
            raise ValueError(f"points must have at least 2 coordinates, got {len(v)}")
        return [_validate_coordinates(point, f"point[{i}]") for i, point in enumerate(v)]

    def to_segments(self) -> list[LineSegment]:
        points = [Point(*p) for p in self.points]
        if self.closed and points[0] != points[-1]:
            points.append(points[0])
        return [LineSegment(a, b) for a, b in zip(points, points[1:])]


SegmentObject = LineObject | PolylineObject

VALID_TYPES = {"LINE", "POLYLINE"}


def _format_validation_error(e: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(x) for x in err.get('loc', []))}: {err.get('msg', '')}"
        for err in e.errors()
    )


def validate_single_object(obj: Any, index: int) -> tuple[Optional[SegmentObject], list[str], list[str]]:
    """
    Validate a single LINE or POLYLINE object.

    Returns:
        (validated_object, warnings, errors)
        - validated_object is None if validation failed
        - warnings are non-fatal issues
        - errors are fatal issues
    """
    warnings = []
    errors = []

    if not isinstance(obj, dict):
        errors.append(f"object[{index}]: must be a dict, got {type(obj).__name__}")
        return None, warnings, errors

    obj_type = obj.get("type")
    if obj_type not in VALID_TYPES:
        errors.append(f"object[{index}]: invalid type '{obj_type}', must be one of {sorted(VALID_TYPES)}")
        return None, warnings, errors

    try:
        if obj_type == "LINE":
            validated = LineObject.model_validate(obj)
        else:
            validated = PolylineObject.model_validate(obj)
    except ValidationError as e:
        errors.append(f"object[{index}]: {_format_validation_error(e)}")
        return None, warnings, errors

    if any(segment.is_degenerate() for segment in validated.to_segments()):
        warnings.append(f"object[{index}]: zero-length segment will be ignored")
    if isinstance(validated, PolylineObject) and validated.closed and len(validated.points) < 3:
        warnings.append(f"object[{index}]: closed polyline should have at least 3 points")

    return validated, warnings, errors


def validate_segment_objects(
    objects: Any,
    max_objects: int = 10000,
    max_points_per_polyline: int = 500,
) -> tuple[list[LineSegment], list[str], list[str]]:
    """
    Validate a list of segment objects and flatten them into segments.

    Args:
        objects: List of raw LINE/POLYLINE dicts
        max_objects: Maximum allowed objects
        max_points_per_polyline: Maximum points per polyline

    Returns:
        (segments, all_warnings, all_errors)
        - If all_errors is non-empty, validation failed
        - segments contains those of successfully validated objects
    """
    all_warnings = []
    all_errors = []
    segments = []

    if not isinstance(objects, list):
        all_errors.append("objects must be an array")
        return [], all_warnings, all_errors

    if len(objects) > max_objects:
        all_errors.append(f"too many objects: {len(objects)} (max {max_objects})")
        return [], all_warnings, all_errors

    for i, obj in enumerate(objects):
        # Check polyline point limit before full validation
        if isinstance(obj, dict) and obj.get("type") == "POLYLINE":
            points = obj.get("points", [])
            if isinstance(points, list) and len(points) > max_points_per_polyline:
                all_errors.append(
                    f"object[{i}]: polyline has {len(points)} points (max {max_points_per_polyline})"
                )
                continue

        validated, warnings, errors = validate_single_object(obj, i)

        all_warnings.extend(warnings)
        all_errors.extend(errors)

        if validated is not None:
            segments.extend(validated.to_segments())

    return segments, all_warnings, all_errors


def parse_segments(
    objects: Any,
    max_objects: int = 10000,
    max_points_per_polyline: int = 500,
) -> list[LineSegment]:
    """Validate objects and return their segments, raising on any error."""
    segments, _, errors = validate_segment_objects(objects, max_objects, max_points_per_polyline)
    if errors:
        raise InvalidSegmentError(errors)
    return segments


def segments_to_objects(segments: list[LineSegment]) -> list[dict[str, Any]]:
    """Dump segments as LINE objects (upper endpoint as start)."""
    return [
        LineObject(start=segment.upper.as_tuple(), end=segment.lower.as_tuple()).model_dump()
        for segment in segments
    ]


class SegmentSchema(BaseModel):
    upper: tuple[float, float]
    lower: tuple[float, float]

    @classmethod
    def from_segment(cls, segment: LineSegment) -> "SegmentSchema":
        return cls(upper=segment.upper.as_tuple(), lower=segment.lower.as_tuple())


class IntersectionResultSchema(BaseModel):
    """Serializable form of an intersection result."""

    type: str
    point: Optional[tuple[float, float]] = None
    overlapping_segment: Optional[SegmentSchema] = None
    input_segments: list[SegmentSchema] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: IntersectionResult) -> "IntersectionResultSchema":
        return cls(
            type=result.type.value,
            point=result.point.as_tuple() if result.point else None,
            overlapping_segment=(
                SegmentSchema.from_segment(result.overlapping_segment)
                if result.overlapping_segment
                else None
            ),
            input_segments=[SegmentSchema.from_segment(s) for s in result.input_segments],
        )
