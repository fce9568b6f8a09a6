"""Custom exception classes."""


class GeoSweepError(Exception):
    """Base exception for library errors."""

    def __init__(
        self,
        detail: str,
        code: str = "GEOSWEEP_ERROR",
    ):
        super().__init__(detail)
        self.detail = detail
        self.code = code


class SweepInvariantError(GeoSweepError):
    """Raised when the sweep reaches a state that must never happen."""

    def __init__(self, detail: str):
        super().__init__(detail=detail, code="SWEEP_INVARIANT")


class EmptyEventQueueError(SweepInvariantError):
    def __init__(self):
        super().__init__(detail="Cannot pop from an empty event queue")


class StaleStatusError(SweepInvariantError):
    def __init__(self, reason: str):
        super().__init__(detail=f"Status structure is out of date: {reason}")


class InvalidSegmentError(GeoSweepError):
    def __init__(self, errors: list[str]):
        self.errors = errors
        detail = f"Segment validation failed with {len(errors)} error(s): {'; '.join(errors[:5])}"
        if len(errors) > 5:
            detail += f" ... and {len(errors) - 5} more"
        super().__init__(
            detail=detail,
            code="INVALID_SEGMENT",
        )
