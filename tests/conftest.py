"""Pytest fixtures shared by the unit and integration tests."""

import pytest

from geosweep.config import get_settings
from geosweep.geometry.segment import LineSegment


@pytest.fixture
def epsilon() -> float:
    return 1e-8


@pytest.fixture
def x_shape() -> list[LineSegment]:
    """Two diagonals crossing at (5, 5)."""
    return [
        LineSegment.from_coords(0, 0, 10, 10),
        LineSegment.from_coords(0, 10, 10, 0),
    ]


@pytest.fixture
def octothorpe() -> list[LineSegment]:
    """Two horizontals and two verticals forming a '#'."""
    return [
        LineSegment.from_coords(0, 3, 10, 3),
        LineSegment.from_coords(0, 7, 10, 7),
        LineSegment.from_coords(3, 0, 3, 10),
        LineSegment.from_coords(7, 0, 7, 10),
    ]


@pytest.fixture
def three_way() -> list[LineSegment]:
    """Three segments meeting at (5, 5)."""
    return [
        LineSegment.from_coords(0, 0, 10, 10),
        LineSegment.from_coords(0, 10, 10, 0),
        LineSegment.from_coords(5, 0, 5, 10),
    ]


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
