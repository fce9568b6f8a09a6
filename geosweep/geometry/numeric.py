"""Floating-point comparison helpers.

Every comparison in the engine goes through these helpers with an explicit
epsilon so that the sweep and the brute-force search agree on what counts
as "equal".
"""

import math


def float_equals(a: float, b: float, epsilon: float) -> bool:
    """Return True when ``a`` and ``b`` differ by at most ``epsilon``."""
    return abs(a - b) <= epsilon


def float_less_than(a: float, b: float, epsilon: float) -> bool:
    """Return True when ``a`` is below ``b`` by more than ``epsilon``."""
    return a < b and not float_equals(a, b, epsilon)


def float_greater_than(a: float, b: float, epsilon: float) -> bool:
    """Return True when ``a`` is above ``b`` by more than ``epsilon``."""
    return a > b and not float_equals(a, b, epsilon)


def float_less_than_or_equal(a: float, b: float, epsilon: float) -> bool:
    return a < b or float_equals(a, b, epsilon)


def float_greater_than_or_equal(a: float, b: float, epsilon: float) -> bool:
    return a > b or float_equals(a, b, epsilon)


def snap_to_epsilon(value: float, epsilon: float) -> float:
    """Snap a value onto the nearest integer when it lies within epsilon of it.

    Intersection arithmetic produces values such as ``4.999999999999999``;
    snapping them keeps results from different segment pairs identical.

    Args:
        value: Value to snap
        epsilon: Snapping tolerance

    Returns:
        The nearest integer (as float) when within tolerance, else ``value``
    """
    if not math.isfinite(value):
        return value
    nearest = float(round(value))
    if abs(value - nearest) < epsilon:
        return nearest
    return value


def quantize(value: float, epsilon: float) -> float | int:
    """Map a coordinate onto the epsilon grid for use in dictionary keys."""
    if epsilon <= 0:
        return value
    return round(value / epsilon)
