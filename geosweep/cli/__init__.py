"""Command-line interface tools."""

from .crosscheck import cross_check, generate_segments, run_cross_check

__all__ = [
    "cross_check",
    "generate_segments",
    "run_cross_check",
]
