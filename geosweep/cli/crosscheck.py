"""CLI for generating random segment sets and checking the sweep against brute force."""

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import Optional

from geosweep.config import get_settings
from geosweep.core.exceptions import InvalidSegmentError
from geosweep.geometry import (
    IntersectionResult,
    LineSegment,
    find_intersections_fast,
    find_intersections_slow,
    results_equal,
)
from geosweep.models.schemas.segments import (
    IntersectionResultSchema,
    parse_segments,
    segments_to_objects,
)

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def generate_segments(
    count: int,
    min_x: int,
    max_x: int,
    min_y: int,
    max_y: int,
    rng: random.Random,
) -> list[LineSegment]:
    """
    Generate random non-degenerate segments with integer coordinates.

    Args:
        count: Number of segments to generate
        min_x: Smallest x coordinate (inclusive)
        max_x: Largest x coordinate (inclusive)
        min_y: Smallest y coordinate (inclusive)
        max_y: Largest y coordinate (inclusive)
        rng: Random source, seeded by the caller for reproducible runs

    Returns:
        List of generated segments
    """
    if min_x == max_x and min_y == max_y:
        raise ValueError("bounds must allow at least two distinct points")

    segments = []
    while len(segments) < count:
        segment = LineSegment.from_coords(
            rng.randint(min_x, max_x),
            rng.randint(min_y, max_y),
            rng.randint(min_x, max_x),
            rng.randint(min_y, max_y),
        )
        if segment.is_degenerate():
            continue
        segments.append(segment)
    return segments


def cross_check(
    segments: list[LineSegment],
    epsilon: float,
) -> tuple[bool, list[IntersectionResult], list[IntersectionResult]]:
    """Run both searches and report whether they agree.

    Returns:
        (match, sweep results, brute-force results)
    """
    fast = find_intersections_fast(segments, epsilon)
    slow = find_intersections_slow(segments, epsilon)
    return results_equal(fast, slow, epsilon), fast, slow


def run_cross_check(
    iterations: int,
    count: int,
    bounds: tuple[int, int, int, int],
    epsilon: float,
    seed: Optional[int] = None,
) -> int:
    """
    Cross-check the sweep against brute force on random inputs.

    Args:
        iterations: Number of random segment sets to test
        count: Segments per set
        bounds: (min_x, max_x, min_y, max_y)
        epsilon: Comparison tolerance
        seed: Random seed (optional)

    Returns:
        Number of segment sets where the two searches disagreed
    """
    rng = random.Random(seed)
    min_x, max_x, min_y, max_y = bounds
    mismatches = 0

    for i in range(iterations):
        segments = generate_segments(count, min_x, max_x, min_y, max_y, rng)
        match, fast, slow = cross_check(segments, epsilon)
        if match:
            logger.debug(f"Iteration {i + 1}: {len(fast)} intersection(s), results agree")
            continue

        mismatches += 1
        logger.error(
            f"Iteration {i + 1}: sweep found {len(fast)} result(s), brute force found {len(slow)}"
        )
        logger.error(f"  Segments: {json.dumps(segments_to_objects(segments))}")

    logger.info(f"Checked {iterations} segment set(s) of {count} segment(s): {mismatches} mismatch(es)")
    return mismatches


def _dump_results(results: list[IntersectionResult]) -> str:
    return json.dumps(
        [IntersectionResultSchema.from_result(result).model_dump() for result in results],
        indent=2,
    )


def main(argv: Optional[list[str]] = None):
    """CLI entry point."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Generate random segments and cross-check the sweep line against brute force",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m geosweep.cli.crosscheck
  python -m geosweep.cli.crosscheck -n 20 --iterations 1000 --seed 42
  python -m geosweep.cli.crosscheck --emit -n 5 --maxx 100 --maxy 100
  python -m geosweep.cli.crosscheck --input segments.json
        """,
    )

    parser.add_argument(
        "--number",
        "-n",
        type=int,
        default=settings.generate_count,
        help="Number of segments per generated set",
    )
    parser.add_argument("--minx", type=int, default=settings.generate_min_x, help="Minimum x value")
    parser.add_argument("--maxx", type=int, default=settings.generate_max_x, help="Maximum x value")
    parser.add_argument("--miny", type=int, default=settings.generate_min_y, help="Minimum y value")
    parser.add_argument("--maxy", type=int, default=settings.generate_max_y, help="Maximum y value")

    parser.add_argument(
        "--iterations",
        "-i",
        type=int,
        default=settings.generate_iterations,
        help="Number of random segment sets to check",
    )
    parser.add_argument("--seed", type=int, help="Random seed for reproducible runs")
    parser.add_argument(
        "--epsilon",
        type=float,
        default=settings.epsilon,
        help="Comparison tolerance (default: from settings)",
    )

    parser.add_argument(
        "--emit",
        action="store_true",
        help="Print one generated segment set as JSON instead of checking",
    )
    parser.add_argument(
        "--input",
        help="JSON file of LINE/POLYLINE objects to check instead of random sets",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    if args.verbose or settings.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(settings.log_level.upper())

    if args.number < 1:
        parser.error("--number must be at least 1")
    if args.iterations < 1:
        parser.error("--iterations must be at least 1")
    if args.minx > args.maxx or args.miny > args.maxy:
        parser.error("minimum bounds must not exceed maximum bounds")
    if args.minx == args.maxx and args.miny == args.maxy:
        parser.error("bounds must allow at least two distinct points")

    if args.emit:
        rng = random.Random(args.seed)
        segments = generate_segments(args.number, args.minx, args.maxx, args.miny, args.maxy, rng)
        print(json.dumps(segments_to_objects(segments), indent=2))
        return

    if args.input:
        path = Path(args.input)
        if not path.exists():
            logger.error(f"File not found: {args.input}")
            sys.exit(1)

        try:
            segments = parse_segments(
                json.loads(path.read_text()),
                max_objects=settings.max_segments,
                max_points_per_polyline=settings.max_points_per_polyline,
            )
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in {args.input}: {e}")
            sys.exit(1)
        except InvalidSegmentError as e:
            logger.error(e.detail)
            sys.exit(1)

        logger.info(f"Loaded {len(segments)} segment(s) from {path.name}")
        match, fast, slow = cross_check(segments, args.epsilon)
        print(_dump_results(fast))
        if not match:
            logger.error(f"Sweep found {len(fast)} result(s), brute force found {len(slow)}")
            sys.exit(1)
        logger.info(f"Sweep and brute force agree on {len(fast)} result(s)")
        return

    try:
        mismatches = run_cross_check(
            iterations=args.iterations,
            count=args.number,
            bounds=(args.minx, args.maxx, args.miny, args.maxy),
            epsilon=args.epsilon,
            seed=args.seed,
        )
    except KeyboardInterrupt:
        logger.info("\nCross-check interrupted by user")
        sys.exit(130)

    if mismatches:
        sys.exit(1)


if __name__ == "__main__":
    main()
