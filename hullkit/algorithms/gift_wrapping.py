"""
Gift Wrapping Module
====================

Iterative hull tracer: walk from the leftmost point, at each vertex taking
the candidate that continues most straight on.

Design:
- Pure function (works on a local copy of the input)
- Nullable best-so-far values, no numeric sentinels
- Bounded loop: fails fast instead of cycling forever on degenerate input
"""

import logging
import math
from typing import Iterable, List, Optional

from hullkit.algorithms.extremes import PointLike, as_point_list, leftmost_point
from hullkit.errors import DegenerateInputError
from hullkit.geometry.shapes import Line, Point

logger = logging.getLogger(__name__)


def _rise_over_run(start: Point, p: Point) -> float:
    """Slope-like measure used to pick the first edge (run taken as absolute)."""
    rise = p.y - start.y
    run = abs(p.x - start.x)
    if run == 0:
        return math.copysign(math.inf, rise)
    return rise / run


def _is_farther(origin: Point, candidate: Point, best: Point) -> bool:
    return origin.distance_to(candidate) > origin.distance_to(best)


def _initial_direction(points: List[Point], start: Point) -> Optional[Point]:
    """
    Pick the first hull vertex after start.

    Returns:
        Point maximising rise/|run| from start (first maximum wins, equal
        slopes go to the farther point), or None when every point
        coincides with start
    """
    best: Optional[Point] = None
    best_slope: Optional[float] = None

    for point in points:
        if point == start:
            continue
        slope = _rise_over_run(start, point)
        if best_slope is None or slope > best_slope or (
            slope == best_slope and _is_farther(start, point, best)
        ):
            best = point
            best_slope = slope

    return best


def _straightest_continuation(points: List[Point], previous: Point, current: Point) -> Point:
    """
    Candidate maximising the turn cosine from previous->current.

    First maximum wins. Among equal turns the point farther from current
    is taken, so vertices lying on a hull edge are skipped.
    """
    incoming = Line(previous, current)
    best: Optional[Point] = None
    best_turn: Optional[float] = None

    for point in points:
        if point == current:
            continue
        turn = incoming.dot_turn(Line(current, point))
        if best_turn is None or turn > best_turn or (
            turn == best_turn and _is_farther(current, point, best)
        ):
            best = point
            best_turn = turn

    # previous always differs from current, so a candidate exists
    return best


def gift_wrapping(
    points: Iterable[PointLike],
    max_iterations: Optional[int] = None,
) -> List[Point]:
    """
    Compute hull vertices by gift wrapping.

    Args:
        points: Points or (x, y) pairs (at least one)
        max_iterations: Wrap-loop bound (default: number of input points)

    Returns:
        Hull vertices in traversal order, starting at the leftmost point
        (the start vertex is not repeated at the end)

    Raises:
        InvalidInputError: If the point set is empty
        DegenerateInputError: If the loop does not return to start in time
    """
    points = as_point_list(points)
    if max_iterations is None:
        max_iterations = len(points)

    # 1. Start at the lexicographic minimum
    start = leftmost_point(points)
    hull = [start]

    # 2. First edge
    previous = start
    current = _initial_direction(points, start)
    if current is None:
        logger.debug("gift_wrapping: all %d points coincide", len(points))
        return hull

    # 3. Wrap until we are back at start
    iterations = 0
    while current != start:
        iterations += 1
        if iterations > max_iterations:
            raise DegenerateInputError(
                f"Gift wrapping did not close the hull within {max_iterations} "
                f"iterations ({len(points)} points)"
            )

        hull.append(current)
        previous, current = current, _straightest_continuation(points, previous, current)

    logger.debug(
        "gift_wrapping: %d points -> %d hull vertices in %d iterations",
        len(points), len(hull), iterations,
    )
    return hull
