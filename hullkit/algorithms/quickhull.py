"""
Quickhull Module
================

Recursive divide-and-conquer hull builder.

Design:
- The extreme points split the set into two halves
- find_hull() keeps the farthest point from a base edge and discards
  everything inside the triangle it forms
- Pure functions, inputs never mutated
- Recursion depth bounded by the point count (each level consumes a point)
"""

import logging
from typing import Iterable, List, Optional

from hullkit.algorithms.extremes import (
    PointLike,
    as_point_list,
    leftmost_point,
    rightmost_point,
)
from hullkit.geometry.shapes import Line, Point

logger = logging.getLogger(__name__)


def _farthest_from(points: List[Point], base: Line) -> Point:
    """Point at maximum distance from base (first maximum wins)."""
    farthest: Optional[Point] = None
    max_distance: Optional[float] = None

    for point in points:
        distance = base.distance_from_point(point)
        if max_distance is None or distance > max_distance:
            farthest = point
            max_distance = distance

    return farthest


def find_hull(points: List[Point], base: Line) -> List[Point]:
    """
    Hull vertices strictly left of a base edge.

    Args:
        points: Candidate points
        base: Directed hull edge; only points on its left are considered

    Returns:
        [farthest] + hull left of (base.start -> farthest)
                   + hull left of (farthest -> base.end)
    """
    if not points:
        return []

    # Candidates outside the current edge
    left_points = [
        point for point in points
        if point != base.start and point != base.end and base.is_point_on_left_of_line(point)
    ]
    if not left_points:
        return []

    farthest = _farthest_from(left_points, base)
    first_line = Line(base.start, farthest)
    second_line = Line(farthest, base.end)

    # Drop everything inside triangle (base.start, farthest, base.end)
    outside_triangle = [
        point for point in left_points
        if point != farthest
        and (first_line.is_point_on_left_of_line(point) or second_line.is_point_on_left_of_line(point))
    ]

    first_hull = find_hull(outside_triangle, first_line)
    second_hull = find_hull(outside_triangle, second_line)

    return [farthest] + first_hull + second_hull


def quick_hull(points: Iterable[PointLike]) -> List[Point]:
    """
    Compute hull vertices with Quickhull.

    Args:
        points: Points or (x, y) pairs (at least one)

    Returns:
        [leftest, rightest] followed by the upper and lower hull vertices.
        Order is not a polygon traversal; see get_convex_hull_lines().

    Raises:
        InvalidInputError: If the point set is empty
    """
    points = as_point_list(points)

    leftest = leftmost_point(points)
    rightest = rightmost_point(points)
    if leftest == rightest:
        logger.debug("quick_hull: all %d points coincide", len(points))
        return [leftest]

    left_right_line = Line(leftest, rightest)
    left_points = []
    right_points = []
    for point in points:
        if point == leftest or point == rightest:
            continue
        if left_right_line.is_point_on_left_of_line(point):
            left_points.append(point)
        else:
            right_points.append(point)

    left_hull = find_hull(left_points, left_right_line)
    right_hull = find_hull(right_points, left_right_line.reversed())

    hull = [leftest, rightest] + left_hull + right_hull
    logger.debug("quick_hull: %d points -> %d hull vertices", len(points), len(hull))
    return hull
