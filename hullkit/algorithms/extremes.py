"""
Point Set Input Module
======================

Shared input handling for the hull algorithms.

Design:
- Copies caller input into a local list (callers' collections never mutated)
- Accepts Point objects or raw (x, y) pairs
- Fail fast on empty or malformed input
"""

from typing import Iterable, List, Sequence, Union

from hullkit.errors import InvalidInputError
from hullkit.geometry.shapes import Point

PointLike = Union[Point, Sequence[float]]


def as_point_list(points: Iterable[PointLike]) -> List[Point]:
    """
    Copy a point set into a list of Points.

    Args:
        points: Points or (x, y) pairs

    Returns:
        New list of Points, input order preserved (duplicates kept)

    Raises:
        InvalidInputError: If the set is empty or an entry is not an (x, y) pair
    """
    result = []
    for item in points:
        if isinstance(item, Point):
            result.append(item)
            continue
        try:
            result.append(Point.from_xy(item))
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Invalid point {item!r}: {e}") from e

    if not result:
        raise InvalidInputError("Point set must contain at least one point")

    return result


def leftmost_point(points: Sequence[Point]) -> Point:
    """Minimum x, ties broken by minimum y."""
    best = points[0]
    for point in points:
        if point.x < best.x or (point.x == best.x and point.y < best.y):
            best = point
    return best


def rightmost_point(points: Sequence[Point]) -> Point:
    """Maximum x, ties broken by maximum y."""
    best = points[0]
    for point in points:
        if point.x > best.x or (point.x == best.x and point.y > best.y):
            best = point
    return best
