"""
Geometric Shapes Module
========================

Pure geometric representations - NO state, NO side effects.

Design:
- Immutable value objects (frozen dataclass pattern)
- Cross-product for line side calculation
- Slope/intercept form for point-to-line distance
- Thread-safe by design (immutability)
"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class Point:
    """
    Immutable 2D point.

    Equality is exact coordinate equality (no epsilon), so two points
    built from the same coordinates are interchangeable everywhere.

    Attributes:
        x: First coordinate
        y: Second coordinate
    """

    x: float
    y: float

    @classmethod
    def from_xy(cls, pair: Sequence[float]) -> "Point":
        """
        Build a point from an (x, y) pair.

        Raises:
            ValueError: If pair does not hold exactly two numbers
        """
        if len(pair) != 2:
            raise ValueError(f"Point needs exactly 2 coordinates, got {len(pair)}")
        return cls(x=float(pair[0]), y=float(pair[1]))

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.sqrt((other.x - self.x) ** 2 + (other.y - self.y) ** 2)

    def __sub__(self, other: "Point") -> "Point":
        """Displacement from other to self."""
        return Point(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"


@dataclass(frozen=True)
class Line:
    """
    Immutable directed line segment (start -> end).

    Direction matters: left/right and the turn measure are defined
    relative to travelling from start to end.

    Attributes:
        start: Segment start point
        end: Segment end point
    """

    start: Point
    end: Point

    def reversed(self) -> "Line":
        """Same segment travelled end -> start."""
        return Line(self.end, self.start)

    def slope(self) -> float:
        """
        Rise over run.

        Returns:
            math.inf for a vertical line (start.x == end.x)
        """
        run = self.end.x - self.start.x
        if run == 0:
            return math.inf
        return (self.end.y - self.start.y) / run

    def y_intercept(self) -> Optional[float]:
        """
        Where the infinite line crosses x = 0.

        Returns:
            None for a vertical line (no single intercept)
        """
        m = self.slope()
        if math.isinf(m):
            return None
        return self.end.y - m * self.end.x

    def length(self) -> float:
        return self.start.distance_to(self.end)

    def side_of(self, p: Point) -> int:
        """
        Determine which side of the line a point is on.

        Uses cross product: (end - start) x (p - start)

        Returns:
            1: left side of line (cross product > 0)
            -1: right side of line (cross product < 0)
            0: on the line (cross product == 0)
        """
        direction = self.end - self.start
        to_point = p - self.start
        cross = direction.x * to_point.y - direction.y * to_point.x

        if cross > 0:
            return 1
        elif cross < 0:
            return -1
        return 0

    def is_point_on_left_of_line(self, p: Point) -> bool:
        """True iff p is strictly left of the directed line (points on it are not)."""
        return self.side_of(p) == 1

    def distance_from_point(self, p: Point) -> float:
        """
        Perpendicular distance from p to the infinite line through start/end.

        Unsigned: use side_of() when the side matters. A vertical line
        falls back to the horizontal offset from start.
        """
        m = self.slope()
        if math.isinf(m):
            return abs(p.x - self.start.x)

        b = self.y_intercept()
        return abs(m * p.x - p.y + b) / math.sqrt(1 + m * m)

    def dot_turn(self, other: "Line") -> float:
        """
        Cosine of the angle between the two directions.

        1 means other continues straight on, -1 means it doubles back.

        Raises:
            ValueError: If either line has zero length
        """
        lengths = self.length() * other.length()
        if lengths == 0:
            raise ValueError("Cannot measure a turn against a zero-length line")

        d1 = self.end - self.start
        d2 = other.end - other.start
        return (d1.x * d2.x + d1.y * d2.y) / lengths

    def __mul__(self, other: "Line") -> float:
        return self.dot_turn(other)

    def __sub__(self, other: "Line") -> "Line":
        return Line(self.start - other.start, self.end - other.end)

    def __str__(self) -> str:
        return f"{self.start}->{self.end}"
