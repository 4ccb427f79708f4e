"""
Hull Algorithms Layer
=====================

Bounded Context: Convex hull construction.

Responsibilities:
- Gift wrapping (iterative, straightest-continuation tracer)
- Quickhull (recursive divide and conquer)
- Boundary edge extraction from an unordered vertex set
- NO drawing, NO I/O

Design:
- Pure functions over local copies of the input
- Deterministic tie-breaking (first maximum in input order wins)
"""

from typing import Callable, Dict, List

from hullkit.algorithms.edges import get_convex_hull_lines
from hullkit.algorithms.gift_wrapping import gift_wrapping
from hullkit.algorithms.quickhull import find_hull, quick_hull
from hullkit.geometry.shapes import Point

# Algorithm name -> hull function (names used by config and CLI)
ALGORITHMS: Dict[str, Callable[..., List[Point]]] = {
    "quickhull": quick_hull,
    "gift_wrapping": gift_wrapping,
}

__all__ = [
    "ALGORITHMS",
    "find_hull",
    "get_convex_hull_lines",
    "gift_wrapping",
    "quick_hull",
]
