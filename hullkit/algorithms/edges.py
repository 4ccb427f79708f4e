"""
Hull Edge Extraction Module
===========================

Rebuilds the ordered polygon boundary from an unordered set of hull vertices.

Design:
- Brute force over the (small) hull: a directed pair is an edge when every
  other vertex lies strictly on its left, O(h^3)
- Edges chained into a closed cycle (counter-clockwise)
- Pure function, no state
"""

import logging
from typing import Dict, Iterable, List

from hullkit.geometry.shapes import Line, Point

logger = logging.getLogger(__name__)


def _is_boundary_edge(line: Line, vertices: List[Point]) -> bool:
    return all(
        line.is_point_on_left_of_line(vertex)
        for vertex in vertices
        if vertex != line.start and vertex != line.end
    )


def _chain(edges: List[Line]) -> List[Line]:
    """Order edges so each one starts where the previous one ended."""
    if not edges:
        return []

    leaving: Dict[Point, Line] = {}
    for edge in edges:
        leaving.setdefault(edge.start, edge)

    ordered = []
    used = set()
    edge = edges[0]
    while edge is not None and edge not in used:
        ordered.append(edge)
        used.add(edge)
        edge = leaving.get(edge.end)

    # Degenerate hulls may leave edges off the cycle
    for edge in edges:
        if edge not in used:
            ordered.append(edge)
            used.add(edge)

    return ordered


def get_convex_hull_lines(hull_points: Iterable[Point]) -> List[Line]:
    """
    Directed boundary edges of a hull.

    Args:
        hull_points: Hull vertices in any order (duplicates ignored)

    Returns:
        One edge leaving each vertex, ordered so that the edges form a
        closed counter-clockwise cycle
    """
    vertices = list(dict.fromkeys(hull_points))

    edges = []
    for p1 in vertices:
        for p2 in vertices:
            if p1 == p2:
                continue
            line = Line(p1, p2)
            if _is_boundary_edge(line, vertices):
                edges.append(line)

    ordered = _chain(edges)
    logger.debug("get_convex_hull_lines: %d vertices -> %d edges", len(vertices), len(ordered))
    return ordered
