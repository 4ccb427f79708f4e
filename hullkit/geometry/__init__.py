"""
Geometry Layer
==============

Bounded Context: Pure geometric primitives for hull construction.

Responsibilities:
- Point and directed Line representation (immutable)
- Side-of-line tests (cross product)
- Point-to-line distance and turn measure
- NO hull logic, NO rendering

Design Philosophy:
- Pure functions where possible
- Immutable data structures
- Fail-fast validation
- Zero side effects
"""

from hullkit.geometry.shapes import Point, Line

__all__ = [
    "Point",
    "Line",
]
