"""
Rendering Layer
===============

Bounded Context: Hull visualization and image output.

Responsibilities:
- Draw point markers and hull edges on a canvas
- Map point coordinates into pixel space
- Persist canvases as image files

Non-responsibilities:
- Hull construction (handled by algorithms)
- Point generation (handled by sampling)

Design:
- Stateless drawing functions
- Uses supervision.draw.utils
- Configurable styles
"""

from hullkit.rendering.visualizer import HullVisualizer

__all__ = [
    "HullVisualizer",
]
