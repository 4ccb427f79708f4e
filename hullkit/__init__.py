"""
hullkit
=======

Bounded Context: Planar convex hulls.

Design Philosophy:
- Separation of Concerns: Geometry, Algorithms, Rendering separated
- Immutable value objects for points and lines
- Pure, deterministic hull functions (first maximum in input order wins)

Architecture:

    hullkit/
    ├── geometry/          # Pure geometry (immutable, stateless)
    │   └── shapes.py      # Point, Line
    │
    ├── algorithms/        # Hull construction (pure functions)
    │   ├── gift_wrapping.py
    │   ├── quickhull.py
    │   └── edges.py       # Ordered boundary from hull vertices
    │
    ├── rendering/         # Visualization (stateless drawing)
    │   └── visualizer.py  # HullVisualizer
    │
    ├── logging/           # Structured JSON run events
    ├── config.py          # YAML-backed run configuration
    ├── sampling.py        # Random point source
    └── pipeline.py        # Orchestration

Usage:

    # 1. Hull vertices (unordered for Quickhull)
    from hullkit import Point, quick_hull, gift_wrapping, get_convex_hull_lines

    points = [Point(0, 0), Point(-1, -1), Point(0, 4), Point(3, 2), Point(5, 6)]
    hull = quick_hull(points)

    # 2. Ordered boundary
    edges = get_convex_hull_lines(hull)

    # 3. Visualize
    from hullkit import HullVisualizer

    HullVisualizer().render(points, edges, width=512, height=512, path="hull.bmp")

    # 4. Or use Pipeline (high-level orchestration)
    from hullkit import PipelineBuilder

    result = (
        PipelineBuilder()
        .with_random_points(count=20, seed=7)
        .build()
        .process()
    )
"""

# Geometry Layer (immutable, stateless)
from hullkit.geometry.shapes import Point, Line

# Errors
from hullkit.errors import HullError, InvalidInputError, DegenerateInputError

# Algorithms (pure)
from hullkit.algorithms import (
    ALGORITHMS,
    find_hull,
    get_convex_hull_lines,
    gift_wrapping,
    quick_hull,
)

# Point source
from hullkit.sampling import generate_random_points

# Rendering Layer (stateless)
from hullkit.rendering.visualizer import HullVisualizer

# Configuration
from hullkit.config import HullConfig, RenderConfig, SamplingConfig

# Pipeline (orchestration)
from hullkit.pipeline import HullPipeline, HullRunResult, PipelineBuilder

__all__ = [
    # Geometry
    "Point",
    "Line",
    # Errors
    "HullError",
    "InvalidInputError",
    "DegenerateInputError",
    # Algorithms
    "ALGORITHMS",
    "find_hull",
    "get_convex_hull_lines",
    "gift_wrapping",
    "quick_hull",
    # Point source
    "generate_random_points",
    # Rendering
    "HullVisualizer",
    # Configuration
    "HullConfig",
    "RenderConfig",
    "SamplingConfig",
    # Pipeline
    "HullPipeline",
    "HullRunResult",
    "PipelineBuilder",
]

__version__ = "1.0.0"
