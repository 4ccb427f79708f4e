"""
Random point source.

Draws uniform points in the unit square, the input the renderer's default
coordinate mapping is laid out for.
"""

from typing import List, Optional

import numpy as np

from hullkit.geometry.shapes import Point


def generate_random_points(count: int, seed: Optional[int] = None) -> List[Point]:
    """
    Sample points uniformly from [0, 1) x [0, 1).

    Args:
        count: Number of points (>= 1)
        seed: RNG seed; the same seed yields the same points

    Raises:
        ValueError: If count < 1
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")

    rng = np.random.default_rng(seed)
    coords = rng.random((count, 2))
    return [Point(float(x), float(y)) for x, y in coords]
