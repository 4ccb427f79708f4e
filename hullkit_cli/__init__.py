"""
hullkit CLI - Command-line interface for convex hull runs.

Usage:
    hullkit run --count 20 --seed 7
    hullkit run --config config/hull.yaml --algorithm quickhull
    hullkit demo
"""

__version__ = "1.0.0"
