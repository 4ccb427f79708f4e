"""
Test Rendering and Point Sampling
=================================

HullVisualizer canvas drawing and image output; random point source.

Usage:
    pytest test_rendering.py
"""

import numpy as np
import pytest
import supervision as sv
from PIL import Image

from hullkit import HullVisualizer, Line, Point, generate_random_points

WHITE = [255, 255, 255]
BLACK = [0, 0, 0]


# ========== Sampling ==========

def test_random_points_in_unit_square():
    points = generate_random_points(50, seed=1)
    assert len(points) == 50
    assert all(0 <= p.x < 1 and 0 <= p.y < 1 for p in points)


def test_random_points_reproducible():
    assert generate_random_points(10, seed=3) == generate_random_points(10, seed=3)
    assert generate_random_points(10, seed=3) != generate_random_points(10, seed=4)


def test_random_points_count_validated():
    with pytest.raises(ValueError):
        generate_random_points(0)


# ========== Coordinate mapping ==========

def test_to_pixel_maps_bounds_to_drawable_area():
    visualizer = HullVisualizer(padding=2, point_thickness=2)
    bounds = (0.0, 0.0, 1.0, 1.0)

    # inset 4, usable span 64 - 1 - 8 = 55
    assert visualizer.to_pixel(Point(0, 0), bounds, 64, 64) == (4, 59)
    assert visualizer.to_pixel(Point(1, 1), bounds, 64, 64) == (59, 4)


def test_to_pixel_without_flip():
    visualizer = HullVisualizer(flip_y=False)
    assert visualizer.to_pixel(Point(0, 0), (0.0, 0.0, 1.0, 1.0), 64, 64) == (4, 4)


def test_to_pixel_zero_extent_maps_to_center():
    visualizer = HullVisualizer(flip_y=False)
    column, row = visualizer.to_pixel(Point(3, 3), (3.0, 3.0, 3.0, 3.0), 65, 65)
    assert column == row == 4 + 28


def test_compute_bounds():
    bounds = HullVisualizer.compute_bounds([Point(-1, 2), Point(3, -4), Point(0, 0)])
    assert bounds == (-1, -4, 3, 2)

    with pytest.raises(ValueError):
        HullVisualizer.compute_bounds([])


# ========== Drawing ==========

def test_draw_empty_canvas():
    canvas = HullVisualizer().draw([], [], width=32, height=16)
    assert canvas.shape == (16, 32, 3)
    assert canvas.dtype == np.uint8
    assert not canvas.any()


def test_draw_markers_and_edges():
    visualizer = HullVisualizer(
        point_color=sv.Color(r=255, g=255, b=255),
        line_color=sv.Color(r=0, g=255, b=0),
    )
    points = [Point(0, 0), Point(1, 1)]
    lines = [Line(Point(0, 0), Point(1, 1))]

    canvas = visualizer.draw(points, lines, width=64, height=64)

    # Markers drawn on top of the edge
    assert canvas[59, 4].tolist() == WHITE
    assert canvas[4, 59].tolist() == WHITE
    # Edge pixels are green somewhere along the diagonal
    green = np.all(canvas == [0, 255, 0], axis=-1)
    assert green.any()
    # Corners stay background
    assert canvas[0, 0].tolist() == BLACK
    assert canvas[63, 63].tolist() == BLACK


def test_draw_rejects_tiny_canvas():
    with pytest.raises(ValueError):
        HullVisualizer(padding=2, point_thickness=2).draw([Point(0, 0)], [], width=8, height=64)


def test_invalid_style():
    with pytest.raises(ValueError):
        HullVisualizer(line_thickness=0)


# ========== Output ==========

def test_render_writes_image(tmp_path):
    visualizer = HullVisualizer()
    points = generate_random_points(10, seed=5)

    path = visualizer.render(points, [], width=128, height=96, path=tmp_path / "out" / "data.bmp")

    assert path.exists()
    with Image.open(path) as image:
        assert image.size == (128, 96)
        assert image.format == "BMP"


def test_save_converts_bgr_to_rgb(tmp_path):
    canvas = np.zeros((10, 10, 3), dtype=np.uint8)
    canvas[:, :] = (255, 0, 0)  # blue in BGR

    path = HullVisualizer().save(canvas, tmp_path / "blue.png")

    with Image.open(path) as image:
        assert image.convert("RGB").getpixel((5, 5)) == (0, 0, 255)
