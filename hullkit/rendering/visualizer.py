"""
Hull Visualizer Module
======================

Pure visualization layer for point sets and hull edges.

Design:
- Stateless rendering (style is the only instance state)
- No hull logic
- Configurable styles
- Uses supervision drawing utilities on a numpy BGR canvas
- Pillow persists the canvas (format from the file suffix)

Dependencies:
- supervision (draw utilities, Color, Point, Rect)
- numpy (canvas)
- Pillow (image files)
"""

import math
from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np
import supervision as sv
from PIL import Image

from hullkit.geometry.shapes import Line, Point

# (min_x, min_y, max_x, max_y)
Bounds = Tuple[float, float, float, float]


class HullVisualizer:
    """
    Stateless visualizer for hull rendering.

    Usage:
        visualizer = HullVisualizer(
            point_color=sv.Color(r=255, g=255, b=255),
            line_color=sv.Color(r=0, g=255, b=0),
        )

        canvas = visualizer.draw(points, edges, width=512, height=512)
        visualizer.save(canvas, "runs/hull/convex_hull_quickhull.bmp")
    """

    def __init__(
        self,
        point_color: sv.Color = sv.Color(r=255, g=255, b=255),
        line_color: sv.Color = sv.Color(r=0, g=255, b=0),
        background_color: sv.Color = sv.Color(r=0, g=0, b=0),
        padding: int = 2,
        point_thickness: int = 2,
        line_thickness: int = 1,
        flip_y: bool = True,
    ):
        """
        Initialize visualizer with style configuration.

        Args:
            point_color: Marker color
            line_color: Edge color
            background_color: Canvas fill
            padding: Empty border around the drawable area (pixels)
            point_thickness: Marker half-size (pixels)
            line_thickness: Edge thickness (pixels)
            flip_y: Draw with y growing upward
        """
        if padding < 0 or point_thickness < 0 or line_thickness < 1:
            raise ValueError(
                f"Invalid style: padding={padding}, point_thickness={point_thickness}, "
                f"line_thickness={line_thickness}"
            )

        self.point_color = point_color
        self.line_color = line_color
        self.background_color = background_color
        self.padding = padding
        self.point_thickness = point_thickness
        self.line_thickness = line_thickness
        self.flip_y = flip_y

    @property
    def inset(self) -> int:
        """Distance from the canvas border to the drawable area."""
        return self.padding + self.point_thickness

    def _validate_canvas(self, width: int, height: int) -> None:
        minimum = 2 * self.inset + 1
        if width < minimum or height < minimum:
            raise ValueError(
                f"Canvas must be at least {minimum}x{minimum} pixels, got {width}x{height}"
            )

    @staticmethod
    def compute_bounds(points: Iterable[Point]) -> Bounds:
        """Bounding box of a non-empty point collection."""
        xs, ys = [], []
        for point in points:
            xs.append(point.x)
            ys.append(point.y)
        if not xs:
            raise ValueError("Cannot compute bounds of an empty point collection")
        return min(xs), min(ys), max(xs), max(ys)

    def _axis_to_pixel(self, value: float, low: float, high: float, length: int) -> int:
        usable = length - 1 - 2 * self.inset
        if high == low:
            fraction = 0.5
        else:
            fraction = (value - low) / (high - low)
        return int(math.floor(fraction * usable)) + self.inset

    def to_pixel(self, point: Point, bounds: Bounds, width: int, height: int) -> Tuple[int, int]:
        """
        Map a point into canvas pixel coordinates.

        Args:
            point: Point to map
            bounds: (min_x, min_y, max_x, max_y) mapped onto the drawable area
            width: Canvas width
            height: Canvas height

        Returns:
            (column, row) pixel coordinates
        """
        min_x, min_y, max_x, max_y = bounds
        column = self._axis_to_pixel(point.x, min_x, max_x, width)
        row = self._axis_to_pixel(point.y, min_y, max_y, height)
        if self.flip_y:
            row = height - 1 - row
        return column, row

    def draw(
        self,
        points: Sequence[Point],
        lines: Sequence[Line],
        width: int,
        height: int,
        bounds: Optional[Bounds] = None,
    ) -> np.ndarray:
        """
        Draw points and edges on a fresh canvas.

        Args:
            points: Marker positions
            lines: Edges (drawn first, markers on top)
            width: Canvas width
            height: Canvas height
            bounds: Coordinate window (default: bounding box of everything drawn)

        Returns:
            (height, width, 3) uint8 BGR canvas
        """
        self._validate_canvas(width, height)

        canvas = np.zeros((height, width, 3), dtype=np.uint8)
        canvas[:, :] = self.background_color.as_bgr()

        if not points and not lines:
            return canvas

        if bounds is None:
            everything = list(points)
            for line in lines:
                everything.extend((line.start, line.end))
            bounds = self.compute_bounds(everything)

        for line in lines:
            start_x, start_y = self.to_pixel(line.start, bounds, width, height)
            end_x, end_y = self.to_pixel(line.end, bounds, width, height)
            canvas = sv.draw_line(
                scene=canvas,
                start=sv.Point(x=start_x, y=start_y),
                end=sv.Point(x=end_x, y=end_y),
                color=self.line_color,
                thickness=self.line_thickness,
            )

        size = 2 * self.point_thickness
        for point in points:
            center_x, center_y = self.to_pixel(point, bounds, width, height)
            marker = sv.Rect(
                x=center_x - self.point_thickness,
                y=center_y - self.point_thickness,
                width=size,
                height=size,
            )
            canvas = sv.draw_filled_rectangle(scene=canvas, rect=marker, color=self.point_color)

        return canvas

    def save(self, canvas: np.ndarray, path: str | Path) -> Path:
        """
        Write a BGR canvas to disk.

        Returns:
            Path written
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        rgb = np.ascontiguousarray(canvas[..., ::-1])
        Image.fromarray(rgb).save(path)
        return path

    def render(
        self,
        points: Sequence[Point],
        lines: Sequence[Line],
        width: int,
        height: int,
        path: str | Path,
        bounds: Optional[Bounds] = None,
    ) -> Path:
        """Draw and save in one step."""
        canvas = self.draw(points, lines, width, height, bounds=bounds)
        return self.save(canvas, path)
