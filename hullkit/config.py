"""
Configuration schema for hull runs.

This module defines the configuration structure for a hull run, including
the point source (explicit points or random sampling), which algorithms to
run, and raster rendering settings.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple
import yaml

from hullkit.algorithms import ALGORITHMS


@dataclass(frozen=True)
class SamplingConfig:
    """Random point generation settings."""

    count: int = 20
    seed: Optional[int] = None

    def __post_init__(self):
        """Validate sampling configuration."""
        if self.count < 1:
            raise ValueError(f"count must be >= 1, got {self.count}")


@dataclass(frozen=True)
class RenderConfig:
    """
    Raster output settings.

    Formats: any Pillow writer picked by suffix ("bmp", "png", ...).
    """

    width: int = 512
    height: int = 512
    padding: int = 2
    point_thickness: int = 2
    line_thickness: int = 1
    image_format: str = "bmp"
    flip_y: bool = True

    def __post_init__(self):
        """Validate render configuration."""
        if self.padding < 0:
            raise ValueError(f"padding must be >= 0, got {self.padding}")
        if self.point_thickness < 0:
            raise ValueError(f"point_thickness must be >= 0, got {self.point_thickness}")
        if self.line_thickness < 1:
            raise ValueError(f"line_thickness must be >= 1, got {self.line_thickness}")

        minimum = 2 * (self.padding + self.point_thickness) + 1
        if self.width < minimum or self.height < minimum:
            raise ValueError(
                f"width/height must be at least {minimum}, got {self.width}x{self.height}"
            )
        if self.width > 8192 or self.height > 8192:
            raise ValueError(
                f"width/height too large (max 8192x8192), got {self.width}x{self.height}"
            )

        valid_formats = {"bmp", "png", "jpg", "jpeg", "tiff"}
        if self.image_format not in valid_formats:
            raise ValueError(
                f"Invalid image_format: {self.image_format}. "
                f"Must be one of {valid_formats}"
            )


@dataclass(frozen=True)
class HullConfig:
    """
    Main configuration for a hull run.

    Loaded from YAML and validated at construction.
    Explicit points take precedence over sampling.
    """

    algorithms: Tuple[str, ...] = ("quickhull", "gift_wrapping")
    points: Optional[List[Tuple[float, float]]] = None
    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    output_dir: Optional[Path] = None

    def __post_init__(self):
        """Validate hull configuration."""
        if not self.algorithms:
            raise ValueError("At least one algorithm is required")

        for name in self.algorithms:
            if name not in ALGORITHMS:
                raise ValueError(
                    f"Invalid algorithm: {name}. "
                    f"Must be one of {sorted(ALGORITHMS)}"
                )

        if self.points is not None:
            if len(self.points) == 0:
                raise ValueError("points cannot be empty (omit it to sample instead)")
            for point in self.points:
                if len(point) != 2:
                    raise ValueError(f"Each point must be an [x, y] pair, got {point}")

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "HullConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            algorithms: ["quickhull", "gift_wrapping"]

            # Omit to sample random points instead
            points: [[0, 0], [-1, -1], [0, 4], [3, 2], [5, 6], [0, 1.5]]

            sampling:
              count: 20
              seed: 7

            render:
              width: 512
              height: 512
              image_format: "bmp"

            output_dir: "./runs/hull"
        """
        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}

        sampling = SamplingConfig(**data.get("sampling", {}))
        render = RenderConfig(**data.get("render", {}))

        points_data = data.get("points")
        points = None
        if points_data is not None:
            points = [tuple(float(v) for v in point) for point in points_data]

        output_dir = data.get("output_dir")

        return cls(
            algorithms=tuple(data.get("algorithms", ("quickhull", "gift_wrapping"))),
            points=points,
            sampling=sampling,
            render=render,
            output_dir=Path(output_dir) if output_dir is not None else None,
        )
