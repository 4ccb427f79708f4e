"""
Hull Pipeline Module
====================

Bounded Context: Orchestration of a complete hull run.

Design:
- Orchestrator: Combines point source, hull algorithms, edge extraction, rendering
- Builder pattern: Fluent configuration
- Fail Fast: Validation at build time, not runtime

Pipeline stages:
1. Points (explicit or sampled)
2. Render bare point set (data.<fmt>)
3. Per algorithm: hull vertices -> boundary edges -> convex_hull_<algorithm>.<fmt>

Dependencies:
- hullkit.algorithms (hull construction)
- hullkit.rendering (visualizer)
- hullkit.logging (structured run events)
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from hullkit.algorithms import ALGORITHMS, get_convex_hull_lines
from hullkit.algorithms.extremes import PointLike, as_point_list
from hullkit.config import HullConfig, RenderConfig, SamplingConfig
from hullkit.errors import DegenerateInputError, InvalidInputError
from hullkit.geometry.shapes import Line, Point
from hullkit.logging import LogEvent, StructuredLogger, create_logger
from hullkit.rendering.visualizer import HullVisualizer
from hullkit.sampling import generate_random_points
from hullkit.utils import get_target_run_folder


@dataclass
class PipelineConfig:
    """
    Pipeline configuration.

    Design:
    - All dependencies injected
    - Validated at construction
    """

    algorithms: List[str]
    output_folder: Optional[str]
    visualizer: HullVisualizer
    render_config: RenderConfig
    logger: StructuredLogger
    points: Optional[List[Point]] = None
    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    render: bool = True


@dataclass
class HullRunResult:
    """Everything a run produced, keyed by algorithm name."""

    points: List[Point]
    hulls: Dict[str, List[Point]] = field(default_factory=dict)
    edges: Dict[str, List[Line]] = field(default_factory=dict)
    images: Dict[str, Path] = field(default_factory=dict)


class HullPipeline:
    """
    Orchestrates a hull run.

    Usage:
        pipeline = (
            PipelineBuilder()
            .with_random_points(count=20, seed=7)
            .with_algorithms(["quickhull", "gift_wrapping"])
            .build()
        )

        result = pipeline.process()
    """

    def __init__(self, config: PipelineConfig):
        self.config = config
        self._validate_config()

    def _validate_config(self) -> None:
        """Validate configuration (fail fast)."""
        if len(self.config.algorithms) == 0:
            raise ValueError("At least one algorithm is required")

        for name in self.config.algorithms:
            if name not in ALGORITHMS:
                raise ValueError(f"Unknown algorithm '{name}'. Must be one of {sorted(ALGORITHMS)}")

        if self.config.render and self.config.output_folder is None:
            raise ValueError("Output folder is required when rendering")

    def _load_points(self) -> List[Point]:
        if self.config.points is not None:
            points = list(self.config.points)
            self.config.logger.info(
                event=LogEvent.POINTS_LOADED,
                message=f"Using {len(points)} given points",
                metadata={'count': len(points)},
            )
            return points

        sampling = self.config.sampling
        points = generate_random_points(sampling.count, seed=sampling.seed)
        self.config.logger.info(
            event=LogEvent.POINTS_GENERATED,
            message=f"Sampled {len(points)} random points",
            metadata={'count': len(points), 'seed': sampling.seed},
        )
        return points

    def _image_path(self, stem: str) -> Path:
        return Path(self.config.output_folder) / f"{stem}.{self.config.render_config.image_format}"

    def _render(self, points: Sequence[Point], lines: Sequence[Line], stem: str) -> Path:
        render_config = self.config.render_config
        path = self.config.visualizer.render(
            points,
            lines,
            width=render_config.width,
            height=render_config.height,
            path=self._image_path(stem),
            bounds=HullVisualizer.compute_bounds(points),
        )
        self.config.logger.info(
            event=LogEvent.RENDER_SAVED,
            message=f"Saved {path.name}",
            metadata={'path': str(path)},
        )
        return path

    def compute(self, algorithm: str, points: Sequence[Point]) -> List[Point]:
        """
        Run one hull algorithm with error logging.

        Raises:
            InvalidInputError: If the point set is empty
            DegenerateInputError: If gift wrapping does not terminate
        """
        try:
            hull = ALGORITHMS[algorithm](points)
        except InvalidInputError as e:
            self.config.logger.error(
                event=LogEvent.INVALID_INPUT_ERROR,
                message=f"{algorithm} rejected the point set",
                metadata={'algorithm': algorithm},
                exc_info=e,
            )
            raise
        except DegenerateInputError as e:
            self.config.logger.error(
                event=LogEvent.DEGENERATE_INPUT_ERROR,
                message=f"{algorithm} did not terminate",
                metadata={'algorithm': algorithm, 'count': len(points)},
                exc_info=e,
            )
            raise

        self.config.logger.info(
            event=LogEvent.HULL_COMPUTED,
            message=f"{algorithm} found {len(hull)} hull vertices",
            metadata={'algorithm': algorithm, 'count': len(points), 'hull_size': len(hull)},
        )
        return hull

    def process(self) -> HullRunResult:
        """
        Run every configured algorithm.

        Returns:
            HullRunResult with points, hulls, edges and image paths
        """
        points = self._load_points()
        result = HullRunResult(points=points)

        if self.config.render:
            result.images["data"] = self._render(points, [], "data")

        for algorithm in self.config.algorithms:
            hull = self.compute(algorithm, points)
            lines = get_convex_hull_lines(hull)
            self.config.logger.info(
                event=LogEvent.HULL_EDGES_EXTRACTED,
                message=f"{algorithm} hull has {len(lines)} edges",
                metadata={'algorithm': algorithm, 'edges': len(lines)},
            )

            result.hulls[algorithm] = hull
            result.edges[algorithm] = lines

            if self.config.render:
                result.images[algorithm] = self._render(points, lines, f"convex_hull_{algorithm}")

        return result


class PipelineBuilder:
    """
    Builder for HullPipeline.

    Design:
    - Fluent API for construction
    - Fail-fast validation
    - Sensible defaults

    Usage:
        pipeline = (
            PipelineBuilder()
            .with_points([(0, 0), (1, 0), (1, 1), (0, 1)])
            .with_algorithms(["quickhull"])
            .with_output_folder("runs/square")
            .build()
        )
    """

    def __init__(self):
        self._points: Optional[List[Point]] = None
        self._sampling: SamplingConfig = SamplingConfig()
        self._algorithms: List[str] = list(ALGORITHMS)
        self._output_folder: Optional[str] = None
        self._visualizer: Optional[HullVisualizer] = None
        self._render_config: RenderConfig = RenderConfig()
        self._logger: Optional[StructuredLogger] = None
        self._render: bool = True

    @classmethod
    def from_config(cls, config: HullConfig) -> "PipelineBuilder":
        """Seed a builder from a loaded HullConfig."""
        builder = (
            cls()
            .with_algorithms(config.algorithms)
            .with_render_config(config.render)
        )
        if config.points is not None:
            builder.with_points(config.points)
        else:
            builder.with_random_points(config.sampling.count, seed=config.sampling.seed)
        if config.output_dir is not None:
            builder.with_output_folder(str(config.output_dir))
        return builder

    def with_points(self, points: Sequence[PointLike]) -> "PipelineBuilder":
        """Use an explicit point set."""
        self._points = as_point_list(points)
        return self

    def with_random_points(self, count: int, seed: Optional[int] = None) -> "PipelineBuilder":
        """Sample count uniform points (replaces explicit points)."""
        self._points = None
        self._sampling = SamplingConfig(count=count, seed=seed)
        return self

    def with_algorithms(self, algorithms: Sequence[str]) -> "PipelineBuilder":
        self._algorithms = list(algorithms)
        return self

    def with_output_folder(self, folder: str) -> "PipelineBuilder":
        self._output_folder = folder
        return self

    def with_visualizer(self, visualizer: HullVisualizer) -> "PipelineBuilder":
        self._visualizer = visualizer
        return self

    def with_render_config(self, render_config: RenderConfig) -> "PipelineBuilder":
        self._render_config = render_config
        return self

    def with_logger(self, logger: StructuredLogger) -> "PipelineBuilder":
        self._logger = logger
        return self

    def without_rendering(self) -> "PipelineBuilder":
        """Compute hulls only; no image files."""
        self._render = False
        return self

    def build(self) -> HullPipeline:
        """
        Build the pipeline.

        Raises:
            ValueError: If the configuration is invalid
        """
        # Defaults
        if self._render and self._output_folder is None:
            self._output_folder = get_target_run_folder(application_name="convex_hull")
        if self._visualizer is None:
            self._visualizer = HullVisualizer(
                padding=self._render_config.padding,
                point_thickness=self._render_config.point_thickness,
                line_thickness=self._render_config.line_thickness,
                flip_y=self._render_config.flip_y,
            )
        if self._logger is None:
            self._logger = create_logger("pipeline")

        config = PipelineConfig(
            algorithms=self._algorithms,
            output_folder=self._output_folder,
            visualizer=self._visualizer,
            render_config=self._render_config,
            logger=self._logger,
            points=self._points,
            sampling=self._sampling,
            render=self._render,
        )

        return HullPipeline(config)
