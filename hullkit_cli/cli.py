"""
hullkit CLI - Main entry point.

Computes convex hulls of random or configured point sets and renders them.
"""

import argparse
import dataclasses
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import yaml

from hullkit.algorithms import ALGORITHMS, get_convex_hull_lines
from hullkit.config import HullConfig
from hullkit.errors import HullError
from hullkit.geometry.shapes import Line, Point
from hullkit.pipeline import HullRunResult, PipelineBuilder

# Fixed scenario: (0, 1.5) is interior, the hull is the other four corners
DEMO_POINTS = [
    Point(0, 0),
    Point(-1, -1),
    Point(0, 4),
    Point(3, 2),
    Point(5, 6),
    Point(0, 1.5),
]


def resolve_algorithms(choice: str) -> List[str]:
    """Expand the --algorithm choice into algorithm names."""
    if choice == "all":
        return list(ALGORITHMS)
    return [choice]


def print_points(title: str, points: Sequence[Point]) -> None:
    print(title)
    for point in points:
        print(f"  {point}")


def print_lines(title: str, lines: Sequence[Line]) -> None:
    print(title)
    for line in lines:
        print(f"  {line}")


def print_result(result: HullRunResult) -> None:
    print_points("Data points:", result.points)
    for algorithm, hull in result.hulls.items():
        print_points(f"Convex hull points ({algorithm}):", hull)
        print_lines(f"Convex hull edges ({algorithm}):", result.edges[algorithm])
    for name, path in result.images.items():
        print(f"Saved {name} image: {path}")


def run_command(args: argparse.Namespace) -> HullRunResult:
    """Build and process a pipeline from CLI arguments."""
    if args.config:
        config = HullConfig.from_yaml(Path(args.config))
        builder = PipelineBuilder.from_config(config)
        render_config = config.render
        sampling = config.sampling
    else:
        builder = PipelineBuilder()
        render_config = None
        sampling = HullConfig().sampling

    if args.algorithm:
        builder.with_algorithms(resolve_algorithms(args.algorithm))

    if args.count is not None or args.seed is not None:
        count = args.count if args.count is not None else sampling.count
        seed = args.seed if args.seed is not None else sampling.seed
        builder.with_random_points(count, seed=seed)

    if args.width is not None or args.height is not None:
        base = render_config if render_config is not None else HullConfig().render
        builder.with_render_config(dataclasses.replace(
            base,
            width=args.width if args.width is not None else base.width,
            height=args.height if args.height is not None else base.height,
        ))

    if args.output_dir:
        builder.with_output_folder(args.output_dir)

    if args.no_render:
        builder.without_rendering()

    return builder.build().process()


def demo_command(args: argparse.Namespace) -> None:
    """Print hulls of the fixed demo scenario."""
    print_points("Data points:", DEMO_POINTS)
    for algorithm in resolve_algorithms(args.algorithm or "all"):
        hull = ALGORITHMS[algorithm](DEMO_POINTS)
        print_points(f"Convex hull points ({algorithm}):", hull)
        print_lines(f"Convex hull edges ({algorithm}):", get_convex_hull_lines(hull))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hullkit",
        description="hullkit CLI - Convex hulls with gift wrapping and Quickhull",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 20 random points, both algorithms, images under ./runs/convex_hull/<timestamp>
  hullkit run --count 20 --seed 7

  # Points and render settings from YAML
  hullkit run --config config/hull.yaml

  # Hulls only, no images
  hullkit run --count 50 --algorithm quickhull --no-render

  # Fixed six-point scenario
  hullkit demo
"""
    )

    algorithm_choices = sorted(ALGORITHMS) + ["all"]

    # Subcommands
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # run command
    run = subparsers.add_parser('run', help='Compute and render hulls')
    run.add_argument('--config', help='Path to run config YAML')
    run.add_argument('--count', type=int, help='Number of random points')
    run.add_argument('--seed', type=int, help='Random seed')
    run.add_argument('--algorithm', choices=algorithm_choices, help='Algorithm to run (default: all)')
    run.add_argument('--output-dir', help='Folder for rendered images')
    run.add_argument('--width', type=int, help='Image width in pixels')
    run.add_argument('--height', type=int, help='Image height in pixels')
    run.add_argument('--no-render', action='store_true', help='Skip image output')

    # demo command
    demo = subparsers.add_parser('demo', help='Hulls of a fixed six-point set')
    demo.add_argument('--algorithm', choices=algorithm_choices, help='Algorithm to run (default: all)')

    return parser


def main(argv: Optional[Sequence[str]] = None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Execute command
    try:
        if args.command == 'run':
            print_result(run_command(args))

        elif args.command == 'demo':
            demo_command(args)

    except (HullError, ValueError, OSError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
