"""
Hull_Search Command Line Interface.

This module provides a CLI for computing convex hulls of point files.

Usage:
    hull-search compute --input points.csv --algorithm quick-hull --order centroid
    hull-search compute --config hull.yaml
    hull-search compare --input points.csv
    hull-search algorithms
"""

from __future__ import annotations

import argparse
import logging
import sys

from hull_search.errors import HullSearchError
from hull_search.logger import configure_logging

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    from hull_search.algorithms.graham_scan import ANGLE_REFERENCES
    from hull_search.search import ALGORITHMS

    parser = argparse.ArgumentParser(
        prog="hull-search",
        description="Hull_Search: convex hulls of 2D point sets",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # compute command
    compute_parser = subparsers.add_parser(
        "compute",
        help="Compute the convex hull of a point file",
    )
    compute_parser.add_argument(
        "--input", "-i",
        help="Point file (CSV, JSON, YAML or NPY)",
    )
    compute_parser.add_argument(
        "--config", "-c",
        help="YAML run configuration; command line options override it",
    )
    compute_parser.add_argument(
        "--algorithm", "-a",
        help=f"Algorithm to use: {', '.join(ALGORITHMS)} (default: gift-wrapping)",
    )
    compute_parser.add_argument(
        "--order",
        choices=["centroid"],
        help="Reorder the hull counterclockwise around its centroid",
    )
    compute_parser.add_argument(
        "--angle-reference",
        choices=list(ANGLE_REFERENCES),
        help="Graham scan polar angle reference (default: origin)",
    )
    compute_parser.add_argument(
        "--output", "-o",
        help="Write hull vertices to this JSON or CSV file",
    )
    compute_parser.add_argument(
        "--plot",
        help="Save a plot of the hull to this image file",
    )
    compute_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )

    # compare command
    compare_parser = subparsers.add_parser(
        "compare",
        help="Run every algorithm on a point file and compare their hulls",
    )
    compare_parser.add_argument(
        "--input", "-i",
        required=True,
        help="Point file (CSV, JSON, YAML or NPY)",
    )
    compare_parser.add_argument(
        "--angle-reference",
        choices=list(ANGLE_REFERENCES),
        default="origin",
        help="Graham scan polar angle reference (default: origin)",
    )
    compare_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )

    # algorithms command
    subparsers.add_parser(
        "algorithms",
        help="List available algorithms",
    )

    return parser


def _format_point(point) -> str:
    label = f"  [{point.label}]" if point.label is not None else ""
    return f"  ({point.x:g}, {point.y:g}){label}"


def _build_config(args):
    from hull_search.config import HullConfig

    if args.config:
        config = HullConfig.from_yaml(args.config)
    else:
        config = HullConfig()

    def path_option(cli_value, config_value):
        if cli_value:
            return cli_value
        resolved = config.resolve(config_value)
        return str(resolved) if resolved is not None else None

    # Explicit command line options win over the file
    return HullConfig(
        algorithm=args.algorithm or config.algorithm,
        order=args.order or config.order,
        angle_reference=args.angle_reference or config.angle_reference,
        input=path_option(args.input, config.input),
        output=path_option(args.output, config.output),
        plot=path_option(args.plot, config.plot),
    )


def cmd_compute(args) -> int:
    """Compute and print a convex hull."""
    from hull_search.geometry.points import normalize_points
    from hull_search.io import load_points, save_hull

    try:
        config = _build_config(args)
        if config.input is None:
            print("Error: no input file given (use --input or a config file)", file=sys.stderr)
            return 1

        input_path = config.resolve(config.input)
        points = normalize_points(load_points(input_path))
        hull = config.to_search().perform(points)

        print(f"Algorithm: {config.algorithm}")
        print(f"Points: {len(points)}")
        print(f"Hull vertices: {len(hull)}")
        for point in hull:
            print(_format_point(point))

        if config.output:
            written = save_hull(hull, config.resolve(config.output))
            print(f"\nHull saved to: {written}")

        if config.plot:
            from hull_search.plotting import save_hull_plot

            written = save_hull_plot(points, hull, config.resolve(config.plot), title=config.algorithm)
            print(f"Plot saved to: {written}")

        return 0

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (HullSearchError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            logger.exception("hull computation failed")
        return 1


def cmd_compare(args) -> int:
    """Run every algorithm and report whether their vertex sets agree."""
    from hull_search.geometry.points import normalize_points
    from hull_search.io import load_points
    from hull_search.search import ALGORITHMS, ConvexHullSearch

    try:
        points = normalize_points(load_points(args.input))
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (HullSearchError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Points: {len(points)}")

    vertex_sets = {}
    errors = []
    for name in ALGORITHMS:
        search = ConvexHullSearch(name, order="centroid", angle_reference=args.angle_reference)
        try:
            hull = search.perform(points)
        except HullSearchError as e:
            errors.append(f"{name}: {e}")
            continue
        vertex_sets[name] = {id(p) for p in hull}
        print(f"\n{name}: {len(hull)} vertices")
        for point in hull:
            print(_format_point(point))

    if errors:
        print("\nErrors:")
        for e in errors:
            print(f"  - {e}")
        return 1

    agree = len({frozenset(v) for v in vertex_sets.values()}) == 1
    print(f"\nAlgorithms agree: {'yes' if agree else 'no'}")
    return 0


def cmd_algorithms(args) -> int:
    """List registered algorithm names."""
    from hull_search.search import ALGORITHMS

    for name, function in ALGORITHMS.items():
        doc = (function.__doc__ or "").strip().splitlines()
        print(f"{name}: {doc[0] if doc else ''}")
    return 0


def main(argv=None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging("debug" if getattr(args, "verbose", False) else "warning")

    if args.command == "compute":
        return cmd_compute(args)
    elif args.command == "compare":
        return cmd_compare(args)
    elif args.command == "algorithms":
        return cmd_algorithms(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
