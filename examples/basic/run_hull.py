#!/usr/bin/env python3
"""
Example: Computing convex hulls with each algorithm.

This script demonstrates the workflow:
1. Load the run configuration and point file
2. Run gift wrapping, Graham scan and QuickHull on the same points
3. Print each hull and save a plot of the configured one

Usage:
    python run_hull.py
"""

from pathlib import Path

from hull_search import ALGORITHMS, ConvexHullSearch, normalize_points
from hull_search.config import HullConfig
from hull_search.io import load_points, save_hull
from hull_search.logger import configure_logging

# Path setup
SCRIPT_DIR = Path(__file__).parent
CONFIG_FILE = SCRIPT_DIR / "hull.yaml"


def main():
    configure_logging("info")

    config = HullConfig.from_yaml(CONFIG_FILE)
    points = normalize_points(load_points(config.resolve(config.input)))
    print(f"Loaded {len(points)} points from {config.input}")

    for name in ALGORITHMS:
        hull = ConvexHullSearch(name, order="centroid", angle_reference="anchor").perform(points)
        print(f"\n{name}:")
        for p in hull:
            print(f"  ({p.x:g}, {p.y:g})")

    hull = config.to_search().perform(points)
    print(f"\nSaved hull to {save_hull(hull, config.resolve(config.output))}")

    if config.plot:
        from hull_search.plotting import save_hull_plot

        print(f"Saved plot to {save_hull_plot(points, hull, config.resolve(config.plot))}")


if __name__ == "__main__":
    main()
