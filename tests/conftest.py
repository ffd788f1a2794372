"""
Pytest configuration and shared fixtures for hull_search tests.
"""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from hull_search.geometry.points import Point, normalize_points


@pytest.fixture
def square():
    """Four corners of a square, every one of them a hull vertex."""
    return normalize_points([(0, 0), (4, 0), (4, 4), (0, 4)])


@pytest.fixture
def square_with_diagonal_point():
    """Square corners plus a point on the diagonal, strictly inside."""
    return normalize_points([(0, 0), (1, 1), (2, 2), (0, 2), (2, 0)])


@pytest.fixture
def diamond():
    """A diamond whose leftmost vertex sits at the origin."""
    return normalize_points([(0, 0), (1, -1), (2, 0), (1, 1)])


@pytest.fixture
def hexagon_with_interior():
    """Regular hexagon around the origin with interior points mixed in."""
    angles = np.linspace(0, 2 * np.pi, 6, endpoint=False) + 0.1
    ring = [(3 * np.cos(a), 3 * np.sin(a)) for a in angles]
    interior = [(0.0, 0.0), (1.0, 0.5), (-0.5, -1.0), (0.2, 1.5)]
    mixed = [interior[0], ring[0], ring[1], interior[1], ring[2], ring[3], interior[2], ring[4], interior[3], ring[5]]
    return normalize_points(mixed)


@pytest.fixture
def random_cloud():
    """Sixty points in general position around the origin."""
    rng = np.random.default_rng(7)
    return [Point(float(x), float(y)) for x, y in rng.uniform(-10, 10, size=(60, 2))]


@pytest.fixture
def first_quadrant_cloud():
    """Random points with positive coordinates plus the origin itself."""
    rng = np.random.default_rng(11)
    cloud = [Point(float(x), float(y)) for x, y in rng.uniform(0.5, 10, size=(40, 2))]
    return [Point(0.0, 0.0)] + cloud

