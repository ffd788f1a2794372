"""
Unit tests for the gift wrapping algorithm.
"""

from hull_search.algorithms.gift_wrapping import (
    find_leftmost,
    gift_wrapping,
    gift_wrapping_indices,
    next_hull_index,
)
from hull_search.geometry.points import Point, normalize_points
from hull_search.geometry.primitives import Orientation, orientation


def coordinates(hull):
    return {p.as_tuple() for p in hull}


class TestGiftWrapping:
    """Tests for gift_wrapping."""

    def test_square(self, square):
        """All four corners, counterclockwise from the leftmost."""
        hull = gift_wrapping(square)

        assert [p.as_tuple() for p in hull] == [(0, 0), (4, 0), (4, 4), (0, 4)]
        assert all(any(h is p for p in square) for h in hull)

    def test_interior_diagonal_point_excluded(self, square_with_diagonal_point):
        """(1, 1) lies on the diagonal inside the square and is dropped."""
        hull = gift_wrapping(square_with_diagonal_point)

        assert [p.as_tuple() for p in hull] == [(0, 0), (2, 0), (2, 2), (0, 2)]

    def test_counterclockwise_order(self, hexagon_with_interior):
        """Every consecutive triple of the hull turns left."""
        hull = gift_wrapping(hexagon_with_interior)
        n = len(hull)

        assert n == 6
        for i in range(n):
            turn = orientation(hull[i], hull[(i + 1) % n], hull[(i + 2) % n])
            assert turn is Orientation.COUNTERCLOCKWISE

    def test_starts_at_leftmost(self, random_cloud):
        """The first vertex has the minimal x coordinate."""
        hull = gift_wrapping(random_cloud)

        assert hull[0].x == min(p.x for p in random_cloud)

    def test_idempotent(self, random_cloud):
        """Two runs give the same hull in the same order."""
        assert gift_wrapping_indices(random_cloud) == gift_wrapping_indices(random_cloud)


class TestGiftWrappingTies:
    """Tie-breaking and collinear handling."""

    def test_leftmost_tie_takes_first(self):
        """Equal x keeps the earliest point."""
        points = normalize_points([(1, 1), (0, 3), (0, 0), (2, 0)])

        assert find_leftmost(points) == 1

    def test_collinear_initial_candidate_kept(self):
        """A collinear point that is the initial candidate stays on the hull."""
        points = normalize_points([(0, 0), (2, 0), (4, 0), (4, 4), (0, 4)])

        assert next_hull_index(points, 0) == 1
        assert coordinates(gift_wrapping(points)) == {(0, 0), (2, 0), (4, 0), (4, 4), (0, 4)}

    def test_collinear_point_skipped(self):
        """A collinear point met after a better candidate is passed over."""
        points = normalize_points([(0, 0), (4, 0), (2, 0), (4, 4), (0, 4)])

        assert next_hull_index(points, 0) == 1
        assert coordinates(gift_wrapping(points)) == {(0, 0), (4, 0), (4, 4), (0, 4)}

    def test_duplicate_points_terminate(self):
        """Coincident points cannot make the walk loop forever."""
        points = [Point(0, 0), Point(0, 0), Point(2, 0), Point(0, 2)]

        hull = gift_wrapping(points)

        assert len(hull) == len({id(p) for p in hull})
        assert coordinates(hull) == {(0, 0), (2, 0), (0, 2)}
