"""
QuickHull.

1) Take the points with minimum and maximum x. The line through them
   splits the set in two; each side is handled separately.
2) On one side, find the point P farthest from the line. Points inside the
   triangle formed by P and the two endpoints cannot be on the hull.
3) Repeat on the two outer edges of that triangle until no point lies
   beyond an edge; the edge endpoints are then hull vertices.

The sub-problems run from an explicit stack in the same depth-first order
as the textbook recursion, so deep inputs cannot exhaust the call stack.
The result is a set: no order is implied.
"""

import logging
from typing import FrozenSet, List, Sequence

from hull_search.geometry.points import Point
from hull_search.geometry.primitives import find_side, line_distance

logger = logging.getLogger(__name__)


def extreme_x_indices(points: Sequence[Point]):
    """Indices of the first minimum-x and first maximum-x points."""
    min_x = max_x = 0
    for i, point in enumerate(points):
        if point.x < points[min_x].x:
            min_x = i
        if point.x > points[max_x].x:
            max_x = i
    return min_x, max_x


def farthest_on_side(points: Sequence[Point], p1: int, p2: int, side: int):
    """
    Index of the point on ``side`` of line p1 -> p2 farthest from it, or None.

    Collinear points never qualify; ties keep the earliest point.
    """
    a, b = points[p1], points[p2]
    best = None
    best_distance = 0
    for i, point in enumerate(points):
        distance = line_distance(a, b, point)
        if find_side(a, b, point) == side and distance > best_distance:
            best = i
            best_distance = distance
    return best


def quickhull_indices(points: Sequence[Point]) -> List[int]:
    """Hull vertex indices, without duplicates, in discovery order."""
    min_x, max_x = extreme_x_indices(points)
    hull = {}
    # Each task is (p1, p2, side); popped last-in first-out
    stack = [(min_x, max_x, -1), (min_x, max_x, 1)]
    steps = 0

    while stack:
        p1, p2, side = stack.pop()
        steps += 1
        far = farthest_on_side(points, p1, p2, side)
        if far is None:
            hull.setdefault(p1, None)
            hull.setdefault(p2, None)
            continue
        stack.append((far, p2, -find_side(points[far], points[p2], points[p1])))
        stack.append((far, p1, -find_side(points[far], points[p1], points[p2])))

    logger.debug("quickhull: %d points -> %d hull vertices in %d steps", len(points), len(hull), steps)
    return list(hull)


def quickhull(points: Sequence[Point]) -> FrozenSet[Point]:
    """
    Convex hull by QuickHull.

    Parameters
    ----------
    points : sequence of Point
        Normalized input, at least three points

    Returns
    -------
    frozenset[Point]
        Hull vertices, unordered
    """
    return frozenset(points[i] for i in quickhull_indices(points))
