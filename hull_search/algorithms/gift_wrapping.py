"""
Gift wrapping (Jarvis march).

1) Start at the leftmost point.
2) Until we come back to it:
   a) the next point q is the one for which (p, q, r) is not
      counterclockwise for any other point r,
   b) append p to the hull and continue from q.

The candidate for q only changes on a strictly counterclockwise finding,
so collinear points are passed over unless one of them is the initial
candidate. Runs in O(n * h) for h hull vertices.
"""

import logging
from typing import List, Sequence

from hull_search.geometry.points import Point
from hull_search.geometry.primitives import Orientation, orientation

logger = logging.getLogger(__name__)


def find_leftmost(points: Sequence[Point]) -> int:
    """Index of the point with minimal x; ties go to the first occurrence."""
    leftmost = 0
    for i, point in enumerate(points):
        if point.x < points[leftmost].x:
            leftmost = i
    return leftmost


def next_hull_index(points: Sequence[Point], current: int) -> int:
    """
    Return the index of the hull vertex following ``current``.

    The scan starts from the point after ``current`` in input order and
    replaces the candidate whenever a point lies counterclockwise of it.
    """
    origin = points[current]
    candidate = (current + 1) % len(points)
    for i, point in enumerate(points):
        if orientation(origin, point, points[candidate]) is Orientation.COUNTERCLOCKWISE:
            candidate = i
    return candidate


def gift_wrapping_indices(points: Sequence[Point]) -> List[int]:
    """
    Compute the hull as indices into ``points``, counterclockwise from the
    leftmost point.
    """
    start = find_leftmost(points)
    hull = []
    on_hull = set()
    current = start

    while True:
        hull.append(current)
        on_hull.add(current)
        current = next_hull_index(points, current)
        if current == start:
            break
        if current in on_hull:
            # Only reachable with coincident points; the walk would cycle forever
            logger.debug("gift wrapping revisited point %d, stopping", current)
            break

    logger.debug("gift wrapping: %d points -> %d hull vertices", len(points), len(hull))
    return hull


def gift_wrapping(points: Sequence[Point]) -> List[Point]:
    """
    Convex hull by gift wrapping.

    Parameters
    ----------
    points : sequence of Point
        Normalized input, at least three points

    Returns
    -------
    list[Point]
        Hull vertices in counterclockwise order starting at the leftmost point
    """
    return [points[i] for i in gift_wrapping_indices(points)]
