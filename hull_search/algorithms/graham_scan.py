"""
Graham scan.

The hull starts at the anchor, the lexicographically smallest point
(minimal x, then minimal y). The second vertex is picked by polar angle and
each further vertex is the remaining point that turns least away from the
direction of the last hull edge. The walk ends when it returns to the
anchor. This variant does not sort; it is O(n^2).

By default the polar angle of a candidate is measured from the coordinate
origin, not from the anchor, and only points to the right of the anchor
with a non-negative angle qualify. That choice matches the established
behaviour of this scan but is only reliable for point sets that surround
the origin. ``angle_reference="anchor"`` measures angles from the anchor
instead and takes the smallest one, which is correct for any input.
"""

import logging
import math
import sys
from typing import List, Optional, Sequence

from hull_search.errors import DegenerateHullError
from hull_search.geometry.points import Point

logger = logging.getLogger(__name__)

ANGLE_REFERENCES = ("origin", "anchor")


def polar_angle(point: Point, reference: Optional[Point] = None) -> float:
    """Polar angle of ``point`` in degrees, around ``reference`` or the origin."""
    if reference is None:
        return math.degrees(math.atan2(point.y, point.x))
    return math.degrees(math.atan2(point.y - reference.y, point.x - reference.x))


def turn_cosine(a: Point, b: Point, c: Point) -> float:
    """
    Negated cosine of the angle between AB and BC.

    -1 means C continues straight on from AB, +1 means C doubles back.
    NaN when either segment has zero length.
    """
    x_ab = b.x - a.x
    y_ab = b.y - a.y
    x_bc = c.x - b.x
    y_bc = c.y - b.y
    scalar_product = x_ab * x_bc + y_ab * y_bc
    module = math.sqrt(x_ab * x_ab + y_ab * y_ab) * math.sqrt(x_bc * x_bc + y_bc * y_bc)
    if module == 0:
        return math.nan
    return -scalar_product / module


def find_anchor(points: Sequence[Point]) -> int:
    """Index of the leftmost point, lowest among ties."""
    first = 0
    for i, point in enumerate(points):
        best = points[first]
        if point.x < best.x or (point.x == best.x and point.y < best.y):
            first = i
    return first


def find_second(points: Sequence[Point], anchor: int, angle_reference: str = "origin") -> Optional[int]:
    """Index of the second hull vertex, or None when no point qualifies."""
    first = points[anchor]
    min_angle = sys.float_info.max
    second = None

    for i, point in enumerate(points):
        if i == anchor:
            continue
        if angle_reference == "origin":
            angle = polar_angle(point)
            if point.x > first.x and 0 <= angle < min_angle:
                min_angle = angle
                second = i
        else:
            if point.x == first.x and point.y == first.y:
                continue
            angle = polar_angle(point, first)
            if angle < min_angle:
                min_angle = angle
                second = i

    return second


def next_hull_index(points: Sequence[Point], hull: List[int], on_hull: set) -> Optional[int]:
    """
    Index of the point minimizing the turn cosine after the last hull edge.

    Points already on the hull are skipped, except the anchor, which closes
    the walk.
    """
    a = points[hull[-2]]
    b = points[hull[-1]]
    min_cos = sys.float_info.max
    best = None

    for i, point in enumerate(points):
        if i in on_hull and i != hull[0]:
            continue
        cos = turn_cosine(a, b, point)
        if cos < min_cos:
            min_cos = cos
            best = i

    return best


def graham_scan_indices(points: Sequence[Point], angle_reference: str = "origin") -> List[int]:
    """
    Compute the hull as indices into ``points``, counterclockwise from the
    anchor.

    Raises
    ------
    ValueError
        If ``angle_reference`` is not "origin" or "anchor"
    DegenerateHullError
        If no second vertex qualifies or the walk cannot continue
    """
    if angle_reference not in ANGLE_REFERENCES:
        raise ValueError(f"Unknown angle reference: {angle_reference}. Valid: {ANGLE_REFERENCES}")

    anchor = find_anchor(points)
    second = find_second(points, anchor, angle_reference)
    if second is None:
        raise DegenerateHullError(
            f"Graham scan found no second hull point for anchor "
            f"({points[anchor].x}, {points[anchor].y}) with angle_reference={angle_reference!r}"
        )

    hull = [anchor, second]
    on_hull = {anchor, second}

    while True:
        nxt = next_hull_index(points, hull, on_hull)
        if nxt is None:
            raise DegenerateHullError(
                f"Graham scan could not extend the hull past {len(hull)} vertices"
            )
        if nxt == anchor:
            break
        hull.append(nxt)
        on_hull.add(nxt)

    logger.debug(
        "graham scan (%s): %d points -> %d hull vertices",
        angle_reference, len(points), len(hull),
    )
    return hull


def graham_scan(points: Sequence[Point], angle_reference: str = "origin") -> List[Point]:
    """
    Convex hull by Graham scan.

    Parameters
    ----------
    points : sequence of Point
        Normalized input, at least three points
    angle_reference : str
        "origin" (default) or "anchor"; see the module docstring

    Returns
    -------
    list[Point]
        Hull vertices in counterclockwise order starting at the anchor
    """
    return [points[i] for i in graham_scan_indices(points, angle_reference)]
