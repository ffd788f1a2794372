"""
Geometric primitives shared by the hull algorithms.

The orientation of an ordered triplet (p, q, r) comes from the sign of

    (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)

A positive value is clockwise, a negative value counterclockwise and zero
collinear. Every algorithm uses this one convention.
"""

from enum import Enum


class Orientation(Enum):
    """Turn direction of an ordered point triplet."""

    COLLINEAR = "collinear"
    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"


def cross_value(p, q, r) -> float:
    """Signed turn value of (p, q, r); positive means clockwise."""
    return (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)


def orientation(p, q, r) -> Orientation:
    """Return the orientation of the ordered triplet (p, q, r)."""
    val = cross_value(p, q, r)
    if val > 0:
        return Orientation.CLOCKWISE
    if val < 0:
        return Orientation.COUNTERCLOCKWISE
    return Orientation.COLLINEAR


def squared_distance(p, q) -> float:
    """Squared Euclidean distance between p and q."""
    return (p.y - q.y) ** 2 + (p.x - q.x) ** 2


def line_distance(p1, p2, q) -> float:
    """
    Unnormalized distance of q from the line through p1 and p2.

    Equals the true perpendicular distance times ``|p2 - p1|``, so it only
    ranks points against the same line.
    """
    return abs((q.y - p1.y) * (p2.x - p1.x) - (p2.y - p1.y) * (q.x - p1.x))


_SIDES = {
    Orientation.CLOCKWISE: 1,
    Orientation.COUNTERCLOCKWISE: -1,
    Orientation.COLLINEAR: 0,
}


def find_side(p, q, r) -> int:
    """Return +1 if (p, q, r) is clockwise, -1 if counterclockwise, 0 if collinear."""
    return _SIDES[orientation(p, q, r)]
