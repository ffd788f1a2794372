"""
Algorithm selection.

``ConvexHullSearch`` validates and normalizes the input once, then hands
it to one of the registered algorithms:

    >>> search = ConvexHullSearch("quick-hull", order="centroid")
    >>> hull = search.perform([(0, 0), (4, 0), (4, 4), (0, 4), (2, 2)])

Gift wrapping and Graham scan return their vertices counterclockwise;
QuickHull's vertices carry no order. ``order="centroid"`` sorts any
algorithm's output counterclockwise around the hull centroid so that all
three can be consumed the same way.

The vertices returned are the caller's own objects: dicts and attribute
objects come back as given, pairs come back as ``Point`` instances.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, Dict, Iterable, List, Optional

from hull_search.algorithms import gift_wrapping, graham_scan, quickhull
from hull_search.errors import UnknownAlgorithmError
from hull_search.geometry.points import Point, normalize_points_with_sources

logger = logging.getLogger(__name__)

ALGORITHMS: Dict[str, Callable[..., Any]] = {
    "gift-wrapping": gift_wrapping,
    "graham-scan": graham_scan,
    "quick-hull": quickhull,
}

_ALIASES = {
    "gift_wrapping": "gift-wrapping",
    "jarvis": "gift-wrapping",
    "graham_scan": "graham-scan",
    "quickhull": "quick-hull",
    "quick_hull": "quick-hull",
}

ORDERS = (None, "centroid")


def resolve_algorithm(name: str) -> str:
    """Return the registered name for ``name`` or its alias."""
    key = _ALIASES.get(name, name)
    if key not in ALGORITHMS:
        raise UnknownAlgorithmError(name, ALGORITHMS)
    return key


def order_by_centroid(hull: Iterable[Point]) -> List[Point]:
    """
    Sort hull vertices counterclockwise by angle around their centroid.

    The first vertex is the one with the smallest angle in (-pi, pi]; ties
    keep their incoming order.
    """
    vertices = list(hull)
    if not vertices:
        return vertices
    cx = sum(p.x for p in vertices) / len(vertices)
    cy = sum(p.y for p in vertices) / len(vertices)
    return sorted(vertices, key=lambda p: math.atan2(p.y - cy, p.x - cx))


class ConvexHullSearch:
    """
    Convex hull search using one named algorithm.

    Parameters
    ----------
    algorithm : str
        "gift-wrapping", "graham-scan" or "quick-hull"
    order : str or None
        None keeps the algorithm's own output; "centroid" applies
        ``order_by_centroid``
    angle_reference : str
        Passed to Graham scan ("origin" or "anchor"); ignored otherwise
    """

    def __init__(
        self,
        algorithm: str = "gift-wrapping",
        order: Optional[str] = None,
        angle_reference: str = "origin",
    ):
        self.algorithm = resolve_algorithm(algorithm)
        if order not in ORDERS:
            raise ValueError(f"Unknown order: {order}. Valid: {ORDERS}")
        self.order = order
        self.angle_reference = angle_reference

    def __repr__(self) -> str:
        return (
            f"ConvexHullSearch(algorithm={self.algorithm!r}, order={self.order!r}, "
            f"angle_reference={self.angle_reference!r})"
        )

    def _run(self, points: List[Point]):
        function = ALGORITHMS[self.algorithm]
        if self.algorithm == "graham-scan":
            return function(points, angle_reference=self.angle_reference)
        return function(points)

    def perform(self, points: Any) -> List[Any]:
        """
        Compute the convex hull of ``points``.

        Parameters
        ----------
        points : iterable
            Objects with numeric ``x``/``y`` or pairs of numbers

        Returns
        -------
        list
            Hull vertices, each one the caller's element (a ``Point`` for pair
            input). Order follows the algorithm unless ``order`` is set.

        Raises
        ------
        PointInputError
            If the input fails validation; no algorithm is run
        DegenerateHullError
            If the algorithm cannot close the hull
        """
        normalized, sources = normalize_points_with_sources(points)
        hull = self._run(normalized)
        if self.order == "centroid":
            result = order_by_centroid(hull)
        else:
            result = list(hull)
        source_of = {id(point): source for point, source in zip(normalized, sources)}
        result = [source_of[id(point)] for point in result]
        logger.info(
            "%s: %d points -> %d hull vertices", self.algorithm, len(normalized), len(result)
        )
        return result


def compute_hull(points: Any, algorithm: str = "gift-wrapping", **options) -> List[Any]:
    """One-shot ``ConvexHullSearch(algorithm, **options).perform(points)``."""
    return ConvexHullSearch(algorithm, **options).perform(points)
