"""
Point type and point normalization.

Hull algorithms accept points as either

    - objects with numeric ``x`` and ``y`` (``Point``, mappings with
      ``"x"``/``"y"`` keys, or any object with ``x``/``y`` attributes), or
    - pairs of numbers (tuples, lists, numpy rows).

``normalize_points`` validates a collection and converts it into a list of
``Point`` instances. The two forms cannot be mixed within one collection.

Points compare and hash by identity: two coordinate-identical entries in
the input stay two distinct points all the way through a hull search.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Hashable, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from hull_search.errors import (
    EmptyInputError,
    InconsistentPointShapeError,
    NotIterableError,
    TooFewPointsError,
)

MIN_POINTS = 3


@dataclass(frozen=True, eq=False)
class Point:
    """
    Two-dimensional point.

    Attributes
    ----------
    x : float
        Abscissa
    y : float
        Ordinate
    label : hashable or None
        Optional caller-supplied tag carried through untouched
    """

    x: float
    y: float
    label: Optional[Hashable] = None

    def as_tuple(self) -> tuple:
        """Return the coordinates as an ``(x, y)`` tuple."""
        return (self.x, self.y)


class PointMode(Enum):
    """Shape of a single point (or of a whole collection) in the input."""

    OBJECT = "object"
    PAIR = "pair"
    ERROR = "error"


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def _is_iterable(value: Any) -> bool:
    try:
        iter(value)
    except TypeError:
        return False
    return True


def _is_object_point(item: Any) -> bool:
    if isinstance(item, Point):
        return True
    if isinstance(item, Mapping):
        return _is_number(item.get("x")) and _is_number(item.get("y"))
    return _is_number(getattr(item, "x", None)) and _is_number(getattr(item, "y", None))


def _is_pair_candidate(item: Any) -> bool:
    return (
        not isinstance(item, (str, bytes, Mapping))
        and _is_iterable(item)
    )


def detect_point_mode(item: Any) -> PointMode:
    """
    Classify a single input element.

    Object form is checked first, so an object that exposes ``x``/``y``
    and also happens to be iterable counts as an object.
    """
    if _is_object_point(item):
        return PointMode.OBJECT
    if _is_pair_candidate(item):
        values = tuple(item)
        if len(values) == 2 and all(_is_number(v) for v in values):
            return PointMode.PAIR
    return PointMode.ERROR


def determine_points_mode(items: Iterable[Any]) -> PointMode:
    """
    Return the common mode of all elements, or ``PointMode.ERROR`` when the
    elements disagree or any of them is malformed.
    """
    modes = {detect_point_mode(item) for item in items}
    if len(modes) == 1:
        return modes.pop()
    return PointMode.ERROR


def _object_to_point(item: Any) -> Point:
    if isinstance(item, Point):
        return item
    if isinstance(item, Mapping):
        return Point(float(item["x"]), float(item["y"]), item.get("label"))
    return Point(float(item.x), float(item.y), getattr(item, "label", None))


def _pair_to_point(item: Sequence) -> Point:
    x, y = item
    return Point(float(x), float(y))


def normalize_points(points: Any) -> List[Point]:
    """
    Validate a point collection and convert it to a list of ``Point``.

    See ``normalize_points_with_sources`` for the caller's original objects.

    Parameters
    ----------
    points : iterable
        Objects with numeric ``x``/``y`` or pairs of numbers

    Returns
    -------
    list[Point]
        One ``Point`` per input element, in input order. ``Point`` inputs
        are returned as the same objects.

    Raises
    ------
    EmptyInputError
        If ``points`` is None or empty
    NotIterableError
        If ``points`` cannot be iterated (strings are rejected too)
    TooFewPointsError
        If fewer than three elements are given
    InconsistentPointShapeError
        If elements mix forms, are malformed, or have non-finite coordinates
    """
    return normalize_points_with_sources(points)[0]


def normalize_points_with_sources(points: Any) -> Tuple[List[Point], List[Any]]:
    """
    Like ``normalize_points``, but also return what each ``Point`` stands for.

    In object mode the second list holds the caller's own elements (dicts,
    attribute objects or ``Point`` instances), position by position. Pair
    mode has no caller object to keep, so the new ``Point`` is its own
    source.
    """
    if points is None:
        raise EmptyInputError()
    if isinstance(points, (str, bytes)) or not _is_iterable(points):
        raise NotIterableError()

    # Iterable elements are frozen so that generators are only consumed once
    items = [
        item if _is_object_point(item) or not _is_pair_candidate(item) else tuple(item)
        for item in points
    ]

    if not items:
        raise EmptyInputError()
    if len(items) < MIN_POINTS:
        raise TooFewPointsError(len(items))

    mode = determine_points_mode(items)
    if mode is PointMode.OBJECT:
        result = [_object_to_point(item) for item in items]
        sources = items
    elif mode is PointMode.PAIR:
        result = [_pair_to_point(item) for item in items]
        sources = result
    else:
        raise InconsistentPointShapeError()

    for index, point in enumerate(result):
        if not (math.isfinite(point.x) and math.isfinite(point.y)):
            raise InconsistentPointShapeError(
                f"Point {index} has non-finite coordinates ({point.x}, {point.y})"
            )

    return result, sources


def points_to_array(points: Iterable[Point]) -> np.ndarray:
    """Stack points into an ``(n, 2)`` float array."""
    return np.array([[p.x, p.y] for p in points], dtype=float).reshape(-1, 2)
