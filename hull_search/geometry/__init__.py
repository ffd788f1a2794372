"""
Geometric building blocks: the Point type, input normalization and the
orientation/distance primitives used by every hull algorithm.
"""

from .points import (
    Point,
    PointMode,
    detect_point_mode,
    determine_points_mode,
    normalize_points,
    normalize_points_with_sources,
    points_to_array,
)
from .primitives import (
    Orientation,
    cross_value,
    orientation,
    squared_distance,
    line_distance,
    find_side,
)

__all__ = [
    "Point",
    "PointMode",
    "detect_point_mode",
    "determine_points_mode",
    "normalize_points",
    "normalize_points_with_sources",
    "points_to_array",
    "Orientation",
    "cross_value",
    "orientation",
    "squared_distance",
    "line_distance",
    "find_side",
]
