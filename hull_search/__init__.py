__version__ = "0.1.0"
__license__ = "Apache-2.0"


from .errors import (
    HullSearchError,
    PointInputError,
    EmptyInputError,
    NotIterableError,
    TooFewPointsError,
    InconsistentPointShapeError,
    DegenerateHullError,
    UnknownAlgorithmError,
)
from .geometry import Point, Orientation, normalize_points, orientation
from .algorithms import gift_wrapping, graham_scan, quickhull
from .search import ALGORITHMS, ConvexHullSearch, compute_hull, order_by_centroid

__all__ = [
    "HullSearchError",
    "PointInputError",
    "EmptyInputError",
    "NotIterableError",
    "TooFewPointsError",
    "InconsistentPointShapeError",
    "DegenerateHullError",
    "UnknownAlgorithmError",
    "Point",
    "Orientation",
    "normalize_points",
    "orientation",
    "gift_wrapping",
    "graham_scan",
    "quickhull",
    "ALGORITHMS",
    "ConvexHullSearch",
    "compute_hull",
    "order_by_centroid",
]
