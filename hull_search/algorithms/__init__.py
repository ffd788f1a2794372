"""Convex hull algorithms."""

from .gift_wrapping import gift_wrapping, gift_wrapping_indices
from .graham_scan import graham_scan, graham_scan_indices
from .quickhull import quickhull, quickhull_indices

__all__ = [
    "gift_wrapping",
    "gift_wrapping_indices",
    "graham_scan",
    "graham_scan_indices",
    "quickhull",
    "quickhull_indices",
]
