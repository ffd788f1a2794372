"""Reading point files and writing hulls."""

from .loader import load_points, save_hull

__all__ = ["load_points", "save_hull"]
