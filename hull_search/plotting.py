"""Drawing point sets and their convex hulls with matplotlib."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from hull_search.geometry.points import points_to_array
from hull_search.search import order_by_centroid


def plot_hull(points, hull, ax=None, title=None):
    """
    Plot input points, hull vertices and the closed hull polygon.

    Args:
        points: sequence of Point (the full input)
        hull: iterable of Point returned by any algorithm
        ax: matplotlib Axes to draw into (a new figure is created if None)
        title: optional axes title

    Returns:
        matplotlib Axes
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    cloud = points_to_array(points)
    vertices = points_to_array(order_by_centroid(hull))
    polygon = np.vstack([vertices, vertices[:1]])

    ax.scatter(cloud[:, 0], cloud[:, 1], s=12, c='0.5', label='points')
    ax.plot(polygon[:, 0], polygon[:, 1], 'g-', label='hull')
    ax.scatter(vertices[:, 0], vertices[:, 1], s=30, c='g', zorder=3)
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.set_aspect('equal', adjustable='datalim')
    ax.legend(loc='best')
    if title:
        ax.set_title(title)
    return ax


def save_hull_plot(points, hull, path, title=None):
    """Render ``plot_hull`` into an image file and return its path."""
    path = Path(path)
    fig, ax = plt.subplots(figsize=(6, 6))
    plot_hull(points, hull, ax=ax, title=title)
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    return path
