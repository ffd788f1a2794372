"""
Point file loading and hull saving.

Supported inputs:
    .csv            x, y[, label] columns; header row optional
    .json           list of [x, y] pairs or {"x", "y"[, "label"]} objects,
    .yaml / .yml    either at top level or under a "points" key
    .npy            (n, 2) numeric array

Loaded items are left in their raw pair/object form; validation happens in
``normalize_points``.
"""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Union

import numpy as np
import yaml

from hull_search.geometry.points import Point

logger = logging.getLogger(__name__)

POINT_SUFFIXES = (".csv", ".json", ".yaml", ".yml", ".npy")
HULL_SUFFIXES = (".json", ".csv")


def _is_float(text: str) -> bool:
    try:
        float(text)
    except ValueError:
        return False
    return True


def _load_csv(path: Path) -> List[Any]:
    with open(path, "r", newline="") as f:
        reader = csv.reader(f)
        rows = [(reader.line_num, row) for row in reader if row]

    if not rows:
        return []

    header = None
    if not all(_is_float(cell) for cell in rows[0][1][:2]):
        header = [h.strip().lower() for h in rows[0][1]]
        rows = rows[1:]

    if header and "x" in header and "y" in header:
        ix, iy = header.index("x"), header.index("y")
        il = header.index("label") if "label" in header else None
    else:
        ix, iy, il = 0, 1, None

    width = max(ix, iy, il if il is not None else 0) + 1
    for line, row in rows:
        if len(row) < width:
            raise ValueError(f"Row {line} in {path} has too few columns")

    if il is None:
        return [(float(row[ix]), float(row[iy])) for _, row in rows]
    return [
        {"x": float(row[ix]), "y": float(row[iy]), "label": row[il] or None}
        for _, row in rows
    ]


def _from_structured(data: Any) -> List[Any]:
    if isinstance(data, dict):
        data = data.get("points", [])
    items = []
    for item in data or []:
        items.append(tuple(item) if isinstance(item, list) else item)
    return items


def load_points(path: Union[str, Path]) -> List[Any]:
    """
    Read raw point items from a file.

    Parameters
    ----------
    path : str or Path
        Point file; the format is chosen by suffix

    Returns
    -------
    list
        Pairs (tuples) or mappings, one per point

    Raises
    ------
    FileNotFoundError
        If the file doesn't exist
    ValueError
        If the suffix is not supported, an array has the wrong shape or a
        CSV row is missing columns
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Point file not found: {path}")

    suffix = path.suffix.lower()

    if suffix == ".csv":
        items = _load_csv(path)
    elif suffix == ".json":
        with open(path) as f:
            items = _from_structured(json.load(f))
    elif suffix in (".yaml", ".yml"):
        with open(path) as f:
            items = _from_structured(yaml.safe_load(f))
    elif suffix == ".npy":
        data = np.load(path)
        if data.ndim != 2 or data.shape[1] != 2:
            raise ValueError(f"Expected an (n, 2) array in {path}, got shape {data.shape}")
        items = [tuple(row) for row in data.tolist()]
    else:
        raise ValueError(f"Unknown point file format: {suffix}. Use one of {POINT_SUFFIXES}")

    logger.debug("loaded %d points from %s", len(items), path)
    return items


def save_hull(hull: Iterable[Point], path: Union[str, Path]) -> Path:
    """
    Write hull vertices as JSON ({"points": [...]}) or CSV (x, y, label).

    Returns the path written.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    vertices = list(hull)

    if suffix == ".json":
        payload = {
            "points": [
                {"x": p.x, "y": p.y, **({"label": p.label} if p.label is not None else {})}
                for p in vertices
            ]
        }
        with open(path, "w") as f:
            json.dump(payload, f, indent=2)
    elif suffix == ".csv":
        with open(path, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(["x", "y", "label"])
            for p in vertices:
                writer.writerow([p.x, p.y, "" if p.label is None else p.label])
    else:
        raise ValueError(f"Unknown hull file format: {suffix}. Use one of {HULL_SUFFIXES}")

    logger.debug("wrote %d hull vertices to %s", len(vertices), path)
    return path
