"""
Hull Run Configuration Parser.

This module defines the YAML schema for a convex hull run: which
algorithm to use, how to order the result and where points come from and
go to.

Example YAML format:
    hull:
      algorithm: quick-hull      # gift-wrapping | graham-scan | quick-hull
      order: centroid            # omit to keep the algorithm's own order
      angle_reference: origin    # Graham scan only: origin | anchor

    input:
      path: "points.csv"         # CSV, JSON, YAML or NPY

    output:
      path: "hull.json"          # JSON or CSV
      plot: "hull.png"           # optional figure
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from hull_search.algorithms.graham_scan import ANGLE_REFERENCES
from hull_search.search import ORDERS, ConvexHullSearch, resolve_algorithm


@dataclass
class HullConfig:
    """
    Settings for one hull computation.

    Attributes
    ----------
    algorithm : str
        Registered algorithm name (aliases are resolved)
    order : str or None
        None or "centroid"
    angle_reference : str
        Graham scan angle reference: "origin" or "anchor"
    input : str or None
        Point file to read
    output : str or None
        File to write hull vertices to
    plot : str or None
        Image file to render the hull into
    base_path : Path or None
        Directory that relative paths are resolved against
    """

    algorithm: str = "gift-wrapping"
    order: Optional[str] = None
    angle_reference: str = "origin"
    input: Optional[str] = None
    output: Optional[str] = None
    plot: Optional[str] = None
    base_path: Optional[Path] = None

    def __post_init__(self):
        self.algorithm = resolve_algorithm(self.algorithm)
        if self.order not in ORDERS:
            raise ValueError(f"Unknown order: {self.order}. Valid: {ORDERS}")
        if self.angle_reference not in ANGLE_REFERENCES:
            raise ValueError(
                f"Unknown angle reference: {self.angle_reference}. Valid: {ANGLE_REFERENCES}"
            )

    def resolve(self, path: Optional[str]) -> Optional[Path]:
        """Resolve a configured path against ``base_path``."""
        if path is None:
            return None
        resolved = Path(path)
        if self.base_path and not resolved.is_absolute():
            resolved = self.base_path / resolved
        return resolved

    def to_search(self) -> ConvexHullSearch:
        """Build the configured ``ConvexHullSearch``."""
        return ConvexHullSearch(
            self.algorithm, order=self.order, angle_reference=self.angle_reference
        )

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "HullConfig":
        """
        Load a run configuration from a YAML file.

        Relative input/output paths are resolved against the file's directory.

        Raises
        ------
        FileNotFoundError
            If the file doesn't exist
        ValueError
            If a setting is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {}, base_path=path.parent)

    @classmethod
    def from_yaml_str(cls, yaml_str: str) -> "HullConfig":
        """Load from a YAML string."""
        data = yaml.safe_load(yaml_str)
        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base_path: Optional[Path] = None) -> "HullConfig":
        """
        Create HullConfig from a parsed dictionary.

        Both the sectioned layout shown in the module docstring and a flat
        mapping of field names are accepted.
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"Run configuration must be a mapping, got {type(data).__name__}"
            )

        hull = data.get("hull", data)
        if not isinstance(hull, dict):
            raise ValueError(f"hull section must be a mapping, got {type(hull).__name__}")
        input_section = data.get("input") or {}
        output_section = data.get("output") or {}

        if not isinstance(input_section, dict):
            input_section = {"path": input_section}
        if not isinstance(output_section, dict):
            output_section = {"path": output_section}

        return cls(
            algorithm=hull.get("algorithm", "gift-wrapping"),
            order=hull.get("order"),
            angle_reference=hull.get("angle_reference", "origin"),
            input=input_section.get("path"),
            output=output_section.get("path"),
            plot=output_section.get("plot", data.get("plot")),
            base_path=base_path,
        )
