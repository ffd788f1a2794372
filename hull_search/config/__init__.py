"""
Hull_Search Configuration Module - YAML run settings.

Example usage:
    from hull_search.config import HullConfig

    config = HullConfig.from_yaml("hull.yaml")
    hull = config.to_search().perform(points)
"""

from hull_search.config.run import HullConfig

__all__ = ["HullConfig"]
