"""
Hull_Search package entry point.

Allows running hull_search as a module:
    python -m hull_search compute --input points.csv
"""

from hull_search.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
