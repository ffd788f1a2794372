"""
Exception types raised by hull_search.

Input validation failures are raised by the point normalizer before any
hull algorithm runs. The algorithms themselves only raise
``DegenerateHullError`` when an input leaves them without a next vertex.
"""


class HullSearchError(Exception):
    """Base class for all hull_search errors."""


class PointInputError(HullSearchError, ValueError):
    """Raised when the point collection handed to a hull search is invalid."""


class EmptyInputError(PointInputError):
    """Points argument is None or empty."""

    def __init__(self, message: str = "Points argument is empty"):
        super().__init__(message)


class NotIterableError(PointInputError, TypeError):
    """Points argument cannot be iterated."""

    def __init__(self, message: str = "Points argument must be iterable"):
        super().__init__(message)


class TooFewPointsError(PointInputError):
    """Fewer than three points were supplied."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Points argument's size is less than 3 (got {count})")


class InconsistentPointShapeError(PointInputError):
    """Points mix shapes, or an element is neither an (x, y) object nor a pair."""

    def __init__(self, message: str = None):
        if message is None:
            message = (
                "Points argument provides items in different or incorrect format. "
                "Items must be objects with numeric x and y ({'x': number, 'y': number}) "
                "or iterables of two numbers ((number, number))"
            )
        super().__init__(message)


class DegenerateHullError(HullSearchError, ValueError):
    """An algorithm could not choose the next hull vertex."""


class UnknownAlgorithmError(HullSearchError, ValueError):
    """Requested algorithm name is not registered."""

    def __init__(self, name, valid):
        self.name = name
        self.valid = tuple(valid)
        super().__init__(f"Unknown algorithm: {name}. Valid: {self.valid}")
