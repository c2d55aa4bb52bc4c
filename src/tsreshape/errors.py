"""Errors raised when wide/long table invariants are violated"""


class ShapeError(ValueError):
    """Table is not rectangular, or its keys are duplicated or missing."""
