"""
Errors raised when track data cannot satisfy a builder's preconditions.

All are ValueError subclasses and are raised before any state is created.
"""

from typing import Optional


class TrackDataError(ValueError):
    """Base class for invalid or incomplete track input."""


class EmptyInputError(TrackDataError):
    """No points were supplied."""

    def __init__(self, what: str = "track"):
        super().__init__(f"Cannot build {what} from an empty point list")
        self.what = what


class MissingTimestampError(TrackDataError):
    """A point has no timestamp where one is required."""

    def __init__(self, index: int):
        super().__init__(f"Track point {index} has no timestamp")
        self.index = index


class MissingValueError(TrackDataError):
    """A point (or input table) lacks a required field."""

    def __init__(self, field: str, index: Optional[int] = None):
        if index is None:
            message = f"Track data is missing required field '{field}'"
        else:
            message = f"Track point {index} has no value for '{field}'"
        super().__init__(message)
        self.field = field
        self.index = index
