"""
Track session data: models, errors, and the track source adapter.
"""

from .exceptions import EmptyInputError, MissingTimestampError, MissingValueError, TrackDataError
from .models import BoundingBox, Direction, PanSpanPolicy, PanState, SeriesMetric, TimeSeries, TrackPoint

__all__ = [
    "BoundingBox",
    "Direction",
    "PanSpanPolicy",
    "PanState",
    "SeriesMetric",
    "TimeSeries",
    "TrackPoint",
    "TrackDataError",
    "EmptyInputError",
    "MissingTimestampError",
    "MissingValueError",
]
