"""
Per-track metrics: distances, derived speed, and channel extraction.

Feeds the series builder with (timestamp, value) samples and the viewport
with coordinate ranges.
"""

from dataclasses import replace
from datetime import datetime
from typing import List, Sequence, Tuple

import numpy as np

from ..session.exceptions import EmptyInputError, MissingTimestampError, MissingValueError
from ..session.models import SeriesMetric, TrackPoint

EARTH_RADIUS_M = 6371000


def haversine_distance(lat1, lon1, lat2, lon2):
    """
    Great-circle distance in meters using the Haversine formula.

    Works with scalar or numpy array inputs.
    """
    lat1_rad = np.radians(lat1)
    lat2_rad = np.radians(lat2)
    delta_lat = np.radians(np.subtract(lat2, lat1))
    delta_lon = np.radians(np.subtract(lon2, lon1))

    a = np.sin(delta_lat / 2) ** 2 + np.cos(lat1_rad) * np.cos(lat2_rad) * np.sin(delta_lon / 2) ** 2
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def decorate_speed(points: Sequence[TrackPoint], keep_existing: bool = False) -> List[TrackPoint]:
    """
    Return copies of the points with speed (m/s) derived from position and time.

    The first point gets 0.0. A point whose own or predecessor's timestamp is
    missing, or whose elapsed time is not positive, also gets 0.0. With
    keep_existing, points that already carry a speed are left as they are.
    """
    if not points:
        return []

    lats = np.array([p.lat for p in points], dtype=float)
    lons = np.array([p.lon for p in points], dtype=float)
    distances = haversine_distance(lats[:-1], lons[:-1], lats[1:], lons[1:])

    decorated = []
    for i, point in enumerate(points):
        if keep_existing and point.speed is not None:
            decorated.append(point)
            continue
        speed = 0.0
        if i > 0:
            prev_time, time = points[i - 1].time, point.time
            if prev_time is not None and time is not None:
                elapsed = (time - prev_time).total_seconds()
                if elapsed > 0:
                    speed = float(distances[i - 1]) / elapsed
        decorated.append(replace(point, speed=speed))
    return decorated


def total_distance(points: Sequence[TrackPoint]) -> float:
    """Track length in meters."""
    if len(points) < 2:
        return 0.0
    lats = np.array([p.lat for p in points], dtype=float)
    lons = np.array([p.lon for p in points], dtype=float)
    return float(np.sum(haversine_distance(lats[:-1], lons[:-1], lats[1:], lons[1:])))


def get_speed(points: Sequence[TrackPoint]) -> List[float]:
    speeds = []
    for i, p in enumerate(points):
        if p.speed is None:
            raise MissingValueError("speed", i)
        speeds.append(p.speed)
    return speeds


def get_elevation(points: Sequence[TrackPoint]) -> List[float]:
    elevations = []
    for i, p in enumerate(points):
        if p.elevation is None:
            raise MissingValueError("elevation", i)
        elevations.append(p.elevation)
    return elevations


def get_time(points: Sequence[TrackPoint]) -> List[datetime]:
    times = []
    for i, p in enumerate(points):
        if p.time is None:
            raise MissingTimestampError(i)
        times.append(p.time)
    return times


def get_range_latitude(points: Sequence[TrackPoint]) -> Tuple[float, float]:
    """(min, max) latitude of the track."""
    if not points:
        raise EmptyInputError("latitude range")
    lats = np.array([p.lat for p in points], dtype=float)
    return float(lats.min()), float(lats.max())


def get_range_longitude(points: Sequence[TrackPoint]) -> Tuple[float, float]:
    """(min, max) longitude of the track."""
    if not points:
        raise EmptyInputError("longitude range")
    lons = np.array([p.lon for p in points], dtype=float)
    return float(lons.min()), float(lons.max())


def metric_samples(
    points: Sequence[TrackPoint],
    metric: SeriesMetric,
) -> List[Tuple[datetime, float]]:
    """
    Pair each point's timestamp with the chosen metric value.

    Raises:
        EmptyInputError: If points is empty.
        MissingTimestampError: If a point has no timestamp.
        MissingValueError: If a point has no value for the metric.
    """
    if not points:
        raise EmptyInputError("time series")

    metric = SeriesMetric(metric)
    times = get_time(points)
    if metric == SeriesMetric.SPEED:
        values = get_speed(points)
    else:
        values = get_elevation(points)
    return list(zip(times, values))

