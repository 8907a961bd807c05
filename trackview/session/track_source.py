"""
Track source adapter.

Validates in-memory track rows at the import boundary and turns them into
TrackPoint lists for the viewport and series builders. Accepts plain record
dicts or a pandas DataFrame with discoverable column names.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Iterable, List, Mapping, Optional

import pandas as pd
from pydantic import BaseModel, Field

from ..utils.dataframe_helpers import KNOWN_COLUMNS, find_column_name, optional_float
from .exceptions import EmptyInputError, MissingValueError
from .models import TrackPoint

logger = logging.getLogger(__name__)


class TrackPointRecord(BaseModel):
    """Raw track row as supplied by a track source."""
    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)
    elevation: Optional[float] = None
    time: Optional[datetime] = None
    speed: Optional[float] = Field(default=None, ge=0.0)

    def to_point(self) -> TrackPoint:
        return TrackPoint(
            lat=self.lat,
            lon=self.lon,
            elevation=self.elevation,
            time=_as_utc(self.time),
            speed=self.speed,
        )


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive datetimes are taken as UTC; aware ones are converted to UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def points_from_records(records: Iterable[Mapping[str, Any]]) -> List[TrackPoint]:
    """
    Validate raw records and convert them to TrackPoints, preserving order.

    Raises:
        EmptyInputError: If no records are supplied.
        pydantic.ValidationError: If a record has out-of-range or malformed fields.
    """
    points = [TrackPointRecord(**record).to_point() for record in records]
    if not points:
        raise EmptyInputError("track")
    return points


def points_from_dataframe(
    df: pd.DataFrame,
    segment_column: Optional[str] = None,
) -> List[TrackPoint]:
    """
    Convert a track DataFrame to TrackPoints.

    Only the first segment is used when the frame carries a segment column;
    remaining segments are dropped with a warning.

    Args:
        df: One row per point. Latitude and longitude columns are required;
            elevation, time and speed are picked up when present.
        segment_column: Name of the segment id column. Discovered from
            KNOWN_COLUMNS when not given.

    Returns:
        Points of the first segment in row order.

    Raises:
        EmptyInputError: If the frame has no rows.
        MissingValueError: If latitude or longitude columns are missing.
    """
    if df is None or len(df) == 0:
        raise EmptyInputError("track")

    lat_col = find_column_name(df, KNOWN_COLUMNS["latitude"])
    if lat_col is None:
        raise MissingValueError("latitude")
    lon_col = find_column_name(df, KNOWN_COLUMNS["longitude"])
    if lon_col is None:
        raise MissingValueError("longitude")

    df = _first_segment(df, segment_column or find_column_name(df, KNOWN_COLUMNS["segment"]))

    ele_col = find_column_name(df, KNOWN_COLUMNS["elevation"])
    time_col = find_column_name(df, KNOWN_COLUMNS["time"])
    speed_col = find_column_name(df, KNOWN_COLUMNS["speed"])

    times = pd.to_datetime(df[time_col], utc=True) if time_col else None

    records = []
    for i in range(len(df)):
        record = {
            "lat": df[lat_col].iloc[i],
            "lon": df[lon_col].iloc[i],
            "elevation": optional_float(df[ele_col].iloc[i]) if ele_col else None,
            "speed": optional_float(df[speed_col].iloc[i]) if speed_col else None,
            "time": None,
        }
        if times is not None and not pd.isna(times.iloc[i]):
            record["time"] = times.iloc[i].to_pydatetime()
        records.append(record)

    return points_from_records(records)


def _first_segment(df: pd.DataFrame, segment_column: Optional[str]) -> pd.DataFrame:
    if segment_column is None or segment_column not in df.columns:
        return df

    first = df[segment_column].iloc[0]
    mask = df[segment_column] == first
    dropped = df.loc[~mask, segment_column].nunique()
    if dropped:
        logger.warning(
            "Using first segment %s only; dropping %d other segment(s) (%d points)",
            first, dropped, int((~mask).sum()),
        )
    return df.loc[mask]
