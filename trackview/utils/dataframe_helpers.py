"""
Shared DataFrame utilities for track data.

- KNOWN_COLUMNS: Standard column name candidates for track channels
- find_column_name(): Column discovery with case-insensitive matching
- optional_float(): NaN/None guard for per-row values
"""

from typing import Dict, List, Optional

import pandas as pd


# --- Constants ---

KNOWN_COLUMNS: Dict[str, List[str]] = {
    "latitude": ["GPS Latitude", "latitude", "Latitude", "gps_lat", "lat"],
    "longitude": ["GPS Longitude", "longitude", "Longitude", "gps_lon", "lon", "lng"],
    "elevation": ["elevation", "Elevation", "GPS Altitude", "altitude", "ele", "alt"],
    "time": ["time", "Time", "timestamp", "Timestamp"],
    "speed": ["GPS Speed", "speed", "Speed", "gps_speed"],
    "segment": ["segment", "Segment", "segment_id", "segment_index"],
}
"""Standard column name candidates for common track channels."""


# --- Column Discovery ---

def find_column_name(df: pd.DataFrame, candidates: List[str]) -> Optional[str]:
    """
    Find a column name by trying multiple candidates.

    Search order is exact match, then case-insensitive exact match.
    Partial matches are not accepted: "lat" must not pick up "lat_acc".

    Args:
        df: DataFrame to search
        candidates: List of candidate column names, in priority order

    Returns:
        Matching column name, or None if not found
    """
    for name in candidates:
        if name in df.columns:
            return name

    columns_lower = {str(c).lower(): c for c in df.columns}
    for name in candidates:
        actual = columns_lower.get(name.lower())
        if actual is not None:
            return actual

    return None


def optional_float(value) -> Optional[float]:
    """Convert a cell value to float, mapping None/NaN to None."""
    if value is None or pd.isna(value):
        return None
    return float(value)
