"""
Data models for a track viewing session.

Dataclasses for track points, the visible map region, pending pan steps,
and the chart-ready time series exchanged between the track source, the
viewport engine, and the render loop.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class SeriesMetric(str, Enum):
    """Scalar channel plotted against time in the chart."""
    SPEED = "speed"
    ELEVATION = "elevation"


class PanSpanPolicy(str, Enum):
    """Which visible span scales the horizontal pan step."""
    VERTICAL_SPAN = "vertical_span"  # Both axes step by the vertical span
    OWN_AXIS = "own_axis"  # Each axis steps by its own span


@dataclass(frozen=True)
class TrackPoint:
    """One observed location of a recorded track."""

    lat: float  # Latitude (decimal degrees)
    lon: float  # Longitude (decimal degrees)
    elevation: Optional[float] = None  # Meters
    time: Optional[datetime] = None  # UTC instant
    speed: Optional[float] = None  # Derived speed (m/s)


@dataclass
class BoundingBox:
    """
    Rectangular region of the map, in coordinate units.

    x is the first coordinate of a point and y the second. Mutated in place
    by panning; ordering x_min <= x_max and y_min <= y_max always holds.
    """
    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def x_bounds(self) -> Tuple[float, float]:
        return (self.x_min, self.x_max)

    @property
    def y_bounds(self) -> Tuple[float, float]:
        return (self.y_min, self.y_max)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x_min, self.y_min, self.x_max, self.y_max)


@dataclass
class PanState:
    """Scroll steps accumulated since the last tick."""
    pending_vertical: int = 0
    pending_horizontal: int = 0
    vertical_step_fraction: float = 0.01  # Share of the visible span per step
    horizontal_step_fraction: float = 0.01

    @property
    def is_idle(self) -> bool:
        return self.pending_vertical == 0 and self.pending_horizontal == 0

    def reset(self) -> None:
        self.pending_vertical = 0
        self.pending_horizontal = 0


@dataclass(frozen=True)
class TimeSeries:
    """
    Chart-ready series of (offset_seconds, value) pairs.

    Offsets are measured from the first sample. value_range and window are
    precomputed axis bounds for the chart.
    """
    data: Tuple[Tuple[float, float], ...]
    value_range: Tuple[float, float]
    window: Tuple[float, float]
    min_value: float = 0.0
    max_value: float = 0.0

    @property
    def offsets(self) -> List[float]:
        return [offset for offset, _ in self.data]

    @property
    def values(self) -> List[float]:
        return [value for _, value in self.data]

    @property
    def duration(self) -> float:
        return self.window[1] - self.window[0]

    def __len__(self) -> int:
        return len(self.data)


@dataclass
class Frame:
    """Everything the renderer needs to draw one frame."""
    bounds: BoundingBox
    route_segments: List[Tuple[float, float, float, float]] = field(default_factory=list)
    series: Optional[TimeSeries] = None
    axes: Optional["ChartAxes"] = None


@dataclass(frozen=True)
class Axis:
    """A chart axis: title, numeric bounds, and tick labels."""
    title: str
    bounds: Tuple[float, float]
    labels: Tuple[str, ...]


@dataclass(frozen=True)
class ChartAxes:
    x: Axis
    y: Axis
