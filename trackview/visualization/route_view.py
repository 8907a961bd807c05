"""
Route and chart render preparation.

Produces the line segments for the route canvas and the axis bounds and
labels for the time-series chart. Drawing itself is left to the renderer.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..session.models import Axis, ChartAxes, SeriesMetric, TimeSeries, TrackPoint

Segment = Tuple[float, float, float, float]


@dataclass
class ChartConfig:
    """Configuration for chart axes"""
    time_title: str = "Time [min]"
    speed_title: str = "Speed [m/s]"
    elevation_title: str = "Elevation [m]"
    value_precision: int = 2
    seconds_per_time_unit: float = 60.0  # Offsets are plotted in minutes


def _time_label(value: float) -> str:
    # Full precision; whole numbers without a trailing ".0"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def route_segments(points: Sequence[TrackPoint]) -> List[Segment]:
    """
    Line segments joining each point to the next, as (x1, y1, x2, y2).

    x is latitude and y longitude, matching the viewport axes.
    """
    return [
        (p0.lat, p0.lon, p1.lat, p1.lon)
        for p0, p1 in zip(points, points[1:])
    ]


def chart_axes(
    series: TimeSeries,
    metric: SeriesMetric = SeriesMetric.SPEED,
    config: ChartConfig = None,
) -> ChartAxes:
    """
    Axis bounds and three labels (start, middle, end) for each chart axis.

    The x axis spans the series window with labels in minutes; the y axis
    spans the value range.
    """
    config = config or ChartConfig()

    start, end = series.window
    unit = config.seconds_per_time_unit
    x_axis = Axis(
        title=config.time_title,
        bounds=(start, end),
        labels=(
            _time_label(start / unit),
            _time_label((start + end) / 2.0 / unit),
            _time_label(end / unit),
        ),
    )

    low, high = series.value_range
    precision = config.value_precision
    if SeriesMetric(metric) == SeriesMetric.SPEED:
        y_title = config.speed_title
    else:
        y_title = config.elevation_title
    y_axis = Axis(
        title=y_title,
        bounds=(low, high),
        labels=(
            f"{low:.{precision}f}",
            f"{(low + high) / 2.0:.{precision}f}",
            f"{high:.{precision}f}",
        ),
    )

    return ChartAxes(x=x_axis, y=y_axis)
