"""
Time Series Builder
Turns timestamped track samples into a zero-origin, chart-ready series.

Offsets are whole seconds since the first sample. The value axis range is
derived from extrema seeded at zero, so it always includes zero and gets
20% headroom away from it.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional, Sequence, Tuple

from ..analysis.track_metrics import metric_samples
from ..session.exceptions import EmptyInputError, MissingTimestampError, MissingValueError
from ..session.models import SeriesMetric, TimeSeries, TrackPoint

logger = logging.getLogger(__name__)

Sample = Tuple[Optional[datetime], Optional[float]]


def whole_seconds(delta: timedelta) -> int:
    """Signed duration in whole seconds, truncated toward zero."""
    total_us = (delta.days * 86400 + delta.seconds) * 1_000_000 + delta.microseconds
    if total_us < 0:
        return -(-total_us // 1_000_000)
    return total_us // 1_000_000


class SeriesBuilder:
    """
    Builds TimeSeries objects for the chart.

    Samples are emitted in input order without resampling or sorting.
    """

    def __init__(self, lower_headroom: float = 0.8, upper_headroom: float = 1.2):
        """
        Args:
            lower_headroom: Factor applied to the minimum value
            upper_headroom: Factor applied to the maximum value
        """
        self.lower_headroom = lower_headroom
        self.upper_headroom = upper_headroom

    def build(self, samples: Sequence[Sample]) -> TimeSeries:
        """
        Build a series from (timestamp, value) samples.

        Args:
            samples: Ordered samples; timestamps assumed non-decreasing.

        Returns:
            TimeSeries with offsets, value_range and window.

        Raises:
            EmptyInputError: If samples is empty.
            MissingTimestampError: If a sample has no timestamp.
            MissingValueError: If a sample has no value.
        """
        if not samples:
            raise EmptyInputError("time series")

        start_time = samples[0][0]
        if start_time is None:
            raise MissingTimestampError(0)

        data = []
        min_value = 0.0
        max_value = 0.0
        for i, (timestamp, value) in enumerate(samples):
            if timestamp is None:
                raise MissingTimestampError(i)
            if value is None:
                raise MissingValueError("value", i)

            offset = float(whole_seconds(timestamp - start_time))
            value = float(value)
            data.append((offset, value))

            if value > max_value:
                max_value = value
            if value < min_value:
                min_value = value

        series = TimeSeries(
            data=tuple(data),
            value_range=(self.lower_headroom * min_value, self.upper_headroom * max_value),
            window=(0.0, data[-1][0]),
            min_value=min_value,
            max_value=max_value,
        )
        logger.debug(
            "Built series of %d samples, window %s, range %s",
            len(series), series.window, series.value_range,
        )
        return series

    def build_from_track(
        self,
        points: Sequence[TrackPoint],
        metric: SeriesMetric = SeriesMetric.SPEED,
    ) -> TimeSeries:
        """Build a series of one metric (speed or elevation) from track points."""
        return self.build(metric_samples(points, metric))


def build_series(samples: Sequence[Sample]) -> TimeSeries:
    """Build a series with the default headroom factors."""
    return SeriesBuilder().build(samples)
