"""
Viewer session: the render/input loop state.

Owns the viewport and the chart series for one track, turns key presses and
ticks into viewport commands, and produces frame snapshots for a renderer.
Terminal setup and drawing stay with the caller.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional, Sequence, Union

from trackview.analysis.track_metrics import decorate_speed, total_distance
from trackview.config.config import Config
from trackview.features.series_builder import SeriesBuilder
from trackview.features.viewport import ViewportConfig, ViewportModel
from trackview.session.exceptions import EmptyInputError
from trackview.session.models import Direction, Frame, SeriesMetric, TrackPoint
from trackview.visualization.route_view import ChartConfig, chart_axes, route_segments

logger = logging.getLogger(__name__)

QUIT_KEY = "q"

KEY_BINDINGS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


@dataclass(frozen=True)
class InputEvent:
    """A key press. Arrow keys are named "up", "down", "left", "right"."""
    key: str


@dataclass(frozen=True)
class TickEvent:
    """Periodic update, emitted by the loop's timer."""


Event = Union[InputEvent, TickEvent]


class ViewerSession:
    """
    State of one viewing session.

    The viewport is mutated only through handle(); the series is built once
    and never changes.
    """

    def __init__(
        self,
        points: Sequence[TrackPoint],
        metric: SeriesMetric = None,
        viewport_config: ViewportConfig = None,
        chart_config: ChartConfig = None,
    ):
        """
        Args:
            points: Points of a single track segment in time order
            metric: Chart channel; defaults to Config.series_metric()
            viewport_config: Framing and panning options; defaults to Config
            chart_config: Axis titles and label formatting

        Raises:
            EmptyInputError: If points is empty.
            MissingTimestampError / MissingValueError: If the chart channel
                cannot be built from the points.
        """
        if not points:
            raise EmptyInputError("viewer session")

        self.metric = SeriesMetric(metric or Config.series_metric())
        self.chart_config = chart_config or ChartConfig()

        if self.metric == SeriesMetric.SPEED and any(p.speed is None for p in points):
            points = decorate_speed(points, keep_existing=True)
        self.points = list(points)

        self.viewport = ViewportModel.from_track(
            self.points, viewport_config or Config.viewport_config()
        )
        self.series = SeriesBuilder().build_from_track(self.points, self.metric)
        self.segments = route_segments(self.points)
        self.axes = chart_axes(self.series, self.metric, self.chart_config)

        logger.info(
            "Session ready: %d points, %.0f m, %.0f s of %s",
            len(self.points), total_distance(self.points),
            self.series.duration, self.metric.value,
        )

    def handle(self, event: Event) -> bool:
        """
        Apply one event. Returns False when the session should end.
        """
        if isinstance(event, TickEvent):
            self.viewport.tick()
            return True

        key = event.key.lower() if len(event.key) > 1 else event.key
        if key == QUIT_KEY:
            logger.info("Quit requested")
            return False

        direction = KEY_BINDINGS.get(key)
        if direction is not None:
            self.viewport.scroll(direction)
        return True

    def frame(self) -> Frame:
        """Snapshot of everything the renderer needs for the current frame."""
        return Frame(
            bounds=self.viewport.current_bounds(),
            route_segments=self.segments,
            series=self.series,
            axes=self.axes,
        )

    def run(
        self,
        events: Iterable[Event],
        draw: Callable[[Frame], None],
        max_frames: Optional[int] = None,
    ) -> int:
        """
        Drive the loop: draw a frame, then handle the next event.

        Stops on quit, when events run out, or after max_frames draws.

        Returns:
            Number of frames drawn.
        """
        frames = 0
        for event in events:
            draw(self.frame())
            frames += 1
            if not self.handle(event):
                break
            if max_frames is not None and frames >= max_frames:
                break
        return frames


def timed_events(
    read_key: Callable[[float], Optional[str]],
    tick_interval: Optional[float] = None,
    clock: Callable[[], float] = time.monotonic,
) -> Iterator[Event]:
    """
    Merge key presses with periodic ticks into one event stream.

    Args:
        read_key: Blocks up to the given number of seconds for a key press;
            returns the key name or None on timeout.
        tick_interval: Seconds between ticks; defaults to Config.tick_interval()
        clock: Monotonic time source

    Yields:
        InputEvent for each key, TickEvent whenever the interval has elapsed.
    """
    interval = Config.tick_interval() if tick_interval is None else tick_interval
    last_tick = clock()
    while True:
        remaining = interval - (clock() - last_tick)
        key = read_key(max(remaining, 0.0))
        if key is not None:
            yield InputEvent(key)
        now = clock()
        if now - last_tick >= interval:
            last_tick = now
            yield TickEvent()
