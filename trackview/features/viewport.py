"""
Viewport Model
Pannable map region for the route view.

The box is framed once from the full point set with a margin on each axis.
Arrow key presses accumulate pending steps; each periodic tick applies them
as a shift of both edges of an axis and clears them.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Sequence, Tuple, Union

import numpy as np

from ..analysis.track_metrics import get_range_latitude, get_range_longitude
from ..session.exceptions import EmptyInputError
from ..session.models import BoundingBox, Direction, PanSpanPolicy, PanState, TrackPoint

logger = logging.getLogger(__name__)


class ViewportState(str, Enum):
    IDLE = "idle"
    PENDING_SCROLL = "pending_scroll"


@dataclass
class ViewportConfig:
    """Configuration for framing and panning the route view"""
    margin_factor: float = 0.25  # Share of the raw span added on each side
    vertical_step_fraction: float = 0.01  # Share of the visible span per key press
    horizontal_step_fraction: float = 0.01
    span_policy: PanSpanPolicy = PanSpanPolicy.VERTICAL_SPAN


class ViewportModel:
    """
    Geographic bounding box plus pending pan steps.

    Down and Left presses count up, Up and Right count down. Panning never
    re-derives the box from the points; drift accumulates.
    """

    def __init__(
        self,
        bounds: BoundingBox,
        pan: PanState,
        span_policy: PanSpanPolicy = PanSpanPolicy.VERTICAL_SPAN,
    ):
        self.bounds = bounds
        self.pan = pan
        self.span_policy = PanSpanPolicy(span_policy)

    @classmethod
    def from_points(
        cls,
        points: Sequence[Tuple[float, float]],
        vertical_step_fraction: float = 0.01,
        horizontal_step_fraction: float = 0.01,
        margin_factor: float = 0.25,
        span_policy: PanSpanPolicy = PanSpanPolicy.VERTICAL_SPAN,
    ) -> "ViewportModel":
        """
        Frame a viewport around (x, y) points.

        Args:
            points: Coordinate pairs; x is the first coordinate.
            vertical_step_fraction: Pan step along y, as a share of the visible span
            horizontal_step_fraction: Pan step along x
            margin_factor: Share of each axis span added on both sides
            span_policy: Which visible span scales horizontal steps

        Raises:
            EmptyInputError: If points is empty.
            ValueError: If margin_factor is negative.
        """
        if len(points) == 0:
            raise EmptyInputError("viewport")

        coords = np.asarray(points, dtype=float).reshape(len(points), 2)
        return cls.from_ranges(
            (float(coords[:, 0].min()), float(coords[:, 0].max())),
            (float(coords[:, 1].min()), float(coords[:, 1].max())),
            vertical_step_fraction=vertical_step_fraction,
            horizontal_step_fraction=horizontal_step_fraction,
            margin_factor=margin_factor,
            span_policy=span_policy,
        )

    @classmethod
    def from_ranges(
        cls,
        x_range: Tuple[float, float],
        y_range: Tuple[float, float],
        vertical_step_fraction: float = 0.01,
        horizontal_step_fraction: float = 0.01,
        margin_factor: float = 0.25,
        span_policy: PanSpanPolicy = PanSpanPolicy.VERTICAL_SPAN,
    ) -> "ViewportModel":
        """Frame a viewport around raw (min, max) extents on each axis."""
        if margin_factor < 0:
            raise ValueError(f"margin_factor must be non-negative, got {margin_factor}")

        x_min, x_max = x_range
        y_min, y_max = y_range
        logger.info("x-range %s to %s", x_min, x_max)
        logger.info("y-range %s to %s", y_min, y_max)

        x_dist = x_max - x_min
        y_dist = y_max - y_min
        bounds = BoundingBox(
            x_min=x_min - x_dist * margin_factor,
            y_min=y_min - y_dist * margin_factor,
            x_max=x_max + x_dist * margin_factor,
            y_max=y_max + y_dist * margin_factor,
        )
        pan = PanState(
            vertical_step_fraction=vertical_step_fraction,
            horizontal_step_fraction=horizontal_step_fraction,
        )
        return cls(bounds, pan, span_policy)

    @classmethod
    def from_track(
        cls,
        points: Sequence[TrackPoint],
        config: ViewportConfig = None,
    ) -> "ViewportModel":
        """Frame a viewport with latitude on x and longitude on y."""
        if not points:
            raise EmptyInputError("viewport")

        config = config or ViewportConfig()
        return cls.from_ranges(
            get_range_latitude(points),
            get_range_longitude(points),
            vertical_step_fraction=config.vertical_step_fraction,
            horizontal_step_fraction=config.horizontal_step_fraction,
            margin_factor=config.margin_factor,
            span_policy=config.span_policy,
        )

    @property
    def state(self) -> ViewportState:
        if self.pan.is_idle:
            return ViewportState.IDLE
        return ViewportState.PENDING_SCROLL

    def scroll(self, direction: Union[Direction, str]) -> None:
        """Queue one pan step; applied on the next tick."""
        direction = Direction(direction)
        if direction == Direction.DOWN:
            self.pan.pending_vertical += 1
        elif direction == Direction.UP:
            self.pan.pending_vertical -= 1
        elif direction == Direction.LEFT:
            self.pan.pending_horizontal += 1
        else:
            self.pan.pending_horizontal -= 1

    def scroll_up(self) -> None:
        self.scroll(Direction.UP)

    def scroll_down(self) -> None:
        self.scroll(Direction.DOWN)

    def scroll_left(self) -> None:
        self.scroll(Direction.LEFT)

    def scroll_right(self) -> None:
        self.scroll(Direction.RIGHT)

    def tick(self) -> None:
        """Apply and clear pending pan steps. No-op when idle."""
        if self.pan.is_idle:
            return

        y_visible = self.bounds.y_max - self.bounds.y_min
        dy = y_visible * self.pan.vertical_step_fraction * self.pan.pending_vertical
        self.bounds.y_min += dy
        self.bounds.y_max += dy

        if self.span_policy == PanSpanPolicy.OWN_AXIS:
            x_base = self.bounds.x_max - self.bounds.x_min
        else:
            x_base = y_visible
        dx = x_base * self.pan.horizontal_step_fraction * self.pan.pending_horizontal
        self.bounds.x_min += dx
        self.bounds.x_max += dx

        logger.debug(
            "Applied pan (%d, %d) steps: dx=%s dy=%s",
            self.pan.pending_horizontal, self.pan.pending_vertical, dx, dy,
        )
        self.pan.reset()

    def current_bounds(self) -> BoundingBox:
        return replace(self.bounds)

    def current_pan_state(self) -> PanState:
        return replace(self.pan)
