"""
Configuration module for trackview
Environment-based configuration for the viewer loop, panning, and logging
"""

import logging
import os
from typing import Optional

from trackview.features.viewport import ViewportConfig
from trackview.session.models import PanSpanPolicy, SeriesMetric


class Config:
    """Main configuration class with environment variable overrides"""

    # Render loop
    TICK_RATE_MS = int(os.getenv('TICK_RATE_MS', 100))

    # Viewport framing and panning
    VIEW_MARGIN = float(os.getenv('VIEW_MARGIN', 0.25))
    PAN_STEP_VERTICAL = float(os.getenv('PAN_STEP_VERTICAL', 0.01))
    PAN_STEP_HORIZONTAL = float(os.getenv('PAN_STEP_HORIZONTAL', 0.01))
    PAN_SPAN_POLICY = os.getenv('PAN_SPAN_POLICY', PanSpanPolicy.VERTICAL_SPAN.value)

    # Chart
    SERIES_METRIC = os.getenv('SERIES_METRIC', SeriesMetric.SPEED.value)

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_FILE = os.getenv('LOG_FILE')

    @classmethod
    def viewport_config(cls) -> ViewportConfig:
        """Build the viewport configuration from class settings"""
        return ViewportConfig(
            margin_factor=cls.VIEW_MARGIN,
            vertical_step_fraction=cls.PAN_STEP_VERTICAL,
            horizontal_step_fraction=cls.PAN_STEP_HORIZONTAL,
            span_policy=PanSpanPolicy(cls.PAN_SPAN_POLICY),
        )

    @classmethod
    def series_metric(cls) -> SeriesMetric:
        return SeriesMetric(cls.SERIES_METRIC)

    @classmethod
    def tick_interval(cls) -> float:
        """Tick interval in seconds"""
        return cls.TICK_RATE_MS / 1000.0

    @classmethod
    def init_app(cls):
        """Configure logging from class settings"""
        configure_logging(cls.LOG_LEVEL, cls.LOG_FILE)


class TestConfig(Config):
    """Test-specific configuration"""
    TICK_RATE_MS = 10
    VIEW_MARGIN = 0.25
    PAN_STEP_VERTICAL = 0.01
    PAN_STEP_HORIZONTAL = 0.01
    PAN_SPAN_POLICY = PanSpanPolicy.VERTICAL_SPAN.value
    SERIES_METRIC = SeriesMetric.SPEED.value
    LOG_LEVEL = 'DEBUG'
    LOG_FILE = None


CONSOLE_HANDLER_NAME = 'trackview.console'
FILE_HANDLER_NAME = 'trackview.file'


def configure_logging(level: str = 'INFO', log_file: Optional[str] = None) -> None:
    """
    Log warnings to the console and, optionally, everything at `level` to a file.

    The console handler stays at WARNING so log output does not tear the
    terminal UI. Calling again replaces the handlers installed by an earlier
    call.
    """
    root = logging.getLogger()
    root.setLevel(level.upper() if isinstance(level, str) else level)

    for handler in list(root.handlers):
        if handler.get_name() in (CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME):
            root.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    console = logging.StreamHandler()
    console.set_name(CONSOLE_HANDLER_NAME)
    console.setLevel(logging.WARNING)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setLevel(root.level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
