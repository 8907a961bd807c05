"""
Tests for configuration and logging setup
"""

import logging
import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from trackview.config import config as app_config
from trackview.config.config import Config, configure_logging
from trackview.features.viewport import ViewportConfig, ViewportModel
from trackview.session.models import PanSpanPolicy, SeriesMetric, TrackPoint


class TestConfigValues:
    """Tests for Config defaults and derived objects"""

    def test_viewport_config_from_settings(self):
        config = app_config.TestConfig.viewport_config()
        assert isinstance(config, ViewportConfig)
        assert config.margin_factor == 0.25
        assert config.vertical_step_fraction == 0.01
        assert config.horizontal_step_fraction == 0.01
        assert config.span_policy == PanSpanPolicy.VERTICAL_SPAN

    def test_series_metric(self):
        assert app_config.TestConfig.series_metric() == SeriesMetric.SPEED

    def test_tick_interval_seconds(self):
        assert app_config.TestConfig.tick_interval() == pytest.approx(0.01)

    def test_subclass_overrides(self):
        class OwnAxisConfig(app_config.TestConfig):
            PAN_SPAN_POLICY = "own_axis"
            SERIES_METRIC = "elevation"

        assert OwnAxisConfig.viewport_config().span_policy == PanSpanPolicy.OWN_AXIS
        assert OwnAxisConfig.series_metric() == SeriesMetric.ELEVATION

    def test_invalid_policy_rejected(self):
        class BadConfig(Config):
            PAN_SPAN_POLICY = "diagonal"

        with pytest.raises(ValueError):
            BadConfig.viewport_config()

    def test_negative_margin_rejected(self):
        class BadMargin(Config):
            VIEW_MARGIN = -1.0

        points = [TrackPoint(lat=0.0, lon=0.0), TrackPoint(lat=1.0, lon=1.0)]
        with pytest.raises(ValueError):
            ViewportModel.from_track(points, BadMargin.viewport_config())


class TestConfigureLogging:
    """Tests for configure_logging"""

    @pytest.fixture
    def clean_root(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield root
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers = handlers
        root.setLevel(level)

    def test_console_only(self, clean_root):
        before = len(clean_root.handlers)
        configure_logging("DEBUG")
        added = clean_root.handlers[before:]
        assert len(added) == 1
        assert added[0].level == logging.WARNING
        assert clean_root.level == logging.DEBUG

    def test_file_handler(self, clean_root, tmp_path):
        log_file = tmp_path / "trackview.log"
        before = len(clean_root.handlers)
        configure_logging("INFO", str(log_file))
        added = clean_root.handlers[before:]
        assert len(added) == 2

        logging.getLogger("trackview.test").info("framed viewport")
        for handler in added:
            handler.flush()
        assert "framed viewport" in log_file.read_text()

    def test_init_app_uses_settings(self, clean_root):
        before = len(clean_root.handlers)
        app_config.TestConfig.init_app()
        assert len(clean_root.handlers) == before + 1
        assert clean_root.level == logging.DEBUG

    def test_repeat_calls_do_not_stack_handlers(self, clean_root, tmp_path):
        """Test a second call replaces the handlers of the first"""
        before = len(clean_root.handlers)
        configure_logging("INFO", str(tmp_path / "first.log"))
        configure_logging("DEBUG")
        added = clean_root.handlers[before:]
        assert len(added) == 1
        assert added[0].level == logging.WARNING
        assert clean_root.level == logging.DEBUG

