"""
Features module for track viewing
Contains the viewport engine and the time series builder
"""

from .series_builder import SeriesBuilder, build_series
from .viewport import ViewportConfig, ViewportModel, ViewportState

__all__ = [
    'SeriesBuilder',
    'build_series',
    'ViewportConfig',
    'ViewportModel',
    'ViewportState',
]
