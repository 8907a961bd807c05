"""
Visualization module for track data
Prepares route segments and chart axes for the terminal renderer
"""

from .route_view import ChartConfig, chart_axes, route_segments

__all__ = [
    'ChartConfig',
    'chart_axes',
    'route_segments'
]
