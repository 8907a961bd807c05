"""
Analysis module for per-track metrics
"""

from .track_metrics import decorate_speed, haversine_distance, metric_samples

__all__ = [
    'decorate_speed',
    'haversine_distance',
    'metric_samples',
]
