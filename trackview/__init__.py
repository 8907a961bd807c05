"""
trackview: terminal viewer core for recorded GPS tracks.

Frames a pannable map viewport around a track and builds the chart series
for its speed or elevation over time.
"""

__version__ = "0.1.0"
