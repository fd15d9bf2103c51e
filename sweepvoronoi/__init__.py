"""Voronoi diagrams of integer sites with Fortune's sweep line, built on a half-edge DCEL."""

from sweepvoronoi.Fortune import (
    Site, Rectangle, Voronoi, BeachLineError,
    SweepObserver, LoggingObserver, RecordingObserver,
)
from sweepvoronoi.DCEL import DCEL

__all__ = [
    "Site", "Rectangle", "Voronoi", "BeachLineError",
    "SweepObserver", "LoggingObserver", "RecordingObserver", "DCEL",
]
