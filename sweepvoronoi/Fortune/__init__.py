from sweepvoronoi.Fortune.site import Site, Rectangle
from sweepvoronoi.Fortune.event import Event, SiteEvent, CircleEvent, EventQueue, EventStatus
from sweepvoronoi.Fortune.beachline import BeachLine, BeachLineError, Node
from sweepvoronoi.Fortune.registry import CircleEventRegistry
from sweepvoronoi.Fortune.observer import SweepObserver, LoggingObserver, RecordingObserver
from sweepvoronoi.Fortune.voronoi import Voronoi
