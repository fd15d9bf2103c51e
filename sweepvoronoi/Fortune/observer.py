import logging

logger = logging.getLogger(__name__)


class SweepObserver:
    """
    Hooks called by the sweep at fixed points. The base class does nothing;
    subclass it to trace or inspect a run. Observers must not mutate the
    queue or the beach line.
    """

    def on_site_event(self, site, sweep_y):
        pass

    def on_arc_split(self, left, new, right, vertex):
        pass

    def on_circle_added(self, event):
        pass

    def on_circle_event(self, event, vertex):
        pass

    def on_arc_removed(self, arc, prev_arc, next_arc):
        pass

    def on_event_discarded(self, event, reason):
        pass


class LoggingObserver(SweepObserver):
    """Narrates every step at DEBUG level."""

    def __init__(self, log=None):
        self.log = log or logger

    def on_site_event(self, site, sweep_y):
        self.log.debug("Handling site event %d,%d (sweep line %s)", site.x, site.y, sweep_y)

    def on_arc_split(self, left, new, right, vertex):
        if vertex is None:
            self.log.debug("Added %s on the first row", new.site)
        else:
            self.log.debug("Split arc %s by %s at %.3f,%.3f", left.site, new.site, vertex.x, vertex.y)

    def on_circle_added(self, event):
        self.log.debug("Added circle with center %.3f,%.3f, r=%.3f and bottom Y=%.3f",
                       event.x, event.center_y, event.radius, event.bottom_y)

    def on_circle_event(self, event, vertex):
        self.log.debug("Handling circle event %.3f,%.3f with radius %.3f", event.x, event.bottom_y, event.radius)

    def on_arc_removed(self, arc, prev_arc, next_arc):
        self.log.debug("Removed arc %s between %s and %s", arc.site,
                       prev_arc.site if prev_arc else None, next_arc.site if next_arc else None)

    def on_event_discarded(self, event, reason):
        self.log.debug("Ignoring %s: %s", event, reason)


class RecordingObserver(SweepObserver):
    """Keeps what it sees; handy in tests and notebooks."""

    def __init__(self):
        self.sites = []
        self.splits = []
        self.added = []
        self.circle_events = []
        self.removed_arcs = []
        self.discarded = []

    def on_site_event(self, site, sweep_y):
        self.sites.append((site, sweep_y))

    def on_arc_split(self, left, new, right, vertex):
        self.splits.append((getattr(left, "index", None), new.index, getattr(right, "index", None), vertex))

    def on_circle_added(self, event):
        self.added.append(event)

    def on_circle_event(self, event, vertex):
        self.circle_events.append((event, event.status, vertex))

    def on_arc_removed(self, arc, prev_arc, next_arc):
        self.removed_arcs.append(arc.index)

    def on_event_discarded(self, event, reason):
        self.discarded.append((event, reason))
