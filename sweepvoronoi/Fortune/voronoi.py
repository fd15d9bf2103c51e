import logging

from sweepvoronoi.DCEL.dcel import DCEL
from sweepvoronoi.Fortune.beachline import BeachLine
from sweepvoronoi.Fortune.event import EventQueue, EventStatus, CircleEvent
from sweepvoronoi.Fortune.geometry import EPS, circumcircle, parabola_y
from sweepvoronoi.Fortune.observer import SweepObserver
from sweepvoronoi.Fortune.registry import CircleEventRegistry
from sweepvoronoi.Fortune.site import Site, Rectangle

logger = logging.getLogger(__name__)


class Voronoi:
    """
    Fortune's sweep over a fixed list of sites.

    The sweep line moves towards increasing y. Each call to
    ``advance_one_event`` handles one event; ``generate`` runs the whole
    sweep and returns the resulting DCEL. Unbounded edges are left open.
    """

    def __init__(self, sites, bounds, observer: SweepObserver = None):
        if not isinstance(bounds, Rectangle):
            bounds = Rectangle.from_corners(*bounds)
        self.bounds = bounds
        self.sites = [site.copy() for site in sites]
        self.observer = observer or SweepObserver()
        self._check_sites()
        self.reset()

    @classmethod
    def from_points(cls, points, bounds, observer: SweepObserver = None):
        """Sites from raw (x, y) points; ids follow input order from 0."""
        sites = [Site(x, y, site_id) for site_id, (x, y) in enumerate(points)]
        return cls(sites, bounds, observer)

    def _check_sites(self):
        ids = set()
        coordinates = {}
        for site in self.sites:
            if site.id in ids:
                raise ValueError(f"duplicate site id {site.id}")
            ids.add(site.id)
            other = coordinates.setdefault((site.x, site.y), site)
            if other is not site:
                raise ValueError(f"sites {other} and {site} coincide")

    def reset(self):
        self.event_queue = EventQueue.from_sites(self.sites)
        self.beach_line = BeachLine()
        self.registry = CircleEventRegistry()
        self.sweep_line = float("-inf")
        self.dcel = DCEL()
        for site in self.sites:
            site.face = None

    @property
    def is_done(self) -> bool:
        return not self.event_queue

    def generate(self) -> DCEL:
        self.reset()
        while not self.is_done:
            self.advance_one_event()
        return self.dcel

    def advance_one_event(self):
        """
        Handle the next live event and return it; stale events on the way are
        dropped. Returns None once the queue is drained.
        """
        while self.event_queue:
            event = self.event_queue.pop()

            if event.y < self.sweep_line - EPS:
                self._discard(event, f"it's above the sweep line ({self.sweep_line})")
                continue
            if not event.is_site() and not self.registry.is_middle(event.middle_arc, event):
                self._discard(event, "its middle arc no longer expects it")
                continue

            self.sweep_line = max(self.sweep_line, event.y)
            if event.is_site():
                self._handle_site_event(event)
            else:
                self._handle_circle_event(event)
            return event
        return None

    def _discard(self, event, reason):
        logger.debug("Ignoring event %s: %s", event, reason)
        if not event.is_site():
            self.registry.unregister(event)
        event.status = EventStatus.REMOVED
        self.observer.on_event_discarded(event, reason)

    def _handle_site_event(self, event):
        site = event.site
        self.observer.on_site_event(site, self.sweep_line)

        face = self.dcel.add_face(site)
        site.face = face

        if self.beach_line.is_empty():
            self.beach_line.set_root_arc(site)
            return

        arc_above = self.beach_line.find_arc_above(site, self.sweep_line)

        if arc_above.site.y == site.y:
            self._insert_on_first_row(arc_above, site)
            return

        self._remove_circle_event(arc_above)

        y = parabola_y(arc_above.site, site.x, self.sweep_line)
        vertex = self.dcel.add_vertex(site.x, y)

        old_index = arc_above.index
        left, new, right = self.beach_line.insert_site(arc_above, site)
        # (old, b, c) now reads (right, b, c); (a, b, old) reads (a, b, left)
        self.registry.move("left", old_index, right.index)
        self.registry.move("right", old_index, left.index)

        edge1, edge2 = self.dcel.new_edge(left.site.face, new.site.face, vertex)
        left.right_edges.append(edge1)
        new.left_edges.append(edge2)

        edge3, edge4 = self.dcel.new_edge(new.site.face, right.site.face, vertex)
        new.right_edges.append(edge3)
        right.left_edges.append(edge4)

        self.observer.on_arc_split(left, new, right, vertex)

        self._add_circle_event(self.beach_line.prev_arc(left), left, new)
        self._add_circle_event(new, right, self.beach_line.next_arc(right))

    def _insert_on_first_row(self, arc, site):
        # every arc so far sits on the sweep line: the bisector is a full
        # vertical line, one twin pair open at both ends
        new = self.beach_line.insert_beside(arc, site)
        prev_arc = self.beach_line.prev_arc(new)
        next_arc = self.beach_line.next_arc(new)

        if prev_arc is arc:
            edge1, edge2 = self.dcel.new_edge(arc.site.face, site.face)
            arc.right_edges.append(edge1)
            new.left_edges.append(edge2)
        else:
            edge1, edge2 = self.dcel.new_edge(site.face, arc.site.face)
            new.right_edges.append(edge1)
            arc.left_edges.append(edge2)

        self.observer.on_arc_split(prev_arc, new, next_arc, None)

        self._add_circle_event(self.beach_line.prev_arc(prev_arc), prev_arc, new)
        self._add_circle_event(new, next_arc, self.beach_line.next_arc(next_arc))

    def _handle_circle_event(self, event):
        arc = self.beach_line.node(event.middle_arc)

        vertex = self.dcel.add_vertex(event.x, event.center_y)
        self.observer.on_circle_event(event, vertex)

        self.dcel.close_twins(arc.left_edges, vertex)
        self.dcel.close_twins(arc.right_edges, vertex)

        prev_arc = self.beach_line.prev_arc(arc)
        next_arc = self.beach_line.next_arc(arc)
        self.beach_line.remove_arc(arc)
        self.observer.on_arc_removed(arc, prev_arc, next_arc)

        self.registry.unregister(event)
        self._remove_all_circle_events(arc)

        self._add_circle_event(self.beach_line.prev_arc(prev_arc), prev_arc, next_arc)
        self._add_circle_event(prev_arc, next_arc, self.beach_line.next_arc(next_arc))

        self.dcel.close_twins(prev_arc.right_edges, vertex)
        self.dcel.close_twins(next_arc.left_edges, vertex)

        edge1, edge2 = self.dcel.new_edge(prev_arc.site.face, next_arc.site.face, vertex)
        prev_arc.right_edges.append(edge1)
        next_arc.left_edges.append(edge2)

    def _add_circle_event(self, arc1, arc2, arc3):
        if arc1 is None or arc2 is None or arc3 is None:
            return

        circle = circumcircle(arc1.site, arc2.site, arc3.site)
        if circle is None:
            return
        x, y, r = circle

        bottom_y = y + r
        if bottom_y < self.sweep_line - EPS:
            logger.debug("bottomY (%f) would be below sweep line (%f)", bottom_y, self.sweep_line)
            return

        event = CircleEvent(x, y, r, (arc1.index, arc2.index, arc3.index),
                            (arc1.site, arc2.site, arc3.site))
        self.event_queue.push(event)
        self.registry.register(event)
        self.observer.on_circle_added(event)

    def _cancel(self, event):
        self.event_queue.remove(event)
        event.status = EventStatus.REMOVED
        self.registry.unregister(event)

    def _remove_circle_event(self, middle_arc):
        """Cancel only the events in which ``middle_arc`` is the middle arc."""
        for event in self.registry.events(middle_arc.index, "middle"):
            self._cancel(event)

    def _remove_all_circle_events(self, arc):
        """Cancel every event ``arc`` takes part in, in any role."""
        for event in self.registry.events_of(arc.index):
            self._cancel(event)

    def __repr__(self):
        return (f"Voronoi({len(self.sites)} sites, sweep line {self.sweep_line}, "
                f"{len(self.event_queue)} events queued)")
