import itertools
from enum import Enum


class EventStatus(Enum):
    QUEUED = "queued"
    REMOVED = "removed"
    FIRED = "fired"


class Event:
    # equal y: site events (0) before circle events (1)
    KIND = 0

    def __init__(self, x, y):
        self.x = x
        self.y = y
        self.index = None       # slot in the queue's heap while queued
        self.status = None      # set by EventQueue.push
        self.sequence = None    # insertion order, doubles as the event id

    @property
    def id(self):
        return self.sequence

    def sort_key(self):
        return (self.y, self.KIND, self.x, self.sequence)

    def is_site(self) -> bool:
        return self.KIND == SiteEvent.KIND


class SiteEvent(Event):
    KIND = 0

    def __init__(self, site):
        super().__init__(site.x, site.y)
        self.site = site

    def __repr__(self):
        return f"SiteEvent({self.site})"


class CircleEvent(Event):
    """
    Fires when the sweep line reaches the bottom of the circle through three
    consecutive arcs. ``arcs`` holds the arena indices (left, middle, right);
    the middle arc is the one that vanishes.
    """
    KIND = 1

    def __init__(self, x, center_y, radius, arcs, sites=()):
        super().__init__(x, center_y + radius)
        self.center_y = center_y
        self.radius = radius
        self.arcs = list(arcs)
        self.sites = tuple(sites)

    @property
    def bottom_y(self):
        return self.y

    @property
    def center(self):
        return (self.x, self.center_y)

    @property
    def left_arc(self):
        return self.arcs[0]

    @property
    def middle_arc(self):
        return self.arcs[1]

    @property
    def right_arc(self):
        return self.arcs[2]

    def __repr__(self):
        return (f"CircleEvent(center=({self.x:.3f}, {self.center_y:.3f}), "
                f"r={self.radius:.3f}, bottom={self.y:.3f}, arcs={self.arcs})")


class EventQueue:
    """
    Binary min-heap of events keyed by ``Event.sort_key``. Every event knows
    its slot, so an arbitrary queued event can be removed in O(log n).
    """

    def __init__(self):
        self._heap = []
        self._counter = itertools.count()

    @classmethod
    def from_sites(cls, sites):
        queue = cls()
        for site in sites:
            queue.push(SiteEvent(site))
        return queue

    def __len__(self):
        return len(self._heap)

    def __bool__(self):
        return bool(self._heap)

    def __contains__(self, event):
        return event.index is not None and event.index < len(self._heap) and self._heap[event.index] is event

    def push(self, event):
        event.sequence = next(self._counter)
        event.status = EventStatus.QUEUED
        event.index = len(self._heap)
        self._heap.append(event)
        self._sift_up(event.index)
        return event

    def peek(self):
        return self._heap[0] if self._heap else None

    def pop(self):
        """Remove and return the minimum event, or None when empty."""
        if not self._heap:
            return None
        event = self._take(0)
        event.status = EventStatus.FIRED
        return event

    def remove(self, event) -> bool:
        """
        Cancel a queued event. Removing an event that is no longer queued
        (already removed, fired, or never pushed) is a no-op and returns False.
        """
        if event.status is not EventStatus.QUEUED or event not in self:
            return False
        self._take(event.index)
        event.status = EventStatus.REMOVED
        return True

    def _take(self, i):
        heap = self._heap
        event = heap[i]
        last = heap.pop()
        if i < len(heap):
            heap[i] = last
            last.index = i
            self._sift_down(i)
            self._sift_up(last.index)
        event.index = None
        return event

    def _less(self, i, j):
        return self._heap[i].sort_key() < self._heap[j].sort_key()

    def _swap(self, i, j):
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        heap[i].index = i
        heap[j].index = j

    def _sift_up(self, i):
        while i > 0:
            parent = (i - 1) // 2
            if not self._less(i, parent):
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i):
        n = len(self._heap)
        while True:
            smallest = i
            for child in (2 * i + 1, 2 * i + 2):
                if child < n and self._less(child, smallest):
                    smallest = child
            if smallest == i:
                break
            self._swap(i, smallest)
            i = smallest

    def __repr__(self):
        return f"EventQueue({len(self._heap)} events)"
