from collections import defaultdict

ROLES = ("left", "middle", "right")


class CircleEventRegistry:
    """
    Which queued circle events use which arc, and in which role.

    role -> arc index -> {event id: event}. Each event lists its own three
    participants in ``event.arcs``, so scrubbing an event touches only those
    three arcs.
    """

    def __init__(self):
        self._roles = {role: defaultdict(dict) for role in ROLES}

    def register(self, event):
        for role, arc in zip(ROLES, event.arcs):
            self._roles[role][arc][event.id] = event

    def unregister(self, event):
        for role, arc in zip(ROLES, event.arcs):
            by_arc = self._roles[role]
            events = by_arc.get(arc)
            if events is None:
                continue
            events.pop(event.id, None)
            if not events:
                del by_arc[arc]

    def events(self, arc, role):
        return list(self._roles[role].get(arc, {}).values())

    def events_of(self, arc):
        """Every event the arc takes part in, whatever its role."""
        seen = {}
        for role in ROLES:
            for event in self._roles[role].get(arc, {}).values():
                seen.setdefault(event.id, event)
        return list(seen.values())

    def is_middle(self, arc, event) -> bool:
        return event.id in self._roles["middle"].get(arc, {})

    def move(self, role, old_arc, new_arc):
        """Hand the ``role`` registrations of ``old_arc`` over to ``new_arc``."""
        position = ROLES.index(role)
        events = self._roles[role].pop(old_arc, {})
        for event in events.values():
            event.arcs[position] = new_arc
            self._roles[role][new_arc][event.id] = event

    def all_events(self):
        seen = {}
        for by_arc in self._roles["middle"].values():
            seen.update(by_arc)
        return [seen[k] for k in sorted(seen)]

    def __len__(self):
        return sum(len(events) for events in self._roles["middle"].values())

    def __repr__(self):
        return f"CircleEventRegistry({len(self)} events)"
