"""The queue of running events."""

from __future__ import annotations

from typing import Any, TypeVar

from .event import Event

E = TypeVar("E", bound=Event)


class Events:
    """Runs events frame by frame and starts their follow-ups when they finish."""

    def __init__(self) -> None:
        self._events: list[Event] = []

    def add(self, event: Event) -> None:
        self._events.append(event)

    def create_event(self, event_type: type[E], *args: Any, **kwargs: Any) -> E:
        """Construct an event, queue it and return it."""
        event = event_type(*args, **kwargs)
        self.add(event)
        return event

    def execute(self, engine: Any) -> None:
        """Run one frame of every current event."""
        if self.empty():
            return
        follow_ups: list[Event] = []
        for event in list(self._events):
            event.execute(engine)
            event.update()
            if event.is_done():
                event.when_done(engine)
                follow_ups.extend(event.next_events)
        self._events = [event for event in self._events if not event.is_done()]
        self._events.extend(follow_ups)

    def empty(self) -> bool:
        return not self._events

    def __len__(self) -> int:
        return len(self._events)