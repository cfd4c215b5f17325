"""Events: things that happen in the world over one or more frames."""

from __future__ import annotations

import abc
from typing import Any


class Event(abc.ABC):
    """Runs for a number of frames before entities take further turns."""

    def __init__(self, number_of_frames: int = 1) -> None:
        self.number_of_frames = number_of_frames
        self.frame_count = 0
        self.next_events: list[Event] = []  # run once this event is done

    def update(self) -> None:
        self.frame_count += 1

    def is_done(self) -> bool:
        return self.frame_count == self.number_of_frames

    @abc.abstractmethod
    def execute(self, engine: Any) -> None:
        """What the event does in each frame."""

    def when_done(self, engine: Any) -> None:
        """Clean-up once the event is completed."""

    def add_next(self, event: Event) -> None:
        """Queue an event to start after this one finishes."""
        self.next_events.append(event)