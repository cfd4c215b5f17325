"""Event that recomputes the hero's field of view."""

from __future__ import annotations

from typing import Any

from .event import Event


class UpdateFOV(Event):
    """Refresh the fog of war around the hero's position."""

    def execute(self, engine: Any) -> None:
        engine.dungeon.update_visibility(engine.hero.position)