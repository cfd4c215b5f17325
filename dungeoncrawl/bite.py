"""A monster's bite, carried as an invisible item."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .item import Item

if TYPE_CHECKING:
    from .entity import Entity


class Bite(Item):
    """A natural weapon with no sprite; using it leaves the defender unchanged."""

    def __init__(self, damage: int) -> None:
        super().__init__("none")
        self.damage = damage

    def use(self, engine: Any, owner: Entity, target: Entity | None = None) -> None:
        """Bite the target; this has no effect on it."""