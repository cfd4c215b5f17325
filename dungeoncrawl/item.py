"""Items that entities carry and use."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .sprite import Sprite

if TYPE_CHECKING:
    from .entity import Entity


@dataclass(eq=False)
class Item:
    """An item; its name matches a sprite in the items sheet."""

    name: str
    sprite: Sprite = field(default_factory=Sprite)

    def use(self, engine: Any, owner: Entity, target: Entity | None = None) -> None:
        """Use the item on its owner, or on a target when one is given."""

    def interact(self, engine: Any, entity: Entity) -> None:
        """Called when an entity touches or picks up the item."""