"""A single cell of the dungeon."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from .sprite import Sprite


class TileType(enum.Enum):
    NONE = enum.auto()
    FLOOR = enum.auto()
    WALL = enum.auto()
    DOOR = enum.auto()


@dataclass
class Tile:
    type: TileType = TileType.NONE
    sprite: Sprite = field(default_factory=Sprite)
    visible: bool = False
    walkable: bool = False
    door: Any = None
    item: Any = None
    entity: Any = None

    def is_wall(self) -> bool:
        return self.type is TileType.WALL

    def has_door(self) -> bool:
        return self.type is TileType.DOOR

    def has_item(self) -> bool:
        return self.item is not None

    def has_entity(self) -> bool:
        return self.entity is not None

    def is_visible(self) -> bool:
        return self.visible