"""The dungeon: its tiles, rooms, decorations and fog of war."""

from __future__ import annotations

from typing import Iterable, Mapping

from .fog import Fog
from .grid import Grid
from .pathfinding import Path, breadth_first
from .randomness import randint, random_choice
from .room import Room
from .sprite import AnimatedSprite
from .tile import Tile
from .vec import DIRECTIONS, Vec


class Dungeon:
    """A grid of tiles with rooms, animated decorations and fog of war."""

    def __init__(self, tiles: Grid[Tile], rooms: Iterable[Room],
                 decorations: Mapping[Vec, AnimatedSprite] | None = None) -> None:
        self.tiles = tiles
        self.rooms = list(rooms)
        self.decorations: dict[Vec, AnimatedSprite] = dict(decorations or {})
        self.fog = Fog()
        for tile in self.tiles:
            tile.visible = False

    def random_open_room_tile(self) -> Vec:
        """A random walkable room tile with no entity or item on it."""
        while True:
            room = random_choice(self.rooms)
            x = randint(room.position.x, room.position.x + room.size.x - 1)
            y = randint(room.position.y, room.position.y + room.size.y - 1)
            tile = self.tiles[x, y]
            if tile.walkable and tile.entity is None and tile.item is None:
                return Vec(x, y)

    def update(self) -> None:
        """Animate decorations on visible tiles."""
        for position, animated_sprite in self.decorations.items():
            if self.tiles[position].visible:
                animated_sprite.update()

    def update_visibility(self, position: Vec) -> None:
        self.fog.update_visibility(self, position)

    def remove_entity(self, position: Vec) -> None:
        self.tiles[position].entity = None

    def get_tile(self, position: Vec) -> Tile:
        return self.tiles[position]

    def within_bounds(self, position: Vec) -> bool:
        return self.tiles.within_bounds(position)

    def neighbors(self, position: Vec) -> list[Vec]:
        """Adjacent positions that lie inside the dungeon."""
        return [
            position + direction
            for direction in DIRECTIONS
            if self.tiles.within_bounds(position + direction)
        ]

    def is_opaque(self, position: Vec) -> bool:
        """Whether the tile blocks sight: walls and closed doors."""
        tile = self.tiles[position]
        if tile.is_wall():
            return True
        if tile.has_door():
            return not tile.door.is_open()
        return False

    def calculate_path(self, start: Vec, stop: Vec) -> Path:
        return breadth_first(self, start, stop)