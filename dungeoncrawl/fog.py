"""Fog of war: which tiles are visible, remembered or unknown."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .fov import FieldOfView
from .vec import Vec, distance

if TYPE_CHECKING:
    from .dungeon import Dungeon


class Fog:
    """Tracks visible and previously seen tiles and how dark each should be."""

    def __init__(self, brightness_seen: float = 0.7) -> None:
        self.brightness_seen = brightness_seen
        self.position = Vec()
        self.visible_tiles: set[Vec] = set()
        self.previously_seen_tiles: set[Vec] = set()

    def update_visibility(self, dungeon: Dungeon, position: Vec) -> None:
        """Recompute what is visible from position and mark the dungeon's tiles."""
        self.position = position
        for pos in self.visible_tiles:
            dungeon.tiles[pos].visible = False
        self.previously_seen_tiles |= self.visible_tiles

        self.visible_tiles = FieldOfView().compute(position, dungeon.is_opaque)
        for pos in self.visible_tiles:
            dungeon.tiles[pos].visible = True

    def brightness(self, location: Vec) -> float:
        """Darkness of the fog over a tile: 0 is clear, 1 is fully hidden."""
        if location in self.visible_tiles:
            dist = distance(self.position, location)
            return min(max(0.1 * (dist - 1), 0.0), self.brightness_seen)
        if location in self.previously_seen_tiles:
            return self.brightness_seen
        return 1.0