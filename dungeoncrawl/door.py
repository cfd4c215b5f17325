"""Doors that open and close on a tile."""

from __future__ import annotations

from .sprite import Sprite
from .tile import Tile
from .vec import Vec


class Door:
    """A door; opening it makes its tile walkable."""

    def __init__(self, tile: Tile, is_horizontal: bool, horizontal: Sprite,
                 vertical: Sprite) -> None:
        self.tile = tile
        self._open = False
        self.is_horizontal = is_horizontal
        self._horizontal = horizontal.copy()
        self._vertical = vertical.copy()
        # shift open door sprites so the tile looks passable
        if is_horizontal:
            self._vertical.shift += Vec(-6, 0)
        else:
            self._horizontal.shift += Vec(6, -12)

    def is_open(self) -> bool:
        return self._open

    def open(self) -> None:
        self._open = True
        self.tile.walkable = True

    def close(self) -> None:
        self._open = False
        self.tile.walkable = False

    @property
    def sprite(self) -> Sprite:
        """The sprite to draw for the door's current state."""
        if self._open == self.is_horizontal:
            return self._vertical
        return self._horizontal