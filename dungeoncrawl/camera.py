"""Draws the dungeon, entities and interface from the camera's point of view."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Sequence

from .entity import MAX_INVENTORY
from .sprite import Sprite
from .vec import Vec

if TYPE_CHECKING:
    from .dungeon import Dungeon

_MAX_ZOOM = 8
_MIN_ZOOM = 1


class Camera:
    """Converts world positions to pixels and draws what lies in view."""

    def __init__(self, graphics: Any, tile_size: int, zoom: int = 1) -> None:
        self._graphics = graphics
        self.tile_size = tile_size
        self._zoom = zoom
        self.location = Vec()
        self._screen_center = Vec(graphics.screen_width // 2, graphics.screen_height // 2)
        self._overlays: list[tuple[Vec, Sprite]] = []
        self._min = Vec()
        self._max = Vec()
        self._calculate_visibility_limits()

    @property
    def zoom(self) -> int:
        return self._zoom

    # drawing

    def render_sprite(self, position: Vec, sprite: Sprite) -> None:
        self._graphics.draw_sprite(self.world_to_screen(position), sprite, self._zoom)

    def render_dungeon(self, dungeon: Dungeon) -> None:
        """Draw tiles, then decorations, items and doors on top."""
        door_sprites: list[tuple[Vec, Sprite]] = []
        item_sprites: list[tuple[Vec, Sprite]] = []
        for position in self._positions_in_view(dungeon):
            if not self._within_view(position):
                continue
            tile = dungeon.tiles[position]
            self.render_sprite(position, tile.sprite)
            if tile.has_door():
                door_sprites.append((position, tile.door.sprite))
            if tile.has_item():
                item_sprites.append((position, tile.item.sprite))

        for position, decoration in dungeon.decorations.items():
            if self._within_view(position):
                self.render_sprite(position, decoration.sprite)
        for position, sprite in item_sprites:
            self.render_sprite(position, sprite)
        for position, sprite in door_sprites:
            self.render_sprite(position, sprite)

    def render_entities(self, entities: Iterable[Any]) -> None:
        """Draw every living, visible entity in view."""
        for entity in entities:
            position = entity.position
            if self._within_view(position) and entity.alive and entity.is_visible():
                for sprite in entity.sprites:
                    self.render_sprite(position, sprite)

    def render_fog(self, dungeon: Dungeon) -> None:
        """Darken each tile in view by its fog brightness."""
        for position in self._positions_in_view(dungeon):
            brightness = dungeon.fog.brightness(position)
            alpha = min(max(int(brightness * 255), 0), 255)
            self.render_rect(position, 0, 0, 0, alpha)

    def render_rect(self, position: Vec, red: int, green: int, blue: int, alpha: int) -> None:
        """Fill the tile at position; rectangles anchor at their upper-left corner."""
        scale = self.tile_size * self._zoom
        pixel = self.world_to_screen(position) - Vec(scale // 2, scale)
        self._graphics.draw_rect(pixel, Vec(scale, scale), red, green, blue, alpha)

    def render_health_bar(self, current_health: int, max_health: int) -> None:
        percentage = current_health / max_health
        length = int(percentage * 300)
        self._graphics.draw_rect(Vec(10, 10), Vec(320, 40), 255, 255, 255, 255)
        self._graphics.draw_rect(Vec(15, 15), Vec(310, 30), 0, 0, 0, 255)
        self._graphics.draw_rect(Vec(20, 20), Vec(length, 20), 50, 255, 50, 255)

    def render_items(self, selected_item: int, sprite_names: Sequence[str]) -> None:
        """Draw the inventory slots in the upper-right corner."""
        size, gap = Vec(54, 54), Vec(5, 5)
        for i, name in enumerate(sprite_names):
            x = self._graphics.screen_width - (size.x + gap.x) * (MAX_INVENTORY - i) - gap.x
            corner = Vec(x, 10)
            if i == selected_item:
                self._graphics.draw_rect(corner, size, 255, 0, 0, 255)
            else:
                self._graphics.draw_rect(corner, size, 255, 255, 255, 255)
            self._graphics.draw_rect(corner + gap, size - 2 * gap, 150, 150, 150, 255)
            if name:
                sprite = self._graphics.get_sprite(name)
                position = Vec(corner.x + size.x // 2, corner.y + size.y - 2 * gap.y + 2)
                self._graphics.draw_sprite(position, sprite)

    def add_overlay(self, position: Vec, sprite: Sprite) -> None:
        self._overlays.append((position, sprite))

    def render_overlays(self) -> None:
        for position, sprite in self._overlays:
            self.render_sprite(position, sprite)

    def update(self) -> None:
        """Forget this frame's overlays."""
        self._overlays.clear()

    # positioning

    def world_to_screen(self, position: Vec) -> Vec:
        """Pixel of a world position; world y points up, screen y points down."""
        scale = self._zoom * self.tile_size
        pixel = scale * (position - self.location) + self._screen_center
        y = self._graphics.screen_height - pixel.y + scale // 2
        return Vec(pixel.x, y)

    def move_to(self, position: Vec) -> None:
        self.location = position
        self._calculate_visibility_limits()

    def zoom_in(self) -> None:
        if self._zoom < _MAX_ZOOM:
            self._zoom += 1
            self._calculate_visibility_limits()

    def zoom_out(self) -> None:
        if self._zoom > _MIN_ZOOM:
            self._zoom -= 1
            self._calculate_visibility_limits()

    def _calculate_visibility_limits(self) -> None:
        screen = Vec(self._graphics.screen_width, self._graphics.screen_height)
        num_tiles = screen / (2 * self._zoom * self.tile_size) + Vec(1, 1)
        self._max = self.location + num_tiles
        self._min = self.location - num_tiles

    def _within_view(self, position: Vec) -> bool:
        return (self._min.x <= position.x <= self._max.x
                and self._min.y <= position.y <= self._max.y)

    def _positions_in_view(self, dungeon: Dungeon) -> Iterable[Vec]:
        x_min = max(0, self._min.x)
        y_min = max(0, self._min.y)
        x_max = min(self._max.x, dungeon.tiles.width - 1)
        y_max = min(self._max.y, dungeon.tiles.height - 1)
        for y in range(y_min, y_max + 1):
            for x in range(x_min, x_max + 1):
                yield Vec(x, y)