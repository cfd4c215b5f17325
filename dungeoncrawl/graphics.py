"""Window, sprite sheets and drawing, backed by pygame."""

from __future__ import annotations

from collections import deque
from typing import Iterator

import pygame

from .randomness import randint, shuffle
from .sprite import AnimatedSprite, Sprite
from .vec import Vec


def _is_int(token: str) -> bool:
    try:
        int(token)
    except ValueError:
        return False
    return True


def _sheet_records(tokens: deque[str]) -> Iterator[tuple[str, int, int, int, int, int]]:
    """Yield (name, x, y, width, height, frames); frames is optional in the sheet."""
    while len(tokens) >= 5:
        name = tokens.popleft()
        fields = [tokens.popleft() for _ in range(4)]
        try:
            x, y, width, height = (int(field) for field in fields)
        except ValueError:
            return
        frames = int(tokens.popleft()) if tokens and _is_int(tokens[0]) else 1
        yield name, x, y, width, height, frames


class Graphics:
    """Opens the game window, loads sprite sheets and draws onto the screen."""

    def __init__(self, title: str, screen_width: int, screen_height: int) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        try:
            pygame.display.init()
            self.screen = pygame.display.set_mode((screen_width, screen_height), 0, 32)
        except pygame.error as error:
            pygame.display.quit()
            raise RuntimeError(f"Unable to initialize SDL Video: {error}") from error
        pygame.display.set_caption(title)
        self._textures: list[pygame.Surface] = []
        self._texture_ids: dict[str, int] = {}
        self._sprites: dict[str, list[Sprite]] = {}

    def __enter__(self) -> Graphics:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the window."""
        pygame.display.quit()

    def load_sprite_sheet(self, filename: str) -> None:
        """Read a sheet: an image name, then lines of name x y width height [frames]."""
        try:
            with open(filename, encoding="utf-8") as sheet:
                tokens = deque(sheet.read().split())
        except OSError as error:
            raise FileNotFoundError(f"Could not open filename: {filename}") from error
        if not tokens:
            raise ValueError(f"Could not read any sprites from filename: {filename}")

        parent_path = filename[: filename.find("/") + 1]
        texture_id = self._get_texture_id(parent_path + tokens.popleft())

        for name, x, y, width, height, frames in _sheet_records(tokens):
            shift = Vec(-(width // 2), -height)  # anchor at bottom center
            center = Vec(width // 2, height // 2)
            series = [
                Sprite(texture_id, Vec(x + i * width, y), Vec(width, height), shift, center)
                for i in range(frames)
            ]
            if series:
                self._sprites.setdefault(name, []).extend(series)

        if not self._sprites:
            raise ValueError(f"Could not read any sprites from filename: {filename}")

    def get_sprite(self, name: str) -> Sprite:
        """A copy of the first frame of the named sprite."""
        try:
            return self._sprites[name][0].copy()
        except KeyError:
            raise KeyError(f"Cannot find sprite: {name}") from None

    def get_animated_sprite(self, name: str, ticks_per_frame: int = 1,
                            random_start: bool = False,
                            shuffle_order: bool = False) -> AnimatedSprite:
        """An animation of all frames of the named sprite."""
        try:
            series = [sprite.copy() for sprite in self._sprites[name]]
        except KeyError:
            raise KeyError(f"Cannot find sprite: {name}") from None
        if shuffle_order:
            shuffle(series)
        if len(series) > 1 and random_start:
            return AnimatedSprite(series, ticks_per_frame, randint(0, len(series) - 1))
        return AnimatedSprite(series, ticks_per_frame)

    def clear(self) -> None:
        """Fill the screen with black."""
        self.screen.fill((0, 0, 0, 255))

    def draw_rect(self, pixel: Vec, size: Vec, red: int, green: int, blue: int,
                  alpha: int) -> None:
        """Blend a filled rectangle onto the screen."""
        width, height = size
        if width <= 0 or height <= 0:
            return
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((red, green, blue, alpha))
        self.screen.blit(overlay, tuple(pixel))

    def draw_sprite(self, pixel: Vec, sprite: Sprite, scale: int = 1) -> None:
        """Draw a sprite anchored at pixel, scaled, flipped and rotated as it asks."""
        if sprite.texture_id < 0:
            return
        x = pixel.x + sprite.shift.x * scale
        y = pixel.y + sprite.shift.y * scale
        width = sprite.size.x * scale
        height = sprite.size.y * scale
        if width <= 0 or height <= 0:
            return

        texture = self._textures[sprite.texture_id]
        source = pygame.Rect(sprite.location.x, sprite.location.y, sprite.size.x, sprite.size.y)
        image = texture.subsurface(source.clip(texture.get_rect()))
        image = pygame.transform.scale(image, (width, height))
        if sprite.flip:
            image = pygame.transform.flip(image, True, False)

        if not sprite.angle:
            self.screen.blit(image, (x, y))
            return

        pivot = pygame.math.Vector2(x + sprite.center.x * scale, y + sprite.center.y * scale)
        offset = pygame.math.Vector2(x + width / 2, y + height / 2) - pivot
        rotated = pygame.transform.rotate(image, -sprite.angle)
        rect = rotated.get_rect(center=pivot + offset.rotate(sprite.angle))
        self.screen.blit(rotated, rect)

    def redraw(self) -> None:
        """Show everything drawn since the last clear."""
        pygame.display.flip()

    def _get_texture_id(self, image_filename: str) -> int:
        if image_filename in self._texture_ids:
            return self._texture_ids[image_filename]
        try:
            texture = pygame.image.load(image_filename).convert_alpha()
        except (pygame.error, OSError) as error:
            raise RuntimeError(f"Unable to load image {image_filename}: {error}") from error
        texture_id = len(self._textures)
        self._texture_ids[image_filename] = texture_id
        self._textures.append(texture)
        return texture_id