"""Sprites and frame-based animations of sprites."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Sequence

from .vec import Vec


@dataclass
class Sprite:
    """A rectangle of a texture, with drawing adjustments."""

    texture_id: int = -1  # assigned by the graphics engine
    location: Vec = field(default_factory=Vec)  # upper-left corner in the image
    size: Vec = field(default_factory=Vec)
    shift: Vec = field(default_factory=Vec)  # pixel offset when drawn
    center: Vec = field(default_factory=Vec)  # rotation point
    angle: float = 0.0
    flip: bool = False

    def copy(self) -> Sprite:
        return replace(self)


class AnimatedSprite:
    """A series of sprites shown one after another."""

    def __init__(self, sprites: Sequence[Sprite] | None = None, ticks_per_frame: int = 1,
                 starting_frame: int = 0) -> None:
        if sprites is None:
            self.visible = False
            self._sprites = [Sprite()]
            self._current_frame = 0
        else:
            self.visible = True
            self._sprites = [sprite.copy() for sprite in sprites]
            self._current_frame = starting_frame
        self._ticks_per_frame = ticks_per_frame
        self._time = 0

    def flip(self, flip: bool) -> None:
        """Flip every frame horizontally, or undo it."""
        for sprite in self._sprites:
            sprite.flip = flip

    def update(self) -> None:
        """Advance the animation clock, moving frames once enough ticks pass."""
        if not self.visible:
            return
        self._time += 1
        if self._time >= self._ticks_per_frame:
            self._current_frame = (self._current_frame + 1) % len(self._sprites)

    @property
    def sprite(self) -> Sprite:
        """A copy of the current frame."""
        return self._sprites[self._current_frame].copy()

    def number_of_frames(self) -> int:
        return len(self._sprites)