"""Game settings read from a whitespace-separated key/value file."""

from __future__ import annotations

import os
from pathlib import Path

_FIELDS: tuple[tuple[str, type], ...] = (
    ("title", str),
    ("screen_width", int),
    ("screen_height", int),
    ("tile_size", int),
    ("zoom", int),
    ("tiles", str),
    ("heroes", str),
    ("monsters", str),
    ("items", str),
    ("effects", str),
    ("sounds", str),
    ("map_width", int),
    ("map_height", int),
    ("room_placement_attempts", int),
)


class Settings:
    """Window, camera, dungeon and asset settings for the game."""

    title: str
    screen_width: int
    screen_height: int
    tile_size: int
    zoom: int
    map_width: int
    map_height: int
    room_placement_attempts: int
    tiles: str
    heroes: str
    monsters: str
    items: str
    effects: str
    sounds: str

    def __init__(self, filename: str | os.PathLike[str]) -> None:
        self.path = Path(filename).absolute()
        self.load()

    def load(self) -> None:
        """Read the settings file; every known parameter must be present."""
        try:
            tokens = self.path.read_text(encoding="utf-8").split()
        except OSError as error:
            raise FileNotFoundError(f"Could not open settings file: {self.path}") from error

        parameters = dict(zip(tokens[::2], tokens[1::2]))
        for name, kind in _FIELDS:
            if name not in parameters:
                raise KeyError(f"Parameter '{name}' not found in {self.path}")
            raw = parameters[name]
            try:
                value = kind(raw)
            except ValueError as error:
                raise ValueError(
                    f"Parameter '{name}' has an invalid value '{raw}' in {self.path}"
                ) from error
            setattr(self, name, value)