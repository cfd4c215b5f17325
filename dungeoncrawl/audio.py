"""Sound effects and background music, backed by pygame's mixer."""

from __future__ import annotations

from typing import Any

import pygame

_BACKGROUND_CHANNEL = 0
_EFFECT_CHANNEL = 1


class Audio:
    """Loads named sounds and plays them on a background or an effect channel."""

    def __init__(self, mixer: Any = None) -> None:
        self._mixer = pygame.mixer if mixer is None else mixer
        try:
            self._mixer.init(frequency=44100, size=-16, channels=2, buffer=1024)
        except pygame.error as error:
            raise RuntimeError(str(error)) from error
        self._sounds: dict[str, Any] = {}

    def __enter__(self) -> Audio:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release the sounds and shut the mixer down."""
        self._sounds.clear()
        self._mixer.quit()

    def load_sounds(self, filename: str) -> None:
        """Replace all sounds with the name/file pairs listed in filename."""
        self._sounds.clear()
        try:
            with open(filename, encoding="utf-8") as listing:
                tokens = listing.read().split()
        except OSError as error:
            raise FileNotFoundError(f"Could not open filename: {filename}") from error

        parent_path = filename[: filename.find("/") + 1]
        for name, file in zip(tokens[::2], tokens[1::2]):
            full_path = parent_path + file
            try:
                self._sounds[name] = self._mixer.Sound(full_path)
            except (pygame.error, OSError) as error:
                raise RuntimeError(f"Unable to load sound from {full_path}") from error

    def play_sound(self, sound_name: str, is_background: bool = False) -> None:
        """Play a sound once, or loop it forever as the background."""
        try:
            sound = self._sounds[sound_name]
        except KeyError:
            raise KeyError(f"Cannot find sound {sound_name}") from None

        if is_background:
            channel, loops = _BACKGROUND_CHANNEL, -1
            message = f"Background sound {sound_name} cannot be played."
        else:
            channel, loops = _EFFECT_CHANNEL, 0
            message = f"{sound_name} cannot be played."
        try:
            self._mixer.Channel(channel).play(sound, loops=loops)
        except pygame.error as error:
            raise RuntimeError(message) from error