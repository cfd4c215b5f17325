"""Keyboard, mouse and window events."""

from __future__ import annotations

from typing import Callable, Iterable

import pygame

_LEFT_BUTTON = 1


def _key_name(key: int) -> str:
    """Capitalised key name: Space, Right, A, Left Shift, -."""
    name = pygame.key.name(key)
    return " ".join(word[:1].upper() + word[1:] for word in name.split(" "))


class Input:
    """Collects input events and remembers the last key press and mouse click."""

    def __init__(self, poll: Callable[[], Iterable[pygame.event.Event]] | None = None) -> None:
        if poll is None:
            try:
                pygame.display.init()
            except pygame.error as error:
                raise RuntimeError(f"Unable to initialize SDL Events: {error}") from error
            poll = pygame.event.get
        self._poll = poll
        self._last_keypress = ""
        self._mouse = (-1, -1)

    def get_last_keypress(self) -> str:
        """The most recent key name, which is then forgotten."""
        key, self._last_keypress = self._last_keypress, ""
        return key

    def get_last_mouse_click(self) -> tuple[int, int]:
        return self._mouse

    def set_last_keypress(self, key: str) -> None:
        self._last_keypress = key

    def get_all_input_events(self) -> list[str]:
        """Names of all events since the last call: "Quit", key names, "Click"."""
        inputs = []
        for event in self._poll():
            if event.type == pygame.QUIT:
                inputs.append("Quit")
            elif event.type == pygame.KEYDOWN:
                inputs.append(_key_name(event.key))
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == _LEFT_BUTTON:
                inputs.append("Click")
                x, y = event.pos
                self._mouse = (x, y)
        return inputs