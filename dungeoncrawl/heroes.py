"""Hero types and how heroes respond to the keyboard."""

from __future__ import annotations

from typing import Any, Callable

from .action import Action
from .actions import CloseDoor, Move, OpenDoor, Rest
from .entity import Entity
from .vec import Vec

_KEY_ACTIONS: dict[str, Callable[[], Action]] = {
    "A": lambda: Move(Vec(-1, 0)),
    "Left": lambda: Move(Vec(-1, 0)),
    "W": lambda: Move(Vec(0, 1)),
    "Up": lambda: Move(Vec(0, 1)),
    "S": lambda: Move(Vec(0, -1)),
    "Down": lambda: Move(Vec(0, -1)),
    "D": lambda: Move(Vec(1, 0)),
    "Right": lambda: Move(Vec(1, 0)),
    "R": Rest,
    "C": CloseDoor,
    "O": OpenDoor,
}


def make_wizard(hero: Entity) -> None:
    """Turn an entity into a keyboard-controlled wizard."""
    hero.set_sprite("wizard")
    hero.set_max_health(10)
    hero.behavior = default_behavior


def default_behavior(engine: Any, entity: Entity) -> Action | None:
    """The action for the last key pressed, or None to wait for one."""
    factory = _KEY_ACTIONS.get(engine.input.get_last_keypress())
    return factory() if factory is not None else None