"""Monster types and how monsters behave."""

from __future__ import annotations

from typing import Any

from .action import Action
from .actions import Rest, Wander
from .entity import Entity
from .randomness import probability


def make_demon(monster: Entity) -> None:
    """Turn an entity into a big, wandering demon."""
    monster.set_sprite("demon_big")
    monster.set_max_health(40)
    monster.behavior = default_behavior


def default_behavior(engine: Any, entity: Entity) -> Action:
    """Usually wander, otherwise rest."""
    if probability(66):
        return Wander()
    return Rest()