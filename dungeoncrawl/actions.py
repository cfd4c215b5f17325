"""Actions that heroes and monsters take on their turns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .action import Action, Result, alternative, failure, success
from .entity import Entity
from .randomness import shuffle
from .updatefov import UpdateFOV
from .vec import Vec


class Rest(Action):
    """Do nothing and end the turn."""

    def perform(self, engine: Any, entity: Entity) -> Result:
        return success()


@dataclass
class Move(Action):
    """Step one tile in a direction, opening a closed door that is in the way."""

    direction: Vec

    def perform(self, engine: Any, entity: Entity) -> Result:
        entity.change_direction(self.direction)
        target = entity.position + self.direction
        tile = engine.dungeon.get_tile(target)
        if tile.walkable:
            entity.move_to(target)
            return success()
        if tile.has_door() and not tile.door.is_open():
            return alternative(OpenDoor())
        return failure()


class OpenDoor(Action):
    """Open every closed door next to the entity."""

    def perform(self, engine: Any, entity: Entity) -> Result:
        opened_any = False
        for neighbor in engine.dungeon.neighbors(entity.position):
            tile = engine.dungeon.get_tile(neighbor)
            if tile.has_door() and not tile.door.is_open():
                tile.door.open()
                tile.walkable = True
                opened_any = True
        if opened_any:
            engine.events.create_event(UpdateFOV)
            return success()
        return failure()


class CloseDoor(Action):
    """Close every open door next to the entity."""

    def perform(self, engine: Any, entity: Entity) -> Result:
        closed_any = False
        for neighbor in engine.dungeon.neighbors(entity.position):
            tile = engine.dungeon.get_tile(neighbor)
            if tile.has_door() and tile.door.is_open():
                tile.door.close()
                tile.walkable = False
                closed_any = True
        if closed_any:
            engine.events.create_event(UpdateFOV)
            return success()
        return failure()


class Wander(Action):
    """Move towards a random free neighbouring tile, or rest if there is none."""

    def perform(self, engine: Any, entity: Entity) -> Result:
        position = entity.position
        neighbors = engine.dungeon.neighbors(position)
        shuffle(neighbors)
        for neighbor in neighbors:
            tile = engine.dungeon.get_tile(neighbor)
            if not tile.is_wall() and not tile.has_entity():
                return alternative(Move(neighbor - position))
        return alternative(Rest())