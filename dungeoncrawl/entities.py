"""The collection of entities and the order in which they take turns."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any, Iterator

if TYPE_CHECKING:
    from .entity import Entity

COST_OF_TURN = 8  # energy needed to take a turn


class Entities:
    """A round-robin queue of entities that spend energy to act."""

    def __init__(self) -> None:
        self._entities: deque[Entity] = deque()

    def add(self, entity: Entity) -> None:
        self._entities.append(entity)

    def update(self) -> None:
        """Let every entity know that the game has progressed."""
        for entity in self._entities:
            entity.update()

    def take_turn(self, engine: Any) -> bool:
        """Let the front entity act; returns whether progress was made."""
        self._remove_dead_entities()
        if not self._entities:
            return False

        entity = self._entities[0]
        if entity.energy < COST_OF_TURN:
            self.advance()
            return True

        action = entity.take_turn()
        if action is None:
            # wait for this entity rather than moving on
            return False

        while True:
            result = action.perform(engine, entity)
            if result.succeeded:
                entity.energy %= COST_OF_TURN
                self.advance()
                return True
            if result.next_action is None:
                return True
            action = result.next_action

    def advance(self) -> None:
        """Send the front entity to the back and give it energy."""
        if not self._entities:
            return
        entity = self._entities.popleft()
        self._entities.append(entity)
        entity.energy += entity.speed

    def _remove_dead_entities(self) -> None:
        self._entities = deque(entity for entity in self._entities if entity.alive)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)