"""Heroes and monsters that live in the dungeon."""

from __future__ import annotations

import enum
from typing import Any, Callable

from .action import Action
from .item import Item
from .sprite import AnimatedSprite, Sprite
from .vec import Vec

DEFAULT_SPEED = 8
MAX_INVENTORY = 5


class Team(enum.Enum):
    HERO = enum.auto()
    MONSTER = enum.auto()


class Entity:
    """A being that occupies a tile, takes turns, fights and carries items."""

    def __init__(self, engine: Any, position: Vec, team: Team) -> None:
        self._engine = engine
        self._position = position
        self._direction = Vec(1, 0)
        self.team = team
        self._sprite = AnimatedSprite()
        self._health = 1
        self._max_health = 1
        self._alive = True
        # speed is energy gained per round; enough energy buys a turn
        self.speed = DEFAULT_SPEED
        self.energy = 0
        self._inventory: list[Item | None] = [None] * MAX_INVENTORY
        self._current_item = 0
        self.on_move: list[Callable[[Any, Entity], None]] = []
        self.behavior: Callable[[Any, Entity], Action | None] | None = None

        tile = engine.dungeon.get_tile(position)
        if tile.entity is not None:
            raise ValueError(f"An entity is already on tile: {position}")
        tile.entity = self

    # movement

    @property
    def position(self) -> Vec:
        return self._position

    @property
    def direction(self) -> Vec:
        return self._direction

    def move_to(self, position: Vec) -> None:
        """Move onto a tile, swapping with whatever entity was there."""
        dungeon = self._engine.dungeon
        old_tile = dungeon.get_tile(self._position)
        new_tile = dungeon.get_tile(position)
        old_tile.entity, new_tile.entity = new_tile.entity, old_tile.entity
        self._position = position
        for callback in self.on_move:
            callback(self._engine, self)

    def change_direction(self, direction: Vec) -> None:
        """Face a new direction, flipping the sprite for left and right."""
        self._direction = direction
        if direction.x == 1:
            self._sprite.flip(False)
        elif direction.x == -1:
            self._sprite.flip(True)
        self._adjust_item_position()

    def is_visible(self) -> bool:
        return self._engine.dungeon.get_tile(self._position).is_visible()

    # combat

    @property
    def health(self) -> int:
        return self._health

    @property
    def max_health(self) -> int:
        return self._max_health

    @property
    def alive(self) -> bool:
        return self._alive

    def take_damage(self, amount: int) -> None:
        """Lose health, kept within [0, max_health]; dying at zero."""
        self._health = min(max(self._health - amount, 0), self._max_health)
        if self._health == 0:
            self._alive = False

    def set_max_health(self, value: int) -> None:
        """Set both health and maximum health; zero or less means dead."""
        self._max_health = self._health = value
        self._alive = self._health > 0

    # inventory

    def is_inventory_full(self) -> bool:
        return None not in self._inventory

    def add_to_inventory(self, item: Item) -> None:
        """Put an item into the first empty slot, if any, tilted like a held weapon."""
        try:
            slot = self._inventory.index(None)
        except ValueError:
            return
        sprite = self._engine.graphics.get_sprite(item.name)
        sprite.center = Vec(sprite.size.x // 2, sprite.size.y)
        sprite.flip = False
        sprite.shift = Vec(self._sprite.sprite.size.x // 8, sprite.shift.y)
        sprite.angle = 20
        item.sprite = sprite
        self._inventory[slot] = item

    @property
    def current_item(self) -> Item:
        """The held item, or an empty item named "none"."""
        item = self._inventory[self._current_item]
        return item if item is not None else Item("none")

    def select_item(self, index: int) -> None:
        """Hold the item in the given slot; invalid slots are ignored."""
        if 0 <= index < MAX_INVENTORY:
            self._current_item = index
            self._adjust_item_position()

    def remove_item(self, item: Item) -> None:
        """Take this very item out of the inventory, if it is there."""
        for slot, held in enumerate(self._inventory):
            if held is item:
                self._inventory[slot] = None
                return

    def remove_item_at(self, index: int) -> Item | None:
        """Take the item out of a slot and return it."""
        if not 0 <= index < MAX_INVENTORY:
            return None
        item = self._inventory[index]
        self._inventory[index] = None
        return item

    @property
    def inventory_list(self) -> tuple[int, list[str]]:
        """The selected slot and the names of all slots ("" when empty)."""
        names = [item.name if item is not None else "" for item in self._inventory]
        return self._current_item, names

    # turns

    def take_turn(self) -> Action | None:
        if self.behavior is None:
            return None
        return self.behavior(self._engine, self)

    # drawing

    def set_sprite(self, name: str) -> None:
        self._sprite = self._engine.graphics.get_animated_sprite(name, 1, True)

    def update(self) -> None:
        self._sprite.update()

    @property
    def sprites(self) -> list[Sprite]:
        """Sprites to draw, held item first."""
        return [self.current_item.sprite, self._sprite.sprite]

    def _adjust_item_position(self) -> None:
        item = self.current_item
        width = self._sprite.sprite.size.x
        sprite = item.sprite
        if self._direction.x == 1:
            sprite.flip = False
            sprite.shift = Vec(width // 8, sprite.shift.y)
            sprite.angle = 20
        elif self._direction.x == -1:
            sprite.flip = True
            sprite.shift = Vec(-(width // 2), sprite.shift.y)
            sprite.angle = -20