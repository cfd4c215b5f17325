"""The game engine: owns every subsystem and runs the main loop."""

from __future__ import annotations

from typing import Any

from .audio import Audio
from .builder import Builder
from .camera import Camera
from .decorator import Decorator
from .entities import Entities
from .entity import Entity, Team
from .events import Events
from .graphics import Graphics
from .inputs import Input
from .settings import Settings
from .timer import Timer

TIME_STEP_PER_UPDATE = 0.1  # seconds of game time consumed by one update


class Engine:
    """Builds the dungeon from settings, then handles input, updates and drawing."""

    def __init__(self, settings: Settings, *, graphics: Any = None, audio: Any = None,
                 input: Any = None) -> None:
        self.input = Input() if input is None else input
        self.audio = Audio() if audio is None else audio
        self.entities = Entities()
        self.graphics = (
            Graphics(settings.title, settings.screen_width, settings.screen_height)
            if graphics is None else graphics
        )
        self.camera = Camera(self.graphics, settings.tile_size, settings.zoom)
        self.events = Events()
        self.hero: Entity | None = None
        self._running = False

        self.audio.load_sounds(settings.sounds)
        self.audio.play_sound("background", True)

        for sheet in (settings.tiles, settings.heroes, settings.monsters,
                      settings.items, settings.effects):
            self.graphics.load_sprite_sheet(sheet)

        builder = Builder(settings.room_placement_attempts)
        layout, rooms = builder.generate(settings.map_width, settings.map_height)
        self.dungeon = Decorator(self.graphics, layout, rooms).create_dungeon()

    def __enter__(self) -> Engine:
        return self

    def __exit__(self, *exc_info: object) -> None:
        for part in (self.graphics, self.audio):
            close = getattr(part, "close", None)
            if close is not None:
                close()

    # entities

    def create_hero(self) -> Entity:
        """Place the hero in a random room; the camera and fog follow it."""
        position = self.dungeon.random_open_room_tile()
        hero = Entity(self, position, Team.HERO)
        self.hero = hero
        self.entities.add(hero)

        for callback in (_center_camera, _update_visibility):
            callback(self, hero)
            hero.on_move.append(callback)
        return hero

    def create_monster(self) -> Entity:
        """Place a monster in a random room."""
        position = self.dungeon.random_open_room_tile()
        monster = Entity(self, position, Team.MONSTER)
        self.entities.add(monster)
        return monster

    def remove_entity(self, entity: Entity) -> None:
        """Take an entity off its tile and out of play."""
        self.dungeon.remove_entity(entity.position)
        entity.set_max_health(0)

    # main loop

    def run(self) -> None:
        """Run the game until it is stopped or the hero dies."""
        if self.hero is None:
            raise RuntimeError("Engine.run(): No hero has been added to the game")
        self._running = True
        timer = Timer()
        accumulated_time = 0.0
        while self._running and self.hero is not None and self.hero.alive:
            # input and rendering produce time; updates consume it in fixed steps
            accumulated_time += timer.elapsed()
            self._handle_input()
            while accumulated_time >= TIME_STEP_PER_UPDATE:
                self._update()
                accumulated_time -= TIME_STEP_PER_UPDATE
            self._render()

    def stop(self) -> None:
        self._running = False

    def _handle_input(self) -> None:
        for event in self.input.get_all_input_events():
            if event == "Quit":
                self.stop()
                break
            if event == "-":
                self.camera.zoom_out()
            elif event == "=":
                self.camera.zoom_in()
            else:
                self.input.set_last_keypress(event)

    def _update(self) -> None:
        self.camera.update()
        self.dungeon.update()
        self.entities.update()
        # entities act until an event appears or nobody can act
        while self.events.empty() and self.entities.take_turn(self):
            pass
        self.events.execute(self)

    def _render(self) -> None:
        self.graphics.clear()
        self.camera.render_dungeon(self.dungeon)
        self.camera.render_entities(self.entities)
        self.camera.render_overlays()
        self.camera.render_fog(self.dungeon)
        if self.hero is not None:
            self.camera.render_health_bar(self.hero.health, self.hero.max_health)
            selected, names = self.hero.inventory_list
            self.camera.render_items(selected, names)
        self.graphics.redraw()


def _center_camera(engine: Engine, entity: Entity) -> None:
    engine.camera.move_to(entity.position)


def _update_visibility(engine: Engine, entity: Entity) -> None:
    engine.dungeon.update_visibility(entity.position)