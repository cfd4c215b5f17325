import random

import pytest

from dungeoncrawl.engine import Engine
from dungeoncrawl.entity import Team
from dungeoncrawl.settings import Settings
from dungeoncrawl.sprite import AnimatedSprite, Sprite
from dungeoncrawl.vec import Vec


class FakeGraphics:
    screen_width = 640
    screen_height = 480

    def __init__(self):
        self.sheets = []
        self.rects = []
        self.sprites_drawn = 0
        self.redraws = 0

    def load_sprite_sheet(self, filename):
        self.sheets.append(filename)

    def get_sprite(self, name):
        return Sprite()

    def get_animated_sprite(self, name, ticks_per_frame=1, random_start=False,
                            shuffle_order=False):
        return AnimatedSprite([Sprite()], ticks_per_frame)

    def clear(self):
        pass

    def draw_rect(self, pixel, size, red, green, blue, alpha):
        self.rects.append((pixel, size, red, green, blue, alpha))

    def draw_sprite(self, pixel, sprite, scale=1):
        self.sprites_drawn += 1

    def redraw(self):
        self.redraws += 1


class FakeAudio:
    def __init__(self):
        self.loaded = []
        self.played = []

    def load_sounds(self, filename):
        self.loaded.append(filename)

    def play_sound(self, sound_name, is_background=False):
        self.played.append((sound_name, is_background))


class ScriptedInput:
    def __init__(self, batches=()):
        self._batches = list(batches)
        self._last = ""

    def get_all_input_events(self):
        return self._batches.pop(0) if self._batches else ["Quit"]

    def set_last_keypress(self, key):
        self._last = key

    def get_last_keypress(self):
        key, self._last = self._last, ""
        return key


SETTINGS_TEXT = """\
title Game
screen_width 640
screen_height 480
tile_size 16
zoom 1
tiles tiles.txt
heroes heroes.txt
monsters monsters.txt
items items.txt
effects effects.txt
sounds sounds.txt
map_width 21
map_height 21
room_placement_attempts 30
"""


@pytest.fixture
def settings(tmp_path):
    path = tmp_path / "settings.txt"
    path.write_text(SETTINGS_TEXT)
    return Settings(path)


def make_engine(settings, batches=()):
    random.seed(1234)
    return Engine(settings, graphics=FakeGraphics(), audio=FakeAudio(),
                  input=ScriptedInput(batches))


def test_construction_loads_assets(settings):
    engine = make_engine(settings)
    assert engine.audio.loaded == ["sounds.txt"]
    assert engine.audio.played == [("background", True)]
    assert engine.graphics.sheets == [
        "tiles.txt", "heroes.txt", "monsters.txt", "items.txt", "effects.txt"
    ]


def test_dungeon_has_map_dimensions(settings):
    engine = make_engine(settings)
    assert engine.dungeon.tiles.width == 21
    assert engine.dungeon.tiles.height == 21
    assert engine.dungeon.rooms


def test_create_hero(settings):
    engine = make_engine(settings)
    hero = engine.create_hero()
    assert engine.hero is hero
    assert hero.team is Team.HERO
    assert engine.dungeon.get_tile(hero.position).entity is hero
    assert engine.camera.location == hero.position
    assert engine.dungeon.tiles[hero.position].visible
    assert list(engine.entities) == [hero]


def test_hero_movement_moves_camera_and_fog(settings):
    engine = make_engine(settings)
    hero = engine.create_hero()
    target = engine.dungeon.random_open_room_tile()
    hero.move_to(target)
    assert engine.camera.location == target
    assert engine.dungeon.tiles[target].visible
    assert engine.dungeon.get_tile(target).entity is hero


def test_create_monster(settings):
    engine = make_engine(settings)
    monster = engine.create_monster()
    assert monster.team is Team.MONSTER
    assert engine.hero is None
    assert engine.dungeon.get_tile(monster.position).entity is monster


def test_remove_entity(settings):
    engine = make_engine(settings)
    monster = engine.create_monster()
    engine.remove_entity(monster)
    assert engine.dungeon.get_tile(monster.position).entity is None
    assert not monster.alive


def test_run_without_hero_raises(settings):
    engine = make_engine(settings)
    with pytest.raises(RuntimeError):
        engine.run()


def test_run_stops_on_quit_after_rendering(settings):
    engine = make_engine(settings, [["Quit"]])
    engine.create_hero()
    engine.run()
    assert engine.graphics.redraws == 1
    assert any(rect[:2] == (Vec(10, 10), Vec(320, 40)) for rect in engine.graphics.rects)


def test_run_with_dead_hero_does_nothing(settings):
    engine = make_engine(settings)
    hero = engine.create_hero()
    engine.remove_entity(hero)
    engine.run()
    assert engine.graphics.redraws == 0


def test_zoom_keys(settings):
    engine = make_engine(settings, [["=", "="], ["-"]])
    engine.create_hero()
    engine.run()
    assert engine.camera.zoom == 2


def test_zoom_out_stops_at_one(settings):
    engine = make_engine(settings, [["-", "-"]])
    engine.create_hero()
    engine.run()
    assert engine.camera.zoom == 1


def test_other_keys_become_last_keypress(settings):
    engine = make_engine(settings, [["X"]])
    engine.create_hero()
    engine.run()
    assert engine.input.get_last_keypress() == "X"