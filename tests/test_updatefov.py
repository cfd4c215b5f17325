from types import SimpleNamespace

from dungeoncrawl.dungeon import Dungeon
from dungeoncrawl.entity import Entity, Team
from dungeoncrawl.events import Events
from dungeoncrawl.grid import Grid
from dungeoncrawl.room import Room
from dungeoncrawl.tile import Tile, TileType
from dungeoncrawl.updatefov import UpdateFOV
from dungeoncrawl.vec import Vec


def make_engine():
    tiles = Grid(5, 5, factory=Tile)
    for pos in tiles.positions():
        tile = tiles[pos]
        if pos.x in (0, 4) or pos.y in (0, 4):
            tile.type = TileType.WALL
        else:
            tile.type = TileType.FLOOR
            tile.walkable = True
    dungeon = Dungeon(tiles, [Room(Vec(1, 1), Vec(3, 3))])
    engine = SimpleNamespace(dungeon=dungeon, events=Events(), hero=None)
    engine.hero = Entity(engine, Vec(2, 2), Team.HERO)
    return engine


def test_execute_marks_hero_tile_visible():
    engine = make_engine()
    assert not engine.dungeon.get_tile(Vec(2, 2)).visible
    UpdateFOV().execute(engine)
    assert engine.dungeon.get_tile(Vec(2, 2)).visible
    assert engine.dungeon.get_tile(Vec(1, 1)).visible


def test_lasts_one_frame_in_event_queue():
    engine = make_engine()
    event = engine.events.create_event(UpdateFOV)
    engine.events.execute(engine)
    assert event.is_done()
    assert engine.events.empty()
    assert engine.dungeon.get_tile(Vec(3, 3)).visible


def test_follows_hero_after_move():
    engine = make_engine()
    UpdateFOV().execute(engine)
    engine.hero.move_to(Vec(1, 1))
    UpdateFOV().execute(engine)
    assert engine.dungeon.fog.brightness(Vec(1, 1)) == 0.0
    assert engine.dungeon.get_tile(Vec(1, 1)).visible