from types import SimpleNamespace

from dungeoncrawl.actions import CloseDoor, Move, OpenDoor, Rest, Wander
from dungeoncrawl.door import Door
from dungeoncrawl.dungeon import Dungeon
from dungeoncrawl.entities import Entities
from dungeoncrawl.entity import Entity, Team
from dungeoncrawl.events import Events
from dungeoncrawl.grid import Grid
from dungeoncrawl.room import Room
from dungeoncrawl.sprite import Sprite
from dungeoncrawl.tile import Tile, TileType
from dungeoncrawl.updatefov import UpdateFOV
from dungeoncrawl.vec import Vec

DOOR_POSITION = Vec(2, 3)


def make_engine(with_door=False):
    tiles = Grid(5, 5, factory=Tile)
    for pos in tiles.positions():
        tile = tiles[pos]
        if pos.x in (0, 4) or pos.y in (0, 4):
            tile.type = TileType.WALL
        else:
            tile.type = TileType.FLOOR
            tile.walkable = True
    if with_door:
        tile = tiles[DOOR_POSITION]
        tile.type = TileType.DOOR
        tile.walkable = False
        tile.door = Door(tile, True, Sprite(), Sprite())
    dungeon = Dungeon(tiles, [Room(Vec(1, 1), Vec(3, 3))])
    return SimpleNamespace(dungeon=dungeon, events=Events(), hero=None)


def test_rest_succeeds():
    engine = make_engine()
    entity = Entity(engine, Vec(2, 2), Team.HERO)
    result = Rest().perform(engine, entity)
    assert result.succeeded is True
    assert result.next_action is None


def test_move_onto_floor():
    engine = make_engine()
    entity = Entity(engine, Vec(2, 2), Team.HERO)
    result = Move(Vec(1, 0)).perform(engine, entity)
    assert result.succeeded
    assert entity.position == Vec(3, 2)
    assert engine.dungeon.get_tile(Vec(3, 2)).entity is entity
    assert engine.dungeon.get_tile(Vec(2, 2)).entity is None


def test_move_into_wall_fails_but_turns():
    engine = make_engine()
    entity = Entity(engine, Vec(1, 1), Team.HERO)
    result = Move(Vec(-1, 0)).perform(engine, entity)
    assert not result.succeeded
    assert result.next_action is None
    assert entity.position == Vec(1, 1)
    assert entity.direction == Vec(-1, 0)


def test_move_into_closed_door_opens_it_instead():
    engine = make_engine(with_door=True)
    entity = Entity(engine, Vec(2, 2), Team.HERO)
    result = Move(Vec(0, 1)).perform(engine, entity)
    assert not result.succeeded
    assert isinstance(result.next_action, OpenDoor)
    assert entity.position == Vec(2, 2)


def test_open_door_opens_neighbor_and_queues_fov_update():
    engine = make_engine(with_door=True)
    entity = Entity(engine, Vec(2, 2), Team.HERO)
    result = OpenDoor().perform(engine, entity)
    tile = engine.dungeon.get_tile(DOOR_POSITION)
    assert result.succeeded
    assert tile.door.is_open()
    assert tile.walkable
    assert not engine.events.empty()


def test_open_door_fails_without_closed_doors():
    engine = make_engine(with_door=True)
    entity = Entity(engine, Vec(2, 2), Team.HERO)
    OpenDoor().perform(engine, entity)
    assert OpenDoor().perform(engine, entity).succeeded is False
    assert len(engine.events) == 1


def test_close_door_after_opening():
    engine = make_engine(with_door=True)
    entity = Entity(engine, Vec(2, 2), Team.HERO)
    OpenDoor().perform(engine, entity)
    result = CloseDoor().perform(engine, entity)
    tile = engine.dungeon.get_tile(DOOR_POSITION)
    assert result.succeeded
    assert not tile.door.is_open()
    assert not tile.walkable
    assert len(engine.events) == 2


def test_close_door_fails_when_nothing_open():
    engine = make_engine(with_door=True)
    entity = Entity(engine, Vec(2, 2), Team.HERO)
    result = CloseDoor().perform(engine, entity)
    assert result.succeeded is False
    assert engine.events.empty()


def test_events_queued_are_fov_updates():
    engine = make_engine(with_door=True)
    entity = Entity(engine, Vec(2, 2), Team.HERO)
    engine.hero = entity
    OpenDoor().perform(engine, entity)
    engine.events.execute(engine)
    assert engine.events.empty()
    assert engine.dungeon.get_tile(DOOR_POSITION).visible
    created = engine.events.create_event(UpdateFOV)
    assert isinstance(created, UpdateFOV)


def test_wander_picks_open_neighbor():
    engine = make_engine()
    entity = Entity(engine, Vec(1, 1), Team.MONSTER)
    for _ in range(20):
        result = Wander().perform(engine, entity)
        assert not result.succeeded
        assert isinstance(result.next_action, Move)
        assert result.next_action.direction in {Vec(1, 0), Vec(0, 1)}


def test_wander_rests_when_boxed_in():
    engine = make_engine()
    entity = Entity(engine, Vec(1, 1), Team.MONSTER)
    Entity(engine, Vec(2, 1), Team.MONSTER)
    Entity(engine, Vec(1, 2), Team.MONSTER)
    result = Wander().perform(engine, entity)
    assert result.succeeded is False
    assert isinstance(result.next_action, Rest)
    assert result.next_action.perform(engine, entity).succeeded is True
    assert entity.position == Vec(1, 1)


def test_chained_move_opens_door_through_entities():
    engine = make_engine(with_door=True)
    entity = Entity(engine, Vec(2, 2), Team.HERO)
    entity.behavior = lambda eng, ent: Move(Vec(0, 1))
    entity.energy = entity.speed
    entities = Entities()
    entities.add(entity)
    assert entities.take_turn(engine) is True
    assert engine.dungeon.get_tile(DOOR_POSITION).door.is_open()
    assert entity.position == Vec(2, 2)