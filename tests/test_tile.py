from dungeoncrawl.sprite import Sprite
from dungeoncrawl.tile import Tile, TileType


def test_default_tile():
    tile = Tile()
    assert tile.type is TileType.NONE
    assert tile.sprite == Sprite()
    assert not tile.is_visible()
    assert not tile.walkable
    assert not tile.has_door() and not tile.has_item() and not tile.has_entity()


def test_wall_and_door_follow_type():
    assert Tile(type=TileType.WALL).is_wall()
    assert not Tile(type=TileType.FLOOR).is_wall()
    assert Tile(type=TileType.DOOR).has_door()
    assert not Tile(type=TileType.WALL).has_door()


def test_item_and_entity_presence():
    tile = Tile(item=object(), entity=object())
    assert tile.has_item() and tile.has_entity()
    tile.entity = None
    assert not tile.has_entity()


def test_visibility_flag():
    tile = Tile()
    tile.visible = True
    assert tile.is_visible()


def test_default_sprites_are_independent():
    a, b = Tile(), Tile()
    a.sprite.angle = 5.0
    assert b.sprite.angle == 0.0