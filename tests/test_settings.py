import pytest

from dungeoncrawl.settings import Settings

CONTENT = """\
title Crawler
screen_width 1280
screen_height 720
tile_size 16
zoom 3
tiles assets/tiles.txt
heroes assets/heroes.txt
monsters assets/monsters.txt
items assets/items.txt
effects assets/effects.txt
sounds assets/sounds.txt
map_width 51
map_height 31
room_placement_attempts 200
"""


def write(tmp_path, text):
    path = tmp_path / "settings.txt"
    path.write_text(text)
    return path


def test_values_are_read(tmp_path):
    settings = Settings(write(tmp_path, CONTENT))
    assert settings.title == "Crawler"
    assert settings.screen_width == 1280
    assert settings.screen_height == 720
    assert settings.zoom == 3
    assert settings.tiles == "assets/tiles.txt"
    assert settings.sounds == "assets/sounds.txt"
    assert settings.map_width == 51
    assert settings.room_placement_attempts == 200


def test_path_is_absolute(tmp_path, monkeypatch):
    write(tmp_path, CONTENT)
    monkeypatch.chdir(tmp_path)
    settings = Settings("settings.txt")
    assert settings.path.is_absolute()
    assert settings.path == tmp_path / "settings.txt"


def test_later_value_wins(tmp_path):
    settings = Settings(write(tmp_path, CONTENT + "zoom 5\n"))
    assert settings.zoom == 5


def test_missing_parameter_raises(tmp_path):
    text = "\n".join(line for line in CONTENT.splitlines() if not line.startswith("zoom"))
    with pytest.raises(KeyError, match="Parameter 'zoom' not found"):
        Settings(write(tmp_path, text))


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="Could not open settings file"):
        Settings(tmp_path / "absent.txt")


def test_non_numeric_value_raises(tmp_path):
    text = CONTENT.replace("tile_size 16", "tile_size big")
    with pytest.raises(ValueError, match="tile_size"):
        Settings(write(tmp_path, text))