# dungeoncrawl

A turn-based roguelike. Each game builds a new dungeon from rooms, winding
corridors and doors. A wizard explores it while forty demons wander about.
Tiles outside the hero's field of view are covered by fog of war. Tiles the
hero has already seen stay dimly lit.

## Installing

```
pip install .
```

pygame provides the window, the sprites and the sound. To run the tests:

```
pip install .[test]
pytest
```

## Running

```
dungeoncrawl
```

This reads `settings.txt` from the current directory. Pass a path to use
another file:

```
dungeoncrawl path/to/settings.txt
```

If anything goes wrong, such as a missing file, a missing parameter or a sprite
that cannot be found, the message is printed and the command exits with
status 1.

### settings.txt

The file holds whitespace-separated `key value` pairs. Every key below is
required:

| key | meaning |
| --- | --- |
| `title` | window title (a single word) |
| `screen_width`, `screen_height` | window size in pixels |
| `tile_size` | pixels per tile |
| `zoom` | starting zoom level of the camera |
| `map_width`, `map_height` | dungeon size in tiles; odd numbers, at least 19 |
| `room_placement_attempts` | how many times the builder tries to place a room |
| `tiles`, `heroes`, `monsters`, `items`, `effects` | sprite sheet description files |
| `sounds` | sound list file; it must define a sound named `background` |

A sprite sheet description starts with the image file name. After that, each
entry reads `name x y width height [frames]`. A sprite with several frames
takes them side by side, left to right. A sound list holds `name file` pairs.
File names inside both kinds of file are prefixed with the description file's
path up to and including its first `/`. For `assets/tiles.txt`, that prefix
is `assets/`.

The sprites the game asks for include `wizard`, `demon_big`, `torch`, the
`floor_*`, `wall_*` and `floor_broken_*` tiles, `door_horizontal` and
`door_vertical`.

## Controls

| key | action |
| --- | --- |
| W / Up | move up |
| A / Left | move left |
| S / Down | move down |
| D / Right | move right |
| R | rest for a turn |
| O | open adjacent doors |
| C | close adjacent doors |
| `=` | zoom in |
| `-` | zoom out |

Walking into a closed door opens it. The game ends when the window is closed
or the hero dies.

## What the game does not do

There is no combat yet. Heroes and monsters have health, and `Entity` has
`take_damage`, but no action in the game deals damage. The `Bite` item leaves
its target unchanged. Nothing places items in the dungeon or picks them up,
so the inventory bar stays empty. Games are not saved.

## Using the pieces

The engine's building blocks can be used on their own:

- `dungeoncrawl.builder.Builder` generates dungeon layouts as a `Grid` of
  numbers: `-1` for walls surrounded by walls, `0` for walls, `1` for
  walkable tiles and `2` for doors. `format_layout` renders a layout as text.
- `dungeoncrawl.fov.FieldOfView` computes symmetric shadow-casting fields of
  view for any `is_opaque(position)` callable.
- `dungeoncrawl.pathfinding.breadth_first` and `Dungeon.calculate_path` find
  shortest paths around walls.
- `dungeoncrawl.vec.Vec` is an immutable integer 2D vector.

```python
from dungeoncrawl.builder import Builder, format_layout

layout, rooms = Builder(200).generate(41, 21)
print(format_layout(layout))
```