"""A turn-based roguelike: dungeon generation, field of view, turns and a pygame front end."""

__version__ = "0.1.0"