"""Command that starts the game with a wizard and a horde of demons."""

from __future__ import annotations

import argparse
from typing import Sequence

from . import heroes, monsters
from .engine import Engine
from .settings import Settings

NUMBER_OF_MONSTERS = 40


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game; errors are reported on standard output."""
    parser = argparse.ArgumentParser(prog="dungeoncrawl", description="Play the dungeon game.")
    parser.add_argument("settings", nargs="?", default="settings.txt",
                        help="settings file (default: settings.txt)")
    args = parser.parse_args(argv)

    try:
        settings = Settings(args.settings)
        with Engine(settings) as engine:
            heroes.make_wizard(engine.create_hero())
            for _ in range(NUMBER_OF_MONSTERS):
                monsters.make_demon(engine.create_monster())
            engine.run()
    except Exception as error:  # report any failure and exit
        print(error.args[0] if error.args else error)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())