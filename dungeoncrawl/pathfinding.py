"""Breadth-first path search over the dungeon."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from .vec import Vec

if TYPE_CHECKING:
    from .dungeon import Dungeon

Path = list[Vec]


def breadth_first(dungeon: Dungeon, start: Vec, goal: Vec) -> Path:
    """Shortest path of non-wall tiles from start to goal, or an empty list."""
    frontier = deque([start])
    came_from: dict[Vec, Vec] = {start: start}

    while frontier:
        current = frontier.popleft()
        if current == goal:
            break
        for nxt in dungeon.neighbors(current):
            if not dungeon.tiles[nxt].is_wall() and nxt not in came_from:
                frontier.append(nxt)
                came_from[nxt] = current

    if goal not in came_from:
        return []

    path = []
    current = goal
    while current != start:
        path.append(current)
        current = came_from[current]
    path.append(start)
    path.reverse()
    return path