"""Random dungeon layout generation: rooms, maze corridors and connectors."""

from __future__ import annotations

from typing import Sequence

from .grid import Grid
from .randomness import probability, randint, random_choice, shuffle
from .room import Room, overlaps
from .vec import DIRECTIONS, Vec, distance

# layout values: -1 = surrounded wall, 0 = wall, 1 = walkable, 2 = connector (door)
Connector = tuple[Vec, int, int]


def format_layout(layout: Grid[int]) -> str:
    """Render a layout as text inside a border; surrounded walls show as spaces."""
    border = "+" + "-" * layout.width + "+\n"
    lines = [border]
    for y in range(layout.height):
        cells = "".join(
            " " if layout[x, y] == -1 else str(layout[x, y]) for x in range(layout.width)
        )
        lines.append(f"|{cells}|\n")
    lines.append(border)
    return "".join(lines)


class Builder:
    """Generates dungeon layouts made of rooms joined by winding corridors."""

    def __init__(self, room_placement_attempts: int) -> None:
        self.room_placement_attempts = room_placement_attempts
        self._id = 1
        self._rooms: list[Room] = []

    def generate(self, width: int, height: int) -> tuple[Grid[int], list[Room]]:
        """Create a layout of the given odd dimensions and the rooms placed in it."""
        if width % 2 == 0 or height % 2 == 0:
            raise ValueError(
                f"screen_width and screen_height must be odd numbers: ({width}, {height})"
            )
        if width < 19 or height < 19:
            raise ValueError(
                f"screen_width and screen_height must be at least 19: ({width}, {height})"
            )

        layout: Grid[int] = Grid(width, height, 0)
        self._rooms = []

        self._add_rooms(layout)
        self._create_corridors(layout)

        connectors = self._reduce_connectors(self._find_all_connectors(layout))

        for y in range(1, layout.height):
            for x in range(1, layout.width):
                if layout[x, y] != 0:
                    layout[x, y] = 1

        for position in connectors:
            layout[position] = 2

        self._remove_dead_ends(layout)
        self._mark_surrounded_walls(layout)

        return layout, list(self._rooms)

    def generate_test_dungeon(self, width: int, height: int) -> tuple[Grid[int], list[Room]]:
        """A single walled room with one extra wall tile at (3, 2)."""
        layout: Grid[int] = Grid(width, height, 0)
        for position in layout.positions():
            x, y = position
            on_border = y in (0, layout.height - 1) or x in (0, layout.width - 1)
            layout[position] = 0 if on_border else 1
        layout[3, 2] = 0
        self._rooms.append(Room(Vec(1, 1), Vec(layout.width - 2, layout.height - 2)))
        return layout, list(self._rooms)

    # rooms

    def _add_rooms(self, layout: Grid[int]) -> None:
        for _ in range(self.room_placement_attempts):
            new_room = self._generate_room(layout)
            if (new_room.position.x >= layout.width - 2
                    or new_room.position.y >= layout.height - 2):
                continue
            if any(overlaps(new_room, room) for room in self._rooms):
                continue
            self._rooms.append(new_room)
            self._imprint_room(layout, new_room)
            self._id += 1

    @staticmethod
    def _generate_room(layout: Grid[int]) -> Room:
        side = 1 + 2 * randint(1, 3)
        size_variation = 2 * randint(0, 1 + side // 2)
        if probability(50):
            size = Vec(side + size_variation, side)
        else:
            size = Vec(side, side + size_variation)
        x = randint(0, layout.width - 2 - size.x) // 2 * 2 + 1
        y = randint(0, layout.height - 2 - size.y) // 2 * 2 + 1
        return Room(Vec(x, y), size)

    def _imprint_room(self, layout: Grid[int], room: Room) -> None:
        for y in range(room.size.y):
            for x in range(room.size.x):
                layout[x + room.position.x, y + room.position.y] = self._id

    # corridors

    def _create_corridors(self, layout: Grid[int]) -> None:
        directions = list(DIRECTIONS)
        for y in range(1, layout.height, 2):
            for x in range(1, layout.width, 2):
                if layout[x, y] == 0:
                    shuffle(directions)
                    self._carve_corridor(layout, Vec(x, y), directions)
                    self._id += 1

    def _carve_corridor(self, layout: Grid[int], start: Vec,
                        directions: Sequence[Vec]) -> None:
        """Depth-first maze carving, each step working on its own copy of directions."""

        def enter(position: Vec, inherited: Sequence[Vec]) -> list | None:
            if layout[position] != 0:
                return None
            layout[position] = self._id
            own = list(inherited)
            ahead = position + own[0] * 2
            if not layout.within_bounds(ahead) or layout[ahead] != 0 or probability(10):
                shuffle(own)
            return [position, own, 0]

        stack = []
        first = enter(start, directions)
        if first is not None:
            stack.append(first)
        while stack:
            frame = stack[-1]
            position, own, index = frame
            if index >= len(own):
                stack.pop()
                continue
            frame[2] += 1
            direction = own[index]
            ahead = position + direction * 2
            if layout.within_bounds(ahead) and layout[ahead] == 0:
                layout[position + direction] = self._id
                child = enter(ahead, own)
                if child is not None:
                    stack.append(child)

    # connectors

    @staticmethod
    def _maybe_connector(layout: Grid[int], position: Vec) -> Connector | None:
        if layout[position] != 0:
            return None
        regions = {
            layout[position + direction]
            for direction in DIRECTIONS
            if layout[position + direction] > 0
        }
        if len(regions) != 2:
            return None
        first, second = sorted(regions)
        return position, first, second

    @classmethod
    def _find_all_connectors(cls, layout: Grid[int]) -> list[Connector]:
        connectors = []
        for y in range(1, layout.height - 1):
            for x in range(1, layout.width - 1):
                connector = cls._maybe_connector(layout, Vec(x, y))
                if connector is not None:
                    connectors.append(connector)
        return connectors

    @staticmethod
    def _reduce_connectors(connectors: list[Connector]) -> list[Vec]:
        """Merge all regions into one, keeping a few connectors between each pair."""
        if not connectors:
            return []

        graph: dict[int, dict[int, set[Vec]]] = {}
        for position, region_a, region_b in connectors:
            graph.setdefault(region_a, {}).setdefault(region_b, set()).add(position)
            graph.setdefault(region_b, {}).setdefault(region_a, set()).add(position)

        reduced: list[Vec] = []
        main, _ = random_choice(graph)

        while len(graph) > 1:
            other, linked = random_choice(graph[main])
            positions = set(linked)

            position = random_choice(positions)
            reduced.append(position)
            graph[main][other].discard(position)

            # occasionally keep a second connector, so paths are not all unique
            if positions and probability(25):
                additional = random_choice(positions)
                if distance(position, additional) > 1:
                    reduced.append(additional)

            graph[other].pop(main, None)
            graph[main].pop(other, None)
            for region, links in graph[other].items():
                graph[main].setdefault(region, links)
            del graph[other]
            for links in graph.values():
                links.pop(other, None)

        return reduced

    # clean-up

    @staticmethod
    def _remove_dead_ends(layout: Grid[int]) -> None:
        removed = True
        while removed:
            removed = False
            for y in range(1, layout.height - 1):
                for x in range(1, layout.width - 1):
                    position = Vec(x, y)
                    if layout[position] == 0:
                        continue
                    walls = sum(
                        1 for direction in DIRECTIONS if layout[position + direction] == 0
                    )
                    if walls >= 3:
                        layout[position] = 0
                        removed = True

    @staticmethod
    def _mark_surrounded_walls(layout: Grid[int]) -> None:
        surrounded = []
        for position in layout.positions():
            total = sum(
                layout[position.x + i, position.y + j]
                for j in (-1, 0, 1)
                for i in (-1, 0, 1)
                if layout.within_bounds((position.x + i, position.y + j))
            )
            if total == 0:
                surrounded.append(position)
        for position in surrounded:
            layout[position] = -1