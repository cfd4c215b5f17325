"""Symmetric shadowcasting field of view."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, replace
from fractions import Fraction
from typing import Callable

from .vec import Vec


def round_ties_up(n: float | Fraction) -> int:
    return math.floor(n + Fraction(1, 2))


def round_ties_down(n: float | Fraction) -> int:
    return math.ceil(n - Fraction(1, 2))


class Cardinal(enum.Enum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


@dataclass(frozen=True)
class Quadrant:
    direction: Cardinal
    origin: Vec

    def transform(self, tile: Vec) -> Vec:
        """Convert (row, col) quadrant coordinates into dungeon (x, y)."""
        row, col = tile
        if self.direction is Cardinal.NORTH:
            return self.origin + Vec(col, -row)
        if self.direction is Cardinal.SOUTH:
            return self.origin + Vec(col, row)
        if self.direction is Cardinal.EAST:
            return self.origin + Vec(row, col)
        return self.origin + Vec(-row, col)


@dataclass
class Row:
    depth: int
    start_slope: Fraction
    end_slope: Fraction

    def tiles(self) -> list[Vec]:
        """The (depth, col) tiles of this row between its slopes."""
        min_col = round_ties_up(self.depth * self.start_slope)
        max_col = round_ties_down(self.depth * self.end_slope)
        return [Vec(self.depth, col) for col in range(min_col, max_col + 1)]

    def next(self) -> Row:
        return Row(self.depth + 1, self.start_slope, self.end_slope)


def slope(tile: Vec) -> Fraction:
    row_depth, col = tile
    return Fraction(2 * col - 1, 2 * row_depth)


def is_symmetric(row: Row, tile: Vec) -> bool:
    _, col = tile
    return row.depth * row.start_slope <= col <= row.depth * row.end_slope


class FieldOfView:
    """Computes the set of positions visible from a point."""

    def compute(self, position: Vec, is_opaque: Callable[[Vec], bool]) -> set[Vec]:
        visible = {position}
        for direction in Cardinal:
            quadrant = Quadrant(direction, position)
            self._scan(Row(1, Fraction(-1), Fraction(1)), quadrant, is_opaque, visible)
        return visible

    @staticmethod
    def _scan(first_row: Row, quadrant: Quadrant, is_opaque: Callable[[Vec], bool],
              visible: set[Vec]) -> None:
        def is_wall(tile: Vec | None) -> bool:
            return tile is not None and is_opaque(quadrant.transform(tile))

        def is_floor(tile: Vec | None) -> bool:
            return tile is not None and not is_opaque(quadrant.transform(tile))

        pending = [first_row]
        while pending:
            row = replace(pending.pop())
            prev_tile: Vec | None = None
            for tile in row.tiles():
                if is_wall(tile) or is_symmetric(row, tile):
                    visible.add(quadrant.transform(tile))
                if is_wall(prev_tile) and is_floor(tile):
                    row.start_slope = slope(tile)
                if is_floor(prev_tile) and is_wall(tile):
                    next_row = row.next()
                    next_row.end_slope = slope(tile)
                    pending.append(next_row)
                prev_tile = tile
            if is_floor(prev_tile):
                pending.append(row.next())