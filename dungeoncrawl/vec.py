"""Integer 2D vectors and the four cardinal directions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


def _truncating_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


@dataclass(frozen=True, order=True)
class Vec:
    """An immutable integer vector; ordered by x, then y."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec:
        return Vec(-self.x, -self.y)

    def __mul__(self, scalar: int) -> Vec:
        if not isinstance(scalar, int):
            return NotImplemented
        return Vec(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: int) -> Vec:
        """Divide both components by an integer, truncating toward zero."""
        if not isinstance(scalar, int):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("Cannot divide a Vec by zero")
        return Vec(_truncating_div(self.x, scalar), _truncating_div(self.y, scalar))

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def distance(a: Vec, b: Vec) -> float:
    """Euclidean distance between two vectors."""
    difference = a - b
    return math.hypot(difference.x, difference.y)


DIRECTIONS: tuple[Vec, Vec, Vec, Vec] = (Vec(1, 0), Vec(0, 1), Vec(-1, 0), Vec(0, -1))