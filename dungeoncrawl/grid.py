"""A fixed-size two-dimensional grid addressed by (x, y)."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, TypeVar

from .vec import Vec

T = TypeVar("T")


class Grid(Generic[T]):
    """A width x height grid of values, indexed with a Vec or an (x, y) pair."""

    def __init__(self, width: int, height: int, fill: T | None = None, *,
                 factory: Callable[[], T] | None = None) -> None:
        if width <= 0:
            raise ValueError(f"Value width = {width} must be greater than 0")
        if height <= 0:
            raise ValueError(f"Value height = {height} must be greater than 0")
        self.width = width
        self.height = height
        count = width * height
        if factory is None:
            self._values: list = [fill] * count
        else:
            self._values = [factory() for _ in range(count)]

    def within_bounds(self, position: Vec | Iterable[int]) -> bool:
        """Whether the position lies inside the grid."""
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def check_bounds(self, position: Vec | Iterable[int]) -> None:
        """Raise IndexError if the position lies outside the grid."""
        if not self.within_bounds(position):
            x, y = position
            raise IndexError(
                f"({x}, {y}) is out of bounds for an array with size "
                f"({self.width}, {self.height})"
            )

    def _index(self, position: Vec | Iterable[int]) -> int:
        self.check_bounds(position)
        x, y = position
        return self.width * y + x

    def __getitem__(self, position: Vec | Iterable[int]) -> T:
        return self._values[self._index(position)]

    def __setitem__(self, position: Vec | Iterable[int], value: T) -> None:
        self._values[self._index(position)] = value

    def positions(self) -> Iterator[Vec]:
        """All positions, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield Vec(x, y)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __str__(self) -> str:
        rows = (
            "".join(str(self._values[self.width * y + x]) for x in range(self.width))
            for y in range(self.height)
        )
        return "".join(row + "\n" for row in rows)