"""Random helpers shared by dungeon generation and behaviours."""

from __future__ import annotations

import random
from collections.abc import Mapping
from typing import Any, MutableSequence


def randint(low: int, high: int) -> int:
    """A uniform integer in [low, high]; low must be less than high."""
    if low >= high:
        raise ValueError(f"min must be less than max: randint({low}, {high})")
    return random.randint(low, high)


def probability(percentage: int) -> bool:
    """True with the given percent chance."""
    if percentage < 0:
        raise ValueError(f"percentage must be positive: {percentage}")
    return randint(0, 99) < percentage


def random_choice(items: Any) -> Any:
    """A random element; for a mapping, a random (key, value) pair."""
    choices = list(items.items()) if isinstance(items, Mapping) else list(items)
    if not choices:
        raise IndexError("Container is empty")
    if len(choices) == 1:
        return choices[0]
    return choices[randint(0, len(choices) - 1)]


def shuffle(items: MutableSequence) -> None:
    """Shuffle a sequence in place."""
    random.shuffle(items)