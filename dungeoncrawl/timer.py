"""Measures wall-clock time between successive calls."""

from __future__ import annotations

import time


class Timer:
    """Reports seconds elapsed since creation or the previous call."""

    def __init__(self) -> None:
        self._previous = time.perf_counter()

    def elapsed(self) -> float:
        current = time.perf_counter()
        difference = current - self._previous
        self._previous = current
        return difference