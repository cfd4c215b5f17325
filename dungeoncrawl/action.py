"""Actions that entities perform, and the results they report."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .entity import Entity


@dataclass
class Result:
    """Outcome of an action: whether it succeeded and what to try instead."""

    succeeded: bool = False
    next_action: Action | None = None  # allows chaining of actions


class Action(abc.ABC):
    """Something an entity does on its turn."""

    @abc.abstractmethod
    def perform(self, engine: Any, entity: Entity) -> Result:
        """Carry the action out and report how it went."""


def success() -> Result:
    """The action was completed and the entity's turn is over."""
    return Result(True, None)


def failure() -> Result:
    """The action could not be done; the entity gets another turn."""
    return Result(False, None)


def alternative(action: Action) -> Result:
    """Substitute another action for the current one."""
    return Result(False, action)