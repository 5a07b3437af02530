"""Player action variants."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Direction(Enum):
    """Cardinal step with its (dx, dy) offset; y grows downwards."""

    NORTH = (0, -1)
    SOUTH = (0, 1)
    WEST = (-1, 0)
    EAST = (1, 0)

    def __init__(self, dx: int, dy: int) -> None:
        self.dx = dx
        self.dy = dy


# Neighbour scan order for melee swings.
CARDINAL_OFFSETS = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass(frozen=True, slots=True)
class MoveAction:
    direction: Direction


@dataclass(frozen=True, slots=True)
class AttackAction:
    """Swing at every living enemy on the four neighbouring tiles."""


@dataclass(frozen=True, slots=True)
class DrinkPotionAction:
    pass


@dataclass(frozen=True, slots=True)
class SaveAndQuitAction:
    pass


PlayerAction = Union[MoveAction, AttackAction, DrinkPotionAction, SaveAndQuitAction]
TurnAction = Union[MoveAction, AttackAction, DrinkPotionAction]
