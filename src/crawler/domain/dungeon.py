"""Dungeon container tying the grid, entities and start position together."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from crawler.core.types import Position
from crawler.domain.grid import Grid
from crawler.domain.registry import EntityRegistry
from crawler.domain.rooms import Room


@dataclass
class Dungeon:
    """A generated level.

    ``rooms`` lists the accepted rooms in corridor-connection order; it is
    kept for inspection and is never persisted.
    """

    grid: Grid
    entities: EntityRegistry = field(default_factory=EntityRegistry)
    start_x: int = 0
    start_y: int = 0
    rooms: Tuple[Room, ...] = ()

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def start(self) -> Position:
        return (self.start_x, self.start_y)

    def set_start(self, x: int, y: int) -> None:
        self.start_x = x
        self.start_y = y

    def is_walkable(self, x: int, y: int) -> bool:
        return self.grid.is_walkable(x, y)

    def is_free_for_enemy(self, x: int, y: int) -> bool:
        """True when an enemy may step onto (x, y)."""
        return self.grid.is_walkable(x, y) and not self.entities.is_occupied_by_living_enemy(x, y)
