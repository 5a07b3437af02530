"""Domain-level run state tracking."""
from __future__ import annotations

from dataclasses import dataclass

from crawler.core.rng import RNG
from crawler.domain.dungeon import Dungeon
from crawler.domain.entities import Player


@dataclass
class RunState:
    """Everything a single run needs between turns."""

    seed: int
    rng: RNG
    dungeon: Dungeon
    player: Player
    enemy_count: int
    item_count: int
    turn: int = 0

    @property
    def is_over(self) -> bool:
        return not self.player.is_alive
