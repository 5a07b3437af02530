"""Enemy runtime model."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, eq=False)
class Enemy:
    """A hostile creature on the grid.

    Dead enemies stay in the registry; ``is_alive`` is the only thing that
    changes when hit points run out.
    """

    x: int
    y: int
    hp: int
    attack: int
    glyph: str
    kind: str = "goblin"

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def damage(self, amount: int) -> None:
        self.hp -= amount

    def move_to(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
