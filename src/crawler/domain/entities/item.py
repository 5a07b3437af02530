"""Collectible item model."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ItemType(Enum):
    POTION = "potion"
    TREASURE = "treasure"


ITEM_GLYPHS = {
    ItemType.POTION: "!",
    ItemType.TREASURE: "$",
}


@dataclass(frozen=True, slots=True)
class Item:
    """A potion or treasure lying on a floor tile."""

    x: int
    y: int
    item_type: ItemType

    @property
    def glyph(self) -> str:
        return ITEM_GLYPHS[self.item_type]

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)
