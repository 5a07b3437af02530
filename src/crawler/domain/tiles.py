"""Map tile definitions."""
from __future__ import annotations

from enum import Enum


class Tile(Enum):
    """A grid cell type with its display glyph and walkable flag."""

    WALL = ("#", False)
    FLOOR = (".", True)

    def __init__(self, glyph: str, walkable: bool) -> None:
        self.glyph = glyph
        self.walkable = walkable
