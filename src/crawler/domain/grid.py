"""Fixed-size tile grid."""
from __future__ import annotations

from typing import Iterator, List, Sequence

from crawler.domain.tiles import Tile


class Grid:
    """Width x height tile storage; out-of-bounds cells always read as walls."""

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._tiles: List[List[Tile]] = [[Tile.WALL for _ in range(width)] for _ in range(height)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def tile_at(self, x: int, y: int) -> Tile:
        """Return the tile at (x, y), or WALL when outside the grid."""
        if not self.in_bounds(x, y):
            return Tile.WALL
        return self._tiles[y][x]

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        """Overwrite a tile; coordinates outside the grid are ignored."""
        if self.in_bounds(x, y):
            self._tiles[y][x] = tile

    def is_walkable(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self._tiles[y][x].walkable

    def rows(self) -> Iterator[Sequence[Tile]]:
        """Yield each row top to bottom as a read-only tuple."""
        for row in self._tiles:
            yield tuple(row)

    def count(self, tile: Tile) -> int:
        return sum(row.count(tile) for row in self._tiles)
