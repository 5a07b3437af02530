"""Seeded procedural dungeon generation."""
from __future__ import annotations

import logging
from typing import Callable, List

from crawler.core.rng import RNG, unseeded_rng
from crawler.core.types import CorridorOrientationSource
from crawler.domain.dungeon import Dungeon
from crawler.domain.entities import Enemy, Item, ItemType
from crawler.domain.grid import Grid
from crawler.domain.rooms import Room, manhattan_distance
from crawler.domain.tiles import Tile

logger = logging.getLogger(__name__)

MIN_ROOM_SIZE = 4
MAX_ROOM_SIZE = 8
MAX_ROOMS = 10
MAX_ROOM_ATTEMPTS = 200
MAX_PLACEMENT_ATTEMPTS = 500
MIN_ENEMY_START_DISTANCE = 3

ENEMY_MIN_HP = 6
ENEMY_MAX_HP = 12
ENEMY_MIN_ATTACK = 2
ENEMY_MAX_ATTACK = 4
ENEMY_KINDS = (("goblin", "g"), ("slime", "s"))

_VALID_ORIENTATION_SOURCES: tuple[CorridorOrientationSource, ...] = ("seeded", "independent")


class DungeonGenerator:
    """Carves rooms and corridors into a fresh grid and scatters entities.

    Every random draw comes from the RNG handed to ``generate`` in a fixed
    order: room attempts, corridor orientations, enemy placement, item
    placement. With ``corridor_orientation="independent"`` the corridor coin
    flips come from a fresh unseeded source instead, so the carved layout is
    no longer reproducible from the seed.
    """

    def __init__(
        self,
        *,
        corridor_orientation: CorridorOrientationSource = "seeded",
        orientation_rng_factory: Callable[[], RNG] = unseeded_rng,
    ) -> None:
        if corridor_orientation not in _VALID_ORIENTATION_SOURCES:
            raise ValueError(f"Unknown corridor orientation source '{corridor_orientation}'.")
        self._corridor_orientation = corridor_orientation
        self._orientation_rng_factory = orientation_rng_factory

    def generate(
        self,
        width: int,
        height: int,
        rng: RNG,
        *,
        enemy_count: int,
        item_count: int,
    ) -> Dungeon:
        """Build a populated dungeon; desired counts are upper bounds."""
        dungeon = Dungeon(grid=Grid(width, height))

        rooms = self._place_rooms(dungeon.grid, rng)
        ordered = sorted(rooms, key=lambda room: room.center_x + room.center_y)
        self._connect_rooms(dungeon.grid, ordered, rng)
        dungeon.rooms = tuple(ordered)

        start_room = ordered[0]
        dungeon.set_start(start_room.center_x, start_room.center_y)

        placed_enemies = self._place_enemies(dungeon, rng, enemy_count)
        placed_items = self._place_items(dungeon, rng, item_count)

        logger.debug(
            "Generated %dx%d dungeon: %d rooms, start=%s, %d/%d enemies, %d/%d items",
            width,
            height,
            len(ordered),
            dungeon.start,
            placed_enemies,
            enemy_count,
            placed_items,
            item_count,
        )
        return dungeon

    # -----------------------
    # Rooms & corridors
    # -----------------------
    def _place_rooms(self, grid: Grid, rng: RNG) -> List[Room]:
        rooms: List[Room] = []
        attempts = 0
        while len(rooms) < MAX_ROOMS and attempts < MAX_ROOM_ATTEMPTS:
            attempts += 1
            room_width = rng.randint(MIN_ROOM_SIZE, MAX_ROOM_SIZE)
            room_height = rng.randint(MIN_ROOM_SIZE, MAX_ROOM_SIZE)
            x = rng.randint(1, max(1, grid.width - room_width - 1))
            y = rng.randint(1, max(1, grid.height - room_height - 1))
            room = Room(x, y, room_width, room_height)
            if any(room.intersects(existing) for existing in rooms):
                continue
            rooms.append(room)
            _carve_room(grid, room)

        if not rooms:
            fallback = Room(grid.width // 4, grid.height // 4, grid.width // 2, grid.height // 2)
            logger.debug("No room fit after %d attempts; using central fallback %s", attempts, fallback)
            rooms.append(fallback)
            _carve_room(grid, fallback)
        return rooms

    def _connect_rooms(self, grid: Grid, ordered: List[Room], rng: RNG) -> None:
        for first, second in zip(ordered, ordered[1:]):
            horizontal_first = self._orientation_source(rng).coin_flip()
            _carve_corridor(
                grid,
                first.center_x,
                first.center_y,
                second.center_x,
                second.center_y,
                horizontal_first=horizontal_first,
            )

    def _orientation_source(self, rng: RNG) -> RNG:
        if self._corridor_orientation == "independent":
            return self._orientation_rng_factory()
        return rng

    # -----------------------
    # Entity placement
    # -----------------------
    def _place_enemies(self, dungeon: Dungeon, rng: RNG, desired: int) -> int:
        placed = 0
        samples = 0
        start_x, start_y = dungeon.start
        while placed < desired and samples < MAX_PLACEMENT_ATTEMPTS:
            samples += 1
            x = rng.randrange(dungeon.width)
            y = rng.randrange(dungeon.height)
            if (x, y) == (start_x, start_y):
                continue
            if not dungeon.is_walkable(x, y) or dungeon.entities.is_occupied_by_living_enemy(x, y):
                continue
            if manhattan_distance(x, y, start_x, start_y) < MIN_ENEMY_START_DISTANCE:
                continue
            hp = rng.randint(ENEMY_MIN_HP, ENEMY_MAX_HP)
            attack = rng.randint(ENEMY_MIN_ATTACK, ENEMY_MAX_ATTACK)
            kind, glyph = ENEMY_KINDS[0] if rng.coin_flip() else ENEMY_KINDS[1]
            dungeon.entities.add_enemy(Enemy(x=x, y=y, hp=hp, attack=attack, glyph=glyph, kind=kind))
            placed += 1
        if placed < desired:
            logger.debug("Placed %d of %d enemies after %d samples", placed, desired, samples)
        return placed

    def _place_items(self, dungeon: Dungeon, rng: RNG, desired: int) -> int:
        placed = 0
        samples = 0
        while placed < desired and samples < MAX_PLACEMENT_ATTEMPTS:
            samples += 1
            x = rng.randrange(dungeon.width)
            y = rng.randrange(dungeon.height)
            if not dungeon.is_walkable(x, y) or (x, y) == dungeon.start:
                continue
            if dungeon.entities.item_at(x, y) is not None:
                continue
            item_type = ItemType.POTION if rng.coin_flip() else ItemType.TREASURE
            dungeon.entities.add_item(Item(x=x, y=y, item_type=item_type))
            placed += 1
        if placed < desired:
            logger.debug("Placed %d of %d items after %d samples", placed, desired, samples)
        return placed


def generate_dungeon(
    width: int,
    height: int,
    seed: int,
    enemy_count: int,
    item_count: int,
    *,
    corridor_orientation: CorridorOrientationSource = "seeded",
) -> Dungeon:
    """Generate a dungeon from a seed using a private RNG stream."""
    generator = DungeonGenerator(corridor_orientation=corridor_orientation)
    return generator.generate(width, height, RNG(seed), enemy_count=enemy_count, item_count=item_count)


def _carve_room(grid: Grid, room: Room) -> None:
    for x, y in room.cells():
        grid.set_tile(x, y, Tile.FLOOR)


def _carve_corridor(grid: Grid, x1: int, y1: int, x2: int, y2: int, *, horizontal_first: bool) -> None:
    if horizontal_first:
        _carve_horizontal(grid, x1, x2, y1)
        _carve_vertical(grid, y1, y2, x2)
    else:
        _carve_vertical(grid, y1, y2, x1)
        _carve_horizontal(grid, x1, x2, y2)


def _carve_horizontal(grid: Grid, x1: int, x2: int, y: int) -> None:
    for x in range(min(x1, x2), max(x1, x2) + 1):
        grid.set_tile(x, y, Tile.FLOOR)


def _carve_vertical(grid: Grid, y1: int, y2: int, x: int) -> None:
    for y in range(min(y1, y2), max(y1, y2) + 1):
        grid.set_tile(x, y, Tile.FLOOR)
