from __future__ import annotations

from itertools import combinations
from typing import List

import pytest

from crawler.core.rng import RNG
from crawler.domain.actions import Direction, MoveAction
from crawler.domain.dungeon import Dungeon
from crawler.domain.entities import ItemType, Player
from crawler.domain.rooms import Room, manhattan_distance
from crawler.domain.tiles import Tile
from crawler.services import dungeon_generator
from crawler.services.action_resolver import resolve_player_action
from crawler.services.dungeon_generator import DungeonGenerator, generate_dungeon

from tests.helpers.maps import reachable_from

SEEDS = [1, 7, 42, 1234, 987654321, 2**63 - 1]


def _layout(dungeon: Dungeon) -> tuple:
    return (
        tuple(tuple(tile.glyph for tile in row) for row in dungeon.grid.rows()),
        dungeon.start,
        tuple((e.x, e.y, e.hp, e.attack, e.glyph, e.kind) for e in dungeon.entities.enemies),
        tuple((i.x, i.y, i.item_type) for i in dungeon.entities.items),
        dungeon.rooms,
    )


@pytest.mark.parametrize("seed", SEEDS)
def test_same_inputs_produce_identical_dungeons(seed: int) -> None:
    first = generate_dungeon(50, 22, seed, 10, 10)
    second = generate_dungeon(50, 22, seed, 10, 10)

    assert _layout(first) == _layout(second)


def test_different_seeds_produce_different_layouts() -> None:
    layouts = {_layout(generate_dungeon(50, 22, seed, 10, 10))[0] for seed in SEEDS}

    assert len(layouts) > 1


@pytest.mark.parametrize("seed", SEEDS)
def test_rooms_never_overlap(seed: int) -> None:
    dungeon = generate_dungeon(50, 22, seed, 10, 10)

    assert 1 <= len(dungeon.rooms) <= 10
    for first, second in combinations(dungeon.rooms, 2):
        assert not first.intersects(second)


@pytest.mark.parametrize("seed", SEEDS)
def test_room_sizes_within_bounds(seed: int) -> None:
    dungeon = generate_dungeon(50, 22, seed, 0, 0)

    for room in dungeon.rooms:
        assert 4 <= room.width <= 8
        assert 4 <= room.height <= 8
        assert room.x >= 1 and room.y >= 1


@pytest.mark.parametrize("seed", SEEDS)
def test_every_room_reachable_from_start(seed: int) -> None:
    dungeon = generate_dungeon(50, 22, seed, 10, 10)

    reachable = reachable_from(dungeon, dungeon.start)

    for room in dungeon.rooms:
        for cell in room.cells():
            assert cell in reachable


@pytest.mark.parametrize("seed", SEEDS)
def test_start_is_center_of_room_with_smallest_center_sum(seed: int) -> None:
    dungeon = generate_dungeon(50, 22, seed, 0, 0)

    sums = [room.center_x + room.center_y for room in dungeon.rooms]
    assert sums == sorted(sums)
    assert dungeon.start == dungeon.rooms[0].center
    assert dungeon.is_walkable(*dungeon.start)


@pytest.mark.parametrize("seed", SEEDS)
def test_enemy_placement_rules(seed: int) -> None:
    dungeon = generate_dungeon(50, 22, seed, 10, 0)
    enemies = dungeon.entities.enemies

    assert len(enemies) == 10
    positions = [enemy.position for enemy in enemies]
    assert len(set(positions)) == len(positions)
    for enemy in enemies:
        assert dungeon.is_walkable(enemy.x, enemy.y)
        assert manhattan_distance(enemy.x, enemy.y, *dungeon.start) >= 3
        assert 6 <= enemy.hp <= 12
        assert 2 <= enemy.attack <= 4
        assert (enemy.kind, enemy.glyph) in {("goblin", "g"), ("slime", "s")}


@pytest.mark.parametrize("seed", SEEDS)
def test_item_placement_rules(seed: int) -> None:
    dungeon = generate_dungeon(50, 22, seed, 0, 10)
    items = dungeon.entities.items

    assert len(items) == 10
    positions = [item.position for item in items]
    assert len(set(positions)) == len(positions)
    for item in items:
        assert dungeon.is_walkable(item.x, item.y)
        assert item.position != dungeon.start
        assert item.item_type in (ItemType.POTION, ItemType.TREASURE)


def test_impossible_counts_degrade_silently() -> None:
    dungeon = generate_dungeon(12, 12, 5, 10_000, 10_000)

    assert 0 < len(dungeon.entities.enemies) < 10_000
    assert 0 < len(dungeon.entities.items) < 10_000


def test_fallback_room_when_no_attempts_succeed(monkeypatch) -> None:
    monkeypatch.setattr(dungeon_generator, "MAX_ROOM_ATTEMPTS", 0)

    dungeon = generate_dungeon(40, 20, 3, 0, 0)

    assert dungeon.rooms == (Room(10, 5, 20, 10),)
    assert dungeon.start == (20, 10)
    assert dungeon.grid.count(Tile.FLOOR) == 200


def test_pickup_scenario_on_small_seeded_map() -> None:
    dungeon = generate_dungeon(10, 10, 42, 0, 1)
    assert len(dungeon.entities.items) == 1
    item = dungeon.entities.items[0]

    direction, player = _approach(dungeon, item.x, item.y)
    result = resolve_player_action(MoveAction(direction), player, dungeon)

    assert result.succeeded
    assert player.position == item.position
    assert player.potions + player.treasure == 1
    if item.item_type is ItemType.POTION:
        assert player.potions == 1
    else:
        assert player.treasure == 1
    assert dungeon.entities.item_at(item.x, item.y) is None
    assert len(dungeon.entities.items) == 0


def test_seeded_corridors_never_touch_independent_source() -> None:
    calls: List[int] = []

    def _factory() -> RNG:
        calls.append(1)
        return RNG(0)

    generator = DungeonGenerator(orientation_rng_factory=_factory)
    generator.generate(50, 22, RNG(9), enemy_count=0, item_count=0)

    assert calls == []


def test_independent_corridors_draw_one_fresh_source_per_corridor() -> None:
    calls: List[int] = []

    def _factory() -> RNG:
        calls.append(1)
        return RNG(len(calls))

    generator = DungeonGenerator(corridor_orientation="independent", orientation_rng_factory=_factory)
    dungeon = generator.generate(50, 22, RNG(9), enemy_count=3, item_count=3)

    assert len(calls) == len(dungeon.rooms) - 1


def test_unknown_corridor_orientation_rejected() -> None:
    with pytest.raises(ValueError):
        DungeonGenerator(corridor_orientation="sideways")  # type: ignore[arg-type]


def _approach(dungeon: Dungeon, x: int, y: int) -> tuple[Direction, Player]:
    for direction in Direction:
        from_x = x - direction.dx
        from_y = y - direction.dy
        if dungeon.is_walkable(from_x, from_y):
            return direction, Player(from_x, from_y)
    raise AssertionError("item has no walkable neighbour")
