"""Insertion-ordered storage for the enemies and items on a map."""
from __future__ import annotations

from typing import Iterator, List, Sequence

from crawler.domain.entities import Enemy, Item


class EntityRegistry:
    """Ordered enemy and item collections with position lookups.

    Enemies act in insertion order, so the order of ``add_enemy`` calls is part
    of the turn-resolution contract. Lookups scan linearly and the first match
    wins.
    """

    def __init__(self) -> None:
        self._enemies: List[Enemy] = []
        self._items: List[Item] = []

    @property
    def enemies(self) -> Sequence[Enemy]:
        return tuple(self._enemies)

    @property
    def items(self) -> Sequence[Item]:
        return tuple(self._items)

    def add_enemy(self, enemy: Enemy) -> None:
        self._enemies.append(enemy)

    def add_item(self, item: Item) -> None:
        self._items.append(item)

    def living_enemies(self) -> Iterator[Enemy]:
        return (enemy for enemy in self._enemies if enemy.is_alive)

    def enemy_at(self, x: int, y: int) -> Enemy | None:
        """Return the first living enemy standing on (x, y)."""
        for enemy in self._enemies:
            if enemy.x == x and enemy.y == y and enemy.is_alive:
                return enemy
        return None

    def is_occupied_by_living_enemy(self, x: int, y: int) -> bool:
        return self.enemy_at(x, y) is not None

    def item_at(self, x: int, y: int) -> Item | None:
        for item in self._items:
            if item.x == x and item.y == y:
                return item
        return None

    def remove_item(self, item: Item) -> bool:
        """Remove this exact item object; return False if it is not registered."""
        for index, candidate in enumerate(self._items):
            if candidate is item:
                del self._items[index]
                return True
        return False
