"""Events emitted while a turn resolves."""
from __future__ import annotations

from dataclasses import dataclass

from crawler.domain.entities import ItemType


@dataclass(slots=True)
class TurnEvent:
    """Base turn event."""


@dataclass(slots=True)
class PlayerMovedEvent(TurnEvent):
    x: int
    y: int


@dataclass(slots=True)
class MoveBlockedEvent(TurnEvent):
    x: int
    y: int


@dataclass(slots=True)
class PlayerHitEnemyEvent(TurnEvent):
    enemy_kind: str
    x: int
    y: int
    damage: int
    enemy_hp: int


@dataclass(slots=True)
class EnemyDefeatedEvent(TurnEvent):
    enemy_kind: str
    x: int
    y: int


@dataclass(slots=True)
class SwingResolvedEvent(TurnEvent):
    hits: int


@dataclass(slots=True)
class ItemPickedUpEvent(TurnEvent):
    item_type: ItemType
    potions: int
    treasure: int


@dataclass(slots=True)
class PotionConsumedEvent(TurnEvent):
    healed: int
    hp: int
    potions_left: int


@dataclass(slots=True)
class PotionUnavailableEvent(TurnEvent):
    pass


@dataclass(slots=True)
class EnemyAttackedPlayerEvent(TurnEvent):
    enemy_kind: str
    damage: int
    player_hp: int


@dataclass(slots=True)
class EnemyMovedEvent(TurnEvent):
    enemy_kind: str
    from_x: int
    from_y: int
    to_x: int
    to_y: int


@dataclass(slots=True)
class PlayerDefeatedEvent(TurnEvent):
    treasure: int
