"""Resolution of a single player action against the dungeon."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from crawler.domain.actions import (
    CARDINAL_OFFSETS,
    AttackAction,
    DrinkPotionAction,
    MoveAction,
    TurnAction,
)
from crawler.domain.dungeon import Dungeon
from crawler.domain.entities import Enemy, ItemType, Player
from crawler.services.turn_events import (
    EnemyDefeatedEvent,
    ItemPickedUpEvent,
    MoveBlockedEvent,
    PlayerHitEnemyEvent,
    PlayerMovedEvent,
    PotionConsumedEvent,
    PotionUnavailableEvent,
    SwingResolvedEvent,
    TurnEvent,
)

MELEE_SWING_DAMAGE = 5


@dataclass(slots=True)
class ActionResult:
    """Outcome of a player action; ``succeeded`` is False when nothing happened."""

    succeeded: bool
    events: List[TurnEvent] = field(default_factory=list)


def resolve_player_action(action: TurnAction, player: Player, dungeon: Dungeon) -> ActionResult:
    """Apply ``action`` to the player and dungeon and report what happened."""
    if isinstance(action, MoveAction):
        return _resolve_move(action, player, dungeon)
    if isinstance(action, AttackAction):
        return _resolve_swing(player, dungeon)
    if isinstance(action, DrinkPotionAction):
        return _resolve_potion(player)
    raise TypeError(f"Unsupported turn action: {action!r}")


def _resolve_move(action: MoveAction, player: Player, dungeon: Dungeon) -> ActionResult:
    target_x = player.x + action.direction.dx
    target_y = player.y + action.direction.dy
    if not dungeon.is_walkable(target_x, target_y):
        return ActionResult(succeeded=False, events=[MoveBlockedEvent(x=target_x, y=target_y)])

    enemy = dungeon.entities.enemy_at(target_x, target_y)
    if enemy is not None:
        return ActionResult(succeeded=True, events=_hit_enemy(enemy, player.attack))

    player.x = target_x
    player.y = target_y
    events: List[TurnEvent] = [PlayerMovedEvent(x=target_x, y=target_y)]
    item = dungeon.entities.item_at(target_x, target_y)
    if item is not None:
        if item.item_type is ItemType.POTION:
            player.potions += 1
        else:
            player.treasure += 1
        dungeon.entities.remove_item(item)
        events.append(
            ItemPickedUpEvent(item_type=item.item_type, potions=player.potions, treasure=player.treasure)
        )
    return ActionResult(succeeded=True, events=events)


def _resolve_swing(player: Player, dungeon: Dungeon) -> ActionResult:
    events: List[TurnEvent] = []
    hits = 0
    for dx, dy in CARDINAL_OFFSETS:
        enemy = dungeon.entities.enemy_at(player.x + dx, player.y + dy)
        if enemy is None:
            continue
        events.extend(_hit_enemy(enemy, MELEE_SWING_DAMAGE))
        hits += 1
    events.insert(0, SwingResolvedEvent(hits=hits))
    return ActionResult(succeeded=hits > 0, events=events)


def _resolve_potion(player: Player) -> ActionResult:
    healed = player.drink_potion()
    if healed is None:
        return ActionResult(succeeded=False, events=[PotionUnavailableEvent()])
    return ActionResult(
        succeeded=True,
        events=[PotionConsumedEvent(healed=healed, hp=player.hp, potions_left=player.potions)],
    )


def _hit_enemy(enemy: Enemy, damage: int) -> List[TurnEvent]:
    enemy.damage(damage)
    events: List[TurnEvent] = [
        PlayerHitEnemyEvent(enemy_kind=enemy.kind, x=enemy.x, y=enemy.y, damage=damage, enemy_hp=enemy.hp)
    ]
    if not enemy.is_alive:
        events.append(EnemyDefeatedEvent(enemy_kind=enemy.kind, x=enemy.x, y=enemy.y))
    return events
