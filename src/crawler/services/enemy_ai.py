"""Per-turn enemy behaviour: attack when adjacent, chase when close, wander otherwise."""
from __future__ import annotations

from typing import List

from crawler.core.rng import RNG
from crawler.domain.actions import CARDINAL_OFFSETS
from crawler.domain.dungeon import Dungeon
from crawler.domain.entities import Enemy, Player
from crawler.domain.rooms import manhattan_distance
from crawler.services.turn_events import EnemyAttackedPlayerEvent, EnemyMovedEvent, TurnEvent

CHASE_RANGE = 8


def take_enemy_turn(enemy: Enemy, dungeon: Dungeon, player: Player, rng: RNG) -> List[TurnEvent]:
    """Decide and perform one enemy's action for this turn.

    The decision is recomputed from positions every turn. A chase that is
    blocked on both axes leaves the enemy in place; only enemies outside
    chase range wander, and only they draw from ``rng``.
    """
    if not enemy.is_alive:
        return []

    dx = player.x - enemy.x
    dy = player.y - enemy.y
    distance = manhattan_distance(enemy.x, enemy.y, player.x, player.y)

    if distance == 1:
        player.damage(enemy.attack)
        return [EnemyAttackedPlayerEvent(enemy_kind=enemy.kind, damage=enemy.attack, player_hp=player.hp)]

    origin = enemy.position
    if distance <= CHASE_RANGE:
        moved = _chase(enemy, dungeon, dx, dy)
    else:
        step_x, step_y = rng.choice(CARDINAL_OFFSETS)
        moved = _try_step(enemy, dungeon, enemy.x + step_x, enemy.y + step_y)

    if not moved:
        return []
    return [
        EnemyMovedEvent(
            enemy_kind=enemy.kind, from_x=origin[0], from_y=origin[1], to_x=enemy.x, to_y=enemy.y
        )
    ]


def run_enemy_turns(dungeon: Dungeon, player: Player, rng: RNG) -> List[TurnEvent]:
    """Let every enemy act once, in registry order."""
    events: List[TurnEvent] = []
    for enemy in dungeon.entities.enemies:
        events.extend(take_enemy_turn(enemy, dungeon, player, rng))
    return events


def _chase(enemy: Enemy, dungeon: Dungeon, dx: int, dy: int) -> bool:
    step_x = _sign(dx)
    step_y = _sign(dy)
    if abs(dx) >= abs(dy):
        return _try_step(enemy, dungeon, enemy.x + step_x, enemy.y) or _try_step(
            enemy, dungeon, enemy.x, enemy.y + step_y
        )
    return _try_step(enemy, dungeon, enemy.x, enemy.y + step_y) or _try_step(
        enemy, dungeon, enemy.x + step_x, enemy.y
    )


def _try_step(enemy: Enemy, dungeon: Dungeon, x: int, y: int) -> bool:
    if (x, y) == enemy.position:
        return False
    if not dungeon.is_free_for_enemy(x, y):
        return False
    enemy.move_to(x, y)
    return True


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)
