"""Terminal rendering of the dungeon and turn messages."""
from __future__ import annotations

from typing import List, Sequence

from crawler.domain.dungeon import Dungeon
from crawler.domain.entities import ItemType, Player
from crawler.services.turn_events import (
    EnemyAttackedPlayerEvent,
    EnemyDefeatedEvent,
    ItemPickedUpEvent,
    MoveBlockedEvent,
    PlayerDefeatedEvent,
    PlayerHitEnemyEvent,
    PotionConsumedEvent,
    PotionUnavailableEvent,
    SwingResolvedEvent,
    TurnEvent,
)

PLAYER_GLYPH = "@"
CONTROLS_HINT = "(WASD move, F attack, E drink, Q save+quit)"
CLEAR_SCREEN = "\033[H\033[2J"


def render_frame(
    dungeon: Dungeon,
    player: Player,
    message: str = "",
    *,
    debug: bool = False,
    seed: int | None = None,
) -> str:
    """Build the full screen: map rows, HUD line, then the optional message."""
    lines: List[str] = []
    entities = dungeon.entities
    for y, row in enumerate(dungeon.grid.rows()):
        cells: List[str] = []
        for x, tile in enumerate(row):
            if (x, y) == player.position:
                cells.append(PLAYER_GLYPH)
                continue
            enemy = entities.enemy_at(x, y)
            if enemy is not None:
                cells.append(enemy.glyph)
                continue
            item = entities.item_at(x, y)
            if item is not None:
                cells.append(item.glyph)
                continue
            cells.append(tile.glyph)
        lines.append("".join(cells))
    lines.append(
        f"HP:{player.hp}  Potions:{player.potions}  Gold:{player.treasure}  {CONTROLS_HINT}"
    )
    if message:
        lines.append(message)
    if debug:
        living = sum(1 for _ in entities.living_enemies())
        lines.append(f"[debug] seed={seed} start={dungeon.start} enemies={living} items={len(entities.items)}")
    return "\n".join(lines) + "\n"


def draw(frame: str) -> None:
    """Clear the terminal and print a frame."""
    print(CLEAR_SCREEN, end="", flush=True)
    print(frame, end="")


def describe_events(events: Sequence[TurnEvent]) -> str:
    """Turn resolution events into the one-line message shown under the HUD."""
    parts: List[str] = []
    for event in events:
        text = _describe_event(event)
        if text:
            parts.append(text)
    return " ".join(parts)


def _describe_event(event: TurnEvent) -> str:
    if isinstance(event, MoveBlockedEvent):
        return "You bump into a wall."
    if isinstance(event, SwingResolvedEvent):
        if event.hits == 0:
            return "You swing at nothing."
        return f"You swing and hit {event.hits} foe(s)!"
    if isinstance(event, PlayerHitEnemyEvent):
        return f"You hit the {event.enemy_kind} for {event.damage}."
    if isinstance(event, EnemyDefeatedEvent):
        return f"The {event.enemy_kind} dies."
    if isinstance(event, ItemPickedUpEvent):
        if event.item_type is ItemType.POTION:
            return "You pick up a potion."
        return "You find some treasure!"
    if isinstance(event, PotionConsumedEvent):
        return "You drink a potion and feel better."
    if isinstance(event, PotionUnavailableEvent):
        return "No potions to drink."
    if isinstance(event, EnemyAttackedPlayerEvent):
        return f"The {event.enemy_kind} hits you for {event.damage}."
    if isinstance(event, PlayerDefeatedEvent):
        return "You collapse."
    return ""
