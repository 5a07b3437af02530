"""Key-to-action mapping for the terminal input source."""
from __future__ import annotations

from typing import Dict

from crawler.domain.actions import (
    AttackAction,
    Direction,
    DrinkPotionAction,
    MoveAction,
    PlayerAction,
    SaveAndQuitAction,
)

KEY_ACTIONS: Dict[str, PlayerAction] = {
    "w": MoveAction(Direction.NORTH),
    "s": MoveAction(Direction.SOUTH),
    "a": MoveAction(Direction.WEST),
    "d": MoveAction(Direction.EAST),
    "f": AttackAction(),
    "e": DrinkPotionAction(),
    "q": SaveAndQuitAction(),
}


def parse_command(line: str) -> PlayerAction | None:
    """Map the first non-blank character of ``line`` to an action, if any."""
    stripped = line.strip()
    if not stripped:
        return None
    return KEY_ACTIONS.get(stripped[0].lower())
