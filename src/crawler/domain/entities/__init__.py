"""Runtime entity exports."""

from .enemy import Enemy
from .item import ITEM_GLYPHS, Item, ItemType
from .player import PLAYER_ATTACK, PLAYER_MAX_HP, POTION_HEAL, Player

__all__ = [
    "Enemy",
    "ITEM_GLYPHS",
    "Item",
    "ItemType",
    "PLAYER_ATTACK",
    "PLAYER_MAX_HP",
    "POTION_HEAL",
    "Player",
]
