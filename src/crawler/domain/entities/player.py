"""Player model."""
from __future__ import annotations

PLAYER_MAX_HP = 20
PLAYER_ATTACK = 5
POTION_HEAL = 8


class Player:
    """The single player character.

    Hit points are clamped to ``[0, PLAYER_MAX_HP]`` and the potion and
    treasure counters to ``>= 0`` by their setters, so loaded or damaged
    values can never leave those ranges.
    """

    __slots__ = ("x", "y", "attack", "_hp", "_potions", "_treasure")

    def __init__(
        self,
        x: int,
        y: int,
        *,
        hp: int = PLAYER_MAX_HP,
        attack: int = PLAYER_ATTACK,
        potions: int = 0,
        treasure: int = 0,
    ) -> None:
        self.x = x
        self.y = y
        self.attack = attack
        self._hp = PLAYER_MAX_HP
        self._potions = 0
        self._treasure = 0
        self.hp = hp
        self.potions = potions
        self.treasure = treasure

    def __repr__(self) -> str:
        return (
            f"Player(x={self.x}, y={self.y}, hp={self._hp}, "
            f"potions={self._potions}, treasure={self._treasure})"
        )

    @property
    def hp(self) -> int:
        return self._hp

    @hp.setter
    def hp(self, value: int) -> None:
        self._hp = max(0, min(PLAYER_MAX_HP, value))

    @property
    def potions(self) -> int:
        return self._potions

    @potions.setter
    def potions(self, value: int) -> None:
        self._potions = max(0, value)

    @property
    def treasure(self) -> int:
        return self._treasure

    @treasure.setter
    def treasure(self, value: int) -> None:
        self._treasure = max(0, value)

    @property
    def is_alive(self) -> bool:
        return self._hp > 0

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def damage(self, amount: int) -> None:
        self.hp = self._hp - amount

    def heal(self, amount: int) -> int:
        """Restore hit points and return how many were actually gained."""
        before = self._hp
        self.hp = self._hp + max(0, amount)
        return self._hp - before

    def drink_potion(self) -> int | None:
        """Consume one potion; return the hp gained, or None without potions."""
        if self._potions <= 0:
            return None
        self._potions -= 1
        return self.heal(POTION_HEAL)
