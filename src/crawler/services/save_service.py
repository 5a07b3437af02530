"""Serialization helpers for save/load of an in-progress run."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Mapping

from crawler.domain.state import RunState
from crawler.services.errors import SaveLoadError
from crawler.services.turn_service import TurnService

logger = logging.getLogger(__name__)

SavePayload = Dict[str, Any]


@dataclass(frozen=True, slots=True)
class RunSnapshot:
    """Minimal persisted run state.

    Enemies and items are not stored: they are regenerated from
    (seed, width, height, counts) on load.
    """

    seed: int
    width: int
    height: int
    player_x: int
    player_y: int
    player_hp: int
    player_potions: int
    player_treasure: int
    enemy_count: int = 10
    item_count: int = 10


class SaveService:
    """Converts runs to/from a validated, versioned payload."""

    SAVE_VERSION = 1

    def __init__(self, turn_service: TurnService) -> None:
        self._turn_service = turn_service

    def snapshot(self, state: RunState) -> RunSnapshot:
        """Capture the persistable fields of a run."""
        return RunSnapshot(
            seed=state.seed,
            width=state.dungeon.width,
            height=state.dungeon.height,
            player_x=state.player.x,
            player_y=state.player.y,
            player_hp=state.player.hp,
            player_potions=state.player.potions,
            player_treasure=state.player.treasure,
            enemy_count=state.enemy_count,
            item_count=state.item_count,
        )

    def restore(self, snapshot: RunSnapshot) -> RunState:
        """Regenerate the dungeon for the snapshot and restore the player fields."""
        state = self._turn_service.start_new_run(
            seed=snapshot.seed,
            width=snapshot.width,
            height=snapshot.height,
            enemy_count=snapshot.enemy_count,
            item_count=snapshot.item_count,
        )
        player = state.player
        player.x = snapshot.player_x
        player.y = snapshot.player_y
        player.hp = snapshot.player_hp
        player.potions = snapshot.player_potions
        player.treasure = snapshot.player_treasure
        logger.info("Restored run seed=%d at (%d, %d)", snapshot.seed, player.x, player.y)
        return state

    def serialize(self, state: RunState) -> SavePayload:
        """Return a JSON-serializable payload for disk persistence."""
        snapshot = self.snapshot(state)
        return {
            "save_version": self.SAVE_VERSION,
            "metadata": {
                "seed": snapshot.seed,
                "treasure": snapshot.player_treasure,
                "saved_at": datetime.now(timezone.utc).isoformat(),
            },
            "state": {
                "seed": snapshot.seed,
                "width": snapshot.width,
                "height": snapshot.height,
                "enemy_count": snapshot.enemy_count,
                "item_count": snapshot.item_count,
                "player": {
                    "x": snapshot.player_x,
                    "y": snapshot.player_y,
                    "hp": snapshot.player_hp,
                    "potions": snapshot.player_potions,
                    "treasure": snapshot.player_treasure,
                },
            },
        }

    def deserialize(self, payload: Mapping[str, Any]) -> RunSnapshot:
        """Validate a persisted payload and return its snapshot."""
        if not isinstance(payload, Mapping):
            raise SaveLoadError("Save data must be a JSON object.")
        if payload.get("save_version") != self.SAVE_VERSION:
            raise SaveLoadError("Save format changed. Please start a new run.")
        state_payload = payload.get("state")
        if not isinstance(state_payload, Mapping):
            raise SaveLoadError("Save data is missing required sections.")
        player_payload = state_payload.get("player")
        if not isinstance(player_payload, Mapping):
            raise SaveLoadError("Save data is missing the player section.")

        width = self._require_positive_int(state_payload.get("width"), "state.width")
        height = self._require_positive_int(state_payload.get("height"), "state.height")
        return RunSnapshot(
            seed=self._require_int(state_payload.get("seed"), "state.seed"),
            width=width,
            height=height,
            enemy_count=self._coerce_non_negative_int(
                state_payload.get("enemy_count"), "state.enemy_count", default=10
            ),
            item_count=self._coerce_non_negative_int(
                state_payload.get("item_count"), "state.item_count", default=10
            ),
            player_x=self._require_int(player_payload.get("x"), "state.player.x"),
            player_y=self._require_int(player_payload.get("y"), "state.player.y"),
            player_hp=self._require_int(player_payload.get("hp"), "state.player.hp"),
            player_potions=self._require_int(player_payload.get("potions"), "state.player.potions"),
            player_treasure=self._require_int(player_payload.get("treasure"), "state.player.treasure"),
        )

    def load(self, payload: Mapping[str, Any]) -> RunState:
        """Deserialize ``payload`` and rebuild the run it describes."""
        return self.restore(self.deserialize(payload))

    @staticmethod
    def _require_int(value: object, field_name: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise SaveLoadError(f"Field '{field_name}' must be an integer.")
        return value

    @classmethod
    def _require_positive_int(cls, value: object, field_name: str) -> int:
        number = cls._require_int(value, field_name)
        if number <= 0:
            raise SaveLoadError(f"Field '{field_name}' must be positive.")
        return number

    @classmethod
    def _coerce_non_negative_int(cls, value: object, field_name: str, *, default: int) -> int:
        if value is None:
            return default
        number = cls._require_int(value, field_name)
        if number < 0:
            raise SaveLoadError(f"Field '{field_name}' cannot be negative.")
        return number
