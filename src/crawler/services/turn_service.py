"""Run lifecycle and full-turn orchestration."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from crawler.core.rng import RNG
from crawler.domain.actions import TurnAction
from crawler.domain.entities import Player
from crawler.domain.state import RunState
from crawler.services.action_resolver import resolve_player_action
from crawler.services.dungeon_generator import DungeonGenerator
from crawler.services.enemy_ai import run_enemy_turns
from crawler.services.turn_events import PlayerDefeatedEvent, TurnEvent

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TurnResult:
    """Return payload from a single turn."""

    action_succeeded: bool
    events: List[TurnEvent]
    player_alive: bool


class TurnService:
    """Creates runs and advances them one turn at a time."""

    def __init__(self, generator: DungeonGenerator | None = None) -> None:
        self._generator = generator or DungeonGenerator()

    def start_new_run(
        self,
        *,
        seed: int,
        width: int,
        height: int,
        enemy_count: int,
        item_count: int,
    ) -> RunState:
        """Generate a dungeon for ``seed`` and place the player on its start tile."""
        rng = RNG(seed)
        dungeon = self._generator.generate(
            width, height, rng, enemy_count=enemy_count, item_count=item_count
        )
        player = Player(dungeon.start_x, dungeon.start_y)
        logger.info("Started run seed=%d size=%dx%d", seed, width, height)
        return RunState(
            seed=seed,
            rng=rng,
            dungeon=dungeon,
            player=player,
            enemy_count=enemy_count,
            item_count=item_count,
        )

    def take_turn(self, state: RunState, action: TurnAction) -> TurnResult:
        """Resolve the player's action, then let every enemy act once."""
        action_result = resolve_player_action(action, state.player, state.dungeon)
        events = list(action_result.events)
        events.extend(run_enemy_turns(state.dungeon, state.player, state.rng))
        state.turn += 1

        player_alive = state.player.is_alive
        if not player_alive:
            events.append(PlayerDefeatedEvent(treasure=state.player.treasure))
            logger.info("Player defeated on turn %d with %d treasure", state.turn, state.player.treasure)
        return TurnResult(
            action_succeeded=action_result.succeeded,
            events=events,
            player_alive=player_alive,
        )
