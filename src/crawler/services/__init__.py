"""Service layer exports."""

from .action_resolver import ActionResult, resolve_player_action
from .dungeon_generator import DungeonGenerator, generate_dungeon
from .enemy_ai import run_enemy_turns, take_enemy_turn
from .errors import SaveLoadError
from .save_service import RunSnapshot, SaveService
from .turn_service import TurnResult, TurnService

__all__ = [
    "ActionResult",
    "DungeonGenerator",
    "RunSnapshot",
    "SaveLoadError",
    "SaveService",
    "TurnResult",
    "TurnService",
    "generate_dungeon",
    "resolve_player_action",
    "run_enemy_turns",
    "take_enemy_turn",
]
