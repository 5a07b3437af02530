from __future__ import annotations

from crawler.core.rng import RNG
from crawler.domain.actions import AttackAction, Direction, DrinkPotionAction, MoveAction
from crawler.domain.entities import Player
from crawler.domain.state import RunState
from crawler.services.turn_events import EnemyAttackedPlayerEvent, MoveBlockedEvent, PlayerDefeatedEvent
from crawler.services.turn_service import TurnService

from tests.helpers.maps import add_enemy, make_dungeon


def _make_state(player: Player, rows: list[str], seed: int = 1) -> RunState:
    dungeon = make_dungeon(rows)
    return RunState(seed=seed, rng=RNG(seed), dungeon=dungeon, player=player, enemy_count=0, item_count=0)


ROOM = [
    "########",
    "#......#",
    "#......#",
    "#......#",
    "########",
]


def test_start_new_run_places_player_on_start() -> None:
    service = TurnService()
    state = service.start_new_run(seed=77, width=50, height=22, enemy_count=5, item_count=5)

    assert state.player.position == state.dungeon.start
    assert state.player.hp == 20
    assert state.turn == 0
    assert state.seed == 77


def test_blocked_move_still_lets_enemies_act() -> None:
    service = TurnService()
    state = _make_state(Player(1, 1), ROOM)
    add_enemy(state.dungeon, 2, 1, attack=3)

    result = service.take_turn(state, MoveAction(Direction.NORTH))

    assert not result.action_succeeded
    assert isinstance(result.events[0], MoveBlockedEvent)
    assert isinstance(result.events[1], EnemyAttackedPlayerEvent)
    assert state.player.hp == 17
    assert state.turn == 1


def test_failed_potion_still_advances_turn() -> None:
    service = TurnService()
    state = _make_state(Player(1, 1), ROOM)

    result = service.take_turn(state, DrinkPotionAction())

    assert not result.action_succeeded
    assert result.player_alive
    assert state.turn == 1


def test_player_death_reported_after_enemy_pass() -> None:
    service = TurnService()
    state = _make_state(Player(3, 2, hp=3, treasure=4), ROOM)
    add_enemy(state.dungeon, 4, 2, hp=20, attack=2)
    add_enemy(state.dungeon, 2, 2, hp=20, attack=2, kind="slime")

    result = service.take_turn(state, AttackAction())

    assert result.action_succeeded
    assert not result.player_alive
    assert state.player.hp == 0
    assert state.is_over
    assert result.events[-1] == PlayerDefeatedEvent(treasure=4)
    attacks = [event for event in result.events if isinstance(event, EnemyAttackedPlayerEvent)]
    assert len(attacks) == 2


def test_enemy_killed_by_player_does_not_retaliate() -> None:
    service = TurnService()
    state = _make_state(Player(1, 1), ROOM)
    enemy = add_enemy(state.dungeon, 2, 1, hp=5, attack=4)

    service.take_turn(state, MoveAction(Direction.EAST))

    assert not enemy.is_alive
    assert state.player.hp == 20
    assert state.player.position == (1, 1)


def test_same_seed_and_actions_replay_identically() -> None:
    actions = [
        MoveAction(Direction.EAST),
        MoveAction(Direction.SOUTH),
        AttackAction(),
        MoveAction(Direction.WEST),
        MoveAction(Direction.NORTH),
        DrinkPotionAction(),
    ] * 4

    def _play() -> tuple:
        service = TurnService()
        state = service.start_new_run(seed=2024, width=50, height=22, enemy_count=10, item_count=10)
        for action in actions:
            if not service.take_turn(state, action).player_alive:
                break
        return (
            state.player.position,
            state.player.hp,
            tuple((enemy.x, enemy.y, enemy.hp) for enemy in state.dungeon.entities.enemies),
            tuple(item.position for item in state.dungeon.entities.items),
        )

    assert _play() == _play()
