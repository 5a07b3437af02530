"""Console-driven game loop for Adventure Crawler."""
from __future__ import annotations

import argparse
import logging
import secrets
from pathlib import Path
from typing import Callable, Literal, Sequence, Tuple

from crawler.domain.actions import SaveAndQuitAction
from crawler.domain.state import RunState
from crawler.presentation.cli import config
from crawler.presentation.cli.commands import parse_command
from crawler.presentation.cli.render import describe_events, draw, render_frame
from crawler.presentation.cli.run_store import RunStore
from crawler.services import DungeonGenerator, SaveLoadError, SaveService, TurnService

logger = logging.getLogger(__name__)

SessionOutcome = Literal["saved", "died", "closed"]
WELCOME_MESSAGE = "Welcome to Adventure Crawler!"
LOADED_MESSAGE = "Loaded saved run."
_MAX_RANDOM_SEED = 2**63 - 1


def main(argv: Sequence[str] | None = None) -> None:
    """Start the interactive CLI session."""
    args = _parse_args(argv)
    debug = args.debug or config.debug_enabled()
    data_dir = Path(args.data_dir) if args.data_dir else None
    log_path = data_dir / "crawler.log" if data_dir else config.get_log_path()
    _configure_logging(debug=debug, log_path=log_path)

    settings = config.load_config()
    store = RunStore(data_dir / "saves" if data_dir else None)
    turn_service = TurnService(DungeonGenerator(corridor_orientation=settings.corridor_orientation))
    save_service = SaveService(turn_service)

    state, message = _start_run(args.seed, settings, store, turn_service, save_service)
    run_session(
        state,
        message,
        turn_service=turn_service,
        save_service=save_service,
        store=store,
        debug=debug,
    )


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="adventure-crawler", description="Seeded terminal dungeon crawler.")
    parser.add_argument("--seed", type=int, default=None, help="start a new run with this seed, ignoring saves")
    parser.add_argument("--debug", action="store_true", help="verbose logging and debug HUD")
    parser.add_argument("--data-dir", default=None, help="directory for saves, high score and log")
    return parser.parse_args(argv)


def _configure_logging(*, debug: bool, log_path: Path) -> None:
    # stdout is the game screen, so logs go to a file.
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(log_path),
        filemode="a",
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _start_run(
    seed: int | None,
    settings: config.CrawlerConfig,
    store: RunStore,
    turn_service: TurnService,
    save_service: SaveService,
) -> Tuple[RunState, str]:
    if seed is None and store.save_exists():
        try:
            return save_service.load(store.read_save()), LOADED_MESSAGE
        except (OSError, ValueError, SaveLoadError) as exc:
            logger.warning("Could not load save %s: %s", store.save_path, exc)
    if seed is None:
        seed = secrets.randbelow(_MAX_RANDOM_SEED)
    state = turn_service.start_new_run(
        seed=seed,
        width=settings.width,
        height=settings.height,
        enemy_count=settings.enemy_count,
        item_count=settings.item_count,
    )
    return state, WELCOME_MESSAGE


def run_session(
    state: RunState,
    message: str,
    *,
    turn_service: TurnService,
    save_service: SaveService,
    store: RunStore,
    debug: bool = False,
    read_line: Callable[[], str] | None = None,
) -> SessionOutcome:
    """Read-act-render until the player saves, dies or input closes."""
    read = read_line or input
    _draw_state(state, message, debug=debug)
    while True:
        try:
            line = read()
        except EOFError:
            logger.info("Input closed; leaving without saving.")
            return "closed"
        action = parse_command(line)
        if action is None:
            continue
        if isinstance(action, SaveAndQuitAction):
            store.write_save(save_service.serialize(state))
            logger.info("Saved run seed=%d on turn %d", state.seed, state.turn)
            print("Saved. Bye!")
            return "saved"

        result = turn_service.take_turn(state, action)
        _draw_state(state, describe_events(result.events), debug=debug)
        if not result.player_alive:
            _finish_run(state, store)
            return "died"


def _draw_state(state: RunState, message: str, *, debug: bool) -> None:
    draw(render_frame(state.dungeon, state.player, message, debug=debug, seed=state.seed))


def _finish_run(state: RunState, store: RunStore) -> None:
    score = state.player.treasure
    best, is_new_best = store.record_score(score)
    store.delete_save()
    if is_new_best:
        logger.info("New high score %d", best)
    print(f"\nYou died! Score: {score}  High Score: {best}")
