"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Mapping

from crawler.core.types import CorridorOrientationSource

_DEFAULT_WIDTH = 50
_DEFAULT_HEIGHT = 22
_DEFAULT_ENEMY_COUNT = 10
_DEFAULT_ITEM_COUNT = 10
_DEFAULT_CORRIDOR_ORIENTATION: CorridorOrientationSource = "seeded"
_MIN_DIMENSION = 10
_MAX_DIMENSION = 200


@dataclass(frozen=True, slots=True)
class CrawlerConfig:
    """User-tunable run settings."""

    width: int = _DEFAULT_WIDTH
    height: int = _DEFAULT_HEIGHT
    enemy_count: int = _DEFAULT_ENEMY_COUNT
    item_count: int = _DEFAULT_ITEM_COUNT
    corridor_orientation: CorridorOrientationSource = _DEFAULT_CORRIDOR_ORIENTATION


def debug_enabled() -> bool:
    """Return True only when CRAWLER_DEBUG is explicitly set to '1'."""
    return os.getenv("CRAWLER_DEBUG") == "1"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "AdventureCrawler"
        return Path.home() / "AdventureCrawler"
    return Path.home() / ".config" / "adventure_crawler"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def get_save_dir() -> Path:
    """Return the per-user save directory."""
    return get_user_data_dir() / "saves"


def get_log_path() -> Path:
    return get_user_data_dir() / "crawler.log"


def _normalize_dimension(value: object, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    if not _MIN_DIMENSION <= value <= _MAX_DIMENSION:
        return default
    return value


def _normalize_count(value: object, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return default
    return value


def _normalize_corridor_orientation(value: object) -> CorridorOrientationSource:
    return "independent" if value == "independent" else _DEFAULT_CORRIDOR_ORIENTATION


def normalize_config(raw: Mapping[str, Any]) -> CrawlerConfig:
    """Build a config from raw JSON values, replacing anything invalid with defaults."""
    return CrawlerConfig(
        width=_normalize_dimension(raw.get("width"), _DEFAULT_WIDTH),
        height=_normalize_dimension(raw.get("height"), _DEFAULT_HEIGHT),
        enemy_count=_normalize_count(raw.get("enemy_count"), _DEFAULT_ENEMY_COUNT),
        item_count=_normalize_count(raw.get("item_count"), _DEFAULT_ITEM_COUNT),
        corridor_orientation=_normalize_corridor_orientation(raw.get("corridor_orientation")),
    )


def load_config(path: Path | None = None) -> CrawlerConfig:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return CrawlerConfig()
    if not isinstance(raw, dict):
        return CrawlerConfig()
    return normalize_config(raw)


def save_config(config: CrawlerConfig, path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = asdict(normalize_config(asdict(config)))
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
