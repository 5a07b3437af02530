"""File-system helpers for the save file and the high score."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Tuple

from crawler.presentation.cli import config

logger = logging.getLogger(__name__)

SAVE_FILE_NAME = "save.json"
HIGH_SCORE_FILE_NAME = "highscore.json"


class RunStore:
    """Handles the single save slot and the high score on disk."""

    def __init__(self, base_dir: Path | str | None = None) -> None:
        self._base_dir = Path(base_dir) if base_dir is not None else config.get_save_dir()

    @property
    def save_path(self) -> Path:
        return self._base_dir / SAVE_FILE_NAME

    @property
    def high_score_path(self) -> Path:
        return self._base_dir / HIGH_SCORE_FILE_NAME

    def save_exists(self) -> bool:
        return self.save_path.exists()

    def read_save(self) -> Dict[str, Any]:
        """Load and parse the stored save payload."""
        return json.loads(self.save_path.read_text(encoding="utf-8"))

    def write_save(self, payload: Dict[str, Any]) -> None:
        self._base_dir.mkdir(parents=True, exist_ok=True)
        self.save_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")

    def delete_save(self) -> None:
        """Delete the save payload if it exists."""
        try:
            self.save_path.unlink()
        except FileNotFoundError:
            return

    def read_high_score(self) -> int:
        """Return the stored high score, or 0 when missing or unreadable."""
        try:
            raw = json.loads(self.high_score_path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return 0
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable high score file %s", self.high_score_path)
            return 0
        score = raw.get("high_score") if isinstance(raw, dict) else None
        if isinstance(score, bool) or not isinstance(score, int) or score < 0:
            return 0
        return score

    def write_high_score(self, score: int) -> None:
        self._base_dir.mkdir(parents=True, exist_ok=True)
        self.high_score_path.write_text(json.dumps({"high_score": score}, indent=2), encoding="utf-8")

    def record_score(self, score: int) -> Tuple[int, bool]:
        """Store ``score`` if it beats the high score; return (best, is_new_best)."""
        best = self.read_high_score()
        if score > best:
            self.write_high_score(score)
            return score, True
        return best, False
