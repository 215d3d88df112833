from __future__ import annotations

import json
import logging
import os
from pathlib import Path

log = logging.getLogger(__name__)

HISTORY_DIR = os.path.join(os.path.expanduser("~"), ".kids_keyboard")
HISTORY_FILE = os.path.join(HISTORY_DIR, "history.json")


class JsonHistoryStore:
    """Persist the committed-word history as a JSON list."""

    def __init__(self, path: str | Path = HISTORY_FILE) -> None:
        self.path = Path(path)

    def load(self) -> list[str]:
        """Return saved words, or an empty list if nothing usable is stored."""
        if not self.path.exists():
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            log.warning("Could not read history from %s: %s", self.path, exc)
            return []
        if isinstance(data, dict):
            data = data.get("history", [])
        if not isinstance(data, list):
            log.warning("Ignoring malformed history in %s", self.path)
            return []
        return [w for w in data if isinstance(w, str) and w.strip()]

    def save(self, words: list[str]) -> None:
        """Write ``words`` atomically to :attr:`path`."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump({"history": list(words)}, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        finally:
            if tmp_path.exists():
                tmp_path.unlink(missing_ok=True)
