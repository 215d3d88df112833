from __future__ import annotations

from pathlib import Path

IMAGE_SUFFIXES = (".png", ".gif")


class ImageDirectory:
    """Look up ``<identifier>.png`` (or ``.gif``) pictures under ``root``."""

    def __init__(self, root: str | Path | None) -> None:
        self.root = Path(root) if root else None

    def resolve(self, identifier: str) -> Path | None:
        if self.root is None or not identifier:
            return None
        for suffix in IMAGE_SUFFIXES:
            candidate = self.root / f"{identifier}{suffix}"
            if candidate.is_file():
                return candidate
        return None
