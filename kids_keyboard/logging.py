"""Logging helpers for the package."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


_DEFAULT_LOG = Path.home() / ".kids_keyboard.log"
_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s: %(message)s"


def setup(
    level: int = logging.INFO,
    log_file: str | Path | None = None,
    *,
    max_bytes: int = 256_000,
    backups: int = 2,
) -> None:
    """Send log records to the console and a small rotating file.

    The console shows ``level`` and above. The file keeps INFO and above,
    or DEBUG when ``level`` asks for it, and rolls over at ``max_bytes``.
    """

    log_file = _DEFAULT_LOG if log_file is None else Path(log_file)
    file_level = min(level, logging.INFO)

    console = logging.StreamHandler()
    console.setLevel(level)
    handlers: list[logging.Handler] = [console]
    try:
        rotating = RotatingFileHandler(
            log_file, maxBytes=max_bytes, backupCount=backups, encoding="utf-8"
        )
    except OSError as exc:
        console_only = f"log file {log_file} unavailable ({exc}), console only"
    else:
        rotating.setLevel(file_level)
        handlers.append(rotating)
        console_only = None

    logging.basicConfig(
        level=file_level,
        format=_FORMAT,
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,
    )
    if console_only:
        logging.getLogger(__name__).warning(console_only)

    def _excepthook(exc_type, exc, tb) -> None:
        logging.getLogger(__name__).critical(
            "Unhandled exception", exc_info=(exc_type, exc, tb)
        )

    sys.excepthook = _excepthook
