"""Command line entry point for the picture keyboard."""

from __future__ import annotations

import argparse
import json
import logging
import os

from . import logging as kk_logging
from .config import CONFIG_FILE, load_config, save_config
from .controller import KeyboardController
from .history_store import JsonHistoryStore
from .images import ImageDirectory
from .interfaces import NullHaptics, NullSpeaker
from .kb_layout_io import load_keyboard
from .vocabulary import load_vocabulary

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run the picture keyboard for young children",
    )
    parser.add_argument(
        "--config",
        default=CONFIG_FILE,
        help="Path to the settings JSON",
    )
    parser.add_argument(
        "--layout",
        default=os.getenv("KIDS_KEYBOARD_LAYOUT"),
        help="Path to keyboard layout JSON",
    )
    parser.add_argument(
        "--vocabulary",
        default=os.getenv("KIDS_KEYBOARD_VOCABULARY"),
        help="Path to the illustrated word manifest JSON",
    )
    parser.add_argument("--images", help="Folder holding <identifier>.png pictures")
    parser.add_argument("--history", help="Where committed words are stored")
    parser.add_argument("--dark", action="store_true", help="Use the dark theme")
    parser.add_argument("--no-sound", action="store_true", help="Don't read words aloud")
    parser.add_argument(
        "--no-haptics", action="store_true", help="Don't click on key presses"
    )
    parser.add_argument(
        "--lowercase", action="store_true", help="Start with lowercase letters"
    )
    parser.add_argument(
        "--save-config",
        action="store_true",
        help="Remember these options for the next launch",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug output")
    return parser


def apply_args(cfg, args):
    """Overlay command line options on the saved settings."""
    if args.layout:
        cfg.layout = args.layout
    if args.vocabulary:
        cfg.vocabulary = args.vocabulary
    if args.images:
        cfg.image_dir = args.images
    if args.history:
        cfg.history_file = args.history
    if args.dark:
        cfg.dark_theme = True
    if args.no_sound:
        cfg.sound = False
    if args.no_haptics:
        cfg.haptics = False
    if args.lowercase:
        cfg.upper_case = False
    return cfg


def main(argv: list[str] | None = None) -> None:
    """Launch the keyboard window."""
    parser = build_parser()
    args = parser.parse_args(argv)
    kk_logging.setup(logging.DEBUG if args.verbose else logging.INFO)

    cfg = apply_args(load_config(args.config), args)
    if args.save_config:
        save_config(cfg, args.config)

    try:
        keyboard = load_keyboard(cfg.layout)
    except FileNotFoundError:
        parser.error(f"Layout file '{cfg.layout}' not found")
    except json.JSONDecodeError as exc:
        parser.error(f"Invalid JSON in layout file '{cfg.layout}': {exc.msg}")
    except (KeyError, ValueError) as exc:
        parser.error(f"Invalid layout file '{cfg.layout}': {exc}")

    try:
        vocabulary = load_vocabulary(cfg.vocabulary)
    except FileNotFoundError:
        parser.error(f"Vocabulary file '{cfg.vocabulary}' not found")
    except json.JSONDecodeError as exc:
        parser.error(f"Invalid JSON in vocabulary file '{cfg.vocabulary}': {exc.msg}")
    except (KeyError, ValueError) as exc:
        parser.error(f"Invalid vocabulary file '{cfg.vocabulary}': {exc}")

    if cfg.haptics:
        from .haptics import ClickHaptics

        haptics = ClickHaptics()
    else:
        haptics = NullHaptics()

    if cfg.sound:
        from .speech import TTSSpeaker

        speaker = TTSSpeaker()
    else:
        speaker = NullSpeaker()

    controller = KeyboardController(
        vocabulary,
        store=JsonHistoryStore(cfg.history_file),
        images=ImageDirectory(cfg.image_dir),
        haptics=haptics,
        speaker=speaker,
        upper_case=cfg.upper_case,
        sound=cfg.sound,
        tap_pulse_ms=cfg.tap_pulse_ms,
        match_pulse_ms=cfg.match_pulse_ms,
    )
    log.info("Loaded %d words, %d in history", len(vocabulary), len(controller.history))

    from .kb_gui import VirtualKeyboard

    VirtualKeyboard(keyboard, controller, dark=cfg.dark_theme).run()


if __name__ == "__main__":  # pragma: no cover - manual entry point
    main()
