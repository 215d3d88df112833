from dataclasses import asdict, dataclass, fields
import json
import logging
import os

from .history_store import HISTORY_FILE

log = logging.getLogger(__name__)


@dataclass
class KeyboardConfig:
    layout: str | None = None        # layout JSON, bundled ABC layout if unset
    vocabulary: str | None = None    # word manifest, bundled list if unset
    image_dir: str | None = None     # folder of <identifier>.png pictures
    history_file: str = HISTORY_FILE
    dark_theme: bool = False
    sound: bool = True
    haptics: bool = True
    tap_pulse_ms: int = 10
    match_pulse_ms: int = 100
    upper_case: bool = True


CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".kids_keyboard")
CONFIG_FILE = os.path.join(CONFIG_DIR, "config.json")


def load_config(path: str = CONFIG_FILE) -> KeyboardConfig:
    """Return saved keyboard settings or defaults if unavailable."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        known = {f.name for f in fields(KeyboardConfig)}
        return KeyboardConfig(**{k: v for k, v in data.items() if k in known})
    except FileNotFoundError:
        return KeyboardConfig()
    except Exception as exc:
        log.warning("Ignoring unreadable config %s: %s", path, exc)
        return KeyboardConfig()


def save_config(config: KeyboardConfig, path: str = CONFIG_FILE) -> None:
    """Persist ``config`` to ``path`` in JSON format."""
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(asdict(config), f, indent=2)
