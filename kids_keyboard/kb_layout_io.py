import json
from importlib import resources

from .kb_layout import Key, KeyboardRow, Keyboard
from .key_types import Action

LAYOUT_PACKAGE = 'kids_keyboard.resources.layouts'
DEFAULT_LAYOUT = 'abc.json'


def load_keyboard(path: str | None = None) -> Keyboard:
    """Load a :class:`Keyboard` definition from ``path`` or package data."""
    if path:
        with open(path, 'r', encoding='utf-8') as file:
            blueprint = json.load(file)
    else:
        with resources.files(LAYOUT_PACKAGE).joinpath(DEFAULT_LAYOUT).open('r', encoding='utf-8') as file:
            blueprint = json.load(file)

    row_objects = []
    for row in blueprint['rows']:
        key_objects = []
        for key in row['keys']:
            action = key.get('action')
            parsed = Action.parse(action)
            if action is not None and parsed is None:
                raise ValueError(f"Unknown key action '{action}'")
            key_objects.append(Key(key['label'], parsed))
        row_objects.append(
            KeyboardRow(
                key_objects,
                stretch=row.get('stretch', True),
            )
        )

    keyboard = Keyboard(row_objects)
    letters = keyboard.letters()
    repeated = sorted({c for c in letters if letters.count(c) > 1})
    if repeated:
        raise ValueError(f"Layout repeats letter keys: {', '.join(repeated)}")
    return keyboard


def list_layouts() -> list[str]:
    """Return the names of the layouts bundled with the package."""
    return sorted(
        entry.name
        for entry in resources.files(LAYOUT_PACKAGE).iterdir()
        if entry.name.endswith('.json')
    )
