from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import List, Optional

from .key_types import Action


@dataclass(frozen=True, slots=True)
class Key:
    label: str
    action: Optional[Action] = None

    def __post_init__(self):
        if not self.label:
            raise ValueError("Key label must not be empty")
        if len(self.label) > 1 and self.action is None:
            raise ValueError(f"'action' is required when 'label' is multiple characters"
                             f"(got {self.label})")

    @property
    def value(self) -> str:
        """Character this key types, or ``""`` for special keys."""
        if self.action == Action.space:
            return " "
        if self.action is None:
            return self.label
        return ""

    def is_letter(self) -> bool:
        return self.action is None and self.label.isalpha()


class KeyboardRow(Sequence[Key]):
    """One line of keys; ``stretch`` widens short rows to the longest one."""

    def __init__(self, keys: Iterable[Key], *, stretch: bool = True):
        self._keys = tuple(keys)
        if not self._keys:
            raise ValueError("A keyboard row needs at least one key")
        self.stretch = stretch

    def letters(self) -> str:
        return "".join(k.label.lower() for k in self._keys if k.is_letter())

    def __len__(self) -> int:
        return len(self._keys)

    def __getitem__(self, index):
        return self._keys[index]


class Keyboard(Sequence[KeyboardRow]):
    def __init__(self, rows: List[KeyboardRow]):
        if not rows:
            raise ValueError("Keyboard must contain at least one row")
        self._rows = rows

    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, index):
        return self._rows[index]

    def keys(self) -> Iterator[Key]:
        for row in self._rows:
            yield from row

    def letter_keys(self) -> Iterator[Key]:
        """Yield the single-letter keys whose case follows SHIFT."""
        return (k for k in self.keys() if k.is_letter())

    def letters(self) -> str:
        return "".join(row.letters() for row in self._rows)

    def key_for(self, action: Action) -> Key | None:
        for k in self.keys():
            if k.action == action:
                return k
        return None
