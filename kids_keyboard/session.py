from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace

# Highlight markers besides plain letters (and " " for the space key).
MATCH = "+"    # word complete, light the CLEAR key
EDITING = "-"  # text without a suggestion, light DELETE
NONE = "*"     # nothing lit


@dataclass(frozen=True)
class SessionState:
    text_input: str = ""
    suggestion: str = ""  # ghost completion, always starts with text_input
    is_upper_case: bool = True
    highlight: str = NONE

    def evolve(self, **changes) -> "SessionState":
        return replace(self, **changes)

    def recase(self, text: str) -> str:
        return text.upper() if self.is_upper_case else text.lower()


@dataclass
class History:
    """Committed words, unique ignoring case, with a browsing cursor."""

    words: list[str] = field(default_factory=list)
    index: int = 0  # first back from here wraps to the newest word

    def __post_init__(self) -> None:
        self.words = _unique_ci(self.words)
        if not 0 <= self.index < len(self.words):
            self.index = 0

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "History":
        return cls([w for w in words if isinstance(w, str) and w.strip()])

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __contains__(self, word: object) -> bool:
        return self.position(word) is not None

    def position(self, word: object) -> int | None:
        if not isinstance(word, str):
            return None
        w = word.lower()
        for i, existing in enumerate(self.words):
            if existing.lower() == w:
                return i
        return None

    def current(self) -> str | None:
        return self.words[self.index] if self.words else None

    def add(self, word: str) -> bool:
        """Append ``word``; return False if it was already present.

        Either way the cursor ends on ``word``.
        """
        pos = self.position(word)
        if pos is not None:
            self.index = pos
            return False
        self.words.append(word)
        self.index = len(self.words) - 1
        return True

    def back(self) -> str | None:
        if not self.words:
            return None
        if self.index > 0:
            self.index -= 1
        else:
            self.index = len(self.words) - 1
        return self.words[self.index]

    def forward(self) -> str | None:
        if not self.words:
            return None
        self.index += 1
        if self.index >= len(self.words):
            self.index = 0
        return self.words[self.index]


def _unique_ci(items: Iterable[str]) -> list[str]:
    seen, out = set(), []
    for w in items:
        if w.lower() not in seen:
            seen.add(w.lower())
            out.append(w)
    return out
