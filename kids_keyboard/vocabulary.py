"""Fixed index of the illustrated words the keyboard can show."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from importlib import resources

log = logging.getLogger(__name__)

VOCABULARY_PACKAGE = "kids_keyboard.resources"
DEFAULT_MANIFEST = "vocabulary.json"

# Illustration identifiers look like ``a_ice_cream``.
ID_PREFIX = "a_"


def display_word(identifier: str) -> str:
    """Turn an image identifier into the word shown to the child."""
    name = identifier[len(ID_PREFIX):] if identifier.startswith(ID_PREFIX) else identifier
    return name.replace("_", " ")


@dataclass(frozen=True, slots=True)
class VocabularyEntry:
    identifier: str
    word: str
    emoji: str = ""

    @property
    def key(self) -> str:
        return self.word.lower()


class VocabularyIndex:
    """Case-insensitive, read-only lookup over :class:`VocabularyEntry` items.

    Entries keep their manifest order; :meth:`prefix_matches` returns them in
    that order so callers can rely on it for tie-breaking.
    """

    def __init__(self, entries: Iterable[VocabularyEntry]):
        self._entries: list[VocabularyEntry] = []
        self._by_word: dict[str, VocabularyEntry] = {}
        for entry in entries:
            if not entry.word.strip():
                raise ValueError(f"Vocabulary entry '{entry.identifier}' has no word")
            if entry.key in self._by_word:
                log.warning("Duplicate vocabulary word %r ignored", entry.word)
                continue
            self._by_word[entry.key] = entry
            self._entries.append(entry)

    @classmethod
    def from_identifiers(cls, identifiers: Iterable[str]) -> "VocabularyIndex":
        return cls(VocabularyEntry(i, display_word(i)) for i in identifiers)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[VocabularyEntry]:
        return iter(self._entries)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._by_word

    def lookup_exact(self, word: str) -> VocabularyEntry | None:
        """Return the entry spelled ``word`` (any case) or ``None``."""
        return self._by_word.get(word.lower())

    def prefix_matches(self, prefix: str) -> list[VocabularyEntry]:
        """Return every entry starting with ``prefix``; empty prefix matches nothing."""
        if not prefix:
            return []
        p = prefix.lower()
        return [e for e in self._entries if e.key.startswith(p)]


def load_vocabulary(path: str | None = None) -> VocabularyIndex:
    """Load a :class:`VocabularyIndex` from ``path`` or the bundled manifest."""
    if path:
        with open(path, "r", encoding="utf-8") as file:
            manifest = json.load(file)
    else:
        with resources.files(VOCABULARY_PACKAGE).joinpath(DEFAULT_MANIFEST).open(
            "r", encoding="utf-8"
        ) as file:
            manifest = json.load(file)

    entries = []
    for item in manifest["words"]:
        identifier = item["id"]
        entries.append(
            VocabularyEntry(
                identifier,
                item.get("word") or display_word(identifier),
                item.get("emoji", ""),
            )
        )
    index = VocabularyIndex(entries)
    log.debug("Loaded %d vocabulary words", len(index))
    return index
