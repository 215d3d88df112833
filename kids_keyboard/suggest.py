"""Autocomplete engine: one ghosted suggestion and the next key to light."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from functools import lru_cache

from wordfreq import zipf_frequency

from .kb_layout import Key
from .key_types import Action
from .session import EDITING, MATCH, NONE, History, SessionState
from .vocabulary import VocabularyEntry, VocabularyIndex

log = logging.getLogger(__name__)

TAP_PULSE_MS = 10
MATCH_PULSE_MS = 100

GHOST_COLOR_LIGHT = "#cccccc"
GHOST_COLOR_DARK = "#444444"


def ghost_color(dark: bool) -> str:
    """Foreground for the de-emphasised part of a suggestion."""
    return GHOST_COLOR_DARK if dark else GHOST_COLOR_LIGHT


@dataclass(frozen=True)
class Display:
    typed: str
    ghost: str = ""

    @property
    def text(self) -> str:
        return self.typed + self.ghost


@dataclass(frozen=True)
class KeyResult:
    state: SessionState
    highlight: str
    entry: VocabularyEntry | None = None  # exact match, if any
    display: Display = Display("")
    committed: str | None = None  # word to read aloud
    history_changed: bool = False
    pulses: tuple[int, ...] = ()

    @property
    def image_ref(self) -> str | None:
        return self.entry.identifier if self.entry else None


# ───────── candidate selection ────────────────────────────────────────────


@lru_cache(maxsize=1024)
def _frequency(word: str) -> float:
    return zipf_frequency(word, "en")


def rank_candidates(entries: list[VocabularyEntry]) -> list[VocabularyEntry]:
    """Shortest identifiers first, then more common words, then manifest order."""
    return sorted(entries, key=lambda e: (len(e.identifier), -_frequency(e.word)))


def pick_suggestion(
    prefix: str,
    history: History,
    vocabulary: VocabularyIndex,
    rng: random.Random | None = None,
) -> str:
    """Return the best completion of ``prefix`` or ``""``.

    Words already in ``history`` are skipped. When that leaves nothing, a
    random match is recycled so the child still gets a hint.
    """
    matches = rank_candidates(vocabulary.prefix_matches(prefix))
    for entry in matches:
        if entry.word not in history:
            return entry.word
    if matches:
        return (rng or random).choice(matches).word
    return ""


# ───────── key handling ───────────────────────────────────────────────────


def _classify(key) -> tuple[Action | None, str]:
    """Return ``(action, typed_value)`` for a key press."""
    if isinstance(key, Key):
        return key.action, key.value
    if isinstance(key, Action):
        return key, " " if key == Action.space else ""
    if isinstance(key, str):
        if len(key) > 1:
            action = Action.parse(key.lower())
            return action, " " if action == Action.space else ""
        if key.isalpha() or key == " ":
            return None, key
    return None, ""


def _redisplay(state: SessionState, vocabulary: VocabularyIndex, pulses: tuple[int, ...]) -> KeyResult:
    text, suggestion = state.text_input, state.suggestion
    ghost = ""
    if suggestion.lower().startswith(text.lower()):
        ghost = state.recase(suggestion[len(text):])
    entry = vocabulary.lookup_exact(text) if text and not ghost else None
    return KeyResult(state, state.highlight, entry, Display(text, ghost), pulses=pulses)


def on_key_event(
    key,
    state: SessionState,
    history: History,
    vocabulary: VocabularyIndex,
    rng: random.Random | None = None,
    *,
    tap_ms: int = TAP_PULSE_MS,
    match_ms: int = MATCH_PULSE_MS,
) -> KeyResult:
    """Apply one key press and resolve the typed text against ``vocabulary``.

    ``state`` is never mutated; the new state is returned in the result.
    ``history`` is updated in place when a word is committed or browsed.
    """
    action, value = _classify(key)
    if action is None and not value:
        log.debug("Ignoring key %r", key)
        return _redisplay(state, vocabulary, ())
    if action == Action.sound:
        return _redisplay(state, vocabulary, ())

    tap = (tap_ms,)
    if action == Action.shift:
        return _redisplay(state.evolve(is_upper_case=not state.is_upper_case), vocabulary, tap)

    text, suggestion = state.text_input, state.suggestion
    browsing = False
    if action == Action.clear:
        text = suggestion = ""
    elif action == Action.delete:
        if not text:
            return _redisplay(state, vocabulary, tap)
        text = text[:-1]
    elif action is not None and action.is_navigation():
        browsing = True
        word = history.back() if action == Action.history_back else history.forward()
        if word is not None:
            text = suggestion = word
    else:
        value = state.recase(value)
        if suggestion and text.lower() == suggestion.lower():
            text = value  # typing past a finished suggestion starts a new word
        else:
            text += value
    text = text.lstrip()

    entry = vocabulary.lookup_exact(text) if text else None
    if entry is not None:
        shown = state.recase(entry.word)
        changed = False
        if not browsing:
            changed = history.add(entry.word)
        new = state.evolve(text_input=shown, suggestion="", highlight=MATCH)
        return KeyResult(
            new,
            MATCH,
            entry,
            Display(shown),
            committed=entry.word,
            history_changed=changed,
            pulses=tap + (match_ms,),
        )

    if not text:
        new = state.evolve(text_input="", suggestion="", highlight=NONE)
        return KeyResult(new, NONE, pulses=tap)

    if not suggestion.lower().startswith(text.lower()):
        suggestion = ""
    if not suggestion:
        suggestion = pick_suggestion(text, history, vocabulary, rng)

    if suggestion and suggestion.lower() != text.lower():
        suggestion = state.recase(suggestion)
        leftover = suggestion[len(text):]
        highlight = leftover[0].lower()
        new = state.evolve(text_input=text, suggestion=suggestion, highlight=highlight)
        return KeyResult(new, highlight, display=Display(text, leftover), pulses=tap)

    new = state.evolve(text_input=text, suggestion=suggestion, highlight=EDITING)
    return KeyResult(new, EDITING, display=Display(text), pulses=tap)
