from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path

from .interfaces import Haptics, HistoryStore, ImageResolver, NullHaptics, NullSpeaker, Speaker
from .key_types import Action
from .session import History, SessionState
from .suggest import MATCH_PULSE_MS, TAP_PULSE_MS, KeyResult, on_key_event
from .vocabulary import VocabularyIndex

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Update:
    """What the screen should show after a key press."""

    result: KeyResult
    image: Path | None = None
    sound_on: bool = False


class KeyboardController:
    """Run key presses through the engine and perform the requested side effects."""

    def __init__(
        self,
        vocabulary: VocabularyIndex,
        *,
        store: HistoryStore | None = None,
        images: ImageResolver | None = None,
        haptics: Haptics | None = None,
        speaker: Speaker | None = None,
        upper_case: bool = True,
        sound: bool = True,
        tap_pulse_ms: int = TAP_PULSE_MS,
        match_pulse_ms: int = MATCH_PULSE_MS,
        rng: random.Random | None = None,
    ) -> None:
        self.vocabulary = vocabulary
        self.store = store
        self.images = images
        self.haptics = haptics or NullHaptics()
        self.speaker = speaker or NullSpeaker()
        self.tap_pulse_ms = tap_pulse_ms
        self.match_pulse_ms = match_pulse_ms
        self.rng = rng
        # single owner of session + history
        self.state = SessionState(is_upper_case=upper_case)
        self.history = History.from_words(self._load_history())
        self.sound_on = sound and bool(getattr(self.speaker, "available", False))

    # ───────── collaborator boundary ──────────────────────────────────────
    def _load_history(self) -> list[str]:
        if self.store is None:
            return []
        try:
            return self.store.load()
        except Exception:
            log.exception("Could not load history")
            return []

    def _save_history(self) -> None:
        if self.store is None:
            return
        try:
            self.store.save(list(self.history))
        except Exception:
            log.exception("Could not save history")

    def _pulse(self, duration_ms: int) -> None:
        try:
            self.haptics.pulse(duration_ms)
        except Exception:
            log.exception("Haptic pulse failed")

    def _speak(self, text: str) -> None:
        if not self.sound_on:
            return
        try:
            self.speaker.speak(text)
        except Exception:
            log.exception("Speech failed for %r", text)

    def _resolve_image(self, identifier: str | None) -> Path | None:
        if identifier is None or self.images is None:
            return None
        try:
            return self.images.resolve(identifier)
        except Exception:
            log.exception("Image lookup failed for %s", identifier)
            return None

    # ───────── public API ─────────────────────────────────────────────────
    def toggle_sound(self) -> bool:
        self.sound_on = not self.sound_on and bool(getattr(self.speaker, "available", False))
        log.info("Sound %s", "on" if self.sound_on else "off")
        return self.sound_on

    def on_key(self, key) -> Update:
        action = key if isinstance(key, Action) else getattr(key, "action", None)
        if action == Action.sound:
            self.toggle_sound()

        result = on_key_event(
            key,
            self.state,
            self.history,
            self.vocabulary,
            self.rng,
            tap_ms=self.tap_pulse_ms,
            match_ms=self.match_pulse_ms,
        )
        # commit before any side effect can fail
        self.state = result.state

        for duration in result.pulses:
            self._pulse(duration)
        if result.history_changed:
            self._save_history()
        if result.committed:
            log.info("Matched %r", result.committed)
            self._speak(result.committed)

        return Update(result, self._resolve_image(result.image_ref), self.sound_on)

    def close(self) -> None:
        try:
            self.speaker.stop()
        except Exception:
            log.exception("Could not stop speaker")
