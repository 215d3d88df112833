"""Desktop stand-in for vibration: a short audible click."""

from __future__ import annotations

import logging

import numpy as np
import sounddevice as sd

log = logging.getLogger(__name__)


class ClickHaptics:
    """Play a decaying tone lasting the requested pulse duration."""

    def __init__(self, samplerate: int = 22_050, frequency: float = 880.0, volume: float = 0.3) -> None:
        self.samplerate = samplerate
        self.frequency = frequency
        self.volume = volume

    def _tone(self, duration_ms: int) -> np.ndarray:
        n = max(1, int(self.samplerate * duration_ms / 1000))
        t = np.arange(n, dtype=np.float32) / self.samplerate
        envelope = np.exp(-5.0 * t / max(t[-1], 1e-3)).astype(np.float32)
        wave = np.sin(2 * np.pi * self.frequency * t).astype(np.float32)
        return np.clip(wave * envelope * self.volume, -1.0, 1.0)

    def pulse(self, duration_ms: int) -> None:
        if duration_ms <= 0:
            return
        try:
            sd.play(self._tone(duration_ms), self.samplerate, blocking=False)
        except sd.PortAudioError as exc:
            log.warning("Haptic click failed: %s", exc)
