"""Text-to-speech for committed words."""

from __future__ import annotations

import logging
import threading
from queue import SimpleQueue

import pyttsx3

log = logging.getLogger(__name__)


class TTSSpeaker:
    """Speak words on a background thread so key handling never blocks."""

    def __init__(self, rate: int | None = 140) -> None:
        self.available = False
        self._queue: SimpleQueue[str | None] = SimpleQueue()
        self._ready = threading.Event()
        self._rate = rate
        self._thread = threading.Thread(target=self._worker, daemon=True)
        self._thread.start()
        # wait briefly so ``available`` reflects the engine at startup
        self._ready.wait(timeout=5)

    def _worker(self) -> None:
        try:
            engine = pyttsx3.init()
            if self._rate:
                engine.setProperty("rate", self._rate)
        except Exception:
            log.exception("Text-to-speech engine unavailable")
            self._ready.set()
            return
        self.available = True
        self._ready.set()

        while True:
            text = self._queue.get()
            if text is None:
                break
            try:
                engine.say(text)
                engine.runAndWait()
            except Exception:
                log.exception("Could not speak %r", text)

    def speak(self, text: str) -> None:
        if text and self.available:
            self._queue.put(text)

    def stop(self, timeout: float = 2.0) -> None:
        if self.available:
            self._queue.put(None)
        self._thread.join(timeout=timeout)
