"""Interface definitions for the side effects around the suggestion engine."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class ImageResolver(Protocol):
    """Find the picture for a vocabulary identifier."""

    def resolve(self, identifier: str) -> Path | None:
        ...


@runtime_checkable
class HistoryStore(Protocol):
    """Durable storage for committed words."""

    def load(self) -> list[str]:
        ...

    def save(self, words: list[str]) -> None:
        ...


@runtime_checkable
class Haptics(Protocol):
    """Fire-and-forget feedback pulse."""

    def pulse(self, duration_ms: int) -> None:
        ...


@runtime_checkable
class Speaker(Protocol):
    """Read a committed word aloud."""

    available: bool

    def speak(self, text: str) -> None:
        ...

    def stop(self) -> None:
        ...


class NullHaptics:
    def pulse(self, duration_ms: int) -> None:
        pass


class NullSpeaker:
    available = False

    def speak(self, text: str) -> None:
        pass

    def stop(self) -> None:
        pass


class MemoryHistoryStore:
    """Keeps history for the lifetime of the process only."""

    def __init__(self, words: list[str] | None = None) -> None:
        self.words = list(words or [])

    def load(self) -> list[str]:
        return list(self.words)

    def save(self, words: list[str]) -> None:
        self.words = list(words)
