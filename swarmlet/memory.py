"""Key-value memory shared by the nodes of a pipeline."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Any


class Memory(ABC):
    """Storage that nodes can read from and write to."""

    @abstractmethod
    def get(self, key: str) -> Any:
        """Return the value under ``key``; raise ``KeyError`` if absent."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``."""

    @abstractmethod
    def append(self, key: str, value: Any) -> None:
        """Append ``value`` to the text under ``key``."""


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "<nil>"
    return str(value)


class DummyMemory(Memory):
    """Thread-safe in-process memory backed by a dict."""

    def __init__(self) -> None:
        self._store: dict[str, Any] = {}
        self._lock = threading.RLock()

    def get(self, key: str) -> Any:
        with self._lock:
            try:
                return self._store[key]
            except KeyError:
                raise KeyError(f"key '{key}' not found in memory") from None

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._store[key] = value

    def append(self, key: str, value: Any) -> None:
        """Join onto existing text with a newline, else replace the value."""
        with self._lock:
            existing = self._store.get(key)
            if isinstance(existing, str):
                self._store[key] = existing + "\n" + _format_value(value)
            else:
                self._store[key] = value