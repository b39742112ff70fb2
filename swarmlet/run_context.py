"""Per-run state: node inputs, outputs, errors and message history."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Optional, TextIO

from swarmlet.llm import LLMMessage


@dataclass
class RunContext:
    """Thread-safe record of what each node saw and produced in one run."""

    run_id: str = ""
    stream_writer: Optional[TextIO] = None
    node_inputs: dict[str, str] = field(default_factory=dict)
    node_outputs: dict[str, str] = field(default_factory=dict)
    node_errors: dict[str, BaseException] = field(default_factory=dict)
    message_history: dict[str, list[LLMMessage]] = field(default_factory=dict)
    _lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )

    def add_input(self, key: str, value: str) -> None:
        with self._lock:
            self.node_inputs[key] = value

    def get_input(self, key: str) -> Optional[str]:
        """Return the input recorded for ``key``, or ``None``."""
        with self._lock:
            return self.node_inputs.get(key)

    def add_output(self, key: str, value: str) -> None:
        with self._lock:
            self.node_outputs[key] = value

    def get_output(self, key: str) -> Optional[str]:
        """Return the output recorded for ``key``, or ``None``."""
        with self._lock:
            return self.node_outputs.get(key)

    def add_error(self, key: str, error: BaseException) -> None:
        with self._lock:
            self.node_errors[key] = error

    def get_error(self, key: str) -> Optional[BaseException]:
        """Return the error recorded for ``key``, or ``None``."""
        with self._lock:
            return self.node_errors.get(key)

    def add_message(self, key: str, message: LLMMessage) -> None:
        with self._lock:
            self.message_history.setdefault(key, []).append(message)

    def get_messages(self, key: str) -> list[LLMMessage]:
        """Return a copy of the message history for ``key``."""
        with self._lock:
            return list(self.message_history.get(key, ()))