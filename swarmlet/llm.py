"""Language-model interface and the message types exchanged with it."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence

logger = logging.getLogger(__name__)

_SIMULATED_DELAY = 0.05

ToolExecutor = Callable[[dict[str, Any]], str]


@dataclass
class LLMOptions:
    """Generation settings passed to a model."""

    model: str = ""
    max_tokens: int = 0
    temperature: float = 0.0


@dataclass
class LLMToolFieldProperty:
    """Schema of a single tool parameter."""

    type: str
    description: str = ""
    enum: list[str] = field(default_factory=list)


@dataclass
class LLMTool:
    """A tool the model may call; ``executor`` raises on failure."""

    name: str
    executor: ToolExecutor
    description: str = ""
    params: dict[str, LLMToolFieldProperty] = field(default_factory=dict)


@dataclass
class LLMFunctionCall:
    """Function name and raw JSON arguments of a tool call."""

    name: str = ""
    arguments: str = ""


@dataclass
class LLMToolCall:
    """A tool call requested by the model."""

    id: str = ""
    tool_type: str = "function"
    function: LLMFunctionCall = field(default_factory=LLMFunctionCall)
    index: Optional[int] = None


@dataclass
class LLMMessage:
    """One message of a conversation."""

    message: str = ""
    role: str = ""
    tool_call_id: str = ""
    tool_calls: list[LLMToolCall] = field(default_factory=list)


class LLM(ABC):
    """A model that answers a conversation."""

    @abstractmethod
    def generate(
        self,
        options: LLMOptions,
        tools: Sequence[LLMTool],
        prompt: str,
        *args: LLMMessage,
    ) -> LLMMessage:
        """Answer the messages in ``args`` under the system ``prompt``."""


class DummyLLM:
    """Simulates a model by echoing the prompt."""

    def generate(self, prompt: str, options: LLMOptions) -> str:
        time.sleep(_SIMULATED_DELAY)
        logger.info('(DummyLLM) Generated for: "%s"', prompt)
        return "Simulated LLM response for: " + prompt


class ReverseLLM:
    """Simulates a model by reversing the first message."""

    def generate(
        self,
        options: LLMOptions,
        tools: Sequence[LLMTool],
        system_prompt: str,
        *args: LLMMessage,
    ) -> str:
        if not args:
            raise ValueError("ReverseLLM needs at least one message")
        time.sleep(_SIMULATED_DELAY)
        output = reverse_string(args[0].message)
        logger.info('(ReverseLLM) Reversed: "%s"', output)
        return output


def reverse_string(s: str) -> str:
    """Return ``s`` with its characters in reverse order."""
    return s[::-1]