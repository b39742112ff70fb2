"""Chat-completions client for OpenAI-compatible endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence

import httpx

from swarmlet.llm import (
    LLM,
    LLMFunctionCall,
    LLMMessage,
    LLMOptions,
    LLMTool,
    LLMToolCall,
    LLMToolFieldProperty,
)

DEFAULT_BASE_URL = "https://api.openai.com/v1"

ROLE_SYSTEM = "system"
ROLE_ASSISTANT = "assistant"
ROLE_TOOL = "tool"


def to_openai_params(
    params: Mapping[str, LLMToolFieldProperty],
) -> dict[str, dict[str, Any]]:
    """Turn tool parameter properties into JSON-schema definitions."""
    definitions: dict[str, dict[str, Any]] = {}
    for name, prop in params.items():
        definition: dict[str, Any] = {}
        if prop.type:
            definition["type"] = prop.type
        if prop.description:
            definition["description"] = prop.description
        if prop.enum:
            definition["enum"] = list(prop.enum)
        definitions[name] = definition
    return definitions


def _tool_call_payload(call: LLMToolCall) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": call.id,
        "type": call.tool_type,
        "function": {
            "name": call.function.name,
            "arguments": call.function.arguments,
        },
    }
    if call.index is not None:
        payload["index"] = call.index
    return payload


def _message_payload(message: LLMMessage) -> dict[str, Any]:
    payload: dict[str, Any] = {"role": message.role}
    if message.message:
        payload["content"] = message.message
    if message.role == ROLE_TOOL:
        payload["tool_call_id"] = message.tool_call_id
    if message.role == ROLE_ASSISTANT and message.tool_calls:
        payload["tool_calls"] = [_tool_call_payload(c) for c in message.tool_calls]
    return payload


def _tool_payload(tool: LLMTool) -> dict[str, Any]:
    return {
        "type": "function",
        "function": {
            "name": tool.name,
            "description": tool.description,
            "parameters": {
                "type": "object",
                "properties": to_openai_params(tool.params),
            },
        },
    }


def parse_response(data: Mapping[str, Any]) -> LLMMessage:
    """Build a message from the first choice of a chat-completion response."""
    choices = data.get("choices") or []
    if not choices:
        raise ValueError("chat completion response has no choices")
    body = choices[0].get("message") or {}
    calls = [
        LLMToolCall(
            id=raw.get("id", ""),
            tool_type=raw.get("type", ""),
            index=raw.get("index"),
            function=LLMFunctionCall(
                name=(raw.get("function") or {}).get("name", ""),
                arguments=(raw.get("function") or {}).get("arguments", ""),
            ),
        )
        for raw in body.get("tool_calls") or []
    ]
    return LLMMessage(
        role=body.get("role", ""),
        message=body.get("content") or "",
        tool_calls=calls,
    )


@dataclass
class OpenAILLM(LLM):
    """Model backed by an OpenAI-compatible chat-completions API."""

    api_key: str = field(repr=False)
    model: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 60.0
    client: Optional[httpx.Client] = field(default=None, repr=False)

    def build_request(
        self,
        options: LLMOptions,
        tools: Sequence[LLMTool],
        system_message: str,
        messages: Sequence[LLMMessage],
    ) -> dict[str, Any]:
        """Return the JSON body of a chat-completion request."""
        system = _message_payload(LLMMessage(role=ROLE_SYSTEM, message=system_message))
        request: dict[str, Any] = {
            "model": self.model,
            "messages": [system, *(_message_payload(m) for m in messages)],
        }
        if tools:
            request["tools"] = [_tool_payload(t) for t in tools]
        if options.temperature > 0:
            request["temperature"] = options.temperature
        if options.max_tokens > 0:
            request["max_tokens"] = options.max_tokens
        return request

    def generate(
        self,
        options: LLMOptions,
        tools: Sequence[LLMTool],
        system_message: str,
        *args: LLMMessage,
    ) -> LLMMessage:
        """Send the conversation and return the model's reply.

        Raises ``httpx.HTTPError`` on transport or status failures.
        """
        body = self.build_request(options, tools, system_message, args)
        url = f"{self.base_url.rstrip('/')}/chat/completions"
        headers = {"Authorization": f"Bearer {self.api_key}"}
        if self.client is not None:
            response = self.client.post(url, json=body, headers=headers)
        else:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(url, json=body, headers=headers)
        response.raise_for_status()
        return parse_response(response.json())