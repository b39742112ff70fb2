import json

import httpx
import pytest

from swarmlet.llm import (
    LLMFunctionCall,
    LLMMessage,
    LLMOptions,
    LLMTool,
    LLMToolCall,
    LLMToolFieldProperty,
)
from swarmlet.llm_openai import OpenAILLM, parse_response, to_openai_params


def _llm(handler=None):
    client = None
    if handler is not None:
        client = httpx.Client(transport=httpx.MockTransport(handler))
    return OpenAILLM(api_key="placeholder", model="gpt-4o-mini", client=client)


def _tool():
    return LLMTool(
        name="get_temperature",
        description="Get temperature from any country",
        params={
            "name": LLMToolFieldProperty(
                type="string",
                description="API to get temperature from any country",
            )
        },
        executor=lambda args: "400 F",
    )


def test_to_openai_params_omits_empty_fields():
    params = {
        "unit": LLMToolFieldProperty(type="string", enum=["C", "F"]),
        "city": LLMToolFieldProperty(type="string", description="a city"),
    }
    result = to_openai_params(params)
    assert result["unit"] == {"type": "string", "enum": ["C", "F"]}
    assert result["city"] == {"type": "string", "description": "a city"}


def test_build_request_starts_with_system_message():
    request = _llm().build_request(
        LLMOptions(), [], "be brief", [LLMMessage(role="user", message="hi")]
    )
    assert request["model"] == "gpt-4o-mini"
    assert request["messages"][0] == {"role": "system", "content": "be brief"}
    assert request["messages"][1] == {"role": "user", "content": "hi"}
    assert "tools" not in request


def test_build_request_options_only_when_positive():
    llm = _llm()
    unset = llm.build_request(LLMOptions(temperature=0, max_tokens=-1), [], "s", [])
    assert "temperature" not in unset and "max_tokens" not in unset
    set_ = llm.build_request(LLMOptions(temperature=0.5, max_tokens=100), [], "s", [])
    assert set_["temperature"] == 0.5
    assert set_["max_tokens"] == 100


def test_build_request_tool_messages_and_calls():
    call = LLMToolCall(
        id="call_1",
        tool_type="function",
        index=0,
        function=LLMFunctionCall(name="get_temperature", arguments='{"name": "x"}'),
    )
    messages = [
        LLMMessage(role="assistant", tool_calls=[call]),
        LLMMessage(role="tool", message="400 F", tool_call_id="call_1"),
    ]
    request = _llm().build_request(LLMOptions(), [_tool()], "s", messages)
    assistant, tool_reply = request["messages"][1:]
    assert assistant["tool_calls"][0]["function"]["name"] == "get_temperature"
    assert assistant["tool_calls"][0]["index"] == 0
    assert tool_reply["tool_call_id"] == "call_1"
    function = request["tools"][0]["function"]
    assert request["tools"][0]["type"] == "function"
    assert function["parameters"]["type"] == "object"
    assert function["parameters"]["properties"] == to_openai_params(_tool().params)


def test_parse_response_with_tool_calls():
    data = {
        "choices": [
            {
                "message": {
                    "role": "assistant",
                    "content": None,
                    "tool_calls": [
                        {
                            "id": "call_9",
                            "type": "function",
                            "function": {"name": "f", "arguments": "{}"},
                        }
                    ],
                }
            }
        ]
    }
    message = parse_response(data)
    assert message.role == "assistant"
    assert message.message == ""
    assert message.tool_calls[0].id == "call_9"
    assert message.tool_calls[0].index is None
    assert message.tool_calls[0].function.arguments == "{}"


def test_parse_response_without_choices_raises():
    with pytest.raises(ValueError):
        parse_response({"choices": []})


def test_generate_posts_and_parses():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200,
            json={"choices": [{"message": {"role": "assistant", "content": "hello"}}]},
        )

    reply = _llm(handler).generate(
        LLMOptions(), [], "sys", LLMMessage(role="user", message="hi")
    )
    assert reply.message == "hello"
    assert reply.role == "assistant"
    assert seen["url"].endswith("/chat/completions")
    assert seen["auth"] == "Bearer placeholder"
    assert seen["body"]["messages"][1]["content"] == "hi"


def test_generate_raises_on_error_status():
    def handler(request):
        return httpx.Response(401, json={"error": {"message": "bad key"}})

    with pytest.raises(httpx.HTTPStatusError):
        _llm(handler).generate(LLMOptions(), [], "sys")