import pytest

from swarmlet.llm import (
    LLM,
    DummyLLM,
    LLMMessage,
    LLMOptions,
    LLMTool,
    LLMToolCall,
    ReverseLLM,
    reverse_string,
)


def test_reverse_string_source_example():
    assert reverse_string("RP, nauJ naS") == "San Juan ,PR"


@pytest.mark.parametrize("text", ["", "a", "hello world", "ñandú €"])
def test_reverse_string_round_trip(text):
    assert reverse_string(reverse_string(text)) == text
    assert len(reverse_string(text)) == len(text)


def test_reverse_string_swaps_ends():
    result = reverse_string("xyz")
    assert result[0] == "z"
    assert result[-1] == "x"


def test_dummy_llm_echoes_prompt():
    result = DummyLLM().generate("hello", LLMOptions())
    assert result == "Simulated LLM response for: hello"


def test_reverse_llm_reverses_first_message():
    llm = ReverseLLM()
    result = llm.generate(
        LLMOptions(),
        [],
        "system",
        LLMMessage(message="stressed", role="user"),
        LLMMessage(message="ignored", role="user"),
    )
    assert result == reverse_string("stressed")


def test_reverse_llm_without_messages_raises():
    with pytest.raises(ValueError):
        ReverseLLM().generate(LLMOptions(), [], "system")


def test_llm_is_abstract():
    with pytest.raises(TypeError):
        LLM()


def test_llm_subclass_receives_messages():
    class Recorder(LLM):
        def generate(self, options, tools, prompt, *args):
            return LLMMessage(message=f"{prompt}:{len(args)}", role="assistant")

    reply = Recorder().generate(LLMOptions(), [], "p", LLMMessage(), LLMMessage())
    assert reply.message == "p:2"
    assert reply.role == "assistant"


def test_message_defaults_are_independent():
    first = LLMMessage()
    second = LLMMessage()
    first.tool_calls.append(LLMToolCall(id="a"))
    assert second.tool_calls == []


def test_tool_executor_is_called():
    tool = LLMTool(name="t", executor=lambda args: str(args["x"]))
    assert tool.executor({"x": 5}) == "5"
    assert tool.params == {}