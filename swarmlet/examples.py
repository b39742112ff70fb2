"""Ready-made example pipelines and a command to run them."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Any, Callable, Optional, Sequence

import httpx

from swarmlet.llm import LLM, LLMTool, LLMToolFieldProperty
from swarmlet.llm_openai import OpenAILLM
from swarmlet.memory import Memory
from swarmlet.node import NodeError
from swarmlet.node_augmented import AugmentedLLMNode
from swarmlet.node_llm_call import LLMCallNode
from swarmlet.node_output import OutputNode
from swarmlet.pipeline import Pipeline

_DEFAULT_MODEL = "gpt-4o-mini"
_DEFAULT_RUN_ID = "102"


def build_simple_call(llm: LLM, memory: Memory) -> Pipeline:
    """One model call whose answer is printed."""
    output = OutputNode(id="output", from_node="1", visible=True)
    node1 = LLMCallNode(
        id="1",
        children=[output],
        system_prompt="You are a travel agent recommending places to go",
    )
    return Pipeline(name="Pipeline", root=node1, llm=llm, memory=memory)


def build_chained_call(llm: LLM, memory: Memory) -> Pipeline:
    """Three chained calls: reverse a city name, find its temperature, convert it."""
    output = OutputNode(id="output", from_node="2", visible=True)
    node1 = LLMCallNode(
        id="1",
        children=[output],
        system_prompt=(
            "You are a temperature expert. I will give you a temperature in Celsius "
            "and you will return in Farenheit. Return just a simple string with the "
            "temperature."
        ),
    )
    node2 = LLMCallNode(
        id="2",
        children=[node1],
        system_prompt=(
            "You are a temperature expert. Give me plain string of average "
            "temperature in this city in Celsius."
        ),
    )
    node3 = LLMCallNode(
        id="3",
        children=[node2],
        system_prompt=(
            "You are a reverser agent. Return plain message string of the reversed input"
        ),
    )
    return Pipeline(name="Pipeline", root=node3, llm=llm, memory=memory)


def _get_temperature(args: dict[str, Any]) -> str:
    return "400 F"


def build_tool_call(llm: LLM, memory: Memory) -> Pipeline:
    """A tool-using node that can look up a temperature."""
    tools = [
        LLMTool(
            name="get_temperature",
            description="Get temperature from any country",
            params={
                "name": LLMToolFieldProperty(
                    type="string",
                    description="API to get temperature from any country",
                )
            },
            executor=_get_temperature,
        )
    ]
    output = OutputNode(id="output", from_node="1", visible=True)
    node1 = AugmentedLLMNode(id="1", children=[output], tools=tools)
    return Pipeline(name="Pipeline", root=node1, llm=llm, memory=memory)


_EXAMPLES: dict[str, tuple[Callable[[LLM, Memory], Pipeline], str]] = {
    "simple": (build_simple_call, "I want to go to San Juan"),
    "chained": (build_chained_call, "RP, nauJ naS"),
    "tool": (build_tool_call, "What is the temperature in Nebraska"),
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one example pipeline against the chat-completions API."""
    from swarmlet.memory import DummyMemory

    parser = argparse.ArgumentParser(
        prog="swarmlet-example",
        description="Run an example pipeline. The API key is read from LLM_API_KEY.",
    )
    parser.add_argument("example", nargs="?", choices=sorted(_EXAMPLES), default="simple")
    parser.add_argument("--model", default=_DEFAULT_MODEL)
    parser.add_argument("--run-id", default=_DEFAULT_RUN_ID)
    parser.add_argument("--input", dest="initial_input", default=None)
    options = parser.parse_args(argv)

    builder, default_input = _EXAMPLES[options.example]
    api_key = os.environ.get("LLM_API_KEY", "")
    llm = OpenAILLM(api_key=api_key, model=options.model)
    pipeline = builder(llm, DummyMemory())
    initial_input = (
        options.initial_input if options.initial_input is not None else default_input
    )
    try:
        pipeline.run(initial_input, options.run_id, sys.stdout)
    except (httpx.HTTPError, NodeError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())