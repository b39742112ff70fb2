# swarmlet

swarmlet builds small LLM workflows from linked nodes. Each node takes text,
does its work, and passes its result on to its children. A `Pipeline` starts
the root node and returns the root node's output.

## Building blocks

- `LLMCallNode` (`swarmlet.node_llm_call`) fills its `prompt_template`
  (`"%s"` by default) with its inputs. It makes one model call and records the
  reply as its output. Then it runs each of its `children` on the reply.
- `AugmentedLLMNode` (`swarmlet.node_augmented`) is a tool-using node. It
  gives the model its `tools`, which are `LLMTool` objects. When the model asks
  for tool calls, the node runs them and adds the results to the conversation
  as `tool` messages. A bad argument, a tool that raises, or an unknown tool
  name is reported back to the model as a tool message rather than raised.
  The loop ends when the model answers with text and no tool calls, or after
  `max_tool_iterations` rounds (5 by default). If no answer came, the node
  returns a fixed fallback text and records a `NodeError` for itself.
- `OutputNode` (`swarmlet.node_output`) copies the output of the node named by
  `from_node`. If `visible` is set, it also writes that output as one line to
  the run's stream writer. It raises `NodeError` when that node has no output.
- `RunContext` (`swarmlet.run_context`) records each node's inputs, outputs,
  errors and message history during one run. Access to it is thread-safe.
- `DummyMemory` (`swarmlet.memory`) is a thread-safe in-memory key/value store.
  `get` raises `KeyError` for a missing key. `append` adds the new value to an
  existing string with a newline between them; otherwise it replaces the value.

## Models

A model implements the `LLM` interface in `swarmlet.llm`:
`generate(options, tools, prompt, *messages)` returns an `LLMMessage`.

`OpenAILLM` (`swarmlet.llm_openai`) talks to an OpenAI-compatible
chat-completions endpoint over HTTP with `httpx`. It sends the tool
definitions with each request and reads the tool calls back from the reply.
Temperature and `max_tokens` are sent only when they are greater than zero.
You can pass your own `httpx.Client` and `base_url`. HTTP failures are raised
as `httpx.HTTPError`. `build_request` returns the JSON body without sending
it, and `parse_response` turns a response body into an `LLMMessage`.

`DummyLLM` and `ReverseLLM` are simple stand-ins. They return plain strings
instead of `LLMMessage` objects, so they cannot be used directly as a pipeline
model. `ReverseLLM` returns its first message reversed; `reverse_string` is
available on its own too.

## Running a pipeline

```python
import sys
from swarmlet.memory import DummyMemory
from swarmlet.llm_openai import OpenAILLM
from swarmlet.examples import build_simple_call

llm = OpenAILLM(api_key="placeholder", model="gpt-4o-mini")
pipeline = build_simple_call(llm, DummyMemory())
answer = pipeline.run("I want to go to San Juan", "102", sys.stdout)
```

`Pipeline.run(initial_input, run_id="", writer=None)` takes these arguments:

- `initial_input`: the text given to the root node.
- `run_id`: a name for this run.
- `writer`: any text stream. Visible output nodes write to it.

It returns the root node's output. It raises `NodeError` if the pipeline has
no root or the agent context has no model. Errors raised by nodes and models
pass through to the caller.

## Examples

`swarmlet.examples` has three ready-made workflows. Each one takes a model
and a memory:

- `build_simple_call`: a single travel-agent call.
- `build_chained_call`: a chain of three calls. The first reverses the input,
  the second gives a city's average temperature in Celsius, and the third
  converts it to Fahrenheit.
- `build_tool_call`: a tool-using assistant with a `get_temperature` tool.

To run one against a live model, put your key in the `LLM_API_KEY`
environment variable and start:

```
swarmlet-example [simple|chained|tool] [--model MODEL] [--run-id ID] [--input TEXT]
```

The default example is `simple`, and the default model is `gpt-4o-mini`. The
command exits with status 1 and prints the error if the run fails.

## What it does not do

Nodes do not read or write the memory they are given; `DummyMemory` is only
passed along with the run. Replies are not streamed token by token. Output
nodes write whole lines after the model has answered. `NodeType`,
`MemoryAndStreamingConfig` and `AgenticLLMNode` are plain settings types that
no node uses yet.

## Installing

```
pip install .
pip install ".[test]"   # to run the test suite with pytest
```