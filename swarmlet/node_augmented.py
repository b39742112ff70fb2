"""Node that lets the model call tools until it produces an answer."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from swarmlet.llm import LLMMessage, LLMOptions, LLMTool, LLMToolCall
from swarmlet.node import AgentContext, BaseNode, NodeError, WorkflowNode
from swarmlet.node_llm_call import _default_options, _render_prompt, _require_llm
from swarmlet.run_context import RunContext

logger = logging.getLogger(__name__)

DEFAULT_AUGMENTED_SYSTEM_PROMPT = """
You are "Swarmlet-Assistant", an intelligent, helpful, and highly capable AI assistant.
Your primary directive is to understand and fulfill user requests by leveraging the specialized tools at your disposal.

Here are your key operating principles:
1.  **Prioritize Tool Use**: If a user's request can be fulfilled by one or more of your tools, you MUST use the appropriate tool(s) first. Do not attempt to answer questions based on general knowledge if a tool is more relevant or required for accuracy.
2.  **Transparent Tooling**: When you decide to use a tool, acknowledge this intention or briefly explain what tool you are using and why, before providing the final answer (e.g., "I'm checking the knowledge base for that...").
3.  **Synthesize Results**: After executing tools and receiving their outputs, synthesize the information into a clear, concise, and helpful response for the user. Do not just return raw tool output.
4.  **Ask for Clarification**: If a request is ambiguous, lacks necessary parameters for a tool, or you need more information to proceed, politely ask the user clarifying questions.
5.  **Handle Limitations**: If a request is outside your current capabilities or the scope of your available tools, or if a tool execution fails, inform the user gracefully and suggest what you *can* do instead.
6.  **Maintain Context**: Remember and utilize information from previous turns of conversation to provide coherent and relevant responses.
7.  **Be Polite and Professional**: Always maintain a helpful, calm, and professional demeanor throughout the interaction.

You have access to a suite of specialized tools to assist you. Utilize them wisely.
"""

UNRESOLVED_RESPONSE = (
    "The AI assistant could not fully resolve the request after multiple attempts."
)


def _parse_arguments(raw: str) -> dict[str, Any]:
    parsed = json.loads(raw)
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ValueError(f"expected a JSON object, got {type(parsed).__name__}")
    return parsed


@dataclass
class AugmentedLLMNode(BaseNode):
    """Converses with the model, running requested tools between turns."""

    system_prompt: str = DEFAULT_AUGMENTED_SYSTEM_PROMPT
    prompt_template: str = "%s"
    llm_options: LLMOptions = field(default_factory=_default_options)
    tools: list[LLMTool] = field(default_factory=list)
    children: list[WorkflowNode] = field(default_factory=list)
    max_tool_iterations: int = 5

    def _tool_reply(self, run_context: RunContext, call_id: str, text: str) -> None:
        run_context.add_message(
            self.id, LLMMessage(role="tool", message=text, tool_call_id=call_id)
        )

    def _run_tool_call(self, run_context: RunContext, call: LLMToolCall) -> None:
        name = call.function.name
        matching = [tool for tool in self.tools if tool.name == name]
        if not matching:
            text = f"LLM Requested unknown tool: '{name}' (ID: {call.id})"
            logger.warning("[AugmentedLLMNode-%s] %s", self.id, text)
            self._tool_reply(run_context, call.id, text)
            return

        for tool in matching:
            try:
                arguments = _parse_arguments(call.function.arguments)
            except ValueError as exc:
                text = (
                    f"Error unmarshaling tool arguments for '{name}' "
                    f"(ID: {call.id}): {exc}"
                )
                logger.warning("[AugmentedLLMNode-%s] %s", self.id, text)
                self._tool_reply(run_context, call.id, text)
                continue
            try:
                output = tool.executor(arguments)
            except Exception as exc:
                text = f"Error executing tool '{name}' (ID: {call.id}): {exc}"
                logger.warning("[AugmentedLLMNode-%s] %s", self.id, text)
                self._tool_reply(run_context, call.id, text)
                continue
            logger.info(
                "[AugmentedLLMNode-%s] Tool '%s' (ID: %s) executed successfully. Output: %s",
                self.id, name, call.id, output,
            )
            self._tool_reply(run_context, call.id, output)

    def execute(
        self,
        agent_context: AgentContext,
        run_context: RunContext,
        *args: str,
    ) -> str:
        """Return the model's final answer after running every child on it."""
        prompt = _render_prompt(self.prompt_template, args)
        logger.info("[LLMCallExecutor] Executing prompt: %s", prompt)
        run_context.add_message(self.id, LLMMessage(role="user", message=prompt))
        run_context.add_input(self.id, prompt)

        llm = _require_llm(agent_context)
        final_response = ""
        for iteration in range(1, self.max_tool_iterations + 1):
            messages = run_context.get_messages(self.id)
            logger.info(
                "[AugmentedLLMNode-%s] Iteration %d: Calling LLM with %d messages and %d tools.",
                self.id, iteration, len(messages), len(self.tools),
            )
            try:
                response = llm.generate(
                    self.llm_options, self.tools, self.system_prompt, *messages
                )
            except Exception as exc:
                run_context.add_error(self.id, exc)
                raise

            run_context.add_message(self.id, response)
            if response.message:
                run_context.add_output(self.id, response.message)
                if not response.tool_calls:
                    final_response = response.message
                    break

            for call in response.tool_calls:
                self._run_tool_call(run_context, call)

        if not final_response:
            final_response = UNRESOLVED_RESPONSE
            run_context.add_error(
                self.id,
                NodeError("max tool iterations reached without a final response"),
            )
            logger.warning(
                "[AugmentedLLMNode-%s] Max tool iterations reached without a final response.",
                self.id,
            )

        for child in self.children:
            child.execute(agent_context, run_context, final_response)
        return final_response