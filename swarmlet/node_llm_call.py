"""Node that sends one prompt to the model and passes the reply on."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Sequence

from swarmlet.llm import LLM, LLMMessage, LLMOptions, LLMTool
from swarmlet.node import AgentContext, BaseNode, NodeError, WorkflowNode
from swarmlet.run_context import RunContext

logger = logging.getLogger(__name__)

_DIRECTIVE = re.compile(r"%(.?)", re.DOTALL)


def _default_options() -> LLMOptions:
    return LLMOptions(temperature=0.5, max_tokens=-1)


def _render_prompt(template: str, inputs: Sequence[str]) -> str:
    """Fill ``%s``-style directives of ``template`` with ``inputs`` in order.

    Missing, surplus and unsupported arguments are marked inline rather
    than raising, so a prompt is always produced.
    """
    remaining = iter(inputs)

    def substitute(match: re.Match[str]) -> str:
        verb = match.group(1)
        if verb == "%":
            return "%"
        if not verb:
            return "%!(NOVERB)"
        value = next(remaining, None)
        if value is None:
            return f"%!{verb}(MISSING)"
        if verb in ("s", "v"):
            return value
        if verb == "q":
            return json.dumps(value, ensure_ascii=False)
        if verb == "x":
            return value.encode().hex()
        if verb == "X":
            return value.encode().hex().upper()
        return f"%!{verb}(string={value})"

    text = _DIRECTIVE.sub(substitute, template)
    extra = list(remaining)
    if extra:
        text += "%!(EXTRA " + ", ".join(f"string={v}" for v in extra) + ")"
    return text


def _require_llm(agent_context: AgentContext) -> LLM:
    if agent_context.llm is None:
        raise NodeError("agent context has no LLM")
    return agent_context.llm


@dataclass
class LLMCallNode(BaseNode):
    """Renders its inputs into a prompt, asks the model once, feeds children."""

    system_prompt: str = ""
    prompt_template: str = "%s"
    llm_options: LLMOptions = field(default_factory=_default_options)
    llm_tools: list[LLMTool] = field(default_factory=list)
    children: list[WorkflowNode] = field(default_factory=list)

    def execute(
        self,
        agent_context: AgentContext,
        run_context: RunContext,
        *args: str,
    ) -> str:
        """Return the model's reply after running every child on it."""
        prompt = _render_prompt(self.prompt_template, args)
        logger.info("[LLMCallExecutor] Executing prompt: %s", prompt)
        run_context.add_input(self.id, prompt)

        llm = _require_llm(agent_context)
        try:
            reply = llm.generate(
                self.llm_options,
                self.llm_tools,
                self.system_prompt,
                LLMMessage(role="user", message=prompt),
            )
        except Exception as exc:
            run_context.add_error(self.id, exc)
            raise

        run_context.add_output(self.id, reply.message)
        for child in self.children:
            child.execute(agent_context, run_context, reply.message)
        return reply.message