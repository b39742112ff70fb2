"""A named workflow rooted at one node."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, TextIO

from swarmlet.llm import LLM
from swarmlet.memory import Memory
from swarmlet.node import AgentContext, NodeError, WorkflowNode
from swarmlet.run_context import RunContext

logger = logging.getLogger(__name__)


@dataclass
class Pipeline:
    """Holds the root node, model and memory used to run a workflow."""

    name: str
    root: Optional[WorkflowNode]
    llm: Optional[LLM] = None
    memory: Optional[Memory] = None

    def run(
        self,
        initial_input: str,
        run_id: str = "",
        writer: Optional[TextIO] = None,
    ) -> str:
        """Run the workflow on ``initial_input`` and return the root's output.

        Visible output nodes stream to ``writer``.
        """
        if self.root is None:
            raise NodeError("pipeline has no root node")

        run_context = RunContext(run_id=run_id, stream_writer=writer)
        agent_context = AgentContext(llm=self.llm, memory=self.memory)
        logger.debug("Pipeline %s run %s starting with: %s", self.name, run_id, initial_input)

        self.root.execute(agent_context, run_context, initial_input)
        return run_context.get_output(self.root.id) or ""