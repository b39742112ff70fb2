"""Node that republishes another node's output and optionally streams it."""

from __future__ import annotations

from dataclasses import dataclass

from swarmlet.node import AgentContext, BaseNode, NodeError
from swarmlet.run_context import RunContext


@dataclass
class OutputNode(BaseNode):
    """Copies the output of ``from_node``; writes it out when ``visible``."""

    from_node: str = ""
    visible: bool = False

    def execute(
        self,
        agent_context: AgentContext,
        run_context: RunContext,
        *args: str,
    ) -> str:
        """Record the copied output and return an empty string."""
        output = run_context.get_output(self.from_node)
        if output is None:
            raise NodeError(f"{self.id}: no output found for node '{self.from_node}'")

        writer = run_context.stream_writer
        if self.visible and writer is not None:
            try:
                writer.write(output + "\n")
            except Exception as exc:
                run_context.add_error(self.id, exc)
                raise

        run_context.add_output(self.id, output)
        return ""