"""Workflow node interface and shared node types."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from swarmlet.llm import LLM
from swarmlet.memory import Memory
from swarmlet.run_context import RunContext


class NodeType(IntEnum):
    """Kinds of workflow node."""

    LLM_CALL = 0
    GATE = 1
    ROUTER = 2
    ORCHESTRATOR = 3
    EVALUATOR = 4


class NodeError(Exception):
    """Raised when a node or pipeline cannot complete its work."""


@dataclass
class AgentContext:
    """The model and memory available to nodes during a run."""

    llm: Optional[LLM] = None
    memory: Optional[Memory] = None


class WorkflowNode(ABC):
    """A step of a pipeline."""

    id: str

    @abstractmethod
    def execute(
        self,
        agent_context: AgentContext,
        run_context: RunContext,
        *args: str,
    ) -> str:
        """Run the node on the inputs in ``args`` and return its result."""


@dataclass
class BaseNode(WorkflowNode, ABC):
    """Identity shared by concrete nodes."""

    id: str = ""
    node_type: str = ""


@dataclass
class MemoryAndStreamingConfig:
    """Settings for memory use and streaming of a node."""

    use_memory: bool = False
    memory_key: str = ""
    streaming: bool = False
    max_history_messages: int = 0


@dataclass
class AgenticLLMNode:
    """Settings of an agentic model node."""

    initial_prompt_template: str = ""
    max_iterations: int = 0