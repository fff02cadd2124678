"""Core agent tool-use loop.

Provides the Agent class that runs a tool-calling loop: send the system
prompt, conversation and tool catalog to the model, execute requested tool
calls, append the results to memory, and repeat until the model answers
with text or max_iterations is reached.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from zsmith.memory import Memory
from zsmith.models.config import AgentConfig
from zsmith.models.content import Message
from zsmith.models.response import ModelResponse
from zsmith.toolkit.dispatcher import ToolDispatcher
from zsmith.toolkit.models import ToolUse
from zsmith.toolkit.registry import ToolRegistry

if TYPE_CHECKING:
    from zsmith.llm.protocols import LLMClient
    from zsmith.toolkit.models import ToolResult
    from zsmith.toolkit.protocols import Tool

logger = logging.getLogger(__name__)

MAX_ITERATIONS_REACHED = "Max iterations reached"


class Agent:
    """Conversational agent that lets the model call local tools.

    Each ``chat()`` call appends the user message once, then loops:
    call the model; if it answered without requesting tools, record and
    return the text; otherwise record the raw assistant turn, dispatch
    every tool use in order, and record the results as one user turn.

    Usage::

        from zsmith import Agent, ClaudeClient, CalculatorTool

        with ClaudeClient() as client:
            agent = Agent(client, "Be concise.").with_tool(CalculatorTool())
            print(agent.chat("What is 42 multiplied by 17?"))
    """

    def __init__(
        self,
        client: LLMClient,
        system_prompt: str | None = None,
        *,
        config: AgentConfig | None = None,
    ) -> None:
        config = config or AgentConfig()
        if system_prompt is not None:
            config = config.model_copy(update={"system_prompt": system_prompt})
        self._config = config
        self._client = client
        self._memory = Memory()
        self._registry = ToolRegistry()
        self._dispatcher = ToolDispatcher(self._registry)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def system_prompt(self) -> str:
        return self._config.system_prompt

    @property
    def config(self) -> AgentConfig:
        return self._config

    @property
    def memory(self) -> Memory:
        return self._memory

    @property
    def tools(self) -> dict[str, Tool]:
        """Copy of the registered tools keyed by name."""
        return self._registry.as_dict()

    def register_tool(self, tool: Tool) -> None:
        """Register a tool; a tool with the same name is replaced."""
        self._registry.register(tool)

    def with_tool(self, tool: Tool) -> Agent:
        """Register a tool and return the agent for chaining."""
        self.register_tool(tool)
        return self

    def tool_definitions(self) -> list[dict]:
        """Wire form of every registered tool definition."""
        return [d.to_anthropic() for d in self._registry.definitions()]

    def execute_tool(self, tool_use: ToolUse) -> ToolResult:
        """Dispatch a single tool use. Never raises for tool failures."""
        return self._dispatcher.dispatch(tool_use)

    def clear_memory(self) -> None:
        self._memory.clear()

    def chat(self, user_message: str) -> str:
        """Run one user turn through the tool-use loop.

        Args:
            user_message: Text from the user.

        Returns:
            The model's final text (text blocks joined by newlines), an empty
            string when the final turn carried no text, or
            ``MAX_ITERATIONS_REACHED`` when the loop ran out of iterations.

        Raises:
            LLMClientError: Propagated from the client on transport,
                provider, or configuration failures.
            ContentValidationError: If the model response is malformed.
        """
        self._memory.add_user_message(user_message)

        for iteration in range(self._config.max_iterations):
            response = self._call_llm()
            texts = response.texts()
            tool_uses = response.tool_uses()
            logger.debug(
                "iteration %d: stop_reason=%s, %d text block(s), %d tool use(s)",
                iteration,
                response.stop_reason,
                len(texts),
                len(tool_uses),
            )

            if not tool_uses or not response.wants_tools:
                if texts:
                    answer = "\n".join(texts)
                    self._memory.add_assistant_message(answer)
                    return answer
                return ""

            self._memory.add_message(Message.with_blocks("assistant", response.content))

            results = self._dispatcher.dispatch_all(
                ToolUse.from_block(block) for block in tool_uses
            )
            self._memory.add_message(
                Message.with_blocks("user", [result.to_block() for result in results])
            )

        logger.warning(
            "Stopped after %d iterations without a final answer",
            self._config.max_iterations,
        )
        return MAX_ITERATIONS_REACHED

    # ------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------

    def _call_llm(self) -> ModelResponse:
        """Send system prompt, memory and tool catalog; parse the reply."""
        raw = self._client.chat(
            self._config.system_prompt,
            self._memory.serialize(),
            self.tool_definitions() or None,
            temperature=self._config.temperature,
        )
        response = ModelResponse.from_wire(raw)
        if response.usage:
            logger.debug("usage: %s", response.usage)
        return response
