"""Toolkit data models for agent tool definitions.

Frozen dataclasses for tool definitions, tool invocations, and results,
plus FunctionTool for wrapping a plain callable as a tool.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from zsmith.models.content import ToolResultBlock, ToolUseBlock

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True)
class ToolDefinition:
    """A single tool definition for LLM consumption.

    Attributes:
        name: Tool name (e.g. "calculator", "current_time").
        description: Human-readable description of when/why to use this tool.
        input_schema: JSON Schema dict describing tool input.
    """

    name: str
    description: str
    input_schema: dict

    def to_anthropic(self) -> dict:
        """Convert to the Messages API tool format.

        Returns:
            Dict with "name", "description", and "input_schema".
        """
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.input_schema,
        }


@dataclass(frozen=True)
class ToolUse:
    """A model-issued request to run a tool.

    ``id`` correlates the eventual ToolResult back to this request.
    """

    id: str
    name: str
    input: dict = field(default_factory=dict)

    @classmethod
    def from_block(cls, block: ToolUseBlock) -> ToolUse:
        return cls(id=block.id, name=block.name, input=copy.deepcopy(block.input))


@dataclass(frozen=True)
class ToolResult:
    """Structured result from executing a tool.

    Attributes:
        tool_use_id: Id of the ToolUse this result answers.
        content: Tool output on success, diagnostic message on failure.
        is_error: Whether execution failed.
    """

    tool_use_id: str
    content: str
    is_error: bool = False

    @classmethod
    def success(cls, tool_use_id: str, content: str) -> ToolResult:
        return cls(tool_use_id=tool_use_id, content=content, is_error=False)

    @classmethod
    def error(cls, tool_use_id: str, message: str) -> ToolResult:
        return cls(tool_use_id=tool_use_id, content=message, is_error=True)

    def to_block(self) -> ToolResultBlock:
        return ToolResultBlock(
            tool_use_id=self.tool_use_id,
            content=self.content,
            is_error=self.is_error,
        )


@dataclass(frozen=True)
class FunctionTool:
    """Adapts a plain callable into a tool.

    The handler receives the tool input as keyword arguments and its return
    value is converted with ``str()``.

    Usage::

        echo = FunctionTool(
            name="echo",
            description="Repeat the given text.",
            input_schema={"type": "object", "properties": {"text": {"type": "string"}}},
            handler=lambda text: text,
        )
    """

    name: str
    description: str
    input_schema: dict
    handler: Callable[..., Any]

    def execute(self, input: dict) -> str:
        return str(self.handler(**input))
