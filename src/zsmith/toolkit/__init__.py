"""Agent toolkit: tool protocol, registry, dispatcher, and built-in tools."""

from zsmith.toolkit.builtin import CalculatorTool, CurrentTimeTool, builtin_tools
from zsmith.toolkit.dispatcher import ToolDispatcher
from zsmith.toolkit.models import FunctionTool, ToolDefinition, ToolResult, ToolUse
from zsmith.toolkit.protocols import Tool, definition_of
from zsmith.toolkit.registry import ToolRegistry

__all__ = [
    "CalculatorTool",
    "CurrentTimeTool",
    "FunctionTool",
    "Tool",
    "ToolDefinition",
    "ToolDispatcher",
    "ToolRegistry",
    "ToolResult",
    "ToolUse",
    "builtin_tools",
    "definition_of",
]
