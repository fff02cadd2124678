"""Tool protocol.

Any object exposing ``name``, ``description``, ``input_schema`` and
``execute(input) -> str`` can be registered with an agent. Built-in tools
and FunctionTool both satisfy it.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from zsmith.toolkit.models import ToolDefinition


@runtime_checkable
class Tool(Protocol):
    """Protocol for locally executable tools.

    ``execute()`` receives the input mapping issued by the model and returns
    the result as a string. Failures are signalled by raising, preferably
    ``ToolExecutionError`` with a message meant for the model.
    """

    name: str
    description: str
    input_schema: dict

    def execute(self, input: dict) -> str:
        """Run the tool and return its result."""
        ...


def definition_of(tool: Tool) -> ToolDefinition:
    """Build the advertised definition of a tool."""
    return ToolDefinition(
        name=tool.name,
        description=tool.description,
        input_schema=tool.input_schema,
    )
