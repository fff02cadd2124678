"""ToolRegistry: the set of tools an agent can invoke, keyed by name."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from zsmith.toolkit.protocols import Tool, definition_of

if TYPE_CHECKING:
    from collections.abc import Iterator

    from zsmith.toolkit.models import ToolDefinition

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Mapping from tool name to tool.

    Registering a second tool under an existing name replaces the first.

    Usage::

        registry = ToolRegistry()
        registry.register(CalculatorTool())
        tool = registry.lookup("calculator")
    """

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """Insert a tool, overwriting any previous tool with the same name.

        Raises:
            TypeError: If the object does not satisfy the Tool protocol.
        """
        if not isinstance(tool, Tool):
            raise TypeError(
                f"Expected an object implementing Tool, got {type(tool).__name__}"
            )
        if tool.name in self._tools:
            logger.debug("Replacing registered tool %s", tool.name)
        self._tools[tool.name] = tool

    def lookup(self, name: str) -> Tool | None:
        """Return the tool registered under ``name``, or None."""
        return self._tools.get(name)

    def definitions(self) -> list[ToolDefinition]:
        """Return definitions of all registered tools in registration order."""
        return [definition_of(tool) for tool in self._tools.values()]

    def names(self) -> list[str]:
        return list(self._tools.keys())

    def as_dict(self) -> dict[str, Tool]:
        """Return a shallow copy of the name -> tool mapping."""
        return dict(self._tools)

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[Tool]:
        return iter(list(self._tools.values()))
