"""ToolDispatcher: routes tool calls to registered tools.

Provides ``dispatch()``, which looks up the tool by name, invokes it with
the model-issued input, and returns a ``ToolResult``. Failures never
propagate: an unknown tool or a raised exception becomes an error-flagged
result that is fed back to the model.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from zsmith.toolkit.models import ToolResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from zsmith.toolkit.models import ToolUse
    from zsmith.toolkit.registry import ToolRegistry

logger = logging.getLogger(__name__)


class ToolDispatcher:
    """Dispatches tool calls to a registry and returns structured results.

    Usage::

        dispatcher = ToolDispatcher(registry)
        result = dispatcher.dispatch(ToolUse(id="t1", name="calculator", input={...}))
        if result.is_error:
            print(result.content)
    """

    def __init__(self, registry: ToolRegistry) -> None:
        self._registry = registry

    def dispatch(self, tool_use: ToolUse) -> ToolResult:
        """Execute a single tool call.

        Args:
            tool_use: The model-issued invocation.

        Returns:
            ToolResult correlated to ``tool_use.id``.
        """
        tool = self._registry.lookup(tool_use.name)
        if tool is None:
            logger.debug("Model requested unknown tool %s", tool_use.name)
            return ToolResult.error(
                tool_use.id, f"Tool not available: {tool_use.name}"
            )
        try:
            output = tool.execute(tool_use.input)
        except Exception as exc:
            logger.debug("Tool %s failed: %s", tool_use.name, exc, exc_info=True)
            return ToolResult.error(tool_use.id, str(exc) or type(exc).__name__)
        logger.debug("Tool %s returned %r", tool_use.name, output)
        return ToolResult.success(tool_use.id, str(output))

    def dispatch_all(self, tool_uses: Iterable[ToolUse]) -> list[ToolResult]:
        """Execute tool calls one at a time, preserving request order."""
        return [self.dispatch(tool_use) for tool_use in tool_uses]
