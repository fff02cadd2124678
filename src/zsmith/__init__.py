"""zsmith: a minimal tool-using conversational agent.

Sends the running conversation plus a catalog of tool definitions to the
model, executes the tools the model asks for, and feeds the results back
until the model answers.
"""

from zsmith._version import __version__

# Agent loop
from zsmith.agent import MAX_ITERATIONS_REACHED, Agent

# Conversation memory and wire models
from zsmith.memory import Memory
from zsmith.models import (
    AgentConfig,
    Block,
    ContentBlock,
    Message,
    ModelResponse,
    OpaqueBlock,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
)

# Tools
from zsmith.toolkit import (
    CalculatorTool,
    CurrentTimeTool,
    FunctionTool,
    Tool,
    ToolDefinition,
    ToolDispatcher,
    ToolRegistry,
    ToolResult,
    ToolUse,
    builtin_tools,
)

# LLM client
from zsmith.llm import (
    ClaudeClient,
    ClaudeModel,
    LLMAuthError,
    LLMClient,
    LLMClientError,
    LLMConfigError,
    LLMOverloadedError,
    LLMRateLimitError,
    LLMResponseError,
    LLMTransportError,
)

# Exceptions
from zsmith.exceptions import (
    ContentValidationError,
    ToolExecutionError,
    ZSmithError,
)

__all__ = [
    "__version__",
    "Agent",
    "MAX_ITERATIONS_REACHED",
    "Memory",
    "AgentConfig",
    "Block",
    "ContentBlock",
    "Message",
    "ModelResponse",
    "OpaqueBlock",
    "TextBlock",
    "ToolResultBlock",
    "ToolUseBlock",
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
    "ClaudeClient",
    "ClaudeModel",
    "LLMClient",
    "LLMClientError",
    "LLMConfigError",
    "LLMAuthError",
    "LLMRateLimitError",
    "LLMOverloadedError",
    "LLMResponseError",
    "LLMTransportError",
    "ZSmithError",
    "ContentValidationError",
    "ToolExecutionError",
]
