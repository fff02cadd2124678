"""Wire-format models: content blocks, messages, responses, agent config."""

from zsmith.models.config import AgentConfig
from zsmith.models.content import (
    Block,
    ContentBlock,
    Message,
    OpaqueBlock,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
    parse_block,
    parse_blocks,
)
from zsmith.models.response import ModelResponse

__all__ = [
    "AgentConfig",
    "Block",
    "ContentBlock",
    "Message",
    "ModelResponse",
    "OpaqueBlock",
    "TextBlock",
    "ToolResultBlock",
    "ToolUseBlock",
    "parse_block",
    "parse_blocks",
]
