"""LLM client infrastructure for zsmith.

Provides a Messages API HTTP client, the pluggable LLMClient protocol,
model selection, and the client error hierarchy.
"""

from zsmith.llm.client import ClaudeClient
from zsmith.llm.errors import (
    LLMAuthError,
    LLMClientError,
    LLMConfigError,
    LLMOverloadedError,
    LLMRateLimitError,
    LLMResponseError,
    LLMTransportError,
)
from zsmith.llm.models import DEFAULT_MODEL, ClaudeModel
from zsmith.llm.protocols import LLMClient

__all__ = [
    "ClaudeClient",
    "ClaudeModel",
    "DEFAULT_MODEL",
    "LLMClient",
    "LLMClientError",
    "LLMConfigError",
    "LLMRateLimitError",
    "LLMOverloadedError",
    "LLMAuthError",
    "LLMResponseError",
    "LLMTransportError",
]
