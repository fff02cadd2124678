"""LLM client protocol.

Defines the request/response boundary the agent loop talks to.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LLMClient(Protocol):
    """Protocol for pluggable LLM clients.

    Any object with chat() and close() methods matching this signature works.
    The built-in ClaudeClient implements this protocol; tests substitute a
    scripted fake.

    ``chat()`` must return the provider's JSON body as a dict shaped like a
    Messages API response: ``{"content": [...], "stop_reason": ...}``.
    Transport and provider failures are raised, never returned.
    """

    def chat(
        self,
        system: str,
        messages: list[dict],
        tools: list[dict] | None = None,
        *,
        temperature: float | None = None,
    ) -> dict:
        """Send the conversation and tool catalog, return the response dict."""
        ...

    def close(self) -> None:
        """Release underlying resources."""
        ...
