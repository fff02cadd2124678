"""Shared test fixtures for zsmith.

Provides a scripted LLM client and builders for Messages API responses.
"""

from __future__ import annotations

import copy
from datetime import datetime

import pytest

from zsmith import Agent, CalculatorTool, CurrentTimeTool

FIXED_NOW = datetime(2025, 1, 2, 3, 4, 5)


class ScriptedClient:
    """LLMClient fake that replays canned responses and records each request."""

    def __init__(self, responses: list[dict] | None = None) -> None:
        self._responses = list(responses or [])
        self.calls: list[dict] = []
        self.closed = False

    def chat(
        self,
        system: str,
        messages: list[dict],
        tools: list[dict] | None = None,
        *,
        temperature: float | None = None,
    ) -> dict:
        self.calls.append({
            "system": system,
            "messages": copy.deepcopy(messages),
            "tools": tools,
            "temperature": temperature,
        })
        if not self._responses:
            raise AssertionError("ScriptedClient ran out of responses")
        return self._responses.pop(0)

    def close(self) -> None:
        self.closed = True


# ------------------------------------------------------------------
# Response builders
# ------------------------------------------------------------------

def text_response(*texts: str, stop_reason: str | None = "end_turn") -> dict:
    """Response carrying only text blocks."""
    body: dict = {
        "id": "msg_test",
        "type": "message",
        "role": "assistant",
        "content": [{"type": "text", "text": t} for t in texts],
    }
    if stop_reason is not None:
        body["stop_reason"] = stop_reason
    return body


def tool_use_block(block_id: str, name: str, **tool_input) -> dict:
    return {"type": "tool_use", "id": block_id, "name": name, "input": tool_input}


def tool_response(*blocks: dict, text: str | None = None, stop_reason: str = "tool_use") -> dict:
    """Response requesting tool calls, optionally preceded by text."""
    content: list[dict] = []
    if text is not None:
        content.append({"type": "text", "text": text})
    content.extend(blocks)
    return {
        "id": "msg_test",
        "type": "message",
        "role": "assistant",
        "content": content,
        "stop_reason": stop_reason,
    }


def make_agent(responses: list[dict], **kwargs) -> tuple[Agent, ScriptedClient]:
    """Agent with both built-in tools wired to a ScriptedClient."""
    client = ScriptedClient(responses)
    agent = (
        Agent(client, **kwargs)
        .with_tool(CalculatorTool())
        .with_tool(CurrentTimeTool(clock=lambda: FIXED_NOW))
    )
    return agent, client


@pytest.fixture
def scripted_client() -> ScriptedClient:
    return ScriptedClient()
