"""Configuration models for the agent loop.

AgentConfig holds the per-agent settings that stay fixed across turns.
Client-side settings (credentials, model, endpoint) live on ClaudeClient.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant."
DEFAULT_MAX_ITERATIONS = 10
DEFAULT_TEMPERATURE = 0.7


class AgentConfig(BaseModel):
    """Per-agent configuration.

    Attributes:
        system_prompt: Instruction text sent with every request.
        max_iterations: Maximum model calls per ``chat()`` invocation.
        temperature: Sampling temperature forwarded to the model.
    """

    model_config = {"frozen": True}

    system_prompt: str = DEFAULT_SYSTEM_PROMPT
    max_iterations: int = Field(default=DEFAULT_MAX_ITERATIONS, ge=1)
    temperature: float = Field(default=DEFAULT_TEMPERATURE, ge=0.0, le=1.0)
