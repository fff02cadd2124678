"""Parsed model response.

Splits a provider response into the two projections the agent loop needs:
ordered text blocks and ordered tool-use blocks, plus the stop reason.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from zsmith.exceptions import ContentValidationError
from zsmith.models.content import Block, TextBlock, ToolUseBlock, parse_blocks

TOOL_USE_STOP_REASON = "tool_use"
DEFAULT_STOP_REASON = "end_turn"


class ModelResponse(BaseModel):
    """A single assistant response from the Messages API."""

    model_config = ConfigDict(frozen=True)

    content: tuple[Block, ...] = ()
    stop_reason: str = DEFAULT_STOP_REASON
    model: Optional[str] = None
    usage: Optional[dict] = None

    @field_validator("content", mode="before")
    @classmethod
    def _coerce_blocks(cls, value: Any) -> Any:
        return parse_blocks(value)

    @field_validator("stop_reason", mode="before")
    @classmethod
    def _default_stop_reason(cls, value: Any) -> Any:
        return DEFAULT_STOP_REASON if value is None else value

    @classmethod
    def from_wire(cls, data: Any) -> ModelResponse:
        """Parse the JSON body returned by the provider.

        Raises:
            ContentValidationError: If the body has no ``content`` list.
        """
        if not isinstance(data, dict) or "content" not in data:
            raise ContentValidationError(
                f"Response has no 'content' list: {data}"
            )
        return cls(
            content=data["content"],
            stop_reason=data.get("stop_reason"),
            model=data.get("model"),
            usage=data.get("usage"),
        )

    def texts(self) -> list[str]:
        return [b.text for b in self.content if isinstance(b, TextBlock)]

    def tool_uses(self) -> list[ToolUseBlock]:
        return [b for b in self.content if isinstance(b, ToolUseBlock)]

    @property
    def wants_tools(self) -> bool:
        """True when the stop reason asks for tool dispatch."""
        return self.stop_reason == TOOL_USE_STOP_REASON
