"""Content block and message models for the Messages wire format.

Defines the three block types the agent loop understands as Pydantic models
with a discriminated union (ContentBlock), plus OpaqueBlock for any other
block type the provider returns (e.g. ``thinking``). Opaque blocks are kept
verbatim so that raw assistant turns can be replayed unmodified.

Messages are frozen: once built, neither the role nor the block sequence
can change.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from zsmith.exceptions import ContentValidationError

Role = Literal["user", "assistant"]


# ---------------------------------------------------------------------------
# Block models
# ---------------------------------------------------------------------------


class TextBlock(BaseModel):
    """Plain text produced by the model or the user."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: Literal["text"] = "text"
    text: str

    def to_wire(self) -> dict:
        return self.model_dump()


class ToolUseBlock(BaseModel):
    """A model-issued request to invoke a tool."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: Literal["tool_use"] = "tool_use"
    id: str
    name: str
    input: dict[str, Any] = Field(default_factory=dict)

    @field_validator("input", mode="before")
    @classmethod
    def _null_input(cls, value: Any) -> Any:
        return {} if value is None else value

    def to_wire(self) -> dict:
        return self.model_dump()


class ToolResultBlock(BaseModel):
    """Outcome of a tool call, correlated by ``tool_use_id``.

    ``is_error`` only appears on the wire when it is true.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    type: Literal["tool_result"] = "tool_result"
    tool_use_id: str
    content: str
    is_error: bool = False

    def to_wire(self) -> dict:
        data = self.model_dump()
        if not self.is_error:
            del data["is_error"]
        return data


class OpaqueBlock(BaseModel):
    """Any block type not modelled above, preserved field for field."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: str

    def to_wire(self) -> dict:
        return self.model_dump()


ContentBlock = Annotated[
    Union[TextBlock, ToolUseBlock, ToolResultBlock],
    Field(discriminator="type"),
]

Block = Union[TextBlock, ToolUseBlock, ToolResultBlock, OpaqueBlock]

_block_adapter = TypeAdapter(ContentBlock)

KNOWN_BLOCK_TYPES: frozenset[str] = frozenset({"text", "tool_use", "tool_result"})


def parse_block(data: Any) -> Block:
    """Validate one wire block.

    Known types go through the discriminated union; anything else with a
    string ``type`` becomes an OpaqueBlock.

    Raises:
        ContentValidationError: If the block is not a dict, has no type,
            or a known type is missing required fields.
    """
    if isinstance(data, (TextBlock, ToolUseBlock, ToolResultBlock, OpaqueBlock)):
        return data
    if not isinstance(data, dict):
        raise ContentValidationError(
            f"Content block must be an object, got {type(data).__name__}"
        )
    block_type = data.get("type")
    if not isinstance(block_type, str):
        raise ContentValidationError(f"Content block has no type: {data}")
    try:
        if block_type in KNOWN_BLOCK_TYPES:
            return _block_adapter.validate_python(data)
        return OpaqueBlock.model_validate(data)
    except ValidationError as exc:
        raise ContentValidationError(
            f"Invalid {block_type!r} block: {exc}"
        ) from exc


def parse_blocks(data: Any) -> tuple[Block, ...]:
    """Validate an ordered sequence of wire blocks."""
    if not isinstance(data, (list, tuple)):
        raise ContentValidationError(
            f"Content must be a list of blocks, got {type(data).__name__}"
        )
    return tuple(parse_block(item) for item in data)


# ---------------------------------------------------------------------------
# Message
# ---------------------------------------------------------------------------


class Message(BaseModel):
    """One conversation turn.

    ``content`` is either a plain string (simple turns) or an ordered tuple
    of blocks (turns carrying tool interactions).
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: Union[str, tuple[Block, ...]]

    @field_validator("content", mode="before")
    @classmethod
    def _coerce_blocks(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value
        return parse_blocks(value)

    @classmethod
    def user(cls, text: str) -> Message:
        return cls(role="user", content=text)

    @classmethod
    def assistant(cls, text: str) -> Message:
        return cls(role="assistant", content=text)

    @classmethod
    def with_blocks(cls, role: Role, blocks: list | tuple) -> Message:
        """Build a multi-block message from block models or wire dicts."""
        return cls(role=role, content=parse_blocks(blocks))

    @property
    def blocks(self) -> tuple[Block, ...]:
        """Content as blocks; a plain string becomes a single TextBlock."""
        if isinstance(self.content, str):
            return (TextBlock(text=self.content),)
        return self.content

    def to_wire(self) -> dict:
        if isinstance(self.content, str):
            return {"role": self.role, "content": self.content}
        return {
            "role": self.role,
            "content": [block.to_wire() for block in self.content],
        }

    @classmethod
    def from_wire(cls, data: Any) -> Message:
        """Parse a wire message dict.

        Raises:
            ContentValidationError: If role or content is missing or invalid.
        """
        if not isinstance(data, dict):
            raise ContentValidationError(
                f"Message must be an object, got {type(data).__name__}"
            )
        if "role" not in data or "content" not in data:
            raise ContentValidationError(
                f"Message requires 'role' and 'content': {data}"
            )
        try:
            return cls(role=data["role"], content=data["content"])
        except ValidationError as exc:
            raise ContentValidationError(f"Invalid message: {exc}") from exc
