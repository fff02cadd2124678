"""Selectable Claude model identifiers."""

from __future__ import annotations

import enum


class ClaudeModel(str, enum.Enum):
    """Known model identifiers, newest first."""

    CLAUDE_45_OPUS = "claude-opus-4-5-20251101"
    CLAUDE_45_SONNET = "claude-sonnet-4-5-20250929"
    CLAUDE_41_OPUS = "claude-opus-4-1-20250805"
    CLAUDE_40_OPUS = "claude-opus-4-20250514"

    def matches(self, partial_name: str) -> bool:
        return partial_name.lower() in self.value.lower()

    @classmethod
    def from_partial(cls, partial_name: str | None) -> ClaudeModel | None:
        """Return the first model whose identifier contains ``partial_name``.

        Matching is case-insensitive. Returns None for None, empty input,
        or no match.
        """
        if not partial_name:
            return None
        for model in cls:
            if model.matches(partial_name):
                return model
        return None

    @classmethod
    def resolve(cls, partial_name: str | None) -> ClaudeModel:
        """Like ``from_partial`` but falls back to the default model."""
        return cls.from_partial(partial_name) or DEFAULT_MODEL


DEFAULT_MODEL = ClaudeModel.CLAUDE_45_OPUS
