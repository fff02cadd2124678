"""Conversation memory: the ordered, append-only log of turns.

The log is serialized into every model request and extended after every
model/tool exchange. Messages are frozen, so appending is the only way the
log changes besides ``clear()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from zsmith.exceptions import ContentValidationError
from zsmith.models.content import Message

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class Memory:
    """Ordered message log owned by a single agent.

    Not safe for concurrent mutation.

    Usage::

        memory = Memory()
        memory.add_user_message("Hello")
        payload = memory.serialize()
    """

    def __init__(self, messages: Iterable[Message] | None = None) -> None:
        self._messages: list[Message] = list(messages or [])

    def add_user_message(self, text: str) -> None:
        self._messages.append(Message.user(text))

    def add_assistant_message(self, text: str) -> None:
        self._messages.append(Message.assistant(text))

    def add_message(self, message: Message) -> None:
        self._messages.append(message)

    def clear(self) -> None:
        self._messages.clear()

    @property
    def messages(self) -> tuple[Message, ...]:
        """Snapshot of the log in insertion order."""
        return tuple(self._messages)

    def size(self) -> int:
        return len(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))

    def serialize(self) -> list[dict]:
        """Wire form of every message, in insertion order."""
        return [message.to_wire() for message in self._messages]

    @classmethod
    def from_wire(cls, data: Any) -> Memory:
        """Rebuild a memory from its serialized form.

        Raises:
            ContentValidationError: If ``data`` is not a list of messages.
        """
        if not isinstance(data, list):
            raise ContentValidationError(
                f"Serialized memory must be a list, got {type(data).__name__}"
            )
        return cls(Message.from_wire(item) for item in data)
