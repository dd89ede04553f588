"""Append-only conversation thread."""

from __future__ import annotations

from typing import Any, Iterator

from actionkit.models import Message


class Thread:
    """Ordered log of the messages exchanged in one conversation."""

    def __init__(self, messages: list[Message] | None = None) -> None:
        self._messages: list[Message] = []
        for message in messages or []:
            self.add_message(message)

    def add_message(self, message: Message) -> Message:
        if not isinstance(message, Message):
            raise TypeError(f"Expected a Message, got {message!r}")
        self._messages.append(message)
        return message

    @property
    def messages(self) -> list[Message]:
        return list(self._messages)

    @property
    def last_message(self) -> Message | None:
        return self._messages[-1] if self._messages else None

    def to_openai_messages(self) -> list[dict[str, Any]]:
        return [message.to_openai() for message in self._messages]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(list(self._messages))
