"""In-memory conversation history."""

from __future__ import annotations

from typing import Iterator

from gpt_repl.providers.base import ROLE_SYSTEM, ChatMessage


class ConversationHistory:
    """
    Ordered transcript sent verbatim to the API on every turn.

    Index 0 is always the system prompt; only `reset` removes anything.
    """

    def __init__(self, system_prompt: str) -> None:
        self._system = ChatMessage(role=ROLE_SYSTEM, content=system_prompt)
        self._messages: list[ChatMessage] = [self._system]

    @property
    def system_message(self) -> ChatMessage:
        return self._system

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    def append(self, message: ChatMessage) -> None:
        self._messages.append(message)

    def last(self) -> ChatMessage:
        return self._messages[-1]

    def reset(self) -> None:
        """Drop everything except the system prompt."""
        del self._messages[1:]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[ChatMessage]:
        return iter(self.messages)
