"""Chat transcript models.

The transcript belongs to the caller (a browser tab, the terminal REPL).
The server keeps no chat state between requests.
"""

from collections.abc import Iterator
from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

from second_brain.models.knowledge import SourceItem, utc_now


class ChatMode(str, Enum):
    """Where the assistant is running."""

    DASHBOARD = "dashboard"  # signed-in, answers from the user's notes
    LANDING = "landing"  # public landing page, generic product explainer


GREETINGS = {
    ChatMode.DASHBOARD: (
        "Welcome to your Second Brain dashboard! I can help you find, summarize, "
        "or connect your notes. What are you looking for?"
    ),
    ChatMode.LANDING: (
        "Hi! I am the Second Brain assistant. How can I help you understand how to "
        "supercharge your knowledge today?"
    ),
}

CLEARED_GREETING = "Chat history cleared. How can I help you now?"


class ChatMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str
    timestamp: datetime = Field(default_factory=utc_now)
    # Set when an assistant reply follows the answer template.
    is_summarizing: bool = False
    sources: list[SourceItem] = Field(default_factory=list)


class ChatLog:
    """Append-only ordered transcript.

    Entries are never edited or removed; clearing the conversation means
    starting a new log with :meth:`cleared`.
    """

    def __init__(self, greeting: str | None = None):
        self._messages: list[ChatMessage] = []
        if greeting:
            self._messages.append(ChatMessage(role="assistant", content=greeting))

    @classmethod
    def for_mode(cls, mode: ChatMode) -> "ChatLog":
        return cls(GREETINGS[mode])

    @classmethod
    def cleared(cls) -> "ChatLog":
        return cls(CLEARED_GREETING)

    def append(self, message: ChatMessage) -> None:
        self._messages.append(message.model_copy(deep=True))

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return tuple(message.model_copy(deep=True) for message in self._messages)

    @property
    def last(self) -> ChatMessage | None:
        return self._messages[-1].model_copy(deep=True) if self._messages else None

    def __iter__(self) -> Iterator[ChatMessage]:
        return iter(self.messages)

    def __len__(self) -> int:
        return len(self._messages)
