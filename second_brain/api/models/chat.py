"""Schemas for the chat endpoint."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from second_brain.models.chat import ChatMessage, ChatMode
from second_brain.models.knowledge import SourceItem


class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str | None = None
    mode: ChatMode = ChatMode.DASHBOARD
    user_id: str | None = Field(default=None, alias="userId")


class ChatResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    role: str
    content: str
    timestamp: datetime
    is_summarizing: bool = Field(default=False, serialization_alias="isSummarizing")
    sources: list[SourceItem] = Field(default_factory=list)

    @classmethod
    def from_message(cls, message: ChatMessage) -> "ChatResponse":
        return cls(
            role=message.role,
            content=message.content,
            timestamp=message.timestamp,
            is_summarizing=message.is_summarizing,
            sources=message.sources,
        )
