"""Schemas for the public query and AI processing endpoints."""

from pydantic import BaseModel, Field

from second_brain.models.knowledge import SourceItem

PROCESS_TYPES: tuple[str, ...] = ("summarize", "suggest-tags")


class QueryResponse(BaseModel):
    answer: str
    sources: list[SourceItem] = Field(default_factory=list)


class ProcessRequest(BaseModel):
    # Both optional here so missing values get the endpoint's own 400 messages.
    content: str | None = None
    type: str | None = None


class ProcessResponse(BaseModel):
    result: str | list[str]
