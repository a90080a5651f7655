# second_brain/models/knowledge.py
from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

ItemType = Literal["note", "link", "insight"]

MatchedField = Literal["title", "content", "tags"]
RetrievalStage = Literal["primary", "fallback", "empty"]


def utc_now() -> datetime:
    return datetime.now(UTC)


class KnowledgeItem(BaseModel):
    """A stored note, link or insight.

    Field aliases are the camelCase names used by stored documents and the
    HTTP API (``userId``, ``isPublic`` ...).
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    summary: str | None = None
    type: ItemType = "note"
    tags: list[str] = Field(default_factory=list)
    source_url: str | None = Field(default=None, alias="sourceUrl")
    file_name: str | None = Field(default=None, alias="fileName")
    file_type: str | None = Field(default=None, alias="fileType")
    file_url: str | None = Field(default=None, alias="fileUrl")
    user_id: str = Field(min_length=1, alias="userId")
    is_public: bool = Field(default=False, alias="isPublic")
    created_at: datetime = Field(default_factory=utc_now, alias="createdAt")
    updated_at: datetime = Field(default_factory=utc_now, alias="updatedAt")

    @field_validator("title", "source_url", mode="before")
    @classmethod
    def _trim(cls, value: str | None) -> str | None:
        return value.strip() if isinstance(value, str) else value

    @field_validator("content")
    @classmethod
    def _reject_blank_content(cls, value: str) -> str:
        # Stored verbatim; only all-whitespace content is refused.
        if not value.strip():
            raise ValueError("content must not be blank")
        return value

    @field_validator("tags")
    @classmethod
    def _trim_tags(cls, tags: list[str]) -> list[str]:
        # Blank tags are kept; display and graph code skip them.
        return [tag.strip() for tag in tags]

    @property
    def display_content(self) -> str:
        """Summary when one exists, otherwise the full content."""
        return self.summary or self.content

    def to_source(self) -> "SourceItem":
        return SourceItem(
            title=self.title,
            content=self.display_content,
            type=self.type,
            tags=list(self.tags),
        )

    def to_document(self) -> dict:
        """JSON-ready dict using the stored-document field names."""
        return self.model_dump(by_alias=True, mode="json")


class SourceItem(BaseModel):
    """An item echoed back alongside an answer."""

    title: str
    content: str
    type: ItemType
    tags: list[str] = Field(default_factory=list)


class RetrievedItem(BaseModel):
    item: KnowledgeItem
    # Field that satisfied the query; keyword-fallback hits also record the word.
    matched_field: MatchedField | None = None
    matched_word: str | None = None


class RetrievalResult(BaseModel):
    """Ordered, size-bounded output of the two-stage retriever."""

    query: str
    stage: RetrievalStage = "empty"
    matches: list[RetrievedItem] = Field(default_factory=list)

    @property
    def items(self) -> list[KnowledgeItem]:
        return [match.item for match in self.matches]

    def __len__(self) -> int:
        return len(self.matches)


class SynthesizedAnswer(BaseModel):
    """Templated answer text plus every retrieved item as a source."""

    text: str
    sources: list[SourceItem] = Field(default_factory=list)
