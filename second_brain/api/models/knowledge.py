"""Request schemas for knowledge item CRUD."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from second_brain.models.knowledge import ItemType


class KnowledgeCreateRequest(BaseModel):
    """Body of POST /api/knowledge (camelCase keys accepted)."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    summary: str | None = None
    type: ItemType = "note"
    tags: list[str] = Field(default_factory=list)
    source_url: str | None = Field(default=None, alias="sourceUrl")
    file_name: str | None = Field(default=None, alias="fileName")
    file_type: str | None = Field(default=None, alias="fileType")
    file_url: str | None = Field(default=None, alias="fileUrl")
    user_id: str | None = Field(default=None, alias="userId")
    is_public: bool = Field(default=False, alias="isPublic")

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class KnowledgeUpdateRequest(BaseModel):
    """Body of PUT /api/knowledge/{id}; only the keys sent are changed."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    content: str | None = None
    summary: str | None = None
    type: ItemType | None = None
    tags: list[str] | None = None
    source_url: str | None = Field(default=None, alias="sourceUrl")
    file_name: str | None = Field(default=None, alias="fileName")
    file_type: str | None = Field(default=None, alias="fileType")
    file_url: str | None = Field(default=None, alias="fileUrl")
    user_id: str | None = Field(default=None, alias="userId")
    is_public: bool | None = Field(default=None, alias="isPublic")

    def to_changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)
