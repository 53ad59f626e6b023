"""Pydantic models for the knowledge base."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

DocumentType = Literal["project", "journal", "concept"]


class SidecarMeta(BaseModel):
    """Metadata read from a document folder's meta.json."""

    title: str | None = None
    date: str | None = None
    tags: list[str] = Field(default_factory=list)
    summary: str | None = None

    @field_validator("title", "date", "summary", mode="before")
    @classmethod
    def _scalar_to_str(cls, value: object) -> object:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, list):
            return [str(tag) for tag in value if tag is not None]
        return value


class DocumentMeta(BaseModel):
    """A document as it appears in the listing."""

    id: str  # e.g. "projects/quizzydots/roadmap"
    title: str
    type: DocumentType
    category: str | None = None  # Organizing folder below the type folder
    date: str | None = None  # Free-form, compared as a string
    tags: list[str] = Field(default_factory=list)
    summary: str | None = None


class Document(DocumentMeta):
    """A full document with its markdown body."""

    content: str = ""
    sections: list[str] = Field(default_factory=list)


class DocumentDetail(Document):
    """Document response including the rendered body."""

    content_html: str = ""


class CategoryGroup(BaseModel):
    """Category folders found under one type folder."""

    type: str  # Plural folder name, e.g. "projects"
    categories: list[str] = Field(default_factory=list)
