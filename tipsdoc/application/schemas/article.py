"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import date

from pydantic import AliasChoices, BaseModel, Field


class ArticleParseRequest(BaseModel):
    """Schema for parsing a raw document without touching the corpus."""

    text: str = Field(..., min_length=1, examples=["---\ntitle: \"Tip X\"\n...\n---\nBody text.\n"])
    source: str | None = Field(None, max_length=255, examples=["tips/142.md"])


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    title: str
    layout: str
    sidenav: str | None = None
    published: bool
    permalink: str
    type: str
    order: str
    body: str
    source: str | None = None
    updated_at: date | None = Field(
        None, validation_alias=AliasChoices("revision_date", "updated_at")
    )

    model_config = {"from_attributes": True}
