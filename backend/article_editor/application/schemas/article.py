"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field, field_validator

# Primary keys are INTEGER columns; PostgreSQL caps them at 32 bits
MAX_ARTICLE_ID = 2**31 - 1

ArticleId = Annotated[int, Field(ge=1, le=MAX_ARTICLE_ID)]


class PropertyInput(BaseModel):
    """A key/value pair supplied by the client. Names may repeat."""

    property_name: str = Field(..., min_length=1, examples=["Author"])
    property_value: str = Field("", examples=["John Doe"])


class ArticleCreate(BaseModel):
    """Schema for creating a new article."""

    title: str = Field(..., min_length=1, examples=["Getting Started"])
    content: str = Field("", examples=["<p>Rich-text body from the editor.</p>"])
    properties: list[PropertyInput] = Field(default_factory=list)


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article — all fields optional.

    Omitting a field leaves it untouched; an explicit ``null`` is rejected.
    Sending a ``properties`` list (even an empty one) replaces the whole set.
    """

    title: str | None = Field(None, min_length=1)
    content: str | None = None
    properties: list[PropertyInput] | None = None

    @field_validator("title", "content", "properties")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("must not be null; omit the field to leave it unchanged")
        return value


class PropertyResponse(BaseModel):
    property_name: str
    property_value: str

    model_config = {"from_attributes": True}


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    content: str
    created_at: datetime
    updated_at: datetime
    properties: list[PropertyResponse] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class DeleteArticleResponse(BaseModel):
    success: bool
