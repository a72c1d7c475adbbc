"""
Note Schemas.

Pydantic schemas for note API request/response validation.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from notedesk.backend.schemas.category import CategoryResponse


class NoteCreate(BaseModel):
    """Schema for creating a new note."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Note title",
        examples=["Groceries"],
    )
    content: str = Field(
        ...,
        min_length=1,
        description="Note content",
        examples=["Milk, eggs, bread."],
    )
    archived: bool = Field(
        default=False,
        description="Create the note already archived",
    )


class NoteUpdate(BaseModel):
    """Schema for updating an existing note. Omitted fields stay unchanged."""

    title: str | None = Field(
        default=None,
        min_length=1,
        max_length=255,
        description="Note title",
    )
    content: str | None = Field(
        default=None,
        min_length=1,
        description="Note content",
    )
    archived: bool | None = Field(
        default=None,
        description="Archive status",
    )


class NoteCategoriesUpdate(BaseModel):
    """Schema for replacing the categories of a note. Sent as `categoryIds`."""

    category_ids: list[int] = Field(
        ...,
        alias="categoryIds",
        description="Full set of category ids; unknown ids are ignored",
        examples=[[1, 2]],
    )

    model_config = ConfigDict(populate_by_name=True)


class NoteResponse(BaseModel):
    """Schema for note in API responses."""

    id: int = Field(description="Note identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    archived: bool = Field(description="Whether the note is archived")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")
    categories: list[CategoryResponse] = Field(
        default_factory=list,
        description="Categories the note is tagged with, ordered by name",
    )

    model_config = ConfigDict(from_attributes=True)
