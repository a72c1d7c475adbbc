"""
Category Schemas.

Pydantic schemas for category API request/response validation.
Blank names are left for the service to reject so that the API
reports them the same way as every other caller sees them.
"""

from pydantic import BaseModel, ConfigDict, Field


class CategoryCreate(BaseModel):
    """Schema for creating a category."""

    name: str = Field(
        ...,
        max_length=255,
        description="Category name; surrounding whitespace is removed",
        examples=["Work"],
    )


class CategoryRename(BaseModel):
    """Schema for renaming a category."""

    name: str = Field(
        ...,
        max_length=255,
        description="New category name",
        examples=["Personal"],
    )


class CategoryResponse(BaseModel):
    """Schema for category in API responses."""

    id: int = Field(description="Category identifier")
    name: str = Field(description="Category name")

    model_config = ConfigDict(from_attributes=True)
