"""
Note Schemas.

Pydantic schemas for note command payloads and results.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NoteCreate(BaseModel):
    """Schema for creating a new note."""

    title: str = Field(
        ...,
        min_length=1,
        description="Note title",
        examples=["Plan"],
    )
    content: str | None = Field(
        default=None,
        description="Note content; stored as an empty string when omitted",
        examples=["This is the content of my note."],
    )
    folder_id: int = Field(
        ...,
        gt=0,
        description="Owning folder ID",
    )

    model_config = ConfigDict(extra="forbid")


class NoteUpdate(BaseModel):
    """Schema for updating an existing note. Omitted fields keep their value."""

    title: str | None = Field(
        default=None,
        min_length=1,
        description="Note title",
    )
    content: str | None = Field(
        default=None,
        description="Note content (an empty string is a valid value)",
    )

    model_config = ConfigDict(extra="forbid")

    def changes(self) -> dict[str, Any]:
        """Fields to write. Neither field can be null, so None means omitted."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class NoteResponse(BaseModel):
    """Schema for note in command results."""

    id: int = Field(description="Note unique identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    folder_id: int = Field(description="Owning folder ID")
    created_at: datetime = Field(description="Creation timestamp")
    modified_at: datetime = Field(description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)
