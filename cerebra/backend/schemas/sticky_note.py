"""
Sticky Note Schemas.

Pydantic schemas for sticky note command payloads and results.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StickyNoteCreate(BaseModel):
    """Schema for creating a sticky note. Content is required, title is not."""

    title: str | None = Field(
        default=None,
        description='Card title; "Quick Note" when omitted',
    )
    content: str = Field(
        ...,
        min_length=1,
        description="Sticky note body",
        examples=["Buy milk"],
    )

    model_config = ConfigDict(extra="forbid")


class StickyNoteUpdate(BaseModel):
    """Schema for updating a sticky note. Omitted fields keep their value."""

    title: str | None = None
    content: str | None = None

    model_config = ConfigDict(extra="forbid")

    def changes(self) -> dict[str, Any]:
        """Fields to write. None means omitted."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class StickyNoteResponse(BaseModel):
    """Schema for sticky note in command results."""

    id: int
    title: str
    content: str
    created_at: datetime
    modified_at: datetime

    model_config = ConfigDict(from_attributes=True)
