"""
Folder Schemas.

Pydantic schemas for folder command payloads and results.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FolderCreate(BaseModel):
    """Schema for creating a new folder. Omitting parent_id creates a root folder."""

    name: str = Field(
        ...,
        min_length=1,
        description="Folder name",
        examples=["Work"],
    )
    parent_id: int | None = Field(
        default=None,
        gt=0,
        description="Parent folder ID, or null for a root-level folder",
    )

    model_config = ConfigDict(extra="forbid")


class FolderUpdate(BaseModel):
    """
    Schema for renaming and/or moving a folder.

    parent_id has three states and all of them matter:

        FolderUpdate(name="x")              # parent untouched
        FolderUpdate(parent_id=None)        # move to root
        FolderUpdate(parent_id=7)           # move under folder 7

    pydantic records which fields were actually passed, and
    changes() reads that record instead of testing for None.
    """

    name: str | None = Field(
        default=None,
        min_length=1,
        description="New folder name",
    )
    parent_id: int | None = Field(
        default=None,
        gt=0,
        description="New parent folder ID, or null to move to root",
    )

    model_config = ConfigDict(extra="forbid")

    def changes(self) -> dict[str, Any]:
        """
        Fields to write.

        An explicit name=None is treated as omitted (a name cannot be
        cleared); an explicit parent_id=None is kept.
        """
        data = self.model_dump(exclude_unset=True)
        if data.get("name") is None:
            data.pop("name", None)
        return data


class FolderResponse(BaseModel):
    """Schema for folder in command results."""

    id: int = Field(description="Folder unique identifier")
    name: str = Field(description="Folder name")
    parent_id: int | None = Field(description="Parent folder ID (null = root)")
    created_at: datetime = Field(description="Creation timestamp")
    modified_at: datetime = Field(description="Last rename/move timestamp")

    model_config = ConfigDict(from_attributes=True)
