"""
Note management schemas.

These schemas define the API contracts for tenant-scoped note CRUD.
Title and content are trimmed before their length limits are checked.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.note import CONTENT_MAX_LENGTH, TITLE_MAX_LENGTH


class NoteCreate(BaseModel):
    """Note creation request schema."""

    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH, description="Note title")
    content: str = Field(
        min_length=1, max_length=CONTENT_MAX_LENGTH, description="Note content"
    )

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "title": "Q4 planning",
                "content": "Review Q3 numbers, then set Q4 objectives.",
            }
        },
    )


class NoteUpdate(BaseModel):
    """Note update request schema; omitted fields are left as they are."""

    title: Optional[str] = Field(
        default=None, min_length=1, max_length=TITLE_MAX_LENGTH, description="Note title"
    )
    content: Optional[str] = Field(
        default=None, min_length=1, max_length=CONTENT_MAX_LENGTH, description="Note content"
    )

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "title": "Q4 planning (revised)",
                "content": "Review Q3 numbers, set Q4 objectives, agree on budget.",
            }
        },
    )


class NoteResponse(BaseModel):
    """Note response schema."""

    id: uuid.UUID = Field(description="Note unique identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")

    # Ownership
    author_id: uuid.UUID = Field(description="Author user ID")
    author_email: Optional[str] = Field(default=None, description="Author email")
    tenant_id: uuid.UUID = Field(description="Owning tenant ID")

    # Timestamps
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "Q4 planning",
                "content": "Review Q3 numbers, then set Q4 objectives.",
                "author_id": "456e7890-e89b-12d3-a456-426614174000",
                "author_email": "user@acme.test",
                "tenant_id": "789e0123-e89b-12d3-a456-426614174000",
                "created_at": "2025-09-13T10:30:00Z",
                "updated_at": "2025-09-13T11:00:00Z",
            }
        },
    )

