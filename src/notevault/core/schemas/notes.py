"""
Note schemas: write payloads, the note representation and sharing.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NoteWrite(BaseModel):
    """Body for creating or replacing a note. Both fields are required by the service."""

    title: Optional[str] = Field(default=None, description="Note title")
    content: Optional[str] = Field(default=None, description="Note content")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"title": "Groceries", "content": "milk, eggs, coffee"}
        }
    )


class NoteResponse(BaseModel):
    """Note response schema."""

    id: uuid.UUID = Field(description="Note unique identifier")
    owner_id: uuid.UUID = Field(description="Note owner ID")
    title: str
    content: str
    shared_with: List[uuid.UUID] = Field(
        default_factory=list, description="Users this note was shared with"
    )
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ShareRequest(BaseModel):
    """Share a note with another user by id."""

    user_id: Optional[str] = Field(default=None, alias="userId", description="Target user id")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"example": {"userId": "456e7890-e89b-12d3-a456-426614174000"}},
    )


class ShareResponse(BaseModel):
    """Share result: acknowledgement plus the updated note."""

    message: str = "Note shared successfully"
    note: NoteResponse
