# Note model for user content
import uuid
from typing import List

from sqlalchemy import ForeignKey, Index, Text
from sqlalchemy.orm import Mapped, mapped_column, validates

from .base import BaseModel
from .types import GUID, GUIDListType


class Note(BaseModel):
    """Note owned by exactly one user, with an append-only share list."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    # owner reference, set once at creation
    owner_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    # ids of users the owner shared this note with (audit only, grants nothing)
    shared_with: Mapped[List[uuid.UUID]] = mapped_column(
        GUIDListType(), nullable=False, default=list
    )

    __table_args__ = (
        Index("idx_notes_owner_id", "owner_id"),
        Index("idx_notes_owner_updated", "owner_id", "updated_at"),
    )

    @validates("owner_id")
    def _validate_owner_id(self, key, value):
        current = self.__dict__.get("owner_id")
        if current is not None and value != current:
            raise ValueError("owner_id is immutable once set")
        return value

    def __repr__(self) -> str:
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', owner_id={self.owner_id})>"

    def is_owned_by(self, user_id: uuid.UUID) -> bool:
        """Check if this note is owned by the specified user."""
        return self.owner_id == user_id

    def is_shared_with(self, user_id: uuid.UUID) -> bool:
        return user_id in (self.shared_with or [])
