"""Note repository for database operations."""

import logging
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.base import utcnow
from ..models.note import Note

logger = logging.getLogger(__name__)


class NoteRepository:
    """Repository for note database operations.

    Methods are plain round-trips: ownership is decided by the access control
    layer before anything here mutates a note.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_note(self, owner_id: UUID, title: str, content: str) -> Note:
        """Create new note."""
        note = Note(owner_id=owner_id, title=title, content=content, shared_with=[])
        self.session.add(note)
        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def get_by_id(self, note_id: UUID) -> Optional[Note]:
        """Get note by ID."""
        stmt = select(Note).where(Note.id == note_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_owner(self, owner_id: UUID) -> List[Note]:
        """All notes owned by ``owner_id``. Shared notes are not included."""
        stmt = select(Note).where(Note.owner_id == owner_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update_note(self, note: Note, title: str, content: str) -> Note:
        """Overwrite title and content and bump the modification time."""
        note.title = title
        note.content = content
        # onupdate only fires when a column changed, so set it explicitly
        note.updated_at = utcnow()
        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def delete_note(self, note: Note) -> None:
        """Delete note permanently."""
        await self.session.delete(note)
        await self.session.commit()
        logger.debug(f"Deleted note {note.id}")

    async def add_shared_user(self, note: Note, user_id: UUID) -> Note:
        """Append ``user_id`` to the note's share list unless already present."""
        current = list(note.shared_with or [])
        if user_id in current:
            return note

        # assign a new list so the change is flushed
        note.shared_with = current + [user_id]
        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def search_candidates(self, owner_id: UUID, terms: Sequence[str]) -> List[Note]:
        """Owner's notes whose title or content contains any of ``terms`` (case-insensitive).

        This is a coarse prefilter; relevance matching happens in the search service.
        SQLite only case-folds ASCII in LIKE, so a query with any non-ASCII term
        falls back to all of the owner's notes.
        """
        if not terms:
            return []

        owner_filter = Note.owner_id == owner_id
        if not all(term.isascii() for term in terms):
            result = await self.session.execute(select(Note).where(owner_filter))
            return list(result.scalars().all())

        term_conditions = []
        for term in terms:
            pattern = f"%{_escape_like(term)}%"
            term_conditions.append(Note.title.ilike(pattern, escape="\\"))
            term_conditions.append(Note.content.ilike(pattern, escape="\\"))

        stmt = select(Note).where(and_(owner_filter, or_(*term_conditions)))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
