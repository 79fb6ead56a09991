"""Note service implementation."""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ...security.jwt import Identity
from ..models.note import Note
from ..repositories.note_repository import NoteRepository
from ..results import Err, Ok, Result, validation_error
from ..schemas.notes import NoteResponse, NoteWrite
from .access_control import AccessControl, NoteAction
from .interfaces import INoteService

logger = logging.getLogger(__name__)


def validate_note_fields(title: Optional[str], content: Optional[str]) -> Optional[Err]:
    """Both title and content must be present and non-blank."""
    if not title or not title.strip() or not content or not content.strip():
        return validation_error("Title and content are required")
    return None


def to_response(note: Note) -> NoteResponse:
    return NoteResponse(
        id=note.id,
        owner_id=note.owner_id,
        title=note.title,
        content=note.content,
        shared_with=list(note.shared_with or []),
        created_at=note.created_at,
        updated_at=note.updated_at,
    )


class NoteService(INoteService):
    """Note service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)
        self.access = AccessControl(self.note_repo)

    async def create_note(self, identity: Identity, request: NoteWrite) -> Result[NoteResponse]:
        """Create new note owned by the caller."""
        invalid = validate_note_fields(request.title, request.content)
        if invalid:
            return invalid

        note = await self.note_repo.create_note(identity.id, request.title, request.content)
        logger.info("Note created", extra={"note_id": str(note.id), "user_id": str(identity.id)})
        return Ok(to_response(note))

    async def list_notes(self, identity: Identity) -> Result[List[NoteResponse]]:
        """Notes owned by the caller (never notes shared with them)."""
        notes = await self.note_repo.list_by_owner(identity.id)
        return Ok([to_response(note) for note in notes])

    async def get_note(self, identity: Identity, note_id: str) -> Result[NoteResponse]:
        """Get note by ID."""
        allowed = await self.access.load_for(identity, note_id, NoteAction.READ)
        if isinstance(allowed, Err):
            return allowed
        return Ok(to_response(allowed.value))

    async def update_note(self, identity: Identity, note_id: str, request: NoteWrite) -> Result[NoteResponse]:
        """Replace title and content. Ownership is checked before the payload."""
        allowed = await self.access.load_for(identity, note_id, NoteAction.UPDATE)
        if isinstance(allowed, Err):
            return allowed

        invalid = validate_note_fields(request.title, request.content)
        if invalid:
            return invalid

        note = await self.note_repo.update_note(allowed.value, request.title, request.content)
        return Ok(to_response(note))

    async def delete_note(self, identity: Identity, note_id: str) -> Result[None]:
        """Delete note."""
        allowed = await self.access.load_for(identity, note_id, NoteAction.DELETE)
        if isinstance(allowed, Err):
            return allowed

        await self.note_repo.delete_note(allowed.value)
        logger.info("Note deleted", extra={"note_id": note_id, "user_id": str(identity.id)})
        return Ok(None)
