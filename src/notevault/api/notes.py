"""Notes API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import MessageResponse
from ..core.schemas.notes import NoteResponse, NoteWrite
from ..core.services import NoteService, SearchService
from ..database import get_db_session
from ..errors import ERROR_RESPONSES, unwrap
from ..middleware.auth import current_identity
from ..security.jwt import Identity

router = APIRouter(prefix="/notes", tags=["notes"], responses=ERROR_RESPONSES)


@router.get("", response_model=List[NoteResponse])
async def list_notes(
    identity: Identity = Depends(current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """List the caller's own notes."""
    note_service = NoteService(session)
    return unwrap(await note_service.list_notes(identity))


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    request: NoteWrite,
    identity: Identity = Depends(current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note."""
    note_service = NoteService(session)
    return unwrap(await note_service.create_note(identity, request))


# declared before /{note_id} so "search" is not taken for an id
@router.get("/search", response_model=List[NoteResponse])
async def search_own_notes(
    q: Optional[str] = Query(None, description="Search query"),
    identity: Identity = Depends(current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """Search the caller's notes (same as GET /search)."""
    search_service = SearchService(session)
    return unwrap(await search_service.search_notes(identity, q))


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(
    note_id: str,
    identity: Identity = Depends(current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a specific note."""
    note_service = NoteService(session)
    return unwrap(await note_service.get_note(identity, note_id))


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: str,
    request: NoteWrite,
    identity: Identity = Depends(current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """Replace a note's title and content."""
    note_service = NoteService(session)
    return unwrap(await note_service.update_note(identity, note_id, request))


@router.delete("/{note_id}", response_model=MessageResponse)
async def delete_note(
    note_id: str,
    identity: Identity = Depends(current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a note."""
    note_service = NoteService(session)
    unwrap(await note_service.delete_note(identity, note_id))
    return MessageResponse(message="Note deleted")
