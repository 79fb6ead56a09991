"""Sharing API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.notes import ShareRequest, ShareResponse
from ..core.services import SharingService
from ..database import get_db_session
from ..errors import ERROR_RESPONSES, unwrap
from ..middleware.auth import current_identity
from ..security.jwt import Identity

router = APIRouter(prefix="/notes", tags=["sharing"], responses=ERROR_RESPONSES)


@router.post("/{note_id}/share", response_model=ShareResponse)
async def share_note(
    note_id: str,
    request: ShareRequest,
    identity: Identity = Depends(current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """Share a note with another user."""
    sharing_service = SharingService(session)
    return unwrap(await sharing_service.share_note(identity, note_id, request.user_id))
