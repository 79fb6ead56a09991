"""Search API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.notes import NoteResponse
from ..core.services import SearchService
from ..database import get_db_session
from ..errors import ERROR_RESPONSES, unwrap
from ..middleware.auth import current_identity
from ..security.jwt import Identity

router = APIRouter(prefix="/search", tags=["search"], responses=ERROR_RESPONSES)


@router.get("", response_model=List[NoteResponse])
async def search_notes(
    q: Optional[str] = Query(None, description="Search query"),
    identity: Identity = Depends(current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """Full-text search over the caller's notes, most relevant first."""
    search_service = SearchService(session)
    return unwrap(await search_service.search_notes(identity, q))
