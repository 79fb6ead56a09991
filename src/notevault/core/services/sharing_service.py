"""Sharing service implementation."""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ...security.jwt import Identity
from ..repositories.note_repository import NoteRepository
from ..repositories.user_repository import UserRepository
from ..results import Err, Ok, Result, not_found_error
from ..schemas.notes import ShareResponse
from .access_control import AccessControl, NoteAction, parse_id
from .interfaces import ISharingService
from .note_service import to_response

logger = logging.getLogger(__name__)


class SharingService(ISharingService):
    """Records shares on notes. Shares are append-only and grant no access."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)
        self.user_repo = UserRepository(session)
        self.access = AccessControl(self.note_repo)

    async def share_note(
        self, identity: Identity, note_id: str, target_user_id: Optional[str]
    ) -> Result[ShareResponse]:
        """Share a note with another user.

        Steps, each short-circuiting on failure:
        1. the caller must own the note (forbidden otherwise)
        2. the target user must exist (not found otherwise)
        3. add the target to ``shared_with`` unless already there

        Steps 2 and 3 are separate round-trips, so a target removed in between
        is still recorded.
        """
        allowed = await self.access.load_for(identity, note_id, NoteAction.SHARE)
        if isinstance(allowed, Err):
            return allowed

        target_id = parse_id(target_user_id)
        target = await self.user_repo.get_by_id(target_id) if target_id is not None else None
        if target is None:
            return not_found_error("User not found")

        note = allowed.value
        already_shared = note.is_shared_with(target.id)
        note = await self.note_repo.add_shared_user(note, target.id)

        logger.info(
            "Note shared",
            extra={
                "note_id": str(note.id),
                "owner_id": str(identity.id),
                "shared_with_user_id": str(target.id),
                "already_shared": already_shared,
            },
        )
        return Ok(ShareResponse(note=to_response(note)))
