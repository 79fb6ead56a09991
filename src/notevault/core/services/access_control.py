"""Authorization core: who may read, change or share a note.

The only rule is ownership. A note's ``shared_with`` list is recorded when
an owner shares it but is never consulted here, so sharing grants nothing.
A missing note is indistinguishable from someone else's note: both are
reported as forbidden.
"""

import logging
from enum import Enum
from typing import Optional
from uuid import UUID

from ...security.jwt import Identity
from ..models.note import Note
from ..repositories.note_repository import NoteRepository
from ..results import Ok, Result, forbidden_error

logger = logging.getLogger(__name__)


class NoteAction(str, Enum):
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    SHARE = "share"


def parse_id(raw: Optional[str]) -> Optional[UUID]:
    """Parse an id from user input; anything malformed is treated as absent."""
    if raw is None:
        return None
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(str(raw))
    except ValueError:
        return None


class AccessControl:
    """Ownership checks for single-note operations."""

    def __init__(self, note_repo: NoteRepository):
        self.note_repo = note_repo

    def check(self, identity: Identity, note: Optional[Note], action: NoteAction) -> Result[Note]:
        """Allow ``action`` only if ``identity`` owns ``note``."""
        if note is None or not note.is_owned_by(identity.id):
            logger.info(
                "Denied note access",
                extra={
                    "user_id": str(identity.id),
                    "note_id": str(note.id) if note is not None else None,
                    "action": action.value,
                },
            )
            return forbidden_error("Not authorized")
        return Ok(note)

    async def load_for(self, identity: Identity, note_id: Optional[str], action: NoteAction) -> Result[Note]:
        """Fetch a note by id and run the ownership check on it."""
        parsed = parse_id(note_id)
        note = await self.note_repo.get_by_id(parsed) if parsed is not None else None
        return self.check(identity, note, action)
