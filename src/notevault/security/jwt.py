"""Session token issuing and verification (signed JWTs, not persisted)."""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt

from ..config import Settings
from ..core.results import AuthReason, Ok, Result, auth_error

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class Identity:
    """Authenticated user context derived from a verified token."""

    id: UUID


class TokenService:
    """Issues and verifies time-limited session tokens.

    Tokens carry ``{"id": <user id>, "exp": <unix time>}`` and are signed with
    a server-held secret. Nothing is stored server side, so a token stays
    valid until it expires (there is no revocation list).
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.lifetime = timedelta(minutes=expire_minutes)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret_key=settings.secret_key,
            algorithm=settings.algorithm,
            expire_minutes=settings.access_token_expire_minutes,
        )

    @property
    def expires_in(self) -> int:
        """Token lifetime in seconds."""
        return int(self.lifetime.total_seconds())

    def issue_token(self, identity: Identity, issued_at: Optional[datetime] = None) -> str:
        """Create a signed token for ``identity`` expiring one lifetime after ``issued_at``."""
        issued_at = issued_at or datetime.now(timezone.utc)
        payload = {"id": str(identity.id), "exp": issued_at + self.lifetime}
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: Optional[str]) -> Result[Identity]:
        """Verify ``token`` (with or without a ``Bearer `` prefix) and return its identity."""
        if token is None or not token.strip():
            return auth_error(AuthReason.MISSING, "Access denied")

        token = token.strip()
        if token.startswith(BEARER_PREFIX):
            token = token[len(BEARER_PREFIX):].strip()

        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            return auth_error(AuthReason.EXPIRED, "Token expired")
        except JWTError as e:
            logger.debug(f"Rejected token: {e}")
            return auth_error(AuthReason.INVALID, "Invalid token")

        raw_id = payload.get("id")
        if not raw_id or "exp" not in payload:
            return auth_error(AuthReason.INVALID, "Invalid token")

        try:
            return Ok(Identity(id=UUID(str(raw_id))))
        except ValueError:
            return auth_error(AuthReason.INVALID, "Invalid token")
