"""Authentication service implementation."""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...security.jwt import Identity, TokenService
from ...security.password import PasswordHasher
from ..repositories.user_repository import UserRepository
from ..results import (
    AuthReason,
    Err,
    Ok,
    Result,
    auth_error,
    conflict_error,
    not_found_error,
    validation_error,
)
from ..schemas.auth import LoginRequest, SignupRequest, TokenResponse, UserResponse
from .interfaces import IAuthService

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService(IAuthService):
    """Credential store plus login on top of the token service."""

    def __init__(
        self,
        session: AsyncSession,
        password_hasher: PasswordHasher,
        token_service: Optional[TokenService] = None,
    ):
        self.session = session
        self.user_repo = UserRepository(session)
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def create_account(self, username: Optional[str], password: Optional[str]) -> Result[Identity]:
        """Register new user."""
        if not username or not password:
            return validation_error("Username and password are required")

        if await self.user_repo.is_username_taken(username):
            return conflict_error("User already exists")

        try:
            user = await self.user_repo.create_user(username, self.password_hasher.hash(password))
        except IntegrityError:
            # lost a race with a concurrent signup for the same name
            return conflict_error("User already exists")

        logger.info("Account created", extra={"user_id": str(user.id)})
        return Ok(Identity(id=user.id))

    async def verify_credentials(self, username: Optional[str], password: Optional[str]) -> Result[Identity]:
        """Check credentials; unknown user and wrong password look the same."""
        user = await self.user_repo.get_by_username(username) if username else None
        if user is None:
            # keep timing close to a real check
            self.password_hasher.dummy_verify()
            return self._credentials_rejected(username)

        if not password:
            self.password_hasher.dummy_verify()
            return self._credentials_rejected(username)

        if not self.password_hasher.verify(password, user.password_hash):
            return self._credentials_rejected(username)

        return Ok(Identity(id=user.id))

    async def signup(self, request: SignupRequest) -> Result[Identity]:
        return await self.create_account(request.username, request.password)

    async def login(self, request: LoginRequest) -> Result[TokenResponse]:
        """Verify credentials and issue a session token."""
        if self.token_service is None:
            raise RuntimeError("AuthService.login requires a TokenService")

        result = await self.verify_credentials(request.username, request.password)
        if isinstance(result, Err):
            return result

        token = self.token_service.issue_token(result.value)
        return Ok(TokenResponse(token=token, expires_in=self.token_service.expires_in))

    async def get_account(self, identity: Identity) -> Result[UserResponse]:
        """Get the account behind an identity."""
        user = await self.user_repo.get_by_id(identity.id)
        if user is None:
            return not_found_error("User not found")
        return Ok(UserResponse.model_validate(user))

    def _credentials_rejected(self, username: Optional[str]) -> Err:
        logger.info("Login rejected", extra={"username": username})
        return auth_error(AuthReason.CREDENTIALS, INVALID_CREDENTIALS)
