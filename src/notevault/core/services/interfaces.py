"""
Service interfaces for NoteVault.

Every operation returns a ``Result``: ``Ok`` with the value, or ``Err``
tagged with the failure kind. Nothing here raises for expected failures.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ...security.jwt import Identity
from ..results import Result
from ..schemas.auth import LoginRequest, SignupRequest, TokenResponse, UserResponse
from ..schemas.notes import NoteResponse, NoteWrite, ShareResponse


class IAuthService(ABC):
    """Accounts and credentials."""

    @abstractmethod
    async def create_account(self, username: Optional[str], password: Optional[str]) -> Result[Identity]:
        """Store a new account; conflict if the username exists."""

    @abstractmethod
    async def verify_credentials(self, username: Optional[str], password: Optional[str]) -> Result[Identity]:
        """Check a username/password pair without revealing which part was wrong."""

    @abstractmethod
    async def signup(self, request: SignupRequest) -> Result[Identity]:
        pass

    @abstractmethod
    async def login(self, request: LoginRequest) -> Result[TokenResponse]:
        pass

    @abstractmethod
    async def get_account(self, identity: Identity) -> Result[UserResponse]:
        pass


class INoteService(ABC):
    """Owner-scoped note CRUD."""

    @abstractmethod
    async def create_note(self, identity: Identity, request: NoteWrite) -> Result[NoteResponse]:
        pass

    @abstractmethod
    async def list_notes(self, identity: Identity) -> Result[List[NoteResponse]]:
        pass

    @abstractmethod
    async def get_note(self, identity: Identity, note_id: str) -> Result[NoteResponse]:
        pass

    @abstractmethod
    async def update_note(self, identity: Identity, note_id: str, request: NoteWrite) -> Result[NoteResponse]:
        pass

    @abstractmethod
    async def delete_note(self, identity: Identity, note_id: str) -> Result[None]:
        pass


class ISharingService(ABC):
    """Append-only note sharing."""

    @abstractmethod
    async def share_note(self, identity: Identity, note_id: str, target_user_id: Optional[str]) -> Result[ShareResponse]:
        pass


class ISearchService(ABC):
    """Full-text search over the caller's own notes."""

    @abstractmethod
    async def search_notes(self, identity: Identity, query: Optional[str]) -> Result[List[NoteResponse]]:
        pass
