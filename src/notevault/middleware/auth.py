"""Authentication pipeline.

A protected route depends on ``current_identity``, which FastAPI resolves as
a chain of small stages:

1. ``bearer_token``: request -> raw ``Authorization`` header value or None
2. ``verify_bearer``: raw value + token service -> ``Result[Identity]``
3. ``current_identity``: ``Result[Identity]`` -> ``Identity`` (or the
   translated HTTP error)

Each stage can be overridden or reused on its own, e.g. a route that only
wants to know whether a caller is signed in can depend on ``verify_bearer``.
"""

from typing import Optional

from fastapi import Depends, Request

from ..core.results import Result
from ..errors import unwrap
from ..security.jwt import Identity, TokenService
from ..security.password import PasswordHasher


def get_token_service(request: Request) -> TokenService:
    """Token service attached to the running app."""
    return request.app.state.token_service


def get_password_hasher(request: Request) -> PasswordHasher:
    """Password hasher attached to the running app."""
    return request.app.state.password_hasher


async def bearer_token(request: Request) -> Optional[str]:
    """Stage 1: the raw Authorization header (``Bearer`` prefix optional)."""
    return request.headers.get("Authorization")


async def verify_bearer(
    token: Optional[str] = Depends(bearer_token),
    token_service: TokenService = Depends(get_token_service),
) -> Result[Identity]:
    """Stage 2: verify the token without deciding how failures are reported."""
    return token_service.verify_token(token)


async def current_identity(result: Result[Identity] = Depends(verify_bearer)) -> Identity:
    """Stage 3: the authenticated identity, or the translated auth error."""
    return unwrap(result)
