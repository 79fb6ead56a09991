"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.auth import LoginRequest, SignupRequest, TokenResponse, UserResponse
from ..core.schemas.common import MessageResponse
from ..core.services import AuthService
from ..database import get_db_session
from ..errors import ERROR_RESPONSES, unwrap
from ..middleware.auth import current_identity, get_password_hasher, get_token_service
from ..security.jwt import Identity, TokenService
from ..security.password import PasswordHasher

router = APIRouter(prefix="/auth", tags=["authentication"], responses=ERROR_RESPONSES)


@router.post("/signup", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    request: SignupRequest,
    session: AsyncSession = Depends(get_db_session),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
):
    """Register a new user."""
    auth_service = AuthService(session, password_hasher)
    unwrap(await auth_service.signup(request))
    return MessageResponse(message="User created successfully")


@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    session: AsyncSession = Depends(get_db_session),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_service: TokenService = Depends(get_token_service),
):
    """Exchange credentials for a session token."""
    auth_service = AuthService(session, password_hasher, token_service)
    return unwrap(await auth_service.login(request))


@router.get("/me", response_model=UserResponse)
async def get_current_user(
    identity: Identity = Depends(current_identity),
    session: AsyncSession = Depends(get_db_session),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
):
    """Get current user profile (clients need their id to be shared with)."""
    auth_service = AuthService(session, password_hasher)
    return unwrap(await auth_service.get_account(identity))
