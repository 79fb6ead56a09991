"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .auth import LoginRequest, SignupRequest, TokenResponse, UserResponse
from .common import ErrorResponse, HealthCheckResponse, MessageResponse
from .notes import NoteResponse, NoteWrite, ShareRequest, ShareResponse

__all__ = [
    # Auth schemas
    "SignupRequest",
    "LoginRequest",
    "TokenResponse",
    "UserResponse",
    # Note schemas
    "NoteWrite",
    "NoteResponse",
    "ShareRequest",
    "ShareResponse",
    # Common schemas
    "ErrorResponse",
    "MessageResponse",
    "HealthCheckResponse",
]
