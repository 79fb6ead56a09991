"""
Authentication schemas.

Request fields are optional at the schema level on purpose: missing
credentials are reported by the service as a validation failure (HTTP 400)
instead of FastAPI's default 422.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CredentialsRequest(BaseModel):
    """Username/password pair used by signup and login."""

    username: Optional[str] = Field(default=None, description="Username (case-sensitive)")
    password: Optional[str] = Field(default=None, description="Plain password")

    model_config = ConfigDict(
        json_schema_extra={"example": {"username": "alice", "password": "pw1"}}
    )


class SignupRequest(CredentialsRequest):
    """User registration request schema."""


class LoginRequest(CredentialsRequest):
    """User login request schema."""


class TokenResponse(BaseModel):
    """Session token response schema."""

    token: str = Field(description="Signed session token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(description="Token lifetime in seconds")


class UserResponse(BaseModel):
    """Public account information."""

    id: uuid.UUID
    username: str

    model_config = ConfigDict(from_attributes=True)
