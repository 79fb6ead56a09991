"""Middleware for authentication and other cross-cutting concerns."""

from .auth import (
    bearer_token,
    current_identity,
    get_password_hasher,
    get_token_service,
    verify_bearer,
)
from .rate_limit import RateLimitMiddleware
from .security_headers import SecurityHeadersMiddleware

__all__ = [
    "bearer_token",
    "verify_bearer",
    "current_identity",
    "get_token_service",
    "get_password_hasher",
    "RateLimitMiddleware",
    "SecurityHeadersMiddleware",
]
