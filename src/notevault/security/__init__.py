"""Security utilities."""

from .jwt import Identity, TokenService
from .password import PasswordHasher

__all__ = [
    "Identity",
    "TokenService",
    "PasswordHasher",
]
