"""
Explicit success/failure values returned by the domain layer.

Services never raise for expected failures (bad input, bad credentials,
foreign notes, missing users, duplicate usernames). They return an ``Err``
tagged with an ``ErrorKind`` instead, and the API layer translates the kind
into an HTTP status in exactly one place (``notevault.errors``).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure categories understood by the translation layer."""

    VALIDATION = "validation"
    AUTH = "auth"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


class AuthReason(str, Enum):
    """Sub-codes for ``ErrorKind.AUTH``."""

    MISSING = "missing"
    INVALID = "invalid"
    EXPIRED = "expired"
    CREDENTIALS = "credentials"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str
    reason: Optional[str] = None

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]


def validation_error(message: str) -> Err:
    return Err(ErrorKind.VALIDATION, message)


def auth_error(reason: AuthReason, message: str) -> Err:
    return Err(ErrorKind.AUTH, message, reason.value)


def forbidden_error(message: str = "Not authorized") -> Err:
    return Err(ErrorKind.FORBIDDEN, message)


def not_found_error(message: str) -> Err:
    return Err(ErrorKind.NOT_FOUND, message)


def conflict_error(message: str) -> Err:
    return Err(ErrorKind.CONFLICT, message)
