"""
Database models for NoteVault.

SQLAlchemy ORM models defining the schema:
    - User: account with a unique username and a password hash
    - Note: owned note content plus the list of users it was shared with
"""

from .base import BaseModel
from .note import Note
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Note",
]
