"""
Service layer: interfaces and implementations.

Services take an AsyncSession, build their repositories and return
``Result`` values for the API layer to translate.
"""

from .access_control import AccessControl, NoteAction
from .auth_service import AuthService
from .health_service import HealthService
from .interfaces import IAuthService, INoteService, ISearchService, ISharingService
from .note_service import NoteService
from .search_service import SearchService
from .sharing_service import SharingService

__all__ = [
    # Interfaces
    "IAuthService",
    "INoteService",
    "ISearchService",
    "ISharingService",
    # Implementations
    "AccessControl",
    "NoteAction",
    "AuthService",
    "NoteService",
    "SearchService",
    "SharingService",
    "HealthService",
]
