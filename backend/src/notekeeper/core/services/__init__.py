"""
Service layer: business rules between the API routers and the repositories.
"""

from .interfaces import (
    IAttachmentService,
    IAuthService,
    ICategoryService,
    IHealthService,
    INoteService,
    ISharingService,
)

from .attachment_service import AttachmentService
from .auth_service import AuthService
from .category_service import CategoryService
from .health_service import HealthService
from .note_service import NoteService
from .sharing_service import SharingService

__all__ = [
    # Interfaces
    "IAuthService",
    "ICategoryService",
    "INoteService",
    "ISharingService",
    "IAttachmentService",
    "IHealthService",

    # Implementations
    "AuthService",
    "CategoryService",
    "NoteService",
    "SharingService",
    "AttachmentService",
    "HealthService",
]
