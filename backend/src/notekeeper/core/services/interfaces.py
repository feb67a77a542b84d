"""
Service interfaces for Notekeeper.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from uuid import UUID

from ..schemas.auth import (
    AuthResponse,
    CurrentUserResponse,
    LoginRequest,
    PasswordResetRequest,
    RegisterRequest,
)
from ..schemas.categories import (
    CategoryCreate,
    CategoryEnvelope,
    CategoryListResponse,
    CategoryUpdate,
)
from ..schemas.common import HealthCheckResponse
from ..schemas.notes import (
    NoteCreate,
    NoteEnvelope,
    NoteFilters,
    NoteListResponse,
    NoteUpdate,
    ShareRequest,
)


class IAuthService(ABC):
    """Auth service for user management."""

    @abstractmethod
    async def register_user(self, request: RegisterRequest) -> AuthResponse:
        """Register new user and issue a session token."""
        pass

    @abstractmethod
    async def authenticate_user(self, request: LoginRequest) -> AuthResponse:
        """Login by email or username and issue a session token."""
        pass

    @abstractmethod
    async def get_current_user(self, user_id: UUID) -> CurrentUserResponse:
        """Get user by ID."""
        pass

    @abstractmethod
    async def reset_password(self, user_id: UUID, request: PasswordResetRequest) -> bool:
        """Change password after checking the current one."""
        pass

    @abstractmethod
    async def logout_user(self, access_token: Optional[str]) -> bool:
        """Revoke the session token."""
        pass


class ICategoryService(ABC):
    """Per-user category management."""

    @abstractmethod
    async def create_category(self, user_id: UUID, request: CategoryCreate) -> CategoryEnvelope:
        pass

    @abstractmethod
    async def list_categories(self, user_id: UUID) -> CategoryListResponse:
        pass

    @abstractmethod
    async def update_category(
        self, category_id: UUID, user_id: UUID, request: CategoryUpdate
    ) -> CategoryEnvelope:
        pass

    @abstractmethod
    async def delete_category(self, category_id: UUID, user_id: UUID) -> bool:
        """Delete category and detach it from notes."""
        pass


class INoteService(ABC):
    """Note CRUD and the paginated feed."""

    @abstractmethod
    async def create_note(self, user_id: UUID, request: NoteCreate) -> NoteEnvelope:
        """Create new note."""
        pass

    @abstractmethod
    async def get_note(self, note_id: UUID, user_id: UUID) -> NoteEnvelope:
        """Get note visible to the user."""
        pass

    @abstractmethod
    async def update_note(self, note_id: UUID, user_id: UUID, request: NoteUpdate) -> NoteEnvelope:
        """Update note as owner or edit share."""
        pass

    @abstractmethod
    async def delete_note(self, note_id: UUID, user_id: UUID) -> bool:
        """Delete note (owner only)."""
        pass

    @abstractmethod
    async def list_notes(
        self, user_id: UUID, filters: NoteFilters, page: int = 1, limit: int = 12
    ) -> NoteListResponse:
        """List owned and shared notes."""
        pass


class ISharingService(ABC):
    """Per-note share management."""

    @abstractmethod
    async def share_note(self, note_id: UUID, user_id: UUID, request: ShareRequest) -> NoteEnvelope:
        """Grant or change a share."""
        pass

    @abstractmethod
    async def remove_share(self, note_id: UUID, user_id: UUID, target_user_id: UUID) -> NoteEnvelope:
        """Revoke a share."""
        pass


class IAttachmentService(ABC):
    """Files attached to notes."""

    @abstractmethod
    async def add_attachment(
        self,
        note_id: UUID,
        user_id: UUID,
        content: bytes,
        filename: Optional[str],
        content_type: Optional[str],
    ) -> NoteEnvelope:
        pass

    @abstractmethod
    async def remove_attachment(
        self, note_id: UUID, user_id: UUID, attachment_id: UUID
    ) -> NoteEnvelope:
        pass


class IHealthService(ABC):
    """Health checks."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        pass

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        pass

    @abstractmethod
    async def check_redis_health(self) -> Dict[str, Any]:
        """Check Redis connection."""
        pass
