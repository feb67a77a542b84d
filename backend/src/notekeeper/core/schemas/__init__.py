"""
Pydantic schemas for validating and documenting API requests and responses.

Request bodies are validated here before reaching the service layer;
responses use camelCase keys on the wire.
"""

from .auth import (
    AuthResponse,
    CurrentUserResponse,
    LoginRequest,
    PasswordResetRequest,
    RegisterRequest,
    UserResponse,
)
from .categories import (
    CategoryCreate,
    CategoryEnvelope,
    CategoryListResponse,
    CategoryResponse,
    CategorySummary,
    CategoryUpdate,
)
from .common import ApiModel, ErrorResponse, HealthCheckResponse, PaginationInfo, SuccessResponse
from .notes import (
    AttachmentResponse,
    NoteCreate,
    NoteEnvelope,
    NoteFilters,
    NoteListResponse,
    NoteResponse,
    NoteUpdate,
    ShareRequest,
    ShareResponse,
    UserPermission,
)

__all__ = [
    # Auth schemas
    "RegisterRequest",
    "LoginRequest",
    "PasswordResetRequest",
    "UserResponse",
    "AuthResponse",
    "CurrentUserResponse",
    # Category schemas
    "CategoryCreate",
    "CategoryUpdate",
    "CategorySummary",
    "CategoryResponse",
    "CategoryEnvelope",
    "CategoryListResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteFilters",
    "NoteResponse",
    "NoteEnvelope",
    "NoteListResponse",
    "ShareRequest",
    "ShareResponse",
    "AttachmentResponse",
    "UserPermission",
    # Common schemas
    "ApiModel",
    "PaginationInfo",
    "SuccessResponse",
    "ErrorResponse",
    "HealthCheckResponse",
]
