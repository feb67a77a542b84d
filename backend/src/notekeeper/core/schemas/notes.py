"""
Note management schemas.

These schemas define the API contracts for note CRUD, the paginated
feed, sharing and attachments.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field, field_serializer, field_validator

from ..colors import format_color
from ..models.share import SharePermission
from ..permissions import UserPermission
from .auth import UserResponse
from .categories import CategorySummary
from .common import ApiModel, PaginationInfo, validate_color_field


def _dedupe(ids: Optional[List[uuid.UUID]]) -> Optional[List[uuid.UUID]]:
    if ids is None:
        return None
    return list(dict.fromkeys(ids))


class NoteCreate(ApiModel):
    """Note creation request schema."""

    title: str = Field(min_length=1, max_length=200, description="Note title")
    body: str = Field(min_length=1, description="Note body")
    color: Optional[str] = Field(default=None, description="Hex color, with or without '#'")
    categories: List[uuid.UUID] = Field(default_factory=list, description="Category ids")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Title is required")
        return v

    @field_validator("body")
    @classmethod
    def validate_body(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Body is required")
        return v

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: Optional[str]) -> Optional[str]:
        return validate_color_field(v)

    @field_validator("categories")
    @classmethod
    def unique_categories(cls, v: List[uuid.UUID]) -> List[uuid.UUID]:
        return _dedupe(v)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Groceries",
                "body": "Milk, eggs, coffee",
                "color": "#fff475",
                "categories": ["123e4567-e89b-12d3-a456-426614174000"],
            }
        }
    )


class NoteUpdate(ApiModel):
    """Partial note update; omitted fields are left unchanged."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    body: Optional[str] = Field(default=None, min_length=1)
    color: Optional[str] = None
    categories: Optional[List[uuid.UUID]] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Title cannot be empty")
        return v

    @field_validator("body")
    @classmethod
    def validate_body(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Body cannot be empty")
        return v

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: Optional[str]) -> Optional[str]:
        return validate_color_field(v)

    @field_validator("categories")
    @classmethod
    def unique_categories(cls, v: Optional[List[uuid.UUID]]) -> Optional[List[uuid.UUID]]:
        return _dedupe(v)


class ShareRequest(ApiModel):
    """Grant or change a share; ``user`` is a username or email."""

    user: str = Field(min_length=1, description="Username or email of the recipient")
    permission: SharePermission = Field(default=SharePermission.VIEW)

    @field_validator("user")
    @classmethod
    def normalize_user(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("User is required")
        return v


class ShareResponse(ApiModel):
    user: UserResponse
    permission: SharePermission


class AttachmentResponse(ApiModel):
    id: uuid.UUID
    filename: str
    original_name: str
    mime_type: str
    size: int
    path: str
    created_at: datetime


class NoteResponse(ApiModel):
    """Note as seen by a particular user."""

    id: uuid.UUID
    title: str
    body: str
    color: str
    categories: List[CategorySummary]
    attachments: List[AttachmentResponse]
    author: UserResponse
    shared_with: List[ShareResponse]
    is_owner: bool
    user_permission: UserPermission
    created_at: datetime
    updated_at: datetime

    @field_serializer("color")
    def serialize_color(self, color: str) -> str:
        return format_color(color)


class NoteEnvelope(ApiModel):
    success: bool = True
    message: Optional[str] = None
    note: NoteResponse


class NoteListResponse(ApiModel):
    """Paginated note feed."""

    success: bool = True
    message: Optional[str] = None
    pagination: PaginationInfo
    notes: List[NoteResponse]


class NoteFilters(ApiModel):
    """Feed filters, all ANDed together."""

    query: Optional[str] = None
    color: Optional[str] = None
    categories: List[uuid.UUID] = Field(default_factory=list)

    @field_validator("query")
    @classmethod
    def strip_query(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return v.strip() or None

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: Optional[str]) -> Optional[str]:
        return validate_color_field(v)

    @field_validator("categories")
    @classmethod
    def unique_categories(cls, v: List[uuid.UUID]) -> List[uuid.UUID]:
        return _dedupe(v)
