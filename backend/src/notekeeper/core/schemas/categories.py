"""Category schemas."""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_serializer, field_validator

from ..colors import format_color
from .common import ApiModel, validate_color_field


class CategoryCreate(ApiModel):
    """Category creation request; color defaults to white."""

    name: str = Field(min_length=1, max_length=50, description="Category name")
    color: Optional[str] = Field(default=None, description="Hex color, with or without '#'")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Category name is required")
        return v.lower()

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: Optional[str]) -> Optional[str]:
        return validate_color_field(v)


class CategoryUpdate(ApiModel):
    """Partial category update."""

    name: Optional[str] = Field(default=None, max_length=50)
    color: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        return v.lower() or None

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: Optional[str]) -> Optional[str]:
        return validate_color_field(v)


class CategorySummary(ApiModel):
    """Category as embedded in a note."""

    id: uuid.UUID
    name: str
    color: str

    @field_serializer("color")
    def serialize_color(self, color: str) -> str:
        return format_color(color)


class CategoryResponse(CategorySummary):
    created_at: datetime
    updated_at: Optional[datetime] = None


class CategoryEnvelope(ApiModel):
    success: bool = True
    message: Optional[str] = None
    category: CategoryResponse


class CategoryListResponse(ApiModel):
    success: bool = True
    categories: List[CategoryResponse]
