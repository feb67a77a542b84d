"""
Shared schemas - camelCase base model, pagination, errors etc
"""

import math
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..colors import normalize_color


class ApiModel(BaseModel):
    """Base for API schemas: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def validate_color_field(value: Optional[str]) -> Optional[str]:
    """Pydantic validator body for optional color fields; keeps None as None."""
    return normalize_color(value, default=None)


class PaginationInfo(ApiModel):
    """Pagination metadata for the note feed."""

    current_page: int
    total_pages: int
    total_notes: int
    limit: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def create(cls, total: int, page: int, limit: int) -> "PaginationInfo":
        total_pages = math.ceil(total / limit) if limit else 0
        return cls(
            current_page=page,
            total_pages=total_pages,
            total_notes=total,
            limit=limit,
            has_next_page=page < total_pages,
            has_prev_page=page > 1,
        )


class SuccessResponse(ApiModel):
    """Standard success response schema."""

    success: bool = Field(default=True, description="Operation success status")
    message: Optional[str] = Field(default=None, description="Success message")


class ErrorResponse(ApiModel):
    """Standard error response schema."""

    success: bool = Field(default=False)
    errors: Dict[str, str] = Field(description="Field name to error message")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "errors": {"email": "Email already registered"},
            }
        }
    )


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = Field(description="Application version")
    checks: Dict[str, Dict[str, Any]] = Field(description="Individual component health checks")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "timestamp": "2025-09-13T10:30:00Z",
                "version": "1.0.0",
                "checks": {
                    "database": {"status": "healthy", "response_time_ms": 15},
                    "redis": {"status": "healthy", "response_time_ms": 5},
                },
            }
        }
    )
