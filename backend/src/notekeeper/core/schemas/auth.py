"""
Authentication schemas.

These schemas define the API contracts for registration, login,
password reset and the current-user profile.
"""

import re
import uuid
from typing import Optional

from pydantic import ConfigDict, EmailStr, Field, ValidationInfo, field_validator

from .common import ApiModel

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")


class RegisterRequest(ApiModel):
    """User registration request schema."""

    username: str = Field(description="Unique username (case-insensitive)")
    email: EmailStr = Field(description="Unique email address (case-insensitive)")
    password: str = Field(description="User password")

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        v = v.strip()
        if not 3 <= len(v) <= 30:
            raise ValueError("Username must be between 3 and 30 characters")
        if not USERNAME_PATTERN.match(v):
            raise ValueError("Username can only contain letters, numbers and underscores")
        return v.lower()

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if len(v) < 6:
            raise ValueError("Password must be at least 6 characters long")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "john_doe",
                "email": "john@example.com",
                "password": "secret123",
            }
        }
    )


class LoginRequest(ApiModel):
    """Login request; ``email`` accepts either an email address or a username."""

    email: str = Field(description="Email or username")
    password: str = Field(description="User password")

    @field_validator("email")
    @classmethod
    def validate_identifier(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Email or username is required")
        return v.lower()

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if not v:
            raise ValueError("Password is required")
        return v


class PasswordResetRequest(ApiModel):
    """Change password for the logged-in user."""

    old_password: str = Field(description="Current password")
    new_password: str = Field(description="New password")
    confirm_password: str = Field(description="New password confirmation")

    @field_validator("new_password")
    @classmethod
    def validate_new_password(cls, v: str) -> str:
        if len(v) < 6:
            raise ValueError("Password must be at least 6 characters long")
        return v

    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, v: str, info: ValidationInfo) -> str:
        if "new_password" in info.data and v != info.data["new_password"]:
            raise ValueError("Passwords do not match")
        return v


class UserResponse(ApiModel):
    """Public user information."""

    id: uuid.UUID
    username: str
    email: str


class AuthResponse(ApiModel):
    """Returned by register and login; the token is also set as a cookie."""

    success: bool = True
    message: Optional[str] = None
    token: str
    user: UserResponse


class CurrentUserResponse(ApiModel):
    success: bool = True
    user: UserResponse
