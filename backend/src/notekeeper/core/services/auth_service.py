"""Authentication service implementation."""

import logging
from typing import Optional
from uuid import UUID

from fastapi import status
from sqlalchemy.ext.asyncio import AsyncSession

from ...security import blacklist_token, create_access_token, hash_password, needs_update, verify_password
from ..exceptions import ApiError, AuthenticationFailed, ValidationFailed
from ..repositories.user_repository import UserRepository
from ..schemas.auth import (
    AuthResponse,
    CurrentUserResponse,
    LoginRequest,
    PasswordResetRequest,
    RegisterRequest,
    UserResponse,
)
from .interfaces import IAuthService

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email/username or password"


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)

    async def register_user(self, request: RegisterRequest) -> AuthResponse:
        """Register new user."""
        errors = {}
        if await self.user_repo.is_email_taken(request.email):
            errors["email"] = "Email already registered"
        if await self.user_repo.is_username_taken(request.username):
            errors["username"] = "Username already taken"
        if errors:
            raise ApiError(status.HTTP_400_BAD_REQUEST, errors)

        user_data = {
            "username": request.username,
            "email": request.email,
            "password_hash": hash_password(request.password),
        }
        user = await self.user_repo.create_user(user_data)
        logger.info(f"Registered user {user.id}")

        return AuthResponse(
            message="User registered successfully",
            token=create_access_token(user.id),
            user=UserResponse.model_validate(user),
        )

    async def authenticate_user(self, request: LoginRequest) -> AuthResponse:
        """Login user; the same error covers unknown identifier and wrong password."""
        user = await self.user_repo.get_by_identifier(request.email)
        if not user or not verify_password(request.password, user.password_hash):
            raise ValidationFailed("email", INVALID_CREDENTIALS)

        if needs_update(user.password_hash):
            # hash scheme or rounds changed since this password was set
            user = await self.user_repo.update_user(
                user.id, {"password_hash": hash_password(request.password)}
            )

        return AuthResponse(
            message="Login successful",
            token=create_access_token(user.id),
            user=UserResponse.model_validate(user),
        )

    async def get_current_user(self, user_id: UUID) -> CurrentUserResponse:
        """Get user by ID."""
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            # token outlived its user
            raise AuthenticationFailed("Invalid session")
        return CurrentUserResponse(user=UserResponse.model_validate(user))

    async def reset_password(self, user_id: UUID, request: PasswordResetRequest) -> bool:
        """Change password after checking the current one."""
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise AuthenticationFailed("Invalid session")

        if not verify_password(request.old_password, user.password_hash):
            raise ValidationFailed("oldPassword", "Current password is incorrect")

        await self.user_repo.update_user(
            user_id, {"password_hash": hash_password(request.new_password)}
        )
        logger.info(f"Password changed for user {user_id}")
        return True

    async def logout_user(self, access_token: Optional[str]) -> bool:
        """Blacklist the token until it would have expired anyway."""
        if not access_token:
            return False
        return await blacklist_token(access_token)
