"""Authentication API endpoints."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import get_settings
from ..core.schemas.auth import (
    AuthResponse,
    CurrentUserResponse,
    LoginRequest,
    PasswordResetRequest,
    RegisterRequest,
)
from ..core.schemas.common import SuccessResponse
from ..core.services import AuthService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id, get_session_token

router = APIRouter(prefix="/auth", tags=["authentication"])


def set_session_cookie(response: Response, token: str) -> None:
    """Deliver the session token as an http-only cookie."""
    settings = get_settings()
    response.set_cookie(
        key=settings.cookie_name,
        value=token,
        max_age=settings.access_token_expire_minutes * 60,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    response: Response,
    session: AsyncSession = Depends(get_db_session),
):
    """Register a new user and start a session."""
    auth_service = AuthService(session)
    result = await auth_service.register_user(request)
    set_session_cookie(response, result.token)
    return result


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    response: Response,
    session: AsyncSession = Depends(get_db_session),
):
    """Login with email or username."""
    auth_service = AuthService(session)
    result = await auth_service.authenticate_user(request)
    set_session_cookie(response, result.token)
    return result


@router.post("/logout", response_model=SuccessResponse)
async def logout(
    response: Response,
    current_user_id: UUID = Depends(get_current_user_id),
    token: Optional[str] = Depends(get_session_token),
    session: AsyncSession = Depends(get_db_session),
):
    """Revoke the session token and clear the cookie."""
    auth_service = AuthService(session)
    await auth_service.logout_user(token)
    settings = get_settings()
    response.delete_cookie(
        key=settings.cookie_name,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )
    return SuccessResponse(message="Logged out successfully")


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user(
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Get current user profile."""
    auth_service = AuthService(session)
    return await auth_service.get_current_user(current_user_id)


@router.post("/reset-password", response_model=SuccessResponse)
async def reset_password(
    request: PasswordResetRequest,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Change password of the logged-in user."""
    auth_service = AuthService(session)
    await auth_service.reset_password(current_user_id, request)
    return SuccessResponse(message="Password updated successfully")
