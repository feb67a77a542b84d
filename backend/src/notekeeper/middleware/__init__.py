"""Middleware for authentication and other cross-cutting concerns."""

from .auth import SessionTokenAuth, get_current_user_id, get_session_token

__all__ = ["get_current_user_id", "get_session_token", "SessionTokenAuth"]
