"""Authentication dependency: session token from cookie or Bearer header."""

from typing import Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..config import get_settings
from ..core.exceptions import AuthenticationFailed
from ..security import TokenError, verify_access_token


class SessionTokenAuth(HTTPBearer):
    """Resolve the current user id from the session cookie or a Bearer token.

    Browsers send the http-only cookie; non-cookie clients send the token
    returned at login as ``Authorization: Bearer <token>``. The cookie is
    tried first; the header is used when the cookie does not verify.
    """

    def __init__(self):
        super().__init__(auto_error=False)

    async def __call__(self, request: Request) -> UUID:
        candidates = []
        cookie_token = request.cookies.get(get_settings().cookie_name)
        if cookie_token:
            candidates.append(cookie_token)
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if credentials and credentials.credentials not in candidates:
            candidates.append(credentials.credentials)
        if not candidates:
            raise AuthenticationFailed("Authentication required")

        # a stale cookie must not shadow a valid Bearer token
        first_error: Optional[TokenError] = None
        for token in candidates:
            try:
                user_id = await verify_access_token(token)
            except TokenError as e:
                first_error = first_error or e
                continue
            request.state.token = token
            return user_id

        raise AuthenticationFailed(str(first_error))


# Dependency for getting current user ID from the session token
async def get_current_user_id(user_id: UUID = Depends(SessionTokenAuth())) -> UUID:
    """Get current authenticated user ID."""
    return user_id


def get_session_token(request: Request) -> Optional[str]:
    """Raw token of the authenticated request (set by ``SessionTokenAuth``)."""
    return getattr(request.state, "token", None)
