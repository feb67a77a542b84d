"""Session token utilities.

A session token is a signed JWT carrying only the user id (``sub``), an
expiry and a token id (``jti``) used for logout revocation.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt

from ..config import get_settings
from ..core.redis_client import get_redis_client

logger = logging.getLogger(__name__)


class TokenError(Exception):
    """Base class for session token failures."""


class InvalidTokenError(TokenError):
    """Token is malformed, badly signed, revoked or has no subject."""


class ExpiredTokenError(TokenError):
    """Token signature is valid but its lifetime is over."""


def create_access_token(user_id: UUID | str, expires_delta: Optional[timedelta] = None) -> str:
    """Issue a session token for ``user_id``."""
    settings = get_settings()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    to_encode = {
        "sub": str(user_id),
        "exp": datetime.now(timezone.utc) + expires_delta,
        "type": "access",
        "jti": str(uuid.uuid4()),
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def _decode(token: str) -> Dict[str, Any]:
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except ExpiredSignatureError as exc:
        raise ExpiredTokenError("Session expired") from exc
    except JWTError as exc:
        raise InvalidTokenError("Invalid session") from exc

    if payload.get("type") != "access":
        raise InvalidTokenError("Invalid session")
    return payload


async def verify_access_token(token: str) -> UUID:
    """Validate a session token and return its user id.

    Raises:
        ExpiredTokenError: token lifetime is over
        InvalidTokenError: bad signature, wrong shape, or revoked at logout
    """
    payload = _decode(token)

    jti = payload.get("jti")
    if jti:
        # Redis being down must not lock everybody out
        try:
            if await get_redis_client().is_token_blacklisted(jti):
                raise InvalidTokenError("Invalid session")
        except InvalidTokenError:
            raise
        except Exception as e:
            logger.warning(f"Token blacklist lookup failed: {e}")

    try:
        return UUID(payload["sub"])
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidTokenError("Invalid session") from exc


async def blacklist_token(token: str) -> bool:
    """Revoke a token until it would have expired anyway."""
    try:
        payload = _decode(token)
    except TokenError:
        return False

    jti = payload.get("jti")
    exp = payload.get("exp")
    if not jti or not exp:
        return False

    remaining_seconds = int(exp - datetime.now(timezone.utc).timestamp())
    if remaining_seconds <= 0:
        return False

    return await get_redis_client().add_to_blacklist(jti, remaining_seconds)
