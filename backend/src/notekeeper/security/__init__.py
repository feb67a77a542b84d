"""Security utilities."""

from .jwt import (
    ExpiredTokenError,
    InvalidTokenError,
    TokenError,
    blacklist_token,
    create_access_token,
    verify_access_token,
)
from .password import hash_password, needs_update, verify_password

__all__ = [
    "hash_password",
    "verify_password",
    "needs_update",
    "create_access_token",
    "verify_access_token",
    "blacklist_token",
    "TokenError",
    "InvalidTokenError",
    "ExpiredTokenError",
]
