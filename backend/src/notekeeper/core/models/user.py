"""
User model for authentication.
"""

from sqlalchemy import CheckConstraint, Index, String
from sqlalchemy.orm import Mapped, mapped_column, validates

from .base import BaseModel


class User(BaseModel):
    """User account; username and email are stored lowercase."""

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(30), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        CheckConstraint("length(username) <= 30", name="ck_users_username_len"),
        CheckConstraint("username = lower(username)", name="ck_users_username_lowercase"),
        CheckConstraint("email = lower(email)", name="ck_users_email_lowercase"),
        Index("idx_users_username", "username"),
        Index("idx_users_email", "email"),
    )

    def __repr__(self) -> str:
        return f"<User(username='{self.username}')>"

    @staticmethod
    def normalize_identifier(value: str) -> str:
        """Usernames and emails compare case-insensitively."""
        return value.strip().lower()

    @validates("username", "email")
    def _lowercase(self, key, value: str) -> str:
        return self.normalize_identifier(value)
