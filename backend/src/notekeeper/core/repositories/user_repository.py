"""User repository for database operations."""

from typing import Optional
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.user import User


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_user(self, user_data: dict) -> User:
        """Create new user."""
        user = User(**user_data)
        self.session.add(user)
        await self.session.commit()
        await self.session.refresh(user)
        return user

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID."""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username (case-insensitive)."""
        stmt = select(User).where(User.username == User.normalize_identifier(username))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (case-insensitive)."""
        stmt = select(User).where(User.email == User.normalize_identifier(email))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_identifier(self, identifier: str) -> Optional[User]:
        """Get user whose username or email equals ``identifier``."""
        value = User.normalize_identifier(identifier)
        stmt = select(User).where(or_(User.username == value, User.email == value)).limit(1)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def update_user(self, user_id: UUID, update_data: dict) -> Optional[User]:
        """Update user data."""
        user = await self.get_by_id(user_id)
        if not user:
            return None

        for key, value in update_data.items():
            setattr(user, key, value)

        await self.session.commit()
        await self.session.refresh(user)
        return user

    async def is_username_taken(self, username: str) -> bool:
        """Check if username exists."""
        return await self.get_by_username(username) is not None

    async def is_email_taken(self, email: str) -> bool:
        """Check if email exists."""
        return await self.get_by_email(email) is not None
