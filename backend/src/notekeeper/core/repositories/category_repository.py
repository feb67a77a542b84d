"""Category repository for database operations."""

from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy import and_, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.category import Category, note_categories


class CategoryRepository:
    """Repository for category database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_category(self, category_data: dict) -> Category:
        """Create new category."""
        category = Category(**category_data)
        self.session.add(category)
        await self.session.commit()
        await self.session.refresh(category)
        return category

    async def get_user_category(self, category_id: UUID, user_id: UUID) -> Optional[Category]:
        """Get category by ID if owned by user."""
        stmt = select(Category).where(
            and_(Category.id == category_id, Category.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_name(
        self, user_id: UUID, name: str, exclude_id: Optional[UUID] = None
    ) -> Optional[Category]:
        """Find a user's category by (lowercase) name, optionally skipping one id."""
        stmt = select(Category).where(
            and_(Category.user_id == user_id, Category.name == Category.normalize_name(name))
        )
        if exclude_id is not None:
            stmt = stmt.where(Category.id != exclude_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_user_categories(self, user_id: UUID) -> List[Category]:
        """All categories of a user, sorted by name."""
        stmt = select(Category).where(Category.user_id == user_id).order_by(Category.name)
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def get_user_categories_by_ids(
        self, user_id: UUID, category_ids: Iterable[UUID]
    ) -> List[Category]:
        """Categories among ``category_ids`` that belong to ``user_id``."""
        ids = list(category_ids)
        if not ids:
            return []
        stmt = select(Category).where(and_(Category.user_id == user_id, Category.id.in_(ids)))
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def update_category(self, category: Category, update_data: dict) -> Category:
        """Apply changes to a loaded category."""
        for key, value in update_data.items():
            setattr(category, key, value)

        await self.session.commit()
        await self.session.refresh(category)
        return category

    async def delete_category(self, category_id: UUID, user_id: UUID) -> bool:
        """Delete a user's category and detach it from every note.

        Detach and delete commit together in one transaction.
        """
        category = await self.get_user_category(category_id, user_id)
        if not category:
            return False

        await self.session.execute(
            delete(note_categories).where(note_categories.c.category_id == category_id)
        )
        await self.session.delete(category)
        await self.session.commit()
        return True
