"""Category service implementation."""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import ResourceNotFound, ValidationFailed
from ..repositories.category_repository import CategoryRepository
from ..schemas.categories import (
    CategoryCreate,
    CategoryEnvelope,
    CategoryListResponse,
    CategoryResponse,
    CategoryUpdate,
)
from .interfaces import ICategoryService

logger = logging.getLogger(__name__)

DUPLICATE_NAME = "Category with this name already exists"


class CategoryService(ICategoryService):
    """Category service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.category_repo = CategoryRepository(session)

    async def create_category(self, user_id: UUID, request: CategoryCreate) -> CategoryEnvelope:
        """Create category; names are unique per user, ignoring case."""
        if await self.category_repo.get_by_name(user_id, request.name):
            raise ValidationFailed("name", DUPLICATE_NAME)

        category_data = {"name": request.name, "user_id": user_id}
        if request.color is not None:
            category_data["color"] = request.color

        category = await self.category_repo.create_category(category_data)
        return CategoryEnvelope(
            message="Category created successfully",
            category=CategoryResponse.model_validate(category),
        )

    async def list_categories(self, user_id: UUID) -> CategoryListResponse:
        categories = await self.category_repo.list_user_categories(user_id)
        return CategoryListResponse(
            categories=[CategoryResponse.model_validate(c) for c in categories]
        )

    async def update_category(
        self, category_id: UUID, user_id: UUID, request: CategoryUpdate
    ) -> CategoryEnvelope:
        category = await self.category_repo.get_user_category(category_id, user_id)
        if not category:
            raise ResourceNotFound("category")

        update_data = {}
        if request.name is not None:
            if await self.category_repo.get_by_name(user_id, request.name, exclude_id=category_id):
                raise ValidationFailed("name", DUPLICATE_NAME)
            update_data["name"] = request.name
        if request.color is not None:
            update_data["color"] = request.color

        if update_data:
            category = await self.category_repo.update_category(category, update_data)

        return CategoryEnvelope(
            message="Category updated successfully",
            category=CategoryResponse.model_validate(category),
        )

    async def delete_category(self, category_id: UUID, user_id: UUID) -> bool:
        if not await self.category_repo.delete_category(category_id, user_id):
            raise ResourceNotFound("category")
        logger.info(f"Deleted category {category_id} of user {user_id}")
        return True
