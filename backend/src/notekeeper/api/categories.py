"""Category API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.categories import (
    CategoryCreate,
    CategoryEnvelope,
    CategoryListResponse,
    CategoryUpdate,
)
from ..core.schemas.common import SuccessResponse
from ..core.services import CategoryService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id

router = APIRouter(prefix="/categories", tags=["categories"])


@router.post("", response_model=CategoryEnvelope, status_code=status.HTTP_201_CREATED)
async def create_category(
    request: CategoryCreate,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    category_service = CategoryService(session)
    return await category_service.create_category(current_user_id, request)


@router.get("", response_model=CategoryListResponse)
async def list_categories(
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """List the current user's categories by name."""
    category_service = CategoryService(session)
    return await category_service.list_categories(current_user_id)


@router.put("/{category_id}", response_model=CategoryEnvelope)
async def update_category(
    category_id: UUID,
    request: CategoryUpdate,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    category_service = CategoryService(session)
    return await category_service.update_category(category_id, current_user_id, request)


@router.delete("/{category_id}", response_model=SuccessResponse)
async def delete_category(
    category_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a category; notes keep existing without it."""
    category_service = CategoryService(session)
    await category_service.delete_category(category_id, current_user_id)
    return SuccessResponse(message="Category deleted successfully")
