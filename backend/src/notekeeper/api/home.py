"""Note feed: owned and shared notes with search, filters and pagination."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import ValidationFailed
from ..core.schemas.notes import NoteFilters, NoteListResponse
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id

router = APIRouter(tags=["notes"])


@router.get("/", response_model=NoteListResponse)
async def list_notes(
    query: Optional[str] = Query(None, description="Substring of title or body"),
    color: Optional[str] = Query(None, description="Hex color, with or without '#'"),
    categories: Optional[List[UUID]] = Query(None, description="Notes must carry all of these"),
    page: int = Query(1),
    limit: Optional[int] = Query(None),
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """List notes visible to the current user, most recently updated first."""
    try:
        filters = NoteFilters(query=query, color=color, categories=categories or [])
    except ValidationError:
        raise ValidationFailed("color", "Color must be a valid hex color code")

    note_service = NoteService(session)
    return await note_service.list_notes(current_user_id, filters, page=page, limit=limit)
