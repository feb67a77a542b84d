"""Note service implementation."""

import logging
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ..exceptions import PermissionDenied, ResourceNotFound, ValidationFailed
from ..models.category import Category
from ..models.note import Note
from ..permissions import UserPermission, can_edit, can_manage, can_read, resolve_permission
from ..repositories.category_repository import CategoryRepository
from ..repositories.note_repository import NoteRepository
from ..schemas.auth import UserResponse
from ..schemas.categories import CategorySummary
from ..schemas.common import PaginationInfo
from ..schemas.notes import (
    AttachmentResponse,
    NoteCreate,
    NoteEnvelope,
    NoteFilters,
    NoteListResponse,
    NoteResponse,
    NoteUpdate,
    ShareResponse,
)
from ..storage import AttachmentStorage
from .interfaces import INoteService

logger = logging.getLogger(__name__)


def note_to_response(note: Note, viewer_id: UUID) -> NoteResponse:
    """Render a note as seen by ``viewer_id``."""
    permission = resolve_permission(note, viewer_id)
    return NoteResponse(
        id=note.id,
        title=note.title,
        body=note.body,
        color=note.color,
        categories=[CategorySummary.model_validate(c) for c in note.categories],
        attachments=[AttachmentResponse.model_validate(a) for a in note.attachments],
        author=UserResponse.model_validate(note.owner),
        shared_with=[
            ShareResponse(user=UserResponse.model_validate(share.user), permission=share.permission)
            for share in note.shares
        ],
        is_owner=permission is UserPermission.OWNER,
        user_permission=permission,
        created_at=note.created_at,
        updated_at=note.updated_at,
    )


async def load_visible_note(
    note_repo: NoteRepository, note_id: UUID, user_id: UUID
) -> Tuple[Note, UserPermission]:
    """Fetch a note and the user's permission on it.

    Raises 404 both when the note is missing and when the user cannot see it.
    """
    note = await note_repo.get_by_id(note_id)
    if note is None:
        raise ResourceNotFound("note")
    permission = resolve_permission(note, user_id)
    if not can_read(permission):
        raise ResourceNotFound("note")
    return note, permission


async def load_editable_note(note_repo: NoteRepository, note_id: UUID, user_id: UUID) -> Note:
    note, permission = await load_visible_note(note_repo, note_id, user_id)
    if not can_edit(permission):
        raise PermissionDenied("note", "You do not have permission to edit this note")
    return note


async def load_owned_note(note_repo: NoteRepository, note_id: UUID, user_id: UUID) -> Note:
    note, permission = await load_visible_note(note_repo, note_id, user_id)
    if not can_manage(permission):
        raise PermissionDenied("note", "Only the owner can perform this action")
    return note


class NoteService(INoteService):
    """Note service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)
        # Used to check that attached categories belong to the note owner
        self.category_repo = CategoryRepository(session)
        self.storage = AttachmentStorage()
        self.settings = get_settings()

    async def create_note(self, user_id: UUID, request: NoteCreate) -> NoteEnvelope:
        """Create new note."""
        categories = await self._owned_categories(user_id, request.categories)

        note_data = {"title": request.title, "body": request.body, "user_id": user_id}
        if request.color is not None:
            note_data["color"] = request.color

        note = await self.note_repo.create_note(note_data, categories)
        logger.info(f"Created note {note.id} for user {user_id}")
        return NoteEnvelope(message="Note created successfully", note=note_to_response(note, user_id))

    async def get_note(self, note_id: UUID, user_id: UUID) -> NoteEnvelope:
        """Get note by ID.

        Owners and share recipients may read it; anyone else gets 404 so the
        note's existence is not revealed.
        """
        note, _ = await load_visible_note(self.note_repo, note_id, user_id)
        return NoteEnvelope(note=note_to_response(note, user_id))

    async def update_note(self, note_id: UUID, user_id: UUID, request: NoteUpdate) -> NoteEnvelope:
        """Update existing note as owner or edit share."""
        note = await load_editable_note(self.note_repo, note_id, user_id)

        update_data = {}
        if request.title is not None:
            update_data["title"] = request.title
        if request.body is not None:
            update_data["body"] = request.body
        if request.color is not None:
            update_data["color"] = request.color

        categories = None
        if request.categories is not None:
            # categories always come from the owner's set, even for edit shares
            categories = await self._owned_categories(note.user_id, request.categories)

        note = await self.note_repo.update_note(note, update_data, categories)
        return NoteEnvelope(message="Note updated successfully", note=note_to_response(note, user_id))

    async def delete_note(self, note_id: UUID, user_id: UUID) -> bool:
        """Delete note and its stored files; owner only."""
        note = await load_owned_note(self.note_repo, note_id, user_id)
        filenames = [attachment.filename for attachment in note.attachments]

        await self.note_repo.delete_note(note)
        for filename in filenames:
            await self.storage.delete(filename)

        logger.info(f"Deleted note {note_id} ({len(filenames)} attachments)")
        return True

    async def list_notes(
        self, user_id: UUID, filters: NoteFilters, page: int = 1, limit: Optional[int] = None
    ) -> NoteListResponse:
        """List owned and shared notes matching the filters, newest first."""
        page = max(page or 1, 1)
        limit = limit or self.settings.default_page_size
        limit = min(max(limit, 1), self.settings.max_page_size)

        notes, total = await self.note_repo.list_visible_notes(
            user_id,
            page=page,
            per_page=limit,
            query=filters.query,
            color=filters.color,
            category_ids=filters.categories,
        )

        return NoteListResponse(
            pagination=PaginationInfo.create(total=total, page=page, limit=limit),
            notes=[note_to_response(note, user_id) for note in notes],
        )

    async def _owned_categories(self, owner_id: UUID, category_ids: List[UUID]) -> List[Category]:
        if not category_ids:
            return []
        categories = await self.category_repo.get_user_categories_by_ids(owner_id, category_ids)
        if len(categories) != len(set(category_ids)):
            raise ValidationFailed("categories", "Invalid category")
        return categories
