"""Sharing service implementation."""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import ResourceNotFound, ValidationFailed
from ..repositories.note_repository import NoteRepository
from ..repositories.share_repository import ShareRepository
from ..repositories.user_repository import UserRepository
from ..schemas.notes import NoteEnvelope, ShareRequest
from .interfaces import ISharingService
from .note_service import load_owned_note, note_to_response

logger = logging.getLogger(__name__)


class SharingService(ISharingService):
    """Sharing service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.share_repo = ShareRepository(session)
        self.user_repo = UserRepository(session)
        self.note_repo = NoteRepository(session)

    async def share_note(self, note_id: UUID, user_id: UUID, request: ShareRequest) -> NoteEnvelope:
        """Share note with another user, or change the permission of an existing share."""
        note = await load_owned_note(self.note_repo, note_id, user_id)

        target_user = await self.user_repo.get_by_identifier(request.user)
        if not target_user:
            raise ResourceNotFound("user")
        if target_user.id == user_id:
            raise ValidationFailed("user", "Cannot share note with yourself")

        await self.share_repo.upsert_share(note.id, target_user.id, request.permission)
        await self.note_repo.touch(note.id)
        logger.info(
            f"Note {note_id} shared with {target_user.id} ({request.permission.value})"
        )

        note = await self.note_repo.get_by_id(note_id)
        return NoteEnvelope(message="Note shared successfully", note=note_to_response(note, user_id))

    async def remove_share(self, note_id: UUID, user_id: UUID, target_user_id: UUID) -> NoteEnvelope:
        """Revoke a share."""
        note = await load_owned_note(self.note_repo, note_id, user_id)

        if not await self.share_repo.delete_share(note.id, target_user_id):
            raise ResourceNotFound("share")
        await self.note_repo.touch(note.id)
        logger.info(f"Share of note {note_id} removed for {target_user_id}")

        note = await self.note_repo.get_by_id(note_id)
        return NoteEnvelope(message="Share removed", note=note_to_response(note, user_id))
