"""Attachment service implementation."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ..exceptions import ResourceNotFound, ValidationFailed
from ..repositories.attachment_repository import AttachmentRepository
from ..repositories.note_repository import NoteRepository
from ..schemas.notes import NoteEnvelope
from ..storage import AttachmentStorage
from .interfaces import IAttachmentService
from .note_service import load_editable_note, note_to_response

logger = logging.getLogger(__name__)


class AttachmentService(IAttachmentService):
    """Stores uploaded files and records them on the note."""

    def __init__(self, session: AsyncSession, storage: Optional[AttachmentStorage] = None):
        self.session = session
        self.note_repo = NoteRepository(session)
        self.attachment_repo = AttachmentRepository(session)
        self.storage = storage or AttachmentStorage()
        self.settings = get_settings()

    async def add_attachment(
        self,
        note_id: UUID,
        user_id: UUID,
        content: bytes,
        filename: Optional[str],
        content_type: Optional[str],
    ) -> NoteEnvelope:
        note = await load_editable_note(self.note_repo, note_id, user_id)

        if not content:
            raise ValidationFailed("file", "File is required")
        if len(content) > self.settings.max_attachment_size:
            limit_kb = self.settings.max_attachment_size // 1024
            raise ValidationFailed("file", f"File too large (max {limit_kb} KB)")

        stored = await self.storage.save(content, filename, content_type)
        try:
            await self.attachment_repo.create_attachment({"note_id": note.id, **stored.as_dict()})
        except Exception:
            await self.storage.delete(stored.filename)
            raise
        await self.note_repo.touch(note.id)
        logger.info(f"Attached {stored.filename} to note {note_id}")

        note = await self.note_repo.get_by_id(note_id)
        return NoteEnvelope(message="File uploaded", note=note_to_response(note, user_id))

    async def remove_attachment(
        self, note_id: UUID, user_id: UUID, attachment_id: UUID
    ) -> NoteEnvelope:
        note = await load_editable_note(self.note_repo, note_id, user_id)

        attachment = await self.attachment_repo.get_note_attachment(attachment_id, note.id)
        if not attachment:
            raise ResourceNotFound("attachment")

        filename = attachment.filename
        await self.attachment_repo.delete_attachment(attachment)
        await self.storage.delete(filename)
        await self.note_repo.touch(note.id)

        note = await self.note_repo.get_by_id(note_id)
        return NoteEnvelope(message="Attachment removed", note=note_to_response(note, user_id))
