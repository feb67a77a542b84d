"""Attachment repository for database operations."""

from typing import Optional
from uuid import UUID

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.attachment import NoteAttachment


class AttachmentRepository:
    """Repository for note attachment metadata."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_attachment(self, attachment_data: dict) -> NoteAttachment:
        """Create new attachment record."""
        attachment = NoteAttachment(**attachment_data)
        self.session.add(attachment)
        await self.session.commit()
        await self.session.refresh(attachment)
        return attachment

    async def get_note_attachment(
        self, attachment_id: UUID, note_id: UUID
    ) -> Optional[NoteAttachment]:
        """Get attachment by ID if it belongs to the note."""
        stmt = select(NoteAttachment).where(
            and_(NoteAttachment.id == attachment_id, NoteAttachment.note_id == note_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_attachment(self, attachment: NoteAttachment) -> None:
        await self.session.delete(attachment)
        await self.session.commit()
