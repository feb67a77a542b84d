"""Share repository for database operations."""

from typing import Optional
from uuid import UUID

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.share import NoteShare, SharePermission


class ShareRepository:
    """Repository for note share database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_share(self, note_id: UUID, user_id: UUID) -> Optional[NoteShare]:
        """Get the share of ``note_id`` granted to ``user_id``."""
        stmt = select(NoteShare).where(
            and_(NoteShare.note_id == note_id, NoteShare.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert_share(
        self, note_id: UUID, user_id: UUID, permission: SharePermission
    ) -> NoteShare:
        """Create the share or change its permission; one share per (note, user)."""
        share = await self.get_share(note_id, user_id)
        if share is None:
            share = NoteShare(note_id=note_id, user_id=user_id, permission=permission.value)
            self.session.add(share)
        else:
            share.permission = permission.value

        await self.session.commit()
        await self.session.refresh(share)
        return share

    async def delete_share(self, note_id: UUID, user_id: UUID) -> bool:
        """Remove a share; False when there was none."""
        share = await self.get_share(note_id, user_id)
        if not share:
            return False

        await self.session.delete(share)
        await self.session.commit()
        return True
