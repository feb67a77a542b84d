"""Note repository for database operations."""

import logging
from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import and_, desc, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.base import utcnow
from ..models.category import Category, note_categories
from ..models.note import Note
from ..models.share import NoteShare

logger = logging.getLogger(__name__)


def visible_to(user_id: UUID):
    """Condition matching notes owned by or shared with ``user_id``."""
    shared_ids = select(NoteShare.note_id).where(NoteShare.user_id == user_id)
    return or_(Note.user_id == user_id, Note.id.in_(shared_ids))


def having_all_categories(category_ids: Sequence[UUID]):
    """Condition matching notes linked to every id in ``category_ids``."""
    ids = list(dict.fromkeys(category_ids))
    matching = (
        select(note_categories.c.note_id)
        .where(note_categories.c.category_id.in_(ids))
        .group_by(note_categories.c.note_id)
        .having(func.count(func.distinct(note_categories.c.category_id)) == len(ids))
    )
    return Note.id.in_(matching)


class NoteRepository:
    """Repository for note database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_note(self, note_data: dict, categories: Optional[List[Category]] = None) -> Note:
        """Create new note."""
        note = Note(**note_data, categories=list(categories or []))
        self.session.add(note)
        await self.session.commit()
        return await self.get_by_id(note.id)

    async def get_by_id(self, note_id: UUID) -> Optional[Note]:
        """Get note by ID with owner, categories, shares and attachments loaded.

        Always refreshes from the database so the returned graph reflects
        the last commit.
        """
        stmt = (
            select(Note)
            .where(Note.id == note_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_note(
        self,
        note: Note,
        update_data: dict,
        categories: Optional[List[Category]] = None,
    ) -> Note:
        """Apply changes to a loaded note; ``categories`` replaces the set when given."""
        for key, value in update_data.items():
            setattr(note, key, value)
        if categories is not None:
            note.categories = list(categories)
        note.touch()

        await self.session.commit()
        return await self.get_by_id(note.id)

    async def delete_note(self, note: Note) -> None:
        """Delete note with its shares, attachments and category links."""
        logger.debug(f"Deleting note {note.id}")
        try:
            await self.session.delete(note)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

    async def touch(self, note_id: UUID) -> None:
        """Bump ``updated_at`` after a change to shares or attachments."""
        await self.session.execute(
            update(Note).where(Note.id == note_id).values(updated_at=utcnow())
        )
        await self.session.commit()

    async def list_visible_notes(
        self,
        user_id: UUID,
        page: int = 1,
        per_page: int = 12,
        query: Optional[str] = None,
        color: Optional[str] = None,
        category_ids: Optional[Sequence[UUID]] = None,
    ) -> Tuple[List[Note], int]:
        """Owned and shared notes matching every given filter, newest first."""
        conditions = [visible_to(user_id)]

        if query:
            conditions.append(
                or_(
                    Note.title.icontains(query, autoescape=True),
                    Note.body.icontains(query, autoescape=True),
                )
            )
        if color:
            conditions.append(Note.color == color)
        if category_ids:
            conditions.append(having_all_categories(category_ids))

        where = and_(*conditions)

        count_stmt = select(func.count()).select_from(Note).where(where)
        total_count = (await self.session.execute(count_stmt)).scalar_one()

        offset = (page - 1) * per_page
        stmt = (
            select(Note)
            .where(where)
            .order_by(desc(Note.updated_at), desc(Note.created_at), desc(Note.id))
            .offset(offset)
            .limit(per_page)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars()), total_count
