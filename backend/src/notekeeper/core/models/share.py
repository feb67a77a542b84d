# Note sharing between users
import uuid
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .types import GUID

if TYPE_CHECKING:
    from .note import Note
    from .user import User


class SharePermission(str, Enum):
    """What a share recipient may do with the note."""

    VIEW = "view"
    EDIT = "edit"


class NoteShare(BaseModel):
    """Grants a non-owner access to a note."""

    __tablename__ = "note_shares"

    note_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("notes.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    permission: Mapped[str] = mapped_column(
        String(10), default=SharePermission.VIEW.value, nullable=False
    )

    note: Mapped["Note"] = relationship("Note", back_populates="shares")
    user: Mapped["User"] = relationship("User", lazy="selectin")

    __table_args__ = (
        UniqueConstraint("note_id", "user_id", name="uq_note_shares_note_user"),
        CheckConstraint("permission IN ('view', 'edit')", name="ck_note_shares_permission"),
        Index("idx_note_shares_note_id", "note_id"),
        Index("idx_note_shares_user_id", "user_id"),
    )

    def __repr__(self) -> str:
        return f"<NoteShare(note_id={self.note_id}, user_id={self.user_id}, permission={self.permission})>"

    @property
    def can_edit(self) -> bool:
        return self.permission == SharePermission.EDIT.value
