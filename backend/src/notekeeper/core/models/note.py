# Note model for user content
import uuid
from typing import TYPE_CHECKING, List

from sqlalchemy import CheckConstraint, ForeignKey, Index, String, Text, event
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates
from sqlalchemy.orm import attributes as orm_attributes

from ..colors import DEFAULT_COLOR, normalize_color
from .base import BaseModel
from .category import note_categories
from .types import GUID

if TYPE_CHECKING:
    from .attachment import NoteAttachment
    from .category import Category
    from .share import NoteShare
    from .user import User


class Note(BaseModel):
    """Note with body, color, categories, attachments and shares."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    color: Mapped[str] = mapped_column(String(6), nullable=False, default=DEFAULT_COLOR)

    # owner reference
    user_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    # relationships
    owner: Mapped["User"] = relationship(
        "User",
        lazy="selectin",
        doc="User who created and owns this note",
    )

    categories: Mapped[List["Category"]] = relationship(
        "Category",
        secondary=note_categories,
        lazy="selectin",
        order_by="Category.name",
        doc="Categories attached to this note (same owner only)",
    )

    shares: Mapped[List["NoteShare"]] = relationship(
        "NoteShare",
        back_populates="note",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="NoteShare.created_at",
        doc="Share records granting access to other users",
    )

    attachments: Mapped[List["NoteAttachment"]] = relationship(
        "NoteAttachment",
        back_populates="note",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="NoteAttachment.created_at",
        doc="Uploaded files, oldest first",
    )

    __table_args__ = (
        Index("idx_notes_user_id", "user_id"),
        Index("idx_notes_user_title", "user_id", "title"),
        Index("idx_notes_updated_at", "updated_at"),
        CheckConstraint("length(title) <= 200", name="ck_notes_title_len"),
    )

    def __repr__(self) -> str:
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', user_id={self.user_id})>"

    @validates("color")
    def _normalize_color(self, key, value: str) -> str:
        return normalize_color(value)

    @property
    def category_ids(self) -> List[uuid.UUID]:
        return [category.id for category in self.categories]

    def is_owned_by(self, user_id: uuid.UUID) -> bool:
        return self.user_id == user_id

    def share_for(self, user_id: uuid.UUID) -> "NoteShare | None":
        """Return the share granted to ``user_id``, if any."""
        return next((share for share in self.shares if share.user_id == user_id), None)


# Ensure relationship collections are initialized to avoid implicit lazy loads
@event.listens_for(Note, "init", propagate=True)
def _init_note_collections(target, args, kwargs):
    for key in ("categories", "shares", "attachments"):
        if key not in kwargs:
            orm_attributes.set_committed_value(target, key, [])
