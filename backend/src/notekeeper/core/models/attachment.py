# Files attached to notes
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .types import GUID

if TYPE_CHECKING:
    from .note import Note

MAX_ATTACHMENT_SIZE = 1024 * 1024  # 1 MiB


class NoteAttachment(BaseModel):
    """Metadata for an uploaded file; the bytes live in the upload directory."""

    __tablename__ = "note_attachments"

    note_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("notes.id", ondelete="CASCADE"), nullable=False
    )
    filename: Mapped[str] = mapped_column(String(255), nullable=False)  # stored name
    original_name: Mapped[str] = mapped_column(String(255), nullable=False)
    mime_type: Mapped[str] = mapped_column(String(127), nullable=False)
    size: Mapped[int] = mapped_column(Integer, nullable=False)
    path: Mapped[str] = mapped_column(String(500), nullable=False)  # public URL path

    note: Mapped["Note"] = relationship("Note", back_populates="attachments")

    __table_args__ = (
        CheckConstraint(f"size >= 0 AND size <= {MAX_ATTACHMENT_SIZE}", name="ck_attachments_size"),
        Index("idx_note_attachments_note_id", "note_id"),
    )

    def __repr__(self) -> str:
        return f"<NoteAttachment(filename='{self.filename}', note_id={self.note_id})>"
