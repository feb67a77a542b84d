# Category models for organizing notes
import uuid

from sqlalchemy import Column, ForeignKey, Index, String, Table, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, validates

from ..colors import DEFAULT_COLOR, normalize_color
from .base import BaseModel
from .types import GUID


# Links notes to categories (many-to-many)
note_categories = Table(
    "note_categories",
    BaseModel.metadata,
    Column("note_id", GUID(), ForeignKey("notes.id", ondelete="CASCADE"), primary_key=True),
    Column(
        "category_id", GUID(), ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True
    ),
    Index("idx_note_categories_category_id", "category_id"),
)


class Category(BaseModel):
    """Named, colored tag owned by a single user."""

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(String(50), nullable=False)
    color: Mapped[str] = mapped_column(String(6), nullable=False, default=DEFAULT_COLOR)

    user_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        # names are unique per owner, compared lowercase
        UniqueConstraint("user_id", "name", name="uq_categories_user_name"),
        Index("idx_categories_user_id", "user_id"),
    )

    def __repr__(self) -> str:
        return f"<Category(name='{self.name}', user_id={self.user_id})>"

    @classmethod
    def normalize_name(cls, name: str) -> str:
        """Clean up category name."""
        clean = name.strip().lower()
        if not clean:
            raise ValueError("Category name cannot be empty")
        return clean

    @validates("name")
    def _normalize_name(self, key, value: str) -> str:
        return self.normalize_name(value)

    @validates("color")
    def _normalize_color(self, key, value: str) -> str:
        return normalize_color(value)

    def is_owned_by(self, user_id: uuid.UUID) -> bool:
        return self.user_id == user_id
