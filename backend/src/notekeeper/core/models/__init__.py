"""
Database models for the Notekeeper application.

SQLAlchemy ORM models defining the schema. All models are used through
async sessions.

Models included:
    - User: account with lowercase-unique username and email
    - Category: per-user named, colored tag
    - Note: note content, color and owner
    - NoteShare: (user, permission) grant on a note
    - NoteAttachment: uploaded file metadata
"""

from .attachment import MAX_ATTACHMENT_SIZE, NoteAttachment
from .base import BaseModel
from .category import Category, note_categories
from .note import Note
from .share import NoteShare, SharePermission
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Category",
    "note_categories",
    "Note",
    "NoteShare",
    "SharePermission",
    "NoteAttachment",
    "MAX_ATTACHMENT_SIZE",
]
