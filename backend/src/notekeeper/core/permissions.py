"""Sharing policy: who may read, edit, share or delete a note.

Pure functions of ``(note, actor_id)``; no database access.
"""

import uuid
from enum import Enum

from .models.note import Note
from .models.share import SharePermission


class UserPermission(str, Enum):
    """Access level of a user on a note."""

    OWNER = "owner"
    EDIT = "edit"
    VIEW = "view"
    NONE = "none"


def resolve_permission(note: Note, actor_id: uuid.UUID) -> UserPermission:
    """Owner wins; otherwise the actor's share permission; otherwise none."""
    if note.user_id == actor_id:
        return UserPermission.OWNER
    share = note.share_for(actor_id)
    if share is None:
        return UserPermission.NONE
    if share.permission == SharePermission.EDIT.value:
        return UserPermission.EDIT
    return UserPermission.VIEW


def can_read(permission: UserPermission) -> bool:
    return permission is not UserPermission.NONE


def can_edit(permission: UserPermission) -> bool:
    return permission in (UserPermission.OWNER, UserPermission.EDIT)


def can_manage(permission: UserPermission) -> bool:
    """Delete the note or change its shares: owner only."""
    return permission is UserPermission.OWNER
