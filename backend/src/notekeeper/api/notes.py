"""Notes API endpoints: CRUD, sharing and attachments."""

from uuid import UUID

from fastapi import APIRouter, Depends, File, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import get_settings
from ..core.schemas.common import SuccessResponse
from ..core.schemas.notes import NoteCreate, NoteEnvelope, NoteUpdate, ShareRequest
from ..core.services import AttachmentService, NoteService, SharingService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id

router = APIRouter(prefix="/notes", tags=["notes"])


@router.post("", response_model=NoteEnvelope, status_code=status.HTTP_201_CREATED)
async def create_note(
    request: NoteCreate,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note."""
    note_service = NoteService(session)
    return await note_service.create_note(current_user_id, request)


@router.get("/{note_id}", response_model=NoteEnvelope)
async def get_note(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a note owned by or shared with the current user."""
    note_service = NoteService(session)
    return await note_service.get_note(note_id, current_user_id)


@router.put("/{note_id}", response_model=NoteEnvelope)
async def update_note(
    note_id: UUID,
    request: NoteUpdate,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Update a note (owner or edit share)."""
    note_service = NoteService(session)
    return await note_service.update_note(note_id, current_user_id, request)


@router.delete("/{note_id}", response_model=SuccessResponse)
async def delete_note(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a note (owner only)."""
    note_service = NoteService(session)
    await note_service.delete_note(note_id, current_user_id)
    return SuccessResponse(message="Note deleted successfully")


@router.post("/{note_id}/share", response_model=NoteEnvelope)
async def share_note(
    note_id: UUID,
    request: ShareRequest,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Share a note with a user by username or email, or change the permission."""
    sharing_service = SharingService(session)
    return await sharing_service.share_note(note_id, current_user_id, request)


@router.delete("/{note_id}/share/{user_id}", response_model=NoteEnvelope)
async def remove_share(
    note_id: UUID,
    user_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Stop sharing a note with a user."""
    sharing_service = SharingService(session)
    return await sharing_service.remove_share(note_id, current_user_id, user_id)


@router.post(
    "/{note_id}/attachments", response_model=NoteEnvelope, status_code=status.HTTP_201_CREATED
)
async def upload_attachment(
    note_id: UUID,
    file: UploadFile = File(...),
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Attach a file (up to 1 MiB) to a note."""
    # one byte past the limit is enough to reject oversized uploads
    content = await file.read(get_settings().max_attachment_size + 1)
    attachment_service = AttachmentService(session)
    return await attachment_service.add_attachment(
        note_id, current_user_id, content, file.filename, file.content_type
    )


@router.delete("/{note_id}/attachments/{attachment_id}", response_model=NoteEnvelope)
async def delete_attachment(
    note_id: UUID,
    attachment_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Remove an attachment and its stored file."""
    attachment_service = AttachmentService(session)
    return await attachment_service.remove_attachment(note_id, current_user_id, attachment_id)
