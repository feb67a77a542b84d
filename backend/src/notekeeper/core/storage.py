"""Local disk storage for note attachments."""

import logging
import mimetypes
import os
import uuid
from pathlib import Path
from typing import Optional, Tuple

from starlette.concurrency import run_in_threadpool

from ..config import get_settings

logger = logging.getLogger(__name__)

# Width of the filename columns on note_attachments
MAX_NAME_LENGTH = 255
MAX_EXTENSION_LENGTH = 16


def clean_filename(name: Optional[str]) -> Tuple[str, str]:
    """Client filename without directories and cut to ``MAX_NAME_LENGTH``, plus its extension.

    Overlong names lose characters from the stem so the extension survives;
    an implausibly long extension is dropped.
    """
    name = os.path.basename(name or "") or "file"
    stem, extension = os.path.splitext(name)
    if len(extension) > MAX_EXTENSION_LENGTH:
        stem, extension = name, ""
    if len(name) > MAX_NAME_LENGTH:
        name = stem[: MAX_NAME_LENGTH - len(extension)] + extension
    return name, extension.lower()


class StoredFile:
    """Result of saving an upload."""

    def __init__(self, filename: str, original_name: str, mime_type: str, size: int, path: str):
        self.filename = filename
        self.original_name = original_name
        self.mime_type = mime_type
        self.size = size
        self.path = path

    def as_dict(self) -> dict:
        return {
            "filename": self.filename,
            "original_name": self.original_name,
            "mime_type": self.mime_type,
            "size": self.size,
            "path": self.path,
        }


class AttachmentStorage:
    """Writes uploads into the configured directory under generated names.

    Files are served publicly from ``uploads_url_prefix``.
    """

    def __init__(self, upload_dir: Optional[str] = None, url_prefix: Optional[str] = None):
        settings = get_settings()
        self.upload_dir = Path(upload_dir or settings.upload_dir)
        self.url_prefix = (url_prefix or settings.uploads_url_prefix).rstrip("/")

    async def save(
        self, content: bytes, original_name: Optional[str], mime_type: Optional[str] = None
    ) -> StoredFile:
        original_name, extension = clean_filename(original_name)
        filename = f"{uuid.uuid4().hex}{extension}"

        await run_in_threadpool(self._write, filename, content)
        logger.debug(f"Stored attachment {filename} ({len(content)} bytes)")

        return StoredFile(
            filename=filename,
            original_name=original_name,
            mime_type=mime_type
            or mimetypes.guess_type(original_name)[0]
            or "application/octet-stream",
            size=len(content),
            path=f"{self.url_prefix}/{filename}",
        )

    async def delete(self, filename: str) -> bool:
        """Remove a stored file; a missing file is not an error."""
        target = self.upload_dir / os.path.basename(filename)
        try:
            await run_in_threadpool(target.unlink)
            return True
        except FileNotFoundError:
            logger.warning(f"Attachment file already missing: {target}")
            return False

    def _write(self, filename: str, content: bytes) -> None:
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        (self.upload_dir / filename).write_bytes(content)
