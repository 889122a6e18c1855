"""
Campus Library Backend — File Storage Service
===============================================

What:  Handles upload validation, storage, and cleanup for book covers,
       event photos, notification images, study-note PDFs and rare-book scans.
Why:   Centralizes all file system operations with security checks.
How:   Validates extension and size per upload kind, stores in
       date-organized directories under generated filenames, and returns
       the public path that gets written into the entity record.
Who:   Called by route handlers before the payload reaches a service.

Security Model:
    1. Extension check per kind: images and PDFs are separate allow-lists
    2. Size check: rejects empty uploads and anything above MAX_FILE_SIZE
    3. UUID filename: no user input reaches the file system path
    4. Serving route resolves paths inside STORAGE_ROOT only

Path mapping:
    absolute:  STORAGE_ROOT/2024/01/15/<uuid>.pdf
    public:    /server/uploads/2024/01/15/<uuid>.pdf   (stored in the DB)
"""

import logging
import os
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Tuple, Union

import aiofiles
from starlette.datastructures import UploadFile

from campus_library.config import settings
from campus_library.exceptions import FileStorageError, ValidationError

logger = logging.getLogger(__name__)

IMAGE = "image"
DOCUMENT = "document"

ALLOWED_EXTENSIONS = {
    IMAGE: {".png", ".jpg", ".jpeg", ".gif", ".webp"},
    DOCUMENT: {".pdf"},
}


class FileService:
    """
    Manages file upload, validation, and storage lifecycle.

    Directory Structure:
        uploads/
        └── 2024/
            └── 01/
                └── 15/
                    ├── a1b2c3d4-5678.jpg
                    └── e5f6g7h8-9012.pdf
    """

    def __init__(self, storage_root: Optional[str] = None, url_prefix: Optional[str] = None):
        """
        Args:
            storage_root: Override the default storage path (used in tests).
            url_prefix: Override the public URL prefix.
        """
        self.storage_root = Path(storage_root or settings.storage_root).resolve()
        self.url_prefix = url_prefix or settings.upload_url_prefix
        self.storage_root.mkdir(parents=True, exist_ok=True)
        logger.info("FileService initialized with storage_root=%s", self.storage_root)

    def validate_extension(self, filename: str, kind: str) -> str:
        """
        Returns the normalized extension (lowercase with dot).

        Raises:
            ValidationError if the extension is not allowed for this kind.
        """
        allowed = ALLOWED_EXTENSIONS[kind]
        ext = Path(filename).suffix.lower()
        if ext not in allowed:
            raise ValidationError(
                message=(
                    f"File type '{ext or filename}' is not supported. "
                    f"Allowed types: {', '.join(sorted(allowed))}"
                ),
                field="file",
                context={"extension": ext, "allowed": sorted(allowed)},
            )
        return ext

    def validate_size(self, content_length: Optional[int], actual_size: int) -> None:
        """
        Validate file size against the configured maximum.

        Checks Content-Length first (rejects before trusting the body), then
        the actual byte count, since some clients send mismatched headers.
        """
        max_mb = settings.max_file_size / (1024 * 1024)

        if actual_size == 0:
            raise ValidationError(message="Uploaded file is empty.", field="file")

        if content_length and content_length > settings.max_file_size:
            raise ValidationError(
                message=f"File is too large. Maximum size is {max_mb:.0f}MB.",
                field="file",
                context={"max_size_mb": max_mb, "reported_size": content_length},
            )

        if actual_size > settings.max_file_size:
            raise ValidationError(
                message=(
                    f"File is too large ({actual_size / (1024 * 1024):.1f}MB). "
                    f"Maximum size is {max_mb:.0f}MB."
                ),
                field="file",
                context={"max_size_mb": max_mb, "actual_size": actual_size},
            )

    def _generate_storage_path(self, extension: str) -> Tuple[Path, str]:
        """Returns (absolute_path, public_path) for a new YYYY/MM/DD/<uuid><ext> file."""
        now = datetime.now(timezone.utc)
        relative_path = f"{now.strftime('%Y/%m/%d')}/{uuid.uuid4()}{extension}"
        return self.storage_root / relative_path, f"{self.url_prefix}/{relative_path}"

    def resolve_public_path(self, relative_path: str) -> Path:
        """
        Map a path below the upload prefix back to a file inside STORAGE_ROOT.

        Raises:
            ValidationError if the path escapes the storage root (../ tricks).
        """
        full_path = (self.storage_root / relative_path).resolve()
        if full_path != self.storage_root and self.storage_root not in full_path.parents:
            raise ValidationError(message="Invalid file path")
        return full_path

    async def store_file(self, content: bytes, extension: str) -> Tuple[str, str]:
        """
        Write validated content to disk.

        Returns: (absolute_path, public_path).
        Raises:  FileStorageError if directory creation or the write fails.
        """
        absolute_path, public_path = self._generate_storage_path(extension)

        try:
            absolute_path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(absolute_path, "wb") as f:
                await f.write(content)

            logger.info("File stored: %s (%d bytes)", public_path, len(content))
            return str(absolute_path), public_path

        except OSError as e:
            logger.error("Failed to store file at %s: %s", absolute_path, str(e))
            raise FileStorageError(
                message="Failed to save uploaded file. Please try again.",
                context={"path": str(absolute_path), "os_error": str(e)},
            )

    async def cleanup_file(self, file_path: str) -> None:
        """
        Remove a stored file after the request that wrote it failed.

        Best effort: a missing file is fine and other errors are only logged.
        """
        try:
            path = Path(file_path)
            if path.exists():
                os.remove(path)
                logger.info("Cleaned up file: %s", path.name)
            else:
                logger.debug("Cleanup: file already gone: %s", path.name)
        except OSError as e:
            logger.warning("Failed to clean up file %s: %s", file_path, str(e))

    async def validate_and_store(
        self,
        filename: str,
        content: bytes,
        kind: str,
        content_length: Optional[int] = None,
    ) -> Tuple[str, str]:
        """
        Complete validation and storage pipeline.

        Validation order (cheapest first):
            1. Extension check for the upload kind
            2. Size check
            3. Write to disk

        Returns: (absolute_path, public_path_for_db).
        """
        ext = self.validate_extension(filename, kind)
        self.validate_size(content_length, len(content))
        return await self.store_file(content, ext)

    def batch(self) -> "UploadBatch":
        return UploadBatch(self)


class UploadBatch:
    """
    Files stored while handling one request.

    Usage in a route:
        uploads = file_service.batch()
        try:
            cover = await uploads.store(cover_file, IMAGE)
            book = await book_service.create(db, {..., "book_image": cover})
        except Exception:
            await uploads.discard()
            raise
    """

    def __init__(self, service: FileService):
        self.service = service
        self.stored: List[str] = []

    async def store(self, upload: Optional[UploadFile], kind: str) -> Optional[str]:
        """
        Store one multipart upload; returns its public path.

        Returns None when the form field was omitted or left empty (browsers
        send a part with an empty filename when no file was chosen).
        """
        if upload is None or not upload.filename:
            return None
        try:
            content = await upload.read()
            _, public_path = await self._store_content(upload.filename, content, kind, upload.size)
            return public_path
        finally:
            await upload.close()

    async def store_field(self, value: Union[UploadFile, str, None], kind: str) -> Optional[str]:
        """
        Some form fields take either a file or an already-stored path
        (bookImage, image). A file is stored; a non-empty string is kept as is.
        """
        if isinstance(value, UploadFile):
            return await self.store(value, kind)
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None

    async def store_many(self, uploads: Optional[List[UploadFile]], kind: str) -> List[str]:
        paths = []
        for upload in uploads or []:
            path = await self.store(upload, kind)
            if path:
                paths.append(path)
        return paths

    async def _store_content(
        self, filename: str, content: bytes, kind: str, content_length: Optional[int]
    ) -> Tuple[str, str]:
        absolute_path, public_path = await self.service.validate_and_store(
            filename=filename,
            content=content,
            kind=kind,
            content_length=content_length,
        )
        self.stored.append(absolute_path)
        return absolute_path, public_path

    async def discard(self) -> None:
        for path in self.stored:
            await self.service.cleanup_file(path)
        self.stored.clear()


# Storage root doesn't change; no per-request state needed
file_service = FileService()
