"""
Campus Library Backend — File Service Unit Tests
==================================================

What:  Tests for FileService validation, storage and cleanup.
How:   A FileService rooted in a temporary directory; no HTTP involved.

Test Strategy:
    ✅ Allowed extensions per upload kind (images vs PDFs), case-insensitive
    ✅ Rejected extensions, empty files and oversized files
    ✅ Date-organized storage path and public URL mapping
    ✅ Path traversal guard on the serving side
    ✅ UploadBatch stores, accepts path strings, and discards on failure
"""

import io
from pathlib import Path
from unittest.mock import patch

import pytest
from starlette.datastructures import UploadFile

from campus_library.exceptions import ValidationError
from campus_library.services.file_service import DOCUMENT, IMAGE, FileService


class TestFileValidation:
    """Extension and size checks."""

    @pytest.fixture(autouse=True)
    def _service(self, temp_storage):
        self.service = FileService(storage_root=temp_storage)

    def test_image_extensions_accepted(self):
        for name in ("cover.png", "cover.jpg", "cover.jpeg", "cover.gif", "cover.webp"):
            assert self.service.validate_extension(name, IMAGE) == Path(name).suffix

    def test_extension_check_is_case_insensitive(self):
        assert self.service.validate_extension("COVER.PNG", IMAGE) == ".png"
        assert self.service.validate_extension("Notes.Pdf", DOCUMENT) == ".pdf"

    def test_pdf_rejected_as_image(self):
        with pytest.raises(ValidationError, match="not supported"):
            self.service.validate_extension("scan.pdf", IMAGE)

    def test_image_rejected_as_document(self):
        with pytest.raises(ValidationError, match="not supported"):
            self.service.validate_extension("photo.jpg", DOCUMENT)

    def test_missing_extension_rejected(self):
        with pytest.raises(ValidationError):
            self.service.validate_extension("README", IMAGE)

    def test_empty_file_rejected(self):
        with pytest.raises(ValidationError, match="empty"):
            self.service.validate_size(None, 0)

    def test_oversized_file_rejected(self):
        with patch("campus_library.services.file_service.settings") as mock_settings:
            mock_settings.max_file_size = 1024
            with pytest.raises(ValidationError, match="too large"):
                self.service.validate_size(None, 2048)

    def test_reported_content_length_checked_first(self):
        with patch("campus_library.services.file_service.settings") as mock_settings:
            mock_settings.max_file_size = 1024
            with pytest.raises(ValidationError, match="too large"):
                self.service.validate_size(4096, 10)

    def test_size_within_limit_passes(self):
        self.service.validate_size(100, 100)


class TestFileStorage:
    """Writing, mapping and removing stored files."""

    @pytest.fixture(autouse=True)
    def _service(self, temp_storage):
        self.root = Path(temp_storage).resolve()
        self.service = FileService(storage_root=temp_storage, url_prefix="/server/uploads")

    @pytest.mark.asyncio
    async def test_store_writes_file_and_returns_public_path(self):
        absolute, public = await self.service.validate_and_store("Cover.PNG", b"png-bytes", IMAGE)

        assert Path(absolute).read_bytes() == b"png-bytes"
        assert Path(absolute).suffix == ".png"
        assert public.startswith("/server/uploads/")
        relative = public[len("/server/uploads/"):]
        assert self.service.resolve_public_path(relative) == Path(absolute).resolve()

    @pytest.mark.asyncio
    async def test_stored_name_never_uses_client_filename(self):
        absolute, _ = await self.service.validate_and_store("../../etc/passwd.pdf", b"%PDF", DOCUMENT)
        assert "passwd" not in absolute
        assert self.root in Path(absolute).resolve().parents

    def test_traversal_outside_root_rejected(self):
        with pytest.raises(ValidationError, match="Invalid file path"):
            self.service.resolve_public_path("../../etc/passwd")

    @pytest.mark.asyncio
    async def test_cleanup_removes_file_and_tolerates_missing(self):
        absolute, _ = await self.service.validate_and_store("a.pdf", b"%PDF", DOCUMENT)
        await self.service.cleanup_file(absolute)
        assert not Path(absolute).exists()
        # Second call is a no-op
        await self.service.cleanup_file(absolute)


class TestUploadBatch:

    @pytest.fixture(autouse=True)
    def _service(self, temp_storage):
        self.service = FileService(storage_root=temp_storage, url_prefix="/server/uploads")

    @staticmethod
    def _upload(name, content):
        return UploadFile(file=io.BytesIO(content), filename=name, size=len(content))

    @pytest.mark.asyncio
    async def test_missing_or_unnamed_upload_returns_none(self):
        batch = self.service.batch()
        assert await batch.store(None, IMAGE) is None
        assert await batch.store(self._upload("", b"x"), IMAGE) is None
        assert batch.stored == []

    @pytest.mark.asyncio
    async def test_store_field_accepts_file_or_path(self):
        batch = self.service.batch()
        stored = await batch.store_field(self._upload("cover.jpg", b"jpeg"), IMAGE)
        assert stored.startswith("/server/uploads/")
        assert await batch.store_field(" /server/uploads/old.png ", IMAGE) == "/server/uploads/old.png"
        assert await batch.store_field("", IMAGE) is None
        assert len(batch.stored) == 1

    @pytest.mark.asyncio
    async def test_discard_removes_everything_stored(self):
        batch = self.service.batch()
        paths = await batch.store_many(
            [self._upload("a.png", b"a"), self._upload("b.png", b"b")], IMAGE
        )
        assert len(paths) == 2
        stored = list(batch.stored)
        await batch.discard()
        assert all(not Path(p).exists() for p in stored)
        assert batch.stored == []

    @pytest.mark.asyncio
    async def test_invalid_upload_raises_without_storing(self):
        batch = self.service.batch()
        with pytest.raises(ValidationError):
            await batch.store(self._upload("virus.exe", b"MZ"), IMAGE)
        assert batch.stored == []
